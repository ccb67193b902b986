"""Schema.org Builders — JSON-LD records for organization, people, pages and media.

Invariants:
    - Every record has "@context" = https://schema.org and a fixed "@type"
    - Records contain only JSON-serializable values (str, int, list, dict)
    - Optional inputs that are None are omitted, never rendered as null
    - Builders never raise on missing optional input

Design Decisions:
    - Each builder takes an optional SiteConfig; None reads the process-wide one
"""

from portal.seo.site_config import SiteConfig, get_site_config

SCHEMA_CONTEXT = "https://schema.org"


def _record(schema_type: str, **fields) -> dict:
    record = {"@context": SCHEMA_CONTEXT, "@type": schema_type}
    record.update({key: value for key, value in fields.items() if value is not None})
    return record


def _church_ref(site: SiteConfig, with_url: bool = True) -> dict:
    ref = {"@type": "Church", "name": site.name}
    if with_url:
        ref["url"] = site.url
    return ref


def _publisher(site: SiteConfig) -> dict:
    return {
        "@type": "Organization",
        "name": site.name,
        "logo": {"@type": "ImageObject", "url": site.logo_url},
    }


def _postal_address(site: SiteConfig) -> dict:
    return {
        "@type": "PostalAddress",
        "streetAddress": site.address.street_address,
        "addressLocality": site.address.locality,
        "addressRegion": site.address.region,
        "addressCountry": site.address.country,
    }


def _website_ref(site: SiteConfig) -> dict:
    return {"@type": "WebSite", "name": site.name, "url": site.url}


def generate_organization_schema(site: SiteConfig | None = None) -> dict:
    site = site or get_site_config()
    return _record(
        "Church",
        name=site.name,
        alternateName=site.short_name,
        url=site.url,
        logo=site.logo_url,
        description=site.description,
        email=site.email,
        address={
            "@type": "PostalAddress",
            "addressCountry": site.address.country,
            "addressLocality": site.address.locality,
            "streetAddress": site.full_address,
        },
        sameAs=list(site.same_as),
        contactPoint={
            "@type": "ContactPoint",
            "contactType": "customer service",
            "email": site.email,
            "availableLanguage": ["en"],
        },
    )


def generate_person_schema(
    name: str,
    job_title: str,
    description: str,
    image: str | None = None,
    site: SiteConfig | None = None,
) -> dict:
    site = site or get_site_config()
    return _record(
        "Person",
        name=name,
        jobTitle=job_title,
        description=description,
        worksFor=_church_ref(site),
        image={"@type": "ImageObject", "url": image} if image else None,
    )


def generate_ministry_schema(
    name: str, description: str, site: SiteConfig | None = None,
) -> dict:
    site = site or get_site_config()
    return _record(
        "Organization",
        name=name,
        description=description,
        parentOrganization=_church_ref(site),
        memberOf=_church_ref(site, with_url=False),
    )


def generate_web_page_schema(
    name: str, description: str, url: str, site: SiteConfig | None = None,
) -> dict:
    """WebPage record; url is a site path such as "/contact"."""
    site = site or get_site_config()
    return _record(
        "WebPage",
        name=name,
        description=description,
        url=site.absolute(url),
        isPartOf=_website_ref(site),
        about=_church_ref(site, with_url=False),
        publisher=_publisher(site),
    )


def generate_donation_schema(site: SiteConfig | None = None) -> dict:
    site = site or get_site_config()
    return _record(
        "DonateAction",
        name="Support Our Ministry",
        description=(
            "Give your tithes, offerings, and donations securely to support "
            "our ministry work."
        ),
        recipient=_church_ref(site),
        actionStatus="https://schema.org/PotentialActionStatus",
        target={
            "@type": "EntryPoint",
            "urlTemplate": f"{site.url}/giving",
            "actionPlatform": [
                "https://schema.org/DesktopWebPlatform",
                "https://schema.org/MobileWebPlatform",
            ],
        },
    )


def generate_about_page_schema(
    description: str, site: SiteConfig | None = None,
) -> dict:
    site = site or get_site_config()
    return _record(
        "AboutPage",
        name="About The Prevailing Word Believers Ministry",
        description=description,
        url=f"{site.url}/about",
        mainEntity={
            "@type": "Church",
            "name": site.name,
            "foundingDate": site.founding_date,
            "founder": {
                "@type": "Person",
                "name": site.founder,
                "jobTitle": "Presiding Pastor",
            },
            "description": site.description,
        },
    )


def generate_contact_page_schema(
    description: str, site: SiteConfig | None = None,
) -> dict:
    site = site or get_site_config()
    return _record(
        "ContactPage",
        name="Contact The Prevailing Word Believers Ministry",
        description=description,
        url=f"{site.url}/contact",
        mainEntity={
            "@type": "Church",
            "name": site.name,
            "address": _postal_address(site),
            "telephone": site.phone,
            "email": site.email,
        },
    )


def generate_collection_page_schema(
    name: str, description: str, url: str, site: SiteConfig | None = None,
) -> dict:
    site = site or get_site_config()
    return _record(
        "CollectionPage",
        name=name,
        description=description,
        url=site.absolute(url),
        isPartOf=_website_ref(site),
        publisher={"@type": "Organization", "name": site.name},
    )


def generate_blog_schema(
    name: str, description: str, url: str, site: SiteConfig | None = None,
) -> dict:
    site = site or get_site_config()
    return _record(
        "Blog",
        name=name,
        description=description,
        url=site.absolute(url),
        publisher=_publisher(site),
    )


def generate_event_schema(
    name: str,
    description: str,
    start_date: str,
    end_date: str,
    location: str,
    image: str | None = None,
    url: str | None = None,
    organizer: str | None = None,
    price: str | None = None,
    site: SiteConfig | None = None,
) -> dict:
    site = site or get_site_config()
    return _record(
        "Event",
        name=name,
        description=description,
        startDate=start_date,
        endDate=end_date,
        eventStatus="https://schema.org/EventScheduled",
        eventAttendanceMode="https://schema.org/OfflineEventAttendanceMode",
        location={
            "@type": "Place",
            "name": location,
            "address": _postal_address(site),
        },
        image=site.absolute(image or site.og_image),
        organizer={
            "@type": "Organization",
            "name": organizer or site.name,
            "url": site.url,
        },
        offers={
            "@type": "Offer",
            "price": price or "0",
            "priceCurrency": "NGN",
            "availability": "https://schema.org/InStock",
            "url": url or site.url,
        },
    )


def generate_breadcrumb_schema(items: list[tuple[str, str]]) -> dict:
    """BreadcrumbList from (name, absolute url) pairs, positions start at 1."""
    return _record(
        "BreadcrumbList",
        itemListElement=[
            {"@type": "ListItem", "position": index, "name": name, "item": url}
            for index, (name, url) in enumerate(items, start=1)
        ],
    )


def generate_faq_schema(faqs: list[tuple[str, str]]) -> dict:
    return _record(
        "FAQPage",
        mainEntity=[
            {
                "@type": "Question",
                "name": question,
                "acceptedAnswer": {"@type": "Answer", "text": answer},
            }
            for question, answer in faqs
        ],
    )


def generate_service_schema(site: SiteConfig | None = None) -> dict:
    site = site or get_site_config()
    return _record(
        "Church",
        name=site.name,
        url=site.url,
        hasOfferCatalog={
            "@type": "OfferCatalog",
            "name": "Church Services",
            "itemListElement": [
                {
                    "@type": "Offer",
                    "itemOffered": {
                        "@type": "Service",
                        "name": service.name,
                        "description": f"{service.day} service at {service.time}",
                    },
                }
                for service in site.services
            ],
        },
    )


def generate_website_schema(site: SiteConfig | None = None) -> dict:
    site = site or get_site_config()
    return _record(
        "WebSite",
        url=site.url,
        name=site.name,
        description=site.description,
        publisher={"@id": f"{site.url}/#organization"},
        potentialAction={
            "@type": "SearchAction",
            "target": f"{site.url}/search?q={{search_term_string}}",
            "query-input": "required name=search_term_string",
        },
        **{"@id": f"{site.url}/#website"},
    )


def generate_video_sermon_schema(
    title: str,
    description: str,
    video_url: str,
    upload_date: str,
    thumbnail_url: str | None = None,
    duration: str | None = None,
    speaker: str | None = None,
    site: SiteConfig | None = None,
) -> dict:
    site = site or get_site_config()
    return _record(
        "VideoObject",
        name=title,
        description=description,
        contentUrl=video_url,
        thumbnailUrl=thumbnail_url or site.absolute(site.og_image),
        duration=duration,
        uploadDate=upload_date,
        author={"@type": "Person", "name": speaker or site.founder},
        publisher=_publisher(site),
    )
