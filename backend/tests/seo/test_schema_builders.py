"""Schema.org Builders — every record is JSON-serializable with @context and @type."""

import json

import pytest

from portal.seo import schemas
from portal.seo.site_config import SiteConfig

SITE = SiteConfig(url="https://church.example.org")

BUILDERS = [
    (lambda: schemas.generate_organization_schema(SITE), "Church"),
    (lambda: schemas.generate_person_schema("Pastor A", "Pastor", "Leads", site=SITE), "Person"),
    (lambda: schemas.generate_ministry_schema("Youth", "Young people", site=SITE), "Organization"),
    (lambda: schemas.generate_web_page_schema("Contact", "Reach us", "/contact", site=SITE), "WebPage"),
    (lambda: schemas.generate_donation_schema(SITE), "DonateAction"),
    (lambda: schemas.generate_about_page_schema("About us", site=SITE), "AboutPage"),
    (lambda: schemas.generate_contact_page_schema("Contact us", site=SITE), "ContactPage"),
    (lambda: schemas.generate_collection_page_schema("Sermons", "All", "/sermons", site=SITE), "CollectionPage"),
    (lambda: schemas.generate_blog_schema("Blog", "Posts", "/blog", site=SITE), "Blog"),
    (lambda: schemas.generate_event_schema(
        "Vigil", "Night of prayer", "2026-03-06T22:00", "2026-03-07T05:00",
        "Main Auditorium", site=SITE,
    ), "Event"),
    (lambda: schemas.generate_breadcrumb_schema([("Home", "https://church.example.org")]), "BreadcrumbList"),
    (lambda: schemas.generate_faq_schema([("When?", "Sunday")]), "FAQPage"),
    (lambda: schemas.generate_service_schema(SITE), "Church"),
    (lambda: schemas.generate_website_schema(SITE), "WebSite"),
    (lambda: schemas.generate_video_sermon_schema(
        "Faith", "Message", "https://youtu.be/x", "2026-01-04", site=SITE,
    ), "VideoObject"),
]


@pytest.mark.parametrize("build,schema_type", BUILDERS)
def test_schema_is_json_with_context_and_type(build, schema_type):
    record = json.loads(json.dumps(build()))
    assert record["@context"] == "https://schema.org"
    assert record["@type"] == schema_type


def test_organization_facts():
    org = schemas.generate_organization_schema(SITE)
    assert org["name"] == SITE.name
    assert org["logo"] == "https://church.example.org/logo.png"
    assert org["sameAs"] == list(SITE.same_as)


def test_ministry_has_parent_church():
    record = schemas.generate_ministry_schema("Men", "Brotherhood", site=SITE)
    assert record["parentOrganization"] == {
        "@type": "Church", "name": SITE.name, "url": SITE.url,
    }


def test_person_image_is_optional():
    without = schemas.generate_person_schema("A", "Pastor", "d", site=SITE)
    with_image = schemas.generate_person_schema("A", "Pastor", "d", image="/p.jpg", site=SITE)
    assert "image" not in without
    assert with_image["image"] == {"@type": "ImageObject", "url": "/p.jpg"}


def test_web_page_url_is_absolute():
    record = schemas.generate_web_page_schema("Events", "d", "/events", site=SITE)
    assert record["url"] == "https://church.example.org/events"


def test_donation_targets_giving_page():
    record = schemas.generate_donation_schema(SITE)
    assert record["target"]["urlTemplate"] == "https://church.example.org/giving"


def test_breadcrumb_positions_start_at_one():
    record = schemas.generate_breadcrumb_schema([
        ("Home", "https://church.example.org"),
        ("Ministries", "https://church.example.org/ministries"),
    ])
    assert [item["position"] for item in record["itemListElement"]] == [1, 2]


def test_service_schema_lists_service_times():
    record = schemas.generate_service_schema(SITE)
    offers = record["hasOfferCatalog"]["itemListElement"]
    assert len(offers) == len(SITE.services)
    assert offers[0]["itemOffered"]["description"] == "Sunday service at 8:30 AM - 9:30 AM"


def test_video_sermon_omits_missing_duration():
    record = schemas.generate_video_sermon_schema(
        "Faith", "Message", "https://youtu.be/x", "2026-01-04", site=SITE,
    )
    assert "duration" not in record
    assert record["author"]["name"] == SITE.founder
    assert record["thumbnailUrl"] == "https://church.example.org/images/og-image.jpg"


def test_website_schema_ids():
    record = schemas.generate_website_schema(SITE)
    assert record["@id"] == "https://church.example.org/#website"
    assert record["potentialAction"]["target"].endswith("/search?q={search_term_string}")
