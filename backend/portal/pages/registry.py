"""Page Registry — declarative definitions for every public route.

Invariants:
    - Each path appears exactly once and starts with "/"
    - metadata.path equals the page path, so canonical = site url + path
    - schemas(site) returns a fresh list of schema.org records per call
"""

from dataclasses import dataclass
from typing import Callable

from portal.seo.metadata import PageMetadataConfig, PageType
from portal.seo.schemas import (
    generate_about_page_schema,
    generate_blog_schema,
    generate_collection_page_schema,
    generate_contact_page_schema,
    generate_donation_schema,
    generate_faq_schema,
    generate_ministry_schema,
    generate_organization_schema,
    generate_person_schema,
    generate_service_schema,
    generate_web_page_schema,
    generate_website_schema,
)
from portal.seo.site_config import SiteConfig

SchemaFactory = Callable[[SiteConfig], list[dict]]


def _no_schemas(site: SiteConfig) -> list[dict]:
    return []


@dataclass(frozen=True)
class PageDefinition:
    path: str
    metadata: PageMetadataConfig
    heading: str
    intro: str
    schemas: SchemaFactory = _no_schemas
    change_frequency: str = "monthly"
    priority: float = 0.8
    template: str = "page.html"
    sections: tuple[tuple[str, str], ...] = ()


FAQS = (
    (
        "When are your Sunday services?",
        "Sunday Bible School runs from 8:30 AM to 9:30 AM, followed by the "
        "Celebration of Jesus service from 9:30 AM to 12:00 PM.",
    ),
    (
        "Do you hold a midweek service?",
        "Yes. Midweek Bible Study holds on Tuesdays from 5:00 PM to 6:30 PM.",
    ),
    (
        "Can I give online?",
        "Yes. Tithes, offerings and donations can be given securely on the "
        "giving page.",
    ),
    (
        "Can I watch services online?",
        "Services are streamed live on our YouTube channel and the live "
        "streaming page.",
    ),
    (
        "How do I become a member?",
        "Visit any of our services or contact us, and a member of the "
        "pastoral team will guide you through membership.",
    ),
)


ABOUT_DESCRIPTION = (
    "Learn about The Prevailing Word Believers Ministry Inc. - our history "
    "since 1994, mission to add value to lives, core values, leadership, and "
    "vision for the future. Discover how we serve Abeokuta and beyond."
)
CONTACT_DESCRIPTION = (
    "Contact The Prevailing Word Believers Ministry Inc. Visit us, call or "
    "email us. We'd love to hear from you and answer your questions."
)
EVENTS_DESCRIPTION = (
    "Join us for upcoming church events, programs, and special services. Find "
    "worship services, youth programs, conferences, and community outreach "
    "events. Register online and be part of our growing faith community."
)
SERMONS_DESCRIPTION = (
    "Watch and listen to inspiring sermons and biblical teachings from Pastor "
    "Tunde Olufemi. Discover messages on faith, hope, love, and Christian "
    "living. Free sermon archive and audio messages."
)
BLOG_DESCRIPTION = (
    "Read inspiring Christian articles, powerful testimonies, devotionals, and "
    "ministry updates. Grow in faith through biblical insights and real-life "
    "stories of God's goodness."
)


def _ministry(
    slug: str,
    title: str,
    description: str,
    keywords: tuple[str, ...],
    schema_name: str,
    schema_description: str,
    heading: str,
) -> PageDefinition:
    return PageDefinition(
        path=f"/ministries/{slug}",
        metadata=PageMetadataConfig(
            title=title,
            description=description,
            path=f"/ministries/{slug}",
            keywords=keywords,
        ),
        heading=heading,
        intro=description,
        schemas=lambda site: [
            generate_ministry_schema(schema_name, schema_description, site=site),
        ],
        priority=0.7,
    )


PAGES: tuple[PageDefinition, ...] = (
    PageDefinition(
        path="/",
        metadata=PageMetadataConfig(
            description=(
                "A place where value is added to life. Join us in worship and "
                "fellowship as we grow together in faith. Christian ministry "
                "serving Abeokuta, Lagos and beyond."
            ),
            path="/",
        ),
        heading="Welcome to The Prevailing Word Believers Ministry",
        intro="A place where value is added to life.",
        schemas=lambda site: [
            generate_organization_schema(site),
            generate_website_schema(site),
        ],
        change_frequency="daily",
        priority=1.0,
    ),
    PageDefinition(
        path="/about",
        metadata=PageMetadataConfig(
            title="About Us - Our Story, Mission & Values",
            description=ABOUT_DESCRIPTION,
            path="/about",
            keywords=(
                "about our church", "church history", "church mission",
                "church values", "Pastor Tunde Olufemi", "church leadership",
                "church vision", "Christian ministry Abeokuta", "founded 1994",
                "church story", "our beliefs", "what we believe",
            ),
        ),
        heading="About Us",
        intro="Our story, mission and values since 1994.",
        schemas=lambda site: [
            generate_organization_schema(site),
            generate_about_page_schema(ABOUT_DESCRIPTION, site=site),
        ],
        priority=0.9,
    ),
    PageDefinition(
        path="/contact",
        metadata=PageMetadataConfig(
            title="Contact Us - Get in Touch",
            description=CONTACT_DESCRIPTION,
            path="/contact",
            keywords=(
                "contact church", "church location Abeokuta", "church address",
                "church phone number", "church email", "visit our church",
                "get directions", "church contact information", "reach us",
            ),
        ),
        heading="Contact Us",
        intro="We'd love to hear from you.",
        schemas=lambda site: [
            generate_web_page_schema("Contact Us", CONTACT_DESCRIPTION, "/contact", site=site),
            generate_contact_page_schema(CONTACT_DESCRIPTION, site=site),
        ],
    ),
    PageDefinition(
        path="/events",
        metadata=PageMetadataConfig(
            title="Church Events & Programs",
            description=EVENTS_DESCRIPTION,
            path="/events",
            keywords=(
                "church events", "church programs", "upcoming events",
                "church calendar", "worship events", "church conference",
                "youth events", "church activities", "event registration",
                "church gatherings", "ministry events", "special services",
                "church schedule",
            ),
        ),
        heading="Church Events & Programs",
        intro="Upcoming events, programs and special services.",
        schemas=lambda site: [
            generate_web_page_schema(
                "Church Events & Programs", EVENTS_DESCRIPTION, "/events", site=site,
            ),
            generate_collection_page_schema(
                "Church Events & Programs",
                "Browse our upcoming church events, programs, and special services",
                "/events",
                site=site,
            ),
        ],
        change_frequency="daily",
        priority=0.9,
    ),
    PageDefinition(
        path="/giving",
        metadata=PageMetadataConfig(
            title="Give & Support Our Ministry",
            description=(
                "Support The Prevailing Word Believers Ministry through your "
                "tithes, offerings, and donations. Give securely online or via "
                "bank transfer to help us continue God's work."
            ),
            path="/giving",
            og_image="/images/giving-og.jpg",
            keywords=(
                "church giving", "online tithing", "church donations",
                "support ministry", "church offering online",
                "tithe online Nigeria", "church donation Nigeria",
                "give to church", "ministry support",
                "church financial support", "online church giving",
                "digital tithe",
            ),
        ),
        heading="Give & Support Our Ministry",
        intro="Give your tithes, offerings and donations securely.",
        schemas=lambda site: [generate_donation_schema(site)],
        priority=0.9,
    ),
    PageDefinition(
        path="/sermons",
        metadata=PageMetadataConfig(
            title="Sermons & Messages",
            description=SERMONS_DESCRIPTION,
            path="/sermons",
            keywords=(
                "Christian sermons online", "Bible teaching",
                "Pastor Tunde Olufemi sermons", "free sermon downloads",
                "audio sermons", "video sermons", "Sunday messages",
                "Christian preaching", "biblical teaching", "sermon series",
                "faith messages", "sermon archive", "worship messages",
            ),
        ),
        heading="Sermons & Messages",
        intro="Inspiring sermons and biblical teachings.",
        schemas=lambda site: [
            generate_web_page_schema(
                "Sermons & Messages", SERMONS_DESCRIPTION, "/sermons", site=site,
            ),
            generate_collection_page_schema(
                "Sermon Archive",
                "Browse our collection of inspiring sermons and biblical teachings",
                "/sermons",
                site=site,
            ),
        ],
        change_frequency="weekly",
        priority=0.9,
    ),
    PageDefinition(
        path="/services",
        metadata=PageMetadataConfig(
            title="Service Times & Weekly Schedule",
            description=(
                "Join us for worship services. Sunday Bible School at 8:30 AM, "
                "Celebration of Jesus at 9:30 AM, and Midweek Bible Study on "
                "Tuesdays at 5:00 PM. All are welcome!"
            ),
            path="/services",
            keywords=(
                "church service times", "worship schedule", "Sunday service",
                "midweek service", "church hours", "service schedule",
                "when does church start", "worship times", "Sunday worship",
                "weekly services",
            ),
        ),
        heading="Service Times",
        intro="All are welcome.",
        schemas=lambda site: [generate_service_schema(site)],
        change_frequency="weekly",
        priority=0.9,
    ),
    PageDefinition(
        path="/pastor",
        metadata=PageMetadataConfig(
            title="Our Pastor - Pastor Tunde Olufemi",
            description=(
                "Meet Pastor Tunde Olufemi, founder and presiding pastor of The "
                "Prevailing Word Believers Ministry Inc. Learn about his vision, "
                "ministry journey, and dedication to adding value to lives."
            ),
            path="/pastor",
            type=PageType.PROFILE,
            keywords=(
                "Pastor Tunde Olufemi", "church pastor", "presiding pastor",
                "senior pastor", "ministry founder", "Christian leader",
                "pastor biography", "spiritual leader",
            ),
        ),
        heading="Pastor Tunde Olufemi",
        intro="Founder and Presiding Pastor.",
        schemas=lambda site: [
            generate_person_schema(
                "Pastor Tunde Olufemi",
                "Presiding Pastor & Founder",
                "Founder and Presiding Pastor of The Prevailing Word Believers "
                "Ministry Inc., dedicated to adding value to lives through the "
                "Word of God.",
                site=site,
            ),
        ],
    ),
    PageDefinition(
        path="/leadership",
        metadata=PageMetadataConfig(
            title="Church Leadership Team",
            description=(
                "Meet the dedicated leadership team of The Prevailing Word "
                "Believers Ministry Inc. Learn about our pastors, ministers, and "
                "leaders who shepherd and guide our congregation."
            ),
            path="/leadership",
            keywords=(
                "church leadership", "pastoral team", "church ministers",
                "ministry leaders", "church staff", "leadership team",
                "church pastors", "ministry team",
            ),
        ),
        heading="Our Leadership Team",
        intro="The pastors, ministers and leaders who guide our congregation.",
    ),
    PageDefinition(
        path="/blog",
        metadata=PageMetadataConfig(
            title="Blog - Christian Articles, Testimonies & Ministry Updates",
            description=BLOG_DESCRIPTION,
            path="/blog",
            keywords=(
                "Christian blog", "church blog", "Christian articles",
                "testimonies", "devotionals", "ministry updates",
                "faith stories", "Christian living", "spiritual growth blog",
                "Bible devotions", "Christian lifestyle",
                "inspirational articles",
            ),
        ),
        heading="Blog",
        intro="Articles, testimonies and ministry updates.",
        schemas=lambda site: [
            generate_web_page_schema(
                "Blog - Articles & Testimonies", BLOG_DESCRIPTION, "/blog", site=site,
            ),
            generate_blog_schema(
                "TPWBM Blog",
                "Christian articles, testimonies, and ministry updates",
                "/blog",
                site=site,
            ),
        ],
        change_frequency="daily",
        priority=0.9,
    ),
    PageDefinition(
        path="/faq",
        metadata=PageMetadataConfig(
            title="Frequently Asked Questions (FAQ)",
            description=(
                "Find answers to common questions about The Prevailing Word "
                "Believers Ministry Inc. Learn about our services, beliefs, how "
                "to join, and more."
            ),
            path="/faq",
            keywords=(
                "church FAQ", "frequently asked questions", "church questions",
                "about our church", "how to join church", "church beliefs",
                "church information",
            ),
        ),
        heading="Frequently Asked Questions",
        intro="Answers to the most common questions about our church family.",
        schemas=lambda site: [generate_faq_schema(list(FAQS))],
        sections=FAQS,
        priority=0.6,
    ),
    PageDefinition(
        path="/live-streaming",
        metadata=PageMetadataConfig(
            title="Live Streaming - Watch Church Services Online",
            description=(
                "Watch our church services live online. Join us virtually for "
                "Sunday worship, midweek services, and special events. Stream "
                "live and connect with our faith community from anywhere."
            ),
            path="/live-streaming",
            keywords=(
                "church live stream", "watch church online",
                "online worship service", "live church service",
                "virtual church", "streaming worship", "watch service live",
                "online Sunday service", "live broadcast", "church online",
            ),
        ),
        heading="Live Streaming",
        intro="Join our services from anywhere.",
        change_frequency="weekly",
    ),
    PageDefinition(
        path="/ministries",
        metadata=PageMetadataConfig(
            title="Church Ministries",
            description=(
                "Discover our church ministries serving different age groups "
                "and purposes. Join our children, youth, men, women, music, "
                "ushers, and special ministries."
            ),
            path="/ministries",
            keywords=(
                "church ministries", "ministry programs", "church departments",
                "get involved", "serve in ministry", "church groups",
                "ministry opportunities",
            ),
        ),
        heading="Our Ministries",
        intro="Find a place to belong and serve.",
    ),
    _ministry(
        "youth",
        "Youth Ministry - Empowering Young People",
        "Join our vibrant youth ministry designed for teenagers and young "
        "adults. Experience dynamic worship, biblical teaching, fellowship, "
        "and activities that strengthen faith.",
        (
            "youth ministry", "youth church", "teen ministry",
            "young adults ministry", "youth group", "youth activities",
            "youth fellowship", "Christian youth",
        ),
        "Youth Ministry - TPWBM",
        "A vibrant ministry empowering teenagers and young adults through "
        "biblical teaching, fellowship, and life-changing activities.",
        heading="Youth Ministry",
    ),
    _ministry(
        "men",
        "Men's Ministry - Building Godly Men",
        "A brotherhood of men committed to growing spiritually, supporting "
        "each other, and becoming godly leaders in their families, church, "
        "and communities.",
        (
            "men ministry", "men's fellowship", "Christian men", "men's group",
            "godly leadership", "men discipleship", "brotherhood",
        ),
        "Men's Ministry - TPWBM",
        "Building godly men who lead with integrity and serve their families, "
        "church, and communities.",
        heading="Men's Ministry",
    ),
    _ministry(
        "women",
        "Women's Ministry - House of Grace",
        "Join House of Grace women's ministry for fellowship, discipleship, "
        "prayer, and empowerment. Building godly women who impact their "
        "families and communities.",
        (
            "women ministry", "women's fellowship", "House of Grace",
            "Christian women", "women's group", "ladies ministry",
            "women empowerment", "women discipleship",
        ),
        "Women's Ministry - House of Grace",
        "Empowering women through fellowship, discipleship, and prayer to "
        "impact their families and communities.",
        heading="Women's Ministry",
    ),
    _ministry(
        "children",
        "Children's Ministry - Nurturing Young Hearts",
        "A fun and safe environment where children learn about God's love "
        "through age-appropriate Bible lessons, worship, crafts, and "
        "activities.",
        (
            "children ministry", "kids church", "Sunday school",
            "children's program", "kids ministry", "Bible for kids",
            "children's worship", "kids activities",
        ),
        "Children's Ministry - TPWBM",
        "Nurturing young hearts with God's love through engaging Bible "
        "lessons, worship, and fun activities.",
        heading="Children's Ministry",
    ),
)

PAGES_BY_PATH: dict[str, PageDefinition] = {page.path: page for page in PAGES}


def get_page(path: str) -> PageDefinition | None:
    """Look up a page; a trailing slash is ignored except for "/"."""
    if path != "/":
        path = path.rstrip("/")
    return PAGES_BY_PATH.get(path or "/")
