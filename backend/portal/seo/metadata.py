"""Page Metadata — document head values (title, canonical, Open Graph, Twitter).

Invariants:
    - title is "{page title} | {site name}", or the site name alone
    - canonical is canonical_url, else site url + path, else the site url
    - keywords always start with DEFAULT_KEYWORDS, page keywords follow in order
    - Relative og_image paths are made absolute against the site url
    - generate_metadata never raises; missing options fall back to site defaults
"""

from dataclasses import asdict, dataclass
from enum import Enum

from portal.seo.site_config import SiteConfig, get_site_config


DEFAULT_KEYWORDS = (
    "TPWBM",
    "The Prevailing Word Believers Ministry",
    "church",
    "Lagos church",
    "Abeokuta church",
    "Christian ministry Nigeria",
    "worship",
    "Bible study",
    "prayer",
    "sermons",
    "spiritual growth",
    "faith community",
    "Christian fellowship",
    "online giving",
    "tithing",
    "church events",
)

ROBOTS_INDEX = "index, follow, max-image-preview:large, max-snippet:-1, max-video-preview:-1"
ROBOTS_NOINDEX = "noindex, nofollow"
OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630


class PageType(str, Enum):
    """Open Graph object type."""
    WEBSITE = "website"
    ARTICLE = "article"
    PROFILE = "profile"


@dataclass(frozen=True)
class PageMetadataConfig:
    """Declarative metadata options for one page."""
    title: str | None = None
    description: str | None = None
    path: str | None = None
    keywords: tuple[str, ...] = ()
    type: PageType = PageType.WEBSITE
    og_image: str | None = None
    canonical_url: str | None = None
    published_time: str | None = None
    modified_time: str | None = None
    author: str | None = None
    noindex: bool = False


@dataclass(frozen=True)
class PageMetadata:
    title: str
    description: str
    keywords: list[str]
    authors: list[str]
    creator: str
    publisher: str
    robots: str
    canonical: str
    open_graph: dict
    twitter: dict
    verification: dict

    @property
    def image_url(self) -> str:
        return self.open_graph["images"][0]["url"]

    def to_dict(self) -> dict:
        return asdict(self)


def generate_metadata(
    config: PageMetadataConfig, site: SiteConfig | None = None,
) -> PageMetadata:
    site = site or get_site_config()
    title = f"{config.title} | {site.name}" if config.title else site.name
    description = config.description or site.description
    canonical = config.canonical_url or (
        site.absolute(config.path) if config.path else site.url
    )
    image_url = site.absolute(config.og_image or site.og_image)

    open_graph = {
        "type": config.type.value,
        "title": title,
        "description": description,
        "url": canonical,
        "site_name": site.name,
        "locale": "en_NG",
        "images": [{
            "url": image_url,
            "width": OG_IMAGE_WIDTH,
            "height": OG_IMAGE_HEIGHT,
            "alt": config.title or site.name,
        }],
    }
    if config.published_time:
        open_graph["published_time"] = config.published_time
    if config.modified_time:
        open_graph["modified_time"] = config.modified_time

    return PageMetadata(
        title=title,
        description=description,
        keywords=[*DEFAULT_KEYWORDS, *config.keywords],
        authors=[config.author or site.name],
        creator=site.name,
        publisher=site.name,
        robots=ROBOTS_NOINDEX if config.noindex else ROBOTS_INDEX,
        canonical=canonical,
        open_graph=open_graph,
        twitter={
            "card": "summary_large_image",
            "title": title,
            "description": description,
            "images": [image_url],
            "creator": site.twitter_handle,
            "site": site.twitter_handle,
        },
        verification=(
            {"google": site.google_site_verification}
            if site.google_site_verification else {}
        ),
    )
