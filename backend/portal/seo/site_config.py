"""Site Configuration — the organization facts every metadata and schema builder reads.

Invariants:
    - url never ends with "/"; absolute(path) is url + path for relative paths
    - SiteConfig is immutable; one instance per settings instance
"""

from dataclasses import dataclass
from functools import lru_cache

from portal.config import get_settings


@dataclass(frozen=True)
class PostalAddress:
    street_address: str
    locality: str
    region: str
    country: str


@dataclass(frozen=True)
class ServiceTime:
    day: str
    name: str
    time: str


@dataclass(frozen=True)
class SiteConfig:
    """Brand, contact and location data for the ministry."""
    url: str
    name: str = "The Prevailing Word Believers Ministry Inc."
    short_name: str = "TPWBM"
    description: str = (
        "A place where value is added to life. Join us in worship and "
        "fellowship as we grow together in faith."
    )
    og_image: str = "/images/og-image.jpg"
    facebook_url: str = "https://www.facebook.com/profile.php?id=100091757649094"
    instagram_url: str = "https://instagram.com/tpwbm"
    youtube_url: str = "https://www.youtube.com/@ThePrevailingWordBelieversMinistry"
    twitter_handle: str = "@tpwbm"
    email: str = "prevailingword95@gmail.com"
    phone: str = "+234"
    founding_date: str = "1994"
    founder: str = "Pastor Tunde Olufemi"
    address: PostalAddress = PostalAddress(
        street_address="1 TPWBM Avenue",
        locality="Lagos",
        region="Lagos",
        country="NG",
    )
    services: tuple[ServiceTime, ...] = (
        ServiceTime("Sunday", "Sunday Bible School", "8:30 AM - 9:30 AM"),
        ServiceTime("Sunday", "Celebration of Jesus", "9:30 AM - 12:00 PM"),
        ServiceTime("Tuesday", "Midweek Bible Study", "5:00 PM - 6:30 PM"),
    )
    google_site_verification: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "url", self.url.rstrip("/"))

    @property
    def same_as(self) -> tuple[str, ...]:
        return (self.facebook_url, self.instagram_url, self.youtube_url)

    @property
    def logo_url(self) -> str:
        return f"{self.url}/logo.png"

    @property
    def full_address(self) -> str:
        return f"{self.address.street_address}, {self.address.locality}, Nigeria"

    def absolute(self, path: str) -> str:
        """Absolute URL for a site path; absolute URLs pass through."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.url}{path}"


@lru_cache
def get_site_config() -> SiteConfig:
    settings = get_settings()
    return SiteConfig(
        url=settings.site_url,
        google_site_verification=settings.google_site_verification,
    )
