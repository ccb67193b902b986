"""Template Rendering — Jinja2 environment, component helpers and page renderers.

Invariants:
    - Autoescape is on for .html and .xml templates
    - Component helpers return markupsafe.Markup, safe to embed in other markup
    - JSON-LD reaches the page only through serialize_json_ld
"""

from datetime import date
from pathlib import Path

import jinja2
from markupsafe import Markup

from portal.pages.registry import PageDefinition
from portal.seo.jsonld import serialize_json_ld
from portal.seo.metadata import generate_metadata
from portal.seo.site_config import SiteConfig

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _jsonld_filter(schema: dict) -> Markup:
    return Markup(serialize_json_ld(schema))


def create_environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=jinja2.select_autoescape(["html", "xml"]),
    )
    env.filters["jsonld"] = _jsonld_filter
    return env


environment = create_environment()


def _macro(name: str):
    return getattr(environment.get_template("components.html").module, name)


def empty_state(
    title: str,
    description: str | None = None,
    action_label: str | None = None,
    action_href: str | None = None,
) -> Markup:
    return Markup(_macro("empty_state")(title, description, action_label, action_href))


def section_header(
    title: str, subtitle: str | None = None, description: str | None = None,
) -> Markup:
    return Markup(_macro("section_header")(title, subtitle, description))


def skip_to_content(target: str = "main-content") -> Markup:
    return Markup(_macro("skip_to_content")(target))


def lazy_youtube(video_id: str, title: str, loaded: bool = False) -> Markup:
    """Thumbnail play button until loaded, then the embedded player."""
    return Markup(_macro("lazy_youtube")(video_id, title, loaded))


def structured_data(schemas: list[dict]) -> Markup:
    return Markup(_macro("structured_data")(schemas))


def render_page(page: PageDefinition, site: SiteConfig) -> str:
    return environment.get_template(page.template).render(
        page=page,
        site=site,
        meta=generate_metadata(page.metadata, site),
        schemas=page.schemas(site),
    )


def render_sitemap(
    pages: tuple[PageDefinition, ...], site: SiteConfig, lastmod: date | None = None,
) -> str:
    return environment.get_template("sitemap.xml").render(
        pages=pages,
        site=site,
        lastmod=(lastmod or date.today()).isoformat(),
    )
