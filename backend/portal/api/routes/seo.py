"""SEO Routes — metadata and JSON-LD for a registered page, as JSON."""

from fastapi import APIRouter, Depends, Query

from portal.api.dependencies import get_site
from portal.api.guard import GuardedRoute
from portal.core.errors import ResourceNotFoundError
from portal.pages.registry import get_page
from portal.seo.metadata import generate_metadata
from portal.seo.site_config import SiteConfig

router = APIRouter(prefix="/api/seo", tags=["seo"], route_class=GuardedRoute)


@router.get("")
async def page_seo(
    path: str = Query(..., min_length=1),
    site: SiteConfig = Depends(get_site),
):
    page = get_page(path)
    if page is None:
        raise ResourceNotFoundError("Page")
    return {
        "success": True,
        "metadata": generate_metadata(page.metadata, site).to_dict(),
        "schemas": page.schemas(site),
    }
