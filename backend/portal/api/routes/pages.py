"""Page Routes — server-rendered public pages and the sitemap.

Invariants:
    - One GET route per registered PageDefinition, registered at import time
    - Pages and the sitemap are excluded from the OpenAPI schema
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response

from portal.api.dependencies import get_site
from portal.api.guard import GuardedRoute
from portal.pages.components import render_page, render_sitemap
from portal.pages.registry import PAGES, PageDefinition
from portal.seo.site_config import SiteConfig

router = APIRouter(tags=["pages"], route_class=GuardedRoute)


def _page_endpoint(page: PageDefinition):
    async def endpoint(site: SiteConfig = Depends(get_site)):
        return HTMLResponse(render_page(page, site))
    endpoint.__name__ = f"page_{page.path.strip('/').replace('/', '_').replace('-', '_') or 'home'}"
    return endpoint


for _page in PAGES:
    router.add_api_route(
        _page.path,
        _page_endpoint(_page),
        methods=["GET"],
        response_class=HTMLResponse,
        include_in_schema=False,
    )


@router.get("/sitemap.xml", include_in_schema=False)
async def sitemap(site: SiteConfig = Depends(get_site)):
    return Response(render_sitemap(PAGES, site), media_type="application/xml")
