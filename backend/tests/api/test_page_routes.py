"""Page Routes — rendered HTML pages, the sitemap and the SEO JSON endpoint."""

import json
import re

import pytest

from portal.pages.registry import PAGES
from portal.seo.site_config import get_site_config


@pytest.mark.parametrize("path", [page.path for page in PAGES])
async def test_every_registered_page_renders(client, path):
    res = await client.get(path)
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    site = get_site_config()
    assert f'<link rel="canonical" href="{site.url}{path}">' in res.text


async def test_page_embeds_parseable_json_ld(client):
    res = await client.get("/about")
    blocks = re.findall(
        r'<script type="application/ld\+json">(.*?)</script>', res.text, re.S,
    )
    types = [json.loads(block)["@type"] for block in blocks]
    assert types == ["Church", "AboutPage"]


async def test_sitemap_lists_every_page(client):
    res = await client.get("/sitemap.xml")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/xml")
    site = get_site_config()
    locs = re.findall(r"<loc>(.*?)</loc>", res.text)
    assert len(locs) == len(PAGES)
    assert f"{site.url}/ministries/youth" in locs
    assert "<priority>1.0</priority>" in res.text


async def test_seo_endpoint_returns_metadata_and_schemas(client):
    res = await client.get("/api/seo?path=/giving")
    body = res.json()
    site = get_site_config()
    assert body["success"] is True
    assert body["metadata"]["title"] == f"Give & Support Our Ministry | {site.name}"
    assert body["metadata"]["canonical"] == f"{site.url}/giving"
    assert [s["@type"] for s in body["schemas"]] == ["DonateAction"]


async def test_seo_endpoint_unknown_path_is_404(client):
    res = await client.get("/api/seo?path=/nowhere")
    assert res.status_code == 404
    assert res.json()["code"] == "NOT_FOUND"
