import httpx
import pytest

from config import settings
from engine import PageFetcher, PageFetchError
from conftest import ARTICLE_META, ARTICLE_TITLE, ARTICLE_URL, build_article_html


def transport_for(handler) -> httpx.MockTransport:
    return httpx.MockTransport(handler)


async def test_fetch_extracts_page_data():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["user_agent"] = request.headers["user-agent"]
        return httpx.Response(200, text=build_article_html())

    page = await PageFetcher(transport=transport_for(handler)).fetch(ARTICLE_URL)

    assert page.url == ARTICLE_URL
    assert page.title == ARTICLE_TITLE
    assert page.meta_description == ARTICLE_META
    assert "<h1>" in page.raw_markup
    assert seen["user_agent"] == settings.user_agent


async def test_error_status_yields_empty_page():
    fetcher = PageFetcher(transport=transport_for(lambda request: httpx.Response(404, text="Not found")))
    page = await fetcher(ARTICLE_URL)

    assert page.url == ARTICLE_URL
    assert page.title == ""
    assert page.raw_markup == ""


async def test_transport_failure_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(PageFetchError):
        await PageFetcher(transport=transport_for(handler)).fetch(ARTICLE_URL)


async def test_redirects_are_followed():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://example.com/new"})
        return httpx.Response(200, text="<title>Moved Page</title>")

    page = await PageFetcher(transport=transport_for(handler)).fetch("https://example.com/old")
    assert page.title == "Moved Page"
