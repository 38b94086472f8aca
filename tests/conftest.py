# File: tests/conftest.py
import asyncio
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import web

from toolscout.config import ScraperConfig
from toolscout.parser.html_parser import ParsedPage, parse_html

PAGE_URL = "https://www.writebot.io/features"

MAIN_TEXT = (
    "WriteBot drafts blog posts, product descriptions and newsletters in seconds. "
    "Pick a tone, paste a few bullet points and let the assistant do the rest."
)

SAMPLE_HTML = f"""<!DOCTYPE html>
<html lang="en">
<head>
  <title>WriteBot - AI Writing Assistant</title>
  <meta name="description" content="WriteBot helps you create blog content with machine learning.">
  <meta name="keywords" content="writing, chatbot , llm,">
  <meta name="author" content="Jane Doe">
  <meta name="theme-color" content="#112233">
  <meta property="og:title" content="WriteBot">
  <meta property="og:description" content="Write faster with AI">
  <meta property="og:image" content="https://cdn.writebot.io/og.png">
  <meta property="og:type" content="website">
  <meta name="twitter:card" content="summary_large_image">
  <meta name="twitter:site" content="@writebot">
  <meta name="twitter:creator" content="@jane">
  <meta name="twitter:title" content="WriteBot on Twitter">
  <meta property="article:published_time" content="2024-01-01T00:00:00Z">
  <meta property="article:modified_time" content="2024-02-01T00:00:00Z">
  <link rel="shortcut icon" href="/static/favicon.ico">
</head>
<body>
  <nav>Home Pricing Login</nav>
  <main><h1>Write better</h1><p>{MAIN_TEXT}</p></main>
  <section class="pricing">Starter plan $19.99 per month, billed monthly. Try for free for 14 days.</section>
  <span class="tag">Writing</span>
  <span data-tag="copy">Copy</span>
  <div class="category">Text Generation</div>
  <footer>Copyright WriteBot</footer>
</body>
</html>
"""


@pytest.fixture()
def sample_html() -> str:
    return SAMPLE_HTML


@pytest.fixture()
def parsed_page() -> ParsedPage:
    """ParsedPage for the sample document."""
    return parse_html(SAMPLE_HTML, PAGE_URL)


@pytest.fixture()
def fast_config() -> ScraperConfig:
    """Config with a short fetch deadline for network tests."""
    return ScraperConfig(timeout=0.5)


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


@pytest_asyncio.fixture
async def tool_server(unused_tcp_port: int) -> AsyncIterator[tuple[str, dict[str, int]]]:
    """Test site; yields (base URL, per-path hit counter)."""
    hits: dict[str, int] = {}
    app = web.Application()

    def _count(request: web.Request) -> None:
        hits[request.path] = hits.get(request.path, 0) + 1

    async def handle_tool(request):
        _count(request)
        return web.Response(text=SAMPLE_HTML, content_type="text/html")

    async def handle_other(request):
        _count(request)
        return web.Response(
            text="<html><head><title>Other</title></head><body><p>a simple todo app</p></body></html>",
            content_type="text/html",
        )

    async def handle_slow(request):
        _count(request)
        await asyncio.sleep(3)
        return web.Response(text="<title>Slow</title>", content_type="text/html")

    async def handle_delayed(request):
        _count(request)
        await asyncio.sleep(0.2)
        return web.Response(text=SAMPLE_HTML, content_type="text/html")

    async def handle_missing(request):
        _count(request)
        return web.Response(status=404, text="nope")

    async def handle_json(request):
        _count(request)
        return web.json_response({"hello": "world"})

    async def handle_headers(request):
        _count(request)
        hits["ua:" + request.headers.get("User-Agent", "")] = 1
        hits["lang:" + request.headers.get("Accept-Language", "")] = 1
        return web.Response(text="<title>Headers</title>", content_type="text/html")

    app.router.add_get("/tool", handle_tool)
    app.router.add_get("/other", handle_other)
    app.router.add_get("/slow", handle_slow)
    app.router.add_get("/delayed", handle_delayed)
    app.router.add_get("/missing", handle_missing)
    app.router.add_get("/data.json", handle_json)
    app.router.add_get("/headers", handle_headers)

    async for url in serve_app(app, unused_tcp_port):
        yield url, hits
