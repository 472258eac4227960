# src/goexamples/core/fetch.py
"""
Example fetcher.

One GET against the example server:

    {protocol}://{host}:{port}/go/{symbol}?package={package}&format=text

The text/plain body is wrapped in a ```go block. Any transport or status
failure gives None; errors never reach the caller.
"""

import logging
from dataclasses import dataclass

import httpx

from goexamples.core.settings import Settings


logger = logging.getLogger(__name__)

MARKDOWN = "markdown"


@dataclass(frozen=True)
class MarkupContent:
    value: str
    kind: str = MARKDOWN


@dataclass(frozen=True)
class Hover:
    contents: MarkupContent

    def to_dict(self) -> dict:
        return {"contents": {"value": self.contents.value, "kind": self.contents.kind}}


def format_markup(body: str) -> Hover:
    return Hover(MarkupContent("```go\n" + body + "\n```"))


def example_url(settings: Settings, symbol: str, package: str) -> httpx.URL:
    return httpx.URL(
        f"{settings.base_url}/go/{symbol}",
        params={"package": package, "format": "text"},
    )


async def fetch_example(
    settings: Settings,
    symbol: str,
    package: str,
    client: httpx.AsyncClient | None = None,
) -> Hover | None:
    """
    Fetch the rendered example for symbol.

    Args:
        settings: example server address and timeout
        symbol: the token under the cursor
        package: resolved package path, "" when unknown
        client: optional shared client; a short-lived one is used otherwise

    Returns:
        Hover with the example as a Go code block, or None on any failure
    """
    headers = {"Accept": "text/plain"}
    url = None

    try:
        url = example_url(settings, symbol, package)
        if client is None:
            async with httpx.AsyncClient(timeout=settings.timeout, follow_redirects=True) as own_client:
                response = await own_client.get(url, headers=headers)
        else:
            response = await client.get(url, headers=headers, timeout=settings.timeout, follow_redirects=True)
        response.raise_for_status()
        body = response.text
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("Example fetch failed for %s: %s", url or settings.base_url, e)
        return None

    logger.debug("Fetched example for %s (%d bytes)", symbol, len(body))
    return format_markup(body)
