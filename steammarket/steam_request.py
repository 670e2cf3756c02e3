"""URL construction and HTTP access for the Steam market endpoints."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any
from urllib.parse import quote, urlencode

import aiohttp

from .models import MarketRequest, MostRecentItemsRequest

logger = logging.getLogger(__name__)

_MARKET_SEARCH_URL = "https://steamcommunity.com/market/search/render/"
_MOST_RECENT_URL = "https://steamcommunity.com/market/recent"


class SteamRequestError(Exception):
    """Raised when a market request fails or returns unusable data."""


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _build(base: str, params: list[tuple[str, Any]]) -> str:
    query = urlencode([(key, _format(value)) for key, value in params], quote_via=quote)
    return f"{base}?{query}"


def custom_market_url(request: MarketRequest) -> str:
    """Return the search URL for a market request."""
    url = _build(
        _MARKET_SEARCH_URL,
        [
            ("appid", request.game),
            ("start", request.page),
            ("query", request.query),
            ("sort", request.sort),
            ("sort_dir", request.sort_dir),
            ("search_descriptions", request.search_descriptions),
            ("price_min", request.price_min),
            ("price_max", request.price_max),
            ("norender", 1),
        ],
    )
    logger.debug("market search url: %s", url)
    return url


def most_recent_items_url(request: MostRecentItemsRequest) -> str:
    """Return the URL listing the most recent market items."""
    return _build(
        _MOST_RECENT_URL,
        [
            ("country", request.country),
            ("language", request.language),
            ("currency", request.currency),
            ("norender", 1),
        ],
    )


async def _fetch_json(session: Any, url: str) -> Any:
    try:
        async with session.get(url, headers={"Accept": "application/json"}) as response:
            body = await response.text()
    except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
        raise SteamRequestError(f"request to {url} failed: {exc}") from exc
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise SteamRequestError(f"invalid JSON from {url}: {exc}") from exc


async def send_request(url: str, session: aiohttp.ClientSession | None = None) -> Any:
    """GET a URL and return its body decoded as JSON."""
    if session is None:
        async with aiohttp.ClientSession() as owned:
            return await _fetch_json(owned, url)
    return await _fetch_json(session, url)