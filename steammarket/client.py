"""High level queries against the Steam community market."""

from __future__ import annotations

import logging
from typing import Any

from .models import (
    CustomItems,
    MarketRequest,
    MostRecentItems,
    MostRecentItemsRequest,
    Sort,
    SortDirection,
)
from .steam_request import SteamRequestError, custom_market_url, most_recent_items_url, send_request

logger = logging.getLogger(__name__)

_U32_MAX = 2**32 - 1

DEFAULT_GAME = 730
DEFAULT_COUNT = 10
DEFAULT_COUNTRY = "US"
DEFAULT_LANGUAGE = "english"
DEFAULT_CURRENCY = "3"


def _cents(price: int) -> int:
    cents = price * 100
    if not 0 <= cents <= _U32_MAX:
        raise OverflowError(f"price {price} is out of range")
    return cents


def build_market_request(
    game=None,
    count=None,
    page=None,
    query=None,
    sort=None,
    sort_dir=None,
    search_descriptions=None,
    price_min=None,
    price_max=None,
) -> MarketRequest:
    """Fill in the defaults of a market search; prices are given in whole units."""
    return MarketRequest(
        game=DEFAULT_GAME if game is None else game,
        page=0 if page is None else page,
        count=DEFAULT_COUNT if count is None else count,
        query="" if query is None else query,
        sort="" if sort is None else Sort(sort).value,
        sort_dir="" if sort_dir is None else SortDirection(sort_dir).value,
        search_descriptions=False if search_descriptions is None else search_descriptions,
        price_min=0 if price_min is None else _cents(price_min),
        price_max=_U32_MAX if price_max is None else _cents(price_max),
    )


def build_most_recent_request(country=None, language=None, currency=None) -> MostRecentItemsRequest:
    """Fill in the defaults of a most-recent-listings request."""
    return MostRecentItemsRequest(
        country=DEFAULT_COUNTRY if country is None else country,
        language=DEFAULT_LANGUAGE if language is None else language,
        currency=DEFAULT_CURRENCY if currency is None else currency,
    )


async def _fetch(url: str, session: Any) -> Any:
    data = await send_request(url, session)
    logger.debug("response from %s: %r", url, data)
    return data


async def get_items_query(
    game=None,
    count=None,
    page=None,
    query=None,
    sort=None,
    sort_dir=None,
    search_descriptions=None,
    price_min=None,
    price_max=None,
    session=None,
) -> CustomItems:
    """Search the market and return the matching items."""
    request = build_market_request(
        game, count, page, query, sort, sort_dir, search_descriptions, price_min, price_max
    )
    data = await _fetch(custom_market_url(request), session)
    try:
        return CustomItems.from_response(data)
    except ValueError as exc:
        raise SteamRequestError(f"unexpected market response: {exc}") from exc


async def get_most_recent_items(country=None, language=None, currency=None, session=None) -> MostRecentItems:
    """Fetch the most recently listed market items."""
    request = build_most_recent_request(country, language, currency)
    data = await _fetch(most_recent_items_url(request), session)
    try:
        return MostRecentItems.from_response(data)
    except ValueError as exc:
        raise SteamRequestError(f"unexpected most recent response: {exc}") from exc