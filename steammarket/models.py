"""Typed views of the Steam community market JSON payloads."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

_U32_MAX = 2**32 - 1
_USIZE_MAX = 2**64 - 1


class Sort(Enum):
    """Column the market search is ordered by."""

    NAME = "name"
    PRICE = "price"
    QUANTITY = "quantity"
    POPULAR = "popular"


class SortDirection(Enum):
    """Ordering direction of the market search."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class MarketRequest:
    """Resolved parameters of a market search."""

    game: int
    page: int
    count: int
    query: str
    sort: str
    sort_dir: str
    search_descriptions: bool
    price_min: int
    price_max: int


@dataclass(frozen=True)
class MostRecentItemsRequest:
    """Resolved parameters of a most-recent-listings request."""

    country: str
    language: str
    currency: str


def _mapping(data: Any, what: str) -> Mapping:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected an object, got {type(data).__name__}")
    return data


def _get(data: Mapping, key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _check_uint(value: Any, key: str, limit: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= limit:
        raise ValueError(
            f"field `{key}`: expected an unsigned integer up to {limit}, got {value!r}"
        )
    return value


def _u32(data: Mapping, key: str) -> int:
    return _check_uint(_get(data, key), key, _U32_MAX)


def _usize(data: Mapping, key: str) -> int:
    return _check_uint(_get(data, key), key, _USIZE_MAX)


def _opt_usize(data: Mapping, key: str) -> int | None:
    value = data.get(key)
    return None if value is None else _check_uint(value, key, _USIZE_MAX)


def _check_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"field `{key}`: expected a string, got {value!r}")
    return value


def _str(data: Mapping, key: str) -> str:
    return _check_str(_get(data, key), key)


def _opt_str(data: Mapping, key: str) -> str | None:
    value = data.get(key)
    return None if value is None else _check_str(value, key)


def _check_bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"field `{key}`: expected a boolean, got {value!r}")
    return value


def _bool(data: Mapping, key: str) -> bool:
    return _check_bool(_get(data, key), key)


def _opt_bool(data: Mapping, key: str) -> bool | None:
    value = data.get(key)
    return None if value is None else _check_bool(value, key)


def _object(data: Mapping, key: str) -> Mapping:
    return _mapping(_get(data, key), f"field `{key}`")


def _list(data: Mapping, key: str) -> list:
    value = _get(data, key)
    if not isinstance(value, list):
        raise ValueError(f"field `{key}`: expected an array, got {type(value).__name__}")
    return value


def _empty_records(data: Mapping, key: str) -> list[dict]:
    return [dict() for entry in _list(data, key) if _mapping(entry, f"entry of `{key}`") is not None]


@dataclass(frozen=True)
class Description:
    """Asset description attached to a market search result."""

    appid: int
    classid: str
    instanceid: str
    background_color: str | None
    icon_url: str
    tradable: int
    name: str
    name_color: str | None
    item_type: str
    market_name: str
    market_hash_name: str
    commodity: int

    @classmethod
    def from_dict(cls, data: Any) -> Description:
        data = _mapping(data, cls.__name__)
        return cls(
            appid=_u32(data, "appid"),
            classid=_str(data, "classid"),
            instanceid=_str(data, "instanceid"),
            background_color=_opt_str(data, "background_color"),
            icon_url=_str(data, "icon_url"),
            tradable=_usize(data, "tradable"),
            name=_str(data, "name"),
            name_color=_opt_str(data, "name_color"),
            item_type=_str(data, "type"),
            market_name=_str(data, "market_name"),
            market_hash_name=_str(data, "market_hash_name"),
            commodity=_u32(data, "commodity"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "appid": self.appid,
            "classid": self.classid,
            "instanceid": self.instanceid,
            "background_color": self.background_color,
            "icon_url": self.icon_url,
            "tradable": self.tradable,
            "name": self.name,
            "name_color": self.name_color,
            "type": self.item_type,
            "market_name": self.market_name,
            "market_hash_name": self.market_hash_name,
            "commodity": self.commodity,
        }


@dataclass(frozen=True)
class Item:
    """One row of a market search."""

    name: str
    hash_name: str
    sell_listings: int
    sell_price: int
    sell_price_text: str
    app_icon: str
    app_name: str
    asset_description: Description
    sale_price_text: str

    @classmethod
    def from_dict(cls, data: Any) -> Item:
        data = _mapping(data, cls.__name__)
        return cls(
            name=_str(data, "name"),
            hash_name=_str(data, "hash_name"),
            sell_listings=_u32(data, "sell_listings"),
            sell_price=_u32(data, "sell_price"),
            sell_price_text=_str(data, "sell_price_text"),
            app_icon=_str(data, "app_icon"),
            app_name=_str(data, "app_name"),
            asset_description=Description.from_dict(_get(data, "asset_description")),
            sale_price_text=_str(data, "sale_price_text"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "hash_name": self.hash_name,
            "sell_listings": self.sell_listings,
            "sell_price": self.sell_price,
            "sell_price_text": self.sell_price_text,
            "app_icon": self.app_icon,
            "app_name": self.app_name,
            "asset_description": self.asset_description.to_dict(),
            "sale_price_text": self.sale_price_text,
        }


@dataclass(frozen=True)
class ListinginfoAsset:
    """Asset reference inside a listing."""

    currency: int
    appid: int
    contextid: str
    id: str
    amount: str

    @classmethod
    def from_dict(cls, data: Any) -> ListinginfoAsset:
        data = _mapping(data, cls.__name__)
        return cls(
            currency=_usize(data, "currency"),
            appid=_usize(data, "appid"),
            contextid=_str(data, "contextid"),
            id=_str(data, "id"),
            amount=_str(data, "amount"),
        )

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class Listinginfo:
    """Price and fee details of one market listing."""

    listingid: str
    price: int
    fee: int
    publisher_fee_app: int
    publisher_fee_percent: str
    currencyid: int
    steam_fee: int | None
    publisher_fee: int | None
    converted_price: int | None
    converted_fee: int | None
    converted_currencyid: int | None
    converted_steam_fee: int | None
    converted_publisher_fee: int | None
    converted_price_per_unit: int | None
    converted_fee_per_unit: int | None
    converted_steam_fee_per_unit: int | None
    converted_publisher_fee_per_unit: int | None
    asset: ListinginfoAsset

    @classmethod
    def from_dict(cls, data: Any) -> Listinginfo:
        data = _mapping(data, cls.__name__)
        return cls(
            listingid=_str(data, "listingid"),
            price=_usize(data, "price"),
            fee=_usize(data, "fee"),
            publisher_fee_app=_usize(data, "publisher_fee_app"),
            publisher_fee_percent=_str(data, "publisher_fee_percent"),
            currencyid=_usize(data, "currencyid"),
            steam_fee=_opt_usize(data, "steam_fee"),
            publisher_fee=_opt_usize(data, "publisher_fee"),
            converted_price=_opt_usize(data, "converted_price"),
            converted_fee=_opt_usize(data, "converted_fee"),
            converted_currencyid=_opt_usize(data, "converted_currencyid"),
            converted_steam_fee=_opt_usize(data, "converted_steam_fee"),
            converted_publisher_fee=_opt_usize(data, "converted_publisher_fee"),
            converted_price_per_unit=_opt_usize(data, "converted_price_per_unit"),
            converted_fee_per_unit=_opt_usize(data, "converted_fee_per_unit"),
            converted_steam_fee_per_unit=_opt_usize(data, "converted_steam_fee_per_unit"),
            converted_publisher_fee_per_unit=_opt_usize(data, "converted_publisher_fee_per_unit"),
            asset=ListinginfoAsset.from_dict(_get(data, "asset")),
        )

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class Assets:
    """Full asset record of a listed item."""

    currency: int
    appid: int
    contextid: str
    id: str
    classid: str
    instanceid: str
    amount: str
    status: int
    original_amount: str

    @classmethod
    def from_dict(cls, data: Any) -> Assets:
        data = _mapping(data, cls.__name__)
        return cls(
            currency=_usize(data, "currency"),
            appid=_usize(data, "appid"),
            contextid=_str(data, "contextid"),
            id=_str(data, "id"),
            classid=_str(data, "classid"),
            instanceid=_str(data, "instanceid"),
            amount=_str(data, "amount"),
            status=_usize(data, "status"),
            original_amount=_str(data, "original_amount"),
        )

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class AppData:
    """Game metadata shipped with the most recent listings."""

    appid: int
    name: str
    icon: str
    link: str

    @classmethod
    def from_dict(cls, data: Any) -> AppData:
        data = _mapping(data, cls.__name__)
        return cls(
            appid=_usize(data, "appid"),
            name=_str(data, "name"),
            icon=_str(data, "icon"),
            link=_str(data, "link"),
        )

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


AssetTree = dict[str, dict[str, dict[str, Assets]]]


def _parse_assets(data: Mapping) -> AssetTree:
    tree = _object(data, "assets")
    return {
        app: {
            context: {
                asset_id: Assets.from_dict(asset)
                for asset_id, asset in _mapping(assets, f"assets of context {context}").items()
            }
            for context, assets in _mapping(contexts, f"assets of app {app}").items()
        }
        for app, contexts in tree.items()
    }


@dataclass
class MostRecentItems:
    """The most recently listed items on the market."""

    listinginfo: dict[str, Listinginfo] = field(default_factory=dict)
    purchaseinfo: list[dict] = field(default_factory=list)
    assets: AssetTree = field(default_factory=dict)
    currency: list[dict] = field(default_factory=list)
    app_data: dict[str, AppData] = field(default_factory=dict)

    @classmethod
    def from_response(cls, data: Any) -> MostRecentItems:
        """Validate a full most-recent response and keep the listing data."""
        data = _mapping(data, "most recent response")
        _bool(data, "success")
        _bool(data, "more")
        _bool(data, "results_html")
        _opt_bool(data, "hovers")
        _usize(data, "last_time")
        _str(data, "last_listing")
        return cls(
            listinginfo={
                key: Listinginfo.from_dict(value)
                for key, value in _object(data, "listinginfo").items()
            },
            purchaseinfo=_empty_records(data, "purchaseinfo"),
            assets=_parse_assets(data),
            currency=_empty_records(data, "currency"),
            app_data={key: AppData.from_dict(value) for key, value in _object(data, "app_data").items()},
        )

    @classmethod
    def empty(cls) -> MostRecentItems:
        return cls()

    def to_dict(self) -> dict[str, Any]:
        return {
            "listinginfo": {key: info.to_dict() for key, info in self.listinginfo.items()},
            "purchaseinfo": [dict(entry) for entry in self.purchaseinfo],
            "assets": {
                app: {
                    context: {asset_id: asset.to_dict() for asset_id, asset in assets.items()}
                    for context, assets in contexts.items()
                }
                for app, contexts in self.assets.items()
            },
            "currency": [dict(entry) for entry in self.currency],
            "app_data": {key: app.to_dict() for key, app in self.app_data.items()},
        }


def _check_search_data(data: Mapping) -> None:
    searchdata = _object(data, "searchdata")
    _str(searchdata, "query")
    _bool(searchdata, "search_descriptions")
    _u32(searchdata, "total_count")
    _u32(searchdata, "pagesize")
    _str(searchdata, "prefix")
    _str(searchdata, "class_prefix")


@dataclass
class CustomItems:
    """Results of a market search."""

    vec: list[Item] = field(default_factory=list)

    @classmethod
    def from_response(cls, data: Any) -> CustomItems:
        """Validate a full market search response and keep its results."""
        data = _mapping(data, "market response")
        _bool(data, "success")
        _u32(data, "start")
        _u32(data, "pagesize")
        _u32(data, "total_count")
        _check_search_data(data)
        return cls(vec=[Item.from_dict(entry) for entry in _list(data, "results")])

    def to_dict(self) -> dict[str, Any]:
        return {"vec": [item.to_dict() for item in self.vec]}