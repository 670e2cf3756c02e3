import copy

import pytest

from steammarket.models import (
    AppData,
    Assets,
    CustomItems,
    Description,
    Item,
    Listinginfo,
    ListinginfoAsset,
    MostRecentItems,
)

DESCRIPTION = {
    "appid": 730,
    "classid": "class-1",
    "instanceid": "0",
    "background_color": "",
    "icon_url": "icon-url",
    "tradable": 1,
    "name": "AK-47 | Redline",
    "name_color": "D2D2D2",
    "type": "Classified Rifle",
    "market_name": "AK-47 | Redline (Field-Tested)",
    "market_hash_name": "AK-47 | Redline (Field-Tested)",
    "commodity": 0,
}

ITEM = {
    "name": "AK-47 | Redline",
    "hash_name": "AK-47 | Redline (Field-Tested)",
    "sell_listings": 42,
    "sell_price": 1234,
    "sell_price_text": "$12.34",
    "app_icon": "icon.jpg",
    "app_name": "Counter-Strike 2",
    "asset_description": DESCRIPTION,
    "sale_price_text": "$12.00",
}

MARKET_RESPONSE = {
    "success": True,
    "start": 0,
    "pagesize": 10,
    "total_count": 1,
    "searchdata": {
        "query": "",
        "search_descriptions": False,
        "total_count": 1,
        "pagesize": 10,
        "prefix": "searchResults",
        "class_prefix": "market",
    },
    "results": [ITEM],
}

LISTING_ASSET = {"currency": 0, "appid": 730, "contextid": "2", "id": "asset-1", "amount": "1"}

LISTING = {
    "listingid": "listing-1",
    "price": 1250,
    "fee": 187,
    "publisher_fee_app": 730,
    "publisher_fee_percent": "0.100000001490116119",
    "currencyid": 2003,
    "steam_fee": 62,
    "publisher_fee": 125,
    "asset": LISTING_ASSET,
}

ASSET = {
    "currency": 0,
    "appid": 730,
    "contextid": "2",
    "id": "asset-1",
    "classid": "class-1",
    "instanceid": "0",
    "amount": "1",
    "status": 2,
    "original_amount": "1",
}

APP = {"appid": 730, "name": "Counter-Strike 2", "icon": "icon.jpg", "link": "https://store.example.com/app/730"}

RECENT_RESPONSE = {
    "success": True,
    "more": False,
    "results_html": False,
    "listinginfo": {"listing-1": LISTING},
    "purchaseinfo": [],
    "assets": {"730": {"2": {"asset-1": ASSET}}},
    "currency": [],
    "app_data": {"730": APP},
    "hovers": False,
    "last_time": 1700000000,
    "last_listing": "listing-1",
}


def test_description_round_trip_uses_type_key():
    description = Description.from_dict(DESCRIPTION)
    assert description.item_type == DESCRIPTION["type"]
    assert description.to_dict() == DESCRIPTION


def test_description_optional_fields_default_to_none():
    data = {k: v for k, v in DESCRIPTION.items() if k not in ("background_color", "name_color")}
    description = Description.from_dict(data)
    assert description.background_color is None
    assert description.to_dict()["name_color"] is None


def test_description_missing_required_field():
    data = {k: v for k, v in DESCRIPTION.items() if k != "market_name"}
    with pytest.raises(ValueError, match="market_name"):
        Description.from_dict(data)


@pytest.mark.parametrize("bad", [-1, True, 2**32, "730", 7.5])
def test_description_rejects_bad_u32(bad):
    with pytest.raises(ValueError, match="appid"):
        Description.from_dict({**DESCRIPTION, "appid": bad})


def test_item_round_trip():
    item = Item.from_dict(ITEM)
    assert item.asset_description == Description.from_dict(DESCRIPTION)
    assert item.to_dict() == ITEM


def test_item_rejects_non_object():
    with pytest.raises(ValueError):
        Item.from_dict([ITEM])


def test_listinginfo_optional_and_nested():
    info = Listinginfo.from_dict(LISTING)
    assert info.converted_price is None
    assert info.steam_fee == LISTING["steam_fee"]
    assert info.asset == ListinginfoAsset.from_dict(LISTING_ASSET)
    result = info.to_dict()
    assert result["converted_price"] is None
    assert result["asset"] == LISTING_ASSET
    assert Listinginfo.from_dict(result) == info


def test_listinginfo_asset_requires_string_id():
    with pytest.raises(ValueError, match="id"):
        ListinginfoAsset.from_dict({**LISTING_ASSET, "id": 5})


def test_assets_and_app_data_round_trip():
    assert Assets.from_dict(ASSET).to_dict() == ASSET
    assert AppData.from_dict(APP).to_dict() == APP


def test_most_recent_items_from_response():
    items = MostRecentItems.from_response(RECENT_RESPONSE)
    assert list(items.listinginfo) == ["listing-1"]
    assert items.assets["730"]["2"]["asset-1"] == Assets.from_dict(ASSET)
    result = items.to_dict()
    assert result["app_data"] == RECENT_RESPONSE["app_data"]
    assert result["assets"] == RECENT_RESPONSE["assets"]
    assert result["purchaseinfo"] == []


def test_most_recent_items_requires_envelope_fields():
    data = copy.deepcopy(RECENT_RESPONSE)
    del data["last_listing"]
    with pytest.raises(ValueError, match="last_listing"):
        MostRecentItems.from_response(data)


def test_most_recent_items_rejects_asset_list():
    with pytest.raises(ValueError):
        MostRecentItems.from_response({**RECENT_RESPONSE, "assets": []})


def test_most_recent_items_empty():
    assert MostRecentItems.empty().to_dict() == {
        "listinginfo": {},
        "purchaseinfo": [],
        "assets": {},
        "currency": [],
        "app_data": {},
    }


def test_custom_items_from_response():
    items = CustomItems.from_response(MARKET_RESPONSE)
    assert [item.name for item in items.vec] == [ITEM["name"]]
    assert items.to_dict() == {"vec": [ITEM]}


def test_custom_items_requires_searchdata_fields():
    data = copy.deepcopy(MARKET_RESPONSE)
    del data["searchdata"]["class_prefix"]
    with pytest.raises(ValueError, match="class_prefix"):
        CustomItems.from_response(data)