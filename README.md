# steammarket

An asynchronous client for the Steam Community Market and a small aiohttp
web server that keeps showing the most recently listed items.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Running the server

```
steammarket
```

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--host` | `127.0.0.1` | address to listen on |
| `--port` | `8080` | port to listen on |
| `--templates` | `front` | directory holding `index.html` |
| `--interval` | `5.0` | seconds between refreshes |

On startup the server fetches the most recent listings one time, with
country `NL`, language `english` and currency `3`. If that fetch fails, the
error is printed to standard error and the server starts with an empty set of
listings. A background task then fetches the listings again after every
interval and replaces the stored set when a fetch succeeds.

The server has two routes:

- `/` renders `index.html` from the template directory with Jinja2
  (autoescaping on). The template receives one variable, `items`: a dict
  with the keys `listinginfo`, `purchaseinfo`, `assets`, `currency` and
  `app_data`. If the template is missing or fails to render, the response is
  HTTP 500.
- `/api/items` returns that same dict as JSON.

### What the package does not include

The package does not ship an `index.html` template. You must put one in the
template directory yourself. Without it, `/` answers with HTTP 500.
`/api/items` works either way.

## Using the client

```python
import asyncio

from steammarket.client import get_items_query, get_most_recent_items
from steammarket.models import Sort, SortDirection


async def demo():
    recent = await get_most_recent_items(country="NL", language="english", currency="3")
    print(len(recent.listinginfo), "listings")

    items = await get_items_query(
        game=730,
        sort=Sort.PRICE,
        sort_dir=SortDirection.ASC,
        price_min=50,
        price_max=100,
    )
    for item in items.vec:
        print(item.name, item.sell_price_text)


asyncio.run(demo())
```

Both functions accept an optional `session` (an `aiohttp.ClientSession`). If
you leave it out, each call opens and closes its own session.

Any argument you leave out takes its default:

| Argument | Default |
| --- | --- |
| `game` | `730` |
| `count` | `10` |
| `page` | `0` |
| `query` | empty |
| `sort`, `sort_dir` | empty (no ordering) |
| `search_descriptions` | `False` |
| `price_min` | `0` |
| `price_max` | `4294967295` cents |
| `country` | `US` |
| `language` | `english` |
| `currency` | `3` |

Notes on the arguments:

- `sort` and `sort_dir` take either a `Sort` or `SortDirection` member or
  their string value, for example `"price"` or `"asc"`. Any other value
  raises `ValueError`.
- `price_min` and `price_max` are whole currency units. They are converted to
  cents before the request is sent. A value that falls outside the unsigned
  32-bit range after conversion raises `OverflowError`.
- `count` is kept on the request, but it is not sent in the search URL.

### Results and errors

`get_most_recent_items` returns a `MostRecentItems` object. Its
`listinginfo` field maps listing ids to `Listinginfo` records. Its `assets`
field maps app, then context, then asset id, to `Assets` records. Its
`app_data` field maps app ids to `AppData`.

`get_items_query` returns a `CustomItems` object. Its `vec` field is a list
of `Item` records, and each record has a `Description`.

Every model in `steammarket.models` has a `to_dict()` method. The record
classes also have `from_dict()`, and `MostRecentItems` and `CustomItems`
have `from_response()`, which checks the whole response. These methods raise
`ValueError` when a field is missing or has the wrong type.

`SteamRequestError` from `steammarket.steam_request` is raised in these
cases:

- the HTTP request fails
- the body is not valid JSON
- the response does not have the expected shape

### Building URLs only

To see a URL without sending anything, build the request with
`build_market_request` or `build_most_recent_request` from
`steammarket.client`. Then pass it to `custom_market_url` or
`most_recent_items_url` from `steammarket.steam_request`. To fetch and decode
an arbitrary URL, use `send_request(url, session=None)`.