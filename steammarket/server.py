"""Web front end serving the most recent market listings."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import functools
import os
import sys
from dataclasses import dataclass

import aiohttp
import jinja2
from aiohttp import web

from .client import get_most_recent_items
from .models import MostRecentItems
from .steam_request import SteamRequestError

DEFAULT_COUNTRY = "NL"
DEFAULT_LANGUAGE = "english"
DEFAULT_CURRENCY = "3"


@dataclass
class _SharedItems:
    items: MostRecentItems


ITEMS_KEY = web.AppKey("items", _SharedItems)
TEMPLATES_KEY = web.AppKey("templates", jinja2.Environment)
SESSION_KEY = web.AppKey("session", aiohttp.ClientSession)


async def index(request: web.Request) -> web.Response:
    """Render index.html with the current listings."""
    environment = request.app[TEMPLATES_KEY]
    items = request.app[ITEMS_KEY].items
    try:
        rendered = environment.get_template("index.html").render(items=items.to_dict())
    except jinja2.TemplateError as exc:
        raise web.HTTPInternalServerError(text=str(exc)) from exc
    return web.Response(text=rendered, content_type="text/html")


async def api_items(request: web.Request) -> web.Response:
    """Return the current listings as JSON."""
    return web.json_response(request.app[ITEMS_KEY].items.to_dict())


async def fetch_items_loop(app: web.Application, interval: float = 5.0) -> None:
    """Refresh the application's listings forever."""
    while True:
        try:
            items = await get_most_recent_items(
                DEFAULT_COUNTRY, DEFAULT_LANGUAGE, DEFAULT_CURRENCY, session=app.get(SESSION_KEY)
            )
        except SteamRequestError as exc:
            print(f"Error fetching items: {exc}", file=sys.stderr)
        else:
            app[ITEMS_KEY].items = items
            print(f"Updated items: {len(items.listinginfo)} listings fetched")
        await asyncio.sleep(interval)


def create_app(initial_items: MostRecentItems | None = None, template_dir="front") -> web.Application:
    """Build the web application around an initial set of listings."""
    app = web.Application()
    app[ITEMS_KEY] = _SharedItems(MostRecentItems.empty() if initial_items is None else initial_items)
    app[TEMPLATES_KEY] = jinja2.Environment(
        loader=jinja2.FileSystemLoader(os.fspath(template_dir)),
        autoescape=jinja2.select_autoescape(["html", "htm", "xml"]),
    )
    app.router.add_get("/", index)
    app.router.add_get("/api/items", api_items)
    return app


async def _background_fetch(app: web.Application, *, interval: float):
    async with aiohttp.ClientSession() as session:
        app[SESSION_KEY] = session
        task = asyncio.create_task(fetch_items_loop(app, interval))
        yield
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Serve the most recent Steam market listings.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--templates", default="front", help="directory holding index.html")
    parser.add_argument("--interval", type=float, default=5.0, help="seconds between refreshes")
    args = parser.parse_args(argv)

    try:
        initial = asyncio.run(get_most_recent_items(DEFAULT_COUNTRY, DEFAULT_LANGUAGE, DEFAULT_CURRENCY))
    except SteamRequestError as exc:
        print(f"Error fetching items: {exc}", file=sys.stderr)
        initial = None
    else:
        print(f"Initial items loaded: {len(initial.listinginfo)} listings")

    app = create_app(initial, args.templates)
    app.cleanup_ctx.append(functools.partial(_background_fetch, interval=args.interval))
    web.run_app(app, host=args.host, port=args.port)
    return 0