"""
Request Handlers Module

This module turns routed requests into store operations and renders the
plain-text responses.

Handlers:
    show_entry    GET /entry/{key}
    list_entries  GET /list (and show_entry without a key)
    update_entry  PUT /entry/{key}/{value}
    welcome       GET /

Every handler answers with status 200. Handlers keep no state of their
own apart from the injected store, so FastAPI can run them concurrently
on its worker threads.
"""

from typing import Dict

from fastapi.responses import HTMLResponse, PlainTextResponse

from .store.store import KeyValueStore

WELCOME_PAGE = "<html><body><p>Welcome!</p></body></html>"


def format_listing(entries: Dict[str, str]) -> str:
    """
    Render a snapshot as a map-like listing.

    Entries are sorted by key so every call renders the same snapshot the
    same way.

    Examples:
        >>> format_listing({"b": "2", "a": "1"})
        'map[a:1 b:2]'
        >>> format_listing({})
        'map[]'
    """
    items = " ".join(f"{key}:{entries[key]}" for key in sorted(entries))
    return f"map[{items}]"


class RequestHandlers:
    """
    The REST service's route handlers, bound to one KeyValueStore.

    Usage:
        handlers = RequestHandlers(KeyValueStore())
        handlers.update_entry("color", "blue")
        handlers.show_entry("color").body
        # b'Read entry: s.data[color] = blue'
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    def show_entry(self, key: str) -> PlainTextResponse:
        """
        Show a single entry, or every entry when no key is given.

        A missing key renders as an empty value; it is not an error.
        """
        if not key:
            return self.list_entries()

        value = self.store.get(key)
        if value is None:
            value = ""
        return PlainTextResponse(f"Read entry: s.data[{key}] = {value}")

    def list_entries(self) -> PlainTextResponse:
        """Show every entry in the store."""
        snapshot = self.store.get_all()
        return PlainTextResponse(f"Read list: {format_listing(snapshot)}")

    def update_entry(self, key: str, value: str) -> PlainTextResponse:
        """Insert or overwrite an entry and echo what was stored."""
        self.store.put(key, value)
        return PlainTextResponse(f"Updated: s.data[{key}] = {value}")

    def welcome(self) -> HTMLResponse:
        """Serve the static welcome page."""
        return HTMLResponse(WELCOME_PAGE)
