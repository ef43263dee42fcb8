"""
Paginated, searchable list of blog articles.

``BlogArticlesList`` is attached to a host element that carries the
serialized article entries. It filters the entries by a text query, shows
one page of the matches at a time and mirrors the query and page into the
URL, pushing a history entry on every render.

The widget never creates markup. It only toggles the ``display`` of the
items and pagination links it finds on its host.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple, Union
from urllib.parse import parse_qs, parse_qsl, urlencode, urlsplit, urlunsplit

import components

logger = logging.getLogger(__name__)

TAG = "blog-articles-list"
HIDDEN = "none"
LIST_ITEM = "list-item"
SHOWN = "unset"


class InitializationError(Exception):
    """Raised when the host carries no usable serialized entries."""


@dataclass(frozen=True)
class Entry:
    identifier: str
    title: str


@dataclass
class Element:
    """The parts of a page element the widget reads and mutates."""

    display: str = ""
    value: str = ""
    onclick: Optional[Callable[[], None]] = None
    onkeyup: Optional[Callable[[], None]] = None

    @property
    def hidden(self) -> bool:
        return self.display == HIDDEN

    def click(self) -> None:
        if self.onclick:
            self.onclick()

    def keyup(self) -> None:
        if self.onkeyup:
            self.onkeyup()


@dataclass
class ListHost:
    """Page element hosting the widget.

    ``items`` maps entry identifiers to their list items. The search input
    and the pagination links are optional and may be left as ``None``.
    """

    dataset: Dict[str, str] = field(default_factory=dict)
    items: Dict[str, Element] = field(default_factory=dict)
    search_input: Optional[Element] = None
    previous_link: Optional[Element] = None
    next_link: Optional[Element] = None


@dataclass
class BrowserHistory:
    href: str
    entries: List[str] = field(default_factory=list)

    def push_state(self, url: str) -> None:
        """Change the address without navigating and record it."""
        self.entries.append(url)
        self.href = url


def parse_entries(raw: Optional[str]) -> Tuple[Entry, ...]:
    if not raw:
        raise InitializationError("Invalid articles entries")
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise InitializationError(f"Invalid articles entries: {exc}") from exc
    if not isinstance(data, list):
        raise InitializationError("Invalid articles entries: expected a list")

    entries: List[Entry] = []
    seen = set()
    for idx, item in enumerate(data):
        slug = item.get("slug") if isinstance(item, dict) else None
        fields = item.get("data") if isinstance(item, dict) else None
        title = fields.get("title") if isinstance(fields, dict) else None
        if not isinstance(slug, str) or not slug or not isinstance(title, str):
            raise InitializationError(f"Invalid articles entry at index {idx}")
        if slug in seen:
            raise InitializationError(f"Duplicate articles entry: {slug}")
        seen.add(slug)
        entries.append(Entry(identifier=slug, title=title))
    return tuple(entries)


def coerce_page(page: Union[int, str, None]) -> int:
    """Return ``page`` as a positive integer, falling back to 1.

    Text must be plain ASCII digits; signs, underscores and decimals fall back.
    """
    if isinstance(page, bool):
        return 1
    if isinstance(page, int):
        return page if page >= 1 else 1
    text = page.strip() if isinstance(page, str) else ""
    if not (text.isascii() and text.isdigit()):
        return 1
    value = int(text)
    return value if value >= 1 else 1


def with_params(url: str, **params: str) -> str:
    """Set query-string parameters on ``url``, keeping the others in place."""
    parts = urlsplit(url)
    pairs: List[Tuple[str, str]] = []
    pending = dict(params)
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        if key in params:
            if key in pending:
                pairs.append((key, pending.pop(key)))
            continue
        pairs.append((key, value))
    pairs.extend(pending.items())
    return urlunsplit(parts._replace(query=urlencode(pairs)))


class BlogArticlesList:
    def __init__(
        self,
        host: ListHost,
        history: BrowserHistory,
        page_size: int = 1,
    ):
        self.host = host
        self.history = history
        self.page_size = max(1, page_size)

        self.search_input = host.search_input
        self.previous_link = host.previous_link
        self.next_link = host.next_link

        params = parse_qs(urlsplit(history.href).query, keep_blank_values=True)
        self.query = params.get("query", [""])[0]
        self.current_page = coerce_page(params.get("page", [None])[0])

        self.entries = parse_entries(host.dataset.get("entries"))

        if self.search_input:
            self.search_input.value = self.query
            self.search_input.onkeyup = self._on_search_keyup

        self.render()

    @property
    def low(self) -> int:
        return (self.current_page - 1) * self.page_size

    @property
    def high(self) -> int:
        return self.low + self.page_size

    def _on_search_keyup(self) -> None:
        if self.search_input:
            self.on_query_change(self.search_input.value)

    def on_query_change(self, query: str) -> None:
        logger.debug("Query changed %r -> %r", self.query, query)
        self.query = query
        self.current_page = 1
        self.render()

    def on_page_change(self, page: Union[int, str, None]) -> None:
        self.current_page = coerce_page(page)
        logger.debug("Page changed to %d", self.current_page)
        self.render()

    def filtered_entries(self) -> List[Entry]:
        needle = self.query.lower()
        return [e for e in self.entries if needle in e.title.lower()]

    def visible_identifiers(self) -> List[str]:
        return [e.identifier for e in self.filtered_entries()[self.low:self.high]]

    def has_next_page(self) -> bool:
        # Literal boundary: hides Next when the next page would only be
        # partially filled.
        return (self.current_page + 1) * self.page_size <= len(self.filtered_entries())

    def has_previous_page(self) -> bool:
        return self.current_page > 1

    def page_url(self, page: int) -> str:
        return with_params(self.history.href, query=self.query, page=str(coerce_page(page)))

    def render(self) -> None:
        self._render_entries()
        self._render_pagination_links()
        self.history.push_state(self.page_url(self.current_page))

    def _render_entries(self) -> None:
        for entry in self.entries:
            item = self.host.items.get(entry.identifier)
            if item is not None:
                item.display = HIDDEN

        for index, entry in enumerate(self.filtered_entries()):
            item = self.host.items.get(entry.identifier)
            if item is None:
                continue
            item.display = LIST_ITEM if self.low <= index < self.high else HIDDEN

    def _render_pagination_links(self) -> None:
        if self.next_link:
            self.next_link.display = SHOWN if self.has_next_page() else HIDDEN
            self.next_link.onclick = lambda: self.on_page_change(self.current_page + 1)

        if self.previous_link:
            self.previous_link.display = SHOWN if self.has_previous_page() else HIDDEN
            self.previous_link.onclick = lambda: self.on_page_change(self.current_page - 1)


components.define(TAG, BlogArticlesList)
