"""Read-only query interface over a parsed HTML page."""

import re
from typing import Optional, Protocol

from bs4 import BeautifulSoup, Tag


_WHITESPACE = re.compile(r"\s+")


def clean_text(value: Optional[str]) -> str:
    """Trim and collapse internal whitespace runs to single spaces."""
    if not value:
        return ""
    return _WHITESPACE.sub(" ", value).strip()


class PageDocument(Protocol):
    """The queries audit rules are allowed to make against a page.

    Selectors are CSS-like (``meta[name="description"]``, ``head title``,
    ``link[rel="alternate"][hreflang]``). Implementations must not mutate
    the underlying tree.
    """

    def first_text(self, selector: str) -> Optional[str]:
        ...

    def first_attr(self, selector: str, name: str) -> Optional[str]:
        ...

    def all_attrs(self, selector: str, name: str) -> list[Optional[str]]:
        ...

    def count(self, selector: str) -> int:
        ...


def _attr(tag: Tag, name: str) -> Optional[str]:
    value = tag.get(name)
    if value is None:
        return None
    # bs4 returns multi-valued attributes such as rel/class as lists
    if isinstance(value, list):
        return " ".join(value)
    return value


class SoupDocument:
    """PageDocument backed by BeautifulSoup and soupsieve selectors."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    @classmethod
    def from_html(cls, html: str) -> "SoupDocument":
        return cls(BeautifulSoup(html, "lxml"))

    def first_text(self, selector: str) -> Optional[str]:
        tag = self.soup.select_one(selector)
        return tag.get_text() if tag else None

    def first_attr(self, selector: str, name: str) -> Optional[str]:
        tag = self.soup.select_one(selector)
        return _attr(tag, name) if tag else None

    def all_attrs(self, selector: str, name: str) -> list[Optional[str]]:
        return [_attr(tag, name) for tag in self.soup.select(selector)]

    def count(self, selector: str) -> int:
        return len(self.soup.select(selector))
