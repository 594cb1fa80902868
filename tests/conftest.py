"""Shared fixtures for seo-inspector tests."""

from typing import Callable, Optional

import httpx
import pytest


class FakeDocument:
    """Hand-built PageDocument: selector -> list of element dicts.

    Each element is a dict of attributes; the ``text`` key holds its text.
    """

    def __init__(self, elements: Optional[dict[str, list[dict]]] = None):
        self.elements = elements or {}

    def _matches(self, selector: str) -> list[dict]:
        return self.elements.get(selector, [])

    def first_text(self, selector):
        matches = self._matches(selector)
        return matches[0].get("text", "") if matches else None

    def first_attr(self, selector, name):
        matches = self._matches(selector)
        return matches[0].get(name) if matches else None

    def all_attrs(self, selector, name):
        return [m.get(name) for m in self._matches(selector)]

    def count(self, selector):
        return len(self._matches(selector))


OPTIMAL_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <title>Acme Widgets - Handmade widgets since 1999</title>
  <meta name="description" content="Acme builds durable handmade widgets for home and office, shipped worldwide with a lifetime warranty.">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link rel="canonical" href="https://acme.example/">
  <meta property="og:image" content="https://acme.example/og.png">
  <script type="application/ld+json">{"@context": "https://schema.org", "@type": "Organization", "name": "Acme"}</script>
</head>
<body>
  <h1>Acme Widgets</h1>
  <h2>Why Acme</h2>
  <p>Quality you can hold.</p>
  <h2>Catalog</h2>
  <img src="/w.png" alt="A blue widget">
</body>
</html>
"""

BARE_HTML = """<html><head></head><body><p>Hello</p></body></html>"""


@pytest.fixture
def optimal_html() -> str:
    return OPTIMAL_HTML


@pytest.fixture
def bare_html() -> str:
    return BARE_HTML


@pytest.fixture
def fake_document() -> Callable[..., FakeDocument]:
    return FakeDocument


@pytest.fixture
def mock_client():
    """Build an httpx.Client whose requests are answered by ``handler``."""
    clients = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler), follow_redirects=True)
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()
