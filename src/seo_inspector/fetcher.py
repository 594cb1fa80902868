"""Fetch a page and its crawl resources for auditing."""

import logging
import re
import time
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import urlparse

import httpx

from .config import Settings, load_settings
from .document import PageDocument, SoupDocument
from .exceptions import EmptyDocument, FetchFailed, InvalidAddress


logger = logging.getLogger(__name__)

PSI_ENDPOINT = "https://www.googleapis.com/pagespeedonline/v5/runPagespeed"

_SCHEME = re.compile(r"^https?://", re.IGNORECASE)


@dataclass(frozen=True)
class Acquisition:
    """A fetched, parsed page plus its optional auxiliary signals."""
    final_url: str  # After redirects
    document: PageDocument
    robots_text: Optional[str] = None
    sitemap_text: Optional[str] = None
    perf_score: Optional[int] = None
    fetch_time_ms: int = 0


def default_headers(settings: Settings) -> dict[str, str]:
    return {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }


def normalize_url(url: str) -> str:
    """Ensure URL has a scheme and is a well-formed http(s) address."""
    raw = url
    url = url.strip()
    if not url:
        raise InvalidAddress(raw)
    if not _SCHEME.match(url):
        url = "https://" + url
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise InvalidAddress(raw) from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidAddress(raw)
    return str(parsed)


def site_origin(url: str) -> str:
    """Scheme, host and port of a URL, without path."""
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


def fetch_page(client: httpx.Client, url: str) -> tuple[str, str]:
    """Fetch the page to audit, following redirects.

    Returns:
        (final_url, html)

    Raises:
        FetchFailed: on a non-2xx status, timeout or transport error
        EmptyDocument: when the response body is blank
    """
    try:
        response = client.get(url, follow_redirects=True)
        response.raise_for_status()
    except httpx.TimeoutException as e:
        raise FetchFailed(f"Timeout fetching {url}") from e
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        raise FetchFailed(f"Fetch failed: HTTP {status} {e.response.reason_phrase}", status=status) from e
    except httpx.RequestError as e:
        raise FetchFailed(f"Request failed: {e}") from e

    final_url = str(response.url)
    html = response.text
    if not html.strip():
        raise EmptyDocument(final_url)
    return final_url, html


def fetch_text(client: httpx.Client, url: str) -> Optional[str]:
    """Best-effort GET of a text resource; None if it cannot be had."""
    try:
        response = client.get(url, follow_redirects=True)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("Could not fetch %s: %s", url, e)
        return None
    if not response.is_success:
        logger.debug("No %s (HTTP %s)", url, response.status_code)
        return None
    return response.text


def _performance_value(payload: Any) -> Optional[int]:
    try:
        value = payload["lighthouseResult"]["categories"]["performance"]["score"]
    except (KeyError, TypeError):
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not 0 <= value <= 1:
        return None
    # Half up, not banker's rounding
    return int(value * 100 + 0.5)


def fetch_perf_score(
    client: httpx.Client,
    url: str,
    api_key: Optional[str] = None,
    strategy: str = "mobile",
    timeout: Optional[float] = None,
) -> Optional[int]:
    """Look up the PageSpeed Insights performance score (0-100) for a URL.

    Any failure yields None; the score is an optional signal.
    """
    params = {"url": url, "strategy": strategy}
    if api_key:
        params["key"] = api_key

    kwargs = {"params": params}
    if timeout is not None:
        kwargs["timeout"] = timeout
    try:
        response = client.get(PSI_ENDPOINT, **kwargs)
    except httpx.RequestError as e:
        logger.debug("PageSpeed Insights request failed: %s", e)
        return None
    if not response.is_success:
        logger.debug("PageSpeed Insights returned HTTP %s", response.status_code)
        return None
    try:
        payload = response.json()
    except ValueError:
        logger.debug("PageSpeed Insights returned invalid JSON")
        return None

    score = _performance_value(payload)
    if score is None:
        logger.debug("PageSpeed Insights response had no performance score")
    return score


def acquire(
    url: str,
    use_perf_score: bool = False,
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> Acquisition:
    """Fetch and parse a page along with robots.txt, sitemap.xml and,
    optionally, its PageSpeed Insights score.

    Args:
        url: The address to audit; a missing scheme defaults to https
        use_perf_score: Also query PageSpeed Insights
        settings: Runtime settings, read from the environment if omitted
        client: An existing client to use; it is left open

    Raises:
        InvalidAddress, FetchFailed, EmptyDocument
    """
    settings = settings or load_settings()
    url = normalize_url(url)

    owns_client = client is None
    if owns_client:
        client = httpx.Client(
            headers=default_headers(settings),
            timeout=settings.timeout,
            follow_redirects=True,
        )
    try:
        start_time = time.time()
        final_url, html = fetch_page(client, url)
        fetch_time_ms = int((time.time() - start_time) * 1000)
        logger.info("Fetched %s in %dms", final_url, fetch_time_ms)

        document = SoupDocument.from_html(html)

        origin = site_origin(final_url)
        robots_text = fetch_text(client, f"{origin}/robots.txt")
        sitemap_text = fetch_text(client, f"{origin}/sitemap.xml")

        perf_score = None
        if use_perf_score:
            perf_score = fetch_perf_score(
                client,
                final_url,
                api_key=settings.psi_api_key,
                strategy=settings.psi_strategy,
                timeout=settings.psi_timeout,
            )
    finally:
        if owns_client:
            client.close()

    return Acquisition(
        final_url=final_url,
        document=document,
        robots_text=robots_text,
        sitemap_text=sitemap_text,
        perf_score=perf_score,
        fetch_time_ms=fetch_time_ms,
    )
