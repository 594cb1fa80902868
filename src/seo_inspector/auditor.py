"""Main auditor that runs all rules against a page."""

import logging
from typing import Iterable, Optional

import httpx

from .checks import RULES, AuditInput, Rule
from .checks.meta_tags import (
    canonical_href,
    meta_description,
    og_image,
    page_title,
    twitter_image,
)
from .config import Settings
from .document import PageDocument, clean_text
from .fetcher import Acquisition, acquire
from .models import AuditReport, Finding, Level, PageMeta
from .scoring import aggregate, classify


logger = logging.getLogger(__name__)


def run_rules(inputs: AuditInput, rules: Iterable[Rule] = RULES) -> list[Finding]:
    """Evaluate rules in order, collecting the findings that fired."""
    findings = []
    for rule in rules:
        finding = rule.evaluate(inputs)
        if finding is not None:
            findings.append(finding)
    return findings


def extract_meta(inputs: AuditInput) -> PageMeta:
    """Pull title, description, canonical and preview images off the page."""
    og = og_image(inputs)
    return PageMeta(
        final_url=inputs.final_url,
        title=clean_text(page_title(inputs)) or None,
        description=clean_text(meta_description(inputs)) or None,
        og_image=og or None,
        twitter_image=twitter_image(inputs) or og or None,
        canonical=canonical_href(inputs) or None,
    )


def audit(
    document: PageDocument,
    final_url: str,
    robots_text: Optional[str] = None,
    sitemap_text: Optional[str] = None,
    perf_score: Optional[int] = None,
) -> AuditReport:
    """Run the full rule battery against a parsed page.

    Args:
        document: The parsed page
        final_url: Address of the page after redirects
        robots_text: Body of /robots.txt, or None if unavailable
        sitemap_text: Body of /sitemap.xml, or None if unavailable
        perf_score: PageSpeed Insights performance score (0-100), if known

    Returns:
        AuditReport with score, bucketed findings and page metadata
    """
    inputs = AuditInput(
        document=document,
        final_url=final_url,
        robots_text=robots_text,
        sitemap_text=sitemap_text,
        perf_score=perf_score,
    )
    findings = run_rules(inputs)
    buckets = classify(findings)
    score = aggregate(findings)
    logger.debug("Audited %s: score %d from %d findings", final_url, score, len(findings))

    return AuditReport(
        score=score,
        meta=extract_meta(inputs),
        findings=tuple(findings),
        good=buckets[Level.GOOD],
        bad=buckets[Level.BAD],
        risky=buckets[Level.RISKY],
        info=buckets[Level.INFO],
    )


def audit_url(
    url: str,
    use_perf_score: bool = False,
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> tuple[Acquisition, AuditReport]:
    """Fetch a URL and audit it.

    Raises:
        InvalidAddress: if the URL cannot be normalized
        FetchFailed: if the page cannot be retrieved (EmptyDocument included)
    """
    page = acquire(url, use_perf_score=use_perf_score, settings=settings, client=client)
    report = audit(
        page.document,
        page.final_url,
        robots_text=page.robots_text,
        sitemap_text=page.sitemap_text,
        perf_score=page.perf_score,
    )
    return page, report
