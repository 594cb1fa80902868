"""Technical rules: mobile viewport, language, crawl resources, performance."""

from typing import Optional

from ..document import clean_text
from ..models import Finding, Level
from .base import AuditInput, Rule


PERF_GOOD = 90
PERF_FAIR = 50


def viewport_content(inputs: AuditInput) -> str:
    return clean_text(inputs.document.first_attr('meta[name="viewport"]', "content")).lower()


def html_lang(inputs: AuditInput) -> str:
    return clean_text(inputs.document.first_attr("html", "lang"))


def hreflang_count(inputs: AuditInput) -> int:
    return inputs.document.count('link[rel="alternate"][hreflang]')


def has_robots_txt(inputs: AuditInput) -> bool:
    return inputs.robots_text is not None


def has_sitemap(inputs: AuditInput) -> bool:
    return inputs.sitemap_text is not None


def perf_score(inputs: AuditInput) -> Optional[int]:
    return inputs.perf_score


def judge_viewport(content: str) -> Finding:
    if "width=device-width" in content:
        return Finding(
            id="viewport-ok",
            title="Mobile viewport set",
            level=Level.GOOD,
            weight=4,
            detail="Page is set up for responsive layout",
        )
    return Finding(
        id="viewport-missing",
        title="No mobile viewport",
        level=Level.BAD,
        weight=-8,
        detail="Hurts the mobile experience",
        fix="Add <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\">",
    )


def judge_lang(lang: str) -> Finding:
    if lang:
        return Finding(
            id="lang-ok",
            title="Language declared",
            level=Level.GOOD,
            weight=2,
            detail=f"lang='{lang}'",
        )
    return Finding(
        id="lang-missing",
        title="No lang attribute",
        level=Level.RISKY,
        weight=-2,
        detail="Affects accessibility and multilingual targeting",
        fix="Set the page language, e.g. <html lang=\"en\">",
    )


def judge_hreflang(count: int) -> Optional[Finding]:
    if not count:
        return None
    return Finding(
        id="hreflang",
        title="hreflang alternates declared",
        level=Level.INFO,
        weight=2,
        detail=f"{count} alternate language link(s)",
    )


def judge_robots_txt(present: bool) -> Finding:
    if present:
        return Finding(
            id="robots",
            title="robots.txt found",
            level=Level.INFO,
            weight=2,
            detail="Review its crawl rules",
        )
    return Finding(
        id="robots-missing",
        title="No robots.txt",
        level=Level.RISKY,
        weight=-2,
        detail="Crawler access rules are unclear",
        fix="Serve a /robots.txt at the site root",
    )


def judge_sitemap(present: bool) -> Finding:
    if present:
        return Finding(
            id="sitemap",
            title="sitemap.xml found",
            level=Level.INFO,
            weight=2,
            detail="Helps crawlers discover pages",
        )
    return Finding(
        id="sitemap-missing",
        title="No sitemap.xml",
        level=Level.RISKY,
        weight=-2,
        detail="Site-wide discoverability suffers",
        fix="Serve a /sitemap.xml at the site root",
    )


def judge_perf(score: Optional[int]) -> Optional[Finding]:
    if score is None:
        return None
    if score >= PERF_GOOD:
        return Finding(
            id="psi-good",
            title="Good performance (PageSpeed Insights)",
            level=Level.GOOD,
            weight=8,
            detail=f"PSI: {score}",
        )
    if score >= PERF_FAIR:
        return Finding(
            id="psi-mid",
            title="Performance needs work (PageSpeed Insights)",
            level=Level.RISKY,
            weight=-4,
            detail=f"PSI: {score}",
            fix="Improve LCP/CLS, trim JavaScript, optimize images and use caching",
        )
    return Finding(
        id="psi-bad",
        title="Poor performance (PageSpeed Insights)",
        level=Level.BAD,
        weight=-10,
        detail=f"PSI: {score}",
        fix="Fix the critical rendering path, compress and lazy-load images",
    )


VIEWPORT = Rule("viewport", viewport_content, judge_viewport)
LANG = Rule("lang", html_lang, judge_lang)
HREFLANG = Rule("hreflang", hreflang_count, judge_hreflang)
ROBOTS_TXT = Rule("robots_txt", has_robots_txt, judge_robots_txt)
SITEMAP = Rule("sitemap", has_sitemap, judge_sitemap)
PERFORMANCE = Rule("performance", perf_score, judge_perf)
