"""Rules for head meta tags: title, description, robots, canonical, social."""

from typing import Optional

from ..document import clean_text
from ..models import Finding, Level
from .base import AuditInput, Rule


TITLE_MAX = 60
DESCRIPTION_MIN = 50
DESCRIPTION_MAX = 160


def page_title(inputs: AuditInput) -> str:
    # Lengths count the trimmed text as authored; only metadata is collapsed
    return (inputs.document.first_text("head title") or "").strip()


def meta_description(inputs: AuditInput) -> str:
    return (inputs.document.first_attr('meta[name="description"]', "content") or "").strip()


def meta_robots(inputs: AuditInput) -> str:
    return clean_text(inputs.document.first_attr('meta[name="robots"]', "content")).lower()


def canonical_href(inputs: AuditInput) -> str:
    return clean_text(inputs.document.first_attr('link[rel="canonical"]', "href"))


def og_image(inputs: AuditInput) -> str:
    return clean_text(inputs.document.first_attr('meta[property="og:image"]', "content"))


def twitter_card(inputs: AuditInput) -> str:
    return clean_text(inputs.document.first_attr('meta[name="twitter:card"]', "content"))


def twitter_image(inputs: AuditInput) -> str:
    return clean_text(inputs.document.first_attr('meta[name="twitter:image"]', "content"))


def judge_title(title: str) -> Finding:
    if not title:
        return Finding(
            id="title-missing",
            title="Missing page title",
            level=Level.BAD,
            weight=-10,
            detail="No <title> found",
            fix="Add a clear, descriptive <title> to the page",
        )
    if len(title) > TITLE_MAX:
        return Finding(
            id="title-long",
            title="Title too long",
            level=Level.BAD,
            weight=-6,
            detail=f"{len(title)} chars",
            fix="Keep the title to roughly 50-60 characters",
        )
    return Finding(
        id="title-ok",
        title="Title length is good",
        level=Level.GOOD,
        weight=6,
        detail=f"{len(title)} chars",
    )


def judge_description(description: str) -> Finding:
    if not description:
        return Finding(
            id="desc-missing",
            title="Missing meta description",
            level=Level.BAD,
            weight=-8,
            detail='No <meta name="description"> found',
            fix="Add a meta description; search results without one tend to get fewer clicks",
        )
    if DESCRIPTION_MIN <= len(description) <= DESCRIPTION_MAX:
        return Finding(
            id="desc-ok",
            title="Meta description length is good",
            level=Level.GOOD,
            weight=6,
            detail=f"{len(description)} chars",
        )
    return Finding(
        id="desc-subopt",
        title="Meta description length is not optimal",
        level=Level.RISKY,
        weight=-3,
        detail=f"{len(description)} chars",
        fix=f"Adjust to {DESCRIPTION_MIN}-{DESCRIPTION_MAX} characters",
    )


def judge_noindex(robots: str) -> Optional[Finding]:
    if "noindex" not in robots:
        return None
    return Finding(
        id="noindex",
        title="Page is marked noindex",
        level=Level.RISKY,
        weight=-15,
        detail=f"robots: {robots}",
        fix="Confirm this page really should be kept out of search indexes",
    )


def judge_nofollow(robots: str) -> Optional[Finding]:
    if "nofollow" not in robots:
        return None
    return Finding(
        id="nofollow",
        title="Page is marked nofollow",
        level=Level.RISKY,
        weight=-4,
        detail=f"robots: {robots}",
        fix="nofollow stops link equity flowing through internal links",
    )


def judge_canonical(href: str) -> Finding:
    if href:
        return Finding(
            id="canonical",
            title="Canonical URL set",
            level=Level.GOOD,
            weight=4,
            detail=href,
        )
    return Finding(
        id="canonical-missing",
        title="No canonical URL",
        level=Level.RISKY,
        weight=-3,
        detail="Recommended to avoid duplicate content",
        fix="Add <link rel=\"canonical\" href=\"...\">",
    )


def judge_og_image(image: str) -> Finding:
    if image:
        return Finding(
            id="og-image",
            title="Open Graph image set",
            level=Level.GOOD,
            weight=3,
            detail=image,
        )
    return Finding(
        id="og-image-missing",
        title="No Open Graph image",
        level=Level.RISKY,
        weight=-2,
        detail="Shared links will be less visible on social platforms",
        fix="Add <meta property=\"og:image\" content=\"...\">",
    )


def judge_twitter_card(card: str) -> Optional[Finding]:
    if not card:
        return None
    return Finding(
        id="tw-card",
        title="Twitter card declared",
        level=Level.INFO,
        weight=1,
        detail=card,
    )


TITLE = Rule("title", page_title, judge_title)
DESCRIPTION = Rule("description", meta_description, judge_description)
NOINDEX = Rule("noindex", meta_robots, judge_noindex)
NOFOLLOW = Rule("nofollow", meta_robots, judge_nofollow)
CANONICAL = Rule("canonical", canonical_href, judge_canonical)
OG_IMAGE = Rule("og_image", og_image, judge_og_image)
TWITTER_CARD = Rule("twitter_card", twitter_card, judge_twitter_card)
