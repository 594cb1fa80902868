"""Rules for heading structure and image alt text."""

from typing import Optional

from ..models import Finding, Level
from .base import AuditInput, Rule


HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
MIN_HEADINGS = 3


def h1_count(inputs: AuditInput) -> int:
    return inputs.document.count("h1")


def heading_count(inputs: AuditInput) -> int:
    return sum(inputs.document.count(tag) for tag in HEADING_TAGS)


def images_without_alt(inputs: AuditInput) -> int:
    alts = inputs.document.all_attrs("img", "alt")
    return sum(1 for alt in alts if not (alt or "").strip())


def judge_h1(count: int) -> Finding:
    if count == 1:
        return Finding(
            id="h1-ok",
            title="Single H1 heading",
            level=Level.GOOD,
            weight=5,
            detail="Heading structure is sound",
        )
    if count == 0:
        return Finding(
            id="h1-missing",
            title="No H1 heading",
            level=Level.BAD,
            weight=-6,
            detail="The main topic of the page is unclear",
            fix="Add one H1 that states what the page is about",
        )
    return Finding(
        id="h1-many",
        title="Multiple H1 headings",
        level=Level.RISKY,
        weight=-3,
        detail=f"{count} H1 elements",
        fix="Use a single H1 and H2+ for subsections",
    )


def judge_image_alt(missing: int) -> Finding:
    if missing == 0:
        return Finding(
            id="alt-ok",
            title="All images have alt text",
            level=Level.GOOD,
            weight=4,
            detail="No images are missing alt text",
        )
    return Finding(
        id="alt-missing",
        title="Images without alt text",
        level=Level.RISKY,
        weight=-3,
        detail=f"{missing} image(s) without alt text",
        fix="Give meaningful images a descriptive alt attribute",
    )


def judge_headings(total: int) -> Optional[Finding]:
    if total >= MIN_HEADINGS:
        return None
    return Finding(
        id="headings-few",
        title="Few headings",
        level=Level.RISKY,
        weight=-2,
        detail=f"{total} heading(s) in total",
        fix="Break content into sections with H2/H3 headings",
    )


H1 = Rule("h1", h1_count, judge_h1)
IMAGE_ALT = Rule("image_alt", images_without_alt, judge_image_alt)
HEADINGS = Rule("headings", heading_count, judge_headings)
