"""Audit rules for SEO health, in execution order."""

from .base import AuditInput, Rule
from .content_structure import H1, HEADINGS, IMAGE_ALT
from .meta_tags import (
    CANONICAL,
    DESCRIPTION,
    NOFOLLOW,
    NOINDEX,
    OG_IMAGE,
    TITLE,
    TWITTER_CARD,
)
from .structured_data import STRUCTURED_DATA
from .technical import HREFLANG, LANG, PERFORMANCE, ROBOTS_TXT, SITEMAP, VIEWPORT

RULES: tuple[Rule, ...] = (
    TITLE,
    DESCRIPTION,
    NOINDEX,
    NOFOLLOW,
    H1,
    CANONICAL,
    VIEWPORT,
    LANG,
    HREFLANG,
    IMAGE_ALT,
    STRUCTURED_DATA,
    HEADINGS,
    OG_IMAGE,
    TWITTER_CARD,
    ROBOTS_TXT,
    SITEMAP,
    PERFORMANCE,
)

__all__ = ["AuditInput", "Rule", "RULES"]
