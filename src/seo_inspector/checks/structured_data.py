"""Rule for JSON-LD structured data."""

from typing import Optional

from ..models import Finding, Level
from .base import AuditInput, Rule


def json_ld_count(inputs: AuditInput) -> int:
    return inputs.document.count('script[type="application/ld+json"]')


def judge_structured_data(count: int) -> Optional[Finding]:
    # Absence is not penalised; only presence earns points
    if not count:
        return None
    return Finding(
        id="schema",
        title="Structured data (JSON-LD)",
        level=Level.GOOD,
        weight=4,
        detail=f"{count} JSON-LD block(s), eligible for rich results",
    )


STRUCTURED_DATA = Rule("structured_data", json_ld_count, judge_structured_data)
