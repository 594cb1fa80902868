"""Score aggregation and bucket classification."""

from typing import Iterable

from .models import Finding, Level


BASELINE = 60  # neutral starting point before any rule fires
SCORE_FLOOR = 0
SCORE_CEILING = 100


def clamp(value: int, low: int = SCORE_FLOOR, high: int = SCORE_CEILING) -> int:
    return max(low, min(high, value))


def aggregate(findings: Iterable[Finding], baseline: int = BASELINE) -> int:
    """Baseline plus the sum of finding weights, clamped to 0-100."""
    return clamp(baseline + sum(f.weight for f in findings))


def classify(findings: Iterable[Finding]) -> dict[Level, tuple[Finding, ...]]:
    """Partition findings by level, keeping their original order."""
    buckets: dict[Level, list[Finding]] = {level: [] for level in Level}
    for finding in findings:
        buckets[finding.level].append(finding)
    return {level: tuple(items) for level, items in buckets.items()}
