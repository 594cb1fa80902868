"""Data models for SEO audit results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Level(Enum):
    """Classification bucket for audit findings."""
    GOOD = "good"
    BAD = "bad"
    RISKY = "risky"
    INFO = "info"


@dataclass(frozen=True)
class Finding:
    """A single rule outcome."""
    id: str
    title: str
    level: Level
    weight: int  # signed contribution to the score
    detail: str
    fix: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "level": self.level.value,
            "weight": self.weight,
            "detail": self.detail,
        }
        if self.fix:
            data["fix"] = self.fix
        return data


@dataclass(frozen=True)
class PageMeta:
    """Metadata extracted from the audited page."""
    final_url: str  # After redirects
    title: Optional[str] = None
    description: Optional[str] = None
    og_image: Optional[str] = None
    twitter_image: Optional[str] = None
    canonical: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data = {
            "title": self.title,
            "description": self.description,
            "ogImage": self.og_image,
            "twitterImage": self.twitter_image,
            "canonical": self.canonical,
            "finalUrl": self.final_url,
        }
        return {k: v for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class AuditReport:
    """Complete audit result for a page."""
    score: int  # 0-100
    meta: PageMeta
    findings: tuple[Finding, ...] = field(default_factory=tuple)  # check order
    good: tuple[Finding, ...] = field(default_factory=tuple)
    bad: tuple[Finding, ...] = field(default_factory=tuple)
    risky: tuple[Finding, ...] = field(default_factory=tuple)
    info: tuple[Finding, ...] = field(default_factory=tuple)

    @property
    def top_fixes(self) -> list[Finding]:
        """Get the most costly fixable findings, worst first."""
        fixable = [
            f for f in self.findings
            if f.level in (Level.BAD, Level.RISKY) and f.fix
        ]
        return sorted(fixable, key=lambda f: f.weight)[:5]

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "good": [f.to_dict() for f in self.good],
            "bad": [f.to_dict() for f in self.bad],
            "risky": [f.to_dict() for f in self.risky],
            "info": [f.to_dict() for f in self.info],
            "meta": self.meta.to_dict(),
        }
