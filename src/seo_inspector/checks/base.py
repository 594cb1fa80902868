"""Rule descriptors shared by every check module."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..document import PageDocument
from ..models import Finding


@dataclass(frozen=True)
class AuditInput:
    """Everything a rule may look at for one audit run."""
    document: PageDocument
    final_url: str
    robots_text: Optional[str] = None
    sitemap_text: Optional[str] = None
    perf_score: Optional[int] = None


@dataclass(frozen=True)
class Rule:
    """One independent check: extract a signal, then judge it.

    ``judge`` returns at most one Finding; ``None`` means the rule has
    nothing to report for this page.
    """
    name: str
    signal: Callable[[AuditInput], Any]
    judge: Callable[[Any], Optional[Finding]]

    def evaluate(self, inputs: AuditInput) -> Optional[Finding]:
        return self.judge(self.signal(inputs))
