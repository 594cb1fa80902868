"""SEO Inspector - heuristic SEO health audit for a single web page."""

__version__ = "1.0.0"

from .auditor import audit, audit_url
from .exceptions import AuditError, EmptyDocument, FetchFailed, InvalidAddress
from .models import AuditReport, Finding, Level, PageMeta

__all__ = [
    "__version__",
    "audit",
    "audit_url",
    "AuditError",
    "EmptyDocument",
    "FetchFailed",
    "InvalidAddress",
    "AuditReport",
    "Finding",
    "Level",
    "PageMeta",
]
