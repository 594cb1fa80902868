"""Errors raised while acquiring a page for audit."""

from typing import Optional


class AuditError(Exception):
    """Base class for failures that prevent an audit from running."""

    exit_code = 1


class InvalidAddress(AuditError):
    """The supplied address cannot be turned into an absolute http(s) URL."""

    exit_code = 2

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Invalid URL: {address!r}")


class FetchFailed(AuditError):
    """The page could not be retrieved."""

    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        super().__init__(message)


class EmptyDocument(FetchFailed):
    """The page was retrieved but had no body."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Empty response body from {url}")
