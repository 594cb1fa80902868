"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass
from typing import Optional

from . import __version__


DEFAULT_TIMEOUT = 15.0
PSI_STRATEGIES = ("mobile", "desktop")


def default_user_agent() -> str:
    return f"SEO-Inspector/{__version__} (+https://github.com/seo-inspector/seo-inspector)"


@dataclass(frozen=True)
class Settings:
    """Process-wide, read-only configuration for one invocation."""
    psi_api_key: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    psi_strategy: str = "mobile"
    user_agent: str = default_user_agent()

    @property
    def psi_timeout(self) -> float:
        # PageSpeed Insights runs a full Lighthouse pass server-side
        return self.timeout * 4


def _read_timeout(raw: Optional[str]) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


def load_settings() -> Settings:
    """Build settings from environment variables."""
    strategy = os.getenv("SEO_INSPECTOR_PSI_STRATEGY", "mobile").strip().lower()
    if strategy not in PSI_STRATEGIES:
        strategy = "mobile"
    return Settings(
        psi_api_key=os.getenv("GOOGLE_PSI_API_KEY") or None,
        timeout=_read_timeout(os.getenv("SEO_INSPECTOR_TIMEOUT")),
        psi_strategy=strategy,
    )
