"""
Version helpers for regimen-contractus.
We keep a static __version__ (PEP 440); the contract clients report their own
on-chain versions separately via `version()`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Bump this when publishing
__version__ = "0.1.0"


@dataclass(frozen=True)
class VersionInfo:
    base: str
    user_agent: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.base if not self.user_agent else f"{self.base} ({self.user_agent})"


def default_user_agent() -> str:
    return f"regimen-contractus-py/{__version__}"


def version_info() -> VersionInfo:
    return VersionInfo(base=__version__, user_agent=default_user_agent())


__all__ = ["__version__", "VersionInfo", "default_user_agent", "version_info"]
