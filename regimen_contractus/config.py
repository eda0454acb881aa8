"""
SDK configuration: RPC endpoint, timeouts, receipt polling and artifact lookup.

- Loads sane defaults and supports overrides via environment variables (CONTRACTUS_*).
- `ClientOptions` carries the per-client construction options
  (address, debug, silent, signer_address, connection).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

from .version import default_user_agent

if TYPE_CHECKING:  # pragma: no cover
    from .rpc.connection import Connection

_DEFAULT_RPC = "http://127.0.0.1:8545"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    return v if v is not None else default


def _ensure_scheme(url: Optional[str], allowed: tuple[str, ...]) -> Optional[str]:
    if not url:
        return url
    lower = url.lower()
    if not any(lower.startswith(f"{sch}://") for sch in allowed):
        raise ValueError(f"URL must start with {allowed}, got: {url!r}")
    return url


def resolve_log_level(debug: bool = False, silent: bool = False) -> int:
    """
    Effective client log level: debug > silent > default.

    debug → DEBUG; silent → ERROR; default → ERROR (errors only).
    """
    if debug:
        return logging.DEBUG
    if silent:
        return logging.ERROR
    return logging.ERROR


@dataclass(slots=True)
class SDKConfig:
    # Core
    rpc_url: str = field(default_factory=lambda: _DEFAULT_RPC)
    # HTTP behavior (single attempt, no retries)
    request_timeout: float = 30.0
    # Receipt polling
    poll_interval: float = 0.25
    receipt_timeout: float = 120.0
    # Compiled contract artifacts (<dir>/<Name>.sol/<Name>.json)
    artifacts_dir: Optional[str] = None
    # Headers / identity
    user_agent: str = field(default_factory=default_user_agent)

    @classmethod
    def from_env(cls, prefix: str = "CONTRACTUS_") -> "SDKConfig":
        """
        Create config from environment variables:

        CONTRACTUS_RPC_URL          (http/https)
        CONTRACTUS_TIMEOUT          (float seconds, HTTP request)
        CONTRACTUS_POLL_INTERVAL    (float seconds between receipt polls)
        CONTRACTUS_RECEIPT_TIMEOUT  (float seconds before giving up on a receipt)
        CONTRACTUS_ARTIFACTS_DIR    (path to compiled artifacts)
        CONTRACTUS_USER_AGENT       (str)
        """
        rpc = _env(f"{prefix}RPC_URL", _DEFAULT_RPC)
        timeout = float(_env(f"{prefix}TIMEOUT", "30.0") or "30.0")
        poll = float(_env(f"{prefix}POLL_INTERVAL", "0.25") or "0.25")
        receipt_timeout = float(_env(f"{prefix}RECEIPT_TIMEOUT", "120.0") or "120.0")
        artifacts = _env(f"{prefix}ARTIFACTS_DIR", None)
        ua = _env(f"{prefix}USER_AGENT", default_user_agent())

        _ensure_scheme(rpc, ("http", "https"))

        return cls(
            rpc_url=rpc or _DEFAULT_RPC,
            request_timeout=timeout,
            poll_interval=poll,
            receipt_timeout=receipt_timeout,
            artifacts_dir=artifacts or None,
            user_agent=ua or default_user_agent(),
        )

    @classmethod
    def with_overrides(cls, base: Optional["SDKConfig"] = None, **overrides: Any) -> "SDKConfig":
        """
        Build from an existing config plus keyword overrides.
        Unknown keys are ignored.
        """
        base = base or cls.from_env()
        data = base.to_dict()
        data.update({k: v for k, v in overrides.items() if k in data})
        if "rpc_url" in overrides:
            _ensure_scheme(data["rpc_url"], ("http", "https"))
        return cls(**data)

    def http_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rpc_url": self.rpc_url,
            "request_timeout": float(self.request_timeout),
            "poll_interval": float(self.poll_interval),
            "receipt_timeout": float(self.receipt_timeout),
            "artifacts_dir": self.artifacts_dir,
            "user_agent": self.user_agent,
        }


@dataclass(frozen=True)
class ClientOptions:
    """Construction options shared by every contract client."""

    connection: "Connection"
    address: Optional[str] = None
    debug: bool = False
    silent: bool = False
    signer_address: Optional[str] = None

    @property
    def log_level(self) -> int:
        return resolve_log_level(self.debug, self.silent)

    def resolved_connection(self) -> "Connection":
        """The connection, re-bound to `signer_address` when one is given."""
        if self.signer_address:
            return self.connection.with_signer(self.signer_address)
        return self.connection


__all__ = ["SDKConfig", "ClientOptions", "resolve_log_level"]
