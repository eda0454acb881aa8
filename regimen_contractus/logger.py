"""
regimen_contractus.logger
-------------------------

Structured logging for the contract clients:
- JSON or concise colored text formats
- Context-local fields via `contextvars` (chain_id, contract, ...)
- Safe JSON serialization (bytes → hex, dataclasses → dict)
- An extra SUCCESS level (25) between INFO and WARNING
- `create_logger(level)` → a per-client adapter with debug/info/success/warn/error

Usage
-----
    from regimen_contractus import logger as clog

    clog.configure(json=False, level="DEBUG")  # once, in the application
    log = clog.create_logger("debug", name="regimen_contractus.Arbiter")
    log.success("attached", contract="0xabc...")

Each client gets its own adapter whose threshold comes from its `debug` /
`silent` options (see `config.resolve_log_level`); handlers decide where the
records end up. stdlib only.
"""

from __future__ import annotations

import datetime as _dt
import io
import json
import logging
import os
import sys
import traceback
import types
from contextvars import ContextVar
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, Optional, Tuple

LIBRARY_LOGGER = "regimen_contractus"

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

# ----------------------------
# Context
# ----------------------------

_LOG_CONTEXT: ContextVar[Dict[str, Any]] = ContextVar("_LOG_CONTEXT", default={})

DEFAULT_CONTEXT_KEYS = (
    "chain_id",
    "component",
    "contract",
    "signer",
)


def context() -> Dict[str, Any]:
    """Return a *copy* of the active logging context."""
    return dict(_LOG_CONTEXT.get())


def bind(**fields: Any) -> None:
    """Merge fields into the active context."""
    cur = dict(_LOG_CONTEXT.get())
    cur.update({k: _coerce_value(v) for k, v in fields.items()})
    _LOG_CONTEXT.set(cur)


def unbind(*keys: str) -> None:
    cur = dict(_LOG_CONTEXT.get())
    for k in keys:
        cur.pop(k, None)
    _LOG_CONTEXT.set(cur)


def clear_context() -> None:
    _LOG_CONTEXT.set({})


# ----------------------------
# JSON & Text formatters
# ----------------------------


class _SafeJSONEncoder(json.JSONEncoder):
    def default(self, o: Any) -> Any:  # type: ignore[override]
        if isinstance(o, (bytes, bytearray)):
            return "0x" + bytes(o).hex()
        if isinstance(o, (_dt.datetime, _dt.date)):
            return o.isoformat()
        if is_dataclass(o) and not isinstance(o, type):
            return asdict(o)
        return str(o)


def _utcnow_iso() -> str:
    return _dt.datetime.now(_dt.timezone.utc).isoformat(timespec="milliseconds")


_LEVEL_TO_INT = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "SUCCESS": SUCCESS,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    # client option aliases
    "SILENT": logging.ERROR,
    "NOTSET": logging.NOTSET,
}

ANSI = types.SimpleNamespace(
    RESET="\x1b[0m",
    BOLD="\x1b[1m",
    FG=types.SimpleNamespace(
        RED="\x1b[31m",
        GREEN="\x1b[32m",
        YELLOW="\x1b[33m",
        BLUE="\x1b[34m",
        MAGENTA="\x1b[35m",
        CYAN="\x1b[36m",
        GREY="\x1b[90m",
        WHITE="\x1b[37m",
    ),
)

_LEVEL_COLOR = {
    logging.DEBUG: ANSI.FG.GREY,
    logging.INFO: ANSI.FG.BLUE,
    SUCCESS: ANSI.FG.GREEN,
    logging.WARNING: ANSI.FG.YELLOW,
    logging.ERROR: ANSI.FG.RED,
    logging.CRITICAL: ANSI.BOLD + ANSI.FG.MAGENTA,
}

_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


def _supports_color(stream: Any) -> bool:
    try:
        return bool(stream.isatty()) and os.environ.get("NO_COLOR") is None
    except (AttributeError, ValueError):
        return False


def _coerce_value(v: Any) -> Any:
    # Keep basic JSON types as-is; coerce objects to readable forms.
    if v is None or isinstance(v, (bool, int, float, str, list, dict)):
        return v
    if isinstance(v, (bytes, bytearray)):
        return "0x" + bytes(v).hex()
    if isinstance(v, (_dt.datetime, _dt.date)):
        return v.isoformat()
    if is_dataclass(v) and not isinstance(v, type):
        return asdict(v)
    return str(v)


def _extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        k: v
        for k, v in record.__dict__.items()
        if not k.startswith("_") and k not in _RECORD_ATTRS
    }


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": _utcnow_iso(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update({k: _coerce_value(v) for k, v in context().items()})
        for k, v in _extras(record).items():
            if k not in payload:
                payload[k] = _coerce_value(v)

        if record.exc_info:
            payload["err"] = "".join(traceback.format_exception(*record.exc_info)).rstrip()

        return json.dumps(payload, cls=_SafeJSONEncoder, separators=(",", ":"))


class TextFormatter(logging.Formatter):
    """
    Human-friendly one-liner:
      2025-01-05T12:34:56.789Z | SUCCESS | regimen_contractus.Arbiter | contract=0xab.. | Arbiter#deploy: ...
    With colors when supported.
    """

    def __init__(self, stream: Any):
        super().__init__()
        self._color = _supports_color(stream)

    def format(self, record: logging.LogRecord) -> str:
        ts = _utcnow_iso()
        lvl = record.levelname
        name = record.name

        ctx = context()
        ctx_str = " ".join(f"{k}={ctx[k]}" for k in DEFAULT_CONTEXT_KEYS if ctx.get(k) is not None)

        extras_parts = [
            f"{k}={_coerce_value(v)}"
            for k, v in _extras(record).items()
            if k not in DEFAULT_CONTEXT_KEYS and k not in ctx
        ]
        extras = (" " + " ".join(extras_parts)) if extras_parts else ""

        if self._color:
            c = _LEVEL_COLOR.get(record.levelno, ANSI.FG.WHITE)
            lvl_s = f"{c}{lvl:<7}{ANSI.RESET}"
            name_s = f"{ANSI.FG.CYAN}{name}{ANSI.RESET}"
            ts_s = f"{ANSI.FG.GREY}{ts}{ANSI.RESET}"
            ctx_s = f"{ANSI.FG.GREY}{ctx_str}{ANSI.RESET}" if ctx_str else ""
        else:
            lvl_s = f"{lvl:<7}"
            name_s = name
            ts_s = ts
            ctx_s = ctx_str

        line = f"{ts_s} | {lvl_s} | {name_s}"
        if ctx_s:
            line += f" | {ctx_s}"
        if extras:
            line += extras
        line += f" | {record.getMessage()}"

        if record.exc_info:
            line += "\n" + "".join(traceback.format_exception(*record.exc_info)).rstrip()
        return line


# ----------------------------
# Public setup API
# ----------------------------

_AUTO_HANDLER_ATTR = "_contractus_auto"


def configure(
    *,
    json: Optional[bool] = None,
    level: str | int = "INFO",
    stream: Any = None,
    propagate_existing: bool = False,
) -> None:
    """
    Configure the root logger.

    Parameters
    ----------
    json : bool | None
        If None, determined by env CONTRACTUS_LOG_FORMAT=(json|text) and TTY detection.
    level : str | int
        Minimum log level for the console handler.
    stream : TextIO
        Stream for the console handler (default: stderr).
    propagate_existing : bool
        If True, leave existing handlers in place. Defaults to a fresh config.
    """
    stream = stream if stream is not None else sys.stderr
    chosen_json = _decide_json(json, stream)

    root = logging.getLogger()
    root.setLevel(_coerce_level(level))

    if not propagate_existing:
        for h in list(root.handlers):
            root.removeHandler(h)

    # Drop the fallback handler installed by create_logger, root owns output now.
    lib = logging.getLogger(LIBRARY_LOGGER)
    for h in list(lib.handlers):
        if getattr(h, _AUTO_HANDLER_ATTR, False):
            lib.removeHandler(h)

    console = logging.StreamHandler(stream)
    console.setLevel(_coerce_level(level))
    console.setFormatter(JSONFormatter() if chosen_json else TextFormatter(stream))
    root.addHandler(console)

    # Quiet noisy transports
    for noisy in ("httpx", "httpcore", "asyncio"):
        logging.getLogger(noisy).setLevel(max(_coerce_level(level), logging.WARNING))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a standard logger under the library namespace."""
    return logging.getLogger(name or LIBRARY_LOGGER)


class ContextAdapter(logging.LoggerAdapter):
    """
    LoggerAdapter that injects:
      - Adapter's .extra (constant fields)
      - kwargs passed via log(..., extra={'k': 'v'})
    Active contextvars are merged by the formatters.
    """

    def process(self, msg: Any, kwargs: Any) -> Tuple[Any, Any]:
        extra = kwargs.get("extra") or {}
        merged = {**(self.extra or {}), **extra} if isinstance(extra, dict) else dict(self.extra or {})
        kwargs["extra"] = merged
        return msg, kwargs


class ClientLogger(ContextAdapter):
    """
    Per-client adapter with its own threshold and a `success` method.

    The threshold gates records before they reach the underlying logger, so
    two clients sharing a logger name can run at different verbosity.
    """

    def __init__(self, logger: logging.Logger, threshold: int, extra: Optional[Dict[str, Any]] = None):
        super().__init__(logger, extra or {})
        self.threshold = threshold

    def isEnabledFor(self, level: int) -> bool:  # noqa: N802 - stdlib naming
        return level >= self.threshold and self.logger.isEnabledFor(level)

    def success(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(SUCCESS, msg, *args, **kwargs)

    def warn(self, msg: Any, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        self.log(logging.WARNING, msg, *args, **kwargs)


def create_logger(level: str | int = "error", name: Optional[str] = None, **fields: Any) -> ClientLogger:
    """
    Build a per-client logger.

    `level` accepts "debug" | "info" | "success" | "warn" | "error" | "silent"
    (silent keeps errors only) or a numeric level.
    """
    base = get_logger(name)
    lib = logging.getLogger(LIBRARY_LOGGER)
    if lib.level == logging.NOTSET:
        # Let the adapters decide; handlers still filter output.
        lib.setLevel(logging.DEBUG)
    _ensure_fallback_handler(lib)
    return ClientLogger(base, _coerce_level(level), {k: _coerce_value(v) for k, v in fields.items()})


# ----------------------------
# Internals
# ----------------------------


class _UntilRootConfigured(logging.Filter):
    """Pass records only while the root logger has no handlers of its own."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not logging.getLogger().handlers


def _ensure_fallback_handler(lib: logging.Logger) -> None:
    # Without any configured handler, emit text to stderr like a console logger would.
    # Once the application configures root (basicConfig, dictConfig, ...) root owns output.
    if logging.getLogger().handlers or lib.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(TextFormatter(sys.stderr))
    handler.addFilter(_UntilRootConfigured())
    setattr(handler, _AUTO_HANDLER_ATTR, True)
    lib.addHandler(handler)


def _coerce_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return _LEVEL_TO_INT.get(level.strip().upper(), logging.ERROR)


def _decide_json(json_flag: Optional[bool], stream: io.TextIOBase | Any) -> bool:
    if json_flag is not None:
        return json_flag
    env = os.environ.get("CONTRACTUS_LOG_FORMAT", "").strip().lower()
    if env in ("json", "text"):
        return env == "json"
    # Default: JSON when not interactive, text on a TTY
    return not _supports_color(stream)


__all__ = [
    "SUCCESS",
    "LIBRARY_LOGGER",
    "JSONFormatter",
    "TextFormatter",
    "ContextAdapter",
    "ClientLogger",
    "configure",
    "get_logger",
    "create_logger",
    "context",
    "bind",
    "unbind",
    "clear_context",
]
