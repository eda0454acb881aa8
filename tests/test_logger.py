import contextlib
import io
import json
import logging

import pytest

from regimen_contractus import logger as log_mod
from regimen_contractus.logger import SUCCESS, JSONFormatter, TextFormatter, create_logger


def test_threshold_gates_records(caplog):
    caplog.set_level(logging.DEBUG)
    quiet = create_logger("error", name="regimen_contractus.test.quiet")
    quiet.debug("hidden")
    quiet.info("hidden")
    quiet.error("shown")
    messages = [r.getMessage() for r in caplog.records if r.name == "regimen_contractus.test.quiet"]
    assert messages == ["shown"]


def test_debug_logger_emits_everything(caplog):
    caplog.set_level(logging.DEBUG)
    loud = create_logger("debug", name="regimen_contractus.test.loud")
    loud.debug("d")
    loud.info("i")
    loud.success("s")
    loud.warn("w")
    loud.error("e")
    levels = [r.levelno for r in caplog.records if r.name == "regimen_contractus.test.loud"]
    assert levels == [logging.DEBUG, logging.INFO, SUCCESS, logging.WARNING, logging.ERROR]


def test_silent_keeps_errors_only(caplog):
    caplog.set_level(logging.DEBUG)
    silent = create_logger("silent", name="regimen_contractus.test.silent")
    silent.warning("nope")
    silent.error("yes")
    assert [r.getMessage() for r in caplog.records if r.name == "regimen_contractus.test.silent"] == ["yes"]


def test_constant_fields_are_attached(caplog):
    caplog.set_level(logging.DEBUG)
    lg = create_logger("debug", name="regimen_contractus.test.fields", contract="Arbiter")
    lg.info("hello")
    rec = [r for r in caplog.records if r.name == "regimen_contractus.test.fields"][0]
    assert rec.contract == "Arbiter"


def _record(msg: str, level: int = logging.INFO, **extra) -> logging.LogRecord:
    rec = logging.LogRecord("regimen_contractus.x", level, __file__, 1, msg, (), None)
    for k, v in extra.items():
        setattr(rec, k, v)
    return rec


def test_json_formatter_includes_context_and_extras():
    log_mod.bind(chain_id=31337)
    try:
        out = json.loads(JSONFormatter().format(_record("hi", contract="Sigillum", data=b"\x01")))
    finally:
        log_mod.clear_context()
    assert out["msg"] == "hi"
    assert out["level"] == "INFO"
    assert out["chain_id"] == 31337
    assert out["contract"] == "Sigillum"
    assert out["data"] == "0x01"


def test_text_formatter_without_tty_has_no_color():
    line = TextFormatter(io.StringIO()).format(_record("plain", SUCCESS))
    assert "\x1b[" not in line
    assert "SUCCESS" in line and line.endswith("| plain")


@pytest.mark.parametrize("env,expected", [("json", True), ("text", False)])
def test_configure_picks_format_from_env(monkeypatch, env, expected):
    monkeypatch.setenv("CONTRACTUS_LOG_FORMAT", env)
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    stream = io.StringIO()
    try:
        log_mod.configure(level="INFO", stream=stream)
        handler = root.handlers[-1]
        assert isinstance(handler.formatter, JSONFormatter) is expected
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])


@contextlib.contextmanager
def bare_root():
    """Root logger without handlers, as in an application that has not configured logging."""
    root = logging.getLogger()
    saved = list(root.handlers)
    for h in saved:
        root.removeHandler(h)
    try:
        yield root
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved:
            root.addHandler(h)


def test_fallback_handler_prints_when_root_is_bare(capsys):
    with bare_root():
        lg = create_logger("error", name="regimen_contractus.test.fallback")
        lg.error("Arbiter#propose: boom")
    assert capsys.readouterr().err.count("Arbiter#propose: boom") == 1


def test_fallback_handler_yields_to_root_configured_later(capsys):
    app_stream = io.StringIO()
    with bare_root() as root:
        lg = create_logger("error", name="regimen_contractus.test.later")
        root.addHandler(logging.StreamHandler(app_stream))
        lg.error("Arbiter#propose: boom")

    assert "boom" not in capsys.readouterr().err
    assert app_stream.getvalue().count("Arbiter#propose: boom") == 1
