import logging
import os
import subprocess
import sys

import pytest
from conftest import FakeConnection

from regimen_contractus.config import ClientOptions, SDKConfig, resolve_log_level
from regimen_contractus.version import default_user_agent


def test_from_env_defaults(monkeypatch):
    for k in ("RPC_URL", "TIMEOUT", "POLL_INTERVAL", "RECEIPT_TIMEOUT", "ARTIFACTS_DIR", "USER_AGENT"):
        monkeypatch.delenv(f"CONTRACTUS_{k}", raising=False)
    cfg = SDKConfig.from_env()
    assert cfg.rpc_url == "http://127.0.0.1:8545"
    assert cfg.request_timeout == 30.0
    assert cfg.receipt_timeout == 120.0
    assert cfg.artifacts_dir is None
    assert cfg.user_agent == default_user_agent()


def test_from_env_reads_overrides(monkeypatch):
    monkeypatch.setenv("CONTRACTUS_RPC_URL", "https://rpc.example.org")
    monkeypatch.setenv("CONTRACTUS_TIMEOUT", "5")
    monkeypatch.setenv("CONTRACTUS_POLL_INTERVAL", "0.5")
    monkeypatch.setenv("CONTRACTUS_RECEIPT_TIMEOUT", "9")
    monkeypatch.setenv("CONTRACTUS_ARTIFACTS_DIR", "/tmp/out")
    cfg = SDKConfig.from_env()
    assert cfg.rpc_url == "https://rpc.example.org"
    assert cfg.request_timeout == 5.0
    assert cfg.poll_interval == 0.5
    assert cfg.receipt_timeout == 9.0
    assert cfg.artifacts_dir == "/tmp/out"


def test_rejects_non_http_scheme(monkeypatch):
    monkeypatch.setenv("CONTRACTUS_RPC_URL", "ws://127.0.0.1:8546")
    with pytest.raises(ValueError):
        SDKConfig.from_env()


def test_with_overrides_ignores_unknown_keys():
    base = SDKConfig(rpc_url="http://a:1")
    cfg = SDKConfig.with_overrides(base, request_timeout=2.5, nonsense=1)
    assert cfg.request_timeout == 2.5
    assert cfg.rpc_url == "http://a:1"
    assert "nonsense" not in cfg.to_dict()
    assert "log_format" not in SDKConfig.with_overrides(base, log_format="json").to_dict()
    with pytest.raises(ValueError):
        SDKConfig.with_overrides(base, rpc_url="ftp://nope")


def test_http_headers_carry_user_agent():
    cfg = SDKConfig(user_agent="ua/1")
    assert cfg.http_headers()["User-Agent"] == "ua/1"


@pytest.mark.parametrize(
    "debug,silent,expected",
    [
        (True, False, logging.DEBUG),
        (True, True, logging.DEBUG),
        (False, True, logging.ERROR),
        (False, False, logging.ERROR),
    ],
)
def test_resolve_log_level_precedence(debug, silent, expected):
    assert resolve_log_level(debug, silent) == expected


def test_client_options_rebinds_signer():
    conn = FakeConnection()
    plain = ClientOptions(connection=conn)
    assert plain.resolved_connection() is conn

    rebound = ClientOptions(connection=conn, signer_address="0x" + "BB" * 20).resolved_connection()
    assert rebound is not conn
    assert rebound.signer == "0x" + "bb" * 20
    assert ClientOptions(connection=conn, debug=True).log_level == logging.DEBUG


@pytest.mark.parametrize(
    "var,value",
    [("CONTRACTUS_RPC_URL", "ws://127.0.0.1:8546"), ("CONTRACTUS_TIMEOUT", "soon")],
)
def test_import_does_not_read_environment(var, value):
    env = dict(os.environ, **{var: value})
    proc = subprocess.run(
        [sys.executable, "-c", "import regimen_contractus, regimen_contractus.config as c; assert not hasattr(c, 'DEFAULT')"],
        env=env,
        capture_output=True,
        text=True,
    )
    assert proc.returncode == 0, proc.stderr
