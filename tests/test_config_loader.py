"""Tests for dcrctl.config loading and finalization."""

import json

import pytest

from dcrctl.config import AuthType, Config, apply_overrides, build_transport_config, load_config, normalize_server
from dcrctl.config.loader import camel_to_snake, get_config_path
from dcrctl.utils.exceptions import ConfigError


def _write_config(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_defaults_without_file():
    config = load_config()
    assert config.rpc_server == "wss://localhost/ws"
    assert config.auth_type is AuthType.BASIC


def test_file_accepts_camel_and_flag_keys():
    _write_config(get_config_path(), {"rpcUser": "alice", "rpcpass": "secret", "authtype": "ClientCert"})
    config = load_config()
    assert config.rpc_user == "alice"
    assert config.rpc_password == "secret"
    assert config.auth_type is AuthType.CLIENT_CERT


def test_env_fills_fields_missing_from_file(monkeypatch):
    _write_config(get_config_path(), {"rpcUser": "alice"})
    monkeypatch.setenv("DCRCTL_RPC_USER", "bob")
    monkeypatch.setenv("DCRCTL_PROXY", "127.0.0.1:9050")
    config = load_config()
    assert config.rpc_user == "alice"
    assert config.proxy == "127.0.0.1:9050"


def test_explicit_missing_file_is_error(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.json")


def test_invalid_json_is_error(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_invalid_value_is_error(tmp_path):
    path = _write_config(tmp_path / "c.json", {"timeout": -1})
    with pytest.raises(ConfigError) as exc_info:
        load_config(path)
    assert exc_info.value.details["field"] == "timeout"


def test_overrides_only_apply_given_values():
    base = Config(rpc_user="alice", testnet=True)
    merged = apply_overrides(base, rpc_user=None, rpc_password="pw", testnet=False, wallet=True)
    assert merged.rpc_user == "alice"
    assert merged.rpc_password == "pw"
    assert merged.testnet is True
    assert merged.wallet is True


def test_empty_override_clears_file_value():
    base = Config(rpc_user="alice", proxy="127.0.0.1:9050")
    merged = apply_overrides(base, rpc_user="", proxy="")
    assert merged.rpc_user == ""
    assert merged.proxy == ""
    assert build_transport_config(merged).agent_eligible is True


def test_camel_to_snake():
    assert camel_to_snake("rpcServer") == "rpc_server"
    assert camel_to_snake("proxyUser") == "proxy_user"


@pytest.mark.parametrize(
    ("flags", "port"),
    [
        ({}, "9109"),
        ({"testnet": True}, "19109"),
        ({"simnet": True}, "19556"),
        ({"wallet": True}, "9110"),
        ({"wallet": True, "testnet": True}, "19110"),
        ({"wallet": True, "simnet": True}, "19557"),
    ],
)
def test_default_ports(flags, port):
    transport = build_transport_config(Config(**flags))
    assert transport.server == f"wss://localhost:{port}/ws"


def test_explicit_port_kept():
    assert normalize_server("wss://10.0.0.1:1234/ws", "9109") == "wss://10.0.0.1:1234/ws"


def test_bare_host_gets_scheme_and_path():
    assert normalize_server("node.example", "9109") == "wss://node.example:9109/ws"


def test_ipv6_host():
    assert normalize_server("wss://[::1]/ws", "9109") == "wss://[::1]:9109/ws"


def test_testnet_and_simnet_conflict():
    with pytest.raises(ConfigError):
        build_transport_config(Config(testnet=True, simnet=True))


def test_default_cert_prefers_wallet(isolated_home):
    (isolated_home / ".dcrd").mkdir()
    (isolated_home / ".dcrd" / "rpc.cert").write_text("dcrd", encoding="utf-8")
    (isolated_home / ".dcrwallet").mkdir()
    (isolated_home / ".dcrwallet" / "rpc.cert").write_text("wallet", encoding="utf-8")

    assert build_transport_config(Config(wallet=True)).rpc_cert.endswith(".dcrwallet/rpc.cert")
    assert build_transport_config(Config()).rpc_cert.endswith(".dcrd/rpc.cert")


def test_no_default_cert_when_absent():
    assert build_transport_config(Config()).rpc_cert == ""


def test_clientcert_defaults(isolated_home):
    transport = build_transport_config(Config(auth_type="clientcert"))
    assert transport.client_cert == str(isolated_home / ".dcrctl" / "client.pem")
    assert transport.client_key == str(isolated_home / ".dcrctl" / "client-key.pem")


def test_proxy_disables_agent():
    assert build_transport_config(Config()).agent_eligible is True
    assert build_transport_config(Config(proxy="127.0.0.1:9050")).agent_eligible is False


def test_cert_path_expanded(isolated_home):
    transport = build_transport_config(Config(rpc_cert="~/certs/../rpc.cert"))
    assert transport.rpc_cert == str(isolated_home / "rpc.cert")
