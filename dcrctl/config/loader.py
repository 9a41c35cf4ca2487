"""Configuration loading utilities."""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit, urlunsplit

from loguru import logger
from pydantic import ValidationError

from dcrctl.config.schema import AuthType, Config, TransportConfig
from dcrctl.utils.exceptions import ConfigError
from dcrctl.utils.helpers import app_data_dir, clean_and_expand_path

# Flag-style keys accepted in the config file, mapped to Config fields.
FLAG_KEY_ALIASES: dict[str, str] = {
    "s": "rpc_server",
    "rpcserver": "rpc_server",
    "u": "rpc_user",
    "rpcuser": "rpc_user",
    "P": "rpc_password",
    "rpcpass": "rpc_password",
    "c": "rpc_cert",
    "rpccert": "rpc_cert",
    "proxyuser": "proxy_user",
    "proxypass": "proxy_pass",
    "authtype": "auth_type",
    "clientcert": "client_cert",
    "clientkey": "client_key",
}

# (wallet, network) -> port
DEFAULT_PORTS: dict[tuple[bool, str], str] = {
    (False, "mainnet"): "9109",
    (False, "testnet"): "19109",
    (False, "simnet"): "19556",
    (True, "mainnet"): "9110",
    (True, "testnet"): "19110",
    (True, "simnet"): "19557",
}


def get_config_dir(home: Path | None = None) -> Path:
    """Get the dcrctl application data directory."""
    return app_data_dir("dcrctl", home=home)


def get_config_path(home: Path | None = None) -> Path:
    """Get the default configuration file path."""
    return get_config_dir(home) / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file, falling back to defaults.

    Args:
        config_path: Config file given on the command line. It must exist;
            the default path is only read when present.

    Returns:
        Loaded configuration object (environment variables fill the gaps).
    """
    path = config_path or get_config_path()
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"config file not found: {path}", field="config")
        return _build(Config, {})

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to load config from {path}: {e}", field="config") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a JSON object: {path}", field="config")
    logger.debug("Loaded config file {}", path)
    return _build(Config, _migrate_config(data))


def apply_overrides(config: Config, **overrides: Any) -> Config:
    """Overlay command-line values; None (and False for switches) means "not given".

    An empty string is a real value, so `-u ""` clears a user set in the file.
    """
    updates = {k: v for k, v in overrides.items() if v is not None and v is not False}
    if not updates:
        return config
    return _build(Config, {**config.model_dump(), **updates})


def build_transport_config(config: Config, *, home: Path | None = None) -> TransportConfig:
    """Finalize settings into the immutable snapshot used for one invocation."""
    if config.testnet and config.simnet:
        raise ConfigError(
            "the testnet and simnet params can't be used together -- choose one of the two",
            field="network",
        )

    rpc_cert = config.rpc_cert
    if not rpc_cert:
        wallet_cert = app_data_dir("dcrwallet", home=home) / "rpc.cert"
        chain_cert = app_data_dir("dcrd", home=home) / "rpc.cert"
        if config.wallet and wallet_cert.exists():
            rpc_cert = str(wallet_cert)
        elif chain_cert.exists():
            rpc_cert = str(chain_cert)

    client_cert, client_key = config.client_cert, config.client_key
    if config.auth_type is AuthType.CLIENT_CERT:
        client_cert = clean_and_expand_path(client_cert or str(get_config_dir(home) / "client.pem"))
        client_key = clean_and_expand_path(client_key or str(get_config_dir(home) / "client-key.pem"))

    return TransportConfig(
        server=normalize_server(config.rpc_server, default_port(config)),
        rpc_user=config.rpc_user,
        rpc_password=config.rpc_password,
        rpc_cert=clean_and_expand_path(rpc_cert),
        client_cert=client_cert,
        client_key=client_key,
        proxy=config.proxy,
        proxy_user=config.proxy_user,
        proxy_pass=config.proxy_pass,
        auth_type=config.auth_type,
        agent_eligible=not config.proxy,
        timeout=config.timeout,
    )


def default_port(config: Config) -> str:
    network = "testnet" if config.testnet else "simnet" if config.simnet else "mainnet"
    return DEFAULT_PORTS[(config.wallet, network)]


def normalize_server(server: str, port: str) -> str:
    """Ensure the server URL names a port, adding ``port`` when it does not.

    A bare host ("localhost", "10.0.0.2:19109") is treated as a wss:// URL
    with the /ws path.
    """
    raw = server.strip()
    if "://" not in raw:
        raw = f"wss://{raw}/ws"
    parsed = urlsplit(raw)
    if not parsed.hostname:
        raise ConfigError(f"invalid RPC server URL: {server!r}", field="rpc_server")
    try:
        has_port = parsed.port is not None
    except ValueError as e:
        raise ConfigError(f"invalid RPC server URL {server!r}: {e}", field="rpc_server") from e
    if has_port:
        return urlunsplit(parsed)
    host = parsed.hostname
    if ":" in host:
        host = f"[{host}]"
    userinfo = parsed.netloc.rpartition("@")[0]
    netloc = f"{userinfo}@{host}:{port}" if userinfo else f"{host}:{port}"
    return urlunsplit(parsed._replace(netloc=netloc))


def _build(model: type[Config], data: dict[str, Any]) -> Config:
    try:
        return model(**data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ConfigError(f"invalid configuration: {field}: {first.get('msg')}", field=field) from e


def _migrate_config(data: dict[str, Any]) -> dict[str, Any]:
    """Accept camelCase and flag-style keys; keep only keys Config knows."""
    converted: dict[str, Any] = {}
    for key, value in data.items():
        name = FLAG_KEY_ALIASES.get(key) or camel_to_snake(key)
        converted[name] = value
    allowed = set(Config.model_fields)
    return {k: v for k, v in converted.items() if k in allowed}


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)
