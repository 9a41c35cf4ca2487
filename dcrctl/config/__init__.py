"""Configuration module for dcrctl."""

from dcrctl.config.loader import (
    apply_overrides,
    build_transport_config,
    get_config_path,
    load_config,
    normalize_server,
)
from dcrctl.config.schema import AuthType, Config, TransportConfig

__all__ = [
    "AuthType",
    "Config",
    "TransportConfig",
    "apply_overrides",
    "build_transport_config",
    "get_config_path",
    "load_config",
    "normalize_server",
]
