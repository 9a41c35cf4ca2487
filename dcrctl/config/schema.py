"""Configuration schema using Pydantic.

``Config`` holds the user-facing settings as read from the config file,
DCRCTL_* environment variables and command-line flags. ``TransportConfig`` is
the finalized, immutable snapshot the transport layer consumes.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthType(str, Enum):
    """Authentication method presented to the RPC server."""
    BASIC = "basic"
    CLIENT_CERT = "clientcert"


class Config(BaseSettings):
    """Root configuration for dcrctl."""
    rpc_server: str = "wss://localhost/ws"
    wallet: bool = False  # Default to the wallet server's ports and certificate
    testnet: bool = False
    simnet: bool = False
    rpc_user: str = ""
    rpc_password: str = ""
    rpc_cert: str = ""  # CA certificate; the system trust store is used when empty
    proxy: str = ""  # SOCKS5 proxy, host:port
    proxy_user: str = ""
    proxy_pass: str = ""
    auth_type: AuthType = AuthType.BASIC
    client_cert: str = ""
    client_key: str = ""
    timeout: float = 0.0  # Seconds for dial + call; 0 waits forever

    model_config = SettingsConfigDict(
        env_prefix="DCRCTL_",
        extra="ignore",
    )

    @field_validator("auth_type", mode="before")
    @classmethod
    def _empty_auth_type_is_basic(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return AuthType.BASIC
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("timeout")
    @classmethod
    def _non_negative_timeout(cls, value: float) -> float:
        if value < 0:
            raise ValueError("timeout must not be negative")
        return value


class TransportConfig(BaseModel):
    """Immutable per-invocation transport settings."""
    server: str  # ws:// or wss:// URL with an explicit host:port
    rpc_user: str = ""
    rpc_password: str = ""
    rpc_cert: str = ""
    client_cert: str = ""
    client_key: str = ""
    proxy: str = ""
    proxy_user: str = ""
    proxy_pass: str = ""
    auth_type: AuthType = AuthType.BASIC
    agent_eligible: bool = True
    timeout: float = 0.0

    model_config = ConfigDict(frozen=True)

    @property
    def uses_tls(self) -> bool:
        return self.server.lower().startswith("wss://")

    @property
    def has_credentials(self) -> bool:
        return bool(self.rpc_user or self.rpc_password)
