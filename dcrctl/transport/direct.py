"""Direct WebSocket transport (optionally TLS, optionally through SOCKS5)."""

from __future__ import annotations

import base64
import ssl
from typing import Any, Callable

from loguru import logger
from websocket import (
    WebSocketException,
    WebSocketTimeoutException,
    create_connection,
)

from dcrctl.config.schema import AuthType, TransportConfig
from dcrctl.rpc.protocol import RpcRequest, RpcResponse, decode_response
from dcrctl.transport.base import RawResult
from dcrctl.transport.context import CallContext
from dcrctl.utils.exceptions import DialError, TransportError, sanitize_error_message


def build_ssl_context(config: TransportConfig) -> ssl.SSLContext:
    """TLS context for the dial.

    A configured CA certificate becomes the only trust root; otherwise the
    system store is used. The client certificate is presented whenever the
    auth type is clientcert.
    """
    try:
        if config.rpc_cert:
            ctx = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
            ctx.load_verify_locations(cafile=config.rpc_cert)
        else:
            ctx = ssl.create_default_context()
        if config.auth_type is AuthType.CLIENT_CERT:
            ctx.load_cert_chain(certfile=config.client_cert, keyfile=config.client_key or None)
    except (OSError, ValueError) as e:
        raise DialError(f"failed to load TLS credentials: {e}") from e
    return ctx


def proxy_options(config: TransportConfig) -> dict[str, Any]:
    """websocket-client keyword arguments routing the dial through SOCKS5."""
    if not config.proxy:
        return {}
    host, sep, port = config.proxy.rpartition(":")
    if not sep or not host:
        raise DialError(f"invalid proxy address {config.proxy!r}: missing port")
    try:
        port_num = int(port)
    except ValueError as e:
        raise DialError(f"invalid proxy address {config.proxy!r}: bad port") from e
    options: dict[str, Any] = {
        "http_proxy_host": host.strip("[]"),
        "http_proxy_port": port_num,
        "proxy_type": "socks5h",
    }
    if config.proxy_user or config.proxy_pass:
        options["http_proxy_auth"] = (config.proxy_user, config.proxy_pass)
    return options


def auth_header(config: TransportConfig) -> list[str]:
    if config.auth_type is not AuthType.BASIC or not config.has_credentials:
        return []
    token = base64.b64encode(f"{config.rpc_user}:{config.rpc_password}".encode()).decode("ascii")
    return [f"Authorization: Basic {token}"]


class DirectCaller:
    """One WebSocket connection carrying a single request/response exchange."""

    def __init__(self, config: TransportConfig, *, connect: Callable[..., Any] = create_connection):
        self.config = config
        self._connect = connect
        self._ws: Any = None

    def dial(self, ctx: CallContext) -> "DirectCaller":
        ctx.check()
        kwargs: dict[str, Any] = {"header": auth_header(self.config), **proxy_options(self.config)}
        if self.config.uses_tls:
            kwargs["sslopt"] = {"context": build_ssl_context(self.config)}
        timeout = ctx.remaining()
        if timeout is not None:
            kwargs["timeout"] = max(0.01, timeout)
        logger.debug(
            "Dialing {} (tls={}, proxy={})",
            sanitize_error_message(self.config.server),
            self.config.uses_tls,
            bool(self.config.proxy),
        )
        try:
            with ctx.interruptible():
                self._ws = self._connect(self.config.server, **kwargs)
        except (WebSocketException, OSError, ValueError) as e:
            raise DialError(f"failed to connect to {self.config.server}: {sanitize_error_message(str(e))}") from e
        if ctx.error() is not None:
            self.close()
            ctx.check()
        return self

    def call(self, ctx: CallContext, method: str, result: RawResult, *params: Any) -> None:
        if self._ws is None:
            raise TransportError("connection is not established")
        ctx.check()
        request = RpcRequest(method=method, params=tuple(params))
        frame = request.encode()
        try:
            self._ws.send(frame)
        except (WebSocketException, OSError) as e:
            raise TransportError(f"failed to send request: {e}") from e
        response = self._wait_response(ctx, request.id)
        response.raise_for_error()
        result.raw = response.result

    def _wait_response(self, ctx: CallContext, request_id: int) -> RpcResponse:
        while True:
            ctx.check()
            self._ws.settimeout(ctx.poll_timeout())
            try:
                frame = self._ws.recv()
            except WebSocketTimeoutException:
                continue
            except (WebSocketException, OSError) as e:
                raise TransportError(f"connection lost: {e}") from e
            if not frame:
                raise TransportError("connection closed before a response was received")
            response = decode_response(frame)
            if response.id != request_id:
                logger.debug("Skipping frame with id {!r}", response.id)
                continue
            logger.debug("Received response ({} bytes)", len(frame))
            return response

    def close(self) -> None:
        if self._ws is None:
            return
        ws, self._ws = self._ws, None
        try:
            ws.close()
        except (WebSocketException, OSError) as e:
            logger.debug("Error closing connection: {}", e)

    def __enter__(self) -> "DirectCaller":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
