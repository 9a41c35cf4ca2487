"""Transport through a local agent holding an authenticated connection."""

from __future__ import annotations

import json
import os
import socket
from pathlib import Path
from typing import Any, Callable, Mapping

from loguru import logger

from dcrctl.config.schema import TransportConfig
from dcrctl.rpc.protocol import RpcRequest, decode_response
from dcrctl.transport.base import RawResult
from dcrctl.transport.context import CallContext
from dcrctl.utils.exceptions import CallCancelledError, DialError, EncodingError, TransportError

AGENT_ENV = "WSRPC_AGENT"
MAX_LINE_BYTES = 64 * 1024 * 1024


def discover_agent(environ: Mapping[str, str] | None = None) -> str | None:
    """Path of the agent socket advertised in the environment, if any."""
    env = os.environ if environ is None else environ
    path = (env.get(AGENT_ENV) or "").strip()
    return path or None


def _unix_socket() -> socket.socket:
    return socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)


class AgentCaller:
    """Line-delimited JSON client for the agent socket.

    Each request line carries the server address, credentials and optional
    root certificate; the agent owns the WebSocket connection.
    """

    def __init__(
        self,
        config: TransportConfig,
        socket_path: str,
        *,
        socket_factory: Callable[[], Any] = _unix_socket,
    ):
        self.config = config
        self.socket_path = socket_path
        self._socket_factory = socket_factory
        self._sock: Any = None
        self._root_cert = ""
        self._buffer = b""

    def dial(self, ctx: CallContext) -> "AgentCaller":
        ctx.check()
        if self.config.rpc_cert:
            try:
                self._root_cert = Path(self.config.rpc_cert).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise DialError(f"failed to read root certificate {self.config.rpc_cert}: {e}") from e
        logger.debug("Connecting to agent at {}", self.socket_path)
        sock = self._socket_factory()
        try:
            remaining = ctx.remaining()
            sock.settimeout(remaining if remaining else None)
            with ctx.interruptible():
                sock.connect(self.socket_path)
        except OSError as e:
            sock.close()
            raise DialError(f"failed to connect to agent {self.socket_path}: {e}") from e
        except CallCancelledError:
            sock.close()
            raise
        self._sock = sock
        return self

    def call(self, ctx: CallContext, method: str, result: RawResult, *params: Any) -> None:
        if self._sock is None:
            raise TransportError("agent connection is not established")
        ctx.check()
        request = RpcRequest(method=method, params=tuple(params))
        try:
            line = json.dumps(
                {
                    "address": self.config.server,
                    "user": self.config.rpc_user,
                    "pass": self.config.rpc_password,
                    "rootcert": self._root_cert,
                    "request": request.to_payload(),
                },
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            ).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodingError(f"{method} command: failed to encode agent request: {e}") from e
        try:
            self._sock.settimeout(None)
            self._sock.sendall(line + b"\n")
        except OSError as e:
            raise TransportError(f"failed to send request to agent: {e}") from e
        response = decode_response(self._read_line(ctx))
        if response.id != request.id:
            raise TransportError(f"agent replied to request {response.id!r}, expected {request.id!r}")
        response.raise_for_error()
        result.raw = response.result

    def _read_line(self, ctx: CallContext) -> bytes:
        while b"\n" not in self._buffer:
            ctx.check()
            self._sock.settimeout(ctx.poll_timeout())
            try:
                chunk = self._sock.recv(65536)
            except TimeoutError:
                continue
            except OSError as e:
                raise TransportError(f"agent connection lost: {e}") from e
            if not chunk:
                raise TransportError("agent closed the connection before responding")
            self._buffer += chunk
            if len(self._buffer) > MAX_LINE_BYTES:
                raise TransportError("agent response exceeds the maximum line length")
        line, _, self._buffer = self._buffer.partition(b"\n")
        logger.debug("Received agent response ({} bytes)", len(line))
        return line

    def close(self) -> None:
        if self._sock is None:
            return
        sock, self._sock = self._sock, None
        try:
            sock.close()
        except OSError as e:
            logger.debug("Error closing agent socket: {}", e)

    def __enter__(self) -> "AgentCaller":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
