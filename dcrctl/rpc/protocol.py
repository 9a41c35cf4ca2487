"""JSON-RPC request/response frames shared by every transport."""

from __future__ import annotations

import json
from dataclasses import dataclass
from json.decoder import scanstring
from typing import Any

from dcrctl.utils.exceptions import EncodingError, RPCError, TransportError

REQUEST_ID = 1
RPC_VERSION = "1.0"

_decoder = json.JSONDecoder()
_WHITESPACE = " \t\n\r"


@dataclass(frozen=True, slots=True)
class RpcRequest:
    """Request frame; params are already canonical JSON values."""

    method: str
    params: tuple[Any, ...] = ()
    id: int = REQUEST_ID

    def to_payload(self) -> dict[str, Any]:
        return {"jsonrpc": RPC_VERSION, "method": self.method, "params": list(self.params), "id": self.id}

    def encode(self) -> str:
        """Compact UTF-8-safe JSON text of the frame."""
        try:
            text = json.dumps(self.to_payload(), separators=(",", ":"), ensure_ascii=False, allow_nan=False)
            text.encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise EncodingError(f"{self.method} command: failed to marshal request: {exc}") from exc
        return text


@dataclass(frozen=True, slots=True)
class RpcErrorObject:
    code: int
    message: str


@dataclass(frozen=True, slots=True)
class RpcResponse:
    """Response frame. ``result`` keeps the raw JSON text of the result member."""

    id: Any
    result: str = ""
    error: RpcErrorObject | None = None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise RPCError(self.error.code, self.error.message)


def _skip_ws(text: str, idx: int) -> int:
    while idx < len(text) and text[idx] in _WHITESPACE:
        idx += 1
    return idx


def split_members(text: str) -> dict[str, str]:
    """Split a JSON object into its members, keeping each value as raw JSON text."""
    idx = _skip_ws(text, 0)
    if not text.startswith("{", idx):
        raise ValueError("expected a JSON object")
    idx = _skip_ws(text, idx + 1)
    members: dict[str, str] = {}
    if text.startswith("}", idx):
        idx += 1
    else:
        while True:
            if not text.startswith('"', idx):
                raise ValueError(f"expected member name at offset {idx}")
            key, idx = scanstring(text, idx + 1)
            idx = _skip_ws(text, idx)
            if not text.startswith(":", idx):
                raise ValueError(f"expected ':' at offset {idx}")
            idx = _skip_ws(text, idx + 1)
            _, end = _decoder.raw_decode(text, idx)
            members[key] = text[idx:end]
            idx = _skip_ws(text, end)
            if text.startswith(",", idx):
                idx = _skip_ws(text, idx + 1)
                continue
            if text.startswith("}", idx):
                idx += 1
                break
            raise ValueError(f"expected ',' or '}}' at offset {idx}")
    if _skip_ws(text, idx) != len(text):
        raise ValueError("trailing data after JSON object")
    return members


def _decode_error(raw: str | None) -> RpcErrorObject | None:
    if raw is None or raw == "null":
        return None
    payload = json.loads(raw)
    if not isinstance(payload, dict):
        return RpcErrorObject(code=-1, message=str(payload))
    try:
        code = int(payload.get("code") or 0)
    except (TypeError, ValueError):
        code = -1
    return RpcErrorObject(code=code, message=str(payload.get("message") or "RPC request failed"))


def decode_response(frame: str | bytes) -> RpcResponse:
    """Decode a response frame without re-encoding its result."""
    text = frame.decode("utf-8") if isinstance(frame, (bytes, bytearray)) else frame
    try:
        members = split_members(text)
        response_id = json.loads(members["id"]) if "id" in members else None
        error = _decode_error(members.get("error"))
    except ValueError as exc:
        raise TransportError(f"malformed response frame: {exc}") from exc
    return RpcResponse(id=response_id, result=members.get("result", ""), error=error)
