"""Build the canonical JSON-RPC request for a resolved method."""

from __future__ import annotations

import json
from typing import Any, Sequence

from loguru import logger

from dcrctl.methods import Command, MethodDescriptor
from dcrctl.rpc.protocol import REQUEST_ID, RPC_VERSION, RpcRequest
from dcrctl.utils.exceptions import EncodingError


def marshal_command(command: Command, request_id: int = REQUEST_ID, rpc_version: str = RPC_VERSION) -> str:
    """Serialize a typed command into a complete JSON-RPC envelope."""
    envelope = {
        "jsonrpc": rpc_version,
        "method": command.method,
        "params": command.params(),
        "id": request_id,
    }
    try:
        text = json.dumps(envelope, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        # Lone surrogates survive dumps but cannot go out as a UTF-8 text frame.
        text.encode("utf-8")
        return text
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"{command.method} command: failed to marshal request: {exc}") from exc


def extract_params(envelope: str) -> tuple[Any, ...]:
    """Re-parse the params array out of a serialized envelope."""
    try:
        decoded = json.loads(envelope)
    except json.JSONDecodeError as exc:
        raise EncodingError(f"failed to re-parse request: {exc}") from exc
    params = decoded.get("params", []) if isinstance(decoded, dict) else None
    if not isinstance(params, list):
        raise EncodingError("request envelope has no params array")
    return tuple(params)


def encode_request(descriptor: MethodDescriptor, args: Sequence[str]) -> RpcRequest:
    """Construct, serialize and re-parse: the transmitted params are the coerced ones.

    Raises InvalidArgumentsError (with usage text attached) when the method's
    constructor rejects ``args``.
    """
    command = descriptor.construct(args)
    envelope = marshal_command(command)
    params = extract_params(envelope)
    logger.debug("Encoded {} request with {} param(s)", command.method, len(params))
    return RpcRequest(method=command.method, params=params, id=REQUEST_ID)
