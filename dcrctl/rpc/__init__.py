"""Request pipeline: resolve, materialize, encode, render."""

from dcrctl.rpc.arguments import materialize_args
from dcrctl.rpc.encoder import encode_request, marshal_command
from dcrctl.rpc.protocol import RpcRequest, RpcResponse, decode_response
from dcrctl.rpc.render import render_result
from dcrctl.rpc.resolver import UNUSABLE_FLAGS, is_usable, resolve_command

__all__ = [
    "UNUSABLE_FLAGS",
    "RpcRequest",
    "RpcResponse",
    "decode_response",
    "encode_request",
    "is_usable",
    "marshal_command",
    "materialize_args",
    "render_result",
    "resolve_command",
]
