"""Tests for dcrctl.rpc.protocol frame handling."""

import pytest

from dcrctl.rpc.protocol import RpcRequest, decode_response, split_members
from dcrctl.utils.exceptions import RPCError, TransportError


def test_request_envelope():
    request = RpcRequest(method="getblockhash", params=(0,))
    assert request.to_payload() == {"jsonrpc": "1.0", "method": "getblockhash", "params": [0], "id": 1}


def test_result_kept_as_raw_text():
    response = decode_response('{"result": {"b": 1.10, "a": [1]}, "error": null, "id": 1}')
    assert response.id == 1
    assert response.result == '{"b": 1.10, "a": [1]}'
    assert response.error is None
    response.raise_for_error()


def test_error_envelope_raises():
    response = decode_response(b'{"result":null,"error":{"code":-32601,"message":"Method not found"},"id":1}')
    with pytest.raises(RPCError) as exc_info:
        response.raise_for_error()
    assert exc_info.value.rpc_code == -32601
    assert str(exc_info.value) == "-32601: Method not found"


def test_missing_result_is_empty():
    assert decode_response('{"id":1}').result == ""


def test_split_members_handles_escapes():
    members = split_members('{"a\\"b": "x}y", "n": [1, {"c": "]"}]}')
    assert members == {'a"b': '"x}y"', "n": '[1, {"c": "]"}]'}


@pytest.mark.parametrize("frame", ["", "[1]", '{"id":1', '{"id":1} extra', "not json"])
def test_malformed_frames(frame):
    with pytest.raises(TransportError) as exc_info:
        decode_response(frame)
    assert "malformed response frame" in str(exc_info.value)
