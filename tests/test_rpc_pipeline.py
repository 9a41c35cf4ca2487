"""Tests for command resolution, stdin materialization, encoding and rendering."""

from __future__ import annotations

import io

import pytest

from dcrctl.methods import CHAIN_REGISTRY, MethodRegistry, ParamKind, UsageFlag, opt, req
from dcrctl.rpc import encode_request, marshal_command, materialize_args, render_result, resolve_command
from dcrctl.rpc.encoder import extract_params
from dcrctl.transport import CallContext
from dcrctl.utils.exceptions import (
    CallCancelledError,
    EncodingError,
    InsufficientStdinError,
    InvalidArgumentsError,
    RenderError,
    StdinReadError,
    UnknownCommandError,
    UnusableCommandError,
)


def _registries():
    chain = MethodRegistry("chain")
    wallet = MethodRegistry("wallet")
    chain.register("getblockcount")
    chain.register("notifyblocks", flags=UsageFlag.WEBSOCKET_ONLY)
    wallet.register("getblockcount", flags=UsageFlag.WALLET_ONLY)
    wallet.register("getbalance", flags=UsageFlag.WALLET_ONLY)
    wallet.register("walletlockstate", flags=UsageFlag.WALLET_ONLY | UsageFlag.NOTIFICATION)
    return chain, wallet


class TestResolveCommand:
    def test_chain_wins_for_shared_names(self) -> None:
        chain, wallet = _registries()
        assert resolve_command("getblockcount", (chain, wallet)).namespace == "chain"

    def test_wallet_only_name(self) -> None:
        chain, wallet = _registries()
        assert resolve_command("getbalance", (chain, wallet)).namespace == "wallet"

    def test_unknown(self) -> None:
        with pytest.raises(UnknownCommandError) as exc_info:
            resolve_command("nope", _registries())
        assert str(exc_info.value) == "Unrecognized command 'nope'"

    @pytest.mark.parametrize("method", ["notifyblocks", "walletlockstate"])
    def test_unusable(self, method) -> None:
        with pytest.raises(UnusableCommandError) as exc_info:
            resolve_command(method, _registries())
        assert str(exc_info.value) == f"The '{method}' command is unusable"

    def test_default_tables(self) -> None:
        assert resolve_command("getbalance").namespace == "wallet"
        with pytest.raises(UnusableCommandError):
            resolve_command("blockconnected")


class TestMaterializeArgs:
    def test_dash_reads_stdin_in_order(self) -> None:
        assert materialize_args(["-", "foo", "-"], io.StringIO("bar\r\nbaz")) == ["bar", "foo", "baz"]

    def test_empty_stdin(self) -> None:
        with pytest.raises(InsufficientStdinError):
            materialize_args(["-"], io.StringIO(""))

    def test_blank_line_is_a_value(self) -> None:
        assert materialize_args(["-"], io.StringIO("\n")) == [""]

    def test_no_dash_does_not_touch_stdin(self) -> None:
        class _Exploding(io.StringIO):
            def readline(self, *args):
                raise AssertionError("stdin read")

        assert materialize_args(["a", "--", "b"], _Exploding()) == ["a", "--", "b"]

    def test_os_error(self) -> None:
        class _Broken(io.StringIO):
            def readline(self, *args):
                raise OSError("bad fd")

        with pytest.raises(StdinReadError):
            materialize_args(["-"], _Broken())

    def test_invalid_utf8(self) -> None:
        stream = io.TextIOWrapper(io.BytesIO(b"\xff\xfe00\n"), encoding="utf-8")
        with pytest.raises(StdinReadError) as exc_info:
            materialize_args(["-"], stream)
        assert "invalid UTF-8" in str(exc_info.value)

    def test_invalid_utf8_with_surrogateescape(self) -> None:
        stream = io.TextIOWrapper(io.BytesIO(b"ab\xffcd\n"), encoding="utf-8", errors="surrogateescape")
        with pytest.raises(StdinReadError):
            materialize_args(["-"], stream)

    def test_interrupt_aborts_waiting_read(self) -> None:
        ctx = CallContext()

        class _Waiting(io.StringIO):
            def readline(self, *args):
                ctx.interrupt()
                raise AssertionError("read kept blocking")

        with pytest.raises(CallCancelledError):
            materialize_args(["-"], _Waiting(), ctx)


class TestEncodeRequest:
    def test_zero_arg_method(self) -> None:
        request = encode_request(CHAIN_REGISTRY.get("getblockcount"), [])
        assert request.params == ()
        assert request.encode() == '{"jsonrpc":"1.0","method":"getblockcount","params":[],"id":1}'

    def test_bool_is_json_true(self) -> None:
        request = encode_request(CHAIN_REGISTRY.get("setgenerate"), ["1"])
        assert request.params == (True,)
        assert '"params":[true]' in request.encode()

    def test_invalid_arguments_carry_usage(self) -> None:
        with pytest.raises(InvalidArgumentsError) as exc_info:
            encode_request(CHAIN_REGISTRY.get("setgenerate"), ["maybe"])
        assert exc_info.value.usage == "setgenerate generate (genproclimit=-1)"

    def test_nan_fails_to_marshal(self) -> None:
        registry = MethodRegistry("test")
        descriptor = registry.register("fee", req("amount", ParamKind.FLOAT64))
        with pytest.raises(EncodingError):
            marshal_command(descriptor.construct(["nan"]))

    def test_trailing_null_reaches_the_wire(self) -> None:
        registry = MethodRegistry("test")
        descriptor = registry.register("m", req("a", ParamKind.STRING), opt("data", ParamKind.JSON))
        request = encode_request(descriptor, ["x", "null"])
        assert request.encode() == '{"jsonrpc":"1.0","method":"m","params":["x",null],"id":1}'

    def test_lone_surrogate_fails_to_marshal(self) -> None:
        with pytest.raises(EncodingError):
            encode_request(CHAIN_REGISTRY.get("submitblock"), ["00\udcff"])

    def test_extract_params_requires_array(self) -> None:
        with pytest.raises(EncodingError):
            extract_params('{"params":{}}')


class TestRenderResult:
    def test_string_prints_bare(self) -> None:
        assert render_result('"abc"') == "abc"

    def test_object_is_indented(self) -> None:
        assert render_result('{"a":1}') == '{\n  "a": 1\n}'

    def test_array_is_indented(self) -> None:
        assert render_result("[1,2]") == "[\n  1,\n  2\n]"

    def test_small_amount_keeps_number_text(self) -> None:
        assert render_result('{"fee":0.00001}') == '{\n  "fee": 0.00001\n}'

    def test_number_spelling_survives_indenting(self) -> None:
        raw = '{"big":1e400,"amount":1.10,"list":[1.0, -0E+2]}'
        assert render_result(raw) == (
            '{\n  "big": 1e400,\n  "amount": 1.10,\n  "list": [\n    1.0,\n    -0E+2\n  ]\n}'
        )

    def test_strings_and_empty_containers_copied(self) -> None:
        raw = '{"s":"a\\"b, c:[d]","o":{},"a":[ ]}'
        assert render_result(raw) == '{\n  "s": "a\\"b, c:[d]",\n  "o": {},\n  "a": []\n}'

    def test_non_json_constant_rejected(self) -> None:
        with pytest.raises(RenderError):
            render_result('{"x":NaN}')

    @pytest.mark.parametrize("raw", ["42", "true", "null", "1.50"])
    def test_scalars_verbatim(self, raw) -> None:
        assert render_result(raw) == raw

    def test_empty_prints_nothing(self) -> None:
        assert render_result("") is None
        assert render_result(None) is None

    def test_invalid_json(self) -> None:
        with pytest.raises(RenderError):
            render_result("{oops")
