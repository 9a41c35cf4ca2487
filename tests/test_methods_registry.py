"""Tests for dcrctl.methods registries and descriptors."""

from __future__ import annotations

import pytest

from dcrctl.methods import (
    CHAIN_REGISTRY,
    DEFAULT_REGISTRIES,
    WALLET_REGISTRY,
    Command,
    MethodRegistry,
    ParamKind,
    ParamSpec,
    UsageFlag,
    opt,
    req,
)
from dcrctl.utils.exceptions import InvalidArgumentsError, RegistrationError, UnknownCommandError


class TestRegistration:
    def test_duplicate_method_rejected(self) -> None:
        registry = MethodRegistry("test")
        registry.register("ping")
        with pytest.raises(RegistrationError) as exc_info:
            registry.register("ping")
        assert exc_info.value.reason == "ErrDuplicateMethod"

    def test_unknown_flag_bits_rejected(self) -> None:
        registry = MethodRegistry("test")
        with pytest.raises(RegistrationError) as exc_info:
            registry.register("ping", flags=8)
        assert exc_info.value.reason == "ErrInvalidUsageFlags"

    def test_required_after_optional_rejected(self) -> None:
        registry = MethodRegistry("test")
        with pytest.raises(RegistrationError) as exc_info:
            registry.register("m", opt("a", ParamKind.STRING), req("b", ParamKind.STRING))
        assert exc_info.value.reason == "ErrNonOptionalField"

    def test_default_on_required_rejected(self) -> None:
        registry = MethodRegistry("test")
        bad = ParamSpec(name="a", kind=ParamKind.INT64, default=3)
        with pytest.raises(RegistrationError) as exc_info:
            registry.register("m", bad)
        assert exc_info.value.reason == "ErrNonOptionalDefault"

    def test_mismatched_default_rejected(self) -> None:
        registry = MethodRegistry("test")
        with pytest.raises(RegistrationError) as exc_info:
            registry.register("m", opt("verbose", ParamKind.BOOL, 1))
        assert exc_info.value.reason == "ErrMismatchedDefault"

    def test_names_are_sorted(self) -> None:
        registry = MethodRegistry("test")
        registry.register("zeta")
        registry.register("alpha")
        assert registry.list_names() == ["alpha", "zeta"]
        assert [d.name for d in registry] == ["alpha", "zeta"]
        assert len(registry) == 2
        assert "alpha" in registry


class TestUsageText:
    def test_getblock_usage(self) -> None:
        assert CHAIN_REGISTRY.usage_text("getblock") == 'getblock "hash" (verbose=true verbosetx=false)'

    def test_no_params_usage_is_bare_name(self) -> None:
        assert CHAIN_REGISTRY.usage_text("getblockcount") == "getblockcount"

    def test_usage_override(self) -> None:
        assert CHAIN_REGISTRY.usage_text("addnode") == 'addnode "addr" "add|remove|onetry"'

    def test_unknown_method(self) -> None:
        with pytest.raises(UnknownCommandError):
            CHAIN_REGISTRY.usage_text("nosuchmethod")


class TestTables:
    def test_chain_first_in_resolution_order(self) -> None:
        assert DEFAULT_REGISTRIES == (CHAIN_REGISTRY, WALLET_REGISTRY)

    def test_wallet_methods_carry_wallet_flag(self) -> None:
        for descriptor in WALLET_REGISTRY:
            assert descriptor.flags & UsageFlag.WALLET_ONLY, descriptor.name

    def test_shared_names(self) -> None:
        for name in ("getblockcount", "getinfo", "help", "version"):
            assert name in CHAIN_REGISTRY
            assert name in WALLET_REGISTRY

    def test_notifications_flagged(self) -> None:
        assert CHAIN_REGISTRY.usage_flags("blockconnected") & UsageFlag.NOTIFICATION
        assert CHAIN_REGISTRY.usage_flags("notifyblocks") & UsageFlag.WEBSOCKET_ONLY


class TestConstruct:
    def test_coerces_supplied_values(self) -> None:
        command = CHAIN_REGISTRY.construct("getblock", ["00ab", "0"])
        assert command.values == ("00ab", False)
        assert command.params() == ["00ab", False]

    def test_unsupplied_optionals_are_omitted(self) -> None:
        registry = MethodRegistry("test")
        descriptor = registry.register("m", opt("a", ParamKind.STRING), opt("b", ParamKind.INT64))
        assert descriptor.construct([]).params() == []

    def test_explicit_none_serializes_as_none(self) -> None:
        command = Command(method="m", namespace="test", values=(None, 5))
        assert command.params() == [None, 5]

    def test_trailing_json_null_is_kept(self) -> None:
        registry = MethodRegistry("test")
        descriptor = registry.register("m", req("a", ParamKind.STRING), opt("data", ParamKind.JSON))
        assert descriptor.construct(["x", "null"]).params() == ["x", None]
        assert descriptor.construct(["x"]).params() == ["x"]

    def test_wrong_arity_carries_usage(self) -> None:
        with pytest.raises(InvalidArgumentsError) as exc_info:
            CHAIN_REGISTRY.construct("getblockhash", [])
        err = exc_info.value
        assert err.reason == "ErrNumParams"
        assert err.method == "getblockhash"
        assert err.usage == "getblockhash index"
        assert str(err) == "wrong number of params (expected 1, received 0)"

    def test_range_message(self) -> None:
        with pytest.raises(InvalidArgumentsError) as exc_info:
            CHAIN_REGISTRY.construct("getblock", ["a", "b", "c", "d"])
        assert str(exc_info.value) == "wrong number of params (expected between 1 and 3, received 4)"
