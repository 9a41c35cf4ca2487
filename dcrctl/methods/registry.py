"""Method tables: one registry per RPC server namespace."""

from __future__ import annotations

from typing import Any, Iterator, Sequence

from dcrctl.methods.coercion import default_matches
from dcrctl.methods.types import ALL_USAGE_FLAGS, Command, MethodDescriptor, ParamKind, ParamSpec, UsageFlag
from dcrctl.utils.exceptions import RegistrationError, UnknownCommandError


def req(name: str, kind: ParamKind, *, usage: str | None = None) -> ParamSpec:
    """Required positional parameter."""
    return ParamSpec(name=name, kind=kind, usage=usage)


def opt(name: str, kind: ParamKind, default: Any = None, *, usage: str | None = None) -> ParamSpec:
    """Optional positional parameter, with the server-side default shown in usage text."""
    return ParamSpec(name=name, kind=kind, optional=True, default=default, usage=usage)


class MethodRegistry:
    """Registered methods of one server, with their flags, usage and constructors."""

    def __init__(self, namespace: str):
        self.namespace = namespace
        self._methods: dict[str, MethodDescriptor] = {}

    def __contains__(self, method: object) -> bool:
        return method in self._methods

    def __len__(self) -> int:
        return len(self._methods)

    def __iter__(self) -> Iterator[MethodDescriptor]:
        for name in self.list_names():
            yield self._methods[name]

    def register(self, method: str, *params: ParamSpec, flags: UsageFlag = UsageFlag.NONE) -> MethodDescriptor:
        if method in self._methods:
            raise RegistrationError(f"method {method!r} is already registered", "ErrDuplicateMethod")
        if int(flags) & ~int(ALL_USAGE_FLAGS):
            raise RegistrationError(f"method {method!r} has invalid usage flags {int(flags):#x}", "ErrInvalidUsageFlags")
        seen_optional = False
        for index, spec in enumerate(params):
            if spec.optional:
                seen_optional = True
            elif seen_optional:
                raise RegistrationError(
                    f"method {method!r} parameter #{index + 1} '{spec.name}' must be optional "
                    "since it follows an optional parameter",
                    "ErrNonOptionalField",
                )
            if spec.default is None:
                continue
            if not spec.optional:
                raise RegistrationError(
                    f"method {method!r} parameter #{index + 1} '{spec.name}' is not optional and can't have a default",
                    "ErrNonOptionalDefault",
                )
            if not default_matches(spec.kind, spec.default):
                raise RegistrationError(
                    f"method {method!r} parameter #{index + 1} '{spec.name}' default {spec.default!r} "
                    f"does not match type {spec.kind.value}",
                    "ErrMismatchedDefault",
                )
        descriptor = MethodDescriptor(name=method, namespace=self.namespace, flags=flags, params=tuple(params))
        self._methods[method] = descriptor
        return descriptor

    def lookup(self, method: str) -> MethodDescriptor | None:
        return self._methods.get(method)

    def get(self, method: str) -> MethodDescriptor:
        descriptor = self._methods.get(method)
        if descriptor is None:
            raise UnknownCommandError(method)
        return descriptor

    def list_names(self) -> list[str]:
        return sorted(self._methods)

    def usage_flags(self, method: str) -> UsageFlag:
        return self.get(method).flags

    def usage_text(self, method: str) -> str:
        return self.get(method).usage

    def construct(self, method: str, args: Sequence[str]) -> Command:
        return self.get(method).construct(args)
