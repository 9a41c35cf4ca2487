"""Method table value types: usage flags, parameter specs, descriptors, commands."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Any, Sequence

from dcrctl.utils.exceptions import InvalidArgumentsError


class UsageFlag(IntFlag):
    """Per-method calling restrictions."""

    NONE = 0
    WALLET_ONLY = 1
    WEBSOCKET_ONLY = 2
    NOTIFICATION = 4


ALL_USAGE_FLAGS = UsageFlag.WALLET_ONLY | UsageFlag.WEBSOCKET_ONLY | UsageFlag.NOTIFICATION


class ParamKind(str, Enum):
    STRING = "string"
    BOOL = "bool"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT64 = "float64"
    ARRAY = "array"
    OBJECT = "object"
    JSON = "json"

    @property
    def is_integer(self) -> bool:
        return self.value.startswith(("int", "uint"))

    @property
    def is_structured(self) -> bool:
        return self in (ParamKind.ARRAY, ParamKind.OBJECT, ParamKind.JSON)


@dataclass(frozen=True, slots=True)
class ParamSpec:
    """One positional parameter of a method."""

    name: str
    kind: ParamKind
    optional: bool = False
    default: Any = None
    usage: str | None = None

    def usage_text(self) -> str:
        if self.usage:
            return self.usage
        if self.default is not None:
            return f"{self.name}={json.dumps(self.default, separators=(',', ':'))}"
        if self.kind is ParamKind.STRING:
            return f'"{self.name}"'
        return self.name


@dataclass(frozen=True, slots=True)
class Command:
    """A typed command: the coerced values the caller supplied, in declaration order.

    Optional parameters left off the command line are absent rather than
    ``None``, so an explicit JSON ``null`` in the last position is kept.
    """

    method: str
    namespace: str
    values: tuple[Any, ...]

    def params(self) -> list[Any]:
        return list(self.values)


@dataclass(frozen=True, slots=True)
class MethodDescriptor:
    name: str
    namespace: str
    flags: UsageFlag
    params: tuple[ParamSpec, ...] = ()

    @property
    def required_count(self) -> int:
        return sum(1 for p in self.params if not p.optional)

    @property
    def usage(self) -> str:
        required = [p.usage_text() for p in self.params if not p.optional]
        optional = [p.usage_text() for p in self.params if p.optional]
        text = self.name
        if required:
            text += " " + " ".join(required)
        if optional:
            text += f" ({' '.join(optional)})"
        return text

    def construct(self, args: Sequence[str]) -> Command:
        """Build a typed command from raw string arguments."""
        from dcrctl.methods.coercion import check_arity, coerce_param

        try:
            check_arity(self, len(args))
            values: list[Any] = [coerce_param(i, spec, raw) for i, (spec, raw) in enumerate(zip(self.params, args))]
        except InvalidArgumentsError as exc:
            exc.method = self.name
            exc.usage = self.usage
            raise
        return Command(method=self.name, namespace=self.namespace, values=tuple(values))
