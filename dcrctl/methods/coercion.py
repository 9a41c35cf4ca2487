"""Coerce raw command-line strings into the typed values a method expects."""

from __future__ import annotations

import json
import math
import re
from typing import TYPE_CHECKING, Any

from dcrctl.methods.types import ParamKind, ParamSpec
from dcrctl.utils.exceptions import InvalidArgumentsError

if TYPE_CHECKING:
    from dcrctl.methods.types import MethodDescriptor

ERR_NUM_PARAMS = "ErrNumParams"
ERR_INVALID_TYPE = "ErrInvalidType"

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_RANGES: dict[ParamKind, tuple[int, int]] = {
    ParamKind.INT8: (-(2**7), 2**7 - 1),
    ParamKind.INT16: (-(2**15), 2**15 - 1),
    ParamKind.INT32: (-(2**31), 2**31 - 1),
    ParamKind.INT64: (-(2**63), 2**63 - 1),
    ParamKind.UINT8: (0, 2**8 - 1),
    ParamKind.UINT16: (0, 2**16 - 1),
    ParamKind.UINT32: (0, 2**32 - 1),
    ParamKind.UINT64: (0, 2**64 - 1),
}

# Leading-zero octal ("0755"), which int(x, 0) refuses.
_LEGACY_OCTAL = re.compile(r"[+-]?0[0-7]+")


def check_arity(descriptor: "MethodDescriptor", received: int) -> None:
    total = len(descriptor.params)
    required = descriptor.required_count
    if required <= received <= total:
        return
    if required == total:
        message = f"wrong number of params (expected {required}, received {received})"
    else:
        message = f"wrong number of params (expected between {required} and {total}, received {received})"
    raise InvalidArgumentsError(message, ERR_NUM_PARAMS, method=descriptor.name)


def parse_bool(raw: str) -> bool:
    if raw in _TRUE_LITERALS:
        return True
    if raw in _FALSE_LITERALS:
        return False
    raise ValueError(raw)


def parse_int(raw: str, *, signed: bool = True) -> int:
    """Parse an integer literal, honouring 0x/0o/0b and leading-zero octal prefixes."""
    if raw != raw.strip() or not raw:
        raise ValueError(raw)
    if not signed and raw[0] in "+-":
        raise ValueError(raw)
    if _LEGACY_OCTAL.fullmatch(raw):
        return int(raw, 8)
    return int(raw, 0)


def parse_float(raw: str) -> float:
    if raw != raw.strip() or "_" in raw:
        raise ValueError(raw)
    return float(raw)


def _structured(index: int, spec: ParamSpec, raw: str) -> Any:
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise _invalid(index, spec, f"must be valid JSON which parses to a {spec.kind.value}") from exc
    if spec.kind is ParamKind.ARRAY and not isinstance(value, list):
        raise _invalid(index, spec, "must be a JSON array")
    if spec.kind is ParamKind.OBJECT and not isinstance(value, dict):
        raise _invalid(index, spec, "must be a JSON object")
    return value


def _invalid(index: int, spec: ParamSpec, what: str) -> InvalidArgumentsError:
    return InvalidArgumentsError(f"parameter #{index + 1} '{spec.name}' {what}", ERR_INVALID_TYPE)


def coerce_param(index: int, spec: ParamSpec, raw: str) -> Any:
    """Convert the ``index``-th raw argument to the type declared by ``spec``."""
    kind = spec.kind
    if kind is ParamKind.STRING:
        return raw
    if kind is ParamKind.BOOL:
        try:
            return parse_bool(raw)
        except ValueError as exc:
            raise _invalid(index, spec, "must parse to a bool") from exc
    if kind.is_integer:
        low, high = _INT_RANGES[kind]
        try:
            value = parse_int(raw, signed=low < 0)
        except ValueError as exc:
            raise _invalid(index, spec, f"must parse to a {kind.value}") from exc
        if not low <= value <= high:
            raise _invalid(index, spec, f"overflows destination type {kind.value}")
        return value
    if kind is ParamKind.FLOAT64:
        try:
            value = parse_float(raw)
        except ValueError as exc:
            raise _invalid(index, spec, "must parse to a float64") from exc
        if math.isinf(value) and not raw.lstrip("+-").lower().startswith("inf"):
            raise _invalid(index, spec, "overflows destination type float64")
        return value
    return _structured(index, spec, raw)


def default_matches(kind: ParamKind, default: Any) -> bool:
    """Report whether a registered default value fits the parameter kind."""
    if kind is ParamKind.STRING:
        return isinstance(default, str)
    if kind is ParamKind.BOOL:
        return isinstance(default, bool)
    if kind.is_integer:
        if isinstance(default, bool) or not isinstance(default, int):
            return False
        low, high = _INT_RANGES[kind]
        return low <= default <= high
    if kind is ParamKind.FLOAT64:
        return isinstance(default, (int, float)) and not isinstance(default, bool)
    if kind is ParamKind.ARRAY:
        return isinstance(default, list)
    if kind is ParamKind.OBJECT:
        return isinstance(default, dict)
    return True
