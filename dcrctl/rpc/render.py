"""Format a raw JSON result for the terminal."""

from __future__ import annotations

import json

from dcrctl.utils.exceptions import RenderError

INDENT = "  "
_WHITESPACE = " \t\n\r"


def _reject_constant(name: str) -> None:
    raise ValueError(f"invalid JSON literal {name}")


def indent_json(text: str, indent: str = INDENT) -> str:
    """Re-indent valid JSON text without re-encoding any token.

    Numbers and strings are copied exactly as they appear in ``text``, so
    amounts such as ``0.00001`` keep their original spelling. Empty objects
    and arrays stay on one line.
    """
    out: list[str] = []
    depth = 0
    opened = False
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if ch in _WHITESPACE:
            i += 1
            continue
        if ch in "]}":
            depth -= 1
            if not opened:
                out.append("\n" + indent * depth)
            opened = False
            out.append(ch)
            i += 1
            continue
        if opened:
            out.append("\n" + indent * depth)
            opened = False
        if ch in "[{":
            depth += 1
            opened = True
            out.append(ch)
        elif ch == ",":
            out.append(",\n" + indent * depth)
        elif ch == ":":
            out.append(": ")
        elif ch == '"':
            end = i + 1
            while text[end] != '"':
                end += 2 if text[end] == "\\" else 1
            out.append(text[i : end + 1])
            i = end + 1
            continue
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def render_result(raw: str | bytes | None) -> str | None:
    """Return the display text for ``raw``, or None when there is nothing to print.

    Strings print bare, objects and arrays print indented by two spaces, and
    numbers, booleans and null print exactly as the server sent them.
    """
    if not raw:
        return None
    try:
        text = raw.decode("utf-8") if isinstance(raw, (bytes, bytearray)) else raw
        value = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise RenderError(f"Failed to unmarshal result: {exc}") from exc

    first = text.lstrip(_WHITESPACE)[:1]
    if first == '"':
        return value
    if first in ("{", "["):
        return indent_json(text)
    return text
