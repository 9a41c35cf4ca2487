"""Turn trailing command-line tokens into raw string parameters."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, TextIO

from dcrctl.utils.exceptions import InsufficientStdinError, StdinReadError

if TYPE_CHECKING:
    from dcrctl.transport.context import CallContext

STDIN_TOKEN = "-"


def _read_line(stream: TextIO) -> str:
    try:
        line = stream.readline()
        # Streams opened with surrogateescape hand back undecodable bytes as lone surrogates.
        line.encode("utf-8")
    except UnicodeError as exc:
        raise StdinReadError(f"invalid UTF-8 input: {exc}") from exc
    except OSError as exc:
        raise StdinReadError(str(exc)) from exc
    return line


def materialize_args(
    tokens: Iterable[str],
    stdin: TextIO | None = None,
    ctx: CallContext | None = None,
) -> list[str]:
    """Replace each ``-`` token with the next line read from stdin.

    Payloads too large for the OS argument limit (a serialized block, say) can
    be piped in this way. Lines are consumed strictly in token order; a final
    line without a newline still counts. When ``ctx`` is given, an interrupt
    aborts a read that is still waiting for input.
    """
    stream = stdin if stdin is not None else sys.stdin
    params: list[str] = []
    for position, token in enumerate(tokens):
        if token != STDIN_TOKEN:
            params.append(token)
            continue
        if ctx is None:
            line = _read_line(stream)
        else:
            with ctx.interruptible():
                line = _read_line(stream)
        if not line:
            raise InsufficientStdinError(position)
        params.append(line.rstrip("\r\n"))
    return params
