"""Caller interface implemented by every transport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from dcrctl.transport.context import CallContext


@dataclass(slots=True)
class RawResult:
    """Output binding for one call; ``raw`` stays None unless the call succeeds."""

    raw: str | None = None


class Caller(Protocol):
    """Performs exactly one JSON-RPC round trip per ``call``."""

    def call(self, ctx: CallContext, method: str, result: RawResult, *params: Any) -> None: ...

    def close(self) -> None: ...
