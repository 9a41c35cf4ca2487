"""Cancellation and deadline shared by dial and call."""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import Iterator

from dcrctl.utils.exceptions import CallCancelledError

# Longest a blocking socket read may wait before the context is re-checked.
POLL_INTERVAL = 0.25


class CallContext:
    """A cancellable, optionally deadline-bound context for one invocation.

    ``cancel()`` may be called from another thread; the transports poll
    ``check()`` between short blocking reads. Calls that cannot be sliced
    that way (a TCP dial, a stdin read) run inside ``interruptible()`` so
    that ``interrupt()``, called from a signal handler, aborts them at once.
    """

    def __init__(self, timeout: float | None = None, *, clock=time.monotonic):
        self._clock = clock
        self._cancelled = threading.Event()
        self._deadline = clock() + timeout if timeout else None
        self._blocking = 0

    @property
    def deadline(self) -> float | None:
        return self._deadline

    def cancel(self) -> None:
        self._cancelled.set()

    def interrupt(self) -> None:
        """Cancel, and abort the blocking call in progress if there is one."""
        self.cancel()
        if self._blocking:
            raise CallCancelledError("context canceled")

    @contextmanager
    def interruptible(self) -> Iterator[None]:
        if self.cancelled:
            raise CallCancelledError("context canceled")
        self._blocking += 1
        try:
            yield
        finally:
            self._blocking -= 1

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None when there is none."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - self._clock())

    def error(self) -> CallCancelledError | None:
        if self._cancelled.is_set():
            return CallCancelledError("context canceled")
        if self._deadline is not None and self._clock() >= self._deadline:
            return CallCancelledError("context deadline exceeded")
        return None

    def check(self) -> None:
        """Raise CallCancelledError if the context is done."""
        err = self.error()
        if err is not None:
            raise err

    def poll_timeout(self, interval: float = POLL_INTERVAL) -> float:
        """Socket timeout for the next blocking read."""
        remaining = self.remaining()
        if remaining is None:
            return interval
        return max(0.01, min(interval, remaining))
