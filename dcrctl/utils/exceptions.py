"""
Exception hierarchy for dcrctl.

Every failure in the request pipeline is terminal: the CLI prints it and exits
non-zero. Each error carries a stable code and a category so callers (and
tests) can tell the kinds apart without matching on message text.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Error categories for classification."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFIG = "config"
    TRANSPORT = "transport"
    CANCELLED = "cancelled"
    REMOTE = "remote"
    FATAL = "fatal"


class DcrctlError(Exception):
    """Base exception for all dcrctl errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.FATAL,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class UnknownCommandError(DcrctlError):
    """Method name is not registered in any namespace."""

    def __init__(self, method: str):
        super().__init__(
            f"Unrecognized command {method!r}",
            code="UNKNOWN_COMMAND",
            category=ErrorCategory.NOT_FOUND,
            details={"method": method},
        )
        self.method = method


class UnusableCommandError(DcrctlError):
    """Method only works over a persistent push channel."""

    def __init__(self, method: str, flags: int):
        super().__init__(
            f"The '{method}' command is unusable",
            code="UNUSABLE_COMMAND",
            category=ErrorCategory.VALIDATION,
            details={"method": method, "flags": flags},
        )
        self.method = method


class InsufficientStdinError(DcrctlError):
    """A '-' argument was given but stdin ran dry."""

    def __init__(self, position: int):
        super().__init__(
            "Not enough lines provided on stdin",
            code="INSUFFICIENT_STDIN",
            category=ErrorCategory.VALIDATION,
            details={"position": position},
        )


class StdinReadError(DcrctlError):
    def __init__(self, reason: str):
        super().__init__(
            f"Failed to read data from stdin: {reason}",
            code="STDIN_READ_ERROR",
            category=ErrorCategory.FATAL,
        )


class InvalidArgumentsError(DcrctlError):
    """Typed command construction rejected the supplied arguments.

    ``reason`` is the machine-readable constructor code (``ErrNumParams``,
    ``ErrInvalidType``); ``usage`` is filled in once the method is known so
    the CLI can print it underneath the error.
    """

    def __init__(self, message: str, reason: str, *, method: str | None = None, usage: str | None = None):
        super().__init__(
            message,
            code="INVALID_ARGUMENTS",
            category=ErrorCategory.VALIDATION,
            details={"reason": reason, "method": method},
        )
        self.reason = reason
        self.method = method
        self.usage = usage


class RegistrationError(DcrctlError):
    """A method table entry violates the registration rules."""

    def __init__(self, message: str, reason: str):
        super().__init__(message, code="REGISTRATION_ERROR", category=ErrorCategory.FATAL, details={"reason": reason})
        self.reason = reason


class EncodingError(DcrctlError):
    def __init__(self, message: str):
        super().__init__(message, code="ENCODING_FAILURE", category=ErrorCategory.FATAL)


class ConfigError(DcrctlError):
    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="CONFIG_ERROR", category=ErrorCategory.CONFIG, details=details)


class TransportError(DcrctlError):
    """Connection-level failure after the transport was established."""

    def __init__(self, message: str, code: str = "TRANSPORT_ERROR"):
        super().__init__(message, code=code, category=ErrorCategory.TRANSPORT)


class DialError(TransportError):
    """Dial, TLS handshake, proxy or certificate setup failed."""

    def __init__(self, message: str):
        super().__init__(message, code="DIAL_FAILURE")


class CallCancelledError(DcrctlError):
    def __init__(self, reason: str = "context canceled"):
        super().__init__(reason, code="CALL_CANCELLED", category=ErrorCategory.CANCELLED)
        self.reason = reason


class RPCError(DcrctlError):
    """The server answered with a JSON-RPC error envelope."""

    def __init__(self, rpc_code: int, rpc_message: str):
        super().__init__(
            f"{rpc_code}: {rpc_message}",
            code="RPC_ERROR",
            category=ErrorCategory.REMOTE,
            details={"rpc_code": rpc_code},
        )
        self.rpc_code = rpc_code
        self.rpc_message = rpc_message


class RenderError(DcrctlError):
    def __init__(self, message: str):
        super().__init__(message, code="RENDER_FAILURE", category=ErrorCategory.FATAL)


_SENSITIVE_PATTERNS = [
    re.compile(r"(rpcpass|proxypass|password|pass|auth)[=:]\s*['\"]?([^\s'\"]+)['\"]?", re.IGNORECASE),
    re.compile(r"basic\s+[a-zA-Z0-9+/]+=*", re.IGNORECASE),
    re.compile(r"(?<=://)[^/@\s]+:[^/@\s]+(?=@)"),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove credentials from messages before they reach a log sink."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized
