"""Utility functions for dcrctl."""

from dcrctl.utils.exceptions import (
    DcrctlError,
    UnknownCommandError,
    UnusableCommandError,
    InsufficientStdinError,
    StdinReadError,
    InvalidArgumentsError,
    RegistrationError,
    EncodingError,
    ConfigError,
    TransportError,
    DialError,
    CallCancelledError,
    RPCError,
    RenderError,
    ErrorCategory,
    sanitize_error_message,
)
from dcrctl.utils.helpers import app_data_dir, clean_and_expand_path

__all__ = [
    "app_data_dir",
    "clean_and_expand_path",
    "DcrctlError",
    "UnknownCommandError",
    "UnusableCommandError",
    "InsufficientStdinError",
    "StdinReadError",
    "InvalidArgumentsError",
    "RegistrationError",
    "EncodingError",
    "ConfigError",
    "TransportError",
    "DialError",
    "CallCancelledError",
    "RPCError",
    "RenderError",
    "ErrorCategory",
    "sanitize_error_message",
]
