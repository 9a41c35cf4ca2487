"""Map a command name to the method descriptor that will serve it."""

from __future__ import annotations

from typing import Sequence

from loguru import logger

from dcrctl.methods import DEFAULT_REGISTRIES, MethodDescriptor, MethodRegistry, UsageFlag
from dcrctl.utils.exceptions import UnknownCommandError, UnusableCommandError

# One request, one response: no subscriptions, no notifications.
UNUSABLE_FLAGS = UsageFlag.WEBSOCKET_ONLY | UsageFlag.NOTIFICATION


def resolve_command(
    method: str,
    registries: Sequence[MethodRegistry] = DEFAULT_REGISTRIES,
) -> MethodDescriptor:
    """Return the first registry's descriptor for ``method``, rejecting unusable methods."""
    for registry in registries:
        descriptor = registry.lookup(method)
        if descriptor is not None:
            break
    else:
        raise UnknownCommandError(method)

    flags = registry.usage_flags(method)
    if flags & UNUSABLE_FLAGS:
        raise UnusableCommandError(method, int(flags))
    logger.debug("Resolved {} in {} namespace (flags={:#x})", method, registry.namespace, int(flags))
    return descriptor


def is_usable(descriptor: MethodDescriptor) -> bool:
    return not descriptor.flags & UNUSABLE_FLAGS
