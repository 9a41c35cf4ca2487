"""Text for the -l and -V switches."""

from __future__ import annotations

import platform

from dcrctl import __version__
from dcrctl.methods import CHAIN_REGISTRY, WALLET_REGISTRY, MethodRegistry
from dcrctl.rpc.resolver import is_usable

GROUPS: tuple[tuple[str, MethodRegistry], ...] = (
    ("Chain Server Commands:", CHAIN_REGISTRY),
    ("Wallet Server Commands (--wallet):", WALLET_REGISTRY),
)


def list_commands_text(groups: tuple[tuple[str, MethodRegistry], ...] = GROUPS) -> str:
    lines: list[str] = []
    for title, registry in groups:
        lines.append(title)
        for name in registry.list_names():
            descriptor = registry.get(name)
            if is_usable(descriptor):
                lines.append(descriptor.usage)
        lines.append("")
    return "\n".join(lines)


def version_text() -> str:
    return (
        f"dcrctl version {__version__} "
        f"(Python version {platform.python_version()} {platform.system().lower()}/{platform.machine()})"
    )
