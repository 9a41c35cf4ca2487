"""Method registries for the chain and wallet servers."""

from dcrctl.methods.chain import CHAIN_REGISTRY
from dcrctl.methods.registry import MethodRegistry, opt, req
from dcrctl.methods.types import Command, MethodDescriptor, ParamKind, ParamSpec, UsageFlag
from dcrctl.methods.wallet import WALLET_REGISTRY

# Resolution order: chain first, wallet second.
DEFAULT_REGISTRIES: tuple[MethodRegistry, ...] = (CHAIN_REGISTRY, WALLET_REGISTRY)

__all__ = [
    "CHAIN_REGISTRY",
    "WALLET_REGISTRY",
    "DEFAULT_REGISTRIES",
    "MethodRegistry",
    "MethodDescriptor",
    "Command",
    "ParamKind",
    "ParamSpec",
    "UsageFlag",
    "opt",
    "req",
]
