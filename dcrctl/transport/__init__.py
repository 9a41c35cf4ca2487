"""Transports carrying one JSON-RPC call to the server."""

from dcrctl.transport.agent import AGENT_ENV, AgentCaller, discover_agent
from dcrctl.transport.base import Caller, RawResult
from dcrctl.transport.context import CallContext
from dcrctl.transport.direct import DirectCaller
from dcrctl.transport.selector import TransportKind, TransportPlan, open_caller, resolve_transport

__all__ = [
    "AGENT_ENV",
    "AgentCaller",
    "CallContext",
    "Caller",
    "DirectCaller",
    "RawResult",
    "TransportKind",
    "TransportPlan",
    "discover_agent",
    "open_caller",
    "resolve_transport",
]
