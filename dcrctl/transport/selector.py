"""Pick and open the transport for one invocation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from loguru import logger

from dcrctl.config.schema import TransportConfig
from dcrctl.transport.agent import AgentCaller, discover_agent
from dcrctl.transport.base import Caller
from dcrctl.transport.context import CallContext
from dcrctl.transport.direct import DirectCaller


class TransportKind(str, Enum):
    AGENT = "agent"
    DIRECT = "direct"


@dataclass(frozen=True, slots=True)
class TransportPlan:
    kind: TransportKind
    agent_path: str | None = None


def resolve_transport(config: TransportConfig, environ: Mapping[str, str] | None = None) -> TransportPlan:
    """Agent when one is advertised and no proxy is configured, else direct."""
    if config.agent_eligible:
        path = discover_agent(environ)
        if path:
            logger.debug("Using agent transport")
            return TransportPlan(TransportKind.AGENT, agent_path=path)
    logger.debug("Using direct transport")
    return TransportPlan(TransportKind.DIRECT)


def open_caller(plan: TransportPlan, config: TransportConfig, ctx: CallContext) -> Caller:
    """Dial according to ``plan``; raises DialError on failure."""
    if plan.kind is TransportKind.AGENT:
        return AgentCaller(config, plan.agent_path or "").dial(ctx)
    return DirectCaller(config).dial(ctx)
