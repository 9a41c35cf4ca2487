"""Run one command through the request pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Mapping, Sequence, TextIO

from loguru import logger

from dcrctl.config import Config, TransportConfig, apply_overrides, build_transport_config, load_config
from dcrctl.methods import DEFAULT_REGISTRIES, MethodRegistry
from dcrctl.rpc import encode_request, materialize_args, render_result, resolve_command
from dcrctl.transport import CallContext, Caller, RawResult, TransportPlan, open_caller, resolve_transport


class RpcService:
    """Resolve, materialize, encode, dial, call and render.

    Every step raises a DcrctlError subclass on failure; nothing is printed
    here, so a failed run never produces partial output.
    """

    def __init__(
        self,
        *,
        registries: Sequence[MethodRegistry] = DEFAULT_REGISTRIES,
        stdin: TextIO | None = None,
        environ: Mapping[str, str] | None = None,
        opener: Callable[[TransportPlan, TransportConfig, CallContext], Caller] | None = None,
    ):
        self.registries = registries
        self.stdin = stdin
        self.environ = environ
        self.opener = opener or open_caller

    def load_transport_config(self, config_path: Path | None = None, **overrides: Any) -> TransportConfig:
        config: Config = apply_overrides(load_config(config_path), **overrides)
        return build_transport_config(config)

    def run(
        self,
        transport_config: TransportConfig,
        method: str,
        tokens: Sequence[str],
        ctx: CallContext | None = None,
    ) -> str | None:
        ctx = ctx or CallContext(transport_config.timeout or None)
        descriptor = resolve_command(method, self.registries)
        args = materialize_args(tokens, self.stdin, ctx)
        request = encode_request(descriptor, args)

        plan = resolve_transport(transport_config, self.environ)
        result = RawResult()
        caller = self.opener(plan, transport_config, ctx)
        try:
            caller.call(ctx, request.method, result, *request.params)
        finally:
            caller.close()
        logger.debug("Call {} returned {} byte(s)", request.method, len(result.raw or ""))
        return render_result(result.raw)
