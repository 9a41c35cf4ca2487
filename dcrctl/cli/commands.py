"""CLI entry point for dcrctl.

``dcrctl [flags] <command> [args...]`` sends one JSON-RPC request to a chain
or wallet server and prints the result. Flags must precede the command; a
``-`` argument is read from stdin.
"""

import signal
import sys
from pathlib import Path
from typing import List, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from dcrctl.cli.services.rpc_service import RpcService
from dcrctl.cli.shared.listing import list_commands_text, version_text
from dcrctl.cli.shared.logging_utils import configure_logging
from dcrctl.transport import CallContext
from dcrctl.utils.exceptions import (
    DcrctlError,
    InvalidArgumentsError,
    UnknownCommandError,
    sanitize_error_message,
)

app = typer.Typer(
    name="dcrctl",
    help="Send a single JSON-RPC command to a Decred chain or wallet server.",
    add_completion=False,
)

err_console = Console(stderr=True, highlight=False, soft_wrap=True)

EXIT_FAILURE = 1
EXIT_USAGE = 2


def version_callback(value: bool):
    if value:
        typer.echo(version_text())
        raise typer.Exit()


def list_callback(value: bool):
    if value:
        typer.echo(list_commands_text())
        raise typer.Exit()


def print_error(exc: DcrctlError) -> None:
    if isinstance(exc, InvalidArgumentsError) and exc.method:
        err_console.print(escape(f"{exc.method} command: {exc} (code: {exc.reason})"))
        if exc.usage:
            err_console.print("Usage:")
            err_console.print(escape(f"  {exc.usage}"))
        return
    err_console.print(escape(str(exc)))
    if isinstance(exc, UnknownCommandError):
        err_console.print("Specify -l to list available commands")


def _install_interrupt_handler(ctx: CallContext):
    def _on_interrupt(signum, frame):
        logger.debug("Interrupt received, cancelling call")
        # A second Ctrl-C aborts immediately.
        signal.signal(signal.SIGINT, signal.default_int_handler)
        ctx.interrupt()

    return signal.signal(signal.SIGINT, _on_interrupt)


@app.command(context_settings={"allow_interspersed_args": False})
def main(
    typer_ctx: typer.Context,
    command: Optional[str] = typer.Argument(None, help="RPC method name"),
    params: Optional[List[str]] = typer.Argument(None, help="Method parameters; '-' reads a line from stdin"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-C", help="Path to configuration file"),
    version: bool = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Display version information and exit"
    ),
    list_commands: bool = typer.Option(
        None, "--list", "-l", callback=list_callback, is_eager=True, help="List all of the supported commands and exit"
    ),
    rpcserver: Optional[str] = typer.Option(None, "--rpcserver", "-s", help="RPC server to connect to"),
    wallet: bool = typer.Option(False, "--wallet", help="Connect to wallet RPC server instead"),
    testnet: bool = typer.Option(False, "--testnet", help="Connect to testnet"),
    simnet: bool = typer.Option(False, "--simnet", help="Connect to the simulation test network"),
    authtype: Optional[str] = typer.Option(None, "--authtype", help="Method for RPC client authentication (basic or clientcert)"),
    rpcuser: Optional[str] = typer.Option(None, "--rpcuser", "-u", help="RPC username"),
    rpcpass: Optional[str] = typer.Option(None, "--rpcpass", "-P", help="RPC password"),
    rpccert: Optional[str] = typer.Option(None, "--rpccert", "-c", help="RPC server certificate chain for validation"),
    clientcert: Optional[str] = typer.Option(None, "--clientcert", help="Path to TLS certificate for client authentication"),
    clientkey: Optional[str] = typer.Option(None, "--clientkey", help="Path to TLS client authentication key"),
    proxy: Optional[str] = typer.Option(None, "--proxy", help="Connect via SOCKS5 proxy (eg. 127.0.0.1:9050)"),
    proxyuser: Optional[str] = typer.Option(None, "--proxyuser", help="Username for proxy server"),
    proxypass: Optional[str] = typer.Option(None, "--proxypass", help="Password for proxy server"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Seconds to wait for dial and call (0 waits forever)"),
    debug: bool = typer.Option(False, "--debug", help="Print debug logs to stderr"),
):
    """Send COMMAND with PARAMS to the RPC server and print the result."""
    configure_logging(debug)

    if not command:
        err_console.print("missing command parameter")
        err_console.print(escape(typer_ctx.get_usage()))
        err_console.print("Try 'dcrctl --help' for help.")
        raise typer.Exit(EXIT_USAGE)

    service = RpcService(stdin=sys.stdin)
    try:
        transport_config = service.load_transport_config(
            config_file,
            rpc_server=rpcserver,
            wallet=wallet,
            testnet=testnet,
            simnet=simnet,
            auth_type=authtype,
            rpc_user=rpcuser,
            rpc_password=rpcpass,
            rpc_cert=rpccert,
            client_cert=clientcert,
            client_key=clientkey,
            proxy=proxy,
            proxy_user=proxyuser,
            proxy_pass=proxypass,
            timeout=timeout,
        )
        call_ctx = CallContext(transport_config.timeout or None)
        previous_handler = _install_interrupt_handler(call_ctx)
        try:
            output = service.run(transport_config, command, params or [], call_ctx)
        finally:
            signal.signal(signal.SIGINT, previous_handler or signal.SIG_DFL)
    except DcrctlError as e:
        logger.debug("{} failed: {}", command, sanitize_error_message(str(e)))
        print_error(e)
        raise typer.Exit(EXIT_FAILURE)

    if output is not None:
        typer.echo(output)


if __name__ == "__main__":
    app()
