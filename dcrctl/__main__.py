"""Entry point for running dcrctl as a module: python -m dcrctl."""

from dcrctl.cli.commands import app

if __name__ == "__main__":
    app()
