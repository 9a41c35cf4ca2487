"""CLI for dcrctl."""
