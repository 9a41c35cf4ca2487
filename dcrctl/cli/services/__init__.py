"""Services backing the CLI command."""
