"""dcrctl - command-line JSON-RPC client for Decred chain and wallet servers."""

__version__ = "1.6.0"
