"""Command line interface for jsonrpc_http."""
