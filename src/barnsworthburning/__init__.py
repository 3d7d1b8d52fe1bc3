"""MCP stdio server exposing barnsworthburning.net search."""

__version__ = "1.0.0"
