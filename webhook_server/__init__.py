"""MCP server exposing the Discord webhook message tools."""
