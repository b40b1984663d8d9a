"""MCP front end for the Nerd Cave engine."""
