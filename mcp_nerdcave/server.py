#!/usr/bin/env python3
"""MCP server for the Nerd Cave text adventure."""

from mcp.server.fastmcp import FastMCP

from nerdcave.engine import GameEngine
from nerdcave.log import configure_logging
from nerdcave.settings import load_settings

mcp = FastMCP("Nerd Cave")
engine = GameEngine()


@mcp.tool()
def command(text: str) -> str:
    """Type any command exactly as a player would (e.g. 'turn on light', 'wear clothes')."""
    return engine.execute(text).text


@mcp.tool()
def look(target: str = "") -> str:
    """Look around the current room, or examine something in it (computer, desk, wardrobe, chair, posters)."""
    return engine.execute(f"look {target}").text


@mcp.tool()
def go(direction: str) -> str:
    """Move in a direction: north, south, east, or west."""
    return engine.execute(f"go {direction}").text


@mcp.tool()
def take(item: str) -> str:
    """Pick up an item in the current room. Use the item's name as shown in room descriptions."""
    return engine.execute(f"take {item}").text


@mcp.tool()
def use(item: str) -> str:
    """Use an item from your inventory, or the light switch."""
    return engine.execute(f"use {item}").text


@mcp.tool()
def inventory() -> str:
    """Check what items you are currently carrying."""
    return engine.execute("inventory").text


@mcp.tool()
def help() -> str:
    """Show available commands and how to play."""
    return engine.execute("help").text


@mcp.tool()
def status() -> str:
    """Get current game state: room, inventory, turn count, and win/loss status."""
    state = engine.get_state()
    lines = [
        f"Room: {state['current_room']}",
        f"Inventory: {', '.join(state['inventory']) or 'empty'}",
        f"Turns: {state['turns']}",
        f"Won: {state['won']}",
        f"Lost: {state['lost']}",
    ]
    return "\n".join(lines)


def main():
    configure_logging(load_settings().log_level)
    mcp.run()


if __name__ == "__main__":
    main()
