"""Multiplayer Bomberman over TCP: board logic, rooms, an asyncio server and a line-based client."""

__version__ = "0.1.0"