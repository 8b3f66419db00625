"""A game room: one board shared by the clients that joined it."""

from __future__ import annotations

import asyncio
import logging

from .board import Board
from .connection import Client

log = logging.getLogger(__name__)

TICK_INTERVAL = 0.5


class Room:
    """A named board with its clients and a periodic tick task."""

    def __init__(self, name: str, width: int, height: int) -> None:
        self.name = name
        self.board = Board(width, height)
        self.clients: dict[str, Client] = {}
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking the board on the running event loop."""
        if not self.running:
            self._task = asyncio.get_running_loop().create_task(self._tick_loop())

    async def _tick_loop(self) -> None:
        while True:
            await asyncio.sleep(TICK_INTERVAL)
            self.tick()

    def tick(self) -> list[str]:
        """Advance the board once; return the ids of the players destroyed."""
        destroyed, changed = self.board.tick()
        announcements = []
        for player_id in destroyed:
            log.info("Destroying player %s", player_id)
            client = self.clients.pop(player_id, None)
            if client is not None:
                client.send("You have been destroyed!\n")
                client.disconnect()
                announcements.append(f"Player {player_id} has been destroyed!\n")
        if changed:
            self.broadcast(str(self.board))
        for announcement in announcements:
            self.broadcast(announcement)
        return destroyed

    def broadcast(self, message: str) -> None:
        """Send a message to every client in the room."""
        for client in list(self.clients.values()):
            client.send(message)

    def shutdown(self) -> None:
        """Stop the tick task."""
        if self._task is not None:
            self._task.cancel()
            self._task = None