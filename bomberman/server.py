"""The TCP game server: accepts players and routes their commands to rooms."""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress

from .connection import Client
from .room import Room

log = logging.getLogger(__name__)

ROOM_WIDTH = 13
ROOM_HEIGHT = 11
FIRST_ROOM = "room-1"
READ_SIZE = 1024
BOMB_COMMAND = "b"

MOVES: dict[str, tuple[int, int]] = {
    "\x1b[A": (0, -1),
    "\x1b[B": (0, 1),
    "\x1b[C": (1, 0),
    "\x1b[D": (-1, 0),
}

_INSTRUCTIONS = (
    "=== Welcome to Bomberman ===\n"
    "Commands:\n"
    "  JOIN            - Join any available room\n"
    "  JOIN <room>     - Join or create a specific room\n"
    "  ROOMS           - List rooms and player counts\n"
    "  Use arrow keys  - Move around (← ↑ → ↓)\n"
    "  Press 'b'       - Plant a bomb\n"
    "----------------------------------------\n"
    "Current Rooms:\n"
)


def _peer_name(peer: object) -> str:
    if isinstance(peer, tuple) and len(peer) >= 2:
        host, port = peer[0], peer[1]
        if ":" in str(host):
            return f"[{host}]:{port}"
        return f"{host}:{port}"
    return str(peer)


class Server:
    """Accepts connections and keeps track of clients and rooms."""

    def __init__(self, addr: str, port: str) -> None:
        self.addr = addr
        self.port = port
        self.listener: asyncio.AbstractServer | None = None
        self.clients: dict[str, Client] = {}
        self.rooms: dict[str, Room] = {}
        self.running = False

    def build_instructions(self) -> str:
        """The welcome text with the current rooms and their player counts."""
        rooms = "".join(
            f"  {name}: {len(room.clients)} players\n" for name, room in self.rooms.items()
        )
        return _INSTRUCTIONS + rooms

    async def listen(self) -> None:
        """Bind the listening socket, open the first room and start accepting."""
        self.listener = await asyncio.start_server(
            self.handle_connection, self.addr, int(self.port)
        )
        self.running = True
        log.info("Bomberman server listening on %s:%s", self.addr, self.port)
        self.rooms[FIRST_ROOM] = self._open_room(FIRST_ROOM)

    async def stop(self) -> None:
        """Stop accepting, drop every client and halt the rooms."""
        if not self.running:
            return
        self.running = False
        listener = self.listener
        if listener is not None:
            listener.close()
            log.info("server is shutting down - stopping accept loop.")

        for addr, client in list(self.clients.items()):
            log.info("closing connection to %s", addr)
            client.disconnect()
        self.clients = {}

        for room in self.rooms.values():
            room.shutdown()

        if listener is not None:
            with suppress(asyncio.TimeoutError):
                await asyncio.wait_for(listener.wait_closed(), timeout=1.0)
        log.info("server shutdown complete.")

    async def handle_connection(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        """Serve one player from greeting to disconnect."""
        client_addr = _peer_name(writer.get_extra_info("peername"))
        log.info("new connection from %s", client_addr)
        client = Client(id=client_addr, writer=writer, addr=client_addr)
        self.clients[client_addr] = client
        room: Room | None = None
        try:
            client.send(self.build_instructions())
            while True:
                try:
                    data = await reader.read(READ_SIZE)
                except OSError:
                    break
                if not data:
                    break
                msg = data.decode("utf-8", errors="replace").strip()

                if msg == "ROOMS":
                    client.send(self.build_instructions())
                    continue

                if room is None:
                    if not msg.startswith("JOIN"):
                        client.send("Please JOIN <room> first.\n")
                        continue
                    room = self._join(client, msg)
                    if room is None:
                        break
                    continue

                self._play(client, room, msg)
        finally:
            if room is not None:
                room.clients.pop(client.id, None)
                room.board.remove_player(client.id)
                room.broadcast(str(room.board))
            self.clients.pop(client_addr, None)
            writer.close()
            with suppress(OSError, RuntimeError):
                await writer.wait_closed()

    def _open_room(self, name: str) -> Room:
        room = Room(name, ROOM_WIDTH, ROOM_HEIGHT)
        room.start()
        return room

    def _least_crowded_room(self) -> str:
        if not self.rooms:
            return f"room-{len(self.rooms) + 1}"
        return min(self.rooms, key=lambda name: len(self.rooms[name].clients))

    def _join(self, client: Client, msg: str) -> Room | None:
        parts = msg.split(" ", 1)
        name = parts[1].strip() if len(parts) == 2 else self._least_crowded_room()

        room = self.rooms.get(name)
        if room is None:
            room = self._open_room(name)
            self.rooms[name] = room

        room.clients[client.id] = client
        player = room.board.add_player(client.id)
        if player is None:
            room.clients.pop(client.id, None)
            client.send("Room is full!\n")
            return None

        client.send(f"Joined room: {name}\n")
        room.broadcast(str(room.board))
        return room

    def _play(self, client: Client, room: Room, msg: str) -> None:
        if msg == BOMB_COMMAND:
            room.board.plant_bomb(client.id)
            room.broadcast(str(room.board))
            dx, dy = 0, 0
        elif msg in MOVES:
            dx, dy = MOVES[msg]
        else:
            client.send("Unknown command\n")
            return

        moved = room.board.move_player(client.id, dx, dy)
        if moved or msg == BOMB_COMMAND:
            room.broadcast(str(room.board))
        else:
            client.send("Can't move\n")