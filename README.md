# bomberman

A small multiplayer Bomberman game that runs over a plain TCP connection.
The server keeps a set of rooms. Each room has its own board and its own
players. When the board changes, the server sends it as text to every
player in that room.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Configuration

The server and the client both read a `.env` file. By default this file is
in the current directory. You can give a different path with
`--env-file PATH`. If the file is missing, the command logs an error and
exits with status 1. Two variables are read:

```
SERVER_ADDR=localhost
SERVER_PORT=8080
```

A variable that is empty or not set falls back to its default: `localhost`
for the address and `8080` for the port.

## Running the server

```
bomberman-server [--env-file PATH]
```

The server listens on the configured address and port. It starts with one
room, `room-1`, which has a 13×11 board. Every room advances its board twice
a second. The server keeps running until it receives Ctrl-C or SIGTERM. It
then stops accepting connections, disconnects every client and stops the
rooms.

## Running the client

```
bomberman-client [--env-file PATH]
```

The client connects to the configured server and prints
`connected to Bomberman server!`. Each line you type is sent to the server.
Every line the server sends back is printed with the prefix `Server: `. The
client exits when the server closes the connection. If it cannot connect,
it exits with status 1.

## Playing

When you connect, the server sends a list of commands and the current rooms
with their player counts. The server treats each read from the connection as
one command, with surrounding whitespace removed.

| Command       | Effect                                              |
|---------------|-----------------------------------------------------|
| `JOIN`        | Join the room with the fewest players               |
| `JOIN <room>` | Join the named room, creating it if it is new       |
| `ROOMS`       | List the rooms and how many players are in each     |
| `ESC [A`      | Move up one tile                                    |
| `ESC [B`      | Move down one tile                                  |
| `ESC [C`      | Move right one tile                                 |
| `ESC [D`      | Move left one tile                                  |
| `b`           | Plant a bomb on your tile                           |

You must join a room before you can move or plant a bomb. Until then, every
other command gets the reply `Please JOIN <room> first.` When you join, you
are placed on the free tile that is farthest from the other players. If the
board has no free tile, you get `Room is full!` and the server closes the
connection. You can move only onto an empty tile. If a move is blocked, you
get the reply `Can't move`.

Board tiles:

| Tile | Meaning                |
|------|------------------------|
| `#`  | Wall, cannot be broken |
| `*`  | Breakable block        |
| `P`  | Player                 |
| `B`  | Bomb                   |
| `X`  | Explosion              |

A bomb goes off three seconds after it is planted. The blast covers the
bomb's tile and the four tiles next to it, but it does not reach wall tiles.
Breakable blocks in the blast are destroyed. Any player caught in the blast
gets `You have been destroyed!` and is disconnected. The rest of the room is
told `Player <id> has been destroyed!`. Explosion tiles clear after one
second.

## What it does not do

The client is line-based. It does not read single key presses and does not
draw the board in place. It prints each board the server sends as lines of
text. To move with the arrow keys, your terminal must pass their escape
sequences through as part of a typed line.

## Using the library

You can use the game logic without the network layer:

```python
import random

from bomberman.board import Board

board = Board(13, 11, random.Random(1))
player = board.add_player("alice")
board.move_player("alice", 1, 0)
board.plant_bomb("alice")
destroyed, changed = board.tick()
print(board)
```

The game logic lives in these modules:

- `bomberman.board`: `Board`, `Player`, `Bomb`, `ExplosionTile` and the `Tile` enum.
- `bomberman.room`: `Room`, which holds one board and its clients and runs a periodic tick on the asyncio event loop.
- `bomberman.server`: `Server`, with `listen()` and `stop()` as coroutines.
- `bomberman.config`: `load_server_config()` and `load_client_config()`. Each of them raises `ConfigError` if the settings file is missing.