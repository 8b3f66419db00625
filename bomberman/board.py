"""Game board: grid of tiles, players, bombs and explosions."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from enum import Enum

BOMB_FUSE = 3.0
"""Seconds between planting a bomb and its explosion."""

EXPLOSION_DURATION = 1.0
"""Seconds an explosion tile stays on the board."""

BREAKABLE_CHANCE = 0.2
"""Probability that a free inner tile starts out as a breakable block."""


class Tile(str, Enum):
    """A single cell of the board, stored as its display character."""

    WALL = "#"
    BREAKABLE = "*"
    EMPTY = " "
    PLAYER = "P"
    BOMB = "B"
    EXPLOSION = "X"


@dataclass
class Player:
    """A player standing on the board."""

    id: str
    x: int
    y: int


@dataclass
class Bomb:
    """A planted bomb waiting for its fuse to run out."""

    x: int
    y: int
    owner_id: str
    planted_at: float
    explodes_in: float = BOMB_FUSE

    def is_due(self, now: float) -> bool:
        return now - self.planted_at >= self.explodes_in


@dataclass
class ExplosionTile:
    """A tile covered by an explosion until its duration has passed."""

    x: int
    y: int
    created_at: float
    duration: float = EXPLOSION_DURATION

    def is_over(self, now: float) -> bool:
        return now - self.created_at >= self.duration


def _manhattan(x1: int, y1: int, x2: int, y2: int) -> int:
    return abs(x1 - x2) + abs(y1 - y2)


@dataclass(init=False)
class Board:
    """A rectangular arena surrounded by walls."""

    width: int
    height: int
    grid: list[list[Tile]]
    players: dict[str, Player] = field(default_factory=dict)
    explosions: list[ExplosionTile] = field(default_factory=list)
    bombs: list[Bomb] = field(default_factory=list)

    def __init__(self, width: int, height: int, rng: random.Random | None = None) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self.grid = [[self._initial_tile(x, y) for x in range(width)] for y in range(height)]
        self.players = {}
        self.explosions = []
        self.bombs = []

    def _initial_tile(self, x: int, y: int) -> Tile:
        if x in (0, self.width - 1) or y in (0, self.height - 1):
            return Tile.WALL
        if x % 2 == 0 and y % 2 == 0:
            return Tile.WALL
        if self._rng.random() < BREAKABLE_CHANCE:
            return Tile.BREAKABLE
        return Tile.EMPTY

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tick(self, now: float | None = None) -> tuple[list[str], bool]:
        """Advance time: detonate due bombs and clear finished explosions.

        Returns the ids of destroyed players and whether the grid changed.
        """
        if now is None:
            now = time.monotonic()
        changed = False
        destroyed: list[str] = []

        remaining_bombs = []
        for bomb in self.bombs:
            if bomb.is_due(now):
                destroyed.extend(self._explode(bomb, now))
                changed = True
            else:
                remaining_bombs.append(bomb)
        self.bombs = remaining_bombs

        remaining_explosions = []
        for explosion in self.explosions:
            if explosion.is_over(now):
                if self.grid[explosion.y][explosion.x] is Tile.EXPLOSION:
                    self.grid[explosion.y][explosion.x] = Tile.EMPTY
                    changed = True
            else:
                remaining_explosions.append(explosion)
        self.explosions = remaining_explosions

        return destroyed, changed

    def _explode(self, bomb: Bomb, now: float) -> list[str]:
        destroyed: list[str] = []
        blast = [
            (bomb.x, bomb.y),
            (bomb.x + 1, bomb.y),
            (bomb.x - 1, bomb.y),
            (bomb.x, bomb.y + 1),
            (bomb.x, bomb.y - 1),
        ]
        for x, y in blast:
            if not self._in_bounds(x, y) or self.grid[y][x] is Tile.WALL:
                continue
            hit = [pid for pid, p in self.players.items() if (p.x, p.y) == (x, y)]
            for pid in hit:
                del self.players[pid]
            destroyed.extend(hit)
            self.grid[y][x] = Tile.EXPLOSION
            self.explosions.append(ExplosionTile(x, y, created_at=now))
        return destroyed

    def plant_bomb(self, player_id: str, now: float | None = None) -> None:
        """Plant a bomb under the player, unless one is already there."""
        player = self.players.get(player_id)
        if player is None:
            return
        if self.grid[player.y][player.x] is Tile.BOMB:
            return
        if now is None:
            now = time.monotonic()
        self.grid[player.y][player.x] = Tile.BOMB
        self.bombs.append(Bomb(player.x, player.y, owner_id=player_id, planted_at=now))

    def _empty_positions(self) -> list[tuple[int, int]]:
        return [
            (x, y)
            for y in range(1, self.height - 1)
            for x in range(1, self.width - 1)
            if self.grid[y][x] is Tile.EMPTY
        ]

    def add_player(self, player_id: str) -> Player | None:
        """Place a new player as far as possible from the others.

        Returns None when there is no free tile left.
        """
        candidates = self._empty_positions()
        if not candidates:
            return None

        if not self.players:
            x, y = self._rng.choice(candidates)
        else:
            def nearest(pos: tuple[int, int]) -> int:
                return min(_manhattan(pos[0], pos[1], p.x, p.y) for p in self.players.values())

            # max() keeps the first of equally good positions.
            x, y = max(candidates, key=nearest)

        player = Player(player_id, x, y)
        self.players[player_id] = player
        self.grid[y][x] = Tile.PLAYER
        return player

    def remove_player(self, player_id: str) -> None:
        """Take a player off the board, freeing its tile."""
        player = self.players.pop(player_id, None)
        if player is None:
            return
        self.grid[player.y][player.x] = Tile.EMPTY

    def move_player(self, player_id: str, dx: int, dy: int) -> bool:
        """Move a player by (dx, dy) onto an empty tile; report success."""
        player = self.players.get(player_id)
        if player is None:
            return False
        new_x, new_y = player.x + dx, player.y + dy
        if not self._in_bounds(new_x, new_y):
            return False
        if self.grid[new_y][new_x] is not Tile.EMPTY:
            return False
        if self.grid[player.y][player.x] is Tile.PLAYER:
            self.grid[player.y][player.x] = Tile.EMPTY
        self.grid[new_y][new_x] = Tile.PLAYER
        player.x, player.y = new_x, new_y
        return True

    def __str__(self) -> str:
        return "".join("".join(tile.value for tile in row) + "\n" for row in self.grid)