# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple
import logging

import numpy as np  # type: ignore

from .config import (
    CFG, Config,
    SNAKE_GLYPH, FOOD_GLYPH,
    KEY_UP, KEY_LEFT, KEY_DOWN, KEY_RIGHT,
    START_SEGMENTS,
)
from .terminal import TerminalSurface

logger = logging.getLogger(__name__)

Point = Tuple[int, int]

# ---------- Direction ----------
class Direction(Enum):
    """Grid direction; the value is the (dx, dy) step. Rows grow downwards."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_opposite(self, other: Direction) -> bool:
        return other is self.opposite

KEY_DIRECTIONS: Dict[str, Direction] = {
    KEY_UP: Direction.UP,
    KEY_LEFT: Direction.LEFT,
    KEY_DOWN: Direction.DOWN,
    KEY_RIGHT: Direction.RIGHT,
}

# ---------- State ----------
@dataclass
class Snake:
    segments: List[Point]   # tail at index 0, head at index -1
    direction: Direction

    @property
    def head(self) -> Point:
        return self.segments[-1]

    def __len__(self) -> int:
        return len(self.segments)

@dataclass
class GameState:
    snake: Snake
    width: int
    height: int
    food: Point = (0, 0)
    keydown: Optional[str] = None   # sticky: only ever overwritten, never cleared
    should_quit: bool = False
    rng: np.random.Generator = field(default_factory=np.random.default_rng, repr=False)

def new_game_state(width: int, height: int, cfg: Config = CFG) -> GameState:
    state = GameState(
        snake=Snake(segments=list(START_SEGMENTS), direction=Direction.RIGHT),
        width=width,
        height=height,
        rng=np.random.default_rng(cfg.seed),
    )
    state.food = spawn_food(state, avoid_snake=cfg.food_avoids_snake)
    logger.debug("new game on %dx%d grid, food at %s", width, height, state.food)
    return state

# ---------- Helpers ----------
def _random_cell(state: GameState) -> Point:
    # Last column and last row are never used for food.
    x = int(state.rng.integers(0, state.width - 1))
    y = int(state.rng.integers(0, state.height - 1))
    return (x, y)

def spawn_food(state: GameState, avoid_snake: bool = False) -> Point:
    """Pick a food cell in [0, width-1) x [0, height-1).

    With ``avoid_snake`` the pick is re-drawn until it misses the body, unless
    the body already covers every candidate cell.
    """
    if not avoid_snake:
        return _random_cell(state)

    occupied = {
        (x, y) for x, y in state.snake.segments
        if 0 <= x < state.width - 1 and 0 <= y < state.height - 1
    }
    if len(occupied) >= (state.width - 1) * (state.height - 1):
        logger.warning("no free cell for food, placing it on the snake")
        return _random_cell(state)

    while True:
        cell = _random_cell(state)
        if cell not in occupied:
            return cell

def _on_grid(state: GameState, x: int, y: int) -> bool:
    return 0 <= x < state.width and 0 <= y < state.height

# ---------- Update / Draw ----------
def resolve_direction(state: GameState) -> None:
    """Turn towards the latched key unless that would reverse the snake."""
    if state.keydown is None:
        return
    cand = KEY_DIRECTIONS.get(state.keydown)
    if cand is not None and not cand.is_opposite(state.snake.direction):
        state.snake.direction = cand

def step_game(state: GameState, cfg: Config = CFG) -> None:
    """
    Advance the simulation by one step.

    Food is checked against the head *before* it moves, so growth shows up one
    step after the head enters the food cell.
    """
    resolve_direction(state)

    snake = state.snake
    x, y = snake.head

    if (x, y) == state.food:
        state.food = spawn_food(state, avoid_snake=cfg.food_avoids_snake)
        logger.debug("ate food at %s, length %d, next food %s", (x, y), len(snake) + 1, state.food)
    else:
        snake.segments.pop(0)

    dx, dy = snake.direction.value
    x, y = x + dx, y + dy
    if cfg.wrap_edges:
        x, y = x % state.width, y % state.height

    snake.segments.append((x, y))

def draw_game(surface: TerminalSurface, state: GameState) -> None:
    surface.clear()
    fx, fy = state.food
    surface.put(fx, fy, FOOD_GLYPH)
    for x, y in state.snake.segments:
        # No wall collision: segments may leave the grid and come back later.
        if _on_grid(state, x, y):
            surface.put(x, y, SNAKE_GLYPH)
    surface.flush()
