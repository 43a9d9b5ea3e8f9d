from .game import Direction, Snake, GameState, new_game_state, spawn_food, step_game, draw_game
from .terminal import TerminalSurface, TerminalError
