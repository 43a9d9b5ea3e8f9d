# main.py
import logging
import sys

from .config import CFG, Config
from .game import GameState, new_game_state, step_game, draw_game
from .terminal import TerminalSurface, TerminalError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def handle_input(state: GameState, surface: TerminalSurface, cfg: Config = CFG) -> bool:
    """Wait up to one tick for a key; latch it or flag quit. Return False to quit."""
    key = surface.poll_key(cfg.tick_seconds)
    if key is None:
        return True
    if key == cfg.quit_key:
        state.should_quit = True
        return False
    state.keydown = key
    return True


def tick(state: GameState, surface: TerminalSurface, frame: int, cfg: Config = CFG) -> int:
    """Run one scheduler tick and return the updated frame counter."""
    # 1) input (the bounded poll is also the tick timer)
    if not handle_input(state, surface, cfg):
        return frame

    # 2) every frame_skips + 1 ticks: render the current state, then step it
    if frame == cfg.frame_skips:
        draw_game(surface, state)
        step_game(state, cfg)
        return 0
    return frame + 1


def run(surface: TerminalSurface, cfg: Config = CFG) -> GameState:
    width, height = surface.size()
    state = new_game_state(width, height, cfg)
    frame = 0

    with surface.session():
        while not state.should_quit:
            frame = tick(state, surface, frame, cfg)

    logger.info("quit with snake length %d", len(state.snake))
    return state


def configure_logging(cfg: Config = CFG) -> None:
    # Nothing may reach the screen while the alternate buffer is up.
    if cfg.log_file:
        logging.basicConfig(filename=cfg.log_file, level=logging.DEBUG, format=LOG_FORMAT)
    else:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)


def main() -> int:
    configure_logging(CFG)
    try:
        run(TerminalSurface(), CFG)
    except TerminalError as exc:
        logger.error("cannot start game: %s", exc)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
