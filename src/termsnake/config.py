from dataclasses import dataclass
from typing import Optional

# ----- Timing -----
FPS = 60
FRAME_SKIPS = 5  # simulation advances once every FRAME_SKIPS + 1 ticks

# ----- Glyphs -----
SNAKE_GLYPH = "o"
FOOD_GLYPH = "x"

# ----- Keys -----
QUIT_KEY = "q"
KEY_UP, KEY_LEFT, KEY_DOWN, KEY_RIGHT = "w", "a", "s", "d"

# ----- Initial snake (tail first, head last) -----
START_SEGMENTS = [(0, 0), (1, 0), (2, 0)]

# ----- Terminal control sequences (DECAWM) -----
DISABLE_LINE_WRAP = "\x1b[?7l"
ENABLE_LINE_WRAP = "\x1b[?7h"

# ----- Tunables -----
@dataclass
class Config:
    fps: int = FPS
    frame_skips: int = FRAME_SKIPS
    quit_key: str = QUIT_KEY
    seed: Optional[int] = None         # None -> fresh entropy every run
    wrap_edges: bool = False           # wrap the head around the grid instead of leaving it
    food_avoids_snake: bool = False    # re-sample food that lands on the body
    log_file: Optional[str] = None     # DEBUG log destination; stderr/WARNING otherwise

    @property
    def tick_seconds(self) -> float:
        return 1.0 / self.fps

CFG = Config()
