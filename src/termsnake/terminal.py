# terminal.py
"""
Terminal surface the game renders into and reads keys from.

Everything that touches process-wide terminal modes lives here, so the game
core only sees ``size``, ``poll_key`` and a small drawing sink.
"""
from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple
import logging

from blessed import Terminal  # type: ignore

from .config import DISABLE_LINE_WRAP, ENABLE_LINE_WRAP

logger = logging.getLogger(__name__)

MIN_WIDTH, MIN_HEIGHT = 2, 2


class TerminalError(RuntimeError):
    """The terminal cannot host a game (not a TTY, or too small)."""


class TerminalSurface:
    def __init__(self, term: Optional[Terminal] = None):
        self.term = term if term is not None else Terminal()
        self._buffer: List[str] = []

    # ---------- Setup ----------
    def size(self) -> Tuple[int, int]:
        """Return (width, height) in cells, or raise TerminalError."""
        if not self.term.is_a_tty:
            raise TerminalError("output is not a terminal")
        # blessed leaves _keyboard_fd unset when stdin is not a TTY; cbreak() is then a no-op.
        if self.term._keyboard_fd is None:
            raise TerminalError("keyboard input is not a terminal, cannot enter cbreak mode")
        width, height = self.term.width, self.term.height
        if width < MIN_WIDTH or height < MIN_HEIGHT:
            raise TerminalError(
                f"terminal too small: {width}x{height}, minimum {MIN_WIDTH}x{MIN_HEIGHT}"
            )
        return width, height

    @contextmanager
    def session(self) -> Iterator[TerminalSurface]:
        """
        Alternate screen, cbreak input, hidden cursor and no line wrap for the
        duration of the block. Restored once on every way out of the block.
        """
        term = self.term
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            try:
                self._emit(DISABLE_LINE_WRAP)
                logger.debug("terminal session started (%dx%d)", term.width, term.height)
                yield self
            finally:
                self._buffer.clear()
                self._emit(ENABLE_LINE_WRAP)
        logger.debug("terminal session restored")

    # ---------- Input ----------
    def poll_key(self, timeout: float) -> Optional[str]:
        """Wait up to ``timeout`` seconds for a character key.

        Returns None on timeout and for non-character keys (arrows, escape...).
        """
        key = self.term.inkey(timeout=timeout)
        if not key or key.is_sequence:
            return None
        return str(key)

    # ---------- Drawing ----------
    def clear(self) -> None:
        self._buffer.append(self.term.home + self.term.clear)

    def put(self, x: int, y: int, char: str) -> None:
        self._buffer.append(self.term.move_xy(x, y) + char)

    def flush(self) -> None:
        self._emit("".join(self._buffer))
        self._buffer.clear()

    def _emit(self, text: str) -> None:
        self.term.stream.write(text)
        self.term.stream.flush()
