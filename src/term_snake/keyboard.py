"""Raw keyboard input decoded into directions on a background thread."""

from __future__ import annotations

import contextlib
import enum
import logging
import os
import queue
import sys
import threading
from collections.abc import Iterator

from term_snake.snake import Direction

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - not available on Windows
    termios = None
    tty = None

logger = logging.getLogger(__name__)

# Arrow keys arrive as ESC [ <final byte>.
_ARROW_PREFIX = b"\x1b["
_ARROW_KEYS: dict[int, Direction] = {
    ord("A"): Direction.UP,
    ord("B"): Direction.DOWN,
    ord("C"): Direction.RIGHT,
    ord("D"): Direction.LEFT,
}
_LETTER_KEYS: dict[bytes, Direction] = {
    b"w": Direction.UP,
    b"s": Direction.DOWN,
    b"a": Direction.LEFT,
    b"d": Direction.RIGHT,
}
_QUIT_KEYS = frozenset({b"q", b"Q"})
_READ_SIZE = 3

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


class KeyEvent(enum.Enum):
    """Non-directional commands sent through the hand-off queue."""

    QUIT = "quit"


def decode_key(data: bytes) -> Direction | KeyEvent | None:
    """Reduce one raw read from the terminal to at most one event.

    A read may carry several keys (auto-repeat, fast typing). A quit key
    anywhere in it wins; otherwise the last direction in it is returned.
    """
    direction = None
    i = 0
    while i < len(data):
        if data.startswith(_ARROW_PREFIX, i):
            if i + 2 >= len(data):
                break
            direction = _ARROW_KEYS.get(data[i + 2], direction)
            i += 3
            continue
        key = data[i:i + 1]
        if key in _QUIT_KEYS:
            return KeyEvent.QUIT
        direction = _LETTER_KEYS.get(key.lower(), direction)
        i += 1
    return direction


class KeyboardInput:
    """Reads a file descriptor on a daemon thread and hands off directions.

    The hand-off queue holds a single event; a newer key press replaces
    one the game loop has not consumed yet.
    """

    def __init__(self, fd: int | None = None) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd
        self.quit_requested = False
        self._events: queue.Queue[Direction | KeyEvent] = queue.Queue(maxsize=1)
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Spawn the reader thread. It is never joined."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self._read_loop, name="keyboard-input", daemon=True,
        )
        self._thread.start()
        logger.debug("Keyboard reader started on fd %d.", self.fd)

    def poll(self) -> Direction | None:
        """Return the pending direction without blocking.

        A pending quit event sets :attr:`quit_requested` and yields ``None``.
        """
        try:
            event = self._events.get_nowait()
        except queue.Empty:
            return None
        if event is KeyEvent.QUIT:
            self.quit_requested = True
            return None
        return event

    def _read_loop(self) -> None:
        while True:
            data = os.read(self.fd, _READ_SIZE)
            if not data:
                logger.debug("Keyboard input reached EOF.")
                return
            event = decode_key(data)
            if event is KeyEvent.QUIT:
                # Nothing read afterwards can replace the quit event.
                self._publish(event)
                logger.debug("Quit key read; keyboard reader stopping.")
                return
            if event is not None:
                self._publish(event)

    def _publish(self, event: Direction | KeyEvent) -> None:
        try:
            self._events.put_nowait(event)
        except queue.Full:
            # Drop the stale event in favour of the latest key.
            with contextlib.suppress(queue.Empty):
                self._events.get_nowait()
            with contextlib.suppress(queue.Full):
                self._events.put_nowait(event)


@contextlib.contextmanager
def raw_mode(fd: int) -> Iterator[None]:
    """Put the terminal in cbreak mode for the duration of the block."""
    if termios is None or tty is None or not os.isatty(fd):
        yield
        return
    saved = termios.tcgetattr(fd)
    tty.setcbreak(fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
