"""Debug console log, command handling and window resize helpers."""

from __future__ import annotations

from typing import Any, Optional

Vec2 = tuple[float, float]

LOG_BUFFER_SIZE = 1024

HELP_LINES = (
    "Available commands:",
    "- clear: Clears the console.",
    "- help: Shows this help message.",
)


def resize_to_screen(vec: Vec2, pre_ratio: Vec2, cur_ratio: Vec2) -> Vec2:
    """Rescale a window position or size after the screen ratio changed."""
    cur_min = min(cur_ratio)
    pre_min = min(pre_ratio)
    x, y = vec
    return (
        x * pre_ratio[0] / cur_ratio[0] * cur_min / pre_min,
        y * pre_ratio[1] / cur_ratio[1] * cur_min / pre_min,
    )


def resize_by_ratio(vec: Vec2, cur_ratio: Vec2) -> Vec2:
    """Map a point in window pixels into the initial screen's coordinates."""
    return vec[0] / cur_ratio[0], vec[1] / cur_ratio[1]


def screen_ratio(screen_size: Vec2, initial_size: Vec2) -> Vec2:
    """Ratio of the current screen size to the initial one, per axis."""
    return screen_size[0] / initial_size[0], screen_size[1] / initial_size[1]


def process_command(command: str, log: list[str]) -> None:
    """Run one console command, writing its output to ``log``."""
    log.append("Executing: " + command)
    if command == "clear":
        log.clear()
    elif command == "help":
        log.extend(HELP_LINES)
    else:
        log.append("Unknown command: " + command)


class Console:
    """Log lines, submitted commands and a browsable command history."""

    def __init__(self) -> None:
        self.items: list[str] = []
        self.history: list[str] = []
        self._history_pos = -1

    def log(self, fmt: str, *args: Any) -> str:
        """Append a printf-style formatted line and return it."""
        text = fmt % args if args else fmt
        text = text[: LOG_BUFFER_SIZE - 1]
        self.items.append(text)
        return text

    def submit(self, text: str) -> None:
        """Echo, remember and run a command; empty input is ignored."""
        if not text:
            return
        self.items.append("> " + text)
        self.history.append(text)
        self._history_pos = len(self.history)
        process_command(text, self.items)

    def _step_history(self, step: int) -> Optional[str]:
        if not self.history:
            return None
        self._history_pos = max(0, min(self._history_pos + step, len(self.history) - 1))
        return self.history[self._history_pos]

    def history_previous(self) -> Optional[str]:
        """Move to the previous command in the history and return it."""
        return self._step_history(-1)

    def history_next(self) -> Optional[str]:
        """Move to the next command in the history and return it."""
        return self._step_history(1)