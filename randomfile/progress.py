import sys
from typing import TextIO

from randomfile.constants import PROGRESS_BAR_LENGTH


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def percent(current: int, total: int) -> int:
    return _ceil_div(current * 100, total)


def filled_cells(current: int, total: int, length: int = PROGRESS_BAR_LENGTH) -> int:
    return _ceil_div(current * length, total)


class ProgressBar:
    """Single-line textual progress bar redrawn in place with a carriage return."""

    def __init__(self, total: int, stream: TextIO = None, length: int = PROGRESS_BAR_LENGTH):
        if total <= 0:
            raise ValueError(f"total must be > 0, got {total}")
        self.total = total
        self.stream = stream if stream is not None else sys.stdout
        self.length = length

    def render(self, current: int) -> str:
        current = max(0, min(current, self.total))
        filled = filled_cells(current, self.total, self.length)
        bar = "*" * filled + " " * (self.length - filled)
        return f"\rWriting: |{bar}| - {percent(current, self.total)} %"

    def update(self, current: int) -> None:
        self.stream.write(self.render(current))
        self.stream.flush()

    def finish(self) -> None:
        self.stream.write("\n")
        self.stream.flush()
