"""Text output view for terminals."""

import sys
from typing import Mapping, Optional, Sequence, TextIO

from ..utils.time import REMAINING_UNITS
from .base import Region, View
from .confetti import Confetti

REGION_BANNERS = {
    Region.SELECT: "Select the target date (yyyy-mm-dd)",
    Region.COUNTDOWN: "Counting down",
    Region.ARRIVED: "The day has arrived!",
}


def format_parts(parts: Mapping[str, int]) -> str:
    """Render parts coarsest first, e.g. ``1 day 2 hours 0 minutes 5 seconds``."""
    words = []
    for unit, _ in reversed(REMAINING_UNITS):
        if unit in parts:
            value = parts[unit]
            words.append(f"{value} {unit}{'' if value == 1 else 's'}")
    return " ".join(words)


class ConsoleView(View):
    """Writes one line per update to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, width: int = 80) -> None:
        self.stream = stream or sys.stdout
        self.width = width

    def _write(self, line: str) -> None:
        print(line, file=self.stream, flush=True)

    def show(self, region: Region) -> None:
        self._write(REGION_BANNERS[Region(region)])

    def hide(self, region: Region) -> None:
        pass

    def render_countdown(self, parts: Mapping[str, int]) -> None:
        self._write(format_parts(parts))

    def clear_countdown(self) -> None:
        pass

    def show_error(self, message: str) -> None:
        self._write(f"Error: {message}")

    def clear_error(self) -> None:
        pass

    def reset_date_entry(self) -> None:
        pass

    def celebrate(self, pieces: Sequence[Confetti]) -> None:
        row = [" "] * self.width
        for piece in sorted(pieces, key=lambda p: p.z_index):
            column = min(int(piece.left), self.width - 1)
            row[column] = piece.color[:1].upper() or "*"
        self._write("".join(row).rstrip())
