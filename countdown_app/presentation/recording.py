"""In-memory view that records what the states asked it to display."""

from typing import Any, Mapping, Optional, Sequence

from .base import Region, View
from .confetti import Confetti


class RecordingView(View):
    """View that keeps the visible output in plain attributes."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.visible: set[Region] = set()
        self.fragments: dict[str, int] = {}
        self.error: Optional[str] = None
        self.entry_resets = 0
        self.celebrations: list[list[Confetti]] = []

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def show(self, region: Region) -> None:
        self._record("show", region)
        self.visible.add(region)

    def hide(self, region: Region) -> None:
        self._record("hide", region)
        self.visible.discard(region)

    def render_countdown(self, parts: Mapping[str, int]) -> None:
        self._record("render_countdown", dict(parts))
        self.fragments.update(parts)

    def clear_countdown(self) -> None:
        self._record("clear_countdown")
        self.fragments.clear()

    def show_error(self, message: str) -> None:
        self._record("show_error", message)
        self.error = message

    def clear_error(self) -> None:
        self._record("clear_error")
        self.error = None

    def reset_date_entry(self) -> None:
        self._record("reset_date_entry")
        self.entry_resets += 1

    def celebrate(self, pieces: Sequence[Confetti]) -> None:
        self._record("celebrate", len(pieces))
        self.celebrations.append(list(pieces))

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]
