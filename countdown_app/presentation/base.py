"""Base classes for countdown presentation surfaces."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Mapping, Sequence

if TYPE_CHECKING:
    from .confetti import Confetti


class Region(str, Enum):
    """Screen regions, one per visible state."""
    SELECT = "select"
    COUNTDOWN = "countdown"
    ARRIVED = "arrived"


class View(ABC):
    """Presentation surface the states render to."""

    @abstractmethod
    def show(self, region: Region) -> None:
        """Make a region visible."""
        pass

    @abstractmethod
    def hide(self, region: Region) -> None:
        """Hide a region."""
        pass

    @abstractmethod
    def render_countdown(self, parts: Mapping[str, int]) -> None:
        """Show the given day/hour/minute/second parts in their slots."""
        pass

    @abstractmethod
    def clear_countdown(self) -> None:
        """Hide every countdown slot."""
        pass

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Display a date selection error."""
        pass

    @abstractmethod
    def clear_error(self) -> None:
        """Hide the date selection error."""
        pass

    @abstractmethod
    def reset_date_entry(self) -> None:
        """Empty the date entry field."""
        pass

    @abstractmethod
    def celebrate(self, pieces: Sequence["Confetti"]) -> None:
        """Start the arrival animation. Fire and forget."""
        pass
