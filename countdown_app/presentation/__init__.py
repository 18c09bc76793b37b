"""
Presentation module.

Views the states push output to. Nothing here feeds back into the machine.
"""
from .base import Region, View
from .confetti import Confetti, make_confetti
from .console import ConsoleView
from .recording import RecordingView

__all__ = ["Confetti", "ConsoleView", "RecordingView", "Region", "View", "make_confetti"]
