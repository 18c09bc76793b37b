"""
Countdown App - State-machine driven countdown widget

Drives a countdown through a small set of mutually-exclusive modes
(pending, selecting a date, counting down, arrived) using a finite-state
machine fed by discrete input events.
"""

__version__ = "0.1.0"
__author__ = "Countdown Team"
