"""
Countdown states.

Transition table:

    Pending     loaded          -> emits dateSelected (persisted) or selectDate
    Pending     dateSelected    -> Countdown
    Pending     selectDate      -> SelectDate
    SelectDate  selectDate      -> stays
    SelectDate  error           -> stays, shows the message
    SelectDate  dateSelected    -> Countdown
    Countdown   dateSelected    -> validates, persists, emits updateRemaining
    Countdown   updateRemaining -> renders and re-arms, or emits arrived
    Countdown   finishCountdown -> restarts with a target a few seconds away
    Countdown   selectDate      -> SelectDate
    Countdown   arrived         -> Arrived
    Countdown   error           -> SelectDate
    Arrived     arrived         -> stays
"""

import math
from typing import Any, Mapping, Optional

from ..logging.config import get_logger
from ..presentation.base import Region
from ..presentation.confetti import make_confetti
from ..timing.scheduler import ScheduledCall
from ..utils.time import from_timestamp_ms, remaining_parts, seconds_until, to_timestamp_ms
from .base import State, handles
from .models import InputKind

logger = get_logger(__name__)


class Pending(State):
    """Initial state that handles start-up."""

    @handles(InputKind.LOADED)
    def loaded_input(self, parameters: Mapping[str, Any]) -> None:
        timestamp = self.machine.store.get()
        if timestamp is None:
            self.emit(InputKind.SELECT_DATE)
            return

        if math.isnan(to_timestamp_ms(timestamp)):
            logger.warning("Ignoring unreadable persisted date", value=timestamp)
            self.emit(InputKind.SELECT_DATE)
            return

        try:
            date: Any = from_timestamp_ms(timestamp)
        except (OverflowError, OSError, ValueError):
            # Beyond what datetime can hold; Countdown accepts raw milliseconds
            date = timestamp
        self.emit(InputKind.DATE_SELECTED, {"date": date})

    @handles(InputKind.DATE_SELECTED)
    def date_selected_input(self, parameters: Mapping[str, Any]) -> State:
        return Countdown(self.machine)

    @handles(InputKind.SELECT_DATE)
    def select_date_input(self, parameters: Mapping[str, Any]) -> State:
        return SelectDate(self.machine)


class SelectDate(State):
    """State that owns the date entry."""

    def load(self) -> None:
        view = self.machine.view
        view.show(Region.SELECT)
        view.reset_date_entry()
        view.clear_error()
        self.machine.entry.activate()

        # Picking a new date discards the old target
        self.machine.store.remove()

    def unload(self) -> None:
        self.machine.entry.deactivate()
        self.machine.view.hide(Region.SELECT)

    @handles(InputKind.SELECT_DATE)
    def select_date_input(self, parameters: Mapping[str, Any]) -> None:
        pass

    @handles(InputKind.ERROR)
    def error_input(self, parameters: Mapping[str, Any]) -> None:
        self.machine.view.show_error(str(parameters.get("error", "")))

    @handles(InputKind.DATE_SELECTED)
    def date_selected_input(self, parameters: Mapping[str, Any]) -> State:
        return Countdown(self.machine)


class Countdown(State):
    """
    State that runs the actual countdown.

    Owns at most one scheduled tick; ``unload`` cancels it.
    """

    remaining_parts = staticmethod(remaining_parts)

    def __init__(self, machine: Any) -> None:
        super().__init__(machine)
        self._tick: Optional[ScheduledCall] = None

    @property
    def tick_pending(self) -> bool:
        return self._tick is not None and self._tick.pending

    def load(self) -> None:
        self.machine.view.show(Region.COUNTDOWN)

    def unload(self) -> None:
        self._cancel_tick()
        self.machine.view.hide(Region.COUNTDOWN)
        self.machine.view.clear_countdown()

    @handles(InputKind.DATE_SELECTED)
    def date_selected_input(self, parameters: Mapping[str, Any]) -> None:
        """Validate the target date, persist it and start ticking."""
        messages = self.machine.config.messages
        target = to_timestamp_ms(parameters.get("date"))

        if math.isnan(target):
            self.emit(InputKind.ERROR, {"error": messages.invalid_date})
            return

        if target <= self.machine.clock.now_ms():
            self.emit(InputKind.ERROR, {"error": messages.past_date})
            return

        timestamp = round(target)
        self.machine.store.set(timestamp)
        logger.info("Date persisted", target_ms=timestamp)

        self.emit(InputKind.UPDATE_REMAINING, parameters)

    @handles(InputKind.UPDATE_REMAINING)
    def update_remaining_input(self, parameters: Mapping[str, Any]) -> None:
        """Render the time left and re-arm, or announce arrival."""
        target = to_timestamp_ms(parameters.get("date"))
        if math.isnan(target):
            self.emit(InputKind.ERROR, {"error": self.machine.config.messages.invalid_date})
            return

        diff = seconds_until(target, self.machine.clock.now_ms())
        if diff <= 0:
            self.emit(InputKind.ARRIVED)
            return

        self.render(self.remaining_parts(diff))
        self._schedule_tick(parameters)

    @handles(InputKind.FINISH_COUNTDOWN)
    def finish_countdown_input(self, parameters: Mapping[str, Any]) -> None:
        """Debug shortcut: restart with a target a few seconds from now."""
        self.unload()
        self.load()

        offset_ms = self.machine.config.timing.finish_shortcut_seconds * 1000
        date = from_timestamp_ms(self.machine.clock.now_ms() + offset_ms)
        self.emit(InputKind.DATE_SELECTED, {"date": date})

    @handles(InputKind.SELECT_DATE)
    def select_date_input(self, parameters: Mapping[str, Any]) -> State:
        return SelectDate(self.machine)

    @handles(InputKind.ARRIVED)
    def arrived_input(self, parameters: Mapping[str, Any]) -> State:
        self.machine.store.remove()
        logger.info("Date cleared", reason="arrived")
        return Arrived(self.machine)

    @handles(InputKind.ERROR)
    def error_input(self, parameters: Mapping[str, Any]) -> State:
        return SelectDate(self.machine)

    def render(self, parts: Mapping[str, int]) -> None:
        self.machine.view.render_countdown(parts)

    def _schedule_tick(self, parameters: Mapping[str, Any]) -> None:
        self._cancel_tick()
        interval = self.machine.config.timing.tick_interval_seconds
        self._tick = self.machine.scheduler.call_later(interval, self._on_tick, dict(parameters))
        logger.debug("Countdown tick scheduled", delay_seconds=interval)

    def _cancel_tick(self) -> None:
        if self._tick is not None:
            self._tick.cancel()
            self._tick = None

    def _on_tick(self, parameters: dict[str, Any]) -> None:
        self._tick = None
        if self.machine.current is not self:
            logger.warning("Dropping tick for inactive countdown")
            return
        self.emit(InputKind.UPDATE_REMAINING, parameters)


class Arrived(State):
    """State shown once the countdown has finished."""

    def load(self) -> None:
        self.machine.view.show(Region.ARRIVED)
        self.machine.view.celebrate(
            make_confetti(self.machine.config.celebration, self.machine.rng)
        )

    def unload(self) -> None:
        self.machine.view.hide(Region.ARRIVED)

    @handles(InputKind.ARRIVED)
    def arrived_input(self, parameters: Mapping[str, Any]) -> None:
        pass
