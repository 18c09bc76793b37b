"""
Main countdown application coordinator.

Builds the state machine with its collaborators, bootstraps it from the
Pending state and forwards user actions as inputs.
"""

import random
from datetime import datetime
from typing import Any, Optional

from .config.defaults import AppConfig, get_default_config
from .logging.config import get_logger
from .persistence.date_store import DateStore, create_date_store
from .presentation.base import View
from .presentation.console import ConsoleView
from .state.base import State
from .state.machine import Machine
from .state.models import Input, InputKind
from .state.states import Pending
from .timing.clock import Clock, SystemClock
from .timing.scheduler import LoopScheduler, Scheduler

logger = get_logger(__name__)


class CountdownApp:
    """
    Owns the Machine and is the only place inputs originate from outside.

    Collaborators default to the production ones: configured date store,
    console view, system clock and a blocking loop scheduler.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        store: Optional[DateStore] = None,
        view: Optional[View] = None,
        clock: Optional[Clock] = None,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or get_default_config()
        self.machine = Machine(
            store=store or create_date_store(self.config.storage),
            view=view or ConsoleView(width=self.config.celebration.width),
            clock=clock or SystemClock(),
            scheduler=scheduler or LoopScheduler(),
            config=self.config,
            rng=rng,
        )

        logger.info("Countdown app initialized", storage=self.config.storage.backend)

    @property
    def state(self) -> Optional[State]:
        return self.machine.current

    def start(self, event: Any = None) -> State:
        """Document-ready bootstrap: create Pending and send it ``loaded``."""
        return self.machine.start(
            Pending(self.machine),
            Input(InputKind.LOADED, {"event": event})
        )

    def enter_date(self, text: str) -> None:
        """Type a yyyy-mm-dd value into the date entry."""
        self.machine.entry.submit(text)

    def select_date(self, date: datetime) -> State:
        """Select a target date programmatically."""
        return self.machine.receive_input(Input(InputKind.DATE_SELECTED, {"date": date}))

    def change_date(self) -> State:
        """The "change" control shown next to the countdown."""
        return self.machine.receive_input(Input(InputKind.SELECT_DATE))

    def finish_countdown(self) -> State:
        """The "finish" control: make the countdown end in a few seconds."""
        return self.machine.receive_input(Input(InputKind.FINISH_COUNTDOWN))

    def run(self) -> None:
        """Block, running scheduled ticks until nothing is left to run."""
        scheduler = self.machine.scheduler
        if not isinstance(scheduler, LoopScheduler):
            raise TypeError("run() needs a LoopScheduler; drive other schedulers directly")
        scheduler.run()

    def stop(self) -> None:
        """Release the current state and drop pending ticks."""
        self.machine.stop()
        scheduler = self.machine.scheduler
        if isinstance(scheduler, LoopScheduler):
            scheduler.stop()
