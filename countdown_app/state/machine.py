"""
Dispatch engine for the countdown state machine.

The Machine owns the current state and the collaborators the states talk
to. ``receive_input`` resolves the current state's handler for an input,
applies the transition it returns and replays the same input against the
new state until some state answers with "no transition".
"""

import random
from typing import Any, Optional

from ..config.defaults import AppConfig, get_default_config
from ..data.entry import DateEntry
from ..errors import StateTransitionError, TransitionLoopError
from ..logging.config import get_state_logger, log_state_transition, log_unhandled_input
from ..persistence.date_store import DateStore
from ..presentation.base import View
from ..timing.clock import Clock
from ..timing.scheduler import Scheduler
from .base import State
from .models import Input, coerce_input


class Machine:
    """Holds the current state and the collaborator handles."""

    def __init__(
        self,
        store: DateStore,
        view: View,
        clock: Clock,
        scheduler: Scheduler,
        config: Optional[AppConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or get_default_config()
        self.store = store
        self.view = view
        self.clock = clock
        self.scheduler = scheduler
        self.rng = rng or random.Random()
        self.entry = DateEntry(self)
        self.logger = get_state_logger(__name__)

        self.current: Optional[State] = None
        self._depth = 0

    @property
    def state_id(self) -> Optional[str]:
        return self.current.id if self.current is not None else None

    def start(self, initial: State, bootstrap: Any) -> State:
        """Load the initial state and send it the bootstrap input."""
        if self.current is not None:
            raise StateTransitionError(
                "Machine already started",
                current_state=self.current.id,
                attempted_transition=initial.id
            )

        initial.load()
        self.current = initial
        self.logger.info("State loaded", state=initial.id)

        return self.receive_input(bootstrap)

    def stop(self) -> None:
        """Unload the current state, releasing its resources."""
        if self.current is None:
            return

        state, self.current = self.current, None
        state.unload()
        self.logger.info("State unloaded", state=state.id)

    def receive_input(self, obj: Any) -> State:
        """
        Deliver an input to the current state.

        Args:
            obj: Input, or any value with the input shape

        Returns:
            The current state once the input has settled

        Raises:
            InvalidInputError: if ``obj`` is not an input
            StateTransitionError: if there is no current state, or a handler
                returns a new state after its own state was already replaced
            TransitionLoopError: if the transition or nesting guard trips
        """
        input_ = coerce_input(obj)

        state = self.current
        if state is None:
            raise StateTransitionError(
                "No current state to receive input",
                attempted_transition=input_.id
            )

        guards = self.config.engine
        if self._depth >= guards.max_dispatch_depth:
            raise TransitionLoopError(
                f"Nested dispatch deeper than {guards.max_dispatch_depth} while handling {input_.id!r}",
                input_id=input_.id,
                limit=guards.max_dispatch_depth,
                current_state=state.id
            )

        self._depth += 1
        try:
            return self._settle(state, input_)
        finally:
            self._depth -= 1

    def _settle(self, state: State, input_: Input) -> State:
        limit = self.config.engine.max_transitions
        transitions = 0

        while True:
            handler = state.handler_for(input_.id)
            if handler is None:
                log_unhandled_input(self.logger, state.id, input_.id)
                return self.current  # type: ignore[return-value]

            next_state = handler(input_.parameters)
            if not next_state:
                return self.current  # type: ignore[return-value]

            if self.current is not state:
                raise StateTransitionError(
                    f"{state.id} returned {next_state.id} after being replaced while handling {input_.id!r}",
                    current_state=self.state_id,
                    attempted_transition=next_state.id
                )

            transitions += 1
            if transitions > limit:
                raise TransitionLoopError(
                    f"More than {limit} transitions while handling {input_.id!r}",
                    input_id=input_.id,
                    limit=limit,
                    current_state=state.id,
                    attempted_transition=next_state.id
                )

            self._transition(state, next_state, input_)
            state = next_state

    def _transition(self, outgoing: State, incoming: State, input_: Input) -> None:
        outgoing.unload()
        incoming.load()
        self.current = incoming

        log_state_transition(
            self.logger,
            from_state=outgoing.id,
            to_state=incoming.id,
            trigger=input_.id,
        )
