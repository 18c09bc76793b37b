"""Date entry surface that turns typed text into state machine inputs."""

from typing import TYPE_CHECKING, Optional

from ..errors import InvalidDateError, MalformedDateError
from ..logging.config import get_logger
from ..state.models import Input, InputKind
from .parsers import parse_date_entry

if TYPE_CHECKING:
    from ..state.machine import Machine

logger = get_logger(__name__)


class DateEntry:
    """
    The date field shown while selecting a date.

    Only accepts submissions while active; SelectDate activates it on load
    and deactivates it on unload.
    """

    def __init__(self, machine: "Machine") -> None:
        self.machine = machine
        self.active = False

    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def submit(self, text: Optional[str]) -> None:
        """Handle a change of the entry value."""
        if not self.active:
            logger.info("Date entry ignored", reason="inactive", state=self.machine.state_id)
            return

        self.machine.view.clear_error()

        text = (text or "").strip()
        if not text:
            return

        messages = self.machine.config.messages
        try:
            date = parse_date_entry(text)
        except MalformedDateError as e:
            logger.info("Malformed date entry", raw_data=e.raw_data)
            self.machine.receive_input(Input(InputKind.ERROR, {"error": messages.malformed_date}))
            return
        except InvalidDateError as e:
            logger.info("Invalid date entry", raw_data=e.raw_data)
            self.machine.receive_input(Input(InputKind.ERROR, {"error": messages.invalid_date}))
            return

        self.machine.receive_input(Input(InputKind.DATE_SELECTED, {"date": date}))
