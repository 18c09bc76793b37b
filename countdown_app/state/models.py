"""
Input records consumed by the state machine.

An input is identified purely by shape: a string ``id`` and a mapping of
``parameters``. Inputs are validated once, when they enter the machine.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Optional

from ..errors import InvalidInputError


class InputKind(str, Enum):
    """Input ids understood by the countdown states."""
    LOADED = "loaded"
    SELECT_DATE = "selectDate"
    DATE_SELECTED = "dateSelected"
    ERROR = "error"
    UPDATE_REMAINING = "updateRemaining"
    FINISH_COUNTDOWN = "finishCountdown"
    ARRIVED = "arrived"


@dataclass(frozen=True)
class Input:
    """
    Immutable event record delivered to a state.

    Inputs compare by value but are not hashable, since their parameters
    are an arbitrary read-only mapping.
    """

    id: str
    parameters: Mapping[str, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if isinstance(self.id, InputKind):
            object.__setattr__(self, "id", self.id.value)
        if isinstance(self.parameters, Mapping):
            object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @property
    def kind(self) -> Optional[InputKind]:
        """The matching InputKind, or None for ids no state declares."""
        try:
            return InputKind(self.id)
        except ValueError:
            return None


def is_input(obj: Any) -> bool:
    """
    Check whether a value has the shape of an input.

    Accepts Input instances, mappings with ``id``/``parameters`` keys and
    any object exposing those attributes.

    Returns:
        True iff ``id`` is a string and ``parameters`` is a mapping
    """
    if isinstance(obj, Mapping):
        input_id = obj.get("id")
        parameters = obj.get("parameters")
    else:
        input_id = getattr(obj, "id", None)
        parameters = getattr(obj, "parameters", None)

    return isinstance(input_id, str) and isinstance(parameters, Mapping)


def coerce_input(obj: Any) -> Input:
    """
    Validate a value at the machine boundary and return it as an Input.

    Raises:
        InvalidInputError: if the value does not have the input shape
    """
    if not is_input(obj):
        raise InvalidInputError(
            "Unidentified input: expected {id: str, parameters: mapping}",
            received=obj,
            context={"type": type(obj).__name__}
        )

    if isinstance(obj, Input):
        return obj

    if isinstance(obj, Mapping):
        return Input(id=obj["id"], parameters=obj["parameters"])

    return Input(id=obj.id, parameters=obj.parameters)
