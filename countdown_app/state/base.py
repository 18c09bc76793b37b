"""
State base class and handler registration.

Each State subclass declares which inputs it understands with the
``@handles`` decorator. The handler table is built once, when the class is
created, so resolving a handler never depends on string concatenation.
"""

from typing import TYPE_CHECKING, Any, Callable, ClassVar, Mapping, Optional, Union

from .models import Input, InputKind

if TYPE_CHECKING:
    from .machine import Machine

Handler = Callable[[Mapping[str, Any]], Optional["State"]]


def _input_id(value: Union[str, InputKind]) -> str:
    return value.value if isinstance(value, InputKind) else value


def handles(*input_ids: Union[str, InputKind]) -> Callable:
    """Mark a method as the handler for one or more input ids."""

    def decorator(func: Callable) -> Callable:
        func._handles = tuple(_input_id(input_id) for input_id in input_ids)  # type: ignore[attr-defined]
        return func

    return decorator


class State:
    """
    One mode of the countdown.

    A state acquires its resources in ``load`` and releases them in
    ``unload``. Handlers receive the input parameters and return either
    None (stay) or a new State instance (transition).
    """

    _handlers: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        table = dict(cls._handlers)
        declared: dict[str, str] = {}
        for name, member in vars(cls).items():
            for input_id in getattr(member, "_handles", ()):
                if input_id in declared:
                    raise TypeError(
                        f"{cls.__name__} declares two handlers for {input_id!r}: "
                        f"{declared[input_id]} and {name}"
                    )
                declared[input_id] = name

        table.update(declared)
        cls._handlers = table

    def __init__(self, machine: "Machine") -> None:
        self.machine = machine

    @property
    def id(self) -> str:
        return type(self).__name__.lower()

    @classmethod
    def handled_inputs(cls) -> frozenset[str]:
        return frozenset(cls._handlers)

    def handler_for(self, input_id: str) -> Optional[Handler]:
        """Return the bound handler for an input id, or None."""
        name = self._handlers.get(input_id)
        if name is None:
            return None
        return getattr(self, name)

    def load(self) -> None:
        """Called when this state becomes current."""
        pass

    def unload(self) -> None:
        """Called when this state is replaced."""
        pass

    def emit(self, input_id: Union[str, InputKind],
             parameters: Optional[Mapping[str, Any]] = None) -> None:
        """
        Send a follow-up input through the machine.

        This is a fresh, nested dispatch to whatever state is current. It
        does not count as a transition of the calling handler, which should
        return None afterwards.
        """
        self.machine.receive_input(Input(id=_input_id(input_id), parameters=parameters or {}))

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
