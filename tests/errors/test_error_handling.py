"""Tests for the error classification."""

from countdown_app.errors import (
    ConfigurationError,
    DateEntryError,
    InvalidDateError,
    InvalidInputError,
    MalformedDateError,
    PersistenceError,
    StateTransitionError,
    SystemFailureError,
    TransitionLoopError,
)


class TestErrorClassification:
    """Test the recoverable / unrecoverable split."""

    def test_date_entry_error_hierarchy(self):
        """Date entry errors are recoverable."""
        base_error = DateEntryError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        malformed = MalformedDateError("bad layout", raw_data="01/02/2024", expected_format="yyyy-mm-dd")
        assert isinstance(malformed, DateEntryError)
        assert malformed.raw_data == "01/02/2024"
        assert malformed.expected_format == "yyyy-mm-dd"

        invalid = InvalidDateError("no such day", raw_data="2024-02-30")
        assert isinstance(invalid, DateEntryError)
        assert invalid.recoverable is True

    def test_system_failure_error_hierarchy(self):
        """Engine and collaborator failures are not recoverable."""
        input_error = InvalidInputError("not an input", received=42)
        assert input_error.recoverable is False
        assert input_error.received == 42

        state_error = StateTransitionError("conflict", current_state="busy", attempted_transition="idle")
        assert isinstance(state_error, SystemFailureError)
        assert state_error.current_state == "busy"
        assert state_error.attempted_transition == "idle"

        loop_error = TransitionLoopError("loop", input_id="spin", limit=4, current_state="loopa")
        assert isinstance(loop_error, StateTransitionError)
        assert loop_error.limit == 4
        assert loop_error.current_state == "loopa"

        persistence_error = PersistenceError("write failed", operation="set", target="x.db")
        assert persistence_error.operation == "set"

        config_error = ConfigurationError("bad", errors=["e"], context={"path": "countdown.yaml"})
        assert config_error.errors == ["e"]
        assert config_error.context == {"path": "countdown.yaml"}

    def test_families_do_not_overlap(self):
        assert not issubclass(DateEntryError, SystemFailureError)
        assert not issubclass(SystemFailureError, DateEntryError)

    def test_message_is_preserved(self):
        assert str(PersistenceError("write failed")) == "write failed"
