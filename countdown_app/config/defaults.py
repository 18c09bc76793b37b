"""Default configuration parameters for the countdown app."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineParams:
    """Dispatch engine guards."""
    max_transitions: int = 32          # Transitions allowed for a single input
    max_dispatch_depth: int = 64       # Nested receive_input calls allowed


@dataclass(frozen=True)
class TimingParams:
    """Countdown timing parameters."""
    tick_interval_seconds: float = 1.0     # Delay between updateRemaining ticks
    finish_shortcut_seconds: float = 5.0   # Target offset used by finishCountdown


@dataclass(frozen=True)
class StorageParams:
    """Persisted date storage parameters."""
    backend: str = "memory"            # memory or sqlite
    db_path: str = "countdown.db"
    key: str = "date"


@dataclass(frozen=True)
class MessageParams:
    """User facing error messages."""
    past_date: str = "The date cannot be in the past"
    invalid_date: str = "Invalid date"
    malformed_date: str = "The date must be in yyyy-mm-dd format"


@dataclass(frozen=True)
class CelebrationParams:
    """Confetti shown when the countdown arrives."""
    pieces: int = 200
    spread_seconds: float = 22.5       # Pieces drop at random times in this window
    width: int = 80                    # Horizontal extent pieces are spread across
    max_z_index: int = 5
    colors: tuple[str, ...] = ("red", "blue", "yellow", "green")


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration."""
    engine: EngineParams
    timing: TimingParams
    storage: StorageParams
    messages: MessageParams
    celebration: CelebrationParams
    logging: LoggingParams


def get_default_config() -> AppConfig:
    """Get the default configuration instance."""
    return AppConfig(
        engine=EngineParams(),
        timing=TimingParams(),
        storage=StorageParams(),
        messages=MessageParams(),
        celebration=CelebrationParams(),
        logging=LoggingParams(),
    )
