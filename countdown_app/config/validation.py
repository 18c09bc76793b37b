"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import AppConfig


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_engine_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate dispatch engine guards."""
        errors = []

        for name in ("max_transitions", "max_dispatch_depth"):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive integer",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_timing_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate countdown timing parameters."""
        errors = []

        if "tick_interval_seconds" in params:
            value = params["tick_interval_seconds"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="tick_interval_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        if "finish_shortcut_seconds" in params:
            value = params["finish_shortcut_seconds"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="finish_shortcut_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_storage_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate persisted date storage parameters."""
        errors = []

        if "backend" in params and params["backend"] not in ("memory", "sqlite"):
            errors.append(ValidationError(
                field="backend",
                message="Must be one of: memory, sqlite",
                value=params["backend"]
            ))

        for name in ("db_path", "key"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-empty string",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_message_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate user facing messages."""
        errors = []

        for name, value in params.items():
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field=name,
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_celebration_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate confetti parameters."""
        errors = []

        if "pieces" in params:
            value = params["pieces"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="pieces",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "spread_seconds" in params:
            value = params["spread_seconds"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="spread_seconds",
                    message="Must be a non-negative number",
                    value=value
                ))

        for name in ("width", "max_z_index"):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive integer",
                    value=params[name]
                ))

        if "colors" in params:
            value = params["colors"]
            if (not isinstance(value, (list, tuple)) or not value
                    or not all(isinstance(color, str) for color in value)):
                errors.append(ValidationError(
                    field="colors",
                    message="Must be a non-empty list of color names",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in (
                "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"
            ):
                errors.append(ValidationError(
                    field="level",
                    message="Must be a standard logging level name",
                    value=value
                ))

        for name in ("format_json", "include_timestamp"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a boolean",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_known_keys(config: dict[str, Any]) -> list[ValidationError]:
        """Reject sections and keys that AppConfig does not define."""
        errors = []
        sections = {f.name: f.type for f in fields(AppConfig)}

        for section, values in config.items():
            if section not in sections:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=values
                ))
                continue

            if not isinstance(values, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Section must be a mapping",
                    value=values
                ))
                continue

            known = {f.name for f in fields(sections[section])}
            for key in values:
                if key not in known:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown configuration key",
                        value=values[key]
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = ConfigValidator.validate_known_keys(config)
        if errors:
            return errors

        validators = {
            "engine": ConfigValidator.validate_engine_params,
            "timing": ConfigValidator.validate_timing_params,
            "storage": ConfigValidator.validate_storage_params,
            "messages": ConfigValidator.validate_message_params,
            "celebration": ConfigValidator.validate_celebration_params,
            "logging": ConfigValidator.validate_logging_params,
        }

        for section, validate in validators.items():
            if section in config:
                errors.extend(validate(config[section]))

        return errors
