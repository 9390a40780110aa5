"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_KNOWN_FIELDS = {
    "ranking": {"top_n", "bottom_n"},
    "curve": {"round_digits", "min_points"},
    "logging": {"level", "format_json"},
    "data": {"series_file", "intervals_file"},
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    # bool is a subclass of int
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_ranking_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate ranking slice parameters."""
        errors = []

        for name in ("top_n", "bottom_n"):
            if name in params:
                value = params[name]
                if not _is_int(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative integer",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_curve_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate curve summary parameters."""
        errors = []

        if "round_digits" in params:
            value = params["round_digits"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="round_digits",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "min_points" in params:
            value = params["min_points"]
            if not _is_int(value) or value < 1:
                errors.append(ValidationError(
                    field="min_points",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(_LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_data_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate input file parameters."""
        errors = []

        for name in ("series_file", "intervals_file"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value.strip():
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-empty string",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_unknown_fields(config: dict[str, Any]) -> list[ValidationError]:
        """Report sections or keys the engine does not recognise."""
        errors = []

        for section, params in config.items():
            if section not in _KNOWN_FIELDS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=params
                ))
                continue
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            for key in params:
                if key not in _KNOWN_FIELDS[section]:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown configuration key",
                        value=params[key]
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = ConfigValidator.validate_unknown_fields(config)
        if errors:
            return errors

        if "ranking" in config:
            errors.extend(ConfigValidator.validate_ranking_params(config["ranking"]))

        if "curve" in config:
            errors.extend(ConfigValidator.validate_curve_params(config["curve"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        if "data" in config:
            errors.extend(ConfigValidator.validate_data_params(config["data"]))

        return errors
