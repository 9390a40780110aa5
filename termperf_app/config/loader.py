"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import (
    CurveParams,
    DataParams,
    DefaultConfig,
    LoggingParams,
    RankingParams,
    get_default_config,
)
from .validation import ConfigValidator


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_settings(self) -> dict[str, Any]:
        """Load overrides from settings.yaml, empty if the file is absent."""
        settings_file = self.config_dir / "settings.yaml"

        if not settings_file.exists():
            return {}

        with open(settings_file) as f:
            settings = yaml.safe_load(f)

        return settings or {}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Call overrides (highest priority)
        2. settings.yaml in the config directory
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_settings())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_engine_config(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Build a validated DefaultConfig from the merged configuration.

        Raises:
            ValueError: If any merged parameter fails validation
        """
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            raise ValueError(f"Invalid configuration: {'; '.join(error_msgs)}")

        return DefaultConfig(
            ranking=RankingParams(**config["ranking"]),
            curve=CurveParams(**config["curve"]),
            logging=LoggingParams(**config["logging"]),
            data=DataParams(**config["data"]),
        )

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
