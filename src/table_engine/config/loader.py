"""
Configuration Loader - YAML Loading with Validation.

Loads table configuration from YAML files and validates it with Pydantic.
Profiles under ``config/profiles/<name>.yaml`` are deep-merged over the
base file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from table_engine.config.models import TableConfig
from table_engine.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths and profiles
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> TableConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile name to merge over the base file

        Returns:
            Validated TableConfig object

        Raises:
            ConfigurationError: If a file is missing, unparsable or invalid
        """
        path = self._resolve_path(config_path)
        config_dict = self._load_yaml(path)

        if profile:
            profile_dict = self._load_profile(profile)
            config_dict = self._merge_configs(config_dict, profile_dict)
            logger.debug(f"Merged profile '{profile}' into {path}")

        return self._validate(config_dict, str(path))

    def load_from_dict(self, config_dict: Dict[str, Any]) -> TableConfig:
        """
        Load configuration from dictionary.

        Args:
            config_dict: Configuration as dictionary

        Returns:
            Validated TableConfig object
        """
        return self._validate(config_dict, None)

    def _validate(self, config_dict: Dict[str, Any], source: Optional[str]) -> TableConfig:
        try:
            return TableConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid table configuration: {e.error_count()} error(s)\n{e}",
                path=source,
            ) from e

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve config path relative to base path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file."""
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}", path=str(path))
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed YAML in {path}: {e}", path=str(path)) from e
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config root must be a mapping, got {type(data).__name__}", path=str(path)
            )
        return data

    def _load_profile(self, profile: str) -> Dict[str, Any]:
        """Load profile configuration."""
        profile_path = self._base_path / "config" / "profiles" / f"{profile}.yaml"
        if not profile_path.exists():
            raise ConfigurationError(f"Profile not found: {profile}", path=str(profile_path))
        return self._load_yaml(profile_path)

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Deep merge overlay into base config."""
        result = dict(base)
        for key, value in overlay.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> TableConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name
        base_path: Base path for resolving relative paths

    Returns:
        Validated TableConfig object
    """
    loader = ConfigLoader(base_path=base_path)
    return loader.load(config_path, profile)
