"""
Unit Tests for ConfigLoader.

Test Aspects Covered:
    ✅ Business Logic: YAML loading into validated TableConfig
    ✅ Profiles: Deep merge over the base file
    ✅ Error Handling: Missing files, malformed YAML, invalid values
"""

from __future__ import annotations

from pathlib import Path

import pytest

from table_engine.config.loader import ConfigLoader, load_config
from table_engine.config.models import TableConfig
from table_engine.errors import ConfigurationError


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestConfigLoader:
    """Test cases for ConfigLoader."""

    def test_load_sample_config(self, sample_config_path: Path) -> None:
        """
        SCENARIO: Load the sample test configuration
        EXPECTED: Values from the file, defaults elsewhere
        """
        # Act
        config = ConfigLoader().load(sample_config_path)

        # Assert
        assert isinstance(config, TableConfig)
        assert config.features.searchable is True
        assert config.features.pagination is True
        assert config.pagination.page_size == 2
        assert config.export.delimiter == ";"
        assert config.export.filename == "people.csv"

    def test_defaults(self) -> None:
        """
        SCENARIO: Empty configuration dictionary
        EXPECTED: Only filtering enabled, page size 10
        """
        # Act
        config = ConfigLoader().load_from_dict({})

        # Assert
        assert config.features.filterable is True
        assert config.features.searchable is False
        assert config.features.selectable is False
        assert config.features.pagination is False
        assert config.features.exportable is False
        assert config.pagination.page_size == 10
        assert config.export.delimiter == ","

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        # Arrange
        path = _write(tmp_path / "empty.yaml", "")

        # Act
        config = ConfigLoader().load(path)

        # Assert
        assert config == TableConfig()

    def test_relative_path_uses_base_path(self, tmp_path: Path) -> None:
        # Arrange
        _write(tmp_path / "config" / "table.yaml", "pagination:\n  page_size: 7\n")

        # Act
        config = ConfigLoader(base_path=tmp_path).load("config/table.yaml")

        # Assert
        assert config.pagination.page_size == 7

    def test_profile_deep_merge(self, tmp_path: Path) -> None:
        """
        SCENARIO: Profile overrides one feature and the page size
        EXPECTED: Overridden keys replaced, sibling keys kept
        """
        # Arrange
        base = _write(
            tmp_path / "config" / "table.yaml",
            "features:\n  searchable: true\n  exportable: true\n"
            "pagination:\n  page_size: 10\n  page_window: 5\n",
        )
        _write(
            tmp_path / "config" / "profiles" / "small.yaml",
            "features:\n  exportable: false\npagination:\n  page_size: 3\n",
        )

        # Act
        config = load_config(base, profile="small", base_path=tmp_path)

        # Assert
        assert config.features.searchable is True
        assert config.features.exportable is False
        assert config.pagination.page_size == 3
        assert config.pagination.page_window == 5

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found") as exc_info:
            ConfigLoader().load(tmp_path / "nope.yaml")

        assert exc_info.value.path.endswith("nope.yaml")

    def test_missing_profile_raises(self, tmp_path: Path) -> None:
        # Arrange
        base = _write(tmp_path / "config" / "table.yaml", "version: '1.0'\n")

        # Act / Assert
        with pytest.raises(ConfigurationError, match="Profile not found"):
            ConfigLoader(base_path=tmp_path).load(base, profile="ghost")

    def test_malformed_yaml_raises(self, tmp_path: Path) -> None:
        # Arrange
        path = _write(tmp_path / "bad.yaml", "features: [unclosed\n")

        # Act / Assert
        with pytest.raises(ConfigurationError, match="Malformed YAML"):
            ConfigLoader().load(path)

    def test_non_mapping_root_raises(self, tmp_path: Path) -> None:
        # Arrange
        path = _write(tmp_path / "list.yaml", "- a\n- b\n")

        # Act / Assert
        with pytest.raises(ConfigurationError, match="mapping"):
            ConfigLoader().load(path)

    @pytest.mark.parametrize(
        "config_dict",
        [
            {"pagination": {"page_size": 0}},
            {"pagination": {"page_window": -1}},
            {"export": {"delimiter": ""}},
            {"features": {"searchable": "maybe"}},
        ],
    )
    def test_invalid_values_raise(self, config_dict: dict) -> None:
        """
        SCENARIO: Values violating the config model
        EXPECTED: ConfigurationError wrapping the validation error
        """
        with pytest.raises(ConfigurationError, match="Invalid table configuration"):
            ConfigLoader().load_from_dict(config_dict)

    def test_shipped_profiles_load(self) -> None:
        """
        SCENARIO: Load the shipped default config with each profile
        EXPECTED: Profiles apply their overrides
        """
        # Arrange
        root = Path(__file__).resolve().parents[2]
        loader = ConfigLoader(base_path=root)

        # Act
        compact = loader.load("config/default.yaml", profile="compact")
        tsv = loader.load("config/default.yaml", profile="tsv")

        # Assert
        assert compact.pagination.page_size == 5
        assert compact.features.exportable is False
        assert tsv.export.delimiter == "\t"
