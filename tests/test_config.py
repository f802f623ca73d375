"""
Tests for sprout.config
=======================

Tests cover locating the config file, parsing, and error reporting for
missing or malformed configs.
"""

from pathlib import Path

import pytest

from sprout.config import DEFAULT_CONFIG_FILENAME, load_template_config
from sprout.errors import ConfigError, ConfigNotFound, ConfigParseError
from sprout.models import ParamKind

from tests.conftest import SCENARIO_CONFIG


class TestLoadTemplateConfig:
    """Tests for load_template_config."""

    def test_default_filename(self) -> None:
        assert DEFAULT_CONFIG_FILENAME == ".new.yml"

    def test_loads_scenario_config(self, tmp_path: Path) -> None:
        (tmp_path / ".new.yml").write_text(SCENARIO_CONFIG, encoding="utf-8")

        config = load_template_config(tmp_path)

        assert config.version == "1"
        assert config.description == "Team project skeleton"
        assert [p.name for p in config.params] == ["project", "license"]
        assert config.params[0].required is True
        assert config.params[0].kind is ParamKind.TEXT
        assert config.params[1].kind is ParamKind.ENUM
        assert config.params[1].enum == ["MIT", "Apache-2.0"]

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        (tmp_path / ".new.yml").write_text("description: hi\n", encoding="utf-8")
        assert load_template_config(str(tmp_path)).description == "hi"

    def test_custom_filename(self, tmp_path: Path) -> None:
        (tmp_path / "template.yaml").write_text("version: '2'\n", encoding="utf-8")

        config = load_template_config(tmp_path, config_filename="template.yaml")

        assert config.version == "2"

    def test_empty_file_is_empty_schema(self, tmp_path: Path) -> None:
        (tmp_path / ".new.yml").write_text("", encoding="utf-8")

        config = load_template_config(tmp_path)

        assert config.params == []
        assert config.description == ""

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigNotFound, match=r"\.new\.yml"):
            load_template_config(tmp_path)

    def test_missing_template_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigNotFound):
            load_template_config(tmp_path / "does-not-exist")

    def test_config_path_is_a_directory(self, tmp_path: Path) -> None:
        (tmp_path / ".new.yml").mkdir()
        with pytest.raises(ConfigNotFound):
            load_template_config(tmp_path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        (tmp_path / ".new.yml").write_text("params: [\n  - name: x\n", encoding="utf-8")
        with pytest.raises(ConfigParseError):
            load_template_config(tmp_path)

    def test_top_level_must_be_mapping(self, tmp_path: Path) -> None:
        (tmp_path / ".new.yml").write_text("- one\n- two\n", encoding="utf-8")
        with pytest.raises(ConfigParseError, match="mapping"):
            load_template_config(tmp_path)

    def test_wrong_types(self, tmp_path: Path) -> None:
        (tmp_path / ".new.yml").write_text(
            "params:\n  - name: project\n    enum: not-a-list\n",
            encoding="utf-8",
        )
        with pytest.raises(ConfigParseError):
            load_template_config(tmp_path)

    def test_param_without_name(self, tmp_path: Path) -> None:
        (tmp_path / ".new.yml").write_text("params:\n  - prompt: What?\n", encoding="utf-8")
        with pytest.raises(ConfigParseError):
            load_template_config(tmp_path)

    def test_not_utf8(self, tmp_path: Path) -> None:
        (tmp_path / ".new.yml").write_bytes(b"description: \xff\xfe\n")
        with pytest.raises(ConfigParseError):
            load_template_config(tmp_path)

    def test_errors_share_base_class(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_template_config(tmp_path)

    def test_enum_without_choices_loads(self, tmp_path: Path) -> None:
        (tmp_path / ".new.yml").write_text(
            "params:\n  - name: license\n    kind: enum\n", encoding="utf-8"
        )
        config = load_template_config(tmp_path)
        assert config.params[0].enum == []
