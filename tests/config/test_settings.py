"""Tests for command-line settings resolution."""

import pytest
from pydantic import ValidationError

from seriko.config import SerikoSettings, load_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("SERIKO_LOG_LEVEL", "SERIKO_OUTPUT_FORMAT", "SERIKO_SHOW_COMMENTS"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings == SerikoSettings(log_level="WARNING", output_format="tree", show_comments=False)


def test_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("SERIKO_LOG_LEVEL", "debug")
    monkeypatch.setenv("SERIKO_SHOW_COMMENTS", "true")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.show_comments is True


def test_tool_table_in_pyproject(tmp_path) -> None:
    config = tmp_path / "pyproject.toml"
    config.write_text('[project]\nname = "shell"\n\n[tool.seriko]\noutput_format = "json"\n')
    assert load_settings(config).output_format == "json"


def test_top_level_table(tmp_path) -> None:
    config = tmp_path / "seriko.toml"
    config.write_text('output_format = "summary"\nshow_comments = true\n')
    settings = load_settings(config)
    assert settings.output_format == "summary"
    assert settings.show_comments is True


def test_precedence(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("SERIKO_OUTPUT_FORMAT", "summary")
    assert load_settings().output_format == "summary"

    config = tmp_path / "seriko.toml"
    config.write_text('output_format = "json"\n')
    assert load_settings(config).output_format == "json"
    assert load_settings(config, output_format="tree").output_format == "tree"
    assert load_settings(config, output_format=None).output_format == "json"


def test_invalid_value() -> None:
    with pytest.raises(ValidationError):
        load_settings(output_format="xml")
