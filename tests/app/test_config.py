from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from app.config import AppSettings, load_settings
from domain.style import ChartStyle


def test_defaults_match_chart_style() -> None:
    settings = AppSettings()
    assert settings.style == ChartStyle()
    assert settings.output.default_format == "svg"


def test_yaml_file_overrides_style(tmp_path: Path) -> None:
    config_path = tmp_path / "timeline.yaml"
    config_path.write_text(
        "style:\n  bar_left_offset: 120\n  should_draw_intervals: true\noutput:\n  default_format: EXCALIDRAW\n",
        encoding="utf-8",
    )

    settings = load_settings(config_path)

    assert settings.style.bar_left_offset == 120
    assert settings.style.should_draw_intervals is True
    assert settings.style.bar_length == 1000
    assert settings.output.default_format == "excalidraw"
    assert AppSettings._yaml_path is None


def test_environment_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "timeline.yaml"
    config_path.write_text("style:\n  bar_length: 600\n", encoding="utf-8")
    monkeypatch.setenv("TIMELINE_CONFIG_PATH", str(config_path))
    monkeypatch.setenv("TIMELINE_STYLE__BAR_HEIGHT", "25")

    settings = load_settings()

    assert settings.style.bar_length == 600
    assert settings.style.bar_height == 25


def test_missing_config_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yaml")


def test_style_is_frozen_and_validated() -> None:
    style = ChartStyle()
    with pytest.raises(ValidationError):
        style.bar_length = 10  # type: ignore[misc]
    with pytest.raises(ValidationError):
        style.with_overrides(bar_height=0)
    with pytest.raises(ValidationError):
        style.with_overrides(bar_length=-1)
    with pytest.raises(ValidationError):
        ChartStyle(unknown_option=1)  # type: ignore[call-arg]
    assert style.with_overrides(bar_height=25).bar_height == 25
    assert style.bar_height == 30
