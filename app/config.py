from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar, Literal

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import PydanticBaseSettingsSource, YamlConfigSettingsSource

from domain.style import ChartStyle

DEFAULT_CONFIG_PATH = Path("config/timeline.yaml")
CONFIG_PATH_ENV = "TIMELINE_CONFIG_PATH"

OutputFormat = Literal["svg", "excalidraw"]


class OutputSettings(BaseModel):
    output_dir: Path = Path("data/charts")
    default_format: OutputFormat = "svg"
    asset_root: Path | None = None
    excalidraw_base_url: str = "https://excalidraw.com/"

    @field_validator("default_format", mode="before")
    @classmethod
    def normalize_format(cls, value: object) -> str:
        return str(value).strip().lower() if value else "svg"


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TIMELINE_", env_nested_delimiter="__")

    style: ChartStyle = ChartStyle()
    output: OutputSettings = OutputSettings()

    _yaml_path: ClassVar[Path | None] = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        ]
        if cls._yaml_path:
            sources.append(YamlConfigSettingsSource(settings_cls, yaml_file=cls._yaml_path))
        return tuple(sources)


def load_settings(config_path: Path | None = None) -> AppSettings:
    env_path = os.getenv(CONFIG_PATH_ENV)
    resolved_path: Path | None = None

    if config_path is not None:
        resolved_path = config_path
    elif env_path:
        resolved_path = Path(env_path)
    elif DEFAULT_CONFIG_PATH.exists():
        resolved_path = DEFAULT_CONFIG_PATH

    previous = AppSettings._yaml_path
    try:
        if resolved_path is not None:
            if not resolved_path.exists():
                msg = f"Config file not found: {resolved_path}"
                raise FileNotFoundError(msg)
            AppSettings._yaml_path = resolved_path
        return AppSettings()
    finally:
        AppSettings._yaml_path = previous
