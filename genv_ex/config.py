from __future__ import annotations

import json
import re
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from genv_ex.models.template_model import DEFAULT_PLACEHOLDER, RenderConfig

RC_FILE_NAME = ".genv-exrc"


class ConfigFileError(ValueError):
    """Raised when an rc file cannot be read as generator settings."""


def default_header(generated_at: str) -> str:
    return f"# Generated .env.example\n# Auto-generated on {generated_at}\n"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GENV_EX_", extra="forbid")

    env_file_path: str = ".env"
    output_file_path: str = ".env.example"
    placeholder: str = DEFAULT_PLACEHOLDER
    preserve_values: Annotated[list[str], NoDecode] = []
    ignore_keys: Annotated[list[str], NoDecode] = []
    include_comments: bool = True
    header: str | None = None
    force: bool = False
    silent: bool = False
    dry_run: bool = False

    @field_validator("preserve_values", "ignore_keys", mode="before")
    @classmethod
    def split_keys(cls, value: str | list[str] | None) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("["):
                return json.loads(value)
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    def render_config(self, generated_at: str) -> RenderConfig:
        header = self.header if self.header is not None else default_header(generated_at)
        return RenderConfig(
            placeholder=self.placeholder,
            preserve_values=list(self.preserve_values),
            ignore_keys=list(self.ignore_keys),
            include_comments=self.include_comments,
            header=header,
        )


def _snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def read_rc_file(path: Path) -> dict[str, Any]:
    """Read a JSON rc file, accepting camelCase keys like ``includeComments``."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigFileError(f"Invalid JSON in '{path}': {exc.msg}") from exc
    if not isinstance(payload, dict):
        raise ConfigFileError(f"'{path}' must contain a JSON object")
    return {_snake_case(key): value for key, value in payload.items()}


def load_settings(config_file: Path | None = None, **overrides: Any) -> Settings:
    """Build settings from defaults, ``GENV_EX_*`` variables, the rc file and overrides.

    Later sources win. ``None`` overrides are ignored so unset CLI flags fall through.
    """
    values: dict[str, Any] = {}
    if config_file is not None and config_file.exists():
        values.update(read_rc_file(config_file))
    values.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return Settings(**values)
    except ValidationError as exc:
        source = f"'{config_file}'" if config_file is not None else "settings"
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigFileError(f"Invalid {source}: {problems}") from exc


@lru_cache
def get_settings() -> Settings:
    return Settings()
