"""Render configuration."""

from __future__ import annotations

from pathlib import Path
from typing import FrozenSet, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

PathLike = Union[str, Path]

SELF_CLOSING_TAGS: FrozenSet[str] = frozenset({"input", "img", "hr", "br", "meta", "link"})


class RenderConfig(BaseModel):
    """Options that change how tags are serialized.

    Passed explicitly to the render functions so two trees can be rendered
    with different policies side by side.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    self_closing_slash: bool = Field(
        True,
        description="Render void tags as <br /> rather than <br>.",
    )
    self_closing_tags: FrozenSet[str] = Field(
        default=SELF_CLOSING_TAGS,
        description="Tag names treated as void elements.",
    )

    @field_validator("self_closing_tags", mode="before")
    @classmethod
    def _lowercase_tags(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.split()
        if isinstance(value, (list, tuple, set, frozenset)):
            return frozenset(str(tag).strip().lower() for tag in value if str(tag).strip())
        return value

    def is_self_closing(self, tag: str) -> bool:
        return tag in self.self_closing_tags


DEFAULT_CONFIG = RenderConfig()


def load_render_config(path: PathLike) -> RenderConfig:
    """Load a :class:`RenderConfig` from a YAML mapping. Empty files give defaults."""

    config_path = Path(path)
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Could not read render config {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Render config {config_path} must contain a mapping.")

    try:
        return RenderConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid render config in {config_path}: {exc}") from exc


__all__ = ["DEFAULT_CONFIG", "RenderConfig", "SELF_CLOSING_TAGS", "load_render_config"]
