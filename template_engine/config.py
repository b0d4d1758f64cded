"""Template configuration read from an optional template.yaml."""

from __future__ import annotations

from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError

from .constants import CONFIG_FILE
from .types import TemplateConfig

if TYPE_CHECKING:
    from pathlib import Path


def load_template_config(template_dir: Path) -> TemplateConfig:
    """Read template.yaml from a template directory.

    A template without the file gets the default layout and no explicit
    primary target.
    """
    config_path = template_dir / CONFIG_FILE
    if not config_path.exists():
        return TemplateConfig()

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as err:
        raise ValueError(f"Invalid YAML in {config_path}: {err}") from err

    if raw is None:
        return TemplateConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"{config_path} must contain a mapping")

    try:
        return TemplateConfig.model_validate(raw)
    except ValidationError as err:
        raise ValueError(f"Invalid template config {config_path}: {err}") from err
