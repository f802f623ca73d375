"""
sprout.config - Template Config Loading
=======================================

Locates the config file at the root of a template directory and parses it
into a ``TemplateConfig``.

The config is YAML:

    version: "1"
    description: Team project skeleton
    params:
      - name: project
        required: true
        prompt: Project name
      - name: license
        kind: enum
        prompt: License
        enum: [MIT, Apache-2.0]
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from sprout.errors import ConfigNotFound, ConfigParseError
from sprout.models import TemplateConfig


# Name of the config file looked up directly inside the template root
DEFAULT_CONFIG_FILENAME = ".new.yml"


def load_template_config(
    template_path: str | os.PathLike[str],
    config_filename: str = DEFAULT_CONFIG_FILENAME,
) -> TemplateConfig:
    """
    Read and parse the config file at the root of a template.

    Parameters
    ----------
    template_path : str | PathLike
        Root directory of the template.

    config_filename : str
        Name of the config file inside ``template_path``.

    Returns
    -------
    TemplateConfig
        The parsed parameter schema. An empty file yields an empty schema.

    Raises
    ------
    ConfigNotFound
        If the file does not exist or cannot be read.
    ConfigParseError
        If the content is not valid YAML or does not match the schema.
    """
    config_path = Path(template_path) / config_filename

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigNotFound(f"Cannot read template config {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"Template config {config_path} is not UTF-8 text: {e}") from e

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Invalid template config {config_path}: expected a mapping at the top level, "
            f"got {type(data).__name__}"
        )

    try:
        return TemplateConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigParseError(f"Invalid template config {config_path}: {e}") from e
