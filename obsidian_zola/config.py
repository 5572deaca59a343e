"""Configuration loading for obsidian-zola."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from obsidian_zola.errors import ConfigError
from obsidian_zola.transforms.frontmatter import FrontmatterStrategy


@dataclass
class ExportConfig:
    """Settings for an export run."""
    static_prefix: str = "static"
    frontmatter_strategy: FrontmatterStrategy = FrontmatterStrategy.ALWAYS
    skip_hidden: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExportConfig":
        """Build a config from a mapping, validating keys and values."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        values = dict(data)
        if 'frontmatter_strategy' in values:
            try:
                values['frontmatter_strategy'] = FrontmatterStrategy(str(values['frontmatter_strategy']).lower())
            except ValueError as e:
                raise ConfigError(f"Invalid frontmatter_strategy: {values['frontmatter_strategy']!r}") from e

        prefix = values.get('static_prefix', cls.static_prefix)
        if not isinstance(prefix, str) or not prefix.strip('/'):
            raise ConfigError(f"static_prefix must be a non-empty string, got {prefix!r}")

        return cls(**values)


def load_config(path: Optional[str] = None) -> ExportConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the config file. None returns the defaults.

    Returns:
        Validated ExportConfig

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid
    """
    if path is None:
        return ExportConfig()

    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        raw = config_path.read_text(encoding='utf-8')
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e

    if data is None:
        return ExportConfig()
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a YAML mapping")

    return ExportConfig.from_dict(data)
