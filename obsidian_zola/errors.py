"""Error hierarchy for obsidian-zola."""


class ObsidianZolaError(Exception):
    """Base exception for all obsidian-zola errors."""

    pass


class ConfigError(ObsidianZolaError):
    """Configuration loading or validation error."""

    pass


class ExportError(ObsidianZolaError):
    """Vault export failed (invalid directories or I/O failure)."""

    pass
