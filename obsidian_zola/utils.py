"""Utility functions for obsidian-zola."""

from pathlib import Path
from typing import Union

from obsidian_zola.errors import ExportError

PathLike = Union[str, Path]


def validate_directory(path: PathLike, description: str) -> None:
    """Check that ``path`` exists and is a directory.

    Args:
        path: Path to validate
        description: What the path represents, for error messages

    Raises:
        ExportError: If the path is missing or not a directory
    """
    path = Path(path)
    if not path.exists():
        raise ExportError(f"{description} does not exist: {path}")
    if not path.is_dir():
        raise ExportError(f"{description} is not a directory: {path}")


def is_markdown_file(path: PathLike) -> bool:
    """Whether ``path`` has a Markdown extension (.md or .markdown)."""
    return Path(path).suffix.lower() in ('.md', '.markdown')


def is_hidden(relative: Path) -> bool:
    """Whether any component of a relative path starts with a dot."""
    return any(part.startswith('.') for part in relative.parts)


def normalize_path(path: PathLike) -> str:
    """Join the components of ``path`` with forward slashes."""
    return "/".join(Path(path).parts)
