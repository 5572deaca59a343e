"""Shared test fixtures for obsidian-zola."""

from pathlib import Path

import pytest

from obsidian_zola.core.models import DocumentContext


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """An empty vault directory."""
    path = tmp_path / "vault"
    path.mkdir()
    return path


@pytest.fixture
def output(tmp_path: Path) -> Path:
    """An empty output directory."""
    path = tmp_path / "content"
    path.mkdir()
    return path


@pytest.fixture
def make_context(vault: Path, output: Path):
    """Build a DocumentContext for a vault-relative note path."""
    def factory(relative: str = "index.md") -> DocumentContext:
        return DocumentContext(
            vault_root=vault,
            source=vault / relative,
            destination=output / relative,
        )
    return factory


@pytest.fixture
def write():
    """Write a file, creating parent directories."""
    def factory(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return factory
