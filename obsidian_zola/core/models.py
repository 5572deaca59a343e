"""Data models for obsidian-zola."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import List, Optional

from obsidian_zola.utils import normalize_path


@dataclass(frozen=True)
class DocumentContext:
    """Where the document being rewritten lives.

    One context is built per exported note and discarded afterwards. The
    source is always inside the vault root and the destination mirrors the
    source's position under the output root.
    """
    vault_root: Path
    source: Path
    destination: Path

    @property
    def relative_source(self) -> PurePosixPath:
        """Source path relative to the vault root."""
        return PurePosixPath(normalize_path(self.source.relative_to(self.vault_root)))

    @property
    def source_dir(self) -> PurePosixPath:
        """Vault-relative directory holding the source note."""
        return self.relative_source.parent

    @property
    def output_root(self) -> Path:
        """Root of the output tree, derived from the destination path."""
        depth = len(self.source_dir.parts)
        root = self.destination.parent
        for _ in range(depth):
            root = root.parent
        return root

    @property
    def destination_dir(self) -> PurePosixPath:
        """Directory of the destination note relative to the output root."""
        relative = self.destination.parent.relative_to(self.output_root)
        return PurePosixPath(normalize_path(relative))


class ReferenceKind(Enum):
    """Syntactic kind of a reference found in Markdown."""
    LINK = "link"
    IMAGE = "image"
    EMBED = "embed"


@dataclass(frozen=True)
class Reference:
    """A link, image or embed occurrence in a document.

    ``start`` and ``end`` delimit the whole construct in the scanned text so
    it can be replaced in place.
    """
    kind: ReferenceKind
    target: str
    text: Optional[str]
    start: int
    end: int
    wikilink: bool = False
    title: Optional[str] = None

    @property
    def label(self) -> str:
        """Display text, falling back to the raw target."""
        return self.text if self.text else self.target


@dataclass(frozen=True)
class ResolvedTarget:
    """Outcome of resolving a reference against the vault.

    Either ``path`` holds a vault-relative file path, or the target is
    unresolved.
    """
    path: Optional[PurePosixPath] = None
    fragment: str = ""

    @property
    def resolved(self) -> bool:
        return self.path is not None

    @classmethod
    def unresolved(cls) -> "ResolvedTarget":
        return cls()


@dataclass
class RewriteResult:
    """Result of rewriting a single document."""
    content: str
    missing_links: List[str] = field(default_factory=list)
    embedded: List[PurePosixPath] = field(default_factory=list)


@dataclass
class ExportResult:
    """Result of an export run."""
    exported_notes: List[Path] = field(default_factory=list)
    copied_assets: List[Path] = field(default_factory=list)
