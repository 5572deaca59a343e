"""Vault exporter: walks a vault and writes a Zola content tree."""

import logging
import shutil
from pathlib import Path
from typing import Callable, List, Optional

from obsidian_zola.core.models import DocumentContext, ExportResult
from obsidian_zola.errors import ExportError
from obsidian_zola.transforms.frontmatter import FrontmatterStrategy, build_output, split_frontmatter
from obsidian_zola.utils import is_hidden, is_markdown_file, validate_directory

logger = logging.getLogger(__name__)

Postprocessor = Callable[[DocumentContext, str], str]


class VaultExporter:
    """Exports an Obsidian vault, running postprocessors on every note.

    Non-Markdown files are copied verbatim. Markdown notes have their
    frontmatter split off, their body passed through each postprocessor in
    turn, and are written to the same relative path under the destination.
    """

    def __init__(
        self,
        source: Path,
        destination: Path,
        frontmatter_strategy: FrontmatterStrategy = FrontmatterStrategy.ALWAYS,
        postprocessors: Optional[List[Postprocessor]] = None,
        skip_hidden: bool = True,
    ):
        """Initialize VaultExporter.

        Args:
            source: Path to the Obsidian vault root
            destination: Path to the Zola content directory
            frontmatter_strategy: When to write frontmatter blocks
            postprocessors: Functions (context, body) -> body applied in order
            skip_hidden: Skip files and directories whose name starts with a dot
        """
        self.source = Path(source)
        self.destination = Path(destination)
        self.frontmatter_strategy = frontmatter_strategy
        self.postprocessors = list(postprocessors or [])
        self.skip_hidden = skip_hidden

    def add_postprocessor(self, postprocessor: Postprocessor) -> None:
        """Append a postprocessor to the chain."""
        self.postprocessors.append(postprocessor)

    def run(self) -> ExportResult:
        """Export the vault.

        Returns:
            ExportResult listing written notes and copied assets

        Raises:
            ExportError: If a directory is invalid or a file cannot be written
        """
        validate_directory(self.source, "Source vault")
        if self.destination.exists():
            validate_directory(self.destination, "Destination directory")
        else:
            logger.info("Creating destination directory %s", self.destination)
            try:
                self.destination.mkdir(parents=True)
            except OSError as e:
                raise ExportError(f"Failed to create destination directory: {e}") from e

        vault_root = self.source.resolve()
        output_root = self.destination.resolve()
        result = ExportResult()

        for path in self._walk(vault_root, output_root):
            relative = path.relative_to(vault_root)
            target = output_root / relative
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                if is_markdown_file(path):
                    # Internal links always name the note with a .md extension
                    target = target.with_suffix('.md')
                    self._export_note(DocumentContext(vault_root, path, target))
                    result.exported_notes.append(target)
                else:
                    shutil.copy2(path, target)
                    result.copied_assets.append(target)
            except (OSError, UnicodeDecodeError) as e:
                raise ExportError(f"Failed to export {relative}: {e}") from e
            logger.debug("Exported %s", relative)

        logger.info(
            "Exported %d notes and %d assets to %s",
            len(result.exported_notes), len(result.copied_assets), output_root,
        )
        return result

    def _walk(self, vault_root: Path, output_root: Path):
        """Yield files under the vault in a stable order."""
        for path in sorted(vault_root.rglob('*')):
            if not path.is_file():
                continue
            relative = path.relative_to(vault_root)
            if self.skip_hidden and is_hidden(relative):
                continue
            # Output tree nested inside the vault
            if output_root == path or output_root in path.parents:
                continue
            yield path

    def _export_note(self, context: DocumentContext) -> None:
        # Line endings are kept as written in the vault
        with context.source.open(encoding='utf-8', newline='') as f:
            raw = f.read()
        frontmatter, body = split_frontmatter(raw)
        for postprocessor in self.postprocessors:
            body = postprocessor(context, body)
        with context.destination.open('w', encoding='utf-8', newline='') as f:
            f.write(build_output(frontmatter, body, self.frontmatter_strategy))
