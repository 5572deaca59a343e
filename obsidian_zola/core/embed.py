"""Inline embedding of Markdown notes."""

import logging
from pathlib import PurePosixPath
from typing import Optional

from obsidian_zola.core.models import DocumentContext

logger = logging.getLogger(__name__)


def read_embed(path: PurePosixPath, context: DocumentContext) -> Optional[str]:
    """Read the text of an embedded note.

    The content is returned as-is; embeds inside it are not expanded.

    Args:
        path: Vault-relative path of the embedded note
        context: Document doing the embedding

    Returns:
        The note's full text, or None if it could not be read
    """
    file_path = context.vault_root / path
    try:
        return file_path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to embed %s in %s: %s", path, context.relative_source, e)
        return None
