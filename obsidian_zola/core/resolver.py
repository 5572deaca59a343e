"""Path resolution for link and image targets.

The functions in this module map vault-relative paths to the link targets
Zola expects. ``VaultResolver`` is the default way of turning a raw target
into a vault-relative path; callers can inject any object with the same
``resolve`` method.
"""

import logging
from pathlib import PurePosixPath
from typing import Dict, Optional, Protocol
from urllib.parse import unquote

from obsidian_zola.core.models import DocumentContext, Reference, ResolvedTarget

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ('.md', '.markdown')

INTERNAL_LINK_MARKER = "@/"


class Resolver(Protocol):
    """Maps a reference to a vault-relative file, or reports it unresolved."""

    def resolve(self, reference: Reference, context: DocumentContext) -> ResolvedTarget:
        ...


def split_fragment(target: str) -> tuple[str, str]:
    """Split ``note.md#section`` into ``("note.md", "#section")``."""
    path, sep, fragment = target.partition('#')
    return path, sep + fragment


def normalize_vault_path(base_dir: PurePosixPath, target: str) -> Optional[PurePosixPath]:
    """Join ``target`` onto ``base_dir`` and collapse ``.`` and ``..``.

    Backslashes are treated as separators. Returns None when the result
    would climb above the vault root or names no file.
    """
    parts = [] if target.startswith('/') else list(base_dir.parts)
    for part in target.replace('\\', '/').split('/'):
        if part in ('', '.'):
            continue
        if part == '..':
            if not parts:
                return None
            parts.pop()
        else:
            parts.append(part)
    if not parts:
        return None
    return PurePosixPath(*parts)


def relative_path(target: PurePosixPath, from_dir: PurePosixPath) -> str:
    """Relative path from directory ``from_dir`` to ``target``.

    Both paths are relative to the same root. One ``../`` is emitted for
    every directory of ``from_dir`` below the common ancestor.
    """
    target_parts = target.parts
    base_parts = from_dir.parts

    shared = 0
    for ours, theirs in zip(target_parts[:-1], base_parts):
        if ours != theirs:
            break
        shared += 1

    ups = ['..'] * (len(base_parts) - shared)
    return '/'.join(ups + list(target_parts[shared:]))


def encode_spaces(path: str) -> str:
    """Percent-encode spaces so the path stays a valid link destination."""
    return path.replace(" ", "%20")


def with_markdown_extension(path: PurePosixPath) -> PurePosixPath:
    """Normalize the extension of a note path to ``.md``."""
    if path.suffix.lower() in MARKDOWN_EXTENSIONS:
        return path.with_suffix('.md')
    return path.with_name(path.name + '.md')


def internal_link_target(path: PurePosixPath, fragment: str = "") -> str:
    """Site-root anchored target for a note, e.g. ``@/notes/intro.md``."""
    return f"{INTERNAL_LINK_MARKER}{encode_spaces(with_markdown_extension(path).as_posix())}{fragment}"


def strip_static_prefix(target: str, static_prefix: str) -> Optional[str]:
    """Return ``target`` without the static prefix, or None if it lacks it."""
    prefix = static_prefix.strip('/') + '/'
    normalized = target.replace('\\', '/')
    if normalized.startswith(prefix) and len(normalized) > len(prefix):
        return normalized[len(prefix):]
    return None


def static_asset_target(stripped: str) -> str:
    """Root-relative target for a file served from the static directory."""
    return '/' + encode_spaces(stripped.lstrip('/'))


def asset_target(path: PurePosixPath, context: DocumentContext, fragment: str = "") -> str:
    """Target for a vault asset, relative to the destination's directory."""
    return encode_spaces(relative_path(path, context.destination_dir)) + fragment


class VaultResolver:
    """Resolves targets against files that exist in the vault.

    Markdown link targets are relative to the current note. Wikilink targets
    are tried relative to the note first and then to the vault root, with
    ``.md`` appended when they carry no extension.
    """

    def resolve(self, reference: Reference, context: DocumentContext) -> ResolvedTarget:
        path_part, fragment = split_fragment(reference.target)
        path_part = unquote(path_part).strip()
        if not path_part:
            return ResolvedTarget.unresolved()

        for candidate in self._candidates(reference, context, path_part):
            if (context.vault_root / candidate).is_file():
                return ResolvedTarget(path=candidate, fragment=fragment)

        logger.debug("No file in vault for %r from %s", reference.target, context.relative_source)
        return ResolvedTarget.unresolved()

    def _candidates(self, reference: Reference, context: DocumentContext, path_part: str):
        bases = [context.source_dir]
        if reference.wikilink:
            bases.append(PurePosixPath())

        names = [path_part]
        if reference.wikilink and not PurePosixPath(path_part).suffix:
            names.insert(0, path_part + '.md')

        for base in bases:
            for name in names:
                candidate = normalize_vault_path(base, name)
                if candidate is not None:
                    yield candidate


class MappingResolver:
    """Resolves targets from a fixed ``raw target -> vault path`` mapping.

    Useful when resolution has already been done elsewhere, and in tests.
    """

    def __init__(self, mapping: Dict[str, str]):
        self.mapping = {k: PurePosixPath(v) for k, v in mapping.items()}

    def resolve(self, reference: Reference, context: DocumentContext) -> ResolvedTarget:
        path_part, fragment = split_fragment(reference.target)
        path = self.mapping.get(path_part)
        if path is None:
            return ResolvedTarget.unresolved()
        return ResolvedTarget(path=path, fragment=fragment)
