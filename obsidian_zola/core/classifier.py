"""Reference classification.

Rules are tried in a fixed order; the first that applies decides how a
reference is rewritten:

1. EXTERNAL - URLs with a scheme, protocol-relative and site-absolute
   targets, bare ``#fragment`` links and empty targets are left alone.
2. STATIC_ASSET - the target (raw, or once resolved) lives under the
   static directory.
3. EMBED - an embed whose resolved file is a Markdown note.
4. INTERNAL - the target resolved to a file in the vault.
5. UNRESOLVED - everything else.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from obsidian_zola.core.models import DocumentContext, Reference, ReferenceKind, ResolvedTarget
from obsidian_zola.core.resolver import (
    MARKDOWN_EXTENSIONS,
    Resolver,
    split_fragment,
    strip_static_prefix,
)

# Two or more characters so Windows drive letters are not taken for schemes
_SCHEME = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]+:')


class RewriteKind(Enum):
    EXTERNAL = "external"
    STATIC_ASSET = "static_asset"
    EMBED = "embed"
    INTERNAL = "internal"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class Classification:
    """How a reference should be rewritten.

    ``static_path`` is set for STATIC_ASSET, ``resolved`` for EMBED and
    INTERNAL.
    """
    kind: RewriteKind
    reference: Reference
    resolved: ResolvedTarget = ResolvedTarget()
    static_path: Optional[str] = None


def is_external(reference: Reference) -> bool:
    """Whether a target points outside the vault and must not be rewritten."""
    target = reference.target.strip()
    if _SCHEME.match(target) or target.startswith('//'):
        return True
    if reference.wikilink:
        return False
    return not target or target.startswith(('#', '/'))


def is_markdown_target(path: str) -> bool:
    return path.lower().endswith(MARKDOWN_EXTENSIONS)


def classify(
    reference: Reference,
    context: DocumentContext,
    resolver: Resolver,
    static_prefix: str,
) -> Classification:
    """Decide which rewrite applies to ``reference``.

    Args:
        reference: Reference found by the scanner
        context: Document being rewritten
        resolver: Maps targets to vault files
        static_prefix: Name of the static asset directory

    Returns:
        Classification for the reference
    """
    if is_external(reference):
        return Classification(RewriteKind.EXTERNAL, reference)

    path_part, fragment = split_fragment(reference.target)
    stripped = strip_static_prefix(path_part, static_prefix)
    if stripped is not None:
        return Classification(RewriteKind.STATIC_ASSET, reference, static_path=stripped + fragment)

    resolved = resolver.resolve(reference, context)
    if not resolved.resolved:
        return Classification(RewriteKind.UNRESOLVED, reference)

    stripped = strip_static_prefix(resolved.path.as_posix(), static_prefix)
    if stripped is not None:
        return Classification(
            RewriteKind.STATIC_ASSET, reference, resolved, static_path=stripped + resolved.fragment
        )

    if reference.kind is ReferenceKind.EMBED and is_markdown_target(resolved.path.name):
        return Classification(RewriteKind.EMBED, reference, resolved)

    return Classification(RewriteKind.INTERNAL, reference, resolved)
