"""Rewrites Obsidian-style references into Zola link syntax."""

import logging
from dataclasses import replace
from pathlib import PurePosixPath
from typing import List, Optional

from obsidian_zola.core.classifier import Classification, RewriteKind, classify, is_markdown_target
from obsidian_zola.core.embed import read_embed
from obsidian_zola.core.models import DocumentContext, Reference, ReferenceKind, RewriteResult
from obsidian_zola.core.resolver import (
    Resolver,
    VaultResolver,
    asset_target,
    internal_link_target,
    split_fragment,
    static_asset_target,
)
from obsidian_zola.core.scanner import scan_references
from obsidian_zola.transforms.links import (
    FallbackTransform,
    LinkTransform,
    emphasis,
    markdown_image,
    markdown_link,
)

logger = logging.getLogger(__name__)


class LinkRewriter:
    """Postprocessor converting links, images and embeds for Zola.

    Handles:
    - Note links to ``@/`` internal links
    - Static images to root-relative paths
    - Other vault assets to paths relative to the output document
    - Note embeds, inlined one level deep
    - Broken links, replaced by emphasized text
    """

    def __init__(
        self,
        resolver: Optional[Resolver] = None,
        static_prefix: str = "static",
        link_transform: Optional[LinkTransform] = None,
        image_transform: Optional[LinkTransform] = None,
        fallback_transform: Optional[FallbackTransform] = None,
    ):
        """Initialize LinkRewriter.

        Args:
            resolver: Maps targets to vault files (default: VaultResolver)
            static_prefix: Vault directory served from the site root
            link_transform: Renders links (default: markdown_link())
            image_transform: Renders images (default: markdown_image())
            fallback_transform: Renders unresolved links (default: emphasis())
        """
        self.resolver = resolver or VaultResolver()
        self.static_prefix = static_prefix
        self.link_transform = link_transform or markdown_link()
        self.image_transform = image_transform or markdown_image()
        self.fallback_transform = fallback_transform or emphasis()

    def __call__(self, context: DocumentContext, text: str) -> str:
        return self.rewrite(text, context)

    def rewrite(self, text: str, context: DocumentContext) -> str:
        """Rewrite ``text`` and return the new content."""
        return self.rewrite_document(text, context).content

    def rewrite_document(self, text: str, context: DocumentContext) -> RewriteResult:
        """Rewrite every reference in a document.

        Args:
            text: Markdown body of the document
            context: Location of the document in the vault and output tree

        Returns:
            RewriteResult with the new content and what went missing
        """
        pieces: List[str] = []
        missing: List[str] = []
        embedded: List[PurePosixPath] = []
        position = 0

        for reference in scan_references(text):
            raw = text[reference.start:reference.end]
            if _has_nested_references(reference):
                inner = self.rewrite_document(reference.text, context)
                missing.extend(inner.missing_links)
                embedded.extend(inner.embedded)
                # Markdown link text starts right after the opening bracket
                raw = "[" + inner.content + raw[1 + len(reference.text):]
                reference = replace(reference, text=inner.content)
            classification = classify(reference, context, self.resolver, self.static_prefix)
            replacement = self._render(classification, raw, context)

            if replacement is None:
                missing.append(reference.target)
                logger.warning("Unresolved link %r in %s", reference.target, context.relative_source)
                replacement = self._render_unresolved(reference, raw)
            elif classification.kind is RewriteKind.EMBED:
                embedded.append(classification.resolved.path)

            pieces.append(text[position:reference.start])
            pieces.append(replacement)
            position = reference.end

        pieces.append(text[position:])
        return RewriteResult(content="".join(pieces), missing_links=missing, embedded=embedded)

    def _render(self, classification: Classification, raw: str, context: DocumentContext) -> Optional[str]:
        """Render a classified reference; None means treat it as unresolved."""
        reference = classification.reference
        kind = classification.kind

        if kind is RewriteKind.EXTERNAL:
            return raw

        if kind is RewriteKind.STATIC_ASSET:
            target = static_asset_target(classification.static_path)
            return self._render_target(reference, target)

        if kind is RewriteKind.EMBED:
            return read_embed(classification.resolved.path, context)

        if kind is RewriteKind.INTERNAL:
            resolved = classification.resolved
            if reference.kind is ReferenceKind.LINK and is_markdown_target(resolved.path.name):
                target = internal_link_target(resolved.path, resolved.fragment)
            else:
                target = asset_target(resolved.path, context, resolved.fragment)
            return self._render_target(reference, target)

        return None

    def _render_target(self, reference: Reference, target: str) -> str:
        if reference.kind is ReferenceKind.LINK:
            return self.link_transform(reference.label, target, reference.title)
        alt = reference.label if reference.wikilink else reference.text
        return self.image_transform(alt, target, reference.title)

    def _render_unresolved(self, reference: Reference, raw: str) -> str:
        if reference.kind is ReferenceKind.IMAGE:
            return raw
        if reference.kind is ReferenceKind.EMBED:
            path_part, _ = split_fragment(reference.target)
            suffix = PurePosixPath(path_part).suffix
            if suffix and not is_markdown_target(path_part):
                return raw
        return self.fallback_transform(reference.label)


def _has_nested_references(reference: Reference) -> bool:
    """Whether a Markdown link's text may hold images or links of its own."""
    return (
        reference.kind is ReferenceKind.LINK
        and not reference.wikilink
        and bool(reference.text)
        and '[' in reference.text
    )
