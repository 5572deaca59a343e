"""
obsidian-zola - Convert Obsidian vault exports to Zola content

Rewrites the links in exported notes to the syntax Zola expects:
- Note links to @/ internal links
- Static images to root-relative paths
- Vault assets to paths relative to the output document
- Note embeds inlined in place
- Broken links replaced by emphasized text
"""

__version__ = "0.1.0"

from obsidian_zola.core.models import (
    DocumentContext,
    ExportResult,
    Reference,
    ReferenceKind,
    ResolvedTarget,
    RewriteResult,
)
from obsidian_zola.core.resolver import MappingResolver, Resolver, VaultResolver
from obsidian_zola.core.rewriter import LinkRewriter
from obsidian_zola.core.exporter import VaultExporter
from obsidian_zola.errors import ConfigError, ExportError, ObsidianZolaError

__all__ = [
    "DocumentContext",
    "ExportResult",
    "Reference",
    "ReferenceKind",
    "ResolvedTarget",
    "RewriteResult",
    "MappingResolver",
    "Resolver",
    "VaultResolver",
    "LinkRewriter",
    "VaultExporter",
    "ConfigError",
    "ExportError",
    "ObsidianZolaError",
]
