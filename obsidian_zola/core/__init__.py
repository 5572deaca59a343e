"""Core components for obsidian-zola."""

from obsidian_zola.core.models import DocumentContext, ExportResult, Reference, ReferenceKind, ResolvedTarget, RewriteResult
from obsidian_zola.core.scanner import scan_references
from obsidian_zola.core.classifier import Classification, RewriteKind, classify
from obsidian_zola.core.resolver import MappingResolver, Resolver, VaultResolver
from obsidian_zola.core.rewriter import LinkRewriter
from obsidian_zola.core.exporter import Postprocessor, VaultExporter

__all__ = [
    "DocumentContext",
    "ExportResult",
    "Reference",
    "ReferenceKind",
    "ResolvedTarget",
    "RewriteResult",
    "scan_references",
    "Classification",
    "RewriteKind",
    "classify",
    "MappingResolver",
    "Resolver",
    "VaultResolver",
    "LinkRewriter",
    "Postprocessor",
    "VaultExporter",
]
