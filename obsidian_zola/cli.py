"""CLI entry point for obsidian-zola."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from obsidian_zola import __version__
from obsidian_zola.config import load_config
from obsidian_zola.core.exporter import VaultExporter
from obsidian_zola.core.resolver import VaultResolver
from obsidian_zola.core.rewriter import LinkRewriter
from obsidian_zola.errors import ObsidianZolaError
from obsidian_zola.transforms.frontmatter import FrontmatterStrategy


@click.group()
@click.version_option(version=__version__, prog_name="obsidian-zola")
def main() -> None:
    """Convert Obsidian vault exports to Zola content."""
    pass


@main.command()
@click.option("-s", "--source", type=click.Path(path_type=Path), required=True,
              help="Path to the Obsidian vault to export")
@click.option("-d", "--destination", type=click.Path(path_type=Path), required=True,
              help="Path to the Zola content directory to export to")
@click.option("--skip-frontmatter", is_flag=True, help="Do not write frontmatter")
@click.option("--static-prefix", default=None,
              help="Vault directory served from the site root (default: static)")
@click.option("-c", "--config", "config_path", default=None, help="Path to a YAML config file")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose (DEBUG) logging")
def export(
    source: Path,
    destination: Path,
    skip_frontmatter: bool,
    static_prefix: Optional[str],
    config_path: Optional[str],
    verbose: bool,
) -> None:
    """Export an Obsidian vault to Zola format."""
    _setup_logging(verbose)

    try:
        config = load_config(config_path)
    except ObsidianZolaError as e:
        click.echo(f"Error loading config: {e}", err=True)
        sys.exit(1)

    if static_prefix:
        config.static_prefix = static_prefix
    if skip_frontmatter:
        config.frontmatter_strategy = FrontmatterStrategy.NEVER

    exporter = VaultExporter(
        source,
        destination,
        frontmatter_strategy=config.frontmatter_strategy,
        skip_hidden=config.skip_hidden,
    )
    exporter.add_postprocessor(LinkRewriter(VaultResolver(), static_prefix=config.static_prefix))

    try:
        result = exporter.run()
    except ObsidianZolaError as e:
        click.echo(f"Export failed: {e}", err=True)
        sys.exit(1)

    click.echo(
        f"Export completed successfully! "
        f"({len(result.exported_notes)} notes, {len(result.copied_assets)} assets)"
    )


def _setup_logging(verbose: bool) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )


if __name__ == "__main__":
    main()
