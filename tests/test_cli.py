"""Tests for CLI commands."""

import yaml
from click.testing import CliRunner

from obsidian_zola.cli import main


class TestCLI:
    """Tests for Click CLI commands."""

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "obsidian-zola" in result.output
        assert "0.1.0" in result.output

    def test_export(self, vault, write, tmp_path):
        write(vault / "index.md", "---\ntitle: Home\n---\nSee [[about]].\n")
        write(vault / "about.md", "About")
        destination = tmp_path / "site" / "content"

        runner = CliRunner()
        result = runner.invoke(main, ["export", "-s", str(vault), "-d", str(destination)])

        assert result.exit_code == 0, result.output
        assert "Export completed successfully" in result.output
        assert (destination / "index.md").read_text() == "---\ntitle: Home\n---\nSee [about](@/about.md).\n"

    def test_export_skip_frontmatter(self, vault, write, output):
        write(vault / "index.md", "---\ntitle: Home\n---\nBody\n")

        runner = CliRunner()
        result = runner.invoke(main, ["export", "-s", str(vault), "-d", str(output), "--skip-frontmatter"])

        assert result.exit_code == 0, result.output
        assert (output / "index.md").read_text() == "Body\n"

    def test_export_static_prefix_from_config(self, vault, write, output, tmp_path):
        write(vault / "index.md", "![Logo](public/logo.png)\n")
        config = tmp_path / "config.yaml"
        config.write_text(yaml.dump({"static_prefix": "public", "frontmatter_strategy": "auto"}))

        runner = CliRunner()
        result = runner.invoke(main, ["export", "-s", str(vault), "-d", str(output), "-c", str(config)])

        assert result.exit_code == 0, result.output
        assert (output / "index.md").read_text() == "![Logo](/logo.png)\n"

    def test_static_prefix_option_overrides_config(self, vault, write, output):
        write(vault / "index.md", "![Logo](assets/logo.png)\n")

        runner = CliRunner()
        result = runner.invoke(main, [
            "export", "-s", str(vault), "-d", str(output), "--static-prefix", "assets", "--skip-frontmatter",
        ])

        assert result.exit_code == 0, result.output
        assert (output / "index.md").read_text() == "![Logo](/logo.png)\n"

    def test_export_invalid_source(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["export", "-s", str(tmp_path / "nope"), "-d", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert "Export failed" in result.output

    def test_export_missing_config(self, vault, output):
        runner = CliRunner()
        result = runner.invoke(main, ["export", "-s", str(vault), "-d", str(output), "-c", "/nonexistent.yaml"])

        assert result.exit_code == 1
        assert "Error loading config" in result.output
