"""Tests for configuration loading."""

import pytest
import yaml

from obsidian_zola.config import ExportConfig, load_config
from obsidian_zola.errors import ConfigError
from obsidian_zola.transforms.frontmatter import FrontmatterStrategy


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_path(self):
        config = load_config(None)
        assert config.static_prefix == "static"
        assert config.frontmatter_strategy is FrontmatterStrategy.ALWAYS
        assert config.skip_hidden is True

    def test_load_valid(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({
            "static_prefix": "public",
            "frontmatter_strategy": "Never",
            "skip_hidden": False,
        }))

        config = load_config(str(path))

        assert config.static_prefix == "public"
        assert config.frontmatter_strategy is FrontmatterStrategy.NEVER
        assert config.skip_hidden is False

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == ExportConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(str(tmp_path / "nope.yaml"))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("static_prefix: [unclosed")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(str(path))

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(str(path))

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="Unknown config keys: colour"):
            ExportConfig.from_dict({"colour": "blue"})

    def test_invalid_strategy(self):
        with pytest.raises(ConfigError, match="frontmatter_strategy"):
            ExportConfig.from_dict({"frontmatter_strategy": "sometimes"})

    def test_invalid_static_prefix(self):
        with pytest.raises(ConfigError, match="static_prefix"):
            ExportConfig.from_dict({"static_prefix": "/"})
