#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_cli_config.py
"""Unit tests for configuration file discovery and loading."""

import argparse

import pytest

from md2fxml.cli.config import (
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
    options_from_config,
)
from md2fxml.options import FxmlRendererOptions, MarkdownParserOptions


@pytest.mark.cli
@pytest.mark.unit
class TestLoadConfigFile:
    """Tests for load_config_file."""

    def test_toml(self, tmp_path):
        path = tmp_path / "c.toml"
        path.write_text('[renderer]\nbullet_prefix = "- "\n', encoding="utf-8")
        assert load_config_file(path) == {"renderer": {"bullet_prefix": "- "}}

    @pytest.mark.parametrize("suffix", [".yaml", ".yml"])
    def test_yaml(self, tmp_path, suffix):
        path = tmp_path / f"c{suffix}"
        path.write_text("parser:\n  parse_tables: false\n", encoding="utf-8")
        assert load_config_file(path) == {"parser": {"parse_tables": False}}

    def test_json(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text('{"renderer": {"width_precision": 3}}', encoding="utf-8")
        assert load_config_file(str(path)) == {"renderer": {"width_precision": 3}}

    def test_pyproject_section(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.md2fxml.renderer]\nimage_prefix = "img: "\n', encoding="utf-8")
        assert load_config_file(path) == {"renderer": {"image_prefix": "img: "}}

    def test_pyproject_without_section(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n', encoding="utf-8")
        assert load_config_file(path) == {}

    @pytest.mark.parametrize(
        "name, content, message",
        [
            ("c.toml", "[renderer", "Invalid config file"),
            ("c.yaml", "a: [unclosed", "Invalid config file"),
            ("c.json", "{", "Invalid config file"),
            ("c.ini", "[x]", "Unsupported config file format: .ini"),
            ("c.yaml", "- just\n- a list\n", "must contain a mapping"),
            ("pyproject.toml", "[tool]\nmd2fxml = 3\n", "must be a table"),
        ],
    )
    def test_errors(self, tmp_path, name, content, message):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        with pytest.raises(argparse.ArgumentTypeError, match=message):
            load_config_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(argparse.ArgumentTypeError, match="does not exist"):
            load_config_file(tmp_path / "nope.toml")

    def test_directory(self, tmp_path):
        with pytest.raises(argparse.ArgumentTypeError, match="not a file"):
            load_config_file(tmp_path)


@pytest.mark.cli
@pytest.mark.unit
class TestDiscovery:
    """Tests for find_config_in_parents and load_config_with_priority."""

    def test_found_in_parent(self, tmp_path):
        config = tmp_path / ".md2fxml.yaml"
        config.write_text("renderer: {}\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_in_parents(nested) == config.resolve()

    def test_dedicated_file_beats_pyproject(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text("[tool.md2fxml.renderer]\n", encoding="utf-8")
        dedicated = tmp_path / ".md2fxml.toml"
        dedicated.write_text("", encoding="utf-8")

        assert find_config_in_parents(tmp_path) == dedicated.resolve()

    def test_pyproject_needs_section(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
        nested = tmp_path / "sub"
        nested.mkdir()

        assert find_config_in_parents(nested) != (tmp_path / "pyproject.toml").resolve()

    def test_priority(self, tmp_path, monkeypatch):
        explicit = tmp_path / "explicit.json"
        explicit.write_text('{"renderer": {"bullet_prefix": "e"}}', encoding="utf-8")
        env = tmp_path / "env.json"
        env.write_text('{"renderer": {"bullet_prefix": "v"}}', encoding="utf-8")
        (tmp_path / ".md2fxml.json").write_text('{"renderer": {"bullet_prefix": "d"}}', encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert load_config_with_priority(str(explicit), str(env))["renderer"]["bullet_prefix"] == "e"
        assert load_config_with_priority(None, str(env))["renderer"]["bullet_prefix"] == "v"
        assert load_config_with_priority(None, None)["renderer"]["bullet_prefix"] == "d"


@pytest.mark.cli
@pytest.mark.unit
class TestOptionsFromConfig:
    """Tests for options_from_config."""

    def test_empty(self):
        assert options_from_config({}) == (MarkdownParserOptions(), FxmlRendererOptions())

    def test_sections_applied(self):
        parser_options, renderer_options = options_from_config(
            {"parser": {"autolink_urls": False}, "renderer": {"width_precision": 2, "include_header": False}}
        )

        assert parser_options.autolink_urls is False
        assert renderer_options == FxmlRendererOptions(width_precision=2, include_header=False)

    @pytest.mark.parametrize(
        "config, message",
        [
            ({"output": {}}, "Unknown config section"),
            ({"renderer": "x"}, r"\[renderer\] must be a table"),
            ({"parser": {"bogus": True}}, "Unknown MarkdownParserOptions field"),
            ({"renderer": {"width_precision": 0}}, "width_precision must be between"),
        ],
    )
    def test_invalid(self, config, message):
        with pytest.raises(argparse.ArgumentTypeError, match=message):
            options_from_config(config)
