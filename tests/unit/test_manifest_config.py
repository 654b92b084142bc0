"""Tests for tokengen.toml loading."""

from pathlib import Path

import pytest

from tokengen.core.errors import ConfigError
from tokengen.core.manifest import (
    MANIFEST_NAME,
    OutputLayout,
    find_manifest,
    load_manifest,
    parse_layout,
)


def write_manifest(root: Path, content: str) -> Path:
    path = root / MANIFEST_NAME
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadManifest:
    def test_defaults(self, tmp_path: Path):
        manifest = load_manifest(write_manifest(tmp_path, ""))
        assert manifest.root == tmp_path.resolve()
        assert manifest.name == "@pantograph/design-tokens"
        assert manifest.tokens_path == tmp_path.resolve() / "src" / "designTokens.json"
        assert manifest.constants_path == tmp_path.resolve() / "src" / "constant.js"
        assert manifest.types_dir == tmp_path.resolve() / "dist"
        assert manifest.output.layout == OutputLayout.COMBINED

    def test_all_sections(self, tmp_path: Path):
        manifest = load_manifest(
            write_manifest(
                tmp_path,
                """
[project]
name = "@acme/tokens"

[tokens]
source = "design/tokens.json"

[output]
constants = "lib/names.js"
types_dir = "build/types"
layout = "split"
""",
            )
        )
        assert manifest.name == "@acme/tokens"
        assert manifest.tokens_path == tmp_path.resolve() / "design" / "tokens.json"
        assert manifest.constants_path == tmp_path.resolve() / "lib" / "names.js"
        assert manifest.types_dir == tmp_path.resolve() / "build" / "types"
        assert manifest.output.layout == OutputLayout.SPLIT

    def test_unknown_layout(self, tmp_path: Path):
        path = write_manifest(tmp_path, '[output]\nlayout = "bundled"\n')
        with pytest.raises(ConfigError, match="Unknown output layout 'bundled'"):
            load_manifest(path)

    def test_invalid_toml(self, tmp_path: Path):
        path = write_manifest(tmp_path, "[output\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_manifest(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Manifest not found"):
            load_manifest(tmp_path / MANIFEST_NAME)

    @pytest.mark.parametrize(
        "content, message",
        [
            ("[tokens]\nsource = 3\n", r"\[tokens\] source must be a string"),
            ("[output]\nconstants = true\n", r"\[output\] constants must be a string"),
            ("[output]\ntypes_dir = [\"dist\"]\n", r"\[output\] types_dir must be a string"),
            ("[output]\nlayout = 2\n", r"\[output\] layout must be a string"),
            ("[project]\nname = 1\n", r"\[project\] name must be a string"),
        ],
    )
    def test_values_must_be_strings(self, tmp_path: Path, content: str, message: str):
        path = write_manifest(tmp_path, content)
        with pytest.raises(ConfigError, match=message):
            load_manifest(path)

    def test_section_must_be_table(self, tmp_path: Path):
        path = write_manifest(tmp_path, 'output = "dist"\n')
        with pytest.raises(ConfigError, match=r"\[output\] must be a table"):
            load_manifest(path)


class TestFindManifest:
    def test_without_manifest_uses_defaults(self, tmp_path: Path):
        manifest = find_manifest(tmp_path)
        assert manifest.root == tmp_path.resolve()
        assert manifest.output.layout == OutputLayout.COMBINED

    def test_reads_manifest_in_directory(self, tmp_path: Path):
        write_manifest(tmp_path, '[project]\nname = "found"\n')
        assert find_manifest(tmp_path).name == "found"


class TestParseLayout:
    def test_known(self):
        assert parse_layout("split") == OutputLayout.SPLIT

    def test_unknown_without_path(self):
        with pytest.raises(ConfigError) as exc_info:
            parse_layout("other")
        assert exc_info.value.context is None
