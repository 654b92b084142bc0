"""Tests for the token build pipeline."""

import logging
from pathlib import Path

import pytest

from tokengen.core.errors import TokenDocumentError
from tokengen.core.manifest import OutputLayout, ProjectManifest
from tokengen.pipeline import DirectorySink, MemorySink, format_summary, run_pipeline


class TestRunPipeline:
    def test_writes_constants(self, token_project: ProjectManifest):
        result = run_pipeline(token_project, MemorySink())

        assert result.constants_path == token_project.root / "src" / "constant.js"
        content = result.constants_path.read_text(encoding="utf-8")
        assert 'export const primitiveColors = Object.freeze(["blue","gray-inverse","ocean-blue"]);' in content
        assert 'export const dimensions = Object.freeze(["0","050","100"]);' in content

    def test_emits_combined_declarations(self, token_project: ProjectManifest):
        sink = MemorySink()
        result = run_pipeline(token_project, sink)

        assert list(sink.artifacts) == ["index.d.ts"]
        assert [artifact.file_name for artifact in result.emitted] == ["index.d.ts"]
        source = sink.artifacts["index.d.ts"].source
        assert "export declare type Themes = 'oktuple' | 'claytap' | 'agility';" in source

    def test_emits_split_declarations(self, token_project: ProjectManifest):
        token_project.output.layout = OutputLayout.SPLIT
        sink = MemorySink()
        run_pipeline(token_project, sink)
        assert list(sink.artifacts) == ["types.d.ts", "index.d.ts"]

    def test_directory_sink(self, token_project: ProjectManifest):
        sink = DirectorySink(token_project.types_dir)
        run_pipeline(token_project, sink)

        assert sink.written == [token_project.root / "dist" / "index.d.ts"]
        assert (token_project.root / "dist" / "index.d.ts").read_text(encoding="utf-8").startswith(
            "// Type definitions for @pantograph/design-tokens"
        )

    def test_idempotent(self, token_project: ProjectManifest):
        first_sink = DirectorySink(token_project.types_dir)
        run_pipeline(token_project, first_sink)
        first = {
            path: path.read_bytes()
            for path in [token_project.constants_path, *first_sink.written]
        }

        second_sink = DirectorySink(token_project.types_dir)
        run_pipeline(token_project, second_sink)
        second = {
            path: path.read_bytes()
            for path in [token_project.constants_path, *second_sink.written]
        }

        assert first == second

    def test_overwrites_existing_constants(self, token_project: ProjectManifest):
        token_project.constants_path.write_text("stale", encoding="utf-8")
        run_pipeline(token_project, MemorySink())
        assert "stale" not in token_project.constants_path.read_text(encoding="utf-8")

    def test_missing_document_aborts(self, tmp_path: Path):
        manifest = ProjectManifest(root=tmp_path)
        with pytest.raises(TokenDocumentError):
            run_pipeline(manifest, MemorySink())
        assert not manifest.constants_path.exists()

    def test_empty_document_uses_fallbacks(self, tmp_path: Path):
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "designTokens.json").write_text("{}", encoding="utf-8")
        sink = MemorySink()
        run_pipeline(ProjectManifest(root=tmp_path), sink)

        source = sink.artifacts["index.d.ts"].source
        assert "export declare type Langs = 'en' | 'fa';" in source
        assert "export declare type PrimitiveColors = never;" in source

    def test_logs_summary(self, token_project: ProjectManifest, caplog):
        with caplog.at_level(logging.INFO, logger="tokengen.pipeline"):
            run_pipeline(token_project, MemorySink())

        messages = [record.getMessage() for record in caplog.records if record.name == "tokengen.pipeline"]
        assert messages == [
            "✅ Generated types from designTokens.json",
            "   Themes: [oktuple, claytap, agility]",
            "   Langs: [en, fa]",
            "   GrayScales: [arsenic, cool, warm, neutral]",
            "   PrimitiveColors: [blue, gray-inverse, ocean-blue]",
            "   AliasColors: [neutral-surface, primary-fill, primary-fill-hover]",
            "   Dimensions: [0, 050, 100]",
        ]


class TestFormatSummary:
    def test_empty_lists(self):
        from tokengen.core.models import ExtractionResult

        assert format_summary(ExtractionResult())[0] == "Themes: []"
