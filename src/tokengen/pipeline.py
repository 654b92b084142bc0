"""
Token build pipeline.

Runs once per build: load the token document, extract every name list,
write constant.js into the source tree, and hand the type declarations to
the host build system through an ArtifactSink.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from .core.extractors import extract_all
from .core.manifest import ProjectManifest
from .core.models import ExtractionResult, GeneratedArtifact
from .core.tokens import load_token_tree
from .generators import ConstantsGenerator, TypesGenerator

logger = logging.getLogger(__name__)


class ArtifactSink(Protocol):
    """Where the host build system accepts generated assets."""

    def emit_file(self, artifact: GeneratedArtifact) -> None: ...


class DirectorySink:
    """Write emitted assets into an output directory."""

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir
        self.written: list[Path] = []

    def emit_file(self, artifact: GeneratedArtifact) -> None:
        path = self.output_dir / artifact.file_name
        write_text(path, artifact.source)
        self.written.append(path)


class MemorySink:
    """Collect emitted assets for hosts that write output themselves."""

    def __init__(self) -> None:
        self.artifacts: dict[str, GeneratedArtifact] = {}

    def emit_file(self, artifact: GeneratedArtifact) -> None:
        self.artifacts[artifact.file_name] = artifact


@dataclass
class PipelineResult:
    """
    Result of one pipeline run.

    Attributes:
        extraction: Extracted name lists
        constants_path: Where constant.js was written
        emitted: Type declaration artifacts handed to the sink
    """

    extraction: ExtractionResult
    constants_path: Path
    emitted: list[GeneratedArtifact] = field(default_factory=list)


def write_text(path: Path, content: str) -> None:
    """Write content to a file, creating parent directories if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps \n line endings on every platform
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(content)


def format_summary(extraction: ExtractionResult) -> list[str]:
    """Build-log lines, one per category: ``Label: [a, b]``."""
    return [f"{label}: [{', '.join(values)}]" for label, values in extraction.summary()]


def run_pipeline(manifest: ProjectManifest, sink: ArtifactSink) -> PipelineResult:
    """
    Generate constants and type declarations from the token document.

    Args:
        manifest: Project configuration (paths, layout, package name)
        sink: Receives the type declaration artifacts

    Returns:
        PipelineResult describing what was produced

    Raises:
        TokenDocumentError: If the token document cannot be loaded
        OSError: If constant.js cannot be written
    """
    tree = load_token_tree(manifest.tokens_path)
    extraction = extract_all(tree)

    constants = ConstantsGenerator(extraction).generate()
    constants_path = manifest.constants_path
    write_text(constants_path, constants.artifacts[0].source)

    types = TypesGenerator(
        extraction,
        layout=manifest.output.layout,
        package_name=manifest.name,
    ).generate()
    for artifact in types.artifacts:
        sink.emit_file(artifact)

    logger.info("✅ Generated types from %s", manifest.tokens_path.name)
    for line in format_summary(extraction):
        logger.info("   %s", line)

    return PipelineResult(
        extraction=extraction,
        constants_path=constants_path,
        emitted=list(types.artifacts),
    )
