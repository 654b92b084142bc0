"""
Base generator classes for source emission.

Generators turn an ExtractionResult into GeneratedArtifact objects. They never
touch the filesystem; the pipeline decides where each artifact goes.
"""

import json
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..core.models import ExtractionResult, GeneratedArtifact


@dataclass
class GeneratorResult:
    """
    Result from a generator execution.

    Attributes:
        artifacts: Generated files, in emission order
    """

    artifacts: list[GeneratedArtifact] = field(default_factory=list)

    def add_artifact(self, file_name: str, source: str) -> GeneratedArtifact:
        """Record a generated file."""
        artifact = GeneratedArtifact(file_name=file_name, source=source)
        self.artifacts.append(artifact)
        return artifact

    def get(self, file_name: str) -> GeneratedArtifact:
        """Look up an artifact by file name."""
        for artifact in self.artifacts:
            if artifact.file_name == file_name:
                return artifact
        raise KeyError(file_name)

    @property
    def file_names(self) -> list[str]:
        return [artifact.file_name for artifact in self.artifacts]


class Generator(ABC):
    """
    Base class for all generators.

    Example:
        class ReadmeGenerator(Generator):
            def generate(self) -> GeneratorResult:
                result = GeneratorResult()
                result.add_artifact("README.md", "# Themes\\n")
                return result
    """

    def __init__(self, extraction: ExtractionResult):
        """
        Initialize generator.

        Args:
            extraction: Name lists extracted from the token document
        """
        self.extraction = extraction

    @abstractmethod
    def generate(self) -> GeneratorResult:
        """
        Generate artifacts.

        Returns:
            GeneratorResult with the generated artifacts
        """
        pass


def js_array(values: Sequence[str]) -> str:
    """Compact JSON array literal, byte-compatible with JSON.stringify."""
    return json.dumps(list(values), ensure_ascii=False, separators=(",", ":"))


def ts_string(value: str) -> str:
    """Single-quoted TypeScript string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"'{escaped}'"


def ts_union(values: Sequence[str], fallback: str) -> str:
    """Union of string literals, or ``fallback`` when ``values`` is empty."""
    if not values:
        return fallback
    return " | ".join(ts_string(value) for value in values)
