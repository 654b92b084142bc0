"""
tokengen - build-time code generator for design token packages.

Reads a W3C design token document and emits frozen name constants plus
TypeScript declarations for themes, langs, grayscales, colors and dimensions.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import ConfigError, TokenDocumentError, TokenGenError
from .core.extractors import extract_all
from .pipeline import DirectorySink, MemorySink, PipelineResult, run_pipeline

__version__ = get_version()

__all__ = [
    "__version__",
    "ConfigError",
    "DirectorySink",
    "MemorySink",
    "PipelineResult",
    "TokenDocumentError",
    "TokenGenError",
    "extract_all",
    "run_pipeline",
]
