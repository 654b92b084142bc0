"""
Core token handling: loading, configuration, extraction.
"""

from .errors import ConfigError, ErrorContext, TokenDocumentError, TokenGenError
from .extractors import (
    extract_alias_colors,
    extract_all,
    extract_dimensions,
    extract_gray_scales,
    extract_langs,
    extract_primitive_colors,
    extract_themes,
)
from .manifest import OutputLayout, ProjectManifest, find_manifest, load_manifest
from .models import ExtractionResult, GeneratedArtifact, TokenTree
from .tokens import load_token_tree, parse_token_tree

__all__ = [
    "ConfigError",
    "ErrorContext",
    "ExtractionResult",
    "GeneratedArtifact",
    "OutputLayout",
    "ProjectManifest",
    "TokenDocumentError",
    "TokenGenError",
    "TokenTree",
    "extract_alias_colors",
    "extract_all",
    "extract_dimensions",
    "extract_gray_scales",
    "extract_langs",
    "extract_primitive_colors",
    "extract_themes",
    "find_manifest",
    "load_manifest",
    "load_token_tree",
    "parse_token_tree",
]
