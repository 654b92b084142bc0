"""
Data models shared by the extractors, generators, and pipeline.

The token tree itself stays a plain ``dict`` loaded from JSON; these models
describe what is derived from it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Parsed design token document (W3C DTCG format)
TokenTree = dict[str, Any]


class ExtractionResult(BaseModel):
    """
    Name lists extracted from one token document.

    Attributes:
        themes: Lower-cased mode names under the alias colors section
        langs: Lower-cased mode names under the Typography section
        gray_scales: Lower-cased mode names under Grayscales - Dark / Grayscales
        primitive_colors: Sorted primitive color names (--ptp-NAME-0)
        alias_colors: Sorted alias color names (--pta-NAME)
        dimensions: Sorted dimension scale names (--ptp-dimension-NAME)
        sections: Top-level keys of the document, in document order
    """

    themes: list[str] = Field(default_factory=list)
    langs: list[str] = Field(default_factory=list)
    gray_scales: list[str] = Field(default_factory=list)
    primitive_colors: list[str] = Field(default_factory=list)
    alias_colors: list[str] = Field(default_factory=list)
    dimensions: list[str] = Field(default_factory=list)
    sections: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def summary(self) -> list[tuple[str, list[str]]]:
        """Label/value pairs in build-log order."""
        return [
            ("Themes", self.themes),
            ("Langs", self.langs),
            ("GrayScales", self.gray_scales),
            ("PrimitiveColors", self.primitive_colors),
            ("AliasColors", self.alias_colors),
            ("Dimensions", self.dimensions),
        ]


class GeneratedArtifact(BaseModel):
    """A generated source file: its name and full text."""

    file_name: str
    source: str

    model_config = ConfigDict(frozen=True)
