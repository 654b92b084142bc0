"""
TypeScript declaration generator.

Generates type declarations from the extracted token names:
- Structural types for the token document (DesignToken, DesignTokenGroup, DesignTokens)
- Union types for themes, langs, grayscales, primitive colors, alias colors, dimensions
- Declarations for the frozen constants in constant.js

Two layouts are supported. COMBINED emits everything into index.d.ts. SPLIT
emits types.d.ts plus a minimal index.d.ts that re-exports it.
"""

import json

from ..core.manifest import OutputLayout
from ..core.models import ExtractionResult
from .base import Generator, GeneratorResult, ts_union

INDEX_FILE_NAME = "index.d.ts"
TYPES_FILE_NAME = "types.d.ts"

DEFAULT_PACKAGE_NAME = "@pantograph/design-tokens"

TOKEN_TYPES = (
    "color",
    "dimension",
    "string",
    "fontFamily",
    "number",
    "cubicBezier",
    "strokeStyle",
    "border",
)

# Used when the token document yields no names for a category
FALLBACK_LANGS = "'en' | 'fa'"
FALLBACK_THEMES = "'oktuple' | 'claytap' | 'agility' | 'pantograph' | 'primeplanet'"
FALLBACK_GRAY_SCALES = "'arsenic' | 'cool' | 'warm' | 'neutral'"
NO_VALUES = "never"

GENERATED_HEADER = """\
// This file is auto-generated from designTokens.json
// Do not edit manually
"""

TOKEN_STRUCTURE = """\
/** Token $extensions (mode, figma, etc.) */
export interface DesignTokenExtensions {
  mode?: Record<string, string>;
  figma?: {
    codeSyntax?: Record<string, string>;
    variableId?: string;
    collection?: { id?: string; name?: string; defaultModeId?: string; [key: string]: unknown };
    [key: string]: unknown;
  };
  [key: string]: unknown;
}
/** Single design token (color, dimension, string, etc.) */
export interface DesignToken {
  $type: %(token_types)s;
  $value: string;
  $description?: string;
  scopes?: string[];
  $extensions?: DesignTokenExtensions;
}
/** Nested group of tokens or subgroups */
export type DesignTokenGroup = { [key: string]: DesignToken | DesignTokenGroup };
"""


def section_fields(sections: list[str]) -> list[str]:
    """Optional DesignTokens fields, one per top-level key.

    Keys containing a quote character are skipped; the index signature
    covers them.
    """
    return [
        f"{json.dumps(key, ensure_ascii=False)}?: DesignTokenGroup;"
        for key in sections
        if '"' not in key and "'" not in key
    ]


class TypesGenerator(Generator):
    """Generate TypeScript declarations for the token package."""

    def __init__(
        self,
        extraction: ExtractionResult,
        layout: OutputLayout = OutputLayout.COMBINED,
        package_name: str = DEFAULT_PACKAGE_NAME,
    ):
        super().__init__(extraction)
        self.layout = layout
        self.package_name = package_name

    def generate(self) -> GeneratorResult:
        """Generate declaration files for the configured layout."""
        result = GeneratorResult()
        if self.layout == OutputLayout.SPLIT:
            result.add_artifact(TYPES_FILE_NAME, self._render_types_module())
            result.add_artifact(INDEX_FILE_NAME, self._render_split_index())
        else:
            result.add_artifact(INDEX_FILE_NAME, self._render_combined_index())
        return result

    # =========================================================================
    # Layouts
    # =========================================================================

    def _render_combined_index(self) -> str:
        return "".join(
            [
                f"// Type definitions for {self.package_name}\n\n",
                self._token_structure(),
                self._root_structure(),
                self._union_types(),
                "export declare const designTokens: DesignTokens;\n",
                self._constant_declarations(),
            ]
        )

    def _render_types_module(self) -> str:
        return "".join(
            [
                GENERATED_HEADER,
                "\n",
                self._token_structure(),
                self._root_structure(),
                self._union_types(),
                self._constant_declarations(),
            ]
        )

    def _render_split_index(self) -> str:
        return (
            f"// Type definitions for {self.package_name}\n"
            "\n"
            "import type { DesignTokens } from './types';\n"
            "\n"
            "export declare const designTokens: DesignTokens;\n"
            "export * from './types';\n"
        )

    # =========================================================================
    # Blocks
    # =========================================================================

    def _token_structure(self) -> str:
        token_types = " | ".join(f"'{kind}'" for kind in TOKEN_TYPES)
        return TOKEN_STRUCTURE % {"token_types": token_types}

    def _root_structure(self) -> str:
        lines = ["/** Root design tokens: known sections + index signature for future keys */"]
        lines.append("export interface DesignTokens {")
        lines.extend(f"  {field}" for field in section_fields(self.extraction.sections))
        lines.append("  [key: string]: DesignTokenGroup | undefined;")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _union_types(self) -> str:
        extraction = self.extraction
        unions = [
            ("Langs", ts_union(extraction.langs, FALLBACK_LANGS)),
            ("Themes", ts_union(extraction.themes, FALLBACK_THEMES)),
            ("GrayScales", ts_union(extraction.gray_scales, FALLBACK_GRAY_SCALES)),
            ("PrimitiveColors", ts_union(extraction.primitive_colors, NO_VALUES)),
            ("AliasColors", ts_union(extraction.alias_colors, NO_VALUES)),
            ("Dimensions", ts_union(extraction.dimensions, NO_VALUES)),
        ]
        return "".join(f"export declare type {name} = {union};\n" for name, union in unions)

    def _constant_declarations(self) -> str:
        return (
            "export declare const primitiveColors: readonly PrimitiveColors[];\n"
            "export declare const aliasColors: readonly AliasColors[];\n"
            "export declare const dimensions: readonly Dimensions[];\n"
        )
