"""
Frozen constants generator.

Emits ``constant.js``, which exports the primitive color, alias color and
dimension names as frozen arrays for use by the rest of the source tree.
"""

from .base import Generator, GeneratorResult, js_array

CONSTANTS_FILE_NAME = "constant.js"

CONSTANTS_HEADER = """\
// This file is auto-generated from designTokens.json during build
// Do not edit manually
"""


class ConstantsGenerator(Generator):
    """Generate the frozen-constants source file."""

    file_name = CONSTANTS_FILE_NAME

    def generate(self) -> GeneratorResult:
        result = GeneratorResult()
        result.add_artifact(self.file_name, self.render())
        return result

    def render(self) -> str:
        extraction = self.extraction
        exports = [
            ("primitiveColors", extraction.primitive_colors),
            ("aliasColors", extraction.alias_colors),
            ("dimensions", extraction.dimensions),
        ]
        blocks = [CONSTANTS_HEADER]
        for name, values in exports:
            blocks.append(f"export const {name} = Object.freeze({js_array(values)});\n")
        return "\n".join(blocks)
