"""
Name extractors for design token documents.

Two families, both built on :mod:`tokengen.core.walker`:

- Key-pattern extractors (primitive colors, alias colors, dimensions) match
  token keys such as ``--ptp-blue-0`` against a fixed pattern and return the
  captured names sorted.
- Mode extractors (themes, langs, grayscales) collect the keys of
  ``$extensions.mode`` maps, lower-cased, in first-seen order.

Missing sections are not errors: the extractor returns an empty list.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from .models import ExtractionResult, TokenTree
from .walker import KeyCandidates, MatchFn, resolve_anchor, unique, walk

logger = logging.getLogger(__name__)

# Section titles appear both with and without a leading space in exports
PRIMITIVE_COLORS_SECTION: KeyCandidates = ("Primitive Colors", " Primitive Colors")
ALIAS_COLORS_SECTION: KeyCandidates = (" Alias colors", "Alias colors")
DIMENSIONS_SECTION: KeyCandidates = (" Dimensions", "Dimensions")
TYPOGRAPHY_SECTION: KeyCandidates = ("Typography",)
GRAYSCALES_PATH: tuple[KeyCandidates, ...] = (("Grayscales - Dark",), ("Grayscales",))

PRIMITIVE_COLOR_PATTERN = re.compile(r"^--ptp-(.+)-0$")
ALIAS_COLOR_PATTERN = re.compile(r"^--pta-(.+)$")
DIMENSION_PATTERN = re.compile(r"^--ptp-dimension-(.+)$")


def key_pattern(pattern: re.Pattern[str]) -> MatchFn:
    """Match function collecting the first capture group of matching keys."""

    def match(key: str | None, node: Any) -> list[str] | None:
        if key is None:
            return None
        found = pattern.match(key)
        return [found.group(1)] if found else None

    return match


def mode_names(node: Any) -> list[str] | None:
    """Lower-cased keys of ``node["$extensions"]["mode"]``, or None if absent."""
    if not isinstance(node, dict):
        return None
    extensions = node.get("$extensions")
    if not isinstance(extensions, dict):
        return None
    mode = extensions.get("mode")
    if not isinstance(mode, dict):
        return None
    return [name.lower() for name in mode]


def _match_mode(key: str | None, node: Any) -> list[str] | None:
    return mode_names(node)


@dataclass(frozen=True)
class Extractor:
    """One configured walk over the token tree.

    Attributes:
        label: Name used in the build log
        anchor: Anchor path, one tuple of accepted spellings per step
        match: Collect-vs-descend decision for each visited node
        min_depth: Shallowest depth at which nodes are matched
        max_depth: Depth past which the walk does not descend (None: unbounded)
        sort: Sort the result (otherwise first-seen order)
    """

    label: str
    anchor: tuple[KeyCandidates, ...]
    match: MatchFn
    min_depth: int = 0
    max_depth: int | None = None
    sort: bool = False

    def __call__(self, tree: TokenTree) -> list[str]:
        root = resolve_anchor(tree, self.anchor)
        if root is None:
            logger.debug("%s: anchor %s not found", self.label, _describe(self.anchor))
            return []

        names = unique(
            walk(root, self.match, min_depth=self.min_depth, max_depth=self.max_depth)
        )
        if self.sort:
            names.sort()
        logger.debug("%s: %d name(s)", self.label, len(names))
        return names


def _describe(anchor: Iterable[KeyCandidates]) -> str:
    return " -> ".join("|".join(repr(key) for key in step) for step in anchor)


# Keys one level under the section's own groups: section(0) -> group(1) -> key(2)
extract_primitive_colors = Extractor(
    label="PrimitiveColors",
    anchor=(PRIMITIVE_COLORS_SECTION,),
    match=key_pattern(PRIMITIVE_COLOR_PATTERN),
    min_depth=2,
    max_depth=2,
    sort=True,
)

extract_alias_colors = Extractor(
    label="AliasColors",
    anchor=(ALIAS_COLORS_SECTION,),
    match=key_pattern(ALIAS_COLOR_PATTERN),
    sort=True,
)

extract_dimensions = Extractor(
    label="Dimensions",
    anchor=(DIMENSIONS_SECTION,),
    match=key_pattern(DIMENSION_PATTERN),
    sort=True,
)

extract_themes = Extractor(
    label="Themes",
    anchor=(ALIAS_COLORS_SECTION,),
    match=_match_mode,
)

extract_langs = Extractor(
    label="Langs",
    anchor=(TYPOGRAPHY_SECTION,),
    match=_match_mode,
)

# Direct children of Grayscales only
extract_gray_scales = Extractor(
    label="GrayScales",
    anchor=GRAYSCALES_PATH,
    match=_match_mode,
    min_depth=1,
    max_depth=1,
)

EXTRACTORS: dict[str, Callable[[TokenTree], list[str]]] = {
    "themes": extract_themes,
    "langs": extract_langs,
    "gray_scales": extract_gray_scales,
    "primitive_colors": extract_primitive_colors,
    "alias_colors": extract_alias_colors,
    "dimensions": extract_dimensions,
}


def extract_all(tree: TokenTree) -> ExtractionResult:
    """Run every extractor over ``tree``."""
    lists = {field: extractor(tree) for field, extractor in EXTRACTORS.items()}
    return ExtractionResult(sections=list(tree), **lists)
