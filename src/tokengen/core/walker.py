"""
Generic token tree walker.

Every extractor is the same traversal with different settings:

- an anchor path, resolved step by step where each step lists the accepted
  spellings of a key (first present wins);
- a match function called with ``(key, node)`` that returns the names to
  collect, or ``None`` to keep descending into the node;
- depth bounds: nodes shallower than ``min_depth`` are never matched, nodes at
  ``max_depth`` are never descended into.

The anchor node itself sits at depth 0 with key ``None``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

# Accepted spellings for one step of an anchor path, in priority order
KeyCandidates = tuple[str, ...]

# (key, node) -> names to collect, or None to descend
MatchFn = Callable[[str | None, Any], Iterable[str] | None]


def _falsy(value: Any) -> bool:
    # null, "", 0 and false count as absent; empty objects and arrays do not
    return value is None or (isinstance(value, (str, int, float)) and not value)


def resolve_key(node: Any, candidates: KeyCandidates) -> Any | None:
    """Return the value of the first candidate key present in ``node``."""
    if not isinstance(node, dict):
        return None
    for key in candidates:
        value = node.get(key)
        if not _falsy(value):
            return value
    return None


def resolve_anchor(tree: Any, path: Sequence[KeyCandidates]) -> Any | None:
    """Follow an anchor path from the tree root; ``None`` if any step is missing."""
    node = tree
    for candidates in path:
        node = resolve_key(node, candidates)
        if node is None:
            return None
    return node


def children(node: Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(key, value)`` pairs of an object or array node."""
    if isinstance(node, dict):
        yield from node.items()
    elif isinstance(node, list):
        for index, value in enumerate(node):
            yield str(index), value


def walk(
    node: Any,
    match: MatchFn,
    *,
    min_depth: int = 0,
    max_depth: int | None = None,
    key: str | None = None,
    depth: int = 0,
) -> Iterator[str]:
    """Walk ``node`` depth-first, yielding names returned by ``match``.

    A node whose match returns names is not descended into.
    """
    if depth >= min_depth:
        names = match(key, node)
        if names is not None:
            yield from names
            return

    if max_depth is not None and depth >= max_depth:
        return

    for child_key, child in children(node):
        yield from walk(
            child,
            match,
            min_depth=min_depth,
            max_depth=max_depth,
            key=child_key,
            depth=depth + 1,
        )


def unique(names: Iterable[str]) -> list[str]:
    """Deduplicate, keeping first-seen order."""
    return list(dict.fromkeys(names))
