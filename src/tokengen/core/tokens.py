"""
Design token document loading.

The document is only checked for being a JSON object at the root. Its inner
shape is whatever the design tool exported; extractors degrade to empty
results when the sections they look for are missing.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .errors import make_document_error
from .models import TokenTree

logger = logging.getLogger(__name__)


def parse_token_tree(text: str, path: Path) -> TokenTree:
    """Parse token document text.

    Args:
        text: Raw JSON text.
        path: Source path, used in error messages.

    Returns:
        The parsed token tree.

    Raises:
        TokenDocumentError: If the text is not JSON or the root is not an object.
    """
    try:
        tree = json.loads(text)
    except json.JSONDecodeError as e:
        raise make_document_error(f"Invalid JSON: {e.msg}", path, e.lineno, e.colno) from e

    if not isinstance(tree, dict):
        raise make_document_error(
            f"Token document root must be an object, got {type(tree).__name__}", path
        )
    return tree


def load_token_tree(path: Path) -> TokenTree:
    """Read and parse the token document at ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise make_document_error("Token document not found", path) from e
    except UnicodeDecodeError as e:
        raise make_document_error(f"Token document is not valid UTF-8: {e.reason}", path) from e
    except OSError as e:
        raise make_document_error(f"Cannot read token document: {e.strerror or e}", path) from e

    tree = parse_token_tree(text, path)
    logger.debug("Loaded %d top-level sections from %s", len(tree), path)
    return tree
