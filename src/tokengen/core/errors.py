"""
Error types for token document loading, configuration, and generation.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class TokenGenError(Exception):
    """Base exception for all tokengen errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class TokenDocumentError(TokenGenError):
    """
    Raised when the design token document cannot be loaded.

    Examples:
    - File does not exist
    - Invalid JSON
    - Root value is not an object
    """

    pass


class ConfigError(TokenGenError):
    """
    Raised when tokengen.toml is malformed or holds an invalid value.

    Examples:
    - TOML syntax errors
    - Unknown output layout
    - Section that is not a table
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error.

    Attributes:
        file: Path to the file being processed
        line: Optional line number (1-indexed)
        column: Optional column number (1-indexed)
    """

    file: Path
    line: int | None = None
    column: int | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "designTokens.json:10:5"
        """
        location = str(self.file)
        if self.line is not None:
            location += f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"
        return location


def make_document_error(
    message: str,
    file: Path,
    line: int | None = None,
    column: int | None = None,
) -> TokenDocumentError:
    """
    Helper to create a TokenDocumentError with context.

    Args:
        message: Error description
        file: Token document path
        line: Optional line number
        column: Optional column number

    Returns:
        TokenDocumentError with context attached
    """
    return TokenDocumentError(message, ErrorContext(file=file, line=line, column=column))


def make_config_error(message: str, file: Path | None = None) -> ConfigError:
    """Helper to create a ConfigError, attaching the manifest path when known."""
    if file is not None:
        return ConfigError(message, ErrorContext(file=file))
    return ConfigError(message)
