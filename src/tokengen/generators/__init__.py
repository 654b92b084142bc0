"""
Source generators for extracted design token names.
"""

from .base import Generator, GeneratorResult
from .constants import CONSTANTS_FILE_NAME, ConstantsGenerator
from .types import INDEX_FILE_NAME, TYPES_FILE_NAME, TypesGenerator

__all__ = [
    "CONSTANTS_FILE_NAME",
    "ConstantsGenerator",
    "Generator",
    "GeneratorResult",
    "INDEX_FILE_NAME",
    "TYPES_FILE_NAME",
    "TypesGenerator",
]
