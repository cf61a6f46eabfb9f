"""
Hard-coded exception layer for string inflectors.

Wraps any inflector (PascalCase / snake_case / camelCase conversion and
pluralization) and overrides its answers for the words it gets wrong.
"""

from .base import CaseStyle, CaseTriple, InflectionService
from .inflectors import LibraryInflector, NullInflector
from .overrides import ExceptionOverrideInflector
from .tables import ExceptionTables, load_exception_tables

__all__ = [
    "CaseStyle",
    "CaseTriple",
    "ExceptionOverrideInflector",
    "ExceptionTables",
    "InflectionService",
    "LibraryInflector",
    "NullInflector",
    "load_exception_tables",
]
