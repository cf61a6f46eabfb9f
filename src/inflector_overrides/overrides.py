"""
Inflector decorator that applies hard-coded exceptions before delegating.

General inflection rules get some words wrong: irregular plurals, acronyms,
domain-specific terms. Rather than patching the rules, an
ExceptionOverrideInflector wraps any InflectionService and answers from a
static table first, falling back to the wrapped implementation on a miss.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

from .base import CaseStyle, CaseTriple, InflectionService
from .tables import ExceptionTables, load_exception_tables

logger = logging.getLogger("inflector-overrides")


class ExceptionOverrideInflector:
    """Wraps an inflector to provide hard-coded exceptions to its rules.

    Case exceptions are (PascalCase, snake_case, camelCase) triples. A
    conversion to one style looks the input up among the values of the two
    other styles, in ascending style order, and returns the same triple's
    value for the target style. Word exceptions map a singular to its plural
    and are consulted in both directions.

    Reverse indices are built once at construction, in table order, so when
    a value occurs more than once the last entry holding it wins. The tables
    are not validated and must not be mutated after construction.

    Example:
        >>> inflector = ExceptionOverrideInflector(
        ...     LibraryInflector(),
        ...     cases=[("HTTPServer", "http_server", "httpServer")],
        ...     words={"person": "people"},
        ... )
        >>> inflector.to_pascal_case("http_server")
        'HTTPServer'
        >>> inflector.singularize("people")
        'person'
    """

    def __init__(
        self,
        inflector: InflectionService,
        cases: Sequence[CaseTriple] | None = None,
        words: Mapping[str, str] | None = None,
    ) -> None:
        self._inflector = inflector
        self._cases = cases if cases is not None else []
        self._words = words if words is not None else {}

        self._case_index: dict[CaseStyle, dict[str, CaseTriple]] = {
            style: {triple[style.index]: triple for triple in self._cases}
            for style in CaseStyle
        }
        self._singulars: dict[str, str] = {
            plural: singular for singular, plural in self._words.items()
        }
        logger.debug(
            "Wrapped %s with %d case and %d word exceptions",
            type(inflector).__name__, len(self._cases), len(self._words),
        )

    @classmethod
    def from_tables(
        cls, inflector: InflectionService, tables: ExceptionTables
    ) -> ExceptionOverrideInflector:
        """Build a decorator from parsed exception tables."""
        return cls(inflector, cases=tables.cases, words=tables.words)

    @classmethod
    def from_yaml(
        cls, inflector: InflectionService, path: Path
    ) -> ExceptionOverrideInflector:
        """Build a decorator from a YAML exception table file.

        See load_exception_tables() for the file format and the errors
        raised for bad files.
        """
        return cls.from_tables(inflector, load_exception_tables(path))

    def inflector(self) -> InflectionService:
        """Return the wrapped inflection implementation."""
        return self._inflector

    def cases(self) -> Sequence[CaseTriple]:
        """Return the exceptions to the capitalization rules."""
        return self._cases

    def words(self) -> Mapping[str, str]:
        """Return the exceptions to the pluralization rules."""
        return self._words

    def to_pascal_case(self, string: str) -> str:
        return self._convert_case(string, CaseStyle.PASCAL, self._inflector.to_pascal_case)

    def to_snake_case(self, string: str) -> str:
        return self._convert_case(string, CaseStyle.SNAKE, self._inflector.to_snake_case)

    def to_camel_case(self, string: str) -> str:
        return self._convert_case(string, CaseStyle.CAMEL, self._inflector.to_camel_case)

    def pluralize(self, string: str) -> str:
        if string in self._words:
            return self._words[string]
        return self._inflector.pluralize(string)

    def singularize(self, string: str) -> str:
        if string in self._singulars:
            return self._singulars[string]
        return self._inflector.singularize(string)

    def _convert_case(
        self, string: str, target: CaseStyle, fallback: Callable[[str], str]
    ) -> str:
        """Return the hard-coded conversion of `string` to `target`, if any.

        Otherwise returns the result of `fallback`, the wrapped inflector's
        method for the same target style.
        """
        for source in target.others:
            triple = self._case_index[source].get(string)
            if triple is not None:
                return triple[target.index]
        return fallback(string)
