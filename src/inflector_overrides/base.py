"""
Capability interface shared by every inflector, plus the case style enum.
"""

from enum import Enum
from typing import Protocol, runtime_checkable

# (pascal, snake, camel)
CaseTriple = tuple[str, str, str]


class CaseStyle(Enum):
    """Capitalization styles, valued by their position in a CaseTriple."""

    PASCAL = 0
    SNAKE = 1
    CAMEL = 2

    @property
    def index(self) -> int:
        """Position of this style inside a CaseTriple."""
        return self.value

    @property
    def others(self) -> tuple["CaseStyle", "CaseStyle"]:
        """The two remaining styles, in ascending index order.

        Example:
            >>> CaseStyle.SNAKE.others
            (<CaseStyle.PASCAL: 0>, <CaseStyle.CAMEL: 2>)
        """
        first, second = (style for style in CaseStyle if style is not self)
        return first, second


@runtime_checkable
class InflectionService(Protocol):
    """Protocol for inflection implementations.

    Anything exposing these five methods can be wrapped by an
    ExceptionOverrideInflector, which itself satisfies the protocol, so
    override layers can be stacked on top of one another.
    """

    def to_pascal_case(self, string: str) -> str:
        """Convert an identifier to PascalCase."""
        ...

    def to_snake_case(self, string: str) -> str:
        """Convert an identifier to snake_case."""
        ...

    def to_camel_case(self, string: str) -> str:
        """Convert an identifier to camelCase."""
        ...

    def pluralize(self, string: str) -> str:
        """Return the plural form of a word."""
        ...

    def singularize(self, string: str) -> str:
        """Return the singular form of a word."""
        ...
