"""
Pytest configuration and fixtures for inflector-overrides tests.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path to allow importing inflector_overrides
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from inflector_overrides import NullInflector  # noqa: E402


class RecordingInflector(NullInflector):
    """Null inflector that remembers every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def to_pascal_case(self, string: str) -> str:
        self.calls.append(("to_pascal_case", string))
        return f"pascal({string})"

    def to_snake_case(self, string: str) -> str:
        self.calls.append(("to_snake_case", string))
        return f"snake({string})"

    def to_camel_case(self, string: str) -> str:
        self.calls.append(("to_camel_case", string))
        return f"camel({string})"

    def pluralize(self, string: str) -> str:
        self.calls.append(("pluralize", string))
        return f"plural({string})"

    def singularize(self, string: str) -> str:
        self.calls.append(("singularize", string))
        return f"singular({string})"


@pytest.fixture
def recording_inflector() -> RecordingInflector:
    """A delegate whose output is recognizable and whose calls are logged."""
    return RecordingInflector()
