"""
Base inflectors to put underneath an ExceptionOverrideInflector.
"""

import inflection


class NullInflector:
    """Inflector that returns every string unchanged."""

    def to_pascal_case(self, string: str) -> str:
        return string

    def to_snake_case(self, string: str) -> str:
        return string

    def to_camel_case(self, string: str) -> str:
        return string

    def pluralize(self, string: str) -> str:
        return string

    def singularize(self, string: str) -> str:
        return string


class LibraryInflector:
    """Adapter exposing the ``inflection`` package as an InflectionService.

    The package is a port of the Rails inflector, so its rules (and its
    mistakes, such as ``"HTTPServer"`` becoming ``"HttpServer"`` on a round
    trip) are the ones an override table usually needs to correct.

    Example:
        >>> inflector = LibraryInflector()
        >>> inflector.to_snake_case("DeviceType")
        'device_type'
        >>> inflector.pluralize("octopus")
        'octopi'
    """

    def to_pascal_case(self, string: str) -> str:
        return inflection.camelize(string)

    def to_snake_case(self, string: str) -> str:
        return inflection.underscore(string)

    def to_camel_case(self, string: str) -> str:
        return inflection.camelize(string, uppercase_first_letter=False)

    def pluralize(self, string: str) -> str:
        return inflection.pluralize(string)

    def singularize(self, string: str) -> str:
        return inflection.singularize(string)
