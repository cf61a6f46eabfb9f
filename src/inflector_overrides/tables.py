"""
Exception tables and their YAML representation.
"""

import logging
from pathlib import Path
from typing import Annotated

import yaml
from pydantic import BaseModel, Field, StringConstraints

from .base import CaseStyle

logger = logging.getLogger("inflector-overrides")

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class ExceptionTables(BaseModel):
    """Hard-coded inflection exceptions, as read from a configuration file.

    Attributes:
        cases: (PascalCase, snake_case, camelCase) spellings of identifiers
               the underlying inflector converts incorrectly
        words: Singular form of irregular words mapped to their plural form
    """
    cases: list[tuple[NonEmptyStr, NonEmptyStr, NonEmptyStr]] = Field(
        default_factory=list,
        description="Case exceptions as (pascal, snake, camel) triples",
    )
    words: dict[NonEmptyStr, NonEmptyStr] = Field(
        default_factory=dict,
        description="Word exceptions as singular -> plural",
    )


def load_exception_tables(path: Path) -> ExceptionTables:
    """Load exception tables from a YAML file.

    Expected YAML format:
        cases:
          - [HTTPServer, http_server, httpServer]
        words:
          person: people

    Both keys are optional. Duplicate entries are accepted (the last one
    wins at lookup time) but reported as warnings.

    Args:
        path: Path to YAML file

    Returns:
        The parsed tables

    Raises:
        FileNotFoundError: If the YAML file doesn't exist
        yaml.YAMLError: If the YAML is malformed
        ValueError: If the document is not a mapping
        pydantic.ValidationError: If an entry has the wrong shape
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Exception table file {path} must contain a mapping")

    tables = ExceptionTables(**data)
    _warn_about_duplicates(tables)
    logger.info(
        "Loaded %d case and %d word exceptions from %s",
        len(tables.cases), len(tables.words), path,
    )
    return tables


def _warn_about_duplicates(tables: ExceptionTables) -> None:
    for style in CaseStyle:
        seen: dict[str, int] = {}
        for position, triple in enumerate(tables.cases):
            value = triple[style.index]
            if value in seen:
                logger.warning(
                    "Case exception %r appears twice as %s value (entries %d and %d); "
                    "entry %d wins",
                    value, style.name.lower(), seen[value], position, position,
                )
            seen[value] = position

    singulars: dict[str, str] = {}
    for singular, plural in tables.words.items():
        if plural in singulars:
            logger.warning(
                "Plural %r is mapped from both %r and %r; %r wins",
                plural, singulars[plural], singular, singular,
            )
        singulars[plural] = singular
