"""Validation of serialized version documents.

``Version.to_dict`` produces ``{"normal": ..., "preRelease": ..., "build": ...}``;
this module checks such documents against ``schemas/version.schema.json``
before they are turned back into versions.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

_DEFAULT_SCHEMA = Path(__file__).resolve().parents[1] / "schemas" / "version.schema.json"


class DocumentError(ValueError):
    """Raised when a serialized version does not match the schema.

    ``problems`` holds one ``(json_path, message)`` pair per violation, e.g.
    ``("$.normal", "'01.2.3' does not match ...")``.
    """

    def __init__(self, problems: list[tuple[str, str]]) -> None:
        self.problems = problems
        lines = "\n".join(f"- {path}: {message}" for path, message in problems)
        super().__init__(f"Version document failed validation:\n{lines}")


@lru_cache(maxsize=None)
def _validator(schema_path: Path) -> Draft202012Validator:
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def _problem(error: ValidationError) -> tuple[str, str]:
    return error.json_path, error.message


def validate_document(document: Any, schema_path: Path = _DEFAULT_SCHEMA) -> None:
    """Raise ``DocumentError`` listing every violation, ordered by location."""
    problems = sorted(_problem(e) for e in _validator(schema_path).iter_errors(document))
    if problems:
        raise DocumentError(problems)
