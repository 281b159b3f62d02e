"""
Generic JSON-Schema conformance check for raw data documents.

This is a fast pre-filter: it reports only the first violation found, and
runs before the exhaustive domain validation of typed data.
"""

import logging
from dataclasses import dataclass
from typing import Any

from jsonschema import SchemaError, validators

from domain.errors import SchemaCompileError, SchemaConformanceError

logger = logging.getLogger(__name__)

ROOT_LOCATION = "root"


@dataclass(frozen=True)
class Violation:
    """First structural violation found in a document."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} at {self.path}"


def _pointer(parts) -> str:
    """Render an instance path as a JSON pointer ("root" for the document itself)."""
    tokens = [str(p).replace("~", "~0").replace("/", "~1") for p in parts]
    return "/" + "/".join(tokens) if tokens else ROOT_LOCATION


class ConformanceValidator:
    """Compiled JSON-Schema validator, reusable across documents."""

    def __init__(self, schema_document: dict[str, Any]) -> None:
        """
        Compile the schema once.

        Raises:
            SchemaCompileError: If the document is not a valid JSON Schema
        """
        if not isinstance(schema_document, dict):
            raise SchemaCompileError(f"Schema compilation error: expected a JSON object, got {type(schema_document).__name__}")
        validator_cls = validators.validator_for(schema_document)
        try:
            validator_cls.check_schema(schema_document)
        except SchemaError as e:
            raise SchemaCompileError(f"Schema compilation error: {e.message}") from e
        self._validator = validator_cls(schema_document)
        logger.debug("Compiled JSON Schema with %s", validator_cls.__name__)

    def first_violation(self, instance: Any) -> Violation | None:
        error = next(self._validator.iter_errors(instance), None)
        if error is None:
            return None
        return Violation(path=_pointer(error.absolute_path), message=error.message)

    def check(self, instance: Any) -> None:
        """
        Raises:
            SchemaConformanceError: If the instance violates the schema
        """
        violation = self.first_violation(instance)
        if violation is not None:
            logger.warning("Schema conformance failed: %s", violation)
            raise SchemaConformanceError(violation)


def validate_against_schema(schema_document: dict[str, Any], instance: Any) -> list[str]:
    """
    One-shot check returning [] when valid, or a single formatted message.

    A schema that fails to compile is reported as a message as well.
    """
    try:
        validator = ConformanceValidator(schema_document)
    except SchemaCompileError as e:
        return [str(e)]
    violation = validator.first_violation(instance)
    return [] if violation is None else [str(violation)]
