"""Validation use cases: conformance of raw documents and domain rules on typed data."""

import logging
from typing import Any

from domain.errors import DomainValidationError
from domain.schemas import TaxonomyData, TaxonomySchema
from domain.taxonomy import validate_taxonomy
from infrastructure.conformance import ConformanceValidator

logger = logging.getLogger(__name__)


def check_conformance(schema: TaxonomySchema, raw_data: Any) -> None:
    """
    Run the JSON-Schema pre-filter against a raw data document.

    Schemas built in memory (no retained document) have nothing to check.

    Raises:
        SchemaCompileError: If the retained schema document is invalid
        SchemaConformanceError: On the first structural violation
    """
    if schema.json_schema is None:
        logger.debug("Schema '%s' has no JSON-Schema document; skipping conformance", schema.schema_id)
        return
    ConformanceValidator(schema.json_schema).check(raw_data)


def collect_errors(schema: TaxonomySchema, data: TaxonomyData | None) -> list[str]:
    """Return every domain violation (empty list when valid)."""
    errors = validate_taxonomy(schema, data)
    if errors:
        logger.warning("Domain validation found %d error(s) in schema '%s'", len(errors), schema.schema_id)
    return errors


def validate(schema: TaxonomySchema, data: TaxonomyData | None) -> None:
    """
    Refuse data with any domain violation.

    Callers re-run this after adding, editing or removing items and before
    saving.

    Raises:
        DomainValidationError: Carrying the complete list of violations
    """
    errors = collect_errors(schema, data)
    if errors:
        raise DomainValidationError(errors)
