"""JSON-Schema conformance validation (jsonschema-backed)."""

from infrastructure.conformance.validator import ConformanceValidator, Violation, validate_against_schema

__all__ = [
    "ConformanceValidator",
    "Violation",
    "validate_against_schema",
]
