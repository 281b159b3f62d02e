"""
Taxonomy management: schema extraction and domain validation.

All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.extractor import (
    build_schema_from_json,
    extract_classical_hierarchy,
    extract_faceted_dimensions,
    schema_to_json,
)
from domain.taxonomy.item_input import parse_classification_path, validate_item_input
from domain.taxonomy.validation import validate_path_exists, validate_taxonomy

__all__ = [
    "build_schema_from_json",
    "extract_classical_hierarchy",
    "extract_faceted_dimensions",
    "schema_to_json",
    "validate_taxonomy",
    "validate_path_exists",
    "parse_classification_path",
    "validate_item_input",
]
