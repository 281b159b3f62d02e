"""Build a typed TaxonomySchema from a parsed JSON-Schema document."""

from typing import Any

from pydantic import TypeAdapter, ValidationError

from domain.errors import MalformedDimensionsError, MalformedHierarchyError, MissingFieldError
from domain.schemas import ClassicalHierarchy, TaxonomySchema

HIERARCHY_KEY = "classical_hierarchy"
DIMENSIONS_KEY = "faceted_dimensions"

DEFAULT_SCHEMA_ID = "unknown"
DEFAULT_TITLE = "Untitled Taxonomy"

_DIMENSIONS_ADAPTER = TypeAdapter(dict[str, list[str]])


def _require(json_schema: Any, key: str) -> Any:
    if not isinstance(json_schema, dict) or key not in json_schema:
        raise MissingFieldError(key)
    return json_schema[key]


def extract_classical_hierarchy(json_schema: dict[str, Any]) -> ClassicalHierarchy:
    """
    Parse the `classical_hierarchy` sub-document.

    Raises:
        MissingFieldError: If the key is absent
        MalformedHierarchyError: If the sub-document does not parse
    """
    raw = _require(json_schema, HIERARCHY_KEY)
    try:
        return ClassicalHierarchy.model_validate(raw)
    except ValidationError as e:
        # pydantic reports nesting past its depth limit as a cycle
        if any(err["type"] == "recursion_loop" for err in e.errors()):
            raise MalformedHierarchyError(
                f"Failed to parse {HIERARCHY_KEY}: hierarchy too deep (nesting exceeds the parser limit)"
            ) from e
        raise MalformedHierarchyError(f"Failed to parse {HIERARCHY_KEY}: {e}") from e


def extract_faceted_dimensions(json_schema: dict[str, Any]) -> dict[str, list[str]]:
    """
    Parse `faceted_dimensions` into an ordered name -> values mapping.

    Raises:
        MissingFieldError: If the key is absent
        MalformedDimensionsError: If any dimension is not a list of strings
    """
    raw = _require(json_schema, DIMENSIONS_KEY)
    try:
        return _DIMENSIONS_ADAPTER.validate_python(raw, strict=True)
    except ValidationError as e:
        raise MalformedDimensionsError(f"Failed to parse {DIMENSIONS_KEY}: {e}") from e


def _optional_str(json_schema: dict[str, Any], key: str) -> str | None:
    value = json_schema.get(key)
    return value if isinstance(value, str) else None


def build_schema_from_json(json_schema: dict[str, Any]) -> TaxonomySchema:
    """
    Build a TaxonomySchema and retain the raw document for conformance checks.

    This is a pure function - it does NOT perform file I/O.
    """
    hierarchy = extract_classical_hierarchy(json_schema)
    dimensions = extract_faceted_dimensions(json_schema)

    schema_id = _optional_str(json_schema, "$id")
    title = _optional_str(json_schema, "title")
    return TaxonomySchema(
        schema_id=schema_id if schema_id is not None else DEFAULT_SCHEMA_ID,
        title=title if title is not None else DEFAULT_TITLE,
        description=_optional_str(json_schema, "description"),
        classical_hierarchy=hierarchy,
        faceted_dimensions=dimensions,
        json_schema=json_schema,
    )


def schema_to_json(schema: TaxonomySchema) -> dict[str, Any]:
    """
    Render a TaxonomySchema back to a JSON-Schema document.

    Keywords of the retained raw document are kept; the typed parts overwrite
    their keys.
    """
    doc: dict[str, Any] = dict(schema.json_schema or {})
    doc["$id"] = schema.schema_id
    doc["title"] = schema.title
    if schema.description is not None:
        doc["description"] = schema.description
    else:
        doc.pop("description", None)
    doc[HIERARCHY_KEY] = schema.classical_hierarchy.model_dump(mode="json", exclude_none=True)
    doc[DIMENSIONS_KEY] = {name: list(values) for name, values in schema.faceted_dimensions.items()}
    return doc
