"""
Whole-file load/save of taxonomy data with schema auto-resolution.

Load protocol:
- read the data document
- resolve its `schema` reference relative to the data file's directory
- load, extract and compile the schema
- JSON-Schema conformance check on the raw data
- typed deserialization
- domain validation

Any failure aborts the load; nothing is returned partially.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from application.validation import check_conformance, validate
from domain.errors import DataDeserializationError, DomainValidationError, TaxonomyError
from domain.schemas import ClassicalHierarchy, TaxonomyData, TaxonomySchema
from domain.taxonomy import build_schema_from_json, schema_to_json
from infrastructure.config import NewTaxonomyConfig, SaveConfig
from infrastructure.constants import SCHEMA_REF_KEY
from infrastructure.io import read_json, write_json
from infrastructure.observability import clear_log_context, set_log_context

logger = logging.getLogger(__name__)


def load_schema(path: Path) -> TaxonomySchema:
    """
    Load a JSON-Schema file and extract its hierarchy and facets.

    Raises:
        TaxonomyIOError, JsonParseError, SchemaExtractionError
    """
    path = Path(path)
    schema = build_schema_from_json(read_json(path))
    logger.info(
        "Loaded schema '%s' (%d facet dimension(s)) from %s",
        schema.title,
        len(schema.faceted_dimensions),
        path,
    )
    return schema


def resolve_schema_path(data_path: Path, schema_ref: str) -> Path:
    """Schema references are relative to the directory holding the data file."""
    return Path(data_path).parent / schema_ref


def _schema_ref(raw: Any, path: Path) -> str:
    if not isinstance(raw, dict):
        raise DataDeserializationError(f"Taxonomy data in {path} must be a JSON object")
    ref = raw.get(SCHEMA_REF_KEY)
    if not isinstance(ref, str) or not ref.strip():
        raise DataDeserializationError(f"Taxonomy data in {path} has no '{SCHEMA_REF_KEY}' reference")
    return ref


def deserialize_data(raw: Any, path: Path | None = None) -> TaxonomyData:
    """
    Convert a raw data document into the typed model.

    Raises:
        DataDeserializationError: If a field has the wrong shape
    """
    try:
        return TaxonomyData.model_validate(raw)
    except ValidationError as e:
        where = f" in {path}" if path is not None else ""
        raise DataDeserializationError(f"Cannot read taxonomy data{where}: {e}") from e


def _load(data_path: Path, schema_path: Path | None) -> tuple[TaxonomyData, TaxonomySchema]:
    raw = read_json(data_path)
    if schema_path is None:
        schema_path = resolve_schema_path(data_path, _schema_ref(raw, data_path))

    schema = load_schema(schema_path)
    check_conformance(schema, raw)
    data = deserialize_data(raw, data_path)
    validate(schema, data)

    logger.info("Loaded %d item(s) from %s", len(data.items), data_path)
    return data, schema


def load_data(path: Path) -> tuple[TaxonomyData, TaxonomySchema]:
    """
    Load a data file and the schema it references.

    Raises:
        TaxonomyIOError: If either file cannot be read
        JsonParseError: If either file is not valid JSON
        SchemaExtractionError: If the schema lacks hierarchy/facets
        SchemaCompileError: If the schema is not valid JSON Schema
        SchemaConformanceError: If the data fails the JSON-Schema check
        DataDeserializationError: If the data cannot be typed
        DomainValidationError: With every business-rule violation
    """
    return load_data_with_schema(path, None)


def load_data_with_schema(data_path: Path, schema_path: Path | None) -> tuple[TaxonomyData, TaxonomySchema]:
    """Like load_data, with an explicit schema file (None resolves from the data)."""
    data_path = Path(data_path)
    set_log_context(document=data_path)
    try:
        return _load(data_path, Path(schema_path) if schema_path is not None else None)
    except DomainValidationError as e:
        logger.warning("Rejected %s: %d validation error(s)", data_path, len(e.errors))
        raise
    except TaxonomyError as e:
        logger.warning("Failed to load %s: %s", data_path, e)
        raise
    finally:
        clear_log_context()


def data_to_json(data: TaxonomyData) -> dict[str, Any]:
    """Known fields first, then the opaque extra fields in their original order."""
    return data.model_dump(mode="json", by_alias=True)


def save_data(data: TaxonomyData, path: Path, cfg: SaveConfig | None = None) -> None:
    """
    Overwrite `path` with the data as pretty-printed JSON.

    Raises:
        TaxonomyIOError: If the file cannot be written
    """
    cfg = cfg or SaveConfig()
    path = Path(path)
    set_log_context(document=path)
    try:
        write_json(path, data_to_json(data), indent=cfg.indent, ensure_ascii=cfg.ensure_ascii)
        logger.info("Saved %d item(s) to %s", len(data.items), path)
    finally:
        clear_log_context()


def save_schema(schema: TaxonomySchema, path: Path, cfg: SaveConfig | None = None) -> None:
    """Write a schema (e.g. one created by new_taxonomy) as a JSON-Schema document."""
    cfg = cfg or SaveConfig()
    path = Path(path)
    write_json(path, schema_to_json(schema), indent=cfg.indent, ensure_ascii=cfg.ensure_ascii)
    logger.info("Saved schema '%s' to %s", schema.title, path)


def new_taxonomy(cfg: NewTaxonomyConfig | None = None) -> tuple[TaxonomyData, TaxonomySchema]:
    """Empty data plus a minimal default schema (root only, one facet)."""
    cfg = cfg or NewTaxonomyConfig()
    schema = TaxonomySchema(
        schema_id=cfg.schema_id,
        title=cfg.title,
        description=cfg.description,
        classical_hierarchy=ClassicalHierarchy(root=cfg.root),
        faceted_dimensions={name: list(values) for name, values in cfg.facets.items()},
    )
    data = TaxonomyData(schema_ref=cfg.schema_filename, items=[])
    logger.debug("Created new taxonomy '%s' with root '%s'", schema.title, cfg.root)
    return data, schema
