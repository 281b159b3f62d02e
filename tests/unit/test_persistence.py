import json
from pathlib import Path

import pytest

from application import load_data, load_data_with_schema, load_schema, new_taxonomy, save_data, save_schema
from application.persistence import resolve_schema_path
from domain.errors import (
    DataDeserializationError,
    DomainValidationError,
    JsonParseError,
    MissingFieldError,
    SchemaCompileError,
    SchemaConformanceError,
    TaxonomyIOError,
)
from domain.schemas import Item
from infrastructure.config import NewTaxonomyConfig, SaveConfig


def test_load_resolves_schema_next_to_data(write_json_file, schema_doc, data_doc) -> None:
    write_json_file("schema.json", schema_doc)
    data_path = write_json_file("drinks.json", data_doc)

    data, schema = load_data(data_path)

    assert schema.title == "Beverages"
    assert data.schema_ref == "schema.json"
    assert [i.name for i in data.items] == ["Doppio", "Cold Brew", "Darjeeling"]
    assert data.extra == {"version": 3, "author": {"name": "Studio"}}
    assert data.items[0].extra == {"notes": {"rating": 4.5, "tags": ["strong", None]}}


def test_schema_reference_is_relative_to_data_directory(write_json_file, schema_doc, data_doc, tmp_path) -> None:
    write_json_file("schemas/bev.json", schema_doc)
    data_doc["schema"] = "../schemas/bev.json"
    data_path = write_json_file("data/drinks.json", data_doc)

    _, schema = load_data(data_path)

    assert schema.classical_hierarchy.root == "Beverage"
    assert resolve_schema_path(data_path, "../schemas/bev.json") == tmp_path / "data" / ".." / "schemas" / "bev.json"


def test_save_then_load_round_trips_extra_fields(write_json_file, schema_doc, data_doc, tmp_path) -> None:
    write_json_file("schema.json", schema_doc)
    data, _ = load_data(write_json_file("drinks.json", data_doc))

    out = tmp_path / "saved.json"
    save_data(data, out)
    reloaded, _ = load_data(out)

    assert reloaded == data
    saved = json.loads(out.read_text(encoding="utf-8"))
    assert saved == data_doc
    assert list(saved) == ["schema", "items", "version", "author"]


def test_save_uses_configured_formatting(tmp_path) -> None:
    data, _ = new_taxonomy()
    data.items.append(Item(name="Café", classical_path=["Root"], facets={"category": "uncategorized"}))
    out = tmp_path / "out.json"

    save_data(data, out, SaveConfig(indent=4, ensure_ascii=True))

    text = out.read_text(encoding="utf-8")
    assert '\n    "schema": "schema.json"' in text
    assert "Caf\\u00e9" in text


def test_missing_data_file(tmp_path) -> None:
    with pytest.raises(TaxonomyIOError) as exc_info:
        load_data(tmp_path / "nope.json")

    assert exc_info.value.path == tmp_path / "nope.json"
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_missing_schema_file(write_json_file, data_doc) -> None:
    data_path = write_json_file("drinks.json", data_doc)

    with pytest.raises(TaxonomyIOError) as exc_info:
        load_data(data_path)

    assert exc_info.value.path.name == "schema.json"
    assert str(exc_info.value) == f"File not found: {data_path.parent / 'schema.json'}"
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_malformed_json(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text('{"schema": "schema.json",\n  "items": [', encoding="utf-8")

    with pytest.raises(JsonParseError) as exc_info:
        load_data(path)

    assert exc_info.value.line == 2


def test_data_without_schema_reference(write_json_file) -> None:
    with pytest.raises(DataDeserializationError):
        load_data(write_json_file("drinks.json", {"items": []}))


def test_schema_missing_facets(write_json_file, schema_doc, data_doc) -> None:
    del schema_doc["faceted_dimensions"]
    write_json_file("schema.json", schema_doc)

    with pytest.raises(MissingFieldError):
        load_data(write_json_file("drinks.json", data_doc))


def test_schema_that_does_not_compile(write_json_file, schema_doc, data_doc) -> None:
    schema_doc["type"] = 12
    write_json_file("schema.json", schema_doc)

    with pytest.raises(SchemaCompileError):
        load_data(write_json_file("drinks.json", data_doc))


def test_conformance_failure_blocks_load(write_json_file, schema_doc, data_doc) -> None:
    write_json_file("schema.json", schema_doc)
    data_doc["items"][1]["name"] = 42

    with pytest.raises(SchemaConformanceError) as exc_info:
        load_data(write_json_file("drinks.json", data_doc))

    assert exc_info.value.violation.path == "/items/1/name"


def test_facet_of_wrong_type_fails_deserialization(write_json_file, schema_doc, data_doc) -> None:
    write_json_file("schema.json", schema_doc)
    data_doc["items"][0]["facets"]["caffeine"] = 3

    with pytest.raises(DataDeserializationError):
        load_data(write_json_file("drinks.json", data_doc))


def test_domain_errors_are_delivered_as_a_batch(write_json_file, schema_doc, data_doc) -> None:
    write_json_file("schema.json", schema_doc)
    data_doc["items"][2]["name"] = "Doppio"
    data_doc["items"][1]["classical_path"] = ["Beverage", "Tea", "Oolong"]
    data_doc["items"][1]["facets"]["temperature"] = "lukewarm"

    with pytest.raises(DomainValidationError) as exc_info:
        load_data(write_json_file("drinks.json", data_doc))

    assert exc_info.value.errors == [
        "Item #1 ('Doppio'): duplicate item name",
        "Item #2 ('Cold Brew'): invalid classical_path - 'Tea' has no defined children",
        "Item #2 ('Cold Brew'): facet 'temperature' has invalid value 'lukewarm' (not in allowed values)",
        "Item #3 ('Doppio'): duplicate item name",
    ]
    assert "1. Item #1 ('Doppio'): duplicate item name" in str(exc_info.value)


def test_load_with_explicit_schema(write_json_file, schema_doc, data_doc) -> None:
    schema_path = write_json_file("elsewhere/custom.json", schema_doc)
    data_path = write_json_file("drinks.json", data_doc)

    data, schema = load_data_with_schema(data_path, schema_path)

    assert len(data.items) == 3
    assert schema.schema_id == "https://example.org/beverages.schema.json"


def test_new_taxonomy_defaults_and_overrides() -> None:
    data, schema = new_taxonomy()

    assert data.schema_ref == "schema.json"
    assert data.items == []
    assert schema.classical_hierarchy.root == "Root"
    assert schema.faceted_dimensions == {"category": ["uncategorized"]}
    assert schema.json_schema is None

    data, schema = new_taxonomy(NewTaxonomyConfig(root="Thing", schema_filename="thing.schema.json"))
    assert data.schema_ref == "thing.schema.json"
    assert schema.classical_hierarchy.root == "Thing"


def test_new_taxonomy_can_be_saved_and_reloaded(tmp_path: Path) -> None:
    data, schema = new_taxonomy()
    data.items.append(Item(name="First", classical_path=["Root"], facets={"category": "uncategorized"}))

    save_schema(schema, tmp_path / data.schema_ref)
    save_data(data, tmp_path / "untitled.json")
    reloaded, reloaded_schema = load_data(tmp_path / "untitled.json")

    assert reloaded == data
    assert reloaded_schema.title == "Default Schema"
    assert load_schema(tmp_path / "schema.json").faceted_dimensions == schema.faceted_dimensions


def test_save_to_unwritable_location(tmp_path) -> None:
    data, _ = new_taxonomy()

    with pytest.raises(TaxonomyIOError):
        save_data(data, tmp_path / "missing-dir" / "out.json")
