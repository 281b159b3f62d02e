import pytest

from domain.errors import MalformedDimensionsError, MalformedHierarchyError, MissingFieldError, SchemaExtractionError
from domain.taxonomy import (
    build_schema_from_json,
    extract_classical_hierarchy,
    extract_faceted_dimensions,
    schema_to_json,
)


def test_build_schema_reads_metadata_hierarchy_and_facets(schema_doc) -> None:
    schema = build_schema_from_json(schema_doc)

    assert schema.schema_id == "https://example.org/beverages.schema.json"
    assert schema.title == "Beverages"
    assert schema.description == "Hot and cold drinks"
    assert schema.classical_hierarchy.root == "Beverage"
    assert [n.species for n in schema.classical_hierarchy.children] == ["Coffee", "Tea"]
    assert list(schema.faceted_dimensions) == ["temperature", "caffeine", "origin"]
    assert schema.json_schema == schema_doc


def test_metadata_defaults() -> None:
    schema = build_schema_from_json(
        {"classical_hierarchy": {"root": "TestRoot"}, "faceted_dimensions": {"color": ["red", "blue"]}}
    )

    assert schema.schema_id == "unknown"
    assert schema.title == "Untitled Taxonomy"
    assert schema.description is None
    assert schema.classical_hierarchy.children is None


@pytest.mark.parametrize("missing", ["classical_hierarchy", "faceted_dimensions"])
def test_missing_top_level_key(schema_doc, missing: str) -> None:
    del schema_doc[missing]

    with pytest.raises(MissingFieldError) as exc_info:
        build_schema_from_json(schema_doc)

    assert exc_info.value.field == missing
    assert isinstance(exc_info.value, SchemaExtractionError)


def test_non_object_document_is_missing_fields() -> None:
    with pytest.raises(MissingFieldError):
        build_schema_from_json(["not", "an", "object"])


def test_malformed_hierarchy() -> None:
    doc = {"classical_hierarchy": {"root": "R", "children": [{"genus": "R", "species": "A"}]}}

    with pytest.raises(MalformedHierarchyError):
        extract_classical_hierarchy(doc)


def test_overly_deep_hierarchy_is_reported_as_too_deep() -> None:
    depth = 300
    node = {"genus": f"N{depth - 1}", "species": f"N{depth}", "differentia": "leaf"}
    for i in range(depth - 1, 0, -1):
        node = {"genus": f"N{i - 1}", "species": f"N{i}", "differentia": "step", "children": [node]}
    doc = {"classical_hierarchy": {"root": "N0", "children": [node]}}

    with pytest.raises(MalformedHierarchyError, match="hierarchy too deep"):
        extract_classical_hierarchy(doc)


@pytest.mark.parametrize(
    "dimensions",
    [
        ["color"],
        {"color": "red"},
        {"color": ["red", 3]},
    ],
)
def test_malformed_dimensions(dimensions) -> None:
    with pytest.raises(MalformedDimensionsError):
        extract_faceted_dimensions({"faceted_dimensions": dimensions})


def test_schema_to_json_keeps_keywords_and_typed_parts(schema_doc) -> None:
    schema = build_schema_from_json(schema_doc)
    schema.faceted_dimensions["temperature"].append("warm")

    doc = schema_to_json(schema)

    assert doc["type"] == "object"
    assert doc["faceted_dimensions"]["temperature"] == ["hot", "iced", "warm"]
    assert doc["classical_hierarchy"]["children"][1] == {
        "genus": "Beverage",
        "species": "Tea",
        "differentia": "infused leaves",
    }
    assert build_schema_from_json(doc).classical_hierarchy == schema.classical_hierarchy
