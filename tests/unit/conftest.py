import copy
import json
from pathlib import Path
from typing import Any

import pytest

BEVERAGE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "https://example.org/beverages.schema.json",
    "title": "Beverages",
    "description": "Hot and cold drinks",
    "type": "object",
    "required": ["schema", "items"],
    "properties": {
        "schema": {"type": "string"},
        "items": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "classical_path", "facets"],
                "properties": {
                    "name": {"type": "string"},
                    "classical_path": {"type": "array", "items": {"type": "string"}},
                    "facets": {"type": "object"},
                },
            },
        },
    },
    "classical_hierarchy": {
        "root": "Beverage",
        "children": [
            {
                "genus": "Beverage",
                "species": "Coffee",
                "differentia": "brewed from roasted coffee beans",
                "children": [
                    {"genus": "Coffee", "species": "Espresso", "differentia": "pressure-brewed"},
                    {"genus": "Coffee", "species": "Filter", "differentia": "gravity-brewed"},
                ],
            },
            {"genus": "Beverage", "species": "Tea", "differentia": "infused leaves"},
        ],
    },
    "faceted_dimensions": {
        "temperature": ["hot", "iced"],
        "caffeine": ["none", "low", "high"],
        "origin": ["Ethiopia", "Colombia", "China", "India"],
    },
}

BEVERAGE_DATA: dict[str, Any] = {
    "schema": "schema.json",
    "items": [
        {
            "name": "Doppio",
            "classical_path": ["Beverage", "Coffee", "Espresso"],
            "facets": {"temperature": "hot", "caffeine": "high", "origin": ["Ethiopia", "Colombia"]},
            "notes": {"rating": 4.5, "tags": ["strong", None]},
        },
        {
            "name": "Cold Brew",
            "classical_path": ["Beverage", "Coffee", "Filter"],
            "facets": {"temperature": "iced", "caffeine": "high"},
        },
        {
            "name": "Darjeeling",
            "classical_path": ["Beverage", "Tea"],
            "facets": {"temperature": "hot", "caffeine": "low", "origin": "India"},
        },
    ],
    "version": 3,
    "author": {"name": "Studio"},
}


@pytest.fixture
def schema_doc() -> dict[str, Any]:
    return copy.deepcopy(BEVERAGE_SCHEMA)


@pytest.fixture
def data_doc() -> dict[str, Any]:
    return copy.deepcopy(BEVERAGE_DATA)


@pytest.fixture
def write_json_file(tmp_path: Path):
    """Write a JSON payload under tmp_path and return its path."""

    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return path

    return _write
