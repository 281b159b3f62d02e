"""
Business-rule validation of a typed schema and its data.

Every check appends human-readable messages to a shared list; nothing
short-circuits, so callers get the complete set of problems in one pass.
"""

import logging
from collections import Counter

from domain.schemas import ClassicalHierarchy, Item, MultiFacetValue, TaxonomyData, TaxonomySchema

logger = logging.getLogger(__name__)


def validate_taxonomy(schema: TaxonomySchema, data: TaxonomyData | None = None) -> list[str]:
    """
    Validate hierarchy, facet dimensions and (when given) items.

    Returns:
        Ordered list of violations; empty when valid
    """
    errors: list[str] = []
    validate_hierarchy(schema.classical_hierarchy, errors)
    validate_dimensions(schema.faceted_dimensions, errors)
    if data is not None and data.items:
        validate_items(data.items, schema, errors)

    logger.debug(
        "Validated schema '%s' with %d item(s): %d error(s)",
        schema.schema_id,
        len(data.items) if data is not None else 0,
        len(errors),
    )
    return errors


def validate_hierarchy(hierarchy: ClassicalHierarchy, errors: list[str]) -> None:
    if not hierarchy.root.strip():
        errors.append("Classical hierarchy root cannot be empty")

    seen_species: set[str] = set()
    for parent, node in hierarchy.iter_nodes():
        if not node.genus.strip():
            errors.append("Hierarchy node genus cannot be empty")
        if not node.species.strip():
            errors.append("Hierarchy node species cannot be empty")
        if not node.differentia.strip():
            errors.append(f"Species '{node.species}' must have non-empty differentia")

        if node.genus != parent:
            errors.append(
                f"Species '{node.species}' has genus '{node.genus}', expected '{parent}' (parent species)"
            )

        if node.species.strip():
            if node.species in seen_species:
                errors.append(f"Species '{node.species}' is defined more than once in the hierarchy")
            seen_species.add(node.species)


def validate_dimensions(dimensions: dict[str, list[str]], errors: list[str]) -> None:
    if not dimensions:
        errors.append("At least one faceted dimension must be defined")

    for facet_name, values in dimensions.items():
        if not facet_name.strip():
            errors.append("Facet names cannot be empty")

        if not values:
            errors.append(f"Facet '{facet_name}' must have at least one value")

        seen: set[str] = set()
        for value in values:
            if not value.strip():
                errors.append(f"Facet '{facet_name}' contains empty value")
            if value in seen:
                errors.append(f"Facet '{facet_name}' has duplicate value: '{value}'")
            seen.add(value)


def _path_errors(path: list[str], root: str, edges: dict[str, list[str]]) -> list[str]:
    if not path:
        return ["classical_path cannot be empty"]

    problems: list[str] = []
    if path[0] != root:
        problems.append(f"classical_path must start with root '{root}', found '{path[0]}'")

    for parent, child in zip(path, path[1:]):
        children = edges.get(parent)
        if children is None:
            problems.append(f"invalid classical_path - '{parent}' has no defined children")
        elif child not in children:
            problems.append(f"invalid classical_path - '{child}' is not a valid child of '{parent}'")
    return problems


def validate_path_exists(path: list[str], hierarchy: ClassicalHierarchy) -> list[str]:
    """Check a single classification path against the hierarchy edges."""
    return _path_errors(path, hierarchy.root, hierarchy.edge_map())


def validate_items(items: list[Item], schema: TaxonomySchema, errors: list[str]) -> None:
    dimensions = schema.faceted_dimensions
    root = schema.classical_hierarchy.root
    # Built once per run, shared by every item
    edges = schema.classical_hierarchy.edge_map()
    name_counts = Counter(item.name for item in items)

    for idx, item in enumerate(items, start=1):
        item_ref = f"Item #{idx} ('{item.name}')"

        if not item.name.strip():
            errors.append(f"{item_ref}: name cannot be empty")
        if name_counts[item.name] > 1:
            errors.append(f"{item_ref}: duplicate item name")

        errors.extend(f"{item_ref}: {problem}" for problem in _path_errors(item.classical_path, root, edges))

        if not item.facets:
            errors.append(f"{item_ref}: must have at least one facet")

        for facet_name, facet_value in item.facets.items():
            allowed = dimensions.get(facet_name)
            if allowed is None:
                errors.append(f"{item_ref}: uses undefined facet '{facet_name}'")
                continue

            if isinstance(facet_value, MultiFacetValue):
                if not facet_value.root:
                    errors.append(f"{item_ref}: facet '{facet_name}' has empty array")
                for bad in facet_value.non_string_values():
                    errors.append(f"{item_ref}: facet '{facet_name}' array contains non-string value {bad!r}")

            for value in facet_value.as_list():
                if value not in allowed:
                    errors.append(
                        f"{item_ref}: facet '{facet_name}' has invalid value '{value}' (not in allowed values)"
                    )
