"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for hierarchy, facets, items and filters
- errors: Exception hierarchy shared by every layer
- taxonomy: Schema extraction and domain validation
- query: Filter, sort and group engine
"""

from domain.schemas import (
    ClassicalHierarchy,
    Filters,
    HierarchyNode,
    Item,
    MultiFacetValue,
    SingleFacetValue,
    TaxonomyData,
    TaxonomySchema,
)

__all__ = [
    "HierarchyNode",
    "ClassicalHierarchy",
    "SingleFacetValue",
    "MultiFacetValue",
    "Item",
    "TaxonomyData",
    "TaxonomySchema",
    "Filters",
]
