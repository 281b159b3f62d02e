"""
Query engine: filter, sort and group items for browsing.

These operations never raise on heterogeneous item data; a missing facet
degrades to "no match", an empty sort key, or the unspecified group.
"""

from domain.query.filtering import apply_filters, has_filters, matches_filters, parse_facet_filters
from domain.query.grouping import UNSPECIFIED_GROUP, get_sorted_group_names, group_items_by_facet
from domain.query.sorting import normalize_for_sorting, sort_items, strip_leading_articles

__all__ = [
    "apply_filters",
    "matches_filters",
    "has_filters",
    "parse_facet_filters",
    "sort_items",
    "normalize_for_sorting",
    "strip_leading_articles",
    "group_items_by_facet",
    "get_sorted_group_names",
    "UNSPECIFIED_GROUP",
]
