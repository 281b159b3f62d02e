"""Fan-out grouping: a multi-valued item lands in every group it names."""

from collections.abc import Iterable

from domain.schemas import Item

UNSPECIFIED_GROUP = "_unspecified_"


def group_items_by_facet(items: Iterable[Item], group_field: str) -> dict[str, list[Item]]:
    """
    Group items by the values of one facet.

    Items without the facet (or without any string value for it) go to
    UNSPECIFIED_GROUP. Groups preserve the relative order of the input items.
    """
    groups: dict[str, list[Item]] = {}
    for item in items:
        values = item.facet_values(group_field)
        if not values:
            groups.setdefault(UNSPECIFIED_GROUP, []).append(item)
            continue
        for value in values:
            groups.setdefault(value, []).append(item)
    return groups


def get_sorted_group_names(groups: dict[str, list[Item]]) -> list[str]:
    return sorted(groups)
