"""Browse use case: filter, then sort, then group."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from domain.query import apply_filters, get_sorted_group_names, group_items_by_facet, sort_items
from domain.schemas import Filters, Item

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrowseResult:
    """Matching items, plus (group name, items) pairs in display order when grouped."""

    items: list[Item]
    groups: list[tuple[str, list[Item]]] = field(default_factory=list)

    @property
    def grouped(self) -> bool:
        return bool(self.groups)


def browse(
    items: Sequence[Item],
    filters: Filters | None = None,
    *,
    sort_by: str | None = None,
    group_by: str | None = None,
) -> BrowseResult:
    """
    Compose the query engine operations without touching the caller's list.

    Sorting happens before grouping, so each group keeps the sort order.
    """
    matched = apply_filters(items, filters or Filters())
    if sort_by:
        sort_items(matched, sort_by)

    groups: list[tuple[str, list[Item]]] = []
    if group_by:
        grouped = group_items_by_facet(matched, group_by)
        groups = [(name, grouped[name]) for name in get_sorted_group_names(grouped)]

    logger.debug(
        "Browse: %d match(es), sort_by=%s, group_by=%s (%d group(s))",
        len(matched),
        sort_by,
        group_by,
        len(groups),
    )
    return BrowseResult(items=matched, groups=groups)
