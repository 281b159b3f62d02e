"""Boolean filter matching over items (genus OR-set AND per-facet OR-sets)."""

import logging
from collections.abc import Iterable, Sequence

from domain.schemas import Filters, Item

logger = logging.getLogger(__name__)


def matches_filters(item: Item, filters: Filters) -> bool:
    """
    Check whether an item satisfies every active clause.

    - Genus clause: some requested genus appears in the item's classical_path.
    - Facet clauses: for each facet name, the item must carry the facet and
      share at least one value with the requested set. An item lacking the
      facet never matches.
    """
    if filters.genera and not any(genus in item.classical_path for genus in filters.genera):
        return False

    for facet_name, required_values in filters.facets.items():
        if facet_name not in item.facets:
            return False
        item_values = item.facet_values(facet_name)
        if not any(rv in item_values for rv in required_values):
            return False

    return True


def apply_filters(items: Sequence[Item], filters: Filters) -> list[Item]:
    """Return the matching items in their original order; `items` is untouched."""
    matched = [item for item in items if matches_filters(item, filters)]
    logger.debug("Filters matched %d of %d item(s)", len(matched), len(items))
    return matched


def has_filters(filters: Filters) -> bool:
    return not filters.is_empty()


def parse_facet_filters(facet_strings: Iterable[str]) -> dict[str, list[str]]:
    """
    Parse `name=value` strings into a facet filter mapping.

    Examples:
        >>> parse_facet_filters(["temperature=hot", "temperature = iced", "caffeine=high"])
        {'temperature': ['hot', 'iced'], 'caffeine': ['high']}
    """
    facet_map: dict[str, list[str]] = {}
    for facet_str in facet_strings:
        if "=" not in facet_str:
            logger.warning("Ignoring facet filter %r: expected 'name=value'", facet_str)
            continue
        key, value = facet_str.split("=", 1)
        facet_map.setdefault(key.strip(), []).append(value.strip())
    return facet_map
