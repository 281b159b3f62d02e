"""Library-science ordering: leading articles and diacritics do not affect placement."""

import re
import unicodedata

from domain.schemas import Item

NAME_FIELD = "name"

# English, German, French, Spanish, Italian and Dutch articles
LEADING_ARTICLES = (
    "the", "a", "an",
    "der", "die", "das",
    "le", "la", "les",
    "el", "los", "las",
    "il", "lo", "i", "gli",
    "un", "une", "een",
)

_ARTICLE_RE = re.compile(r"^(?:" + "|".join(LEADING_ARTICLES) + r")\s+", re.IGNORECASE)
_WS_RE = re.compile(r"\s+")


def strip_leading_articles(s: str) -> str:
    """Remove one leading article token, if present at the very start."""
    return _ARTICLE_RE.sub("", s, count=1)


def normalize_for_sorting(s: str) -> str:
    """
    Build the comparison key for a display string.

    Examples:
        >>> normalize_for_sorting("The  Zebra ")
        'zebra'
        >>> normalize_for_sorting("Éclair") == "e\\u0301clair"
        True
    """
    s = strip_leading_articles(s)
    s = unicodedata.normalize("NFD", s).lower()
    return _WS_RE.sub(" ", s).strip()


def facet_sort_string(item: Item, facet_name: str) -> str:
    """Facet value as display text: arrays joined with ', ', missing facet is ''."""
    return ", ".join(item.facet_values(facet_name))


def sort_items(items: list[Item], sort_field: str) -> None:
    """
    Sort items in place by name or by a facet.

    Ties on the normalised name fall back to the raw name; ties on a facet
    fall back to the normalised name.
    """
    if sort_field == NAME_FIELD:
        items.sort(key=lambda item: (normalize_for_sorting(item.name), item.name))
    else:
        items.sort(
            key=lambda item: (
                normalize_for_sorting(facet_sort_string(item, sort_field)),
                normalize_for_sorting(item.name),
            )
        )
