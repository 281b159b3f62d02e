"""Parsing of user-entered item fields (name, comma-separated path)."""

from domain.errors import ItemInputError


def parse_classification_path(path_text: str) -> list[str]:
    """
    Split a comma-separated classification path, dropping blank segments.

    Examples:
        >>> parse_classification_path(" Beverage, Coffee ,, Espresso ")
        ['Beverage', 'Coffee', 'Espresso']

    Raises:
        ItemInputError: If no segment remains
    """
    path = [segment.strip() for segment in path_text.split(",") if segment.strip()]
    if not path:
        raise ItemInputError("path", "Classification path cannot be empty")
    return path


def validate_item_input(name: str, path_text: str) -> tuple[str, list[str]]:
    """Return the trimmed name and parsed path, or raise ItemInputError."""
    if not name.strip():
        raise ItemInputError("name", "Name cannot be empty")
    return name.strip(), parse_classification_path(path_text)
