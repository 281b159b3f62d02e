"""Exception hierarchy for loading, validating and saving taxonomies."""

from pathlib import Path


class TaxonomyError(Exception):
    """Base class for every error raised by the taxonomy core."""


class TaxonomyIOError(TaxonomyError, OSError):
    """A taxonomy or schema file could not be read or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{reason}: {self.path}")

    def __str__(self) -> str:
        return f"{self.reason}: {self.path}"


class JsonParseError(TaxonomyError, ValueError):
    """File contents are not valid JSON."""

    def __init__(self, path: Path, message: str, line: int | None = None, column: int | None = None) -> None:
        self.path = Path(path)
        self.line = line
        self.column = column
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"Invalid JSON in {self.path}{location}: {message}")


class SchemaExtractionError(TaxonomyError, ValueError):
    """Schema document lacks required keys or has the wrong shape."""


class MissingFieldError(SchemaExtractionError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"JSON Schema missing '{field}' property")


class MalformedHierarchyError(SchemaExtractionError):
    pass


class MalformedDimensionsError(SchemaExtractionError):
    pass


class SchemaCompileError(TaxonomyError, ValueError):
    """The retained JSON-Schema document is itself invalid."""


class SchemaConformanceError(TaxonomyError, ValueError):
    """Raw data failed the generic JSON-Schema check (first violation only)."""

    def __init__(self, violation) -> None:
        self.violation = violation
        super().__init__(f"Schema validation failed: {violation}")


class DataDeserializationError(TaxonomyError, ValueError):
    """Raw data could not be converted into the typed model."""


class DomainValidationError(TaxonomyError, ValueError):
    """
    Business-rule validation failed.

    Carries the complete, ordered list of violations so every problem can be
    fixed in one pass.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        lines = "\n".join(f"  {i}. {e}" for i, e in enumerate(self.errors, start=1))
        super().__init__(f"Validation failed with {len(self.errors)} error(s):\n{lines}")


class ItemInputError(TaxonomyError, ValueError):
    """User-entered item fields could not be parsed."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
