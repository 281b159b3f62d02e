"""Pydantic models for the hybrid taxonomy: hierarchy, facets, items and filters."""

from collections.abc import Iterator
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Discriminator, Field, RootModel, Tag


class HierarchyNode(BaseModel):
    """One species in the classical hierarchy, qualified by its differentia."""

    genus: str = Field(..., description="Species name of the structural parent (or the root name).")
    species: str = Field(..., description="Tree-wide identifier of this node.")
    differentia: str = Field(..., description="What distinguishes this species within its genus.")
    children: list["HierarchyNode"] | None = None


class ClassicalHierarchy(BaseModel):
    """Single-inheritance tree rooted at `root`."""

    root: str
    children: list[HierarchyNode] | None = None

    def iter_nodes(self) -> Iterator[tuple[str, HierarchyNode]]:
        """
        Yield (parent_name, node) pairs in pre-order.

        Uses an explicit stack so arbitrarily deep trees do not hit the
        recursion limit.
        """
        stack = [(self.root, node) for node in reversed(self.children or [])]
        while stack:
            parent, node = stack.pop()
            yield parent, node
            stack.extend((node.species, child) for child in reversed(node.children or []))

    def edge_map(self) -> dict[str, list[str]]:
        """Map each parent name to the ordered species of its direct children."""
        edges: dict[str, list[str]] = {}
        for parent, node in self.iter_nodes():
            edges.setdefault(parent, []).append(node.species)
        return edges

    def genera(self) -> list[str]:
        """Root name followed by every species, pre-order."""
        return [self.root] + [node.species for _, node in self.iter_nodes()]


class SingleFacetValue(RootModel[str]):
    """A facet assigned exactly one value."""

    def as_list(self) -> list[str]:
        return [self.root]

    def non_string_values(self) -> list[Any]:
        return []


class MultiFacetValue(RootModel[list[Any]]):
    """
    A facet assigned an array of values.

    Elements are kept verbatim (including non-strings) so the domain
    validator can report them; readers go through `as_list()`.
    """

    def as_list(self) -> list[str]:
        return [v for v in self.root if isinstance(v, str)]

    def non_string_values(self) -> list[Any]:
        return [v for v in self.root if not isinstance(v, str)]


def _facet_kind(value: Any) -> str | None:
    if isinstance(value, (str, SingleFacetValue)):
        return "single"
    if isinstance(value, (list, MultiFacetValue)):
        return "multi"
    return None


FacetValue = Annotated[
    Annotated[SingleFacetValue, Tag("single")] | Annotated[MultiFacetValue, Tag("multi")],
    Discriminator(
        _facet_kind,
        custom_error_type="invalid_facet_value",
        custom_error_message="Facet value must be a string or an array of strings",
    ),
]


def facet_value(raw: Any) -> SingleFacetValue | MultiFacetValue:
    """Build the tagged facet variant from a raw JSON value."""
    kind = _facet_kind(raw)
    if kind == "single":
        return raw if isinstance(raw, SingleFacetValue) else SingleFacetValue(raw)
    if kind == "multi":
        return raw if isinstance(raw, MultiFacetValue) else MultiFacetValue(list(raw))
    raise ValueError(f"Facet value must be a string or an array of strings, got {type(raw).__name__}")


class Item(BaseModel):
    """Catalogued entity: one hierarchy position plus facet tags."""

    model_config = ConfigDict(extra="allow")

    name: str
    classical_path: list[str]
    facets: dict[str, FacetValue] = Field(default_factory=dict)

    @property
    def extra(self) -> dict[str, Any]:
        """Unrecognised fields, preserved verbatim and in input order."""
        return dict(self.model_extra or {})

    def facet_values(self, facet_name: str) -> list[str]:
        """String values of a facet, or an empty list when the item lacks it."""
        value = self.facets.get(facet_name)
        return value.as_list() if value is not None else []


class TaxonomyData(BaseModel):
    """A data file: schema reference plus the item collection."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    schema_ref: str = Field(..., alias="schema", description="Schema filename, relative to the data file.")
    items: list[Item] = Field(default_factory=list)

    @property
    def extra(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class TaxonomySchema(BaseModel):
    """Typed view of a taxonomy JSON-Schema document."""

    schema_id: str = "unknown"
    title: str = "Untitled Taxonomy"
    description: str | None = None
    classical_hierarchy: ClassicalHierarchy
    faceted_dimensions: dict[str, list[str]] = Field(default_factory=dict)
    # Raw document kept for conformance checks
    json_schema: dict[str, Any] | None = None


class Filters(BaseModel):
    """Browse filters: genus OR-set AND per-facet OR-sets."""

    genera: list[str] = Field(default_factory=list)
    facets: dict[str, list[str]] = Field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.genera and not self.facets
