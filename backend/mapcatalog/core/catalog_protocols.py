"""Boundary Protocols: contracts between the catalog core and its collaborators.

Invariants:
    - Core NEVER imports from infrastructure, dependency arrows point inward only
    - The document tree and the map-source registry are reached only through these types
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - MapSourceQuery is synchronous and read-only: translators stay pure functions
      of (node, collaborator) and are testable with hand-written fakes
"""

from typing import Protocol, Sequence

from mapcatalog.core.domain_types import NodeKind


class CatalogNode(Protocol):
    """A navigable, already-parsed catalog tree node.

    The only write the core performs is set_attribute, for id assignment.
    """

    @property
    def kind(self) -> NodeKind: ...

    @property
    def children(self) -> Sequence["CatalogNode"]: ...

    @property
    def parent(self) -> "CatalogNode | None": ...

    def get_attribute(self, name: str) -> str | None: ...

    def set_attribute(self, name: str, value: str) -> None: ...


class MapSourceQuery(Protocol):
    """Read-only view of the map-source registry.

    visibility_of must not raise for an unknown source or sub-layer; it
    resolves to the implementation's documented default instead.
    """

    def visibility_of(
        self, source_name: str, layer_name: str | None = None,
    ) -> bool: ...

    def label_of(self, source_name: str) -> str | None: ...
