"""Catalog Entities: flat, id-linked records and the actions that carry them.

Invariants:
    - Entities are frozen once built; sequences are tuples
    - Group.children is always empty here, tree edges travel only as LinkChild
    - parent_id is None for top-level entities and always names a Group otherwise
    - Layer.visible is derived from its sources, never set independently

Design Decisions:
    - Frozen dataclasses over pydantic in core: no validation cost on the hot path,
      pydantic lives at the HTTP boundary (schemas/catalog.py)
    - to_wire() uses the store's action field names (child, src, on, parentId)
"""

from dataclasses import dataclass, field

from mapcatalog.core.domain_types import ActionType, EntityId


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class SourceReference:
    """Pointer from a layer to one map source, optionally a named sub-layer."""
    map_source_name: str
    layer_name: str | None = None

    def to_wire(self) -> dict:
        return {
            "mapSourceName": self.map_source_name,
            "layerName": self.layer_name,
        }


@dataclass(frozen=True)
class Group:
    """Container entity. Children are attached by the store, not here."""
    id: EntityId
    label: str | None = None
    expand: bool = False
    # True: children toggle independently (checkboxes); False: radio buttons
    multiple: bool = True
    parent_id: EntityId | None = None
    children: tuple[EntityId, ...] = field(default=())

    def to_wire(self) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "expand": self.expand,
            "multiple": self.multiple,
            "parentId": self.parent_id,
            "children": list(self.children),
        }


@dataclass(frozen=True)
class Layer:
    """Leaf entity backed by zero or more map-source references."""
    id: EntityId
    label: str | None = None
    sources: tuple[SourceReference, ...] = field(default=())
    visible: bool = True
    parent_id: EntityId | None = None

    def to_wire(self) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "src": [s.to_wire() for s in self.sources],
            "on": self.visible,
            "parentId": self.parent_id,
        }


# ─── Actions ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class CreateGroup:
    entity: Group
    type: ActionType = field(default=ActionType.ADD_GROUP, init=False)

    def to_wire(self) -> dict:
        return {"type": self.type.value, "child": self.entity.to_wire()}


@dataclass(frozen=True)
class CreateLayer:
    entity: Layer
    type: ActionType = field(default=ActionType.ADD_LAYER, init=False)

    def to_wire(self) -> dict:
        return {"type": self.type.value, "child": self.entity.to_wire()}


@dataclass(frozen=True)
class LinkChild:
    """Edge from a child to its enclosing group (or to the top level)."""
    parent_id: EntityId | None
    child_id: EntityId
    type: ActionType = field(default=ActionType.ADD_CHILD, init=False)

    def to_wire(self) -> dict:
        return {
            "type": self.type.value,
            "parentId": self.parent_id,
            "childId": self.child_id,
        }


CatalogAction = CreateGroup | CreateLayer | LinkChild
