"""Subtree Walker: flattens a catalog subtree into an ordered action stream.

Invariants:
    - Children are visited in document order
    - A group's create action comes first, then its whole subtree block,
      then its own LinkChild; a layer's LinkChild immediately follows its create
    - Each entity's parent_id equals the parent of its own LinkChild
    - Every LinkChild appears after all actions for the child's descendants,
      so replaying in order never needs a forward reference
    - Nodes of any other kind produce no actions and are not descended into

Design Decisions:
    - Actions appended to one caller-owned list passed down the recursion,
      not returned and concatenated per level
"""

import logging

from mapcatalog.core.assign_ids import ID_ATTRIBUTE
from mapcatalog.core.catalog_entities import (
    CatalogAction, CreateGroup, CreateLayer, LinkChild,
)
from mapcatalog.core.catalog_protocols import CatalogNode, MapSourceQuery
from mapcatalog.core.domain_types import EntityId, NodeKind
from mapcatalog.core.translate_group import translate_group
from mapcatalog.core.translate_layer import translate_layer

logger = logging.getLogger(__name__)


def emit_subtree_actions(
    subtree: CatalogNode,
    parent_id: EntityId | None,
    map_sources: MapSourceQuery,
    actions: list[CatalogAction],
) -> None:
    """Append create/link actions for every descendant of subtree to actions."""
    for child in subtree.children:
        if child.kind == NodeKind.GROUP:
            group = translate_group(child, parent_id)
            actions.append(CreateGroup(group))
            emit_subtree_actions(child, group.id, map_sources, actions)
            actions.append(LinkChild(parent_id, group.id))
        elif child.kind == NodeKind.LAYER:
            layer = translate_layer(child, map_sources, parent_id)
            actions.append(CreateLayer(layer))
            actions.append(LinkChild(parent_id, layer.id))
        else:
            logger.debug(
                "Skipping unrecognized catalog node",
                extra={
                    "node_id": child.get_attribute(ID_ATTRIBUTE),
                    "node_kind": child.kind.value,
                },
            )


def subtree_actions(
    subtree: CatalogNode,
    parent_id: EntityId | None,
    map_sources: MapSourceQuery,
) -> list[CatalogAction]:
    """Convenience wrapper returning a fresh action list for one subtree."""
    actions: list[CatalogAction] = []
    emit_subtree_actions(subtree, parent_id, map_sources, actions)
    return actions
