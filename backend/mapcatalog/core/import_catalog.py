"""Catalog Import: entry point turning a catalog tree into a full action stream.

Invariants:
    - Ids are assigned to the whole tree before any translation starts
    - The root itself is not an entity: its children are top-level (parent None)
    - All or nothing: an error aborts the import and no partial stream is returned
    - Holds no module-level mutable state; separate trees may import concurrently

Design Decisions:
    - id_factory passed through so callers and tests control id generation
"""

import logging

from mapcatalog.core.assign_ids import IdFactory, assign_identifiers, new_identifier
from mapcatalog.core.catalog_entities import CatalogAction, CreateGroup, CreateLayer
from mapcatalog.core.catalog_protocols import CatalogNode, MapSourceQuery
from mapcatalog.core.walk_subtree import emit_subtree_actions

logger = logging.getLogger(__name__)


def import_catalog(
    root: CatalogNode,
    map_sources: MapSourceQuery,
    id_factory: IdFactory = new_identifier,
) -> list[CatalogAction]:
    """Assign ids across the tree, then flatten it into ordered actions."""
    node_count = assign_identifiers(root, id_factory)

    actions: list[CatalogAction] = []
    emit_subtree_actions(root, None, map_sources, actions)

    group_count = sum(isinstance(a, CreateGroup) for a in actions)
    layer_count = sum(isinstance(a, CreateLayer) for a in actions)
    logger.info(
        "Catalog imported",
        extra={
            "action_count": len(actions),
            "group_count": group_count,
            "layer_count": layer_count,
            # root plus every node that produced no entity
            "skipped_count": node_count - group_count - layer_count,
        },
    )
    return actions
