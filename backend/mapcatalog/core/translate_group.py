"""Group Translation: one group node to one Group entity.

Invariants:
    - Pure: reads the node, writes nothing
    - children is NOT populated; edges arrive later as LinkChild actions
    - Missing or malformed attributes resolve to defaults (expand=False, multiple=True)
    - parent_id is whatever the walker links the group under, None at the top level
"""

from mapcatalog.core.assign_ids import node_id
from mapcatalog.core.catalog_entities import Group
from mapcatalog.core.catalog_protocols import CatalogNode
from mapcatalog.core.domain_types import EntityId
from mapcatalog.core.parse_boolean import parse_boolean


def translate_group(node: CatalogNode, parent_id: EntityId | None = None) -> Group:
    """Build a Group entity from a group node whose id is already assigned."""
    return Group(
        id=node_id(node),
        label=node.get_attribute("title"),
        expand=parse_boolean(node.get_attribute("expand"), default=False),
        multiple=parse_boolean(node.get_attribute("multiple"), default=True),
        parent_id=parent_id,
    )
