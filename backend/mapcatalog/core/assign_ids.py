"""Identifier Assignment: attaches a fresh id to every node of a catalog tree.

Invariants:
    - Every node, root included, is visited exactly once
    - Ids are unique across the whole tree for one run, across both entity kinds
    - Must complete before any translation: parent links read ids from nodes
    - Generator failure (exception, empty token, repeated token) aborts the import

Design Decisions:
    - Generator injected as a zero-arg callable, uuid4 by default
    - Iterative walk with an explicit stack: depth is bounded by memory, not recursion
"""

import uuid
from typing import Callable

from mapcatalog.core.catalog_protocols import CatalogNode
from mapcatalog.core.domain_types import EntityId
from mapcatalog.core.errors import ErrorContext, IdentifierGenerationError

ID_ATTRIBUTE = "uuid"

IdFactory = Callable[[], str]


def new_identifier() -> str:
    return str(uuid.uuid4())


def assign_identifiers(
    root: CatalogNode, id_factory: IdFactory = new_identifier,
) -> int:
    """Attach a unique id under ID_ATTRIBUTE to every node. Returns node count."""
    seen: set[str] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        token = _generate(id_factory)
        if token in seen:
            raise IdentifierGenerationError(
                "generator produced a duplicate identifier",
                ErrorContext(node_id=token),
            )
        seen.add(token)
        node.set_attribute(ID_ATTRIBUTE, token)
        # reversed keeps document order when popping
        stack.extend(reversed(node.children))
    return len(seen)


def node_id(node: CatalogNode) -> EntityId:
    """Read the id assign_identifiers attached to a node."""
    token = node.get_attribute(ID_ATTRIBUTE)
    if not token:
        raise IdentifierGenerationError(
            f"{node.kind.value} node has no assigned identifier",
        )
    return EntityId(token)


def _generate(id_factory: IdFactory) -> str:
    try:
        token = id_factory()
    except Exception as exc:
        raise IdentifierGenerationError(str(exc) or type(exc).__name__) from exc
    if not token:
        raise IdentifierGenerationError("generator returned an empty identifier")
    return token
