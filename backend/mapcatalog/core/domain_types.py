"""Domain Types: rich types that replace bare primitives across the catalog engine.

Invariants:
    - EntityId wraps the string token attached to every catalog node
    - Node kinds and action types encoded as Enums, no raw string matching
    - ActionType values are the store action names the downstream reducer expects

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EntityId = NewType("EntityId", str)


# ─── Enums ───────────────────────────────────────────────────────

class NodeKind(str, Enum):
    """Kind discriminator for catalog tree nodes."""
    GROUP = "group"
    LAYER = "layer"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag: str | None) -> "NodeKind":
        """Map a markup tag name to a node kind. Unknown tags are OTHER."""
        if tag == cls.GROUP.value:
            return cls.GROUP
        if tag == cls.LAYER.value:
            return cls.LAYER
        return cls.OTHER


class ActionType(str, Enum):
    """The three action kinds a catalog import emits, and no others."""
    ADD_GROUP = "CATALOG_ADD_GROUP"
    ADD_LAYER = "CATALOG_ADD_LAYER"
    ADD_CHILD = "CATALOG_ADD_CHILD"
