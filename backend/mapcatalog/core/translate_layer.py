"""Layer Translation: one layer node to one Layer entity.

Invariants:
    - Pure with respect to the node; MapSourceQuery is only read
    - sources keep declaration order from the src attribute
    - visible is the AND over every source's visibility; no sources -> True
    - An unset label takes the first truthy source label and never changes after
    - Unresolvable sources are not errors: whatever the query returns is used
    - parent_id is whatever the walker links the layer under, None at the top level

Design Decisions:
    - parse_source_references is public: the delimiter grammar is tested on its own
    - Split on LAYER_DELIMITER at most once, so "a/b/c" names sub-layer "b/c"
"""

import logging

from mapcatalog.core.assign_ids import node_id
from mapcatalog.core.catalog_entities import Layer, SourceReference
from mapcatalog.core.catalog_protocols import CatalogNode, MapSourceQuery
from mapcatalog.core.domain_types import EntityId

logger = logging.getLogger(__name__)

SOURCE_DELIMITER = ":"
LAYER_DELIMITER = "/"


def parse_source_references(text: str | None) -> tuple[SourceReference, ...]:
    """Split a composite src attribute into ordered source references.

    "A/x:B" -> (SourceReference("A", "x"), SourceReference("B", None)).
    Empty segments are skipped; an empty sub-layer part means no sub-layer.
    """
    if not text:
        return ()

    refs: list[SourceReference] = []
    for segment in text.split(SOURCE_DELIMITER):
        parts = segment.split(LAYER_DELIMITER, 1)
        source_name = parts[0].strip()
        if not source_name:
            logger.debug("Skipping empty source reference in %r", text)
            continue
        layer_name = parts[1].strip() if len(parts) > 1 else ""
        refs.append(SourceReference(source_name, layer_name or None))
    return tuple(refs)


def translate_layer(
    node: CatalogNode,
    map_sources: MapSourceQuery,
    parent_id: EntityId | None = None,
) -> Layer:
    """Build a Layer entity, deriving visibility and default label from its sources."""
    label = node.get_attribute("title")
    sources = parse_source_references(node.get_attribute("src"))

    all_visible = True
    for ref in sources:
        visible = map_sources.visibility_of(ref.map_source_name, ref.layer_name)
        all_visible = all_visible and bool(visible)
        if not label:
            source_label = map_sources.label_of(ref.map_source_name)
            if source_label:
                label = source_label

    return Layer(
        id=node_id(node),
        label=label,
        sources=sources,
        visible=all_visible,
        parent_id=parent_id,
    )
