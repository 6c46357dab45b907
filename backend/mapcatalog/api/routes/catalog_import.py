"""Catalog Import Route: POST endpoint turning catalog XML into an action stream.

Invariants:
    - Each request gets its own registry and its own parsed tree (no shared state)
    - Returns the complete action stream or an error envelope, never a partial stream
    - Parse and registry errors are CatalogError subclasses handled globally

Design Decisions:
    - Thin route: parse (shell) -> import_catalog (core) -> serialize (shell)
    - Plain def: parsing and import are CPU-bound, so FastAPI runs them in its threadpool
"""

import logging

from fastapi import APIRouter

from mapcatalog.config import get_settings
from mapcatalog.core.import_catalog import import_catalog
from mapcatalog.infrastructure.catalog_xml import parse_catalog_xml
from mapcatalog.infrastructure.map_source_registry import (
    InMemoryMapSourceRegistry, MapSource,
)
from mapcatalog.schemas.catalog import (
    CatalogImportRequest, CatalogImportResponse, MapSourceDefinition,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/catalog", tags=["catalog"])


def _to_map_source(definition: MapSourceDefinition) -> MapSource:
    return MapSource(
        name=definition.name,
        label=definition.label,
        visible=definition.visible,
        layers=dict(definition.layers),
    )


@router.post("/import", response_model=CatalogImportResponse)
def import_catalog_document(body: CatalogImportRequest):
    """Import a catalog document against the supplied map sources."""
    registry = InMemoryMapSourceRegistry(
        (_to_map_source(d) for d in body.map_sources),
        default_visibility=get_settings().unknown_source_visibility,
    )
    root = parse_catalog_xml(body.catalog_xml)
    actions = import_catalog(root, registry)
    return CatalogImportResponse(
        actions=[action.to_wire() for action in actions],
        action_count=len(actions),
    )
