"""Catalog Schemas: request validation and action-stream wire models.

Tests:
    - CatalogImportRequest rejects empty and oversized catalog_xml
    - MapSourceDefinition strips names and rejects blank ones
    - CatalogImportResponse accepts to_wire() output and dumps it back by alias
    - Unknown action types rejected by the discriminated union
"""

import pytest
from pydantic import ValidationError

from mapcatalog.config import get_settings
from mapcatalog.core.catalog_entities import (
    CreateGroup, CreateLayer, Group, Layer, LinkChild, SourceReference,
)
from mapcatalog.core.domain_types import EntityId
from mapcatalog.schemas.catalog import (
    CatalogImportRequest, CatalogImportResponse, LinkChildAction,
    MapSourceDefinition,
)


@pytest.fixture
def small_limit(monkeypatch):
    get_settings.cache_clear()
    monkeypatch.setenv("MAPCATALOG_CATALOG_MAX_BYTES", "32")
    yield
    get_settings.cache_clear()


def test_request_requires_catalog_xml():
    with pytest.raises(ValidationError):
        CatalogImportRequest(catalog_xml="")


def test_request_defaults_to_no_map_sources():
    req = CatalogImportRequest(catalog_xml="<catalog/>")
    assert req.map_sources == []


def test_request_rejects_oversized_catalog(small_limit):
    with pytest.raises(ValidationError, match="exceeds 32 bytes"):
        CatalogImportRequest(catalog_xml="<catalog>" + "x" * 40 + "</catalog>")


def test_map_source_name_stripped():
    assert MapSourceDefinition(name="  roads ").name == "roads"


def test_map_source_blank_name_rejected():
    with pytest.raises(ValidationError):
        MapSourceDefinition(name="   ")


def test_response_round_trips_wire_actions():
    g = Group(id=EntityId("g1"), label="Base")
    lyr = Layer(id=EntityId("l1"), sources=(SourceReference("A", "x"),),
                visible=False, parent_id=EntityId("g1"))
    wire = [
        CreateGroup(g).to_wire(),
        CreateLayer(lyr).to_wire(),
        LinkChild(EntityId("g1"), EntityId("l1")).to_wire(),
        LinkChild(None, EntityId("g1")).to_wire(),
    ]
    response = CatalogImportResponse(actions=wire, action_count=len(wire))
    assert isinstance(response.actions[2], LinkChildAction)
    assert response.model_dump(by_alias=True)["actions"] == wire


def test_unknown_action_type_rejected():
    with pytest.raises(ValidationError):
        CatalogImportResponse(actions=[{"type": "CATALOG_REMOVE", "childId": "x"}])
