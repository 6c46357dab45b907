"""Catalog Schemas: Pydantic models for the catalog import API.

Invariants:
    - Action payload shapes match CatalogAction.to_wire() exactly
    - Field names on the wire are camelCase (parentId, mapSourceName, childId)
    - CatalogAction is a union discriminated on `type`
    - catalog_xml is non-empty and no longer than Settings.catalog_max_bytes

Design Decisions:
    - snake_case attributes with camelCase aliases: Python callers stay idiomatic,
      FastAPI serializes by alias
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mapcatalog.config import get_settings


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ─── Entities ────────────────────────────────────────────────────

class SourceReferencePayload(_WireModel):
    map_source_name: str = Field(alias="mapSourceName")
    layer_name: str | None = Field(None, alias="layerName")


class GroupPayload(_WireModel):
    id: str
    label: str | None = None
    expand: bool = False
    multiple: bool = True
    parent_id: str | None = Field(None, alias="parentId")
    children: list[str] = []


class LayerPayload(_WireModel):
    id: str
    label: str | None = None
    src: list[SourceReferencePayload] = []
    on: bool = True
    parent_id: str | None = Field(None, alias="parentId")


# ─── Actions ─────────────────────────────────────────────────────

class CreateGroupAction(_WireModel):
    type: Literal["CATALOG_ADD_GROUP"]
    child: GroupPayload


class CreateLayerAction(_WireModel):
    type: Literal["CATALOG_ADD_LAYER"]
    child: LayerPayload


class LinkChildAction(_WireModel):
    type: Literal["CATALOG_ADD_CHILD"]
    parent_id: str | None = Field(alias="parentId")
    child_id: str = Field(alias="childId")


CatalogAction = Annotated[
    CreateGroupAction | CreateLayerAction | LinkChildAction,
    Field(discriminator="type"),
]


# ─── Import request/response ─────────────────────────────────────

class MapSourceDefinition(BaseModel):
    """One entry of the map-source registry the import resolves against."""
    name: str = Field(min_length=1, max_length=200)
    label: str | None = None
    visible: bool = False
    layers: dict[str, bool] = {}

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class CatalogImportRequest(BaseModel):
    """Catalog markup plus the map sources its layers reference."""
    catalog_xml: str = Field(min_length=1)
    map_sources: list[MapSourceDefinition] = []

    @field_validator("catalog_xml")
    @classmethod
    def within_size_limit(cls, v: str) -> str:
        limit = get_settings().catalog_max_bytes
        if len(v.encode("utf-8")) > limit:
            raise ValueError(f"catalog_xml exceeds {limit} bytes")
        return v


class CatalogImportResponse(BaseModel):
    """Ordered action stream; replaying it in order rebuilds the catalog."""
    actions: list[CatalogAction] = []
    action_count: int = 0
