"""Map-Source Registry: in-memory MapSourceQuery implementation.

Invariants:
    - Lookups never raise: an unknown source or sub-layer resolves to
      default_visibility, an unknown source label resolves to None
    - visibility_of(name) reads the source's own flag; visibility_of(name, layer)
      reads only that sub-layer's flag
    - Source names are unique within one registry
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from mapcatalog.core.errors import MapSourceDefinitionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapSource:
    """A map source and the current visibility of its named sub-layers."""
    name: str
    label: str | None = None
    visible: bool = False
    layers: Mapping[str, bool] = field(default_factory=dict)


class InMemoryMapSourceRegistry:
    """Read-only registry of map sources keyed by name."""

    def __init__(
        self, sources: Iterable[MapSource] = (), default_visibility: bool = False,
    ):
        self._sources: dict[str, MapSource] = {}
        self._default_visibility = default_visibility
        for source in sources:
            if source.name in self._sources:
                raise MapSourceDefinitionError(source.name, "duplicate name")
            self._sources[source.name] = source

    def __len__(self) -> int:
        return len(self._sources)

    def __contains__(self, name: object) -> bool:
        return name in self._sources

    def get(self, name: str) -> MapSource | None:
        return self._sources.get(name)

    def visibility_of(self, source_name: str, layer_name: str | None = None) -> bool:
        source = self._sources.get(source_name)
        if source is None:
            logger.debug(
                "Unknown map source, using default visibility",
                extra={"map_source": source_name},
            )
            return self._default_visibility
        if layer_name is None:
            return source.visible
        if layer_name not in source.layers:
            logger.debug(
                f"Unknown layer '{layer_name}', using default visibility",
                extra={"map_source": source_name},
            )
            return self._default_visibility
        return source.layers[layer_name]

    def label_of(self, source_name: str) -> str | None:
        source = self._sources.get(source_name)
        return source.label if source is not None else None
