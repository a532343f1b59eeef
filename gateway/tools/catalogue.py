"""Catalogue export: the registry as a tool-calling schema document."""

from __future__ import annotations

from typing import List, Union

from pydantic import BaseModel, TypeAdapter

from .protocol import ParameterSchema
from .registry import ToolRegistry


class CatalogueEntry(BaseModel):
    """Public description of one tool."""

    name: str
    description: str
    parameters: ParameterSchema


_catalogue_adapter = TypeAdapter(List[CatalogueEntry])


def export_catalogue(registry: ToolRegistry) -> List[CatalogueEntry]:
    """One entry per registered tool, sorted by name."""
    return [
        CatalogueEntry(
            name=capability.name,
            description=capability.description,
            parameters=capability.parameters,
        )
        for capability in registry.list_all()
    ]


def catalogue_json(registry: ToolRegistry) -> bytes:
    return _catalogue_adapter.dump_json(export_catalogue(registry))


def parse_catalogue(raw: Union[str, bytes]) -> List[CatalogueEntry]:
    """Parse a document produced by catalogue_json()."""
    return _catalogue_adapter.validate_json(raw)
