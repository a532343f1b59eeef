"""Tool registry, dispatch and catalogue export."""

from .catalogue import CatalogueEntry, catalogue_json, export_catalogue, parse_catalogue
from .context import AuthPropagator, ExecutionContext, bearer_token
from .dispatcher import DispatchResult, Dispatcher
from .errors import (
    BackendError,
    DispatchError,
    DuplicateCapabilityError,
    GatewayError,
    MalformedRequestError,
    NotFoundError,
    ValidationError,
)
from .protocol import Capability, Operation, Parameter, ParameterSchema, ParamType
from .registry import RegistryBuilder, ToolRegistry

__all__ = [
    "AuthPropagator",
    "BackendError",
    "Capability",
    "CatalogueEntry",
    "DispatchError",
    "DispatchResult",
    "Dispatcher",
    "DuplicateCapabilityError",
    "ExecutionContext",
    "GatewayError",
    "MalformedRequestError",
    "NotFoundError",
    "Operation",
    "ParamType",
    "Parameter",
    "ParameterSchema",
    "RegistryBuilder",
    "ToolRegistry",
    "ValidationError",
    "bearer_token",
    "catalogue_json",
    "export_catalogue",
    "parse_catalogue",
]
