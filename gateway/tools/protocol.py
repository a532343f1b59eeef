"""
Tool protocol - parameter schemas and capability descriptors.

Defines the declarative contracts shared by the registry, the dispatcher
and the catalogue exporter:
- Parameter / ParameterSchema: self-describing argument schema
- Operation: behaviour bound to a capability
- Capability: name + description + schema + operation
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

if TYPE_CHECKING:
    from ..clients.resolver import BackendResolver
    from .context import ExecutionContext


class ParamType(str, Enum):
    """Primitive type tags a parameter can declare."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


class Parameter(BaseModel):
    """A single tool parameter."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Name of the parameter")
    type: ParamType = Field(..., description="Type of the parameter (string, boolean, number, etc.)")
    description: str = Field("", description="Description of the parameter")
    required: bool = Field(False, description="Whether the parameter is required")


class ParameterSchema(BaseModel):
    """
    Parameter set accepted by a tool.

    The list of required names is derived from each parameter's own
    ``required`` flag, so the two can never disagree. Documents parsed
    back from a catalogue must carry a matching list.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["object"] = "object"
    properties: Dict[str, Parameter] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _check_required_list(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or "required" not in data:
            return data
        declared = data.get("required") or []
        properties = data.get("properties") or {}
        if not isinstance(declared, list):
            raise ValueError("required must be a list of parameter names")
        # malformed properties are left to field validation
        if not isinstance(properties, Mapping):
            return data
        flags = {
            name: _required_flag(prop)
            for name, prop in properties.items()
            if isinstance(prop, (Parameter, Mapping))
        }
        for name in declared:
            if not isinstance(name, str) or name not in properties:
                raise ValueError(f"required parameter '{name}' is not a declared property")
            if name in flags and not flags[name]:
                raise ValueError(f"parameter '{name}' is listed as required but not flagged required")
        for name, flag in flags.items():
            if flag and name not in declared:
                raise ValueError(f"parameter '{name}' is flagged required but missing from required list")
        return {key: value for key, value in data.items() if key != "required"}

    @field_validator("properties")
    @classmethod
    def _keys_match_names(cls, value: Dict[str, Parameter]) -> Dict[str, Parameter]:
        for key, param in value.items():
            if key != param.name:
                raise ValueError(f"property key '{key}' does not match parameter name '{param.name}'")
        return value

    @computed_field  # type: ignore[misc]
    @property
    def required(self) -> List[str]:
        return [name for name, param in self.properties.items() if param.required]

    def to_json_schema(self) -> Dict[str, Any]:
        """JSON Schema (draft 7) used to validate invocation arguments."""
        return {
            "type": "object",
            "properties": {
                name: {"type": param.type.value, "description": param.description}
                for name, param in self.properties.items()
            },
            "required": self.required,
        }

    @classmethod
    def of(cls, *parameters: Parameter) -> "ParameterSchema":
        """Build a schema from parameters, rejecting duplicate names."""
        properties: Dict[str, Parameter] = {}
        for param in parameters:
            if param.name in properties:
                raise ValueError(f"duplicate parameter '{param.name}'")
            properties[param.name] = param
        return cls(properties=properties)


def _required_flag(prop: Any) -> bool:
    if isinstance(prop, Parameter):
        return prop.required
    return bool(prop.get("required", False))


def string_param(name: str, description: str, required: bool = True) -> Parameter:
    return Parameter(name=name, type=ParamType.STRING, description=description, required=required)


def array_param(name: str, description: str, required: bool = True) -> Parameter:
    return Parameter(name=name, type=ParamType.ARRAY, description=description, required=required)


class Operation(ABC):
    """
    Behaviour bound to a capability.

    Subclasses implement execute(); they receive arguments that already
    passed schema validation and the per-call execution context, and talk
    to the backend through the shared resolver.
    """

    def __init__(self, resolver: "BackendResolver") -> None:
        self.resolver = resolver

    @abstractmethod
    async def execute(self, args: Dict[str, Any], context: "ExecutionContext") -> Any:
        """Run the backend operation and return a JSON-like result."""


class Capability(BaseModel):
    """A named, independently invokable backend operation."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1, description="Unique tool identifier (e.g. 'get_student')")
    description: str = Field(..., description="Description of what the tool does")
    parameters: ParameterSchema = Field(default_factory=ParameterSchema)
    operation: Operation = Field(..., exclude=True, repr=False)
