"""
Dynamic values at the dispatch boundary.

Arguments arrive as decoded JSON and results leave as JSON. Arguments are
checked against the tool's JSON Schema before the operation runs; the
typed accessors below then read them inside operations. All of them
raise ValidationError naming the offending parameter.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import jsonschema
from pydantic import BaseModel

from .errors import ValidationError
from .protocol import ParameterSchema, ParamType

DynamicValue = Union[str, int, float, bool, None, List["DynamicValue"], Dict[str, "DynamicValue"]]

MISSING = "missing required parameter"


def type_of(value: Any) -> Optional[ParamType]:
    """Return the type tag of a decoded JSON value, or None if it has none."""
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return ParamType.BOOLEAN
    if isinstance(value, (int, float)):
        return ParamType.NUMBER
    if isinstance(value, str):
        return ParamType.STRING
    if isinstance(value, (list, tuple)):
        return ParamType.ARRAY
    if isinstance(value, Mapping):
        return ParamType.OBJECT
    return None


def _describe(value: Any) -> str:
    tag = type_of(value)
    if tag is not None:
        return tag.value
    return "null" if value is None else type(value).__name__


def check_value(name: str, value: Any, expected: ParamType) -> None:
    if type_of(value) is not expected:
        raise ValidationError(name, expected, f"expected {expected.value}, got {_describe(value)}")


def _schema_errors(
    schema: ParameterSchema,
    args: Mapping[str, Any],
) -> List[Tuple[str, str]]:
    """(parameter, reason) for every schema violation in the arguments."""
    validator = jsonschema.Draft7Validator(schema.to_json_schema())
    problems = []
    for error in validator.iter_errors(args):
        if error.validator == "required":
            problems.extend(
                (name, MISSING) for name in error.validator_value if name not in error.instance
            )
        elif error.validator == "type" and error.path:
            name = str(error.path[0])
            expected = schema.properties[name].type
            problems.append((name, f"expected {expected.value}, got {_describe(error.instance)}"))
        else:
            name = str(error.path[0]) if error.path else ""
            problems.append((name, error.message))
    return problems


def validate_arguments(schema: ParameterSchema, args: Mapping[str, Any]) -> None:
    """
    Check arguments against a schema without touching the backend.

    Null values count as absent, so required parameters must be present and
    non-null while optional ones are only checked when supplied. Unknown
    keys are ignored. The first violation in declaration order is raised.
    """
    present = {key: value for key, value in args.items() if value is not None}
    problems = _schema_errors(schema, present)
    if not problems:
        return

    order = {name: index for index, name in enumerate(schema.properties)}
    name, reason = min(problems, key=lambda problem: order.get(problem[0], len(order)))
    param = schema.properties.get(name)
    raise ValidationError(name, param.type if param else ParamType.OBJECT, reason)


def string_arg(args: Mapping[str, Any], name: str) -> str:
    value = args.get(name)
    if value is None:
        raise ValidationError(name, ParamType.STRING, MISSING)
    check_value(name, value, ParamType.STRING)
    return value


def id_arg(args: Mapping[str, Any], name: str) -> str:
    """A string argument used as a resource identifier in a backend path."""
    value = string_arg(args, name)
    if value.strip() in ("", ".", ".."):
        raise ValidationError(name, ParamType.STRING, "must be a non-empty identifier")
    return value


def optional_string_arg(args: Mapping[str, Any], name: str) -> Optional[str]:
    value = args.get(name)
    if value is None:
        return None
    check_value(name, value, ParamType.STRING)
    return value


def array_arg(args: Mapping[str, Any], name: str) -> List[Any]:
    value = args.get(name)
    if value is None:
        raise ValidationError(name, ParamType.ARRAY, MISSING)
    check_value(name, value, ParamType.ARRAY)
    return list(value)


def to_dynamic(value: Any) -> DynamicValue:
    """Convert an operation result into plain JSON-compatible data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, Mapping):
        return {str(key): to_dynamic(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_dynamic(item) for item in value]
    return value
