# scripts/browser_skill/actions/validation.py
"""
Argument validation for a single action call.

One pass over the declared parameters: presence of required ones first,
then coercion of every present value to its declared type. Keys the
schema does not declare are passed through untouched.
"""
from typing import Any, Dict, Mapping, Union

from .schema import ActionSchema
from ..core.errors import MissingParameterError, TypeMismatchError

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


class ActionArgs(dict):
    """Validated arguments; readable as args["name"] or args.name"""

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None


def parse_bool(x: Any) -> bool:
    """Convert a CLI value to boolean, rejecting anything ambiguous"""
    if isinstance(x, bool):
        return x
    text = str(x).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(text)


def parse_number(x: Any) -> Union[int, float]:
    if isinstance(x, bool):
        raise ValueError(x)
    if isinstance(x, (int, float)):
        return x
    value = float(str(x).strip())
    if value.is_integer():
        return int(value)
    return value


_COERCERS = {
    "string": str,
    "number": parse_number,
    "boolean": parse_bool,
}


def check_required(schema: ActionSchema, raw: Mapping[str, Any]) -> None:
    """Fail on the first required parameter that is absent"""
    for param in schema.params:
        if param.required and raw.get(param.name) is None:
            raise MissingParameterError(param.name)


def coerce_value(param_name: str, type_name: str, value: Any) -> Any:
    try:
        return _COERCERS[type_name](value)
    except (TypeError, ValueError):
        raise TypeMismatchError(param_name, type_name, value) from None


def validate_args(schema: ActionSchema, raw: Mapping[str, Any]) -> ActionArgs:
    """Check and type the raw CLI arguments against the schema's parameters"""
    check_required(schema, raw)

    values: Dict[str, Any] = dict(raw)
    for param in schema.params:
        value = raw.get(param.name)
        if value is None:
            if param.has_default:
                values[param.name] = param.default
            continue
        values[param.name] = coerce_value(param.name, param.type, value)

    return ActionArgs(values)
