import inspect
import math
import re
from dataclasses import fields, MISSING
from typing import TypeVar, Type, Dict, Any, List, Union, get_args, get_origin

# Define a generic type variable T for any dataclass
T = TypeVar("T")

_TRUE_STRINGS = {"true", "1", "yes", "y"}
_FALSE_STRINGS = {"false", "0", "no", "n", ""}


def to_snake_case(name: str) -> str:
    """'textColor' -> 'text_color', 'ID' -> 'id', 'PNG Filename' -> 'png_filename'."""
    name = name.strip().replace(" ", "_")
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
    return name.lower()


def _coerce_primitive(value: Any, expected_type: Type) -> Any:
    """Converts string cells (CSV) to the primitive a field expects."""
    if not isinstance(value, str):
        if expected_type is float and isinstance(value, int):
            return float(value)
        return value

    text = value.strip()
    if expected_type is bool:
        lowered = text.lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        raise ValueError(f"Cannot interpret {value!r} as a boolean.")
    if expected_type is int:
        # Layout tools sometimes export integers as "12.0"
        number = _parse_finite_float(text)
        if not number.is_integer():
            raise ValueError(f"Expected an integer, got {value!r}.")
        return int(number)
    if expected_type is float:
        return _parse_finite_float(text)
    return text


def _parse_finite_float(text: str) -> float:
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"Expected a finite number, got {text!r}.")
    return number


def _map_value(value: Any, expected_type: Type) -> Any:
    """
    Recursively maps nested lists and objects during deserialization.
    """
    origin_type = get_origin(expected_type)

    # Optional[X] -> X
    if origin_type is Union:
        inner = [t for t in get_args(expected_type) if t is not type(None)]
        if len(inner) == 1:
            return _map_value(value, inner[0])
        return value

    if origin_type in (list, List):
        inner_type = get_args(expected_type)[0]
        return [_map_value(item, inner_type) for item in value]

    if inspect.isclass(expected_type) and hasattr(
        expected_type, "__dataclass_fields__"
    ):
        return from_dict_generic(value, expected_type)

    if expected_type in (bool, int, float, str):
        return _coerce_primitive(value, expected_type)

    return value


def from_dict_generic(data: Dict[str, Any], model_type: Type[T]) -> T:
    """
    Transforms a dictionary (a JSON object or a CSV row) into a dataclass.
    Keys are matched after snake_case normalization, blank cells fall back
    to the field default, and string cells are coerced to the field type.
    """
    if not hasattr(model_type, "__dataclass_fields__"):
        raise TypeError(f"{model_type} must be a dataclass.")

    normalized = {to_snake_case(k): v for k, v in data.items() if k is not None}
    mapped_fields = {}

    for field in fields(model_type):
        raw_value = normalized.get(field.name)
        if isinstance(raw_value, str) and not raw_value.strip():
            raw_value = None

        if raw_value is not None:
            mapped_fields[field.name] = _map_value(raw_value, field.type)
        elif field.default is not MISSING:
            mapped_fields[field.name] = field.default
        elif field.default_factory is not MISSING:
            mapped_fields[field.name] = field.default_factory()
        else:
            raise ValueError(f"Missing required field '{field.name}'.")

    return model_type(**mapped_fields)
