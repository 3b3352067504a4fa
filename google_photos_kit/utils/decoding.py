"""Helpers for decoding Google Photos JSON payloads.

The Photos Library API follows the protocol buffer JSON mapping: 64-bit
integers usually arrive as decimal strings, doubles as plain numbers.
"""

import json
import logging
import re
from typing import Any, Dict, Mapping, Optional, Sequence, Type, Union, get_args

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError

from google_photos_kit.errors import (
    DecodeError,
    InvalidDurationError,
    MalformedTimestampError,
    MissingFieldError,
    TypeMismatchError,
    UnrecognizedEnumValueError,
    UnrecognizedMediaTypeError,
)

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

ROOT_FIELD = "<root>"

_INT_STRING = re.compile(r"-?[0-9]+")

# pydantic error type -> JSON type named in TypeMismatchError
EXPECTED_TYPES = {
    "string_type": "string",
    "bool_type": "boolean",
    "int64_type": "int64",
    "float64_type": "float64",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
}


def load_json_object(raw: Union[str, bytes]) -> Dict[str, Any]:
    """Parse JSON text and make sure it holds an object.

    Args:
        raw: JSON document as text or UTF-8 bytes

    Returns:
        The decoded object

    Raises:
        TypeMismatchError: If the text is not JSON or not a JSON object
    """
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise TypeMismatchError(ROOT_FIELD, "JSON document") from e
    return ensure_object(data, ROOT_FIELD)


def ensure_object(value: Any, field_name: str) -> Dict[str, Any]:
    """Check that a decoded value is a JSON object."""
    if not isinstance(value, Mapping):
        raise TypeMismatchError(field_name, "object")
    return dict(value)


def parse_int64(value: Any) -> int:
    """Accept a 64-bit integer given either as a JSON number or a decimal string."""
    if isinstance(value, bool):
        raise PydanticCustomError("int64_type", "Input should be a valid int64")
    if isinstance(value, str):
        if not _INT_STRING.fullmatch(value):
            raise PydanticCustomError("int64_type", "Input should be a valid int64")
        value = int(value)
    elif isinstance(value, float):
        # 1920.0 is acceptable, 1920.5 is not
        if not value.is_integer():
            raise PydanticCustomError("int64_type", "Input should be a valid int64")
        value = int(value)
    elif not isinstance(value, int):
        raise PydanticCustomError("int64_type", "Input should be a valid int64")

    if not INT64_MIN <= value <= INT64_MAX:
        raise PydanticCustomError("int64_type", "Input should be a valid int64")
    return value


def parse_float64(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError("float64_type", "Input should be a valid float64")
    return float(value)


def _nested_model(annotation: Any) -> Optional[Type[BaseModel]]:
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    for arg in get_args(annotation):
        found = _nested_model(arg)
        if found is not None:
            return found
    return None


def _owner_name(model_cls: Type[BaseModel], loc: Sequence[Any]) -> str:
    """Name of the model that declares the field at the end of loc."""
    owner = model_cls
    for part in loc[:-1]:
        field = next(
            (
                info
                for name, info in owner.model_fields.items()
                if part in (name, info.alias)
            ),
            None,
        )
        nested = _nested_model(field.annotation) if field is not None else None
        if nested is None:
            break
        owner = nested
    return owner.__name__


def decode_error_from(exc: ValidationError, model_cls: Type[BaseModel]) -> DecodeError:
    """Translate the first pydantic validation error into a DecodeError.

    Args:
        exc: Error raised by model validation
        model_cls: Model that was being validated

    Returns:
        The matching DecodeError subclass
    """
    error = exc.errors()[0]
    error_type = error["type"]
    loc = error["loc"]
    ctx = error.get("ctx") or {}
    field_name = str(loc[-1]) if loc else ROOT_FIELD
    logger.debug("Validation of %s failed: %s at %s", model_cls.__name__, error_type, loc)

    if error_type == "missing":
        return MissingFieldError(field_name, _owner_name(model_cls, loc))
    if error_type == "unrecognized_media_type":
        return UnrecognizedMediaTypeError()
    if error_type == "malformed_timestamp":
        return MalformedTimestampError(ctx["raw"])
    if error_type == "invalid_duration":
        return InvalidDurationError(ctx["raw"])
    if error_type == "unrecognized_enum_value":
        return UnrecognizedEnumValueError(ctx["raw"], ctx["enum_name"])
    return TypeMismatchError(field_name, EXPECTED_TYPES.get(error_type, error_type))
