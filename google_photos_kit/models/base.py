"""Base model and wire field types shared by the API resources."""

from datetime import datetime
from typing import Annotated, Any, Dict, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    PlainSerializer,
    PlainValidator,
    StrictBool,
    StrictStr,
    ValidationError,
    model_validator,
)
from pydantic_core import PydanticCustomError

from google_photos_kit.errors import InvalidDurationError, MalformedTimestampError
from google_photos_kit.models.time_types import Duration, Timestamp
from google_photos_kit.utils.decoding import (
    decode_error_from,
    load_json_object,
    parse_float64,
    parse_int64,
)


def _validate_timestamp(value: Any) -> Timestamp:
    if isinstance(value, Timestamp):
        return value
    if isinstance(value, datetime):
        return Timestamp.from_datetime(value)
    if not isinstance(value, str):
        raise PydanticCustomError("string_type", "Input should be a valid string")
    try:
        return Timestamp.from_rfc3339(value)
    except MalformedTimestampError as e:
        raise PydanticCustomError(
            "malformed_timestamp", "Malformed RFC3339 timestamp {raw}", {"raw": e.raw}
        ) from e


def _validate_duration(value: Any) -> Duration:
    if isinstance(value, Duration):
        return value
    if not isinstance(value, str):
        raise PydanticCustomError("string_type", "Input should be a valid string")
    try:
        return Duration.from_json_string(value)
    except InvalidDurationError as e:
        raise PydanticCustomError(
            "invalid_duration", "Invalid duration {raw}", {"raw": e.raw}
        ) from e


WireStr = StrictStr
WireBool = StrictBool
Int64 = Annotated[int, PlainValidator(parse_int64), PlainSerializer(str, return_type=str)]
Float64 = Annotated[float, PlainValidator(parse_float64)]
RFC3339Timestamp = Annotated[
    Timestamp,
    PlainValidator(_validate_timestamp),
    PlainSerializer(lambda value: value.to_rfc3339(), return_type=str),
]
JsonDuration = Annotated[
    Duration,
    PlainValidator(_validate_duration),
    PlainSerializer(lambda value: value.to_json_string(), return_type=str),
]


class ResourceModel(BaseModel):
    """Immutable API resource keyed by camelCase aliases on the wire.

    Null values are treated as absent, so a null required field is reported
    as missing and a null optional field falls back to None.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @classmethod
    def from_dict(cls, data: Any):
        """Decode a JSON object into this resource.

        Raises:
            DecodeError: If a required field is missing or malformed
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise decode_error_from(e, cls) from e

    @classmethod
    def from_json(cls, raw: Union[str, bytes]):
        return cls.from_dict(load_json_object(raw))

    def to_dict(self) -> Dict[str, Any]:
        """Encode into the wire shape, omitting absent optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
