"""Exceptions raised while decoding Google Photos resources."""


class GooglePhotosError(Exception):
    """Base exception for Google Photos operations."""


class DecodeError(GooglePhotosError):
    """Raised when a JSON payload cannot be turned into a resource."""


class MissingFieldError(DecodeError):
    """Raised when a required key is absent from a JSON object."""

    def __init__(self, field_name: str, type_name: str):
        self.field_name = field_name
        self.type_name = type_name
        super().__init__(f"Missing required field '{field_name}' in {type_name}")


class TypeMismatchError(DecodeError):
    """Raised when a value is present but has the wrong JSON type."""

    def __init__(self, field_name: str, expected_type: str):
        self.field_name = field_name
        self.expected_type = expected_type
        super().__init__(f"Field '{field_name}' is not a valid {expected_type}")


class UnrecognizedMediaTypeError(DecodeError):
    """Raised when media metadata carries neither photo nor video data."""

    def __init__(self):
        super().__init__("Media metadata contains neither 'photo' nor 'video'")


class MalformedTimestampError(DecodeError):
    """Raised when a timestamp is not in RFC3339 format."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Malformed RFC3339 timestamp: {raw!r}")


class InvalidDurationError(DecodeError):
    """Raised when a duration string cannot be parsed or is out of range."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Invalid duration: {raw!r}")


class UnrecognizedEnumValueError(DecodeError):
    """Raised when a wire string matches no member of an enumeration."""

    def __init__(self, raw: str, enum_name: str):
        self.raw = raw
        self.enum_name = enum_name
        super().__init__(f"Unrecognized {enum_name} value: {raw!r}")
