"""Timestamp and Duration values as sent by the Photos Library API.

Both types use the protocol buffer JSON forms, so parsing and formatting are
delegated to the well-known types shipped with ``protobuf``.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from google.protobuf import duration_pb2, timestamp_pb2

from google_photos_kit.errors import InvalidDurationError, MalformedTimestampError

MAX_DURATION_SECONDS = 315_576_000_000
MAX_NANOS = 999_999_999

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_DURATION_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]{1,9})?s")
_RFC3339_PATTERN = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}"
    r"(\.[0-9]{1,9})?(Z|[+-][0-9]{2}:[0-9]{2})"
)


def _truncate_micros(nanos: int) -> int:
    """Nanoseconds to microseconds, rounding toward zero."""
    return nanos // 1000 if nanos >= 0 else -(-nanos // 1000)


def is_valid_duration(seconds: int, nanos: int) -> bool:
    """Check the range and sign rules of a protobuf Duration.

    Args:
        seconds: Whole seconds of the span
        nanos: Fractional part in nanoseconds

    Returns:
        True if both parts are in range and share the same sign
    """
    if not -MAX_DURATION_SECONDS <= seconds <= MAX_DURATION_SECONDS:
        return False
    if not -MAX_NANOS <= nanos <= MAX_NANOS:
        return False
    if (seconds < 0 < nanos) or (nanos < 0 < seconds):
        return False
    return True


@dataclass(frozen=True, order=True)
class Duration:
    """Signed span of time at nanosecond resolution, e.g. ``"3.5s"`` on the wire."""
    seconds: int
    nanos: int = 0

    def __post_init__(self):
        if not is_valid_duration(self.seconds, self.nanos):
            raise ValueError(f"Duration out of range: seconds={self.seconds}, nanos={self.nanos}")

    @classmethod
    def from_json_string(cls, raw: str) -> "Duration":
        """Parse a duration such as ``"3.5s"`` or ``"-2s"``.

        Args:
            raw: Decimal number of seconds followed by the letter ``s``

        Returns:
            Parsed duration

        Raises:
            InvalidDurationError: If the string is malformed or out of range
        """
        if not isinstance(raw, str):
            raise InvalidDurationError(repr(raw))
        if not _DURATION_PATTERN.fullmatch(raw):
            raise InvalidDurationError(raw)

        message = duration_pb2.Duration()
        try:
            message.FromJsonString(raw)
        except ValueError as e:
            raise InvalidDurationError(raw) from e

        # Older protobuf releases skip the range check
        if not is_valid_duration(message.seconds, message.nanos):
            raise InvalidDurationError(raw)
        return cls(seconds=message.seconds, nanos=message.nanos)

    def to_json_string(self) -> str:
        return duration_pb2.Duration(seconds=self.seconds, nanos=self.nanos).ToJsonString()

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, truncating to microseconds."""
        return timedelta(seconds=self.seconds, microseconds=_truncate_micros(self.nanos))

    def total_seconds(self) -> float:
        return self.seconds + self.nanos / 1e9


@dataclass(frozen=True, order=True)
class Timestamp:
    """Instant in UTC with nanosecond precision."""
    seconds: int
    nanos: int = 0

    def __post_init__(self):
        if not 0 <= self.nanos <= MAX_NANOS:
            raise ValueError(f"Timestamp nanos out of range: {self.nanos}")

    @classmethod
    def from_rfc3339(cls, raw: str) -> "Timestamp":
        """Parse an RFC3339 timestamp such as ``"2014-10-02T15:01:23.045123456Z"``.

        Raises:
            MalformedTimestampError: If the string is not a valid RFC3339 timestamp
        """
        if not isinstance(raw, str):
            raise MalformedTimestampError(repr(raw))
        if not _RFC3339_PATTERN.fullmatch(raw):
            raise MalformedTimestampError(raw)

        message = timestamp_pb2.Timestamp()
        try:
            message.FromJsonString(raw)
        except ValueError as e:
            raise MalformedTimestampError(raw) from e
        return cls(seconds=message.seconds, nanos=message.nanos)

    @classmethod
    def from_datetime(cls, value: datetime) -> "Timestamp":
        """Build a timestamp from a datetime; naive values are taken as UTC."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        delta = value - _EPOCH
        seconds = delta.days * 86400 + delta.seconds
        return cls(seconds=seconds, nanos=delta.microseconds * 1000)

    def to_rfc3339(self) -> str:
        return timestamp_pb2.Timestamp(seconds=self.seconds, nanos=self.nanos).ToJsonString()

    def to_datetime(self) -> datetime:
        """Convert to an aware UTC datetime, truncating to microseconds."""
        return _EPOCH + timedelta(seconds=self.seconds, microseconds=self.nanos // 1000)
