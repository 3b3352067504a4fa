"""Models for Google Photos Kit."""

from google_photos_kit.errors import (
    DecodeError,
    GooglePhotosError,
    InvalidDurationError,
    MalformedTimestampError,
    MissingFieldError,
    TypeMismatchError,
    UnrecognizedEnumValueError,
    UnrecognizedMediaTypeError,
)
from google_photos_kit.models.album import Album, ShareInfo, SharedAlbumOptions
from google_photos_kit.models.album_position import (
    AfterEnrichmentItem,
    AfterMediaItem,
    AlbumPosition,
    FirstInAlbum,
    LastInAlbum,
    PositionType,
    PositionTypeUnspecified,
)
from google_photos_kit.models.media_item import (
    ContributorInfo,
    MediaItem,
    MediaMetadata,
    Photo,
    Video,
    VideoProcessingStatus,
)
from google_photos_kit.models.time_types import Duration, Timestamp

__all__ = [
    "AfterEnrichmentItem",
    "AfterMediaItem",
    "Album",
    "AlbumPosition",
    "ContributorInfo",
    "DecodeError",
    "Duration",
    "FirstInAlbum",
    "GooglePhotosError",
    "InvalidDurationError",
    "LastInAlbum",
    "MalformedTimestampError",
    "MediaItem",
    "MediaMetadata",
    "MissingFieldError",
    "Photo",
    "PositionType",
    "PositionTypeUnspecified",
    "ShareInfo",
    "SharedAlbumOptions",
    "Timestamp",
    "TypeMismatchError",
    "UnrecognizedEnumValueError",
    "UnrecognizedMediaTypeError",
    "Video",
    "VideoProcessingStatus",
]
