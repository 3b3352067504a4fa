"""Media item resources of the Photos Library API.

See https://developers.google.com/photos/library/reference/rest/v1/mediaItems
"""

import logging
from enum import Enum
from typing import Annotated, Any, Optional, Tuple, Type, Union

from pydantic import Field, PlainSerializer, PlainValidator, model_validator
from pydantic_core import PydanticCustomError

from google_photos_kit.errors import UnrecognizedEnumValueError
from google_photos_kit.models.base import (
    Float64,
    Int64,
    JsonDuration,
    RFC3339Timestamp,
    ResourceModel,
    WireStr,
)

logger = logging.getLogger(__name__)


class VideoProcessingStatus(str, Enum):
    """Processing status of a video uploaded to Google Photos."""
    UNSPECIFIED = "UNSPECIFIED"
    PROCESSING = "PROCESSING"
    READY = "READY"
    FAILED = "FAILED"

    @classmethod
    def from_wire(cls, raw: Any) -> "VideoProcessingStatus":
        """Map a wire string to a status.

        Unknown values are rejected rather than mapped to UNSPECIFIED.

        Raises:
            UnrecognizedEnumValueError: If raw is not one of the known statuses
        """
        try:
            return cls(raw)
        except ValueError as e:
            raise UnrecognizedEnumValueError(str(raw), cls.__name__) from e


def _validate_status(value: Any) -> VideoProcessingStatus:
    if isinstance(value, VideoProcessingStatus):
        return value
    if not isinstance(value, str):
        raise PydanticCustomError("string_type", "Input should be a valid string")
    try:
        return VideoProcessingStatus.from_wire(value)
    except UnrecognizedEnumValueError as e:
        raise PydanticCustomError(
            "unrecognized_enum_value",
            "Unrecognized {enum_name} value {raw}",
            {"raw": e.raw, "enum_name": e.enum_name},
        ) from e


WireVideoStatus = Annotated[
    VideoProcessingStatus,
    PlainValidator(_validate_status),
    PlainSerializer(lambda value: value.value, return_type=str),
]


class Photo(ResourceModel):
    """Photo specific metadata such as ISO, focal length and exposure time."""

    camera_make: WireStr = Field(alias="cameraMake")
    camera_model: WireStr = Field(alias="cameraModel")
    focal_length: Float64 = Field(alias="focalLength")
    aperture_f_number: Float64 = Field(alias="apertureFNumber")
    iso_equivalent: Float64 = Field(alias="isoEquivalent")
    exposure_time: JsonDuration = Field(alias="exposureTime")


class Video(ResourceModel):
    """Video specific metadata such as frame rate and processing status."""

    camera_make: WireStr = Field(alias="cameraMake")
    camera_model: WireStr = Field(alias="cameraModel")
    fps: Float64
    status: WireVideoStatus


MediaType = Union[Photo, Video]

# Checked in this order; the first key present wins.
MEDIA_TYPE_KEYS: Tuple[Tuple[str, Type[ResourceModel]], ...] = (
    ("photo", Photo),
    ("video", Video),
)


class MediaMetadata(ResourceModel):
    """Creation time, dimensions and either photo or video metadata.

    Exactly one of ``photo`` and ``video`` is set after validation; use
    ``media_type`` to get whichever it is.
    """

    creation_time: RFC3339Timestamp = Field(alias="creationTime")
    width: Int64
    height: Int64
    photo: Optional[Photo] = None
    video: Optional[Video] = None

    @model_validator(mode="before")
    @classmethod
    def _select_media_type(cls, data: Any) -> Any:
        """Keep only the first union key present, in MEDIA_TYPE_KEYS order.

        Data under the chosen key is validated as is; malformed data there
        raises its own error and never falls through to the next key.
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)

        # Python callers may pass the union value directly
        media_type = data.pop("media_type", None)
        if media_type is None:
            media_type = data.pop("mediaType", None)
        if media_type is not None:
            for key, media_cls in MEDIA_TYPE_KEYS:
                if isinstance(media_type, media_cls):
                    data[key] = media_type

        present = [key for key, _ in MEDIA_TYPE_KEYS if data.get(key) is not None]
        if len(present) > 1:
            logger.debug("Media metadata has keys %s, using '%s'", present, present[0])
        for key in present[1:]:
            del data[key]
        return data

    @model_validator(mode="after")
    def _require_media_type(self) -> "MediaMetadata":
        if self.photo is None and self.video is None:
            raise PydanticCustomError(
                "unrecognized_media_type", "Media metadata contains neither photo nor video"
            )
        return self

    @property
    def media_type(self) -> MediaType:
        return self.photo if self.photo is not None else self.video

    @property
    def is_photo(self) -> bool:
        return self.photo is not None

    @property
    def is_video(self) -> bool:
        return self.video is not None


class ContributorInfo(ResourceModel):
    """Information about the user who added a media item to a shared album."""

    profile_picture_base_url: WireStr = Field(alias="profilePictureBaseUrl")
    display_name: WireStr = Field(alias="displayName")


class MediaItem(ResourceModel):
    """Represents a media item (photo or video) in Google Photos."""

    id: WireStr
    description: WireStr
    product_url: WireStr = Field(alias="productUrl")
    base_url: WireStr = Field(alias="baseUrl")
    mime_type: WireStr = Field(alias="mimeType")
    media_metadata: MediaMetadata = Field(alias="mediaMetadata")
    contributor_info: Optional[ContributorInfo] = Field(None, alias="contributorInfo")

    @classmethod
    def from_dict(cls, data: Any) -> "MediaItem":
        """Decode a media item JSON object.

        Args:
            data: Media item resource as returned by the API

        Returns:
            Decoded media item

        Raises:
            DecodeError: If a required field is missing or malformed
        """
        item = super().from_dict(data)
        logger.debug("Decoded media item %s (%s)", item.id, item.mime_type)
        return item
