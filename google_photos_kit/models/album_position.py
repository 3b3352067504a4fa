"""Album positions used when adding media or enrichment items to an album.

See https://developers.google.com/photos/library/reference/rest/v1/AlbumPosition
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict


class PositionType(str, Enum):
    """Wire values of the ``position`` field."""
    POSITION_TYPE_UNSPECIFIED = "POSITION_TYPE_UNSPECIFIED"
    FIRST_IN_ALBUM = "FIRST_IN_ALBUM"
    LAST_IN_ALBUM = "LAST_IN_ALBUM"
    AFTER_MEDIA_ITEM = "AFTER_MEDIA_ITEM"
    AFTER_ENRICHMENT_ITEM = "AFTER_ENRICHMENT_ITEM"


@dataclass(frozen=True)
class AlbumPosition:
    """Base class of the position variants. Request-only, never decoded."""
    position_type: ClassVar[PositionType] = PositionType.POSITION_TYPE_UNSPECIFIED

    def _relative_fields(self) -> Dict[str, str]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        """Encode the position for a request body.

        Every variant carries ``position``; relative variants add the id of
        the item they follow.
        """
        data: Dict[str, Any] = {"position": self.position_type.value}
        data.update(self._relative_fields())
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


@dataclass(frozen=True)
class PositionTypeUnspecified(AlbumPosition):
    """Default value if the position isn't set."""
    position_type: ClassVar[PositionType] = PositionType.POSITION_TYPE_UNSPECIFIED


@dataclass(frozen=True)
class FirstInAlbum(AlbumPosition):
    """At the beginning of the album."""
    position_type: ClassVar[PositionType] = PositionType.FIRST_IN_ALBUM


@dataclass(frozen=True)
class LastInAlbum(AlbumPosition):
    """At the end of the album."""
    position_type: ClassVar[PositionType] = PositionType.LAST_IN_ALBUM


def _check_relative_id(value: Any, field_name: str) -> None:
    if not isinstance(value, str) or not value:
        raise ValueError(f"{field_name} must be a non-empty string")


@dataclass(frozen=True)
class AfterMediaItem(AlbumPosition):
    """After the media item with the given id."""
    relative_media_item_id: str
    position_type: ClassVar[PositionType] = PositionType.AFTER_MEDIA_ITEM

    def __post_init__(self):
        _check_relative_id(self.relative_media_item_id, "relative_media_item_id")

    def _relative_fields(self) -> Dict[str, str]:
        return {"relativeMediaItemId": self.relative_media_item_id}


@dataclass(frozen=True)
class AfterEnrichmentItem(AlbumPosition):
    """After the enrichment item with the given id."""
    relative_enrichment_item_id: str
    position_type: ClassVar[PositionType] = PositionType.AFTER_ENRICHMENT_ITEM

    def __post_init__(self):
        _check_relative_id(self.relative_enrichment_item_id, "relative_enrichment_item_id")

    def _relative_fields(self) -> Dict[str, str]:
        return {"relativeEnrichmentItemId": self.relative_enrichment_item_id}
