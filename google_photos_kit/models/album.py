"""Album resources of the Photos Library API.

See https://developers.google.com/photos/library/reference/rest/v1/albums
"""

import logging
from typing import Any, Optional

from pydantic import Field

from google_photos_kit.models.base import Int64, ResourceModel, WireBool, WireStr

logger = logging.getLogger(__name__)


class SharedAlbumOptions(ResourceModel):
    """Options that control the sharing of an album."""

    is_collaborative: WireBool = Field(alias="isCollaborative")
    is_commentable: WireBool = Field(alias="isCommentable")


class ShareInfo(ResourceModel):
    """Sharing information, present only for shared albums created by the app."""

    shared_album_options: SharedAlbumOptions = Field(alias="sharedAlbumOptions")
    shareable_url: WireStr = Field(alias="shareableUrl")
    share_token: WireStr = Field(alias="shareToken")


class Album(ResourceModel):
    """Represents an album in Google Photos."""

    id: WireStr
    title: WireStr
    product_url: WireStr = Field(alias="productUrl")
    is_writeable: WireStr = Field(alias="isWriteable")
    total_media_items: Int64 = Field(alias="totalMediaItems")
    cover_photo_base_url: WireStr = Field(alias="coverPhotoBaseUrl")
    share_info: Optional[ShareInfo] = Field(None, alias="shareInfo")

    @property
    def is_shared(self) -> bool:
        return self.share_info is not None

    @classmethod
    def from_dict(cls, data: Any) -> "Album":
        """Decode an album JSON object.

        Args:
            data: Album resource as returned by the API

        Returns:
            Decoded album

        Raises:
            DecodeError: If a required field is missing or malformed
        """
        album = super().from_dict(data)
        logger.debug("Decoded album %s (shared=%s)", album.id, album.is_shared)
        return album
