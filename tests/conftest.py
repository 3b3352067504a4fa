"""Test configuration for pytest."""

import copy
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# Add the project root directory to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

ALBUM = {
    "id": "album_1",
    "title": "Summer 2024",
    "productUrl": "https://photos.google.com/lr/album/album_1",
    "isWriteable": "true",
    "totalMediaItems": "42",
    "coverPhotoBaseUrl": "https://lh3.googleusercontent.com/lr/cover_1",
}

SHARE_INFO = {
    "sharedAlbumOptions": {"isCollaborative": True, "isCommentable": False},
    "shareableUrl": "https://photos.app.goo.gl/share_1",
    "shareToken": "share_token_1",
}

PHOTO_ITEM = {
    "id": "photo_1",
    "description": "Sunset at the beach",
    "productUrl": "https://photos.google.com/lr/photo/photo_1",
    "baseUrl": "https://lh3.googleusercontent.com/lr/photo_1",
    "mimeType": "image/jpeg",
    "mediaMetadata": {
        "creationTime": "2014-10-02T15:01:23.045123456Z",
        "width": "1920",
        "height": "1080",
        "photo": {
            "cameraMake": "Canon",
            "cameraModel": "EOS 5D",
            "focalLength": 35.0,
            "apertureFNumber": 1.8,
            "isoEquivalent": 200,
            "exposureTime": "0.008s",
        },
    },
    "contributorInfo": {
        "profilePictureBaseUrl": "https://lh3.googleusercontent.com/a/profile_1",
        "displayName": "Jane Doe",
    },
}

VIDEO_ITEM = {
    "id": "video_1",
    "description": "Birthday party",
    "productUrl": "https://photos.google.com/lr/photo/video_1",
    "baseUrl": "https://lh3.googleusercontent.com/lr/video_1",
    "mimeType": "video/mp4",
    "mediaMetadata": {
        "creationTime": "2024-01-01T00:00:00Z",
        "width": "3840",
        "height": "2160",
        "video": {
            "cameraMake": "Apple",
            "cameraModel": "iPhone 15",
            "fps": 29.97,
            "status": "READY",
        },
    },
}


@pytest.fixture
def album_payload() -> Dict[str, Any]:
    """Album without sharing information."""
    return copy.deepcopy(ALBUM)


@pytest.fixture
def shared_album_payload() -> Dict[str, Any]:
    """Album shared by the application."""
    payload = copy.deepcopy(ALBUM)
    payload["shareInfo"] = copy.deepcopy(SHARE_INFO)
    return payload


@pytest.fixture
def photo_item_payload() -> Dict[str, Any]:
    return copy.deepcopy(PHOTO_ITEM)


@pytest.fixture
def video_item_payload() -> Dict[str, Any]:
    return copy.deepcopy(VIDEO_ITEM)


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding captured list responses."""
    return Path(__file__).parent / "fixtures"
