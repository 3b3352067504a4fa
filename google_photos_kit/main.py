"""Command line tool for inspecting captured Google Photos API payloads."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from tabulate import tabulate

from google_photos_kit.errors import GooglePhotosError, TypeMismatchError
from google_photos_kit.models.album import Album
from google_photos_kit.models.album_position import (
    AfterEnrichmentItem,
    AfterMediaItem,
    AlbumPosition,
    FirstInAlbum,
    LastInAlbum,
    PositionTypeUnspecified,
)
from google_photos_kit.models.media_item import MediaItem
from google_photos_kit.utils.decoding import ROOT_FIELD, ensure_object

logger = logging.getLogger(__name__)

SIMPLE_POSITIONS = {
    "unspecified": PositionTypeUnspecified,
    "first": FirstInAlbum,
    "last": LastInAlbum,
}
RELATIVE_POSITIONS = {
    "after-media-item": AfterMediaItem,
    "after-enrichment-item": AfterEnrichmentItem,
}


def read_resources(path: str, list_key: str) -> List[Dict[str, Any]]:
    """Read resource objects from a JSON file.

    The file may hold a single resource, a JSON list of resources or a list
    response such as ``{"albums": [...]}``.

    Args:
        path: Path to the JSON file
        list_key: Key holding the resources in a list response

    Returns:
        List of raw resource objects
    """
    try:
        payload = json.loads(Path(path).read_bytes())
    except ValueError as e:
        raise TypeMismatchError(ROOT_FIELD, "JSON document") from e

    if isinstance(payload, list):
        items = payload
    else:
        payload = ensure_object(payload, ROOT_FIELD)
        if list_key not in payload:
            return [payload]
        items = payload[list_key]
        if not isinstance(items, list):
            raise TypeMismatchError(list_key, "array")
    return [ensure_object(item, list_key) for item in items]


def decode_albums(path: str) -> List[Album]:
    albums = [Album.from_dict(data) for data in read_resources(path, "albums")]
    logger.debug("Decoded %d albums from %s", len(albums), path)
    return albums


def decode_media_items(path: str) -> List[MediaItem]:
    items = [MediaItem.from_dict(data) for data in read_resources(path, "mediaItems")]
    logger.debug("Decoded %d media items from %s", len(items), path)
    return items


def build_position(kind: str, relative_id: Optional[str] = None) -> AlbumPosition:
    """Create the album position named on the command line."""
    if kind in SIMPLE_POSITIONS:
        if relative_id:
            logger.warning("--relative-id is ignored for position '%s'", kind)
        return SIMPLE_POSITIONS[kind]()
    if not relative_id:
        raise ValueError(f"Position '{kind}' requires --relative-id")
    return RELATIVE_POSITIONS[kind](relative_id)


def print_albums(albums: List[Album]) -> None:
    rows = [
        [album.id, album.title, album.total_media_items, "yes" if album.is_shared else "no"]
        for album in albums
    ]
    print(tabulate(rows, headers=["ID", "Title", "Media Items", "Shared"], tablefmt="psql"))
    print(f"\nTotal albums: {len(albums)}")


def print_media_items(items: List[MediaItem]) -> None:
    rows = []
    for item in items:
        metadata = item.media_metadata
        rows.append(
            [
                item.id,
                item.mime_type,
                "photo" if metadata.is_photo else "video",
                f"{metadata.width}x{metadata.height}",
                metadata.creation_time.to_rfc3339(),
            ]
        )
    print(
        tabulate(
            rows,
            headers=["ID", "MIME Type", "Kind", "Dimensions", "Creation Time"],
            tablefmt="psql",
        )
    )
    print(f"\nTotal media items: {len(items)}")


def parse_arguments(argv: Optional[Sequence[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Google Photos Kit payload inspector")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands", required=True)

    albums_parser = subparsers.add_parser("albums", help="Decode and list albums")
    albums_parser.add_argument("path", type=str, help="JSON file with albums")

    media_parser = subparsers.add_parser("media-items", help="Decode and list media items")
    media_parser.add_argument("path", type=str, help="JSON file with media items")

    position_parser = subparsers.add_parser("position", help="Encode an album position")
    position_parser.add_argument(
        "kind",
        choices=sorted(list(SIMPLE_POSITIONS) + list(RELATIVE_POSITIONS)),
        help="Position kind",
    )
    position_parser.add_argument(
        "--relative-id", type=str, default=None, help="Item the position is relative to"
    )

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the Google Photos Kit CLI."""
    args = parse_arguments(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == "albums":
            print_albums(decode_albums(args.path))
        elif args.command == "media-items":
            print_media_items(decode_media_items(args.path))
        elif args.command == "position":
            print(build_position(args.kind, args.relative_id).to_json())
    except (GooglePhotosError, ValueError, OSError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
