"""Unit tests for album position encoding."""

import json

import pytest

from google_photos_kit.models.album_position import (
    AfterEnrichmentItem,
    AfterMediaItem,
    FirstInAlbum,
    LastInAlbum,
    PositionType,
    PositionTypeUnspecified,
)


@pytest.mark.parametrize(
    "position, expected",
    [
        (PositionTypeUnspecified(), {"position": "POSITION_TYPE_UNSPECIFIED"}),
        (FirstInAlbum(), {"position": "FIRST_IN_ALBUM"}),
        (LastInAlbum(), {"position": "LAST_IN_ALBUM"}),
        (
            AfterMediaItem("XYZ"),
            {"position": "AFTER_MEDIA_ITEM", "relativeMediaItemId": "XYZ"},
        ),
    ],
)
def test_encode_position(position, expected):
    """Test the wire shape of each position variant."""
    assert position.to_dict() == expected
    assert json.loads(position.to_json()) == expected


def test_after_enrichment_item_carries_position():
    """Test that the enrichment variant includes the position discriminator.

    Earlier client libraries sent only relativeEnrichmentItemId for this
    variant, which the API cannot tell apart from an unspecified position.
    """
    encoded = AfterEnrichmentItem(relative_enrichment_item_id="ABC").to_dict()

    assert encoded == {
        "position": "AFTER_ENRICHMENT_ITEM",
        "relativeEnrichmentItemId": "ABC",
    }


def test_every_position_type_has_a_variant():
    """Test that each wire value is produced by exactly one variant."""
    variants = [
        PositionTypeUnspecified(),
        FirstInAlbum(),
        LastInAlbum(),
        AfterMediaItem("m"),
        AfterEnrichmentItem("e"),
    ]
    assert sorted(v.to_dict()["position"] for v in variants) == sorted(
        p.value for p in PositionType
    )


@pytest.mark.parametrize("cls", [AfterMediaItem, AfterEnrichmentItem])
@pytest.mark.parametrize("relative_id", ["", None, 5])
def test_relative_id_required(cls, relative_id):
    """Test that relative positions need a non-empty item id."""
    with pytest.raises(ValueError):
        cls(relative_id)


def test_positions_are_values():
    """Test equality and immutability of positions."""
    assert AfterMediaItem("XYZ") == AfterMediaItem("XYZ")
    assert AfterMediaItem("XYZ") != AfterEnrichmentItem("XYZ")
    assert FirstInAlbum() != LastInAlbum()

    position = AfterMediaItem("XYZ")
    with pytest.raises(AttributeError):
        position.relative_media_item_id = "other"
