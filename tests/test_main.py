"""Test module for main.py functionality."""

import json
from unittest.mock import patch

import pytest

from google_photos_kit.main import build_position, main, parse_arguments, read_resources
from google_photos_kit.models.album_position import AfterMediaItem, FirstInAlbum


def test_main_help(capsys):
    """Test that the main help message is displayed correctly."""
    with pytest.raises(SystemExit) as exc_info:
        with patch("sys.argv", ["script_name", "-h"]):
            parse_arguments()

    assert exc_info.value.code == 0
    help_output = capsys.readouterr().out

    assert "Google Photos Kit" in help_output
    assert "--verbose" in help_output
    for cmd in ("albums", "media-items", "position"):
        assert cmd in help_output


@pytest.mark.parametrize("command", ["albums", "media-items", "position"])
def test_subcommand_help(command, capsys):
    """Test that each subcommand's help message is displayed correctly."""
    with pytest.raises(SystemExit) as exc_info:
        parse_arguments([command, "-h"])

    assert exc_info.value.code == 0
    help_output = capsys.readouterr().out
    assert command in help_output
    if command == "position":
        assert "--relative-id" in help_output
    else:
        assert "path" in help_output


def test_albums_command(fixtures_dir, capsys):
    """Test listing albums from a captured list response."""
    assert main(["albums", str(fixtures_dir / "albums_list.json")]) == 0

    output = capsys.readouterr().out
    assert "Trip to Kyoto" in output
    assert "Family" in output
    assert "Total albums: 2" in output


def test_media_items_command(fixtures_dir, capsys):
    """Test listing media items from a captured list response."""
    assert main(["media-items", str(fixtures_dir / "media_items_list.json")]) == 0

    output = capsys.readouterr().out
    assert "AF1QipN_photo_a" in output
    assert "4032x3024" in output
    assert "video" in output
    assert "Total media items: 2" in output


def test_position_command(capsys):
    """Test encoding a position on the command line."""
    assert main(["position", "after-media-item", "--relative-id", "XYZ"]) == 0
    output = capsys.readouterr().out
    assert json.loads(output) == {"position": "AFTER_MEDIA_ITEM", "relativeMediaItemId": "XYZ"}


def test_position_command_missing_id(capsys):
    """Test that relative positions need --relative-id."""
    assert main(["position", "after-enrichment-item"]) == 1
    assert "requires --relative-id" in capsys.readouterr().out


def test_decode_error_exit_code(tmp_path, capsys):
    """Test that decode failures are reported with a non-zero exit code."""
    path = tmp_path / "album.json"
    path.write_text(json.dumps({"id": "a"}))

    assert main(["albums", str(path)]) == 1
    assert "Missing required field 'title' in Album" in capsys.readouterr().out


def test_read_resources_shapes(tmp_path, album_payload):
    """Test the accepted file layouts."""
    single = tmp_path / "single.json"
    single.write_text(json.dumps(album_payload))
    as_list = tmp_path / "list.json"
    as_list.write_text(json.dumps([album_payload, album_payload]))

    assert read_resources(str(single), "albums") == [album_payload]
    assert len(read_resources(str(as_list), "albums")) == 2


def test_build_position(mocker):
    """Test building positions from command line names."""
    assert build_position("first") == FirstInAlbum()
    assert build_position("after-media-item", "XYZ") == AfterMediaItem("XYZ")

    mock_logger = mocker.patch("google_photos_kit.main.logger")
    assert build_position("last", "ignored").to_dict() == {"position": "LAST_IN_ALBUM"}
    mock_logger.warning.assert_called_once()
