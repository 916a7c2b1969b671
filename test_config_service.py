"""
Tests for settings persistence.
"""

import json

from photosidebar.core.models import GallerySettings
from photosidebar.services.config_service import ConfigService


def test_defaults_when_no_file(temp_dir):
    service = ConfigService(str(temp_dir / "settings.json"))
    settings = service.load_gallery_settings()

    assert settings.folder_path == ""
    assert settings.recursive is True
    assert settings.thumb_size == 96
    assert settings.thumb_height == 134


def test_missing_fields_are_merged_with_defaults():
    settings = GallerySettings.from_dict({"folderPath": " /pics ", "unknown": 1})

    assert settings.folder_path == "/pics"
    assert settings.recursive is True
    assert settings.thumb_size == 96


def test_thumb_size_is_clamped():
    assert GallerySettings.from_dict({"thumbSize": 10}).thumb_size == 64
    assert GallerySettings.from_dict({"thumbSize": 999}).thumb_size == 256
    assert GallerySettings.from_dict({"thumbSize": "abc"}).thumb_size == 96


def test_save_writes_full_record(temp_dir):
    config_file = temp_dir / "nested" / "settings.json"
    service = ConfigService(str(config_file))

    service.save_gallery_settings(GallerySettings("/pics", False, 128))

    assert json.loads(config_file.read_text()) == {
        "folderPath": "/pics", "recursive": False, "thumbSize": 128
    }
    reloaded = ConfigService(str(config_file)).load_gallery_settings()
    assert reloaded == GallerySettings("/pics", False, 128)


def test_corrupt_file_falls_back_to_defaults(temp_dir):
    config_file = temp_dir / "settings.json"
    config_file.write_text("{not json")

    settings = ConfigService(str(config_file)).load_gallery_settings()

    assert settings == GallerySettings()


def test_recursive_accepts_hand_edited_strings():
    assert GallerySettings.from_dict({"recursive": "false"}).recursive is False
    assert GallerySettings.from_dict({"recursive": " No "}).recursive is False
    assert GallerySettings.from_dict({"recursive": "TRUE"}).recursive is True
    assert GallerySettings.from_dict({"recursive": 0}).recursive is False


def test_unparseable_recursive_falls_back_to_default(temp_dir):
    config_file = temp_dir / "settings.json"
    config_file.write_text(json.dumps({"folderPath": "/pics", "recursive": "maybe"}))

    settings = ConfigService(str(config_file)).load_gallery_settings()

    assert settings.recursive is True
    assert GallerySettings.from_dict({"recursive": [False]}).recursive is True
