"""Tests for configuration persistence, clamping and logging filters."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from config.settings import DEFAULT_CONFIG, CaptureSettings, ConfigManager, LogMessageFilter, clamp, setup_logging


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "config.json")

    assert not manager.exists
    assert manager.capture_settings() == CaptureSettings()
    assert manager.validate_config() == []


def test_defaults_are_not_shared(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "config.json")
    manager.config["logging"]["log_filter"].append("noise")

    assert DEFAULT_CONFIG["logging"]["log_filter"] == []


def test_save_and_reload_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    manager = ConfigManager(path)
    manager.set("capture", "capture_name", "Player")
    manager.set("capture", "capture_percentage", 0.4)

    assert manager.save_config()
    reloaded = ConfigManager(path)

    assert reloaded.get("capture", "capture_name") == "Player"
    assert reloaded.get("capture", "capture_percentage") == 0.4


def test_load_merges_and_clamps(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "capture": {"capture_interval": 10, "resolution_width": 4096, "unknown": 1},
        "extra": {"ignored": True},
    }))

    settings = ConfigManager(path).capture_settings()

    assert settings.capture_interval == 500
    assert settings.resolution_width == 1024
    assert settings.resolution_height == 288


def test_corrupt_file_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json")

    assert ConfigManager(path).capture_settings() == CaptureSettings()


def test_set_clamps_capture_values(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "config.json")

    manager.set("capture", "capture_percentage", 0.01)
    manager.set("capture", "kmeans_threshold", 50)

    assert manager.get("capture", "capture_percentage") == 0.05
    assert manager.get("capture", "kmeans_threshold") == 20.0


def test_validate_reports_bad_values(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "config.json")
    manager.config["capture"]["capture_interval"] = "fast"
    manager.config["capture"]["ignore_black_pixels"] = "yes"

    errors = manager.validate_config()

    assert any("capture_interval" in e for e in errors)
    assert any("ignore_black_pixels" in e for e in errors)


def test_interactive_setup_asks_and_saves(tmp_path: Path) -> None:
    answers = iter(["Video Player", "fifty", "50", "250", "", "y"])
    path = tmp_path / "config.json"
    manager = ConfigManager(path)

    manager.interactive_setup(ask=lambda prompt: next(answers))

    settings = manager.capture_settings()
    assert settings.capture_name == "Video Player"
    assert settings.capture_percentage == 0.5
    assert settings.capture_interval == 500
    assert settings.use_virtual_screen is False
    assert settings.ignore_black_pixels is False
    assert path.exists()


def test_clamp() -> None:
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10
    assert clamp(5, 10, 0) == 10


def test_log_filter_drops_matching_messages() -> None:
    log_filter = LogMessageFilter(["Capture Bounds"])

    def record(message: str) -> logging.LogRecord:
        return logging.LogRecord("test", logging.INFO, __file__, 1, message, None, None)

    assert not log_filter.filter(record("capture bounds: 0x 0y"))
    assert log_filter.filter(record("Now observing Desktop"))
    assert LogMessageFilter().filter(record("anything"))


def test_unknown_log_level_falls_back_to_info(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging(level="VERBOSE", log_dir=tmp_path / "logs", file_enabled=False)

        assert root.level == logging.INFO
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


def test_unknown_log_level_in_file_is_reset(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"logging": {"level": "VERBOSE"}}))

    manager = ConfigManager(path)

    assert manager.get("logging", "level") == "INFO"
    assert manager.validate_config() == []


def test_wrongly_typed_capture_values_use_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "capture": {"capture_interval": "fast", "ignore_black_pixels": "false", "capture_name": None},
        "logging": {"log_filter": "noise"},
    }))

    manager = ConfigManager(path)
    settings = manager.capture_settings()

    assert settings.capture_interval == 1000
    assert settings.ignore_black_pixels is True
    assert settings.capture_name == ""
    assert manager.get("logging", "log_filter") == []
    assert manager.validate_config() == []
    assert not manager.load_failed


def test_non_object_section_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"capture": "everything"}))

    assert ConfigManager(path).capture_settings() == CaptureSettings()


def test_unparseable_file_needs_setup(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]")
    manager = ConfigManager(path)

    assert manager.exists
    assert manager.load_failed
    assert manager.needs_setup

    answers = iter(["", "100", "1000", "", ""])
    manager.interactive_setup(ask=lambda prompt: next(answers))

    assert not ConfigManager(path).needs_setup


def test_missing_file_needs_setup(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "config.json")

    assert not manager.load_failed
    assert manager.needs_setup
