"""
ConfigService tests: defaults, YAML overrides and dot-path access.
"""

from __future__ import annotations

from pathlib import Path

import yaml


def test_defaults_without_file():
    from soundgraph.services.config_service import ConfigService

    config = ConfigService()
    assert config.config_path is None
    assert config.get("audio.fft_size") == 32768
    assert config.get("audio.hertz_step") == 23.4
    assert config.get("playback.seek_threshold") == 1.0
    assert config.get("visualization.tick_interval_ms") == 16


def test_yaml_file_overrides_defaults(tmp_path: Path):
    from soundgraph.services.config_service import ConfigService

    path = tmp_path / "soundgraph.yaml"
    path.write_text(
        yaml.safe_dump({"playback": {"seek_threshold": 2.5}, "logging": {"level": "DEBUG"}}),
        encoding="utf-8",
    )

    config = ConfigService(str(path))
    assert config.get("playback.seek_threshold") == 2.5
    assert config.get("playback.default_volume") == 100
    assert config.get("logging.level") == "DEBUG"


def test_missing_file_uses_defaults(tmp_path: Path):
    from soundgraph.services.config_service import ConfigService

    config = ConfigService(str(tmp_path / "absent.yaml"))
    assert config.get("audio.fft_size") == 32768


def test_invalid_yaml_is_ignored(tmp_path: Path, caplog):
    from soundgraph.services.config_service import ConfigService

    path = tmp_path / "broken.yaml"
    path.write_text("audio: [unclosed", encoding="utf-8")

    config = ConfigService(str(path))
    assert config.get("audio.hertz_step") == 23.4
    assert "Failed to load configuration" in caplog.text


def test_get_set_and_defaults():
    from soundgraph.services.config_service import ConfigService

    config = ConfigService()
    config.set("visualization.tick_interval_ms", 33)
    config.set("custom.nested.value", "x")

    assert config.get("visualization.tick_interval_ms") == 33
    assert config.get("custom.nested.value") == "x"
    assert config.get("does.not.exist", "fallback") == "fallback"
    assert config.get("audio.fft_size.deeper", 7) == 7


def test_reload_and_reset(tmp_path: Path):
    from soundgraph.services.config_service import ConfigService

    path = tmp_path / "soundgraph.yaml"
    path.write_text(yaml.safe_dump({"audio": {"hertz_step": 10.0}}), encoding="utf-8")
    config = ConfigService(str(path))

    path.write_text(yaml.safe_dump({"audio": {"hertz_step": 20.0}}), encoding="utf-8")
    assert config.reload() is True
    assert config.get("audio.hertz_step") == 20.0

    config.reset()
    assert config.get("audio.hertz_step") == 23.4


def test_get_all_returns_copy():
    from soundgraph.services.config_service import ConfigService

    config = ConfigService()
    snapshot = config.get_all()
    snapshot["audio"]["fft_size"] = 1
    assert config.get("audio.fft_size") == 32768
