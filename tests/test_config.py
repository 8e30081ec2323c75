from pathlib import Path

import config
from brigade_types import ExportFormat
from config import KitchenConfig, Settings, get_settings, load_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("KITCHEN_ROLLBACK_PARTIAL_REPLENISHMENT", raising=False)
    settings = Settings()
    assert settings.kitchen.rollback_partial_replenishment is False
    assert settings.metrics.export_format == ExportFormat.CSV
    assert settings.is_development


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("KITCHEN_ROLLBACK_PARTIAL_REPLENISHMENT", "true")
    monkeypatch.setenv("METRICS_EXPORT_FORMAT", "json")
    assert KitchenConfig().rollback_partial_replenishment is True
    assert Settings().metrics.export_format == ExportFormat.JSON


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_load_settings_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "environment: production\n"
        "log_level: DEBUG\n"
        "kitchen:\n"
        "  rollback_partial_replenishment: true\n"
        "metrics:\n"
        "  output_dir: /tmp/brigade-metrics\n"
        "  export_format: json\n"
    )

    settings = load_settings(path)

    assert settings.is_production
    assert settings.log_level == "DEBUG"
    assert settings.kitchen.rollback_partial_replenishment is True
    assert settings.metrics.output_dir == Path("/tmp/brigade-metrics")
    assert settings.metrics.export_format == ExportFormat.JSON
    assert config.get_settings() is settings


def test_load_settings_without_file(tmp_path):
    settings = load_settings(tmp_path / "missing.yaml")
    assert settings.environment == "development"
