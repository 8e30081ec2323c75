"""
Configuration management using Pydantic Settings for robust validation and environment handling.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings
from pathlib import Path

from brigade_types import ExportFormat


class KitchenConfig(BaseSettings):
    """Fulfillment engine behaviour."""

    rollback_partial_replenishment: bool = Field(
        default=False,
        description="Return already withdrawn stock to backup when a station's replenishment fails part-way"
    )
    verbose_trace: bool = Field(
        default=False,
        description="Include per-ingredient withdrawal lines in the rendered trace"
    )

    class Config:
        env_prefix = "KITCHEN_"


class MetricsConfig(BaseSettings):
    """Metrics export configuration."""

    output_dir: Path = Field(
        default=Path("./data/metrics"),
        description="Directory for exported run metrics"
    )
    export_format: ExportFormat = Field(
        default=ExportFormat.CSV,
        description="Export format (csv or json)"
    )

    class Config:
        env_prefix = "METRICS_"


class Settings(BaseSettings):
    """Main application settings."""

    # Environment
    environment: str = Field(
        default="development",
        description="Application environment"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Component configurations
    kitchen: KitchenConfig = Field(default_factory=KitchenConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() in ("development", "dev")

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() in ("production", "prod")


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(config_file: Optional[Path] = None) -> Settings:
    """Load settings from file or environment."""
    global _settings

    if config_file and config_file.exists():
        import yaml
        with open(config_file) as f:
            config_data = yaml.safe_load(f) or {}

        transformed_data = {}

        for key in ['environment', 'log_level', 'debug']:
            if key in config_data:
                transformed_data[key] = config_data[key]

        # Nested sections are built explicitly so their env prefixes still apply to unset keys
        if 'kitchen' in config_data:
            transformed_data['kitchen'] = KitchenConfig(**config_data['kitchen'])
        if 'metrics' in config_data:
            transformed_data['metrics'] = MetricsConfig(**config_data['metrics'])

        _settings = Settings(**transformed_data)
    else:
        _settings = Settings()

    return _settings
