"""Configuration management for Grocery Optimizer."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .catalog import DEFAULT_STORES


@dataclass
class CatalogConfig:
    """Price catalog configuration."""

    path: Path | None = None


@dataclass
class DefaultsConfig:
    """Default values configuration."""

    stores: list[str] = field(default_factory=lambda: list(DEFAULT_STORES[:2]))
    currency_symbol: str = "$"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class Config:
    """Complete application configuration."""

    catalog: CatalogConfig
    defaults: DefaultsConfig
    logging: LoggingConfig


class ConfigManager:
    """Manages application configuration from TOML files."""

    def __init__(self, config_path: Path | None = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional explicit path to config file.
                        If not provided, searches standard locations.
        """
        self.config_path = config_path or self._find_config()
        self._config = self._load_config()

    @property
    def catalog(self) -> CatalogConfig:
        """Get catalog configuration."""
        return self._config.catalog

    @property
    def defaults(self) -> DefaultsConfig:
        """Get defaults configuration."""
        return self._config.defaults

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration."""
        return self._config.logging

    def _find_config(self) -> Path:
        """Find config file in standard locations."""
        locations = [
            Path.cwd() / "config.toml",
            Path.home() / ".config" / "grocery-optimizer" / "config.toml",
            Path.home() / ".grocery-optimizer" / "config.toml",
        ]

        for loc in locations:
            if loc.exists():
                return loc

        return Path.home() / ".config" / "grocery-optimizer" / "config.toml"

    def _load_config(self) -> Config:
        """Load configuration from TOML file."""
        if not self.config_path.exists():
            return self._default_config()

        with open(self.config_path, "rb") as f:
            data = tomllib.load(f)

        catalog_path = data.get("catalog", {}).get("path")
        defaults = DefaultsConfig()

        return Config(
            catalog=CatalogConfig(
                path=Path(catalog_path).expanduser() if catalog_path else None,
            ),
            defaults=DefaultsConfig(
                stores=list(data.get("defaults", {}).get("stores", defaults.stores)),
                currency_symbol=data.get("defaults", {}).get(
                    "currency_symbol", defaults.currency_symbol
                ),
            ),
            logging=LoggingConfig(
                level=data.get("logging", {}).get("level", "WARNING"),
            ),
        )

    def _default_config(self) -> Config:
        """Return default configuration."""
        return Config(
            catalog=CatalogConfig(),
            defaults=DefaultsConfig(),
            logging=LoggingConfig(),
        )

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get config value by dot-notation path.

        Args:
            key_path: Dot-separated path like 'defaults.currency_symbol'
            default: Default value if path not found

        Returns:
            Configuration value or default
        """
        keys = key_path.split(".")
        value: Any = self._config

        for key in keys:
            if hasattr(value, key):
                value = getattr(value, key)
            elif isinstance(value, dict):
                value = value.get(key)
                if value is None:
                    return default
            else:
                return default

        return value if value is not None else default
