"""
Configuration Service
Centralized configuration management with caching and validation
"""

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from dotenv import load_dotenv
from jsonschema import SchemaError, ValidationError, validate

from ...exceptions import ConfigurationError
from ...models.scoring import ScoringWeights

logger = structlog.get_logger(__name__)

SEARCH_CONFIG = "search_config"
CONFIG_DIR_ENV = "STOREFRONT_CONFIG_DIR"


class ConfigurationService:
    """
    Centralized service for loading and caching search configuration

    Loads configurations from JSON files in the config directory with:
    - LRU caching for performance
    - JSON Schema validation
    - Hot-reload capability
    """

    def __init__(self, config_dir: Optional[str] = None, schema_dir: Optional[str] = None):
        """
        Initialize ConfigurationService

        Args:
            config_dir: Path to configuration directory. If None, uses
                $STOREFRONT_CONFIG_DIR or the packaged storefront/config
            schema_dir: Path to JSON schema directory. If None, uses the
                packaged storefront/config/schemas
        """
        load_dotenv()
        default_dir = Path(__file__).parent.parent.parent / "config"

        if config_dir is None:
            config_dir = os.getenv(CONFIG_DIR_ENV) or str(default_dir)
        self.config_dir = Path(config_dir)
        self.schema_dir = Path(schema_dir) if schema_dir else default_dir / "schemas"

        logger.info("config_service_initialized", config_dir=str(self.config_dir))

    @lru_cache(maxsize=32)
    def load_config(self, config_name: str) -> Dict[str, Any]:
        """
        Load configuration from JSON file with caching

        Args:
            config_name: Name of config file (without .json extension)

        Returns:
            Dict containing configuration data

        Raises:
            ConfigurationError: If config file is missing, invalid JSON or
                fails schema validation
        """
        config_path = self.config_dir / f"{config_name}.json"

        if not config_path.exists():
            logger.error("config_not_found", config_name=config_name, path=str(config_path))
            raise ConfigurationError(config_name, f"config file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("config_invalid_json", config_name=config_name, error=str(e))
            raise ConfigurationError(config_name, f"invalid JSON: {e}") from e

        self._validate(config_name, config)

        logger.info("config_loaded", config_name=config_name, version=config.get("version", "N/A"))
        return config

    def _validate(self, config_name: str, config: Dict[str, Any]) -> None:
        """Validate a config against its schema if one exists"""
        schema_path = self.schema_dir / f"{config_name}.schema.json"
        if not schema_path.exists():
            logger.debug("config_schema_missing", config_name=config_name)
            return

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            validate(instance=config, schema=schema)
        except ValidationError as e:
            path = ".".join(str(p) for p in e.absolute_path) or "<root>"
            raise ConfigurationError(config_name, f"schema violation at {path}: {e.message}") from e
        except SchemaError as e:
            raise ConfigurationError(config_name, f"invalid schema: {e.message}") from e

    def reload_config(self, config_name: str = SEARCH_CONFIG) -> Dict[str, Any]:
        """
        Force reload configuration (clears cache)

        Args:
            config_name: Name of config to reload

        Returns:
            Reloaded configuration
        """
        self.load_config.cache_clear()
        logger.info("config_cache_cleared", config_name=config_name)
        return self.load_config(config_name)

    # Search configuration accessors

    def get_search_config(self) -> Dict[str, Any]:
        """Get the full search configuration"""
        return self.load_config(SEARCH_CONFIG)

    def get_scoring_weights(self) -> ScoringWeights:
        """Get relevance scoring points and thresholds"""
        return ScoringWeights.from_config(self.get_search_config())

    def get_listing_config(self) -> Dict[str, Any]:
        """Get listing page settings (page size, price slider defaults)"""
        return self.get_search_config().get("listing", {})

    def get_page_size(self) -> int:
        """Get number of products shown per listing page"""
        return int(self.get_listing_config().get("page_size", 12))

    def get_default_max_price(self) -> float:
        """Price slider ceiling used when the catalog has no valid prices"""
        return float(self.get_listing_config().get("default_max_price", 500))

    def get_price_step(self) -> float:
        """Step the price slider ceiling is rounded up to"""
        return float(self.get_listing_config().get("price_step", 50))


# Global singleton instance
_config_service: Optional[ConfigurationService] = None


def get_config_service() -> ConfigurationService:
    """
    Get global ConfigurationService singleton instance

    Returns:
        ConfigurationService instance
    """
    global _config_service
    if _config_service is None:
        _config_service = ConfigurationService()
    return _config_service


def init_config_service(config_dir: Optional[str] = None) -> ConfigurationService:
    """
    Initialize global ConfigurationService with custom config directory

    Args:
        config_dir: Path to configuration directory

    Returns:
        ConfigurationService instance
    """
    global _config_service
    _config_service = ConfigurationService(config_dir)
    logger.info("global_config_service_initialized")
    return _config_service
