"""Exception hierarchy for the storefront search package"""


class StorefrontSearchError(Exception):
    """Base class for storefront search errors"""


class ConfigurationError(StorefrontSearchError):
    """Search configuration is missing, unreadable or fails schema validation"""

    def __init__(self, config_name: str, message: str):
        self.config_name = config_name
        super().__init__(f"{config_name}: {message}")


class CatalogLoadError(StorefrontSearchError):
    """Catalog file could not be read or has an unexpected layout"""
