from .client import BetCatalogClient
from .config import BetCatalogConfig
from .exceptions import (
    BetCatalogError,
    BetCatalogResponseError,
    BetCatalogUnavailableError,
)

__all__ = [
    "BetCatalogClient",
    "BetCatalogConfig",
    "BetCatalogError",
    "BetCatalogResponseError",
    "BetCatalogUnavailableError",
]
