from pydantic import BaseModel


class BetCatalogConfig(BaseModel):
    """Configuration for the bet catalog client."""

    base_url: str = "http://localhost:8081/api"
    timeout_seconds: float = 10.0
    max_connections: int = 50
    max_keepalive_connections: int = 10
    max_retries: int = 3
    backoff_base_seconds: float = 0.5

    @classmethod
    def from_settings(cls, settings) -> "BetCatalogConfig":
        return cls(
            base_url=settings.bet_catalog_url,
            timeout_seconds=settings.bet_catalog_timeout_seconds,
            max_retries=settings.bet_catalog_max_retries,
        )
