class BetCatalogError(Exception):
    """Base exception for bet catalog errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class BetCatalogUnavailableError(BetCatalogError):
    """Catalog unreachable or kept failing after retries."""

    pass


class BetCatalogResponseError(BetCatalogError):
    """Catalog answered with a payload that could not be understood."""

    pass
