from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable

import httpx
from pydantic import ValidationError

from schemas.bet import BetSchema

from .config import BetCatalogConfig
from .exceptions import (
    BetCatalogError,
    BetCatalogResponseError,
    BetCatalogUnavailableError,
)

logger = logging.getLogger(__name__)


class BetCatalogClient:
    """
    Read-only client for the external bet catalog.

    Can be used as an async context manager or kept as a long-lived
    instance, in which case the HTTP client is created on first use and
    released with close().
    """

    def __init__(
        self,
        config: BetCatalogConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or BetCatalogConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> BetCatalogClient:
        _ = self.client
        return self

    async def __aexit__(
        self,
        exc_type: type | None,
        exc_val: Exception | None,
        exc_tb: Any,
    ) -> None:
        await self.close()

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            limits = httpx.Limits(
                max_connections=self.config.max_connections,
                max_keepalive_connections=self.config.max_keepalive_connections,
            )
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout_seconds,
                limits=limits,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Closed BetCatalogClient")

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> Any | None:
        """Send a request, retrying rate limits, 5xx and timeouts. None on 404."""
        retry_count = 0
        last_error: Exception | None = None

        while retry_count < self.config.max_retries:
            try:
                response = await self.client.request(
                    method=method,
                    url=endpoint,
                    params=params,
                )

                if response.status_code == 404:
                    return None
                elif response.status_code == 429 or response.status_code >= 500:
                    last_error = BetCatalogError(
                        f"Catalog responded {response.status_code}",
                        status_code=response.status_code,
                    )
                    retry_count += 1
                    if retry_count < self.config.max_retries:
                        wait_time = self.config.backoff_base_seconds * 2 ** retry_count
                        logger.warning(
                            f"Bet catalog returned {response.status_code}, "
                            f"retrying in {wait_time}s..."
                        )
                        await asyncio.sleep(wait_time)
                    continue

                if response.is_error:
                    raise BetCatalogError(
                        f"Catalog rejected {method} {endpoint}: {response.status_code}",
                        status_code=response.status_code,
                    )
                return response.json()

            except httpx.TimeoutException as e:
                last_error = e
                retry_count += 1
                if retry_count < self.config.max_retries:
                    logger.warning(f"Bet catalog timeout, retrying ({retry_count})...")
                    await asyncio.sleep(self.config.backoff_base_seconds)

            except httpx.RequestError as e:
                last_error = e
                logger.error(f"Bet catalog network error: {e}")
                break

            except ValueError as e:
                raise BetCatalogResponseError(f"Catalog returned invalid JSON: {e}")

        raise BetCatalogUnavailableError(
            f"Request failed after {retry_count} retries: {last_error}",
            status_code=getattr(last_error, "status_code", None),
        )

    async def find_bets_by_ids(self, ids: Iterable[int]) -> list[BetSchema]:
        """
        Fetch the bets whose ids are in ``ids``.

        Unknown ids are simply absent from the result and order is not
        guaranteed. An empty id set returns without calling the catalog.
        """
        wanted = set(ids)
        if not wanted:
            return []

        data = await self._request(
            "GET",
            "bets",
            params={"ids": ",".join(str(i) for i in sorted(wanted))},
        )
        if data is None:
            return []

        items = data.get("bets", []) if isinstance(data, dict) else data
        if not isinstance(items, list):
            raise BetCatalogResponseError("Catalog payload is not a list of bets")

        try:
            bets = [BetSchema.model_validate(item) for item in items]
        except ValidationError as e:
            raise BetCatalogResponseError(f"Malformed bet in catalog payload: {e}")

        found = [bet for bet in bets if bet.id in wanted]
        logger.debug(f"Fetched {len(found)} of {len(wanted)} bets from catalog")
        return found
