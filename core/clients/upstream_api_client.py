"""
Upstream API Client for fetching JSON resources.

This module provides a client bound to a single upstream base URL. Every
call goes through the request helper, so failures come back as results
instead of exceptions.
"""

import logging
from typing import Optional, Union
import httpx

from core.util import HttpResult, execute


logger = logging.getLogger(__name__)


class UpstreamAPIClient:
    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip('/')
        self.client = httpx.AsyncClient(timeout=None, transport=transport)

        logger.info(f"Upstream API Client initialized: {self.base_url}")

    async def get_json(
        self,
        path: str,
        params: Optional[Union[dict, list[tuple[str, str]]]] = None,
        headers: Optional[dict] = None
    ) -> HttpResult:
        """
        Fetch a JSON resource relative to the base URL.

        Args:
            path: Resource path, with or without a leading slash
            params: Query parameters, as a mapping or a list of pairs for repeated keys
            headers: Extra request headers

        Returns:
            Ok with the decoded payload, or Err with the failure
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.info(f"Fetching upstream resource: url={url}, params={params}")

        result = await execute(
            url,
            {"params": params, "headers": headers},
            client=self.client
        )

        if not result.is_ok:
            logger.warning(
                f"Upstream request failed: url={url}, kind={result.kind}, "
                f"message={result.message}"
            )
            return result

        logger.info(f"Successfully fetched upstream resource: url={url}")
        return result

    async def close(self) -> None:
        await self.client.aclose()
        logger.info("Upstream API Client closed")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
