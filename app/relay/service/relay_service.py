"""
Relay Service for forwarding JSON reads to the configured upstream API.
"""

import logging
import os
from typing import Any, Optional, Union
import httpx
from dotenv import load_dotenv
from core.clients import UpstreamAPIClient
from core.exceptions import UpstreamConfigException
from core.util import unwrap

load_dotenv()

logger = logging.getLogger(__name__)


class RelayService:
    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        upstream_api_url = os.getenv("UPSTREAM_API_URL")

        if not upstream_api_url:
            raise UpstreamConfigException("UPSTREAM_API_URL")

        self.upstream_client = UpstreamAPIClient(
            base_url=upstream_api_url,
            transport=transport
        )

        logger.info("Relay Service initialized")

    async def relay(
        self,
        path: str,
        params: Optional[Union[dict, list[tuple[str, str]]]] = None
    ) -> Any:
        """
        Fetch ``path`` from the upstream API.

        Raises:
            RequestFailedException: If the upstream request fails
        """
        result = await self.upstream_client.get_json(path, params=params)
        return unwrap(result)

    async def close(self) -> None:
        await self.upstream_client.close()
