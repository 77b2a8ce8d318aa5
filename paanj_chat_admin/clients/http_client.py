import logging
from typing import Any, Optional

import httpx

from paanj_chat_admin import config

logger = logging.getLogger(__name__)


class AdminHttpClient:
    """Admin API HTTP client using httpx.

    Implements the ``HttpClient`` interface for admin cores that do not bring
    their own.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or config.get_api_url()).rstrip("/")
        self.api_key = api_key if api_key is not None else config.get_secret_key()
        self.timeout = timeout if timeout is not None else config.get_http_timeout()
        self.transport = transport

    async def request(self, method: str, path: str, body: Optional[Any] = None) -> Any:
        """Send a request and return the decoded JSON body.

        Non-2xx responses raise ``httpx.HTTPStatusError`` from
        ``raise_for_status``; nothing is retried.
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        logger.debug(f"{method} {path}")
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            response = await client.request(
                method, f"{self.base_url}{path}", json=body, headers=headers
            )
            response.raise_for_status()

            if not response.content:
                return None
            return response.json()
