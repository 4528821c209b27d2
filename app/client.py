from __future__ import annotations

import logging

import httpx

from .config import Settings
from .errors import RemoteTransportFailure, Result

logger = logging.getLogger(__name__)


class CCBClient:
    """Authenticated client for the CCB individual search API.

    Every failure is logged and returned inside a Result; nothing is raised
    except cancellation.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            auth=httpx.BasicAuth(self.settings.username, self.settings.password),
            timeout=self.settings.request_timeout,
            transport=self._transport,
        )

    async def search_individuals(self, params: dict[str, str], body: bytes = b"") -> Result[bytes]:
        query = {"srv": self.settings.search_service, **params}
        try:
            async with self._client() as client:
                response = await client.post(
                    self.settings.search_url,
                    params=query,
                    content=body,
                    headers={"Content-Type": "application/xml"},
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("CCB search returned HTTP %s", e.response.status_code)
            return Result.fail(RemoteTransportFailure(f"HTTP {e.response.status_code}"))
        except httpx.HTTPError as e:
            logger.error("CCB search failed: %s", e)
            return Result.fail(RemoteTransportFailure(str(e) or type(e).__name__))
        logger.debug("CCB search response: %r", response.content)
        return Result.ok(response.content)


__all__ = ["CCBClient"]
