import logging
from typing import Any, Dict, Optional
import httpx
from domain.errors import NetworkError
from infra.core_types import Notifier

logger = logging.getLogger(__name__)

class HttpNotifier(Notifier):
    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: float = 10.0):
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def post(self, url: str, payload: Dict[str, Any]) -> int:
        """POST `payload` as JSON; transport failures and non-2xx answers raise NetworkError"""
        try:
            response = await self.client.post(url, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"Failed to post message to {url}: {e}") from e

        if response.status_code // 100 != 2:
            raise NetworkError(f"Response status is not good: {response.status_code} {response.reason_phrase}")

        return response.status_code

    async def aclose(self) -> None:
        await self.client.aclose()
