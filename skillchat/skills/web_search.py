from __future__ import annotations

import logging

import httpx

from skillchat.core.config import settings

logger = logging.getLogger(__name__)

TAVILY_SEARCH_URL = "https://api.tavily.com/search"


class TavilyWebSearch:
    """Plain-text search digest used as context for the skills prompt.

    Any problem (no key, HTTP error, timeout, odd payload) yields an empty
    digest; the analysis continues without web context.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        timeout_s: float | None = None,
        max_results: int = 5,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = (api_key if api_key is not None else settings.tavily_api_key or "").strip()
        self._timeout_s = timeout_s if timeout_s is not None else settings.tavily_timeout_s
        self._max_results = max_results
        self._client = client

    def available(self) -> bool:
        return bool(self._api_key)

    async def _post(self, body: dict) -> httpx.Response:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }
        if self._client is not None:
            return await self._client.post(TAVILY_SEARCH_URL, json=body, headers=headers, timeout=self._timeout_s)
        async with httpx.AsyncClient(timeout=self._timeout_s) as client:
            return await client.post(TAVILY_SEARCH_URL, json=body, headers=headers)

    async def search(self, query: str) -> str:
        if not self.available():
            logger.info("tavily_search_skipped reason=missing_api_key")
            return ""

        body = {
            "query": query,
            "search_depth": "basic",
            "include_answer": True,
            "max_results": self._max_results,
        }
        try:
            response = await self._post(body)
            if response.status_code >= 400:
                logger.warning("tavily_search_failed status=%s", response.status_code)
                return ""
            results = response.json().get("results") or []
            return "\n".join(str(item.get("content") or "") for item in results if isinstance(item, dict))
        except Exception as exc:  # noqa: BLE001 - search context is optional
            logger.warning("tavily_search_failed: %s", exc)
            return ""
