from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal
from urllib.parse import quote

import httpx

from skillchat.core.config import settings

logger = logging.getLogger(__name__)

YOUTUBE_SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v="
YOUTUBE_RESULTS_URL = "https://www.youtube.com/results?search_query="

VideoSource = Literal["youtube_api", "quota_fallback", "search_fallback"]


class VideoSearchError(RuntimeError):
    pass


@dataclass(frozen=True)
class VideoSearchResult:
    url: str
    source: VideoSource

    @property
    def is_fallback(self) -> bool:
        return self.source != "youtube_api"


def search_results_url(skill_name: str) -> str:
    # encodeURIComponent-compatible: spaces become %20, not '+'.
    return YOUTUBE_RESULTS_URL + quote(f"{skill_name} tutorial", safe="-_.!~*'()")


def _is_quota_exceeded(payload: Any) -> bool:
    if not isinstance(payload, dict):
        return False
    error = payload.get("error")
    if not isinstance(error, dict):
        return False
    if error.get("reason") == "quotaExceeded":
        return True
    details = error.get("errors") or []
    return any(isinstance(item, dict) and item.get("reason") == "quotaExceeded" for item in details)


class YouTubeVideoSearch:
    """Looks up the most viewed long-form tutorial for a skill.

    ``search`` never raises. Missing credentials, HTTP failures, empty result
    sets and transport errors all end in the generic results-page URL, which
    is a legitimate answer for callers rather than an error.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        timeout_s: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = (api_key if api_key is not None else settings.youtube_api_key or "").strip()
        self._timeout_s = timeout_s if timeout_s is not None else settings.youtube_timeout_s
        self._client = client

    def available(self) -> bool:
        return bool(self._api_key)

    def _params(self, skill_name: str) -> dict[str, str]:
        return {
            "part": "snippet",
            "q": f"{skill_name} tutorial",
            "type": "video",
            "videoDuration": "long",
            "order": "viewCount",
            "maxResults": "1",
            "key": self._api_key,
        }

    async def _get(self, params: dict[str, str]) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(YOUTUBE_SEARCH_URL, params=params, timeout=self._timeout_s)
        async with httpx.AsyncClient(timeout=self._timeout_s) as client:
            return await client.get(YOUTUBE_SEARCH_URL, params=params)

    async def _search_api(self, skill_name: str) -> VideoSearchResult:
        if not self.available():
            raise VideoSearchError("YouTube API key missing")

        response = await self._get(self._params(skill_name))
        if response.status_code >= 400:
            try:
                payload = response.json()
            except ValueError:
                payload = None
            if _is_quota_exceeded(payload):
                logger.info("youtube_quota_exceeded skill=%s", skill_name)
                return VideoSearchResult(url=search_results_url(skill_name), source="quota_fallback")
            raise VideoSearchError(f"YouTube API failed: {response.status_code}")

        items = response.json().get("items") or []
        video_id = None
        if items:
            video_id = (items[0].get("id") or {}).get("videoId")
        if not video_id:
            raise VideoSearchError("No videos found")

        url = f"{YOUTUBE_WATCH_URL}{video_id}"
        logger.info("youtube_video_found skill=%s url=%s", skill_name, url)
        return VideoSearchResult(url=url, source="youtube_api")

    async def search(self, skill_name: str) -> VideoSearchResult:
        try:
            return await self._search_api(skill_name)
        except Exception as exc:  # noqa: BLE001 - every failure degrades to the results page
            logger.warning("youtube_search_failed skill=%s: %s", skill_name, exc)
            return VideoSearchResult(url=search_results_url(skill_name), source="search_fallback")
