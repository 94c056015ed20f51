from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Protocol

from .catalog import CuratedCatalog
from .normalize import normalize_skill
from .youtube import VideoSearchResult

logger = logging.getLogger(__name__)

TutorialSource = Literal[
    "curated_exact",
    "curated_partial",
    "youtube_api",
    "quota_fallback",
    "search_fallback",
]


class VideoSearch(Protocol):
    async def search(self, skill_name: str) -> VideoSearchResult:
        """Return a usable URL for the skill; must not raise."""


@dataclass(frozen=True)
class ResolvedTutorial:
    skill: str
    video: str
    source: TutorialSource

    @property
    def is_fallback(self) -> bool:
        return self.source in {"quota_fallback", "search_fallback"}

    def as_payload(self) -> dict[str, str]:
        return {"skill": self.skill, "video": self.video}


class TutorialResolver:
    def __init__(self, catalog: CuratedCatalog, video_search: VideoSearch) -> None:
        self._catalog = catalog
        self._video_search = video_search

    async def resolve(self, skill_name: str) -> ResolvedTutorial:
        found = self._catalog.match(normalize_skill(skill_name))
        if found is not None:
            logger.info(
                "curated_video skill=%s matched=%s exact=%s",
                skill_name,
                found.entry.normalized_key,
                found.exact,
            )
            return ResolvedTutorial(
                skill=skill_name,
                video=found.entry.video_url,
                source="curated_exact" if found.exact else "curated_partial",
            )

        result = await self._video_search.search(skill_name)
        return ResolvedTutorial(skill=skill_name, video=result.url, source=result.source)

    async def resolve_all(self, skill_names: list[str]) -> list[ResolvedTutorial]:
        # Sequential on purpose: one upstream call at a time, results in input order.
        resolved: list[ResolvedTutorial] = []
        for skill_name in skill_names:
            resolved.append(await self.resolve(skill_name))
        return resolved
