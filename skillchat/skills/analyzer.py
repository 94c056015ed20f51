from __future__ import annotations

import json
import logging
import re
from typing import Any, Protocol

from skillchat.ai.types import AIClient
from skillchat.schemas.skills import MissingSkill, SkillAnalysisResponse, SkillRoadmap
from skillchat.skills.prompt import build_search_query, build_skills_messages
from skillchat.skills.roles import FALLBACK_SKILL_KEYWORDS, advanced_skills_for, beginner_skills_for
from skillchat.tutorials import ResolvedTutorial, TutorialResolver, clean_skill_name

logger = logging.getLogger(__name__)

BEGINNER_ROADMAP_TITLE = "🚀 Beginner Roadmap - Start Here"
ADVANCED_ROADMAP_TITLE = "🎯 Advanced Skills - Master These Later"
READY_MESSAGE = "You are ready for the role! Just polish your skills and you will surely make it one day 🚀"

MAX_KEYWORD_MATCHES = 8
MAX_ROLE_FALLBACK_SKILLS = 6
ANALYSIS_TEMPERATURE = 0.1
ANALYSIS_MAX_TOKENS = 500

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


class WebSearch(Protocol):
    async def search(self, query: str) -> str: ...


class SkillsParseError(ValueError):
    pass


def has_current_skills(skills: list[str]) -> bool:
    return any(skill.strip() for skill in skills)


def parse_missing_skills(text: str) -> list[str]:
    """Read ``missing_skills`` from the first JSON object in the model output."""
    match = _JSON_OBJECT_RE.search(text or "")
    if not match:
        raise SkillsParseError("No JSON object in response")
    try:
        parsed: Any = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise SkillsParseError(str(exc)) from exc
    if not isinstance(parsed, dict):
        raise SkillsParseError("Response JSON is not an object")
    missing = parsed.get("missing_skills")
    if missing is None:
        return []
    if not isinstance(missing, list):
        raise SkillsParseError("missing_skills is not a list")
    return [str(item) for item in missing if item is not None]


def scan_skill_keywords(text: str, limit: int = MAX_KEYWORD_MATCHES) -> list[str]:
    lowered = (text or "").lower()
    return [skill for skill in FALLBACK_SKILL_KEYWORDS if skill.lower() in lowered][:limit]


def _to_models(resolved: list[ResolvedTutorial]) -> list[MissingSkill]:
    return [MissingSkill(**item.as_payload()) for item in resolved]


class SkillGapAnalyzer:
    def __init__(
        self,
        resolver: TutorialResolver,
        web_search: WebSearch,
        text_generator: AIClient | None,
    ) -> None:
        self._resolver = resolver
        self._web_search = web_search
        self._text_generator = text_generator

    async def analyze(self, role: str, company: str, skills: list[str]) -> SkillAnalysisResponse:
        if not has_current_skills(skills):
            return await self._beginner_roadmap(role)

        missing = await self._missing_skills(role, company, skills)
        logger.info("skill_gap_missing_skills count=%s skills=%s", len(missing), missing)
        if not missing:
            return SkillAnalysisResponse(status="ready", message=READY_MESSAGE)

        cleaned = [name for name in (clean_skill_name(skill) for skill in missing) if name]
        resolved = await self._resolver.resolve_all(cleaned)
        return SkillAnalysisResponse(status="missing_skills", missing_skills=_to_models(resolved))

    async def _beginner_roadmap(self, role: str) -> SkillAnalysisResponse:
        logger.info("skill_gap_onboarding role=%s", role)
        beginner = await self._resolver.resolve_all(beginner_skills_for(role))
        advanced = await self._resolver.resolve_all(advanced_skills_for(role))
        return SkillAnalysisResponse(
            status="beginner_roadmap",
            roadmaps=[
                SkillRoadmap(title=BEGINNER_ROADMAP_TITLE, skills=_to_models(beginner)),
                SkillRoadmap(title=ADVANCED_ROADMAP_TITLE, skills=_to_models(advanced)),
            ],
        )

    async def _generate(self, role: str, company: str, skills: list[str]) -> str:
        web_results = await self._web_search.search(build_search_query(role, company))
        logger.info("skill_gap_web_context chars=%s", len(web_results))
        if self._text_generator is None:
            logger.info("skill_gap_generation_skipped reason=missing_api_key")
            return ""
        messages = build_skills_messages(role, company, web_results, skills)
        return await self._text_generator.complete(
            messages,
            temperature=ANALYSIS_TEMPERATURE,
            max_tokens=ANALYSIS_MAX_TOKENS,
        )

    async def _missing_skills(self, role: str, company: str, skills: list[str]) -> list[str]:
        ai_response = await self._generate(role, company, skills)
        try:
            return parse_missing_skills(ai_response)
        except SkillsParseError as exc:
            logger.info("skill_gap_parse_failed: %s", exc)

        found = scan_skill_keywords(ai_response)
        if found:
            return found
        return beginner_skills_for(role)[:MAX_ROLE_FALLBACK_SKILLS]
