from skillchat.ai.factory import get_skills_text_generator
from skillchat.tutorials import get_default_resolver

from .analyzer import SkillGapAnalyzer
from .web_search import TavilyWebSearch


def get_skill_gap_analyzer() -> SkillGapAnalyzer:
    return SkillGapAnalyzer(
        resolver=get_default_resolver(),
        web_search=TavilyWebSearch(),
        text_generator=get_skills_text_generator(),
    )


__all__ = ["SkillGapAnalyzer", "TavilyWebSearch", "get_skill_gap_analyzer"]
