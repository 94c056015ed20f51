from functools import lru_cache

from .catalog import CatalogMatch, CuratedCatalog, CuratedEntry
from .normalize import clean_skill_name, normalize_skill
from .resolver import ResolvedTutorial, TutorialResolver
from .youtube import VideoSearchResult, YouTubeVideoSearch, search_results_url


@lru_cache(maxsize=1)
def get_default_catalog() -> CuratedCatalog:
    return CuratedCatalog.from_json()


def get_default_resolver() -> TutorialResolver:
    return TutorialResolver(get_default_catalog(), YouTubeVideoSearch())


__all__ = [
    "CatalogMatch",
    "CuratedCatalog",
    "CuratedEntry",
    "ResolvedTutorial",
    "TutorialResolver",
    "VideoSearchResult",
    "YouTubeVideoSearch",
    "clean_skill_name",
    "get_default_catalog",
    "get_default_resolver",
    "normalize_skill",
    "search_results_url",
]
