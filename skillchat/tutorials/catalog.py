from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterator


@dataclass(frozen=True)
class CuratedEntry:
    normalized_key: str
    video_url: str


@dataclass(frozen=True)
class CatalogMatch:
    entry: CuratedEntry
    exact: bool


class CuratedCatalog:
    """Hand-maintained skill -> tutorial video table.

    Entries keep the declaration order of the source file. That order is the
    tie-break for partial matches: the first key that overlaps the query wins.
    """

    def __init__(self, entries: list[CuratedEntry] | tuple[CuratedEntry, ...]) -> None:
        by_key: dict[str, CuratedEntry] = {}
        for entry in entries:
            if entry.normalized_key in by_key:
                raise ValueError(f"Duplicate curated catalog key: '{entry.normalized_key}'")
            by_key[entry.normalized_key] = entry
        self._entries = tuple(entries)
        self._by_key = MappingProxyType(by_key)

    @classmethod
    def from_json(cls, path: str | Path | None = None) -> "CuratedCatalog":
        path = Path(path) if path else Path(__file__).with_name("curated_videos.json")
        with path.open("r", encoding="utf-8") as handle:
            pairs = json.load(handle, object_pairs_hook=list)
        return cls([CuratedEntry(str(key).strip().lower(), str(url).strip()) for key, url in pairs])

    def __iter__(self) -> Iterator[CuratedEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def match(self, normalized_skill: str) -> CatalogMatch | None:
        exact = self._by_key.get(normalized_skill)
        if exact is not None:
            return CatalogMatch(entry=exact, exact=True)
        for entry in self._entries:
            key = entry.normalized_key
            if key in normalized_skill or normalized_skill in key:
                return CatalogMatch(entry=entry, exact=False)
        return None

    def lookup(self, normalized_skill: str) -> str | None:
        found = self.match(normalized_skill)
        return found.entry.video_url if found else None
