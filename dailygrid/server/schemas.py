from typing import Any

from pydantic import BaseModel

from dailygrid.search import SearchPage, Suggestion


class SuggestionsResponse(BaseModel):
    results: list[Suggestion]
    errors: dict[str, str] = {}


class ScoredRecord(BaseModel):
    kind: str
    score: int
    record: dict[str, Any]


class SearchCounts(BaseModel):
    total: int
    forum: int
    puzzle_history: int
    profiles_and_badges: int


class SearchPageResponse(BaseModel):
    query: str
    has_results: bool
    counts: SearchCounts
    sections: dict[str, list[ScoredRecord]]
    stats: ScoredRecord | None = None
    errors: dict[str, str] = {}

    @classmethod
    def from_page(cls, page: SearchPage) -> "SearchPageResponse":
        def dump(result) -> ScoredRecord:
            return ScoredRecord(kind=result.record.kind, score=result.score, record=result.record.model_dump())

        return cls(
            query=page.query,
            has_results=page.has_results,
            counts=SearchCounts(**page.counts),
            sections={name: [dump(r) for r in results] for name, results in page.sections.items()},
            stats=dump(page.stats) if page.stats else None,
            errors=page.errors,
        )
