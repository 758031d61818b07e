from dataclasses import dataclass, field

from pydantic import BaseModel


class Suggestion(BaseModel):
    """Presentation-ready search hit."""

    kind: str
    title: str
    subtitle: str
    href: str


@dataclass
class ScoredResult[T]:
    record: T
    score: int


@dataclass
class SuggestionResults:
    results: list[Suggestion]
    errors: dict[str, str] = field(default_factory=dict)


SECTION_NAMES = (
    "profiles",
    "threads",
    "posts",
    "comments",
    "games",
    "plays",
    "badges",
    "my_badges",
    "anomalies",
)


@dataclass
class SearchPage:
    """Full search page: one ranked list per section plus the stats snapshot."""

    query: str
    sections: dict[str, list[ScoredResult]] = field(default_factory=lambda: {name: [] for name in SECTION_NAMES})
    stats: ScoredResult | None = None
    errors: dict[str, str] = field(default_factory=dict)

    def _count(self, *names: str) -> int:
        return sum(len(self.sections.get(name, [])) for name in names)

    @property
    def counts(self) -> dict[str, int]:
        return {
            "total": self._count(*SECTION_NAMES) + (1 if self.stats else 0),
            "forum": self._count("threads", "posts", "comments"),
            "puzzle_history": self._count("games", "plays"),
            "profiles_and_badges": self._count("profiles", "badges", "my_badges"),
        }

    @property
    def has_results(self) -> bool:
        return self.counts["total"] > 0
