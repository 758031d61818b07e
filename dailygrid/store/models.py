from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict

ThreadKind = Literal["daily_live", "ongoing"]


class _FrozenModel(BaseModel):
    """Read-only row from one search source.

    Timestamps stay as the strings the database returned; the scorers
    resolve them to date keys themselves.
    """

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[str]


class Profile(_FrozenModel):
    kind: ClassVar[str] = "profile"

    id: str
    username: str | None = None
    created_at: str | None = None


class ForumThread(_FrozenModel):
    kind: ClassVar[str] = "thread"

    id: int
    puzzle_date: str
    thread_kind: ThreadKind
    title: str
    created_at: str | None = None


class ForumPost(_FrozenModel):
    kind: ClassVar[str] = "post"

    id: int
    thread_id: int
    body: str
    created_at: str | None = None
    username: str | None = None
    thread_title: str | None = None
    thread_kind: ThreadKind | None = None
    thread_puzzle_date: str | None = None


class Comment(_FrozenModel):
    kind: ClassVar[str] = "comment"

    id: int
    game_date: str
    body: str
    created_at: str | None = None
    username: str | None = None


class DailyGame(_FrozenModel):
    kind: ClassVar[str] = "game"

    game_date: str
    game_key: str
    created_at: str | None = None


class Badge(_FrozenModel):
    kind: ClassVar[str] = "badge"

    id: int
    slug: str
    name: str
    description: str
    badge_kind: str
    threshold: int


class UserBadge(_FrozenModel):
    kind: ClassVar[str] = "user_badge"

    awarded_at: str | None = None
    badge: Badge | None = None


class Anomaly(_FrozenModel):
    kind: ClassVar[str] = "anomaly"

    id: int
    content: str | None = None
    tic_id: str | None = None
    anomaly_type: str | None = None
    anomaly_set: str | None = None
    created_at: str | None = None


class DailyPlay(_FrozenModel):
    kind: ClassVar[str] = "play"

    id: int
    game_date: str
    won: bool
    score: int
    attempts: int
    played_at: str | None = None


class UserStats(_FrozenModel):
    kind: ClassVar[str] = "stats"

    games_played: int = 0
    wins: int = 0
    current_streak: int = 0
    best_streak: int = 0
    total_score: int = 0
    updated_at: str | None = None


type SearchRecord = (
    Profile
    | ForumThread
    | ForumPost
    | Comment
    | DailyGame
    | Badge
    | UserBadge
    | Anomaly
    | DailyPlay
    | UserStats
)
