from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from urllib.parse import quote

from dailygrid.constants import SNIPPET_TRUNCATE, STATS_LABEL
from dailygrid.search.context import QueryContext
from dailygrid.search.scoring import score_fields
from dailygrid.search.types import Suggestion
from dailygrid.store.models import (
    Anomaly,
    Badge,
    Comment,
    DailyGame,
    DailyPlay,
    ForumPost,
    ForumThread,
    Profile,
    SearchRecord,
    UserBadge,
    UserStats,
)
from dailygrid.utils import truncate

type FieldsFn = Callable[[SearchRecord], list[str | None]]
type PresentFn = Callable[[SearchRecord, str], Suggestion]


@dataclass(frozen=True)
class SourceFields:
    text: FieldsFn
    dates: FieldsFn


def _no_dates(_record) -> list[str | None]:
    return []


def _badge_text(badge: Badge) -> list[str | None]:
    return [badge.name, badge.description, badge.badge_kind, str(badge.threshold)]


def _user_badge_text(row: UserBadge) -> list[str | None]:
    return _badge_text(row.badge) if row.badge else []


def _user_badge_dates(row: UserBadge) -> list[str | None]:
    return [row.awarded_at] if row.badge else []


SOURCE_FIELDS: dict[type, SourceFields] = {
    Profile: SourceFields(
        text=lambda r: [r.username],
        dates=lambda r: [r.created_at],
    ),
    ForumThread: SourceFields(
        text=lambda r: [r.title, r.thread_kind],
        dates=lambda r: [r.puzzle_date, r.created_at],
    ),
    ForumPost: SourceFields(
        text=lambda r: [r.body, r.thread_title],
        dates=lambda r: [r.created_at, r.thread_puzzle_date],
    ),
    Comment: SourceFields(
        text=lambda r: [r.body],
        dates=lambda r: [r.game_date, r.created_at],
    ),
    DailyGame: SourceFields(
        text=lambda r: [r.game_key],
        dates=lambda r: [r.game_date, r.created_at],
    ),
    Badge: SourceFields(text=_badge_text, dates=_no_dates),
    UserBadge: SourceFields(text=_user_badge_text, dates=_user_badge_dates),
    Anomaly: SourceFields(
        text=lambda r: [r.content, r.tic_id, r.anomaly_type, r.anomaly_set],
        dates=lambda r: [r.created_at],
    ),
    DailyPlay: SourceFields(
        text=lambda r: [str(r.id), str(r.score), str(r.attempts), "won" if r.won else "lost"],
        dates=lambda r: [r.game_date, r.played_at],
    ),
    UserStats: SourceFields(
        text=lambda r: [
            str(r.games_played),
            str(r.wins),
            str(r.current_streak),
            str(r.best_streak),
            str(r.total_score),
            STATS_LABEL,
        ],
        dates=lambda r: [r.updated_at],
    ),
}


def score_record(record: SearchRecord, ctx: QueryContext, now: datetime) -> int:
    fields = SOURCE_FIELDS[type(record)]
    return score_fields(fields.text(record), fields.dates(record), ctx, now)


# --- Presentation ---


def _search_href(query: str) -> str:
    return f"/search?q={quote(query, safe='')}"


def _snippet(text: str) -> str:
    return truncate(text, SNIPPET_TRUNCATE)


def _profile(r: Profile, _query: str) -> Suggestion:
    joined = (r.created_at or "")[:10]
    return Suggestion(kind=r.kind, title=f"@{r.username or 'anonymous'}", subtitle=f"Joined {joined}", href="/profile")


def _thread(r: ForumThread, _query: str) -> Suggestion:
    label = "Live" if r.thread_kind == "daily_live" else "Ongoing"
    return Suggestion(
        kind=r.kind,
        title=r.title,
        subtitle=f"{label} • {r.puzzle_date}",
        href=f"/discuss?date={r.puzzle_date}",
    )


def _post(r: ForumPost, query: str) -> Suggestion:
    href = f"/discuss?date={r.thread_puzzle_date}" if r.thread_puzzle_date else _search_href(query)
    return Suggestion(kind=r.kind, title="Forum post", subtitle=_snippet(r.body), href=href)


def _comment(r: Comment, _query: str) -> Suggestion:
    return Suggestion(
        kind=r.kind,
        title=f"Comment • {r.game_date}",
        subtitle=_snippet(r.body),
        href=f"/discuss?date={r.game_date}",
    )


def _game(r: DailyGame, _query: str) -> Suggestion:
    return Suggestion(
        kind=r.kind,
        title=r.game_key,
        subtitle=f"Puzzle day {r.game_date}",
        href=f"/games/today?date={r.game_date}",
    )


def _badge(r: Badge, query: str) -> Suggestion:
    return Suggestion(
        kind=r.kind,
        title=r.name,
        subtitle=f"{r.badge_kind} • threshold {r.threshold}",
        href=_search_href(query),
    )


def _user_badge(r: UserBadge, query: str) -> Suggestion:
    if r.badge is None:
        return Suggestion(kind=r.kind, title="Badge", subtitle="", href=_search_href(query))
    return _badge(r.badge, query).model_copy(update={"kind": r.kind})


def _anomaly(r: Anomaly, query: str) -> Suggestion:
    return Suggestion(
        kind=r.kind,
        title=f"Anomaly #{r.id}",
        subtitle=_snippet(r.content or r.anomaly_type or "entry"),
        href=_search_href(query),
    )


def _play(r: DailyPlay, _query: str) -> Suggestion:
    return Suggestion(
        kind=r.kind,
        title=f"{r.game_date} • {'Won' if r.won else 'Lost'}",
        subtitle=f"Score {r.score}, attempts {r.attempts}",
        href=f"/discuss?date={r.game_date}",
    )


def _stats(r: UserStats, _query: str) -> Suggestion:
    return Suggestion(
        kind=r.kind,
        title="My stats",
        subtitle=f"{r.games_played} games • {r.wins} wins • best streak {r.best_streak}",
        href="/profile",
    )


PRESENTERS: dict[type, PresentFn] = {
    Profile: _profile,
    ForumThread: _thread,
    ForumPost: _post,
    Comment: _comment,
    DailyGame: _game,
    Badge: _badge,
    UserBadge: _user_badge,
    Anomaly: _anomaly,
    DailyPlay: _play,
    UserStats: _stats,
}


def to_suggestion(record: SearchRecord, query: str) -> Suggestion:
    return PRESENTERS[type(record)](record, query)
