import asyncio
from collections.abc import Awaitable, Callable, Iterable
from datetime import UTC, datetime
from functools import partial
from typing import Any

import aiosqlite

from dailygrid.config import Config
from dailygrid.constants import MIN_QUERY_LENGTH, SUGGEST_DEFAULT_LIMIT, SUGGEST_MAX_LIMIT
from dailygrid.logging import get_logger
from dailygrid.search.context import QueryContext, build_context
from dailygrid.search.ranking import rank
from dailygrid.search.sources import score_record, to_suggestion
from dailygrid.search.types import ScoredResult, SearchPage, SuggestionResults
from dailygrid.store import (
    AnomalyRepository,
    BadgeRepository,
    CommentRepository,
    GameRepository,
    PlayRepository,
    PostRepository,
    ProfileRepository,
    SearchRecord,
    StatsRepository,
    ThreadRepository,
    UserBadgeRepository,
)

_logger = get_logger(__name__)

type Fetch = Callable[[], Awaitable[Any]]


def clamp_limit(value: str | int | None, default: int = SUGGEST_DEFAULT_LIMIT) -> int:
    """Parse a caller-supplied result limit, clamped to 1..SUGGEST_MAX_LIMIT."""
    if value is None:
        return default
    try:
        limit = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return default
    return max(1, min(limit, SUGGEST_MAX_LIMIT))


async def gather_sources(fetches: dict[str, Fetch]) -> tuple[dict[str, Any], dict[str, str]]:
    """Run every fetch concurrently; a failing source is reported, not raised."""
    results: dict[str, Any] = {}
    errors: dict[str, str] = {}

    async def run(name: str, fetch: Fetch) -> None:
        try:
            results[name] = await fetch()
        except Exception as e:
            _logger.warning("Search source %s failed: %s", name, e)
            errors[name] = str(e) or type(e).__name__

    async with asyncio.TaskGroup() as tg:
        for name, fetch in fetches.items():
            tg.create_task(run(name, fetch))

    return results, errors


def _merge_by(key: Callable[[Any], Any], *batches: Iterable[Any]) -> list[Any]:
    # Later rows replace earlier ones in place; first-seen order wins
    merged: dict[Any, Any] = {}
    for batch in batches:
        for row in batch:
            merged[key(row)] = row
    return list(merged.values())


def _score_all(records: Iterable[SearchRecord], ctx: QueryContext, now: datetime) -> list[tuple[ScoredResult, int]]:
    scored = []
    for record in records:
        score = score_record(record, ctx, now)
        scored.append((ScoredResult(record=record, score=score), score))
    return scored


class SearchService:
    def __init__(self, conn: aiosqlite.Connection, config: Config):
        self.config = config
        self.profiles = ProfileRepository(conn)
        self.threads = ThreadRepository(conn)
        self.posts = PostRepository(conn)
        self.comments = CommentRepository(conn)
        self.games = GameRepository(conn)
        self.plays = PlayRepository(conn)
        self.stats = StatsRepository(conn)
        self.badges = BadgeRepository(conn)
        self.user_badges = UserBadgeRepository(conn)
        self.anomalies = AnomalyRepository(conn)

    async def suggest(
        self,
        query: str,
        limit: int = SUGGEST_DEFAULT_LIMIT,
        user_id: str | None = None,
        now: datetime | None = None,
    ) -> SuggestionResults:
        query = query.strip()
        if len(query) < MIN_QUERY_LENGTH:
            return SuggestionResults(results=[])

        ctx = build_context(query)
        now = now or datetime.now(UTC)
        n = self.config.suggest_fetch_limit

        fetches: dict[str, Fetch] = {
            "profiles": partial(self.profiles.search, query, n),
            "threads": partial(self.threads.search_title_or_date, query, n),
            "posts": partial(self.posts.search_body, query, n),
            "comments": partial(self.comments.search_body_or_date, query, n),
            "games": partial(self.games.search_key_or_date, query, n),
            "badges": partial(self.badges.search, query, n),
            "anomalies": partial(self.anomalies.search, query, n),
        }
        if user_id:
            fetches["plays"] = partial(self.plays.list_for_user, user_id, self.config.suggest_play_fetch_limit)

        fetched, errors = await gather_sources(fetches)

        candidates = [
            (record, score_record(record, ctx, now))
            for name in fetches
            for record in fetched.get(name, [])
        ]
        ranked = rank(candidates, limit)
        _logger.debug("Suggestions for %r: %d of %d candidates", query, len(ranked), len(candidates))
        return SuggestionResults(results=[to_suggestion(r, query) for r in ranked], errors=errors)

    async def search_page(
        self,
        query: str,
        user_id: str | None = None,
        now: datetime | None = None,
    ) -> SearchPage:
        query = query.strip()
        page = SearchPage(query=query)
        if len(query) < MIN_QUERY_LENGTH:
            return page

        ctx = build_context(query)
        now = now or datetime.now(UTC)
        cfg = self.config
        n = cfg.page_fetch_limit

        fetches: dict[str, Fetch] = {
            "profiles": partial(self.profiles.search, query, n),
            "comments": partial(self.comments.search_body, query, n),
            "threads": partial(self.threads.search_title, query, n),
            "posts": partial(self.posts.search_body, query, n),
            "badges": partial(self.badges.search_by_slug, query, n),
            "anomalies": partial(self.anomalies.search, query, n),
            "games_by_key": partial(self.games.search_key, query, n),
        }
        if ctx.is_iso_date:
            fetches["comments_by_date"] = partial(self.comments.list_for_date, query, n)
            fetches["threads_by_date"] = partial(self.threads.list_for_date, query, n)
        if date_range := _game_date_range(ctx):
            fetches["games_by_date"] = partial(self.games.list_in_range, *date_range, n)
        if user_id:
            fetches["plays"] = partial(self.plays.list_for_user, user_id, cfg.page_play_fetch_limit)
            fetches["stats"] = partial(self.stats.get, user_id)
            fetches["my_badges"] = partial(self.user_badges.list_for_user, user_id, cfg.user_badge_fetch_limit)

        fetched, errors = await gather_sources(fetches)
        page.errors = errors

        def rows(name: str) -> list:
            return fetched.get(name) or []

        candidates: dict[str, list] = {
            "profiles": rows("profiles"),
            "threads": _merge_by(lambda t: t.id, rows("threads"), rows("threads_by_date")),
            "posts": rows("posts"),
            "comments": _merge_by(lambda c: c.id, rows("comments"), rows("comments_by_date")),
            "games": _merge_by(lambda g: g.game_date, rows("games_by_key"), rows("games_by_date")),
            "plays": rows("plays"),
            "badges": rows("badges"),
            "my_badges": rows("my_badges"),
            "anomalies": rows("anomalies"),
        }

        for name, records in candidates.items():
            limit = cfg.page_play_display_limit if name == "plays" else cfg.page_display_limit
            page.sections[name] = rank(_score_all(records, ctx, now), limit)

        if (stats := fetched.get("stats")) is not None:
            score = score_record(stats, ctx, now)
            if score > 0:
                page.stats = ScoredResult(record=stats, score=score)

        _logger.debug("Search page for %r: %d matches, %d failed sources", query, page.counts["total"], len(errors))
        return page


def _game_date_range(ctx: QueryContext) -> tuple[str, str] | None:
    if ctx.is_iso_date:
        return ctx.raw, ctx.raw
    if ctx.is_month_key:
        return f"{ctx.raw}-01", f"{ctx.raw}-31"
    if ctx.is_year_key:
        return f"{ctx.raw}-01-01", f"{ctx.raw}-12-31"
    return None
