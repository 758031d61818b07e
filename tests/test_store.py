import pytest

from dailygrid.database import Database, like_pattern
from dailygrid.store import (
    BadgeRepository,
    CommentRepository,
    GameRepository,
    PostRepository,
    ProfileRepository,
    StatsRepository,
    ThreadRepository,
    UserBadgeRepository,
)


class TestLikePattern:
    def test_wraps_query(self):
        assert like_pattern("liam") == "%liam%"

    def test_escapes_wildcards(self):
        assert like_pattern("50%_off") == r"%50\%\_off%"

    def test_escapes_backslash(self):
        assert like_pattern("a\\b") == r"%a\\b%"


class TestProfileSearch:
    @pytest.mark.asyncio
    async def test_case_insensitive_substring(self, db: Database):
        profiles = await ProfileRepository(db.conn).search("LIAM", 10)
        # newest first
        assert [p.username for p in profiles] == ["liamwright", "liam"]

    @pytest.mark.asyncio
    async def test_wildcards_match_literally(self, db: Database):
        repo = ProfileRepository(db.conn)
        assert await repo.search("li_m", 10) == []
        assert await repo.search("%", 10) == []

    @pytest.mark.asyncio
    async def test_limit(self, db: Database):
        assert len(await ProfileRepository(db.conn).search("liam", 1)) == 1


class TestForumRepositories:
    @pytest.mark.asyncio
    async def test_thread_kind_column(self, db: Database):
        threads = await ThreadRepository(db.conn).search_title("thread", 10)
        assert [(t.id, t.thread_kind) for t in threads] == [(1, "daily_live"), (2, "ongoing")]

    @pytest.mark.asyncio
    async def test_threads_by_date(self, db: Database):
        repo = ThreadRepository(db.conn)
        assert [t.id for t in await repo.list_for_date("2026-02-10", 10)] == [2]
        assert [t.id for t in await repo.search_title_or_date("2026-02-1", 10)] == [1, 2]

    @pytest.mark.asyncio
    async def test_post_carries_thread_and_author(self, db: Database):
        posts = await PostRepository(db.conn).search_body("transit dip", 10)

        assert len(posts) == 1
        post = posts[0]
        assert post.username == "liam"
        assert post.thread_title == "Live Thread - 2026-02-11"
        assert post.thread_kind == "daily_live"
        assert post.thread_puzzle_date == "2026-02-11"

    @pytest.mark.asyncio
    async def test_comments(self, db: Database):
        repo = CommentRepository(db.conn)
        assert [c.id for c in await repo.search_body("transit", 10)] == [2]
        assert [c.username for c in await repo.list_for_date("2026-02-11", 10)] == ["nova"]
        assert [c.id for c in await repo.search_body_or_date("2026-01", 10)] == [2]


class TestGameRepositories:
    @pytest.mark.asyncio
    async def test_games_in_range(self, db: Database):
        games = await GameRepository(db.conn).list_in_range("2026-02-01", "2026-02-31", 10)
        assert [g.game_date for g in games] == ["2026-02-11", "2026-02-10"]

    @pytest.mark.asyncio
    async def test_games_by_key_or_date(self, db: Database):
        games = await GameRepository(db.conn).search_key_or_date("2025-12", 10)
        assert [g.game_key for g in games] == ["lightcurve-2025-12-25"]

    @pytest.mark.asyncio
    async def test_stats(self, db: Database):
        repo = StatsRepository(db.conn)
        stats = await repo.get("u-liam")
        assert stats is not None
        assert (stats.games_played, stats.wins, stats.total_score) == (12, 9, 840)
        assert await repo.get("u-nobody") is None


class TestBadgeRepositories:
    @pytest.mark.asyncio
    async def test_catalog_search(self, db: Database):
        repo = BadgeRepository(db.conn)
        assert [b.slug for b in await repo.search("streak", 10)] == ["streak-7"]
        assert [b.slug for b in await repo.search_by_slug("first-win", 10)] == ["first-win"]

    @pytest.mark.asyncio
    async def test_user_badges_keep_missing_catalog_entries(self, db: Database):
        owned = await UserBadgeRepository(db.conn).list_for_user("u-liam", 10)

        assert len(owned) == 2
        assert owned[0].badge is None
        assert owned[1].badge is not None
        assert owned[1].badge.name == "First Win"


class TestDatabase:
    def test_conn_before_connect(self, tmp_path):
        with pytest.raises(RuntimeError):
            Database(tmp_path / "x.db").conn
