from dailygrid.database import BaseRepository, like_pattern
from dailygrid.store.models import DailyGame, DailyPlay, UserStats

_SQL_SEARCH_GAMES_BY_KEY = r"""
    SELECT game_date, game_key, created_at FROM daily_games
    WHERE game_key LIKE ? ESCAPE '\'
    ORDER BY game_date DESC
    LIMIT ?
"""

_SQL_SEARCH_GAMES_BY_KEY_OR_DATE = r"""
    SELECT game_date, game_key, created_at FROM daily_games
    WHERE game_key LIKE :pattern ESCAPE '\' OR game_date LIKE :pattern ESCAPE '\'
    ORDER BY game_date DESC
    LIMIT :limit
"""

_SQL_LIST_GAMES_IN_RANGE = """
    SELECT game_date, game_key, created_at FROM daily_games
    WHERE game_date >= ? AND game_date <= ?
    ORDER BY game_date DESC
    LIMIT ?
"""

_SQL_LIST_PLAYS_FOR_USER = """
    SELECT id, game_date, won, score, attempts, played_at FROM daily_plays
    WHERE user_id = ?
    ORDER BY played_at DESC
    LIMIT ?
"""

_SQL_GET_STATS = """
    SELECT games_played, wins, current_streak, best_streak, total_score, updated_at
    FROM user_stats
    WHERE user_id = ?
"""


class GameRepository(BaseRepository):
    async def search_key(self, query: str, limit: int) -> list[DailyGame]:
        rows = await self._fetch(_SQL_SEARCH_GAMES_BY_KEY, (like_pattern(query), limit))
        return [DailyGame.model_validate(dict(r)) for r in rows]

    async def search_key_or_date(self, query: str, limit: int) -> list[DailyGame]:
        rows = await self._fetch(
            _SQL_SEARCH_GAMES_BY_KEY_OR_DATE, {"pattern": like_pattern(query), "limit": limit}
        )
        return [DailyGame.model_validate(dict(r)) for r in rows]

    async def list_in_range(self, start: str, end: str, limit: int) -> list[DailyGame]:
        """Games whose date key falls in [start, end], compared as strings."""
        rows = await self._fetch(_SQL_LIST_GAMES_IN_RANGE, (start, end, limit))
        return [DailyGame.model_validate(dict(r)) for r in rows]


class PlayRepository(BaseRepository):
    async def list_for_user(self, user_id: str, limit: int) -> list[DailyPlay]:
        rows = await self._fetch(_SQL_LIST_PLAYS_FOR_USER, (user_id, limit))
        return [DailyPlay.model_validate(dict(r)) for r in rows]


class StatsRepository(BaseRepository):
    async def get(self, user_id: str) -> UserStats | None:
        rows = await self._fetch(_SQL_GET_STATS, (user_id,))
        if not rows:
            return None
        return UserStats.model_validate(dict(rows[0]))
