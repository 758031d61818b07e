from dailygrid.database import BaseRepository, like_pattern
from dailygrid.store.models import Comment, ForumPost, ForumThread

_THREAD_COLUMNS = "id, puzzle_date, kind AS thread_kind, title, created_at"

_SQL_SEARCH_THREADS_BY_TITLE = rf"""
    SELECT {_THREAD_COLUMNS} FROM forum_threads
    WHERE title LIKE ? ESCAPE '\'
    ORDER BY puzzle_date DESC
    LIMIT ?
"""

_SQL_SEARCH_THREADS_BY_TITLE_OR_DATE = rf"""
    SELECT {_THREAD_COLUMNS} FROM forum_threads
    WHERE title LIKE :pattern ESCAPE '\' OR puzzle_date LIKE :pattern ESCAPE '\'
    ORDER BY puzzle_date DESC
    LIMIT :limit
"""

_SQL_LIST_THREADS_FOR_DATE = f"""
    SELECT {_THREAD_COLUMNS} FROM forum_threads
    WHERE puzzle_date = ?
    ORDER BY puzzle_date DESC
    LIMIT ?
"""

_SQL_SEARCH_POSTS = r"""
    SELECT p.id, p.thread_id, p.body, p.created_at,
           pr.username AS username,
           t.title AS thread_title,
           t.kind AS thread_kind,
           t.puzzle_date AS thread_puzzle_date
    FROM forum_posts p
    LEFT JOIN forum_threads t ON t.id = p.thread_id
    LEFT JOIN profiles pr ON pr.id = p.user_id
    WHERE p.body LIKE ? ESCAPE '\'
    ORDER BY p.created_at DESC
    LIMIT ?
"""

_COMMENT_SELECT = """
    SELECT c.id, c.game_date, c.body, c.created_at, pr.username AS username
    FROM comments c
    LEFT JOIN profiles pr ON pr.id = c.user_id
"""

_SQL_SEARCH_COMMENTS_BY_BODY = rf"""
    {_COMMENT_SELECT}
    WHERE c.body LIKE ? ESCAPE '\'
    ORDER BY c.created_at DESC
    LIMIT ?
"""

_SQL_SEARCH_COMMENTS_BY_BODY_OR_DATE = rf"""
    {_COMMENT_SELECT}
    WHERE c.body LIKE :pattern ESCAPE '\' OR c.game_date LIKE :pattern ESCAPE '\'
    ORDER BY c.created_at DESC
    LIMIT :limit
"""

_SQL_LIST_COMMENTS_FOR_DATE = f"""
    {_COMMENT_SELECT}
    WHERE c.game_date = ?
    ORDER BY c.created_at DESC
    LIMIT ?
"""


class ThreadRepository(BaseRepository):
    async def search_title(self, query: str, limit: int) -> list[ForumThread]:
        rows = await self._fetch(_SQL_SEARCH_THREADS_BY_TITLE, (like_pattern(query), limit))
        return [ForumThread.model_validate(dict(r)) for r in rows]

    async def search_title_or_date(self, query: str, limit: int) -> list[ForumThread]:
        rows = await self._fetch(
            _SQL_SEARCH_THREADS_BY_TITLE_OR_DATE, {"pattern": like_pattern(query), "limit": limit}
        )
        return [ForumThread.model_validate(dict(r)) for r in rows]

    async def list_for_date(self, puzzle_date: str, limit: int) -> list[ForumThread]:
        rows = await self._fetch(_SQL_LIST_THREADS_FOR_DATE, (puzzle_date, limit))
        return [ForumThread.model_validate(dict(r)) for r in rows]


class PostRepository(BaseRepository):
    async def search_body(self, query: str, limit: int) -> list[ForumPost]:
        rows = await self._fetch(_SQL_SEARCH_POSTS, (like_pattern(query), limit))
        return [ForumPost.model_validate(dict(r)) for r in rows]


class CommentRepository(BaseRepository):
    async def search_body(self, query: str, limit: int) -> list[Comment]:
        rows = await self._fetch(_SQL_SEARCH_COMMENTS_BY_BODY, (like_pattern(query), limit))
        return [Comment.model_validate(dict(r)) for r in rows]

    async def search_body_or_date(self, query: str, limit: int) -> list[Comment]:
        rows = await self._fetch(
            _SQL_SEARCH_COMMENTS_BY_BODY_OR_DATE, {"pattern": like_pattern(query), "limit": limit}
        )
        return [Comment.model_validate(dict(r)) for r in rows]

    async def list_for_date(self, game_date: str, limit: int) -> list[Comment]:
        rows = await self._fetch(_SQL_LIST_COMMENTS_FOR_DATE, (game_date, limit))
        return [Comment.model_validate(dict(r)) for r in rows]
