from pathlib import Path

import aiosqlite


class Database:
    def __init__(self, db_path: Path):
        self.db_path = db_path
        self._conn: aiosqlite.Connection | None = None

    async def connect(self) -> None:
        self._conn = await aiosqlite.connect(self.db_path)
        self._conn.row_factory = aiosqlite.Row
        await self._conn.execute("PRAGMA journal_mode=WAL;")
        await self._conn.execute("PRAGMA synchronous=NORMAL;")
        await self._conn.execute("PRAGMA busy_timeout=30000;")

    async def close(self) -> None:
        if self._conn:
            await self._conn.close()
            self._conn = None

    @property
    def conn(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise RuntimeError("Database not connected")
        return self._conn


class BaseRepository:
    def __init__(self, conn: aiosqlite.Connection):
        self._conn = conn

    @property
    def conn(self) -> aiosqlite.Connection:
        return self._conn

    async def _fetch(self, sql: str, params: tuple | dict = ()) -> list[aiosqlite.Row]:
        rows = await self._conn.execute_fetchall(sql, params)
        return list(rows)


def like_pattern(query: str) -> str:
    """Wrap a query for a substring LIKE match, escaping LIKE wildcards."""
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
