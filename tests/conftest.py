from collections.abc import AsyncGenerator
from datetime import UTC, datetime
from pathlib import Path

import aiosqlite
import pytest
import pytest_asyncio

from dailygrid.config import Config
from dailygrid.database import Database
from dailygrid.search import SearchService
from dailygrid.server.runtime import Runtime, reset_runtime
from dailygrid.store import init_schema

# Fixed clock for scoring assertions: midday after the 2026-02-11 puzzle
NOW = datetime(2026, 2, 12, 12, 0, tzinfo=UTC)

PROFILES = [
    ("u-liam", "liam", "2025-06-01T10:00:00+00:00"),
    ("u-liamw", "liamwright", "2026-01-20T10:00:00+00:00"),
    ("u-nova", "nova", "2025-01-01T00:00:00+00:00"),
]

THREADS = [
    (1, "2026-02-11", "daily_live", "Live Thread - 2026-02-11", "2026-02-10T09:00:00+00:00"),
    (2, "2026-02-10", "ongoing", "Ongoing Thread - 2026-02-10", "2026-02-09T09:00:00+00:00"),
]

POSTS = [
    (1, 1, "u-liam", "Found a transit dip near the end of the curve", "2026-02-11T12:00:00+00:00"),
    (2, 2, "u-nova", "liam nailed the flare yesterday", "2026-02-10T15:00:00+00:00"),
]

COMMENTS = [
    (1, "u-nova", "2026-02-11", "Great puzzle today", "2026-02-11T08:00:00+00:00"),
    (2, "u-liam", "2026-01-05", "Transit was subtle", "2026-01-05T08:00:00+00:00"),
]

GAMES = [
    ("2026-02-11", "lightcurve-2026-02-11", "2026-02-10T00:00:00+00:00"),
    ("2026-02-10", "lightcurve-2026-02-10", "2026-02-09T00:00:00+00:00"),
    ("2025-12-25", "lightcurve-2025-12-25", "2025-12-24T00:00:00+00:00"),
]

BADGES = [
    (1, "first-win", "First Win", "Win your first daily puzzle", "wins", 1),
    (2, "streak-7", "Week Streak", "Play seven days in a row", "streak", 7),
]

USER_BADGES = [
    ("u-liam", 1, "2026-02-01T00:00:00+00:00"),
    ("u-liam", 99, "2026-02-02T00:00:00+00:00"),  # catalog entry missing
]

ANOMALIES = [
    (1, "Possible transit at phase 0.4", "TIC 12345", "transit", "set-a", "2026-02-08T00:00:00+00:00"),
]

PLAYS = [
    (10, "u-liam", "2026-02-11", 1, 85, 2, "2026-02-11T09:00:00+00:00"),
    (11, "u-liam", "2026-02-10", 0, 0, 6, "2026-02-10T09:00:00+00:00"),
]

USER_STATS = [
    ("u-liam", 12, 9, 3, 5, 840, "2026-02-11T09:00:00+00:00"),
]


async def seed(conn: aiosqlite.Connection) -> None:
    await conn.executemany("INSERT INTO profiles (id, username, created_at) VALUES (?, ?, ?)", PROFILES)
    await conn.executemany(
        "INSERT INTO forum_threads (id, puzzle_date, kind, title, created_at) VALUES (?, ?, ?, ?, ?)", THREADS
    )
    await conn.executemany(
        "INSERT INTO forum_posts (id, thread_id, user_id, body, created_at) VALUES (?, ?, ?, ?, ?)", POSTS
    )
    await conn.executemany(
        "INSERT INTO comments (id, user_id, game_date, body, created_at) VALUES (?, ?, ?, ?, ?)", COMMENTS
    )
    await conn.executemany("INSERT INTO daily_games (game_date, game_key, created_at) VALUES (?, ?, ?)", GAMES)
    await conn.executemany(
        "INSERT INTO badges (id, slug, name, description, kind, threshold) VALUES (?, ?, ?, ?, ?, ?)", BADGES
    )
    await conn.executemany("INSERT INTO user_badges (user_id, badge_id, awarded_at) VALUES (?, ?, ?)", USER_BADGES)
    await conn.executemany(
        """INSERT INTO anomalies (id, content, tic_id, anomaly_type, anomaly_set, created_at)
           VALUES (?, ?, ?, ?, ?, ?)""",
        ANOMALIES,
    )
    await conn.executemany(
        """INSERT INTO daily_plays (id, user_id, game_date, won, score, attempts, played_at)
           VALUES (?, ?, ?, ?, ?, ?, ?)""",
        PLAYS,
    )
    await conn.executemany(
        """INSERT INTO user_stats (user_id, games_played, wins, current_streak, best_streak, total_score, updated_at)
           VALUES (?, ?, ?, ?, ?, ?, ?)""",
        USER_STATS,
    )
    await conn.commit()


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(db_path=tmp_path / "db" / "dailygrid.db")


@pytest_asyncio.fixture
async def db(config: Config) -> AsyncGenerator[Database]:
    config.db_dir.mkdir(parents=True, exist_ok=True)
    db = Database(config.database_path)
    await db.connect()
    await init_schema(db.conn)
    await seed(db.conn)
    yield db
    await db.close()


@pytest_asyncio.fixture
async def service(db: Database, config: Config) -> SearchService:
    return SearchService(db.conn, config)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest_asyncio.fixture
async def runtime(config: Config) -> AsyncGenerator[Runtime]:
    """Connected, seeded runtime installed as the server's global runtime."""
    await reset_runtime()

    runtime = Runtime(config=config)
    await runtime.connect()
    await seed(runtime.db.conn)

    import dailygrid.server.runtime as runtime_module
    runtime_module._runtime = runtime

    yield runtime

    await reset_runtime()
