import aiosqlite

from dailygrid.logging import get_logger

_logger = get_logger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS profiles (
    id TEXT PRIMARY KEY,
    username TEXT UNIQUE,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS forum_threads (
    id INTEGER PRIMARY KEY,
    puzzle_date TEXT NOT NULL,
    kind TEXT NOT NULL CHECK (kind IN ('daily_live', 'ongoing')),
    title TEXT NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_forum_threads_date ON forum_threads(puzzle_date DESC);

CREATE TABLE IF NOT EXISTS forum_posts (
    id INTEGER PRIMARY KEY,
    thread_id INTEGER NOT NULL REFERENCES forum_threads(id),
    user_id TEXT REFERENCES profiles(id),
    body TEXT NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_forum_posts_created ON forum_posts(created_at DESC);

CREATE TABLE IF NOT EXISTS comments (
    id INTEGER PRIMARY KEY,
    user_id TEXT REFERENCES profiles(id),
    game_date TEXT NOT NULL,
    body TEXT NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_comments_date ON comments(game_date);

CREATE TABLE IF NOT EXISTS daily_games (
    game_date TEXT PRIMARY KEY,
    game_key TEXT NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS daily_plays (
    id INTEGER PRIMARY KEY,
    user_id TEXT NOT NULL REFERENCES profiles(id),
    game_date TEXT NOT NULL,
    won INTEGER NOT NULL DEFAULT 0,
    score INTEGER NOT NULL DEFAULT 0,
    attempts INTEGER NOT NULL DEFAULT 0,
    played_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_daily_plays_user ON daily_plays(user_id, played_at DESC);

CREATE TABLE IF NOT EXISTS user_stats (
    user_id TEXT PRIMARY KEY REFERENCES profiles(id),
    games_played INTEGER NOT NULL DEFAULT 0,
    wins INTEGER NOT NULL DEFAULT 0,
    current_streak INTEGER NOT NULL DEFAULT 0,
    best_streak INTEGER NOT NULL DEFAULT 0,
    total_score INTEGER NOT NULL DEFAULT 0,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS badges (
    id INTEGER PRIMARY KEY,
    slug TEXT NOT NULL UNIQUE,
    name TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    kind TEXT NOT NULL,
    threshold INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS user_badges (
    user_id TEXT NOT NULL REFERENCES profiles(id),
    badge_id INTEGER NOT NULL REFERENCES badges(id),
    awarded_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    PRIMARY KEY (user_id, badge_id)
);

CREATE TABLE IF NOT EXISTS anomalies (
    id INTEGER PRIMARY KEY,
    content TEXT,
    tic_id TEXT,
    anomaly_type TEXT,
    anomaly_set TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""

TABLES = (
    "user_badges",
    "badges",
    "user_stats",
    "daily_plays",
    "daily_games",
    "comments",
    "forum_posts",
    "forum_threads",
    "anomalies",
    "profiles",
)


async def init_schema(conn: aiosqlite.Connection) -> None:
    await conn.executescript(SCHEMA)
    await conn.commit()
    _logger.debug("Schema ready (%d tables)", len(TABLES))
