from dailygrid.store.anomalies import AnomalyRepository
from dailygrid.store.badges import BadgeRepository, UserBadgeRepository
from dailygrid.store.base import init_schema
from dailygrid.store.forum import CommentRepository, PostRepository, ThreadRepository
from dailygrid.store.games import GameRepository, PlayRepository, StatsRepository
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
from dailygrid.store.profiles import ProfileRepository

__all__ = [
    "Anomaly",
    "AnomalyRepository",
    "Badge",
    "BadgeRepository",
    "Comment",
    "CommentRepository",
    "DailyGame",
    "DailyPlay",
    "ForumPost",
    "ForumThread",
    "GameRepository",
    "PlayRepository",
    "PostRepository",
    "Profile",
    "ProfileRepository",
    "SearchRecord",
    "StatsRepository",
    "ThreadRepository",
    "UserBadge",
    "UserBadgeRepository",
    "UserStats",
    "init_schema",
]
