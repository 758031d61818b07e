from dailygrid.database import BaseRepository, like_pattern
from dailygrid.store.models import Badge, UserBadge

_BADGE_COLUMNS = "id, slug, name, description, kind AS badge_kind, threshold"

_SQL_SEARCH_BADGES = rf"""
    SELECT {_BADGE_COLUMNS} FROM badges
    WHERE name LIKE :pattern ESCAPE '\'
       OR description LIKE :pattern ESCAPE '\'
       OR kind LIKE :pattern ESCAPE '\'
    LIMIT :limit
"""

_SQL_SEARCH_BADGES_BY_SLUG = rf"""
    SELECT {_BADGE_COLUMNS} FROM badges
    WHERE slug LIKE :pattern ESCAPE '\'
       OR name LIKE :pattern ESCAPE '\'
       OR description LIKE :pattern ESCAPE '\'
    ORDER BY id ASC
    LIMIT :limit
"""

_SQL_LIST_USER_BADGES = """
    SELECT ub.awarded_at,
           b.id AS badge_id, b.slug, b.name, b.description, b.kind AS badge_kind, b.threshold
    FROM user_badges ub
    LEFT JOIN badges b ON b.id = ub.badge_id
    WHERE ub.user_id = ?
    ORDER BY ub.awarded_at DESC
    LIMIT ?
"""


class BadgeRepository(BaseRepository):
    async def search(self, query: str, limit: int) -> list[Badge]:
        """Catalog badges matching name, description or kind."""
        rows = await self._fetch(_SQL_SEARCH_BADGES, {"pattern": like_pattern(query), "limit": limit})
        return [Badge.model_validate(dict(r)) for r in rows]

    async def search_by_slug(self, query: str, limit: int) -> list[Badge]:
        """Catalog badges matching slug, name or description, in catalog order."""
        rows = await self._fetch(_SQL_SEARCH_BADGES_BY_SLUG, {"pattern": like_pattern(query), "limit": limit})
        return [Badge.model_validate(dict(r)) for r in rows]


class UserBadgeRepository(BaseRepository):
    async def list_for_user(self, user_id: str, limit: int) -> list[UserBadge]:
        rows = await self._fetch(_SQL_LIST_USER_BADGES, (user_id, limit))
        return [_user_badge(dict(r)) for r in rows]


def _user_badge(row: dict) -> UserBadge:
    badge = None
    if row["badge_id"] is not None:
        badge = Badge(
            id=row["badge_id"],
            slug=row["slug"],
            name=row["name"],
            description=row["description"],
            badge_kind=row["badge_kind"],
            threshold=row["threshold"],
        )
    return UserBadge(awarded_at=row["awarded_at"], badge=badge)
