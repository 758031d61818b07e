from dailygrid.database import BaseRepository, like_pattern
from dailygrid.store.models import Profile

_SQL_SEARCH_PROFILES = r"""
    SELECT id, username, created_at FROM profiles
    WHERE username LIKE ? ESCAPE '\'
    ORDER BY created_at DESC
    LIMIT ?
"""


class ProfileRepository(BaseRepository):
    async def search(self, query: str, limit: int) -> list[Profile]:
        rows = await self._fetch(_SQL_SEARCH_PROFILES, (like_pattern(query), limit))
        return [Profile.model_validate(dict(r)) for r in rows]
