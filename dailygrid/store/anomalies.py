from dailygrid.database import BaseRepository, like_pattern
from dailygrid.store.models import Anomaly

_SQL_SEARCH_ANOMALIES = r"""
    SELECT id, content, tic_id, anomaly_type, anomaly_set, created_at
    FROM anomalies
    WHERE content LIKE :pattern ESCAPE '\'
       OR tic_id LIKE :pattern ESCAPE '\'
       OR anomaly_type LIKE :pattern ESCAPE '\'
       OR anomaly_set LIKE :pattern ESCAPE '\'
    ORDER BY created_at DESC
    LIMIT :limit
"""


class AnomalyRepository(BaseRepository):
    async def search(self, query: str, limit: int) -> list[Anomaly]:
        rows = await self._fetch(_SQL_SEARCH_ANOMALIES, {"pattern": like_pattern(query), "limit": limit})
        return [Anomaly.model_validate(dict(r)) for r in rows]
