import structlog
from fastapi import APIRouter, Header

from dailygrid.search import clamp_limit
from dailygrid.server.runtime import get_runtime
from dailygrid.server.schemas import SearchPageResponse, SuggestionsResponse

router = APIRouter(tags=["search"])


@router.get("/api/search")
async def search_suggestions(
    q: str = "",
    limit: str | None = None,
    x_user_id: str | None = Header(default=None),
) -> SuggestionsResponse:
    runtime = get_runtime()
    with structlog.contextvars.bound_contextvars(endpoint="suggest", user_id=x_user_id):
        found = await runtime.search.suggest(q, limit=clamp_limit(limit), user_id=x_user_id)
    return SuggestionsResponse(results=found.results, errors=found.errors)


@router.get("/search")
async def search_page(
    q: str = "",
    x_user_id: str | None = Header(default=None),
) -> SearchPageResponse:
    runtime = get_runtime()
    with structlog.contextvars.bound_contextvars(endpoint="page", user_id=x_user_id):
        page = await runtime.search.search_page(q, user_id=x_user_id)
    return SearchPageResponse.from_page(page)
