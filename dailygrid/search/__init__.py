from dailygrid.search.context import QueryContext, build_context
from dailygrid.search.ranking import rank
from dailygrid.search.scoring import score_date, score_fields, score_text
from dailygrid.search.service import SearchService, clamp_limit, gather_sources
from dailygrid.search.sources import SOURCE_FIELDS, score_record, to_suggestion
from dailygrid.search.types import ScoredResult, SearchPage, Suggestion, SuggestionResults

__all__ = [
    "SOURCE_FIELDS",
    "QueryContext",
    "ScoredResult",
    "SearchPage",
    "SearchService",
    "Suggestion",
    "SuggestionResults",
    "build_context",
    "clamp_limit",
    "gather_sources",
    "rank",
    "score_date",
    "score_fields",
    "score_record",
    "score_text",
    "to_suggestion",
]
