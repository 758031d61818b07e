from collections.abc import Iterable
from datetime import UTC, datetime, time

from dailygrid.constants import (
    DATE_CONTAINS_SCORE,
    DATE_EXACT_SCORE,
    DATE_MONTH_SCORE,
    DATE_YEAR_SCORE,
    RECENCY_BONUSES,
    TEXT_CONTAINS_SCORE,
    TEXT_EXACT_SCORE,
    TEXT_PREFIX_SCORE,
    TOKEN_CONTAINS_SCORE,
    TOKEN_EXACT_SCORE,
    TOKEN_PREFIX_SCORE,
)
from dailygrid.search.context import QueryContext, date_key, key_to_date

SECONDS_PER_DAY = 86400


def score_text(field: str | None, ctx: QueryContext) -> int:
    """Score one text field against the query.

    Whole-query checks stack (an exact match is also a prefix and a
    substring). Each token then takes the first tier it reaches.
    """
    if not field:
        return 0
    value = field.lower()

    score = 0
    if value == ctx.lower:
        score += TEXT_EXACT_SCORE
    if value.startswith(ctx.lower):
        score += TEXT_PREFIX_SCORE
    if ctx.lower in value:
        score += TEXT_CONTAINS_SCORE

    for token in ctx.tokens:
        if value == token:
            score += TOKEN_EXACT_SCORE
        elif value.startswith(token):
            score += TOKEN_PREFIX_SCORE
        elif token in value:
            score += TOKEN_CONTAINS_SCORE

    return score


def recency_bonus(key: str, now: datetime) -> int:
    day = key_to_date(key)
    if day is None:
        return 0
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    midnight = datetime.combine(day, time.min, tzinfo=UTC)
    days = abs((now - midnight).total_seconds()) / SECONDS_PER_DAY
    for max_days, bonus in RECENCY_BONUSES:
        if days <= max_days:
            return bonus
    return 0


def score_date(field: str | None, ctx: QueryContext, now: datetime) -> int:
    key = date_key(field)
    if key is None:
        return 0

    score = 0
    if ctx.is_iso_date and key == ctx.raw:
        score += DATE_EXACT_SCORE
    elif ctx.is_month_key and key.startswith(f"{ctx.raw}-"):
        score += DATE_MONTH_SCORE
    elif ctx.is_year_key and key.startswith(f"{ctx.raw}-"):
        score += DATE_YEAR_SCORE
    elif ctx.lower in key:
        score += DATE_CONTAINS_SCORE

    return score + recency_bonus(key, now)


def score_fields(
    text_fields: Iterable[str | None],
    date_fields: Iterable[str | None],
    ctx: QueryContext,
    now: datetime,
) -> int:
    text_score = sum(score_text(f, ctx) for f in text_fields)
    date_score = sum(score_date(f, ctx, now) for f in date_fields)
    return text_score + date_score
