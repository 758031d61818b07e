import re
from dataclasses import dataclass
from datetime import UTC, date, datetime

_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_MONTH_KEY_RE = re.compile(r"[0-9]{4}-[0-9]{2}")
_YEAR_KEY_RE = re.compile(r"[0-9]{4}")
_TOKEN_SPLIT_RE = re.compile(r"[^a-z0-9]+")


def is_iso_date(value: str) -> bool:
    return _ISO_DATE_RE.fullmatch(value) is not None


def is_month_key(value: str) -> bool:
    return _MONTH_KEY_RE.fullmatch(value) is not None


def is_year_key(value: str) -> bool:
    return _YEAR_KEY_RE.fullmatch(value) is not None


@dataclass(frozen=True)
class QueryContext:
    raw: str
    lower: str
    tokens: tuple[str, ...]
    is_iso_date: bool
    is_month_key: bool
    is_year_key: bool


def build_context(query: str) -> QueryContext:
    """Parse a search string into its scoring context.

    Tokens keep their multiplicity: a word typed twice is scored twice.
    Date shapes are format checks only, so "9999-99-99" counts as an ISO date.
    """
    lower = query.lower()
    tokens = tuple(t for t in _TOKEN_SPLIT_RE.split(lower) if t)
    return QueryContext(
        raw=query,
        lower=lower,
        tokens=tokens,
        is_iso_date=is_iso_date(query),
        is_month_key=is_month_key(query),
        is_year_key=is_year_key(query),
    )


def date_key(value: str | None) -> str | None:
    """Resolve a date or timestamp string to its UTC `YYYY-MM-DD` key."""
    if not value:
        return None
    if is_iso_date(value):
        return value
    try:
        parsed = datetime.fromisoformat(value)
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(UTC)
    except (ValueError, OverflowError):
        # OverflowError: offset pushes the UTC instant past year 1 or 9999
        return None
    return parsed.date().isoformat()


def key_to_date(key: str) -> date | None:
    """Calendar date for a key, or None when the key is shaped but not a real day."""
    try:
        return date.fromisoformat(key)
    except ValueError:
        return None
