# --- Query Handling ---

MIN_QUERY_LENGTH = 2  # shorter queries return no results without scoring


# --- Text Match Weights ---
# Whole-query checks are additive; per-token tiers are exclusive (first match wins)

TEXT_EXACT_SCORE = 220
TEXT_PREFIX_SCORE = 120
TEXT_CONTAINS_SCORE = 70

TOKEN_EXACT_SCORE = 35
TOKEN_PREFIX_SCORE = 22
TOKEN_CONTAINS_SCORE = 12


# --- Date Relevancy Weights ---

DATE_EXACT_SCORE = 420  # ISO query == field date
DATE_MONTH_SCORE = 240  # YYYY-MM query covers field date
DATE_YEAR_SCORE = 130  # YYYY query covers field date
DATE_CONTAINS_SCORE = 70  # plain substring of the date key

# (max days from now, bonus), checked in order
RECENCY_BONUSES: tuple[tuple[int, int], ...] = (
    (2, 24),
    (7, 18),
    (30, 12),
    (90, 6),
)


# --- Live Suggestions ---

SUGGEST_DEFAULT_LIMIT = 8
SUGGEST_MAX_LIMIT = 20
SUGGEST_FETCH_LIMIT = 20
SUGGEST_PLAY_FETCH_LIMIT = 120
SNIPPET_TRUNCATE = 72


# --- Full Search Page ---

PAGE_FETCH_LIMIT = 40
PAGE_DISPLAY_LIMIT = 10
PAGE_PLAY_DISPLAY_LIMIT = 12
PAGE_PLAY_FETCH_LIMIT = 250
USER_BADGE_FETCH_LIMIT = 180

STATS_LABEL = "games played wins current streak best streak total score"
