from dailygrid.search.context import build_context, date_key


class TestBuildContext:
    def test_lowercases_and_tokenizes(self):
        ctx = build_context("Live Thread - 2026")
        assert ctx.raw == "Live Thread - 2026"
        assert ctx.lower == "live thread - 2026"
        assert ctx.tokens == ("live", "thread", "2026")

    def test_empty_query(self):
        ctx = build_context("")
        assert ctx.tokens == ()
        assert not (ctx.is_iso_date or ctx.is_month_key or ctx.is_year_key)

    def test_keeps_repeated_tokens(self):
        assert build_context("the the").tokens == ("the", "the")

    def test_splits_on_non_alphanumeric_runs(self):
        assert build_context("TIC_12345//transit!!").tokens == ("tic", "12345", "transit")

    def test_non_ascii_letters_split_tokens(self):
        assert build_context("café au lait").tokens == ("caf", "au", "lait")

    def test_iso_date_shape(self):
        ctx = build_context("2026-02-11")
        assert ctx.is_iso_date
        assert not ctx.is_month_key
        assert not ctx.is_year_key
        assert ctx.tokens == ("2026", "02", "11")

    def test_month_and_year_shapes(self):
        month = build_context("2026-02")
        year = build_context("2026")
        assert month.is_month_key and not month.is_iso_date and not month.is_year_key
        assert year.is_year_key and not year.is_iso_date and not year.is_month_key

    def test_shape_is_format_only(self):
        assert build_context("9999-99-99").is_iso_date

    def test_shape_requires_exact_match(self):
        assert not build_context(" 2026").is_year_key
        assert not build_context("2026-02-11x").is_iso_date
        assert not build_context("20260").is_year_key


class TestDateKey:
    def test_none_and_empty(self):
        assert date_key(None) is None
        assert date_key("") is None

    def test_iso_date_passthrough(self):
        assert date_key("2026-02-11") == "2026-02-11"
        assert date_key("9999-99-99") == "9999-99-99"

    def test_timestamp_converted_to_utc(self):
        assert date_key("2026-02-11T23:30:00-05:00") == "2026-02-12"
        assert date_key("2026-02-11T10:00:00Z") == "2026-02-11"

    def test_naive_timestamp_treated_as_utc(self):
        assert date_key("2026-02-11 10:00:00") == "2026-02-11"

    def test_unparseable(self):
        assert date_key("yesterday") is None

    def test_offset_past_calendar_bounds(self):
        assert date_key("9999-12-31T23:00:00-05:00") is None
        assert date_key("0001-01-01T00:00:00+01:00") is None
