from dailygrid.search.ranking import rank


class TestRank:
    def test_sorts_descending_and_drops_non_positive(self):
        scored = [("a", 5), ("b", 7), ("c", 5), ("d", 0), ("e", -1)]
        assert rank(scored, limit=10) == ["b", "a", "c"]

    def test_ties_keep_input_order(self):
        scored = [("first", 3), ("second", 3), ("third", 3)]
        assert rank(scored, limit=10) == ["first", "second", "third"]

    def test_truncates_to_limit(self):
        scored = [("a", 5), ("b", 7), ("c", 5)]
        assert rank(scored, limit=2) == ["b", "a"]

    def test_zero_limit(self):
        assert rank([("a", 5)], limit=0) == []

    def test_zero_scores_never_returned(self):
        assert rank([("a", 0), ("b", 0)], limit=100) == []

    def test_accepts_generators(self):
        assert rank(((x, len(x)) for x in ["aa", "a", "aaa"]), limit=3) == ["aaa", "aa", "a"]

    def test_deterministic(self):
        scored = [("a", 2), ("b", 9), ("c", 2), ("d", 9)]
        assert rank(scored, limit=4) == rank(list(scored), limit=4) == ["b", "d", "a", "c"]
