"""Tests for weighted A/B selection."""

from smart_routing.selector import build_segments, select_weighted

from conftest import make_rule


class TestBuildSegments:
    """Test cumulative segment layout."""

    def test_segments_follow_order(self):
        """Test segments are laid end to end in the given order."""
        a = make_rule("a", weight=30)
        b = make_rule("b", weight=70)

        segments = build_segments([a, b])

        assert [(s.rule.name, s.start, s.end) for s in segments] == [("a", 0, 30), ("b", 30, 100)]

    def test_half_open(self):
        """Test a segment contains its start but not its end."""
        segment = build_segments([make_rule("a", weight=30)])[0]

        assert segment.contains(0)
        assert segment.contains(29.999)
        assert not segment.contains(30)


class TestSelectWeighted:
    """Test variant selection."""

    def test_thirty_seventy_split(self):
        """Test 10 -> first variant, 95 -> second variant."""
        a = make_rule("a", weight=30)
        b = make_rule("b", weight=70)

        assert select_weighted([a, b], 10).name == "a"
        assert select_weighted([a, b], 95).name == "b"

    def test_boundary(self):
        """Test the sample at a segment boundary goes to the next variant."""
        a = make_rule("a", weight=30)
        b = make_rule("b", weight=70)

        assert select_weighted([a, b], 30).name == "b"
        assert select_weighted([a, b], 0).name == "a"

    def test_total_not_normalized(self):
        """Test the sample is scaled onto a total other than 100."""
        a = make_rule("a", weight=10)
        b = make_rule("b", weight=10)

        # total 20: 49% -> 9.8 (a), 51% -> 10.2 (b)
        assert select_weighted([a, b], 49).name == "a"
        assert select_weighted([a, b], 51).name == "b"

    def test_total_above_hundred(self):
        """Test weights summing past 100."""
        a = make_rule("a", weight=100)
        b = make_rule("b", weight=100)

        assert select_weighted([a, b], 49.9).name == "a"
        assert select_weighted([a, b], 50).name == "b"

    def test_lone_variant_always_selected(self):
        """Test a single variant owns the whole scaled range."""
        a = make_rule("a", weight=30)

        for percent in (0, 10, 50, 99.9):
            assert select_weighted([a], percent).name == "a"

    def test_zero_total(self):
        """Test no selection when the weights sum to zero."""
        assert select_weighted([make_rule("a", weight=None), make_rule("b", weight=0)], 50) is None

    def test_empty(self):
        """Test empty input selects nothing."""
        assert select_weighted([], 50) is None

    def test_upper_edge(self):
        """Test a sample of exactly 100 falls outside every segment."""
        assert select_weighted([make_rule("a", weight=30), make_rule("b", weight=70)], 100) is None

    def test_deterministic(self):
        """Test the same sample always picks the same variant."""
        rules = [make_rule("a", weight=25), make_rule("b", weight=25), make_rule("c", weight=50)]

        picks = {select_weighted(rules, 37.5).name for _ in range(20)}

        assert picks == {"b"}
