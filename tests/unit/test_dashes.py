"""Unit tests for dash interval construction."""

import pytest

from linefeather.core.dashes import build_dash_table, make_interval
from linefeather.core.opacity import along_path_opacity
from linefeather.domain import LineCap
from linefeather.exceptions import InvalidDashPatternError


class TestMakeInterval:
    """Tests for make_interval function."""

    def test_butt_cap_not_extended(self) -> None:
        """Test butt caps keep the dash span."""
        interval = make_interval(0.0, 4.0, 1.0, LineCap.BUTT)
        assert interval.start_from == -0.5
        assert interval.start_to == 0.5
        assert interval.end_from == 3.5
        assert interval.end_to == 4.5
        assert interval.opacity_mul == 1.0
        assert interval.original_endpoints is None

    def test_missing_cap_behaves_as_butt(self) -> None:
        """Test None cap produces the same interval as butt."""
        assert make_interval(0.0, 4.0, 1.0, None) == make_interval(0.0, 4.0, 1.0, LineCap.BUTT)

    def test_square_cap_extended(self) -> None:
        """Test square caps extend both ends by half the line width."""
        interval = make_interval(0.0, 4.0, 1.0, LineCap.SQUARE)
        assert interval.start_from == -1.5
        assert interval.start_to == -0.5
        assert interval.end_from == 4.5
        assert interval.end_to == 5.5
        assert interval.original_endpoints is None

    def test_round_cap_keeps_original_endpoints(self) -> None:
        """Test round caps extend and remember the unextended span."""
        interval = make_interval(0.0, 4.0, 1.0, LineCap.ROUND)
        assert interval.start_from == -1.5
        assert interval.end_to == 5.5
        assert interval.original_endpoints == (0.0, 4.0)

    def test_short_dash_feather_clamped_to_midpoint(self) -> None:
        """Test feathers of a short dash meet at the midpoint."""
        interval = make_interval(0.0, 0.4, 1.0, None)
        assert interval.start_from == pytest.approx(-0.8)
        assert interval.start_to == pytest.approx(0.2)
        assert interval.end_from == pytest.approx(0.2)
        assert interval.end_to == pytest.approx(1.2)
        assert interval.opacity_mul == pytest.approx(0.4)

    def test_short_dash_keeps_minimum_width(self) -> None:
        """Test the feathered footprint is at least two units wide."""
        interval = make_interval(10.0, 10.1, 0.5, None)
        assert interval.end_to - interval.start_from == pytest.approx(2.0)

    def test_opacity_mul_uses_extended_span(self) -> None:
        """Test cap extension counts towards the peak opacity."""
        interval = make_interval(0.0, 0.2, 0.5, LineCap.SQUARE)
        assert interval.opacity_mul == 1.0


class TestBuildDashTable:
    """Tests for build_dash_table function."""

    def test_none_is_solid(self) -> None:
        """Test missing pattern produces an empty table."""
        table = build_dash_table(1.0, None)
        assert table.is_solid
        assert table.total_length == 0.0

    def test_empty_is_solid(self) -> None:
        """Test empty pattern produces an empty table."""
        assert build_dash_table(1.0, []).is_solid

    def test_simple_pattern(self) -> None:
        """Test one dash and one gap produce the dash and its wrap copy."""
        table = build_dash_table(1.0, [4.0, 2.0])
        assert table.total_length == 6.0
        assert len(table) == 2

        first, wrap = table.intervals
        assert (first.start_from, first.start_to) == (-0.5, 0.5)
        assert (first.end_from, first.end_to) == (3.5, 4.5)
        assert (wrap.start_from, wrap.start_to) == (5.5, 6.5)
        assert (wrap.end_from, wrap.end_to) == (9.5, 10.5)

    def test_wrap_copy_is_first_interval_shifted(self) -> None:
        """Test the last interval is the first one moved by one period."""
        table = build_dash_table(1.0, [3.0, 1.0, 2.0, 2.0], LineCap.ROUND)
        assert table.intervals[-1] == table.intervals[0].shifted(table.total_length)
        assert table.intervals[-1].original_endpoints == (8.0, 11.0)

    def test_gaps_produce_no_intervals(self) -> None:
        """Test only even indices produce intervals."""
        table = build_dash_table(0.5, [1.0, 2.0, 3.0, 4.0])
        assert table.total_length == 10.0
        assert len(table) == 3
        assert table.intervals[1].start_from == pytest.approx(2.5)
        assert table.intervals[1].end_to == pytest.approx(6.5)

    def test_odd_length_pattern(self) -> None:
        """Test odd patterns start every period with a drawn dash."""
        table = build_dash_table(0.5, [1.0, 2.0, 3.0])
        assert table.total_length == 6.0
        assert len(table) == 3
        assert table.intervals[2].start_from == pytest.approx(5.5)

    def test_round_cap_endpoints(self) -> None:
        """Test every round-cap interval carries its unextended span."""
        table = build_dash_table(1.0, [2.0, 2.0], LineCap.ROUND)
        assert [i.original_endpoints for i in table.intervals] == [(0.0, 2.0), (4.0, 6.0)]

    def test_zero_dash_rejected(self) -> None:
        """Test zero-length drawn dash is a configuration error."""
        with pytest.raises(InvalidDashPatternError):
            build_dash_table(1.0, [0.0, 1.0])

    def test_negative_gap_rejected(self) -> None:
        """Test negative gap is a configuration error."""
        with pytest.raises(InvalidDashPatternError):
            build_dash_table(1.0, [1.0, -2.0])

    def test_intervals_are_ordered(self) -> None:
        """Test intervals appear in path order."""
        table = build_dash_table(1.0, [1.0, 3.0, 2.0, 1.0, 0.5, 4.0], LineCap.SQUARE)
        starts = [i.start_from for i in table.intervals]
        assert starts == sorted(starts)


class TestOddPatternJoin:
    """Tests for odd-length patterns at the period join."""

    def test_back_to_back_dashes_dip_at_join(self) -> None:
        """Test the last and first dash meet with overlapping feathers."""
        table = build_dash_table(0.5, [1.0, 2.0, 3.0])
        assert along_path_opacity(table, 5.9).opacity == pytest.approx(0.6)
        assert along_path_opacity(table, 6.0).opacity == pytest.approx(0.5)
        assert along_path_opacity(table, 0.0).opacity == pytest.approx(0.5)
