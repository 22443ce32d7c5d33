"""Tests for the shared matching contract."""

from cursorscan import STREAM_END, StreamCursor, bounds, equal_to, identity, mismatch, negate


class TestDefaults:
    def test_identity(self) -> None:
        marker = object()
        assert identity(marker) is marker

    def test_equal_to(self) -> None:
        assert equal_to("a", "a")
        assert not equal_to("a", "b")

    def test_negate(self) -> None:
        not_digit = negate(str.isdigit)
        assert not_digit("a")
        assert not not_digit("1")
        assert not_digit.__name__ == "not_isdigit"


class TestMismatch:
    def test_stops_at_first_difference(self) -> None:
        first, last = bounds("Hello, world!")
        pfirst, plast = bounds("Help")
        stop, pstop = mismatch(first, last, pfirst, plast)
        assert stop == first + 3
        assert pstop == pfirst + 3

    def test_stops_when_second_sequence_ends(self) -> None:
        first, last = bounds("Hello")
        pfirst, plast = bounds("He")
        stop, pstop = mismatch(first, last, pfirst, plast)
        assert stop == first + 2
        assert pstop == plast

    def test_stops_when_first_sequence_ends(self) -> None:
        first, last = bounds("He")
        pfirst, plast = bounds("Hello")
        stop, pstop = mismatch(first, last, pfirst, plast)
        assert stop == last
        assert pstop == pfirst + 2

    def test_projections_and_comparison(self) -> None:
        first, last = bounds("ABC")
        pfirst, plast = bounds("abd")
        stop, _ = mismatch(first, last, pfirst, plast, equal_to, str.lower, identity)
        assert stop == first + 2

    def test_single_pass_second_sequence(self) -> None:
        first, last = bounds("abc")
        stop, pstop = mismatch(first, last, StreamCursor("ab"), STREAM_END)
        assert stop == first + 2
        assert pstop == STREAM_END
