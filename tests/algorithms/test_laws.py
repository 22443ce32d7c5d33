"""Property-based tests for the scanning laws using Hypothesis.

These tests verify properties that must hold for every input:
1. Empty input is never a match
2. scan and scan_not are exact complements
3. Cursors advance by exactly the matched length, never partially
4. scan_while_excluding stops at the first match
5. Results are deterministic
"""

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from cursorscan import (
    bind,
    bounds,
    negate,
    scan,
    scan_excluding,
    scan_if,
    scan_if_not,
    scan_not,
    scan_while_excluding,
)

# Small alphabet so matches are common
texts = st.text(alphabet="abc,", max_size=30)
elements = st.sampled_from("abc,")
patterns = st.text(alphabet="abc,", min_size=1, max_size=4)
predicates = st.sampled_from([str.isalpha, lambda c: c == "a", lambda c: c in "bc"])


@st.composite
def positions(draw: st.DrawFn) -> tuple[str, int]:
    """A text and an offset into it, end included."""
    text = draw(texts)
    offset = draw(st.integers(min_value=0, max_value=len(text)))
    return text, offset


class TestEmptyInputIdentity:
    @given(text=texts, value=elements, pattern=patterns)
    @settings(max_examples=100)
    def test_every_primitive_returns_cursor_at_end(self, text: str, value: str, pattern: str) -> None:
        _, last = bounds(text)
        assert scan(last, last, value) == last
        assert scan_not(last, last, value) == last
        assert scan(last, last, pattern=pattern) == last
        assert scan_not(last, last, pattern=pattern) == last
        assert scan_if(last, last, str.isalpha) == last
        assert scan_if_not(last, last, str.isalpha) == last
        assert scan_excluding(last, last, bind(scan, value)) == last
        assert scan_while_excluding(last, last, bind(scan, value)) == last


class TestSingleElement:
    @given(at=positions(), value=elements)
    @settings(max_examples=200)
    def test_scan_advances_iff_equal(self, at: tuple[str, int], value: str) -> None:
        text, offset = at
        assume(offset < len(text))
        first, last = bounds(text)
        pos = first + offset
        expected = pos + 1 if text[offset] == value else pos
        assert scan(pos, last, value) == expected

    @given(at=positions(), value=elements)
    @settings(max_examples=200)
    def test_scan_and_scan_not_are_complements(self, at: tuple[str, int], value: str) -> None:
        text, offset = at
        assume(offset < len(text))
        first, last = bounds(text)
        pos = first + offset
        advanced = [scan(pos, last, value) != pos, scan_not(pos, last, value) != pos]
        assert advanced.count(True) == 1


class TestSubSequence:
    @given(at=positions(), pattern=patterns)
    @settings(max_examples=200)
    def test_scan_advances_by_pattern_length_or_not_at_all(self, at: tuple[str, int], pattern: str) -> None:
        text, offset = at
        first, last = bounds(text)
        pos = first + offset
        result = scan(pos, last, pattern=pattern)
        if text.startswith(pattern, offset):
            assert result - pos == len(pattern)
        else:
            assert result == pos

    @given(at=positions(), pattern=patterns)
    @settings(max_examples=200)
    def test_scan_not_advances_at_most_one(self, at: tuple[str, int], pattern: str) -> None:
        text, offset = at
        first, last = bounds(text)
        pos = first + offset
        assert scan_not(pos, last, pattern=pattern) - pos in (0, 1)

    @given(at=positions(), pattern=patterns)
    @settings(max_examples=200)
    def test_non_empty_pattern_complement(self, at: tuple[str, int], pattern: str) -> None:
        text, offset = at
        assume(offset < len(text))
        first, last = bounds(text)
        pos = first + offset
        advanced = [scan(pos, last, pattern=pattern) != pos, scan_not(pos, last, pattern=pattern) != pos]
        assert advanced.count(True) == 1

    @given(at=positions(), pattern=patterns)
    @settings(max_examples=100)
    def test_single_pass_pattern_agrees_with_sequence_pattern(self, at: tuple[str, int], pattern: str) -> None:
        text, offset = at
        first, last = bounds(text)
        pos = first + offset
        assert scan(pos, last, pattern=iter(pattern)) == scan(pos, last, pattern=pattern)


class TestPredicates:
    @given(at=positions(), predicate=predicates)
    @settings(max_examples=200)
    def test_scan_if_not_is_scan_if_with_negated_predicate(self, at: tuple[str, int], predicate) -> None:
        text, offset = at
        first, last = bounds(text)
        pos = first + offset
        assert scan_if_not(pos, last, predicate) == scan_if(pos, last, negate(predicate))

    @given(at=positions(), predicate=predicates)
    @settings(max_examples=200)
    def test_scan_if_advances_iff_predicate_holds(self, at: tuple[str, int], predicate) -> None:
        text, offset = at
        assume(offset < len(text))
        first, last = bounds(text)
        pos = first + offset
        expected = pos + 1 if predicate(text[offset]) else pos
        assert scan_if(pos, last, predicate) == expected


class TestCombinators:
    @given(at=positions(), value=elements)
    @settings(max_examples=200)
    def test_scan_excluding_advances_iff_inner_scanner_stays(self, at: tuple[str, int], value: str) -> None:
        text, offset = at
        assume(offset < len(text))
        first, last = bounds(text)
        pos = first + offset
        inner = bind(scan, value)
        expected = pos + 1 if inner(pos, last) == pos else pos
        assert scan_excluding(pos, last, inner) == expected

    @given(at=positions(), value=elements)
    @settings(max_examples=200)
    def test_scan_while_excluding_stops_at_first_element_match(self, at: tuple[str, int], value: str) -> None:
        text, offset = at
        first, last = bounds(text)
        found = text.find(value, offset)
        expected = first + (found if found != -1 else len(text))
        assert scan_while_excluding(first + offset, last, bind(scan, value)) == expected

    @given(at=positions(), pattern=patterns)
    @settings(max_examples=200)
    def test_scan_while_excluding_stops_at_first_pattern_match(self, at: tuple[str, int], pattern: str) -> None:
        text, offset = at
        first, last = bounds(text)
        found = text.find(pattern, offset)
        expected = first + (found if found != -1 else len(text))
        assert scan_while_excluding(first + offset, last, bind(scan, pattern=pattern)) == expected


class TestDeterminism:
    @given(at=positions(), pattern=patterns, value=elements)
    @settings(max_examples=100)
    def test_repeated_calls_agree(self, at: tuple[str, int], pattern: str, value: str) -> None:
        text, offset = at
        first, last = bounds(text)
        pos = first + offset
        calls = [
            lambda: scan(pos, last, value),
            lambda: scan_not(pos, last, pattern=pattern),
            lambda: scan_if(pos, last, str.isalpha),
            lambda: scan_while_excluding(pos, last, bind(scan, pattern=pattern)),
        ]
        for call in calls:
            assert call() == call()
