"""
Tests for the record scanner state machine.

Each transition is checked in isolation, one character at a time, before
whole lines are folded through it.
"""

import pytest
from quizanalyze.scanner import (
    INITIAL_STATE,
    ScanState,
    finish,
    is_choice_boundary,
    is_field_boundary,
    scan,
    step,
)


class TestStep:
    """Single-character transitions."""

    def test_quote_opens_quoted_text(self):
        state, field = step(INITIAL_STATE, '"')
        assert state == ScanState(in_quoted_text=True)
        assert field is None

    def test_quote_closes_quoted_text_without_content(self):
        state, field = step(ScanState(in_quoted_text=True, choice="ab"), '"')
        assert state == ScanState(in_quoted_text=False, choice="ab")
        assert field is None

    def test_quoted_character_is_content(self):
        state, _ = step(ScanState(in_quoted_text=True, choice="a"), 'b')
        assert state.choice == "ab"

    def test_unquoted_character_is_dropped(self):
        state, field = step(ScanState(choice="a"), 'x')
        assert state == ScanState(choice="a")
        assert field is None

    def test_unquoted_newline_is_dropped(self):
        state, _ = step(INITIAL_STATE, '\n')
        assert state == INITIAL_STATE

    def test_quoted_comma_is_content(self):
        state, field = step(ScanState(in_quoted_text=True, choice="ab"), ',')
        assert state.choice == "ab,"
        assert field is None

    def test_unquoted_comma_emits_field(self):
        state, field = step(ScanState(choice="ab", choices=("x",)), ',')
        assert field == ("x", "ab")
        assert state == INITIAL_STATE

    def test_quoted_semicolon_splits_choice(self):
        state, field = step(ScanState(in_quoted_text=True, choice="ab"), ';')
        assert state == ScanState(in_quoted_text=True, choice="", choices=("ab",))
        assert field is None

    def test_unquoted_semicolon_splits_choice(self):
        state, field = step(ScanState(choice="ab"), ';')
        assert state.choices == ("ab",)
        assert field is None

    def test_boundary_classification(self):
        quoted = ScanState(in_quoted_text=True)
        assert is_field_boundary(INITIAL_STATE, ',')
        assert not is_field_boundary(quoted, ',')
        assert is_choice_boundary(INITIAL_STATE, ';')
        assert is_choice_boundary(quoted, ';')
        assert not is_choice_boundary(INITIAL_STATE, ',')


class TestFinish:
    """Closing the last field of a line."""

    def test_finish_flushes_pending_choice(self):
        assert finish(ScanState(choice="c", choices=("a", "b"))) == ("a", "b", "c")

    def test_finish_on_empty_state(self):
        assert finish(INITIAL_STATE) == ("",)

    def test_finish_inside_unbalanced_quotes(self):
        """An unclosed quote still yields what was collected."""
        state = scan('"unterminated')
        assert state.in_quoted_text
        assert finish(state) == ("unterminated",)


class TestQuoteParity:
    """The number of quotes consumed decides the final quote state."""

    @pytest.mark.parametrize("text,expected", [
        ('', False),
        ('"a"', False),
        ('"a', True),
        ('"a", "b"', False),
        ('"a"b"', True),
        ('""', False),
    ])
    def test_parity(self, text, expected):
        assert scan(text).in_quoted_text is expected
        assert (text.count('"') % 2 == 1) is expected
