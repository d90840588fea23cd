"""Tests for typespeed.core.line – per-line matching and scoring."""

from __future__ import annotations

import pytest

from typespeed.core.line import LINE_LEN, Line
from typespeed.core.render import Style
from typespeed.core.text import TextCursor
from typespeed.core.words import WordCorpus


def _line(expected: str, typed: str = "") -> Line:
    line = Line(expected)
    for ch in typed:
        line.add_char(ch)
    return line


class RecordingSurface:
    def __init__(self) -> None:
        self.rows: list[list[tuple[str, Style]]] = [[]]

    def put(self, ch: str, style: Style) -> None:
        self.rows[-1].append((ch, style))

    def next_line(self) -> None:
        self.rows.append([])


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_random_line_has_ten_words(self):
        corpus = WordCorpus(["alpha", "beta", "gamma"], seed=1)
        for _ in range(50):
            line = Line.random(corpus)
            assert line.buffer == ""
            words = line.expected.split(" ")
            assert len(words) == LINE_LEN
            assert set(words) <= {"alpha", "beta", "gamma"}

    def test_random_line_is_seedable(self):
        a = Line.random(WordCorpus(["a", "b", "c", "d"], seed=42))
        b = Line.random(WordCorpus(["a", "b", "c", "d"], seed=42))
        assert a.expected == b.expected

    def test_random_line_custom_length(self):
        line = Line.random(WordCorpus(["x"]), length=3)
        assert line.expected == "x x x"

    def test_random_line_empty_corpus_fails(self):
        with pytest.raises(ValueError):
            Line.random(WordCorpus([]))

    def test_from_source_short_quote_takes_everything(self):
        cursor = TextCursor("This is a quote")
        line = Line.from_source(cursor)
        assert line.expected == "This is a quote"
        assert cursor.remaining == ""

    def test_from_source_leaves_rest(self):
        words = [str(i) for i in range(1, LINE_LEN + 4)]
        cursor = TextCursor(" ".join(words))
        line = Line.from_source(cursor)
        assert line.expected == " ".join(words[:LINE_LEN])
        assert cursor.remaining == " ".join(words[LINE_LEN:])

    def test_from_source_twice(self):
        words = [f"w{i}" for i in range(1, 26)]
        cursor = TextCursor(" ".join(words))
        Line.from_source(cursor)
        Line.from_source(cursor)
        assert cursor.remaining == " ".join(words[20:])
        assert len(cursor.remaining.split(" ")) == 5

    def test_from_source_collapses_whitespace(self):
        cursor = TextCursor("one   two\nthree\tfour")
        line = Line.from_source(cursor, length=2)
        assert line.expected == "one two"
        assert cursor.remaining == "three four"

    def test_from_exhausted_source_is_empty(self):
        line = Line.from_source(TextCursor(""))
        assert line.expected == ""
        assert line.done()

    def test_empty(self):
        line = Line.empty()
        assert line.buffer == ""
        assert line.expected == ""


# ---------------------------------------------------------------------------
# Editing
# ---------------------------------------------------------------------------

class TestEditing:
    def test_index_counts_characters(self):
        assert _line("x", "abc 12").index() == 6
        assert _line("x", "123").index() == 3
        assert _line("x", "This one is pretty long").index() == 23

    def test_index_counts_code_points_not_bytes(self):
        assert _line("héllo", "hé").index() == 2

    def test_add_char_allows_overtyping(self):
        line = _line("ab", "abcdef")
        assert line.buffer == "abcdef"

    def test_backspace_removes_last(self):
        line = _line("abc", "abc")
        for _ in range(3):
            line.backspace()
        assert line.buffer == ""

    def test_backspace_on_empty_is_noop(self):
        line = Line.empty()
        line.backspace()
        line.backspace()
        assert line.buffer == ""
        assert line.index() == 0

    @pytest.mark.parametrize("ch", ["a", " ", "é", "ü", "字", "🙂"])
    def test_add_then_backspace_restores(self, ch):
        line = _line("hello world", "hel")
        line.add_char(ch)
        line.backspace()
        assert line.buffer == "hel"


# ---------------------------------------------------------------------------
# done()
# ---------------------------------------------------------------------------

class TestDone:
    @pytest.mark.parametrize(
        "typed, expected, done",
        [
            ("a b d", "a b c d", False),
            ("a b c", "a b c d", False),
            ("This is a quote!", "This is a quote!", True),
            ("This is not a quote!", "This is a quote!", True),
            ("123", "1234", False),
        ],
    )
    def test_done_table(self, typed, expected, done):
        assert _line(expected, typed).done() is done

    def test_empty_expected_is_done_immediately(self):
        assert Line.empty().done()

    def test_done_matches_index(self):
        line = Line("abc")
        for ch in "abcde":
            assert line.done() == (line.index() >= 3)
            line.add_char(ch)


# ---------------------------------------------------------------------------
# word_count()
# ---------------------------------------------------------------------------

class TestWordCount:
    @pytest.mark.parametrize(
        "typed, expected, count",
        [
            ("a b d", "a b c d", 2),
            ("a b c", "a b c d", 3),
            ("This is a quote!", "This is a quote!", 4),
            ("This is not a quote!", "This is a quote!", 2),
        ],
    )
    def test_word_count_table(self, typed, expected, count):
        assert _line(expected, typed).word_count() == count

    def test_empty_expected_counts_zero(self):
        assert Line.empty().word_count() == 0
        assert _line("", "abc").word_count() == 0

    def test_nothing_typed(self):
        assert Line("apple banana").word_count() == 0

    def test_word_in_progress_not_counted(self):
        assert _line("apple banana", "app").word_count() == 0

    def test_complete_word_counted_before_space(self):
        assert _line("apple banana", "apple").word_count() == 1

    def test_wrong_character_spoils_word(self):
        assert _line("apple banana", "apqle ").word_count() == 0

    def test_overtyping_credits_correct_last_word(self):
        assert _line("ab cd", "ab cdxyz").word_count() == 2

    def test_monotone_while_correct(self):
        expected = "the quick brown fox jumps"
        line = Line(expected)
        previous = 0
        for ch in expected:
            line.add_char(ch)
            count = line.word_count()
            assert count >= previous
            assert count <= len(expected.split(" "))
            previous = count
        assert previous == 5


# ---------------------------------------------------------------------------
# draw()
# ---------------------------------------------------------------------------

class TestDraw:
    def test_untyped_line_is_uncompleted(self):
        surface = RecordingSurface()
        Line("ab").draw(surface)
        assert surface.rows == [[("a", Style.UNCOMPLETED), ("b", Style.UNCOMPLETED)], []]

    def test_mixed_styles(self):
        cells = _line("abc", "ax").styled()
        assert cells == [
            ("a", Style.COMPLETED),
            ("x", Style.ERROR),
            ("c", Style.UNCOMPLETED),
        ]

    def test_overtyped_characters_are_errors(self):
        cells = _line("ab", "abcd").styled()
        assert cells[2:] == [("c", Style.ERROR), ("d", Style.ERROR)]

    def test_wrong_space_uses_background(self):
        cells = _line("ab", "a ").styled()
        assert cells[1] == (" ", Style.ERROR_BACKGROUND)

    def test_correct_space_is_completed(self):
        cells = _line("a b", "a ").styled()
        assert cells[1] == (" ", Style.COMPLETED)

    def test_draw_ends_row(self):
        surface = RecordingSurface()
        Line.empty().draw(surface)
        assert surface.rows == [[], []]

    def test_draw_does_not_change_line(self):
        line = _line("abc", "ab")
        line.draw(RecordingSurface())
        assert line.buffer == "ab"
        assert line.expected == "abc"
