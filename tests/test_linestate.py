"""Tests for the keystroke-driven line state machine."""
import pytest

from phraseloop.linestate import LineEditor, LineState


@pytest.fixture
def editor():
    return LineEditor()


def feed_all(editor, keys):
    return [editor.feed(k) for k in keys]


class TestTransitions:
    def test_starts_awaiting_key(self, editor):
        assert editor.state is LineState.AWAITING_KEY
        assert editor.phrase is None

    def test_printable_keys_build_the_line(self, editor):
        assert feed_all(editor, ["h", "i"]) == [
            LineState.LINE_IN_PROGRESS,
            LineState.LINE_IN_PROGRESS,
        ]
        assert editor.line == "hi"

    def test_enter_finishes_with_phrase(self, editor):
        feed_all(editor, ["h", "i", "return"])
        assert editor.state is LineState.DONE
        assert editor.phrase == "hi"

    def test_newline_also_finishes(self, editor):
        feed_all(editor, ["o", "k", "newline"])
        assert editor.phrase == "ok"

    def test_enter_alone_gives_empty_phrase(self, editor):
        assert editor.feed("return") is LineState.DONE
        assert editor.phrase == ""

    def test_chord_terminates_and_discards_line(self, editor):
        feed_all(editor, ["a", "CTRL-X"])
        assert editor.state is LineState.TERMINATED
        assert editor.phrase is None
        assert editor.line == ""

    def test_end_of_input_is_done_without_phrase(self, editor):
        feed_all(editor, ["a", ""])
        assert editor.state is LineState.DONE
        assert editor.phrase is None

    @pytest.mark.parametrize("key", ["uparrow", "F5", "CTRL-A", "escape", "backspace"])
    def test_other_keys_are_ignored(self, editor, key):
        feed_all(editor, ["a", key, "b"])
        assert editor.state is LineState.LINE_IN_PROGRESS
        assert editor.line == "ab"

    def test_ignored_key_returns_to_awaiting_key(self, editor):
        feed_all(editor, ["a"])
        assert editor.feed("uparrow") is LineState.AWAITING_KEY
        assert editor.line == "a"

    def test_custom_chord(self):
        editor = LineEditor(chord="CTRL-Q")
        assert editor.feed("CTRL-X") is LineState.AWAITING_KEY
        assert editor.feed("CTRL-Q") is LineState.TERMINATED

    @pytest.mark.parametrize("last", ["return", "CTRL-X", ""])
    def test_feeding_a_finished_line_is_an_error(self, editor, last):
        editor.feed(last)
        assert editor.state.finished
        with pytest.raises(ValueError):
            editor.feed("a")


class TestEcho:
    def test_echoes_printable_only(self, editor):
        assert editor.echo("x") == "x"
        assert editor.echo("return") == ""
        assert editor.echo("CTRL-X") == ""
        assert editor.echo("uparrow") == ""
