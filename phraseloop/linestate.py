# SPDX-License-Identifier: GPL-3.0-only
import enum

from .keystrokes import is_printable

DEFAULT_CHORD = "CTRL-X"
ENTER_KEYS = ("return", "newline")


class LineState(enum.Enum):
    AWAITING_KEY = "awaiting-key"
    LINE_IN_PROGRESS = "line-in-progress"
    DONE = "done"
    TERMINATED = "terminated"

    @property
    def finished(self) -> bool:
        return self in (LineState.DONE, LineState.TERMINATED)


class LineEditor:
    """Assemble one phrase from a stream of keystrokes.

    feed() takes one keystroke and returns the new state. Once the state
    is DONE, phrase holds the line, or None if the input ran out. Once it
    is TERMINATED the partial line is gone and phrase stays None.
    """

    def __init__(self, chord: str = DEFAULT_CHORD) -> None:
        self.chord = chord
        self.state = LineState.AWAITING_KEY
        self.phrase: str | None = None
        self._linebuf: list[str] = []

    @property
    def line(self) -> str:
        return "".join(self._linebuf)

    def feed(self, s: str) -> LineState:
        if self.state.finished:
            raise ValueError("line already finished: %s" % (self.state.name,))
        if s == "":
            self._linebuf = []
            self.state = LineState.DONE
        elif s == self.chord:
            self._linebuf = []
            self.state = LineState.TERMINATED
        elif s in ENTER_KEYS:
            self.phrase = self.line
            self._linebuf = []
            self.state = LineState.DONE
        elif is_printable(s):
            self._linebuf.append(s)
            self.state = LineState.LINE_IN_PROGRESS
        else:
            self.state = LineState.AWAITING_KEY
        return self.state

    def echo(self, s: str) -> str:
        return s if is_printable(s) else ""
