# SPDX-License-Identifier: GPL-3.0-only
import logging
import sys
from typing import Iterator, TextIO

from .errors import EndOfInput, InputFault
from .linestate import DEFAULT_CHORD, LineEditor, LineState
from .rawmode import RawMode

LOGGER = logging.getLogger(__name__)

PROMPT = "Enter a phrase: "


def read_line(stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout, prompt: str = PROMPT) -> str | None:
    """Read a single line, terminated by Enter.

    Return None if Enter alone was hit, else the line without its line
    terminator. Running out of input is a fault, not an empty line.
    """
    stdout.write(prompt)
    stdout.flush()
    try:
        line = stdin.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise InputFault("cannot read from input: %s" % (e,)) from e
    if not line:
        raise EndOfInput()
    line = line.rstrip("\r\n")
    if not line:
        return None
    return line


def read_phrases(stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> list[str]:
    "Read and return a list of phrases, stopping at the first empty line"
    phrases: list[str] = []
    while True:
        phrase = read_line(stdin, stdout)
        if phrase is None:
            return phrases
        phrases.append(phrase)


def read_line_raw(
    keys: Iterator[str],
    stdout: TextIO = sys.stdout,
    raw_mode: RawMode | None = None,
    prompt: str = PROMPT,
    chord: str = DEFAULT_CHORD,
) -> tuple[bool, str | None]:
    """Read a single line in raw mode, terminated by Enter.

    Returns (keep_going, phrase). Enter gives (True, phrase); the chord or
    the end of the key stream gives (False, None).
    """
    if raw_mode is None:
        raw_mode = RawMode()
    stdout.write(prompt)
    stdout.flush()
    editor = LineEditor(chord)
    with raw_mode:
        while not editor.state.finished:
            s = next(keys, "")
            editor.feed(s)
            echo = editor.echo(s)
            if echo:
                stdout.write(echo)
                stdout.flush()
        if editor.state is LineState.TERMINATED:
            stdout.write("\r\nYou hit %s, done!\r\n" % (chord_label(chord),))
        elif editor.phrase is None:
            stdout.write("\r\nGot no input.\r\n")
        else:
            stdout.write("\r\n")
        stdout.flush()
    if editor.phrase is None:
        return False, None
    return True, editor.phrase


def read_phrases_raw(
    keys: Iterator[str],
    stdout: TextIO = sys.stdout,
    raw_mode: RawMode | None = None,
    chord: str = DEFAULT_CHORD,
) -> list[str]:
    "Read and return a list of phrases until the chord is hit or input ends"
    phrases: list[str] = []
    while True:
        keep_going, phrase = read_line_raw(keys, stdout, raw_mode, chord=chord)
        if phrase is not None:
            phrases.append(phrase)
        if not keep_going:
            LOGGER.debug("stopped after %s phrases", len(phrases))
            return phrases


def chord_label(chord: str) -> str:
    "Turn 'CTRL-X' into 'Ctrl+X' for messages"
    mod, sep, key = chord.rpartition("-")
    if not sep:
        return chord
    return "+".join(m.capitalize() for m in mod.split("-")) + "+" + key
