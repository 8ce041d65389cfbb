# SPDX-License-Identifier: GPL-3.0-only
from .collectors import read_line, read_line_raw, read_phrases, read_phrases_raw
from .consoleio import keystrokes, read_one_character, read_one_keystroke
from .errors import EndOfInput, InputFault, PhraseLoopError, RawModeError
from .keystrokes import is_printable, parse_one_keystroke
from .linestate import LineEditor, LineState
from .printer import show_phrases
from .rawmode import RawMode
from .unicodestreaming import decode_one_character
