# SPDX-License-Identifier: GPL-3.0-only
class PhraseLoopError(Exception):
    "Base class for faults raised while collecting phrases"


class InputFault(PhraseLoopError):
    "The input stream could not be read"


class EndOfInput(InputFault):
    def __init__(self, message: str = "end of input") -> None:
        super().__init__(message)


class RawModeError(PhraseLoopError):
    "Switching the terminal into or out of raw mode failed"
