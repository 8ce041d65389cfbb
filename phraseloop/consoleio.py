# SPDX-License-Identifier: GPL-3.0-only
import logging
import os
import select
from typing import Iterator

from .errors import InputFault
from .keystrokes import UNDECODABLE, parse_one_keystroke
from .unicodestreaming import decode_one_character

LOGGER = logging.getLogger(__name__)


def read_one_character(fd=0, timeout: float | None = None) -> str:
    "Read exactly one UTF-8 character from fd with read(2) and select(2)"

    def get_next_byte() -> bytes:
        try:
            if timeout is not None:
                a, b, c = select.select([fd], [], [], timeout)
                if not a:
                    return b""
            return os.read(fd, 1)
        except OSError as e:
            raise InputFault("cannot read from fd %s: %s" % (fd, e)) from e

    return decode_one_character(get_next_byte(), get_next_byte)


def read_one_keystroke(fd=0, extra_timeout: float | None = 0.1) -> str:
    "Block until one keystroke arrives on fd; return '' at end of input"
    try:
        return parse_one_keystroke(
            read_one_character(fd),
            lambda: read_one_character(fd, extra_timeout),
        )
    except UnicodeDecodeError as e:
        LOGGER.debug("fd %s: undecodable input %r", fd, e.object)
        return UNDECODABLE


def keystrokes(fd=0) -> Iterator[str]:
    while True:
        s = read_one_keystroke(fd)
        if not s:
            return
        yield s
