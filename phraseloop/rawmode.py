# SPDX-License-Identifier: GPL-3.0-only
import logging
import termios
import tty

from .errors import RawModeError

LOGGER = logging.getLogger(__name__)


class RawMode:
    """Keep a terminal fd in raw mode for the duration of a with-block.

    The saved attributes are restored on every exit from the block. A
    failure to restore is raised rather than leaving the terminal raw.
    """

    def __init__(self, fd=0) -> None:
        self._fd = fd
        self._old: list | None = None

    @property
    def active(self) -> bool:
        return self._old is not None

    def enable(self) -> None:
        if self._old is not None:
            raise RawModeError("fd %s is already in raw mode" % (self._fd,))
        try:
            old = termios.tcgetattr(self._fd)
            tty.setraw(self._fd, termios.TCSADRAIN)
        except (termios.error, OSError) as e:
            raise RawModeError("cannot enter raw mode on fd %s: %s" % (self._fd, e)) from e
        self._old = old
        LOGGER.debug("fd %s: raw mode on", self._fd)

    def restore(self) -> None:
        if self._old is None:
            return
        old = self._old
        self._old = None
        try:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, old)
        except (termios.error, OSError) as e:
            LOGGER.error("fd %s: failed to restore cooked mode: %s", self._fd, e)
            raise RawModeError(
                "cannot restore cooked mode on fd %s: %s" % (self._fd, e)
            ) from e
        LOGGER.debug("fd %s: raw mode off", self._fd)

    def __enter__(self) -> "RawMode":
        self.enable()
        return self

    def __exit__(self, ext, exv, exb) -> None:
        self.restore()
