"""
Shared test fixtures.

Raw-mode collection is exercised with a fake guard that records
enter/restore calls, so most tests need no real terminal. The pty_pair fixture provides a
pseudo-terminal for the tests that drive the real RawMode.
"""
import os

import pytest

from phraseloop.errors import RawModeError


class FakeRawMode:
    """Stands in for RawMode and records every transition."""

    def __init__(self, fail_restore: bool = False):
        self.active = False
        self.fail_restore = fail_restore
        self.events: list[str] = []

    def __enter__(self):
        if self.active:
            raise RawModeError("already raw")
        self.active = True
        self.events.append("enter")
        return self

    def __exit__(self, ext, exv, exb):
        self.active = False
        self.events.append("restore")
        if self.fail_restore:
            raise RawModeError("restore failed")


@pytest.fixture
def pty_pair():
    """A pseudo-terminal as (master, slave) file descriptors."""
    master, slave = os.openpty()
    yield master, slave
    os.close(slave)
    os.close(master)


@pytest.fixture
def raw_mode():
    return FakeRawMode()


@pytest.fixture
def failing_raw_mode():
    return FakeRawMode(fail_restore=True)
