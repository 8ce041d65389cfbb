# SPDX-License-Identifier: GPL-3.0-only
import sys
from typing import Iterable, TextIO

HEADER = "Here are the phrases you entered:"


def show_phrases(phrases: Iterable[str], stdout: TextIO = sys.stdout) -> None:
    print(HEADER, file=stdout)
    for phrase in phrases:
        print(">>> %s <<<" % (phrase,), file=stdout)
