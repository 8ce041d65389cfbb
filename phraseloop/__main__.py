# SPDX-License-Identifier: GPL-3.0-only
import argparse
import logging
import sys

from .collectors import chord_label, read_phrases, read_phrases_raw
from .consoleio import keystrokes
from .errors import InputFault, RawModeError
from .linestate import DEFAULT_CHORD
from .printer import show_phrases
from .rawmode import RawMode

parser = argparse.ArgumentParser(prog="phraseloop")
parser.add_argument(
    "--raw",
    action="store_true",
    help="read keystrokes in raw mode and stop on %s" % (chord_label(DEFAULT_CHORD),),
)
parser.add_argument("-v", "--verbose", action="store_true")

# The single-mode scripts pick the mode themselves
script_parser = argparse.ArgumentParser()
script_parser.add_argument("-v", "--verbose", action="store_true")


def run(raw: bool) -> int:
    if raw:
        print(
            "Enter some phrases. Hit Enter after each one. Hit %s to finish."
            % (chord_label(DEFAULT_CHORD),)
        )
    else:
        print("Enter some phrases. Hit Enter after each one. Hit Enter alone to finish.")
    try:
        if raw:
            fd = sys.stdin.fileno()
            phrases = read_phrases_raw(keystrokes(fd), sys.stdout, RawMode(fd))
        else:
            phrases = read_phrases(sys.stdin, sys.stdout)
    except InputFault as e:
        # The prompt line may still be open
        print(file=sys.stdout)
        print("Error: %s" % (e,), file=sys.stderr)
        # Only a buffered read fault is a failed run
        return 0 if raw else 1
    except RawModeError as e:
        print(file=sys.stdout)
        print("Error: %s" % (e,), file=sys.stderr)
        return 1
    show_phrases(phrases, sys.stdout)
    return 0


def main(argv: list[str] | None = None) -> None:
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    sys.exit(run(args.raw))


def _main_script(raw: bool, argv: list[str] | None) -> None:
    args = script_parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    sys.exit(run(raw))


def main_std(argv: list[str] | None = None) -> None:
    script_parser.prog = "read-line-std"
    _main_script(False, argv)


def main_raw(argv: list[str] | None = None) -> None:
    script_parser.prog = "read-lines-ctrl-x"
    _main_script(True, argv)


if __name__ == "__main__":
    main()
