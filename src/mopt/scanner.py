## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# mopt — getopt style options, re-scanned from the argument vector on every query.
#

from typing import Callable, Sequence

from .formatting import trace


def scan_option(args: Sequence[str], flag: str, on_help: Callable[[], None]) -> tuple[str, bool]:
    """Find `-<flag>` in `args[1:]` and return `(raw_value, found)`.

    The raw value is either the text glued to the flag token (`-ffoo`), or the
    token that follows it (`-f foo`), or empty when the flag is the last token.

    Any `-h...` token met before a match calls `on_help`, unless `h` is the very
    flag being looked up. When `on_help` returns, scanning goes on. A token
    starting with `--` ends the scan with nothing found.
    """
    found, index, token = False, 1, ''
    while index < len(args):
        token = args[index]
        index += 1
        if len(token) < 2 or token[0] != '-': continue
        if token[1] == flag:
            found = True
            break
        if token[1] == 'h':
            on_help()
        elif token[1] == '-':
            break

    if not found:
        trace(f"-{flag} not found in {len(args) - 1} argument(s)")
        return '', False
    if len(token) > 2:
        raw = token[2:]
    elif index < len(args):
        raw = args[index]
    else:
        raw = ''
    trace(f"-{flag} found at position {index - 1} with raw value {raw!r}")
    return raw, True
