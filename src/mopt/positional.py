## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Sequence

from .formatting import trace


def trailing_arguments(args: Sequence[str]) -> list[str]:
    """Arguments after the last dash-led token, or everything after `--`.

    Note this is not "arguments left unconsumed by options": the value of the
    last option (`-o file a b`) is part of the tail. A `--` that is the last
    token yields an empty list.
    """
    tail = list(args[1:])
    marker = 0
    for index, token in enumerate(tail):
        if len(token) < 2 or token[0] != '-': continue
        if token[1] == '-' and index < len(tail) - 1:
            trace(f"positional tail after `--` at position {index + 1}")
            return tail[index + 1:]
        marker = index + 1
    trace(f"positional tail from position {marker + 1}")
    return tail[marker:]
