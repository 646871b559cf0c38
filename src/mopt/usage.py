## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# mopt — getopt style options, re-scanned from the argument vector on every query.
#

import os
import sys
from dataclasses import dataclass, field
from typing import Callable, Sequence, TextIO

from .errors import MoptFlagError, MoptValueError
from .scanner import scan_option
from .decoding import decode_string, decode_number, decode_float
from .bitflags import apply_bitflags, MASK32
from .positional import trailing_arguments


# Lead printed between the program name and the usage text; `MOPT_HELP_LEAD` replaces it.
HELP_LEAD = "purpose, usage & options:\n"


def _default_lead() -> str:
    return os.environ.get('MOPT_HELP_LEAD', HELP_LEAD)


@dataclass(frozen=True)
class UsageConfig:
    lead: str = field(default_factory=_default_lead)
    exit: Callable[[int], object] | None = None
    file: TextIO | None = None


class Usage:
    """Holder of the help text, answering `opt_*` queries against an argument vector.

    Nothing is parsed up front: every query scans the arguments anew, and
    options that are never asked for are never noticed. There is no feedback
    on unknown options, nor any guard against reusing a letter. If `-h` shows
    up while looking for another letter, the usage text is printed and the
    exit hook is called with 0.

    Spaces between a letter and its value are optional, so `-a bc` and `-abc`
    are the same; `-abc` is never three flags. A value that starts with a dash
    must be escaped: `-s\\-dashed`.
    """

    def __init__(self, text: str = "", argv: Sequence[str] | None = None, config: UsageConfig | None = None):
        self.text = text
        self.argv = argv
        self.config = config or UsageConfig()

    @property
    def args(self) -> Sequence[str]:
        # Read `sys.argv` late so that it may be swapped between queries.
        return sys.argv if self.argv is None else self.argv

    def __repr__(self):
        return f"Usage({self.text!r})"

    def show_help(self) -> None:
        args = self.args
        program = args[0] if len(args) else ''
        print(program, self.config.lead, self.text, file=self.config.file or sys.stdout)
        (self.config.exit or sys.exit)(0)

    def _lookup(self, flag: str) -> tuple[str, bool]:
        if not isinstance(flag, str) or len(flag) != 1:
            raise MoptFlagError(f"Option flag must be a single character, got `{flag!r}`.", flag=flag)
        return scan_option(self.args, flag, self.show_help)

    def opt_b(self, flag: str) -> bool:
        """True if `-<flag>` was given."""
        return self._lookup(flag)[1]

    def opt_s(self, flag: str, default: str) -> str:
        raw, found = self._lookup(flag)
        return decode_string(raw, default) if found else default

    def opt_n(self, flag: str, default: int) -> int:
        raw, found = self._lookup(flag)
        return decode_number(raw, default) if found else default

    def opt_f(self, flag: str, default: float) -> float:
        """Float following the flag, limited to what single precision can hold."""
        raw, found = self._lookup(flag)
        return decode_float(raw, default) if found else default

    def opt_csf(self, flag: str, current: int, table: str) -> int:
        """Return a copy of `current` with bits set or zeroed from `-<flag>name,no-name`.

        Bit `i` belongs to the i-th name of the comma separated `table`; a bit
        is set only by its `name` entry and zeroed only by its `no-name` entry.
        """
        if not 0 <= current <= MASK32:
            raise MoptValueError(f"Current bitflags must fit in 32 unsigned bits, got {current}.", flag=flag)
        raw, found = self._lookup(flag)
        return apply_bitflags(raw, current, table) if found else current

    def opt_l(self) -> list[str]:
        return trailing_arguments(self.args)

    def help_topic(self, default: str) -> str:
        """Text after `-h`, asked for before any other query to handle help without exiting."""
        return self.opt_s('h', default)
