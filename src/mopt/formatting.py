## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import os
import re
import sys


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))

def debug_enabled() -> bool:
    return bool(os.environ.get('MOPT_DEBUG'))

def trace(message: str, file=None) -> None:
    if not debug_enabled(): return
    print(f"\033[90mmopt: {message}\033[0m", file=file or sys.stderr)

def format_value(value) -> str:
    if isinstance(value, bool): return str(value).lower()
    if isinstance(value, (list, tuple)): return '\n'.join(value)
    return str(value)
