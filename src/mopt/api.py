## mopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .usage import Usage, UsageConfig, HELP_LEAD
from .errors import *
from .bitflags import bit_names

_USAGE = Usage()

def usage(text: str) -> Usage:
    _USAGE.text = text
    return _USAGE

def __getattr__(name):
    return getattr(_USAGE, name)
