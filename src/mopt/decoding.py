## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import math
import struct


INT64_MIN, INT64_MAX = -2**63, 2**63 - 1

_INTEGER_RE = re.compile(r'[+-]?[0-9]+')
INT64_DIGITS = 19

# Decimal only; hexadecimal floats such as `0x1p-2` give the default.
_FLOAT_RE = re.compile(r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)', re.IGNORECASE)


def decode_string(raw: str, default: str) -> str:
    # A dash-led value is the next option, unless escaped as `\-`.
    if not raw or raw[0] == '-': return default
    if raw.startswith('\\-'): return raw[1:]
    return raw


def decode_number(raw: str, default: int) -> int:
    if not _INTEGER_RE.fullmatch(raw): return default
    # Leading zeros do not count; longer digit runs are past int64 anyway.
    digits = raw.lstrip("+-").lstrip("0")
    if len(digits) > INT64_DIGITS: return default
    value = -int(digits or "0") if raw[0] == "-" else int(digits or "0")
    return value if INT64_MIN <= value <= INT64_MAX else default


def to_float32(value: float) -> float:
    """Round to the nearest single precision value; raises OverflowError if out of range."""
    return struct.unpack('<f', struct.pack('<f', value))[0]


def decode_float(raw: str, default: float) -> float:
    if not _FLOAT_RE.fullmatch(raw): return default
    value = float(raw)
    if math.isinf(value) and 'inf' not in raw.lower(): return default
    try:
        return to_float32(value)
    except OverflowError:
        return default
