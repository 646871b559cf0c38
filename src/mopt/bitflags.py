## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

MASK32 = 0xFFFFFFFF
NEGATION = 'no-'


def apply_bitflags(raw: str, current: int, table: str) -> int:
    """Set or clear bits of `current` from a `name[,no-name]*` list.

    Bit positions come from the order of names in the comma separated `table`,
    so changing that order changes the meaning of any stored mask. Names that
    are not in the table are skipped silently.
    """
    names = table.split(',')[:32]
    result = current
    for entry in raw.split(','):
        clear = entry.startswith(NEGATION)
        if clear: entry = entry[len(NEGATION):]
        for bit, name in enumerate(names):
            if name != entry: continue
            if clear:
                result &= ~(1 << bit) & MASK32
            else:
                result |= 1 << bit
    return result


def bit_names(mask: int, table: str) -> list[str]:
    """List the names from `table` whose bit is set in `mask`."""
    return [name for bit, name in enumerate(table.split(',')[:32]) if mask & (1 << bit)]
