"""ISIN check digit: the "modulus 10 double-add-double" formula.

1. map each character to a value (0-9 for digits, A=10 .. Z=35)
2. write each value out as its decimal digits
3. walking the digits from the right, double every other one starting
   with the right-most
4. sum the digits of every (possibly doubled) value
5. check digit = (10 - sum mod 10) mod 10

checksum_functional() follows those steps literally and is kept for tests and
benchmarks. checksum_table() is the one the parser uses: each character is
looked up once, giving its net contribution to the sum for either parity of
the expanded-digit index, and the number of digits it expands to.
"""

from __future__ import annotations

from typing import Final

ALPHABET: Final = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def char_value(c: str) -> int:
    """Value of an uppercase ASCII alphanumeric character (A=10 .. Z=35)."""
    value = ALPHABET.find(c) if len(c) == 1 else -1
    if value < 0:
        raise ValueError(f"checksum input must be 0-9 or A-Z, got {c!r}")
    return value


def checksum_functional(payload: str) -> int:
    """Compute the check digit by explicit digit expansion."""
    digits = "".join(str(char_value(c)) for c in payload)
    total = 0
    for i, ch in enumerate(reversed(digits)):
        d = int(ch)
        if i % 2 == 0:
            d *= 2
            total += d // 10 + d % 10
        else:
            total += d
    return (10 - total % 10) % 10


# Indexed by character value. WIDTHS: digits each value expands to.
# EVENS / ODDS: net contribution mod 10 when the character's right-most digit
# sits at an even (doubled) or odd expanded index, counted from the right.
# fmt: off
_WIDTHS: Final = (
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
    2, 2, 2, 2, 2, 2, 2, 2, 2, 2,
    2, 2, 2, 2, 2, 2, 2, 2, 2, 2,
    2, 2, 2, 2, 2, 2,
)
_EVENS: Final = (
    0, 2, 4, 6, 8, 1, 3, 5, 7, 9,
    1, 3, 5, 7, 9, 2, 4, 6, 8, 0,
    2, 4, 6, 8, 0, 3, 5, 7, 9, 1,
    3, 5, 7, 9, 1, 4,
)
_ODDS: Final = (
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9,
    2, 3, 4, 5, 6, 7, 8, 9, 0, 1,
    4, 5, 6, 7, 8, 9, 0, 1, 2, 3,
    6, 7, 8, 9, 0, 1,
)
# fmt: on

# char -> (contribution at even index, contribution at odd index, width)
_TABLE: Final[dict[str, tuple[int, int, int]]] = {
    c: (_EVENS[v], _ODDS[v], _WIDTHS[v]) for v, c in enumerate(ALPHABET)
}


def checksum_table(payload: str) -> int:
    """Compute the check digit with the precomputed per-character table.

    Raises ValueError on a character outside 0-9 / A-Z; the parser validates
    the character set before calling this.
    """
    total = 0
    idx = 0
    for c in reversed(payload):
        entry = _TABLE.get(c)
        if entry is None:
            raise ValueError(f"checksum input must be 0-9 or A-Z, got {c!r}")
        even, odd, width = entry
        total += odd if idx & 1 else even
        idx += width
    return (10 - total % 10) % 10


def compute_check_digit(payload: str) -> str:
    """Check digit character for a payload (normally prefix + basic code)."""
    return str(checksum_table(payload))
