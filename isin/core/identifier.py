"""The ISIN value type, its parsers and its builders.

An ISIN is 12 ASCII characters: a two-letter prefix, a nine-character
alphanumeric basic code, and a check digit over the first eleven.

parse_with() is the single validation path. It never raises for bad input:
the candidate is scanned left to right, the first character outside its
position's class is reported, and only a structurally valid candidate reaches
the checksum engine. A checksum mismatch is reported as InvalidCheckDigit so
callers can tell a typo from a malformed string.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from typing import Final, final

from isin.core.checksum import compute_check_digit
from isin.core.config import LENIENT, LOOSE, STRICT, ParseConfig
from isin.core.country_codes import is_assigned_prefix
from isin.core.errors import (
    InvalidCharacter,
    ISINError,
    invalid_character,
    invalid_check_digit,
    invalid_country_code,
    invalid_length,
)
from isin.core.result import Err, Ok

_log = logging.getLogger(__name__)

ISIN_LENGTH: Final = 12
PAYLOAD_LENGTH: Final = 11
PREFIX_LENGTH: Final = 2
BASIC_CODE_LENGTH: Final = 9

_LETTERS: Final = frozenset(string.ascii_uppercase)
_DIGITS: Final = frozenset(string.digits)
_ALNUM: Final = _LETTERS | _DIGITS

# (allowed characters, description) for each of the 12 positions
_POSITIONS: Final = (
    ((_LETTERS, "letter"),) * PREFIX_LENGTH
    + ((_ALNUM, "letter or digit"),) * BASIC_CODE_LENGTH
    + ((_DIGITS, "digit"),)
)

_ASCII_UPPER: Final = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


@final
@dataclass(frozen=True, slots=True, order=True)
class ISIN:
    """International Securities Identification Number, check digit verified.

    Equality, hashing and ordering follow the 12-character string.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"ISIN requires str, got {type(self.value).__name__}")
        error = _check(self.value, LENIENT)
        if error is not None:
            raise TypeError(f"ISIN requires a valid ISIN string: {error.message}")

    @classmethod
    def _from_validated(cls, value: str) -> ISIN:
        # Skips __post_init__; only called after _check() or a fresh build.
        isin = object.__new__(cls)
        object.__setattr__(isin, "value", value)
        return isin

    def __str__(self) -> str:
        return self.value

    @property
    def prefix(self) -> str:
        """Two-letter country (or special) code."""
        return self.value[:PREFIX_LENGTH]

    @property
    def country_code(self) -> str:
        return self.prefix

    @property
    def basic_code(self) -> str:
        """Nine-character security identifier assigned by the numbering agency."""
        return self.value[PREFIX_LENGTH:PAYLOAD_LENGTH]

    @property
    def security_identifier(self) -> str:
        return self.basic_code

    @property
    def payload(self) -> str:
        """Everything except the check digit."""
        return self.value[:PAYLOAD_LENGTH]

    @property
    def check_digit(self) -> str:
        return self.value[PAYLOAD_LENGTH]

    @staticmethod
    def parse(raw: str) -> Ok[ISIN] | Err[ISINError]:
        return parse_with(raw, LENIENT)

    @staticmethod
    def parse_strict(raw: str) -> Ok[ISIN] | Err[ISINError]:
        return parse_with(raw, STRICT)

    @staticmethod
    def parse_loose(raw: str) -> Ok[ISIN] | Err[ISINError]:
        return parse_with(raw, LOOSE)

    @staticmethod
    def build(prefix: str, basic_code: str) -> Ok[ISIN] | Err[ISINError]:
        return build(prefix, basic_code)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _require_str(name: str, value: object) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")


def _normalize(raw: str) -> str:
    return raw.strip().translate(_ASCII_UPPER)


def _scan(chars: str) -> InvalidCharacter | None:
    """First character outside its position's class, scanning from position 0."""
    for pos, c in enumerate(chars):
        allowed, expected = _POSITIONS[pos]
        if c not in allowed:
            return invalid_character(pos, c, expected)
    return None


def _check(candidate: str, config: ParseConfig) -> ISINError | None:
    if len(candidate) != ISIN_LENGTH:
        return invalid_length("isin", ISIN_LENGTH, len(candidate))
    error: ISINError | None = _scan(candidate)
    if error is not None:
        return error
    prefix = candidate[:PREFIX_LENGTH]
    if config.strict_prefix and not is_assigned_prefix(prefix):
        return invalid_country_code(prefix)
    expected = compute_check_digit(candidate[:PAYLOAD_LENGTH])
    if candidate[PAYLOAD_LENGTH] != expected:
        return invalid_check_digit(expected, candidate[PAYLOAD_LENGTH])
    return None


def _reject(raw: str, error: ISINError) -> Err[ISINError]:
    _log.debug("rejected %r: %s", raw, error.message)
    return Err(error)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_with(candidate: str, config: ParseConfig = LENIENT) -> Ok[ISIN] | Err[ISINError]:
    """Parse a candidate string under the given configuration."""
    _require_str("ISIN candidate", candidate)
    if config.loose:
        candidate = _normalize(candidate)
    error = _check(candidate, config)
    if error is not None:
        return _reject(candidate, error)
    return Ok(ISIN._from_validated(candidate))


def parse(candidate: str) -> Ok[ISIN] | Err[ISINError]:
    """Lenient parse: structure and checksum; any two-letter prefix."""
    return parse_with(candidate, LENIENT)


def parse_strict(candidate: str) -> Ok[ISIN] | Err[ISINError]:
    """Lenient parse plus an assigned-prefix check."""
    return parse_with(candidate, STRICT)


def parse_loose(candidate: str) -> Ok[ISIN] | Err[ISINError]:
    """Lenient parse after trimming whitespace and uppercasing ASCII letters."""
    return parse_with(candidate, LOOSE)


# ---------------------------------------------------------------------------
# Building
# ---------------------------------------------------------------------------


def _build_payload(payload: str, config: ParseConfig) -> Ok[ISIN] | Err[ISINError]:
    error: ISINError | None = _scan(payload)
    if error is None and config.strict_prefix and not is_assigned_prefix(payload[:PREFIX_LENGTH]):
        error = invalid_country_code(payload[:PREFIX_LENGTH])
    if error is not None:
        return _reject(payload, error)
    return Ok(ISIN._from_validated(payload + compute_check_digit(payload)))


def build(
    prefix: str, basic_code: str, config: ParseConfig = LENIENT,
) -> Ok[ISIN] | Err[ISINError]:
    """Build an ISIN from its prefix and basic code, appending the check digit.

    Both lengths are checked before either part's characters; character
    positions in errors are positions within the resulting ISIN.
    """
    _require_str("prefix", prefix)
    _require_str("basic_code", basic_code)
    if config.loose:
        prefix, basic_code = _normalize(prefix), _normalize(basic_code)
    if len(prefix) != PREFIX_LENGTH:
        return _reject(prefix, invalid_length("prefix", PREFIX_LENGTH, len(prefix)))
    if len(basic_code) != BASIC_CODE_LENGTH:
        return _reject(
            basic_code, invalid_length("basic_code", BASIC_CODE_LENGTH, len(basic_code)),
        )
    return _build_payload(prefix + basic_code, config)


def build_from_payload(
    payload: str, config: ParseConfig = LENIENT,
) -> Ok[ISIN] | Err[ISINError]:
    """Build an ISIN from an 11-character payload, appending the check digit."""
    _require_str("payload", payload)
    if config.loose:
        payload = _normalize(payload)
    if len(payload) != PAYLOAD_LENGTH:
        return _reject(payload, invalid_length("payload", PAYLOAD_LENGTH, len(payload)))
    return _build_payload(payload, config)
