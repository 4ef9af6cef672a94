"""Error values for ISIN parsing and building — nothing here is raised.

Every rejection is a frozen dataclass value that can be pattern-matched,
compared and serialized. Base class ISINError, four @final subclasses.
Use the factory functions at the bottom of the module so messages stay uniform.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal, final

LengthPart = Literal["isin", "payload", "prefix", "basic_code"]

_PART_NAMES: dict[str, str] = {
    "isin": "ISIN",
    "payload": "payload",
    "prefix": "prefix",
    "basic_code": "basic code",
}


@dataclass(frozen=True, slots=True)
class ISINError:
    """Base error value. NOT @final — has subclasses."""

    message: str
    code: str

    def with_context(self, context: str) -> ISINError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        return {"message": self.message, "code": self.code}


@final
@dataclass(frozen=True, slots=True)
class InvalidLength(ISINError):
    """The candidate (or one of the parts given to a builder) has the wrong length."""

    part: LengthPart
    expected: int
    was: int

    def to_dict(self) -> dict[str, object]:
        return {
            **ISINError.to_dict(self),
            "part": self.part,
            "expected": self.expected,
            "was": self.was,
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidCharacter(ISINError):
    """A character falls outside the class allowed at its position."""

    position: int  # 0-based, within the 12-character ISIN
    character: str
    expected: str  # "letter", "letter or digit" or "digit"

    def to_dict(self) -> dict[str, object]:
        return {
            **ISINError.to_dict(self),
            "position": self.position,
            "character": self.character,
            "expected": self.expected,
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidCountryCode(ISINError):
    """Strict mode: the prefix is not an assigned country or special code."""

    prefix: str

    def to_dict(self) -> dict[str, object]:
        return {**ISINError.to_dict(self), "prefix": self.prefix}


@final
@dataclass(frozen=True, slots=True)
class InvalidCheckDigit(ISINError):
    """Well-formed, but the check digit does not match the payload."""

    expected: str
    was: str

    def to_dict(self) -> dict[str, object]:
        return {**ISINError.to_dict(self), "expected": self.expected, "was": self.was}


# --- Factories ---


def invalid_length(part: LengthPart, expected: int, was: int) -> InvalidLength:
    return InvalidLength(
        message=f"invalid {_PART_NAMES[part]} length {was} when expecting {expected}",
        code="INVALID_LENGTH",
        part=part,
        expected=expected,
        was=was,
    )


def invalid_character(position: int, character: str, expected: str) -> InvalidCharacter:
    return InvalidCharacter(
        message=f"character {character!r} at position {position} is not a {expected}",
        code="INVALID_CHARACTER",
        position=position,
        character=character,
        expected=expected,
    )


def invalid_country_code(prefix: str) -> InvalidCountryCode:
    return InvalidCountryCode(
        message=f"prefix {prefix!r} is not an assigned country or special code",
        code="INVALID_COUNTRY_CODE",
        prefix=prefix,
    )


def invalid_check_digit(expected: str, was: str) -> InvalidCheckDigit:
    return InvalidCheckDigit(
        message=f"incorrect check digit {was!r} when expecting {expected!r}",
        code="INVALID_CHECK_DIGIT",
        expected=expected,
        was=was,
    )
