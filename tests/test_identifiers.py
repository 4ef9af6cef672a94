"""Tests for isin.core.identifier — the ISIN value type, parsers and builders."""

from __future__ import annotations

import dataclasses
import logging
import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from isin.core.config import LENIENT, LOOSE, STRICT, ParseConfig
from isin.core.errors import (
    InvalidCharacter,
    InvalidCheckDigit,
    InvalidCountryCode,
    InvalidLength,
)
from isin.core.identifier import (
    ISIN,
    build,
    build_from_payload,
    parse,
    parse_loose,
    parse_strict,
    parse_with,
)
from isin.core.result import Err, Ok, unwrap

# Known-good ISINs, one per check digit where possible
_KNOWN_ISINS = (
    "US09739D1000",  # Boise Cascade
    "US4581401001",  # Intel
    "US98421M1062",  # Xerox
    "US02376R1023",  # American Airlines
    "US9216591084",  # Vanda Pharmaceuticals
    "US0207721095",  # AlphaProTec
    "US71363P1066",  # Perdoceo Education
    "US5915202007",  # Methode Electronics
    "US4570301048",  # Ingles Markets
    "US8684591089",  # Supernus Pharmaceuticals
    "US0378331005",  # Apple
    "US5949181045",  # Microsoft
    "US88160R1014",  # Tesla
    "DE0007236101",  # Siemens
    "GB0005405286",  # HSBC
    "JP3633400001",  # Toyota
    "AU0000XVGZA3",
)

_prefixes = st.text(alphabet=string.ascii_uppercase, min_size=2, max_size=2)
_basic_codes = st.text(alphabet=string.digits + string.ascii_uppercase, min_size=9, max_size=9)
_payloads = st.builds(str.__add__, _prefixes, _basic_codes)
_isins = st.builds(lambda p, b: unwrap(build(p, b)), _prefixes, _basic_codes)

# ---------------------------------------------------------------------------
# Concrete scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    def test_parse_apple(self) -> None:
        result = parse("US0378331005")
        assert isinstance(result, Ok)
        isin = result.value
        assert str(isin) == "US0378331005"
        assert isin.prefix == "US"
        assert isin.basic_code == "037833100"
        assert isin.check_digit == "5"

    def test_wrong_check_digit(self) -> None:
        result = parse("US0378331004")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCheckDigit)
        assert result.error.expected == "5"
        assert result.error.was == "4"

    def test_digit_in_prefix(self) -> None:
        result = parse("U50378331005")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCharacter)
        assert result.error.position == 1
        assert result.error.character == "5"

    def test_eleven_characters(self) -> None:
        result = parse("US037833100")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidLength)
        assert result.error.was == 11
        assert result.error.expected == 12

    def test_build_apple(self) -> None:
        assert unwrap(build("US", "037833100")).value == "US0378331005"


class TestKnownIsins:
    @pytest.mark.parametrize("raw", _KNOWN_ISINS)
    def test_parses(self, raw: str) -> None:
        assert unwrap(parse(raw)).value == raw

    @pytest.mark.parametrize("raw", _KNOWN_ISINS)
    def test_parses_strict(self, raw: str) -> None:
        assert isinstance(parse_strict(raw), Ok)

    def test_every_check_digit_represented(self) -> None:
        assert {raw[11] for raw in _KNOWN_ISINS} == set("0123456789")


# ---------------------------------------------------------------------------
# Length boundary
# ---------------------------------------------------------------------------


class TestLength:
    @pytest.mark.parametrize("raw", ["", "U", "US037833100", "US03783310050", "US0378331005 "])
    def test_wrong_length(self, raw: str) -> None:
        result = parse(raw)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidLength)
        assert result.error.part == "isin"
        assert result.error.was == len(raw)

    def test_length_checked_before_characters(self) -> None:
        result = parse("!!!")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidLength)

    def test_twelve_proceeds_to_character_checks(self) -> None:
        result = parse("!!!!!!!!!!!!")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCharacter)
        assert result.error.position == 0

    @given(s=st.text(max_size=40).filter(lambda s: len(s) != 12))
    def test_any_other_length_rejected(self, s: str) -> None:
        result = parse(s)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidLength)


# ---------------------------------------------------------------------------
# Character classes per position
# ---------------------------------------------------------------------------


class TestCharacters:
    def test_lowercase_prefix(self) -> None:
        result = parse("uS0378331005")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCharacter)
        assert result.error.position == 0
        assert result.error.character == "u"
        assert result.error.expected == "letter"

    def test_symbol_in_basic_code(self) -> None:
        result = parse("US037833-005")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCharacter)
        assert result.error.position == 8
        assert result.error.character == "-"
        assert result.error.expected == "letter or digit"

    def test_lowercase_basic_code(self) -> None:
        result = parse("US09739d1000")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCharacter)
        assert result.error.position == 7

    def test_letter_as_check_digit(self) -> None:
        result = parse("US037833100A")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCharacter)
        assert result.error.position == 11
        assert result.error.expected == "digit"

    def test_first_failure_reported(self) -> None:
        result = parse("1S03783310-A")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCharacter)
        assert result.error.position == 0

    def test_non_ascii_rejected(self) -> None:
        result = parse("\u00dcS0378331005")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCharacter)
        assert result.error.position == 0

    def test_unicode_digit_rejected(self) -> None:
        # Arabic-Indic five: str.isdigit() is True, but it is not ASCII
        result = parse("US037833100\u0665")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCharacter)
        assert result.error.position == 11


# ---------------------------------------------------------------------------
# Check digit boundary
# ---------------------------------------------------------------------------


class TestCheckDigit:
    @pytest.mark.parametrize("digit", [d for d in "0123456789" if d != "5"])
    def test_only_the_right_digit_validates(self, digit: str) -> None:
        result = parse("US037833100" + digit)
        assert isinstance(result, Err)
        assert result.error == InvalidCheckDigit(
            message=result.error.message, code="INVALID_CHECK_DIGIT", expected="5", was=digit,
        )

    def test_transposed_digits(self) -> None:
        result = parse("US0378313005")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCheckDigit)

    @given(isin=_isins, delta=st.integers(min_value=1, max_value=9))
    def test_any_altered_check_digit_rejected(self, isin: ISIN, delta: int) -> None:
        wrong = str((int(isin.check_digit) + delta) % 10)
        result = parse(isin.payload + wrong)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCheckDigit)
        assert result.error.expected == isin.check_digit
        assert result.error.was == wrong


# ---------------------------------------------------------------------------
# Strict mode
# ---------------------------------------------------------------------------


class TestStrict:
    def test_unassigned_prefix_passes_lenient_fails_strict(self) -> None:
        zz = unwrap(build("ZZ", "037833100"))
        assert isinstance(parse(zz.value), Ok)
        result = parse_strict(zz.value)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCountryCode)
        assert result.error.prefix == "ZZ"

    def test_special_prefix_accepted(self) -> None:
        xs = unwrap(build("XS", "000000000"))
        assert isinstance(parse_strict(xs.value), Ok)

    def test_structural_error_wins_over_prefix(self) -> None:
        result = parse_strict("ZZ037833100A")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCharacter)

    def test_isin_parse_strict_alias(self) -> None:
        assert isinstance(ISIN.parse_strict("US0378331005"), Ok)


# ---------------------------------------------------------------------------
# Loose mode
# ---------------------------------------------------------------------------


class TestLoose:
    def test_trims_and_uppercases(self) -> None:
        assert unwrap(parse_loose("\tus0378331005    ")).value == "US0378331005"

    def test_lenient_rejects_lowercase(self) -> None:
        assert isinstance(parse("us0378331005"), Err)

    def test_loose_still_checks_checksum(self) -> None:
        result = parse_loose(" us0378331004 ")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCheckDigit)

    def test_only_ascii_is_uppercased(self) -> None:
        # "\u00df".upper() is "SS"; ASCII-only uppercasing keeps the length at 12
        result = parse_loose("\u00dfS0378331005")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCharacter)

    def test_strict_and_loose_together(self) -> None:
        config = ParseConfig(strict_prefix=True, loose=True)
        assert isinstance(parse_with(" us0378331005", config), Ok)


# ---------------------------------------------------------------------------
# Building
# ---------------------------------------------------------------------------


class TestBuild:
    def test_prefix_length(self) -> None:
        result = build("USA", "037833100")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidLength)
        assert result.error.part == "prefix"
        assert result.error.was == 3

    def test_basic_code_length(self) -> None:
        result = build("US", "03783310")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidLength)
        assert result.error.part == "basic_code"
        assert result.error.expected == 9

    def test_lengths_checked_before_characters(self) -> None:
        result = build("u$", "0378")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidLength)
        assert result.error.part == "basic_code"

    def test_character_position_within_isin(self) -> None:
        result = build("US", "0378331-0")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCharacter)
        assert result.error.position == 9

    def test_bad_prefix_character(self) -> None:
        result = build("U1", "037833100")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCharacter)
        assert result.error.position == 1

    def test_strict_build(self) -> None:
        result = build("ZZ", "037833100", STRICT)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCountryCode)

    def test_loose_build(self) -> None:
        assert unwrap(build(" us", "037833100 ", LOOSE)).value == "US0378331005"

    def test_from_payload(self) -> None:
        assert unwrap(build_from_payload("US037833100")).value == "US0378331005"

    def test_from_payload_length(self) -> None:
        result = build_from_payload("US0378331005")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidLength)
        assert result.error.part == "payload"

    def test_isin_build_alias(self) -> None:
        assert unwrap(ISIN.build("US", "037833100")).value == "US0378331005"

    @given(prefix=_prefixes, basic_code=_basic_codes)
    def test_build_then_parse(self, prefix: str, basic_code: str) -> None:
        built = unwrap(build(prefix, basic_code))
        assert built.prefix == prefix
        assert built.basic_code == basic_code
        assert parse(built.value) == Ok(built)

    @given(payload=_payloads)
    def test_build_from_payload_matches_build(self, payload: str) -> None:
        assert build_from_payload(payload) == build(payload[:2], payload[2:])


# ---------------------------------------------------------------------------
# Value type
# ---------------------------------------------------------------------------


class TestISINValue:
    def test_frozen(self) -> None:
        isin = unwrap(parse("US0378331005"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            isin.value = "changed"  # type: ignore[misc]

    def test_aliases(self) -> None:
        isin = unwrap(parse("US0378331005"))
        assert isin.country_code == isin.prefix == "US"
        assert isin.security_identifier == isin.basic_code == "037833100"
        assert isin.payload == "US037833100"

    def test_direct_construction_validates(self) -> None:
        assert ISIN("US0378331005") == unwrap(parse("US0378331005"))

    @pytest.mark.parametrize("raw", ["US0378331004", "US037833100", "us0378331005"])
    def test_direct_construction_rejects_invalid(self, raw: str) -> None:
        with pytest.raises(TypeError):
            ISIN(raw)

    def test_direct_construction_rejects_non_str(self) -> None:
        with pytest.raises(TypeError):
            ISIN(378331005)  # type: ignore[arg-type]

    def test_equality_and_hash(self) -> None:
        a = unwrap(parse("US0378331005"))
        b = unwrap(parse_loose("us0378331005"))
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_ordering_follows_string(self) -> None:
        values = [unwrap(parse(raw)) for raw in _KNOWN_ISINS]
        assert [v.value for v in sorted(values)] == sorted(_KNOWN_ISINS)

    def test_isin_parse_alias(self) -> None:
        assert ISIN.parse("US0378331005") == parse("US0378331005")
        assert ISIN.parse_loose(" us0378331005") == parse("US0378331005")


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestProperties:
    @given(isin=_isins)
    def test_round_trip(self, isin: ISIN) -> None:
        assert parse(str(isin)) == Ok(isin)

    @given(s=st.text(max_size=20))
    def test_parse_is_total(self, s: str) -> None:
        assert isinstance(parse_with(s, LENIENT), (Ok, Err))
        assert isinstance(parse_with(s, STRICT), (Ok, Err))
        assert isinstance(parse_with(s, LOOSE), (Ok, Err))

    @given(s=st.text(alphabet="0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ", min_size=12, max_size=12))
    def test_accepted_strings_round_trip(self, s: str) -> None:
        match parse(s):
            case Ok(isin):
                assert isin.value == s
            case Err(_):
                pass

    def test_non_str_raises(self) -> None:
        with pytest.raises(TypeError):
            parse(None)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            build("US", 37833100)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


class TestLogging:
    def test_rejection_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="isin.core.identifier"):
            parse("US0378331004")
        assert "incorrect check digit" in caplog.text

    def test_success_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="isin.core.identifier"):
            parse("US0378331005")
        assert caplog.records == []
