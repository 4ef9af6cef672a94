"""
demo_parse.py -- A short walkthrough of the isin package.

We will:
  1. Parse Apple's ISIN and look at its three parts
  2. See how each kind of bad input is reported
  3. Build an ISIN from a prefix and basic code
  4. Send an ISIN through JSON and back

Run this:  python demo_parse.py
"""

from __future__ import annotations

from isin import (
    Err,
    Ok,
    build,
    from_json,
    parse,
    parse_loose,
    parse_strict,
    to_json,
    unwrap,
)


def sep(title: str) -> None:
    """Print a section separator."""
    print(f"\n{'=' * 72}")
    print(f"  {title}")
    print(f"{'=' * 72}\n")


# ============================================================================
#  STEP 1: PARSE A VALID ISIN
# ============================================================================

sep("STEP 1: Parse US0378331005")

# parse() returns Ok(ISIN) or Err(ISINError); it never raises for bad input.
match parse("US0378331005"):
    case Ok(apple):
        print(f"  ISIN:         {apple}")
        print(f"  Prefix:       {apple.prefix}")
        print(f"  Basic code:   {apple.basic_code}")
        print(f"  Check digit:  {apple.check_digit}")
    case Err(e):
        raise RuntimeError(f"Failed to parse: {e.message}")


# ============================================================================
#  STEP 2: REJECTIONS
# ============================================================================

sep("STEP 2: How bad input is reported")

# Each rejection kind is its own error class with inspectable fields.
for candidate in ("US0378331004", "U50378331005", "US037833100", "us0378331005"):
    match parse(candidate):
        case Ok(isin):
            print(f"  {candidate!r:16} -> ok {isin}")
        case Err(e):
            print(f"  {candidate!r:16} -> {type(e).__name__}: {e.message}")

# Loose parsing trims and uppercases first.
print(f"\n  parse_loose(' us0378331005 ') -> {unwrap(parse_loose(' us0378331005 '))}")

# Strict parsing also wants an assigned prefix.
zz = unwrap(build("ZZ", "037833100"))
match parse_strict(zz.value):
    case Err(e):
        print(f"  parse_strict({zz.value!r}) -> {type(e).__name__}: {e.message}")
    case Ok(_):
        raise RuntimeError("ZZ is not an assigned prefix")


# ============================================================================
#  STEP 3: BUILD FROM PARTS
# ============================================================================

sep("STEP 3: Build from prefix and basic code")

built = unwrap(build("US", "037833100"))
print(f"  build('US', '037833100') -> {built}")
assert built == unwrap(parse("US0378331005"))


# ============================================================================
#  STEP 4: JSON ROUND TRIP
# ============================================================================

sep("STEP 4: JSON round trip")

text = to_json(built)
print(f"  Serialized:    {text}")
restored = unwrap(from_json(text))
print(f"  Deserialized:  {restored}")
assert restored == built
