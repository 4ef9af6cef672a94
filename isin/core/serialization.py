"""String and JSON interchange for ISIN values.

The 12-character string is the only serialization contract: an ISIN is
written as that string and read back through the parser, so a deserialized
value is always re-validated. JSON framing is layered on top.

canonical_bytes(obj) -> Result[bytes, str]: deterministic JSON bytes.
"""

from __future__ import annotations

import json
from typing import Any

from isin.core.config import LENIENT, ParseConfig
from isin.core.errors import ISINError
from isin.core.identifier import ISIN, parse_with
from isin.core.result import Err, Ok


def to_string(isin: ISIN) -> str:
    return isin.value


def from_string(raw: str, config: ParseConfig = LENIENT) -> Ok[ISIN] | Err[ISINError]:
    return parse_with(raw, config)


def to_json(isin: ISIN) -> str:
    """JSON string literal, e.g. '"US0378331005"'."""
    return json.dumps(isin.value)


def from_json(text: str, config: ParseConfig = LENIENT) -> Ok[ISIN] | Err[ISINError | str]:
    """Read an ISIN back from a JSON string literal.

    Malformed JSON or a non-string JSON value gives Err[str]; a string that is
    not a valid ISIN gives the parser's Err[ISINError].
    """
    try:
        decoded = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(f"Invalid JSON: {e}")
    if not isinstance(decoded, str):
        return Err(f"Expected a JSON string, got {type(decoded).__name__}")
    return parse_with(decoded, config)


def _to_serializable(obj: object) -> Any:  # noqa: PLR0911
    """Recursively convert ISINs, errors and containers to JSON-compatible values."""
    if obj is None:
        return None
    # bool before int (bool is subclass of int)
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, (int, str)):
        return obj
    if isinstance(obj, ISIN):
        return obj.value
    if isinstance(obj, ISINError):
        return {str(k): _to_serializable(v) for k, v in sorted(obj.to_dict().items())}
    if isinstance(obj, Ok):
        return {"ok": _to_serializable(obj.value)}
    if isinstance(obj, Err):
        return {"err": _to_serializable(obj.error)}
    if isinstance(obj, (tuple, list)):
        return [_to_serializable(x) for x in obj]
    if isinstance(obj, dict):
        return {str(k): _to_serializable(v) for k, v in sorted(obj.items())}
    msg = f"Cannot serialize {type(obj).__name__}"
    raise TypeError(msg)


def canonical_bytes(obj: object) -> Ok[bytes] | Err[str]:
    """Convert ISINs, error values, results and containers to canonical JSON bytes.

    Returns Err on unsupported types; never raises TypeError.
    """
    try:
        serializable = _to_serializable(obj)
    except TypeError as e:
        return Err(f"Unsupported type in canonical serialization: {e}")
    return Ok(
        json.dumps(serializable, sort_keys=True, separators=(",", ":")).encode("utf-8")
    )
