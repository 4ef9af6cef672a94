"""Parse configuration.

Pure configuration data: no environment variables, no files. The CLI maps its
flags onto the module constants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final


@final
@dataclass(frozen=True, slots=True)
class ParseConfig:
    """How a candidate string is checked before the checksum comparison."""

    strict_prefix: bool = False  # prefix must be an assigned country/special code
    loose: bool = False          # strip whitespace and ASCII-uppercase first


LENIENT: ParseConfig = ParseConfig()
STRICT: ParseConfig = ParseConfig(strict_prefix=True)
LOOSE: ParseConfig = ParseConfig(loose=True)
