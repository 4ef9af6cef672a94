"""isin.core — public API for ISIN values, parsing, checksums and errors."""

from isin.core.checksum import (
    checksum_functional as checksum_functional,
)
from isin.core.checksum import (
    checksum_table as checksum_table,
)
from isin.core.checksum import (
    compute_check_digit as compute_check_digit,
)
from isin.core.config import (
    LENIENT as LENIENT,
)
from isin.core.config import (
    LOOSE as LOOSE,
)
from isin.core.config import (
    STRICT as STRICT,
)
from isin.core.config import (
    ParseConfig as ParseConfig,
)
from isin.core.country_codes import (
    ASSIGNED_PREFIXES as ASSIGNED_PREFIXES,
)
from isin.core.country_codes import (
    is_assigned_prefix as is_assigned_prefix,
)
from isin.core.errors import (
    InvalidCharacter as InvalidCharacter,
)
from isin.core.errors import (
    InvalidCheckDigit as InvalidCheckDigit,
)
from isin.core.errors import (
    InvalidCountryCode as InvalidCountryCode,
)
from isin.core.errors import (
    InvalidLength as InvalidLength,
)
from isin.core.errors import (
    ISINError as ISINError,
)
from isin.core.identifier import (
    ISIN as ISIN,
)
from isin.core.identifier import (
    build as build,
)
from isin.core.identifier import (
    build_from_payload as build_from_payload,
)
from isin.core.identifier import (
    parse as parse,
)
from isin.core.identifier import (
    parse_loose as parse_loose,
)
from isin.core.identifier import (
    parse_strict as parse_strict,
)
from isin.core.identifier import (
    parse_with as parse_with,
)
from isin.core.result import (
    Err as Err,
)
from isin.core.result import (
    Ok as Ok,
)
from isin.core.result import (
    Result as Result,
)
from isin.core.result import (
    sequence as sequence,
)
from isin.core.result import (
    unwrap as unwrap,
)
from isin.core.serialization import (
    canonical_bytes as canonical_bytes,
)
from isin.core.serialization import (
    from_json as from_json,
)
from isin.core.serialization import (
    from_string as from_string,
)
from isin.core.serialization import (
    to_json as to_json,
)
from isin.core.serialization import (
    to_string as to_string,
)
