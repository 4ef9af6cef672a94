"""isin — validated International Securities Identification Numbers (ISO 6166).

    >>> from isin import parse, unwrap
    >>> isin = unwrap(parse("US0378331005"))
    >>> isin.prefix, isin.basic_code, isin.check_digit
    ('US', '037833100', '5')
"""

from isin.core import (
    checksum_functional as checksum_functional,
)
from isin.core import (
    checksum_table as checksum_table,
)
from isin.core import (
    compute_check_digit as compute_check_digit,
)
from isin.core import (
    LENIENT as LENIENT,
)
from isin.core import (
    LOOSE as LOOSE,
)
from isin.core import (
    STRICT as STRICT,
)
from isin.core import (
    ParseConfig as ParseConfig,
)
from isin.core import (
    ASSIGNED_PREFIXES as ASSIGNED_PREFIXES,
)
from isin.core import (
    is_assigned_prefix as is_assigned_prefix,
)
from isin.core import (
    InvalidCharacter as InvalidCharacter,
)
from isin.core import (
    InvalidCheckDigit as InvalidCheckDigit,
)
from isin.core import (
    InvalidCountryCode as InvalidCountryCode,
)
from isin.core import (
    InvalidLength as InvalidLength,
)
from isin.core import (
    ISINError as ISINError,
)
from isin.core import (
    ISIN as ISIN,
)
from isin.core import (
    build as build,
)
from isin.core import (
    build_from_payload as build_from_payload,
)
from isin.core import (
    parse as parse,
)
from isin.core import (
    parse_loose as parse_loose,
)
from isin.core import (
    parse_strict as parse_strict,
)
from isin.core import (
    parse_with as parse_with,
)
from isin.core import (
    Err as Err,
)
from isin.core import (
    Ok as Ok,
)
from isin.core import (
    Result as Result,
)
from isin.core import (
    sequence as sequence,
)
from isin.core import (
    unwrap as unwrap,
)
from isin.core import (
    canonical_bytes as canonical_bytes,
)
from isin.core import (
    from_json as from_json,
)
from isin.core import (
    from_string as from_string,
)
from isin.core import (
    to_json as to_json,
)
from isin.core import (
    to_string as to_string,
)

__version__ = "0.1.0"
