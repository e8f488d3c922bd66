"""swiss_uid — parse, validate and render Swiss Business Identification Numbers."""

from swiss_uid.checksum import (
    compute_check_digit as compute_check_digit,
)
from swiss_uid.checksum import (
    is_issuable as is_issuable,
)
from swiss_uid.config import (
    DEFAULT_PARSER_CONFIG as DEFAULT_PARSER_CONFIG,
)
from swiss_uid.config import (
    STRICT_PARSER_CONFIG as STRICT_PARSER_CONFIG,
)
from swiss_uid.config import (
    ParserConfig as ParserConfig,
)
from swiss_uid.errors import (
    InvalidCheckDigitError as InvalidCheckDigitError,
)
from swiss_uid.errors import (
    InvalidFormatError as InvalidFormatError,
)
from swiss_uid.errors import (
    LeadingZeroNotAllowedError as LeadingZeroNotAllowedError,
)
from swiss_uid.errors import (
    MismatchedCheckDigitError as MismatchedCheckDigitError,
)
from swiss_uid.errors import (
    UidError as UidError,
)
from swiss_uid.result import (
    Err as Err,
)
from swiss_uid.result import (
    Ok as Ok,
)
from swiss_uid.result import (
    Result as Result,
)
from swiss_uid.result import (
    unwrap as unwrap,
)
from swiss_uid.serialization import (
    canonical_bytes as canonical_bytes,
)
from swiss_uid.serialization import (
    content_hash as content_hash,
)
from swiss_uid.types import (
    UidPrefix as UidPrefix,
)
from swiss_uid.types import (
    UidSuffix as UidSuffix,
)
from swiss_uid.uid import (
    SwissUid as SwissUid,
)
from swiss_uid.uid import (
    parse_many as parse_many,
)
