"""CUSIP check digit.

Eight payload characters; every second one (1-based even positions) is
doubled, and each value then contributes value // 10 + value % 10.
"""

from __future__ import annotations

from secid.checksum.alphabet import char_value, check_digit_from_sum, consumed_prefix
from secid.core.config import CUSIP_SCHEME, CUSIP_SPECIAL_VALUES
from secid.core.errors import CheckDigitError, InvalidCharacterError
from secid.core.result import Err, Ok

_SOURCE = "checksum.cusip.cusip_check_digit"


def cusip_check_digit(identifier: str) -> Ok[int] | Err[CheckDigitError]:
    prefix = consumed_prefix(identifier, CUSIP_SCHEME, _SOURCE)
    if isinstance(prefix, Err):
        return prefix

    total = 0
    for pos, c in enumerate(prefix.value):
        value = char_value(c, CUSIP_SPECIAL_VALUES)
        if value is None:
            return Err(InvalidCharacterError(
                message=f"CUSIP contains invalid character {c!r} at position {pos}",
                code="INVALID_CHARACTER", source=_SOURCE,
                character=c, position=pos,
            ))
        if (pos + 1) % 2 == 0:
            value *= 2
        # At most 38 * 2 = 76, so two decimal digits.
        total += value // 10 + value % 10
    return Ok(check_digit_from_sum(total))
