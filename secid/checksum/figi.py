"""FIGI check digit.

Same doubling as ISIN, but applied to character values directly rather
than to a pre-expanded digit string. FIGI_SCHEME uses the SKIP policy:
unknown characters and anything past the eleventh position add nothing
to the sum instead of failing the calculation.
"""

from __future__ import annotations

from secid.checksum.alphabet import char_value, check_digit_from_sum, consumed_prefix, digit_sum
from secid.core.config import FIGI_SCHEME, InvalidCharacterPolicy, SchemeConfig
from secid.core.errors import CheckDigitError, InvalidCharacterError
from secid.core.result import Err, Ok

_SOURCE = "checksum.figi.figi_check_digit"


def figi_check_digit(
    identifier: str, scheme: SchemeConfig = FIGI_SCHEME,
) -> Ok[int] | Err[CheckDigitError]:
    """Check digit under scheme's character policy.

    With the default SKIP policy only an empty payload is an error. A
    FAIL_FAST scheme rejects the first unknown character and any payload
    longer than max_payload instead.
    """
    prefix = consumed_prefix(identifier, scheme, _SOURCE)
    if isinstance(prefix, Err):
        return prefix

    values: list[int] = []
    for pos, c in enumerate(prefix.value):
        if scheme.max_payload is not None and pos >= scheme.max_payload:
            break
        value = char_value(c)
        if value is None:
            if scheme.policy is InvalidCharacterPolicy.SKIP:
                continue
            return Err(InvalidCharacterError(
                message=f"{scheme.name} contains invalid character {c!r} at position {pos}",
                code="INVALID_CHARACTER", source=_SOURCE,
                character=c, position=pos,
            ))
        values.append(value * 2 if (pos + 1) % 2 == 0 else value)
    return Ok(check_digit_from_sum(digit_sum(values)))
