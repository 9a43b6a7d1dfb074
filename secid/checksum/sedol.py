"""SEDOL check digit.

Six payload characters weighted 1, 3, 1, 7, 3, 9. Vowels are not part of
the SEDOL alphabet; consonants keep their A=10 based value, so the codes
have gaps where the vowels would be.
"""

from __future__ import annotations

from secid.checksum.alphabet import char_value, check_digit_from_sum, consumed_prefix
from secid.core.config import SEDOL_SCHEME, SEDOL_VOWELS, SEDOL_WEIGHTS
from secid.core.errors import CheckDigitError, InvalidCharacterError, InvalidVowelError
from secid.core.result import Err, Ok

_SOURCE = "checksum.sedol.sedol_check_digit"


def sedol_check_digit(identifier: str) -> Ok[int] | Err[CheckDigitError]:
    prefix = consumed_prefix(identifier, SEDOL_SCHEME, _SOURCE)
    if isinstance(prefix, Err):
        return prefix

    total = 0
    for pos, c in enumerate(prefix.value):
        if c in SEDOL_VOWELS:
            return Err(InvalidVowelError(
                message=f"SEDOL contains vowel {c!r} at position {pos}",
                code="INVALID_VOWEL", source=_SOURCE,
                character=c, position=pos,
            ))
        value = char_value(c)
        if value is None:
            return Err(InvalidCharacterError(
                message=f"SEDOL contains invalid character {c!r} at position {pos}",
                code="INVALID_CHARACTER", source=_SOURCE,
                character=c, position=pos,
            ))
        total += value * SEDOL_WEIGHTS[pos]
    return Ok(check_digit_from_sum(total))
