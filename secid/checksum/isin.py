"""ISIN check digit (ISO 6166).

Letters expand to two decimal digits (A=10 ... Z=35) before the Luhn pass,
so the doubled positions depend on the parity of the expanded length,
not on the number of characters.
"""

from __future__ import annotations

from secid.checksum.alphabet import (
    char_value,
    check_digit_from_sum,
    consumed_prefix,
    decimal_digits,
    digit_sum,
)
from secid.core.config import ISIN_SCHEME
from secid.core.errors import CheckDigitError, InvalidCharacterError
from secid.core.result import Err, Ok

_SOURCE = "checksum.isin.isin_check_digit"


def expand_isin_payload(payload: str) -> Ok[tuple[int, ...]] | Err[InvalidCharacterError]:
    """Expand an upper-cased payload into its digit sequence: "US0" -> (3, 0, 2, 8, 0)."""
    digits: list[int] = []
    for pos, c in enumerate(payload):
        value = char_value(c)
        if value is None:
            return Err(InvalidCharacterError(
                message=f"ISIN payload contains invalid character {c!r} at position {pos}",
                code="INVALID_CHARACTER", source=_SOURCE,
                character=c, position=pos,
            ))
        digits.extend(decimal_digits(value))
    return Ok(tuple(digits))


def luhn_total(digits: tuple[int, ...]) -> int:
    """Sum after doubling every second digit, counted from the right-hand end.

    Odd-length sequences double indices 0, 2, 4, ...; even-length sequences
    double indices 1, 3, 5, .... Doubled values contribute their digit sum.
    """
    first = 0 if len(digits) % 2 == 1 else 1
    doubled = digits[first::2]
    kept = digits[1 - first::2]
    return digit_sum(d * 2 for d in doubled) + sum(kept)


def isin_check_digit(identifier: str) -> Ok[int] | Err[CheckDigitError]:
    """Check digit for the first len-1 characters of identifier.

    The last character is ignored: pass a placeholder to generate a digit,
    or compare the result with it to validate one.
    """
    prefix = consumed_prefix(identifier, ISIN_SCHEME, _SOURCE)
    if isinstance(prefix, Err):
        return prefix
    expanded = expand_isin_payload(prefix.value)
    if isinstance(expanded, Err):
        return expanded
    return Ok(check_digit_from_sum(luhn_total(expanded.value)))
