"""Character values, decimal-digit rendering and the shared mod-10 reduction.

Every scheme maps characters to small integers first and only then renders
them as decimal digits, so digit-count parity stays explicit.
"""

from __future__ import annotations

import string
from collections.abc import Iterable, Mapping

from secid.core.config import LETTER_OFFSET, InvalidCharacterPolicy, SchemeConfig
from secid.core.errors import InvalidLengthError
from secid.core.result import Err, Ok

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

_VALUES: dict[str, int] = {
    **{d: int(d) for d in string.digits},
    **{c: i + LETTER_OFFSET for i, c in enumerate(string.ascii_uppercase)},
}


def normalize(identifier: str) -> str:
    """Upper-case ASCII letters only; anything else is left for the alphabet to reject."""
    return identifier.translate(_ASCII_UPPER)


def char_value(c: str, extra: Mapping[str, int] | None = None) -> int | None:
    """0-9 -> 0-9, A-Z -> 10-35, plus any scheme-specific extras. None if unknown."""
    value = _VALUES.get(c)
    if value is None and extra is not None:
        return extra.get(c)
    return value


def decimal_digits(value: int) -> tuple[int, ...]:
    """Render a non-negative integer as its decimal digits: 14 -> (1, 4)."""
    return tuple(int(d) for d in str(value))


def check_digit_from_sum(total: int) -> int:
    """(10 - total mod 10) mod 10, always in [0, 9]."""
    return (10 - total % 10) % 10


def digit_sum(values: Iterable[int]) -> int:
    """Sum of the decimal digits of every value."""
    return sum(d for v in values for d in decimal_digits(v))


def consumed_prefix(
    identifier: str, scheme: SchemeConfig, source: str,
) -> Ok[str] | Err[InvalidLengthError]:
    """Normalize and drop the trailing check-digit position.

    The prefix must hold at least min_payload characters. max_payload is
    enforced only for fail-fast schemes; skip schemes ignore the overflow.
    """
    prefix = normalize(identifier)[:-1]
    too_long = (
        scheme.max_payload is not None
        and len(prefix) > scheme.max_payload
        and scheme.policy is InvalidCharacterPolicy.FAIL_FAST
    )
    if len(prefix) < scheme.min_payload or too_long:
        if scheme.min_payload == scheme.max_payload:
            expected = str(scheme.min_payload)
        elif scheme.max_payload is None:
            expected = f">={scheme.min_payload}"
        else:
            expected = f"{scheme.min_payload}-{scheme.max_payload}"
        return Err(InvalidLengthError(
            message=(
                f"{scheme.name} payload must be {expected} characters "
                f"before the check digit, got {len(prefix)}"
            ),
            code="INVALID_LENGTH", source=source,
            expected=expected, actual=len(prefix),
        ))
    return Ok(prefix)
