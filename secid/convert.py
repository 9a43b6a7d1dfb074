"""National identifier -> ISIN conversion.

The national check digit is only a validity gate: its value is discarded,
and the ISIN check digit is computed over prefix + national identifier.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Literal

from secid.checksum.alphabet import normalize
from secid.checksum.cusip import cusip_check_digit
from secid.checksum.isin import isin_check_digit
from secid.checksum.sedol import sedol_check_digit
from secid.core.config import (
    CHECK_DIGIT_PLACEHOLDER,
    CUSIP_ISIN_PREFIXES,
    CUSIP_SCHEME,
    SEDOL_ISIN_PREFIXES,
    SEDOL_SCHEME,
    SchemeConfig,
)
from secid.core.errors import CheckDigitError, ConversionError, InvalidLengthError
from secid.core.result import Err, Ok

log = logging.getLogger(__name__)

type SedolCountry = Literal["GB", "IE"]
type CusipCountry = Literal["US", "CA"]


def _convert(
    scheme: SchemeConfig,
    identifier: str,
    country: str,
    prefixes: Mapping[str, str],
    national_check: Callable[[str], Ok[int] | Err[CheckDigitError]],
) -> Ok[str] | Err[ConversionError]:
    source = f"convert.{scheme.name.lower()}_to_isin"

    def wrap(cause: CheckDigitError | None, message: str) -> ConversionError:
        log.debug(
            "%s %r -> ISIN rejected: %s", scheme.name, identifier,
            cause.code if cause is not None else "UNSUPPORTED_COUNTRY",
        )
        return ConversionError(
            message=message, code="CONVERSION_FAILED", source=source,
            scheme=scheme.name, identifier=identifier, cause=cause,
        )

    isin_prefix = prefixes.get(country.upper())
    if isin_prefix is None:
        return Err(wrap(
            None,
            f"{scheme.name} cannot be converted with country {country!r}, "
            f"expected one of {sorted(prefixes)}",
        ))

    # The national calculators never read the check position, so the full
    # length has to be checked here or a short body yields a short ISIN.
    if len(identifier) != scheme.length:
        cause = InvalidLengthError(
            message=f"{scheme.name} must be {scheme.length} characters, got {len(identifier)}",
            code="INVALID_LENGTH", source=source,
            expected=str(scheme.length), actual=len(identifier),
        )
        return Err(wrap(cause, f"invalid {scheme.name} {identifier!r}: {cause.message}"))

    body = isin_prefix + normalize(identifier)
    return (
        national_check(identifier)
        .bind(lambda _: isin_check_digit(body + CHECK_DIGIT_PLACEHOLDER))
        .map(lambda digit: f"{body}{digit}")
        .map_err(lambda e: wrap(e, e.with_context(f"{scheme.name} {identifier!r}").message))
    )


def sedol_to_isin(sedol: str, country: SedolCountry) -> Ok[str] | Err[ConversionError]:
    """SEDOL -> ISIN, e.g. ("B09LQS3", "GB") -> "GB00B09LQS34"."""
    return _convert(SEDOL_SCHEME, sedol, country, SEDOL_ISIN_PREFIXES, sedol_check_digit)


def cusip_to_isin(cusip: str, country: CusipCountry) -> Ok[str] | Err[ConversionError]:
    """CUSIP -> ISIN, e.g. ("037833100", "US") -> "US0378331005"."""
    return _convert(CUSIP_SCHEME, cusip, country, CUSIP_ISIN_PREFIXES, cusip_check_digit)


def sedol_to_gb_isin(sedol: str) -> Ok[str] | Err[ConversionError]:
    return sedol_to_isin(sedol, "GB")


def sedol_to_ie_isin(sedol: str) -> Ok[str] | Err[ConversionError]:
    return sedol_to_isin(sedol, "IE")


def cusip_to_us_isin(cusip: str) -> Ok[str] | Err[ConversionError]:
    return cusip_to_isin(cusip, "US")


def cusip_to_ca_isin(cusip: str) -> Ok[str] | Err[ConversionError]:
    return cusip_to_isin(cusip, "CA")
