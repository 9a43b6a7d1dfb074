"""Validated identifier newtypes: ISIN, CUSIP, SEDOL, FIGI.

Each wraps an upper-cased string whose trailing check digit has been
verified via parse(). Only length and check digit are checked; country
codes and issuer registration are out of scope.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import final

from secid.checksum.alphabet import normalize
from secid.checksum.cusip import cusip_check_digit
from secid.checksum.figi import figi_check_digit
from secid.checksum.isin import isin_check_digit
from secid.checksum.sedol import sedol_check_digit
from secid.convert import CusipCountry, SedolCountry, cusip_to_isin, sedol_to_isin
from secid.core.config import (
    CUSIP_SCHEME,
    FIGI_SCHEME,
    ISIN_SCHEME,
    SEDOL_SCHEME,
    SchemeConfig,
)
from secid.core.errors import (
    CheckDigitError,
    CheckDigitMismatchError,
    ConversionError,
    InvalidLengthError,
)
from secid.core.result import Err, Ok


def _verify(
    raw: str,
    scheme: SchemeConfig,
    calculate: Callable[[str], Ok[int] | Err[CheckDigitError]],
) -> Ok[str] | Err[CheckDigitError]:
    """Normalize raw and check its length and trailing check digit."""
    source = f"identifiers.{scheme.name}.parse"
    value = normalize(raw)
    if len(value) != scheme.length:
        return Err(InvalidLengthError(
            message=f"{scheme.name} must be {scheme.length} characters, got {len(value)}",
            code="INVALID_LENGTH", source=source,
            expected=str(scheme.length), actual=len(value),
        ))
    match calculate(value):
        case Err(e):
            return Err(e)
        case Ok(digit):
            if value[-1] != str(digit):
                return Err(CheckDigitMismatchError(
                    message=f"{scheme.name} check digit invalid for '{value}', expected {digit}",
                    code="CHECK_DIGIT_MISMATCH", source=source,
                    expected=digit, actual=value[-1],
                ))
            return Ok(value)


@final
@dataclass(frozen=True, slots=True)
class ISIN:
    """International Securities Identification Number — 12 chars."""

    value: str

    @staticmethod
    def parse(raw: str) -> Ok[ISIN] | Err[CheckDigitError]:
        return _verify(raw, ISIN_SCHEME, isin_check_digit).map(lambda v: ISIN(value=v))

    @staticmethod
    def from_sedol(sedol: str, country: SedolCountry = "GB") -> Ok[ISIN] | Err[ConversionError]:
        return sedol_to_isin(sedol, country).map(lambda v: ISIN(value=v))

    @staticmethod
    def from_cusip(cusip: str, country: CusipCountry = "US") -> Ok[ISIN] | Err[ConversionError]:
        return cusip_to_isin(cusip, country).map(lambda v: ISIN(value=v))

    @property
    def country(self) -> str:
        return self.value[:2]

    @property
    def nsin(self) -> str:
        """National Securities Identifying Number: the 9 characters after the country."""
        return self.value[2:11]


@final
@dataclass(frozen=True, slots=True)
class CUSIP:
    """Committee on Uniform Securities Identification Procedures number — 9 chars."""

    value: str

    @staticmethod
    def parse(raw: str) -> Ok[CUSIP] | Err[CheckDigitError]:
        return _verify(raw, CUSIP_SCHEME, cusip_check_digit).map(lambda v: CUSIP(value=v))

    def to_isin(self, country: CusipCountry = "US") -> Ok[ISIN] | Err[ConversionError]:
        return ISIN.from_cusip(self.value, country)


@final
@dataclass(frozen=True, slots=True)
class SEDOL:
    """Stock Exchange Daily Official List code — 7 chars, no vowels."""

    value: str

    @staticmethod
    def parse(raw: str) -> Ok[SEDOL] | Err[CheckDigitError]:
        return _verify(raw, SEDOL_SCHEME, sedol_check_digit).map(lambda v: SEDOL(value=v))

    def to_isin(self, country: SedolCountry = "GB") -> Ok[ISIN] | Err[ConversionError]:
        return ISIN.from_sedol(self.value, country)


@final
@dataclass(frozen=True, slots=True)
class FIGI:
    """Financial Instrument Global Identifier — 12 chars."""

    value: str

    @staticmethod
    def parse(raw: str) -> Ok[FIGI] | Err[CheckDigitError]:
        return _verify(raw, FIGI_SCHEME, figi_check_digit).map(lambda v: FIGI(value=v))
