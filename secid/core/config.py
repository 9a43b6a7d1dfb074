"""Scheme definitions and converter prefix tables.

Pure configuration data. Nothing is read from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import final


class InvalidCharacterPolicy(Enum):
    """What a calculator does with a character outside its alphabet."""

    FAIL_FAST = "fail_fast"  # return Err on the first bad character
    SKIP = "skip"  # contribute nothing, keep going


@final
@dataclass(frozen=True, slots=True)
class SchemeConfig:
    """Static description of one identifier scheme."""

    name: str
    length: int  # full length, check digit included
    min_payload: int
    max_payload: int | None  # None: no upper bound
    policy: InvalidCharacterPolicy


ISIN_SCHEME = SchemeConfig(
    name="ISIN", length=12, min_payload=1, max_payload=None,
    policy=InvalidCharacterPolicy.FAIL_FAST,
)
CUSIP_SCHEME = SchemeConfig(
    name="CUSIP", length=9, min_payload=1, max_payload=8,
    policy=InvalidCharacterPolicy.FAIL_FAST,
)
SEDOL_SCHEME = SchemeConfig(
    name="SEDOL", length=7, min_payload=6, max_payload=6,
    policy=InvalidCharacterPolicy.FAIL_FAST,
)
FIGI_SCHEME = SchemeConfig(
    name="FIGI", length=12, min_payload=1, max_payload=11,
    policy=InvalidCharacterPolicy.SKIP,
)

SCHEMES: tuple[SchemeConfig, ...] = (ISIN_SCHEME, CUSIP_SCHEME, SEDOL_SCHEME, FIGI_SCHEME)

# ---------------------------------------------------------------------------
# Alphabets
# ---------------------------------------------------------------------------

LETTER_OFFSET: int = 10  # A=10, B=11, ..., Z=35

CUSIP_SPECIAL_VALUES: dict[str, int] = {"*": 36, "@": 37, "#": 38}

SEDOL_VOWELS: frozenset[str] = frozenset("AEIOU")
SEDOL_WEIGHTS: tuple[int, ...] = (1, 3, 1, 7, 3, 9)

# ---------------------------------------------------------------------------
# ISIN conversion
# ---------------------------------------------------------------------------

# Country code -> ISIN prefix. SEDOL is 7 characters, so "00" pads the body to 11.
SEDOL_ISIN_PREFIXES: dict[str, str] = {"GB": "GB00", "IE": "IE00"}
CUSIP_ISIN_PREFIXES: dict[str, str] = {"US": "US", "CA": "CA"}

# Stands in for the not-yet-known ISIN check digit.
CHECK_DIGIT_PLACEHOLDER: str = "?"
