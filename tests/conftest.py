"""Hypothesis strategies and pytest fixtures for secid.

Strategies generate well-formed payloads (no check digit) for each scheme;
tests append a computed or placeholder check digit themselves.
"""

from __future__ import annotations

import string

from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=500,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=100,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# ALPHABETS
# ===================================================================

ALNUM = string.digits + string.ascii_uppercase
SEDOL_ALPHABET = "".join(c for c in ALNUM if c not in "AEIOU")
CUSIP_ALPHABET = ALNUM + "*@#"


# ===================================================================
# PAYLOAD STRATEGIES
# ===================================================================


def isin_payloads() -> SearchStrategy[str]:
    """2-letter country + 9 alphanumeric NSIN characters."""
    return st.builds(
        lambda country, nsin: country + nsin,
        st.text(alphabet=string.ascii_uppercase, min_size=2, max_size=2),
        st.text(alphabet=ALNUM, min_size=9, max_size=9),
    )


def cusip_payloads(alphabet: str = ALNUM) -> SearchStrategy[str]:
    return st.text(alphabet=alphabet, min_size=8, max_size=8)


def sedol_payloads() -> SearchStrategy[str]:
    return st.text(alphabet=SEDOL_ALPHABET, min_size=6, max_size=6)


def figi_payloads() -> SearchStrategy[str]:
    return st.text(alphabet=ALNUM, min_size=11, max_size=11)


def invalid_characters(alphabet: str = ALNUM) -> SearchStrategy[str]:
    """Single characters that no case-folding turns into a member of alphabet."""
    return st.characters().filter(
        lambda c: c.upper() not in alphabet and c not in alphabet.lower(),
    )
