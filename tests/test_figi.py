"""Tests for secid.checksum.figi — FIGI check digit and its skip policy."""

from __future__ import annotations

import dataclasses

import pytest
from conftest import figi_payloads
from hypothesis import given
from hypothesis import strategies as st

from secid.checksum.figi import figi_check_digit
from secid.core.config import FIGI_SCHEME, InvalidCharacterPolicy
from secid.core.errors import InvalidCharacterError, InvalidLengthError
from secid.core.result import Err, Ok, unwrap


class TestKnownFIGIs:
    @pytest.mark.parametrize(
        ("figi", "expected"),
        [
            ("BBG000BLNQ16", 6),
            ("BBG000B9XRY4", 4),  # Apple
        ],
    )
    def test_check_digit(self, figi: str, expected: int) -> None:
        assert figi_check_digit(figi) == Ok(expected)

    def test_lowercase(self) -> None:
        assert figi_check_digit("bbg000blnq16") == Ok(6)


class TestSkipPolicy:
    def test_scheme_uses_skip_policy(self) -> None:
        assert FIGI_SCHEME.policy is InvalidCharacterPolicy.SKIP

    def test_invalid_character_contributes_nothing(self) -> None:
        # The trailing "1" (worth 1) is replaced by "$": 34 - 1 = 33
        assert figi_check_digit("BBG000BLNQ$6") == Ok(7)

    def test_position_past_eleven_ignored(self) -> None:
        assert figi_check_digit("BBG000BLNQ1Z6") == Ok(6)
        assert figi_check_digit("BBG000BLNQ1$$$$6") == Ok(6)

    def test_all_invalid_characters(self) -> None:
        assert figi_check_digit("-----") == Ok(0)

    def test_fail_fast_policy_rejects_invalid_character(self) -> None:
        strict = dataclasses.replace(FIGI_SCHEME, policy=InvalidCharacterPolicy.FAIL_FAST)
        result = figi_check_digit("BBG000BLNQ$6", strict)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCharacterError)
        assert result.error.position == 10

    def test_fail_fast_policy_same_digit_for_clean_input(self) -> None:
        strict = dataclasses.replace(FIGI_SCHEME, policy=InvalidCharacterPolicy.FAIL_FAST)
        assert figi_check_digit("BBG000BLNQ16", strict) == Ok(6)

    def test_fail_fast_policy_rejects_overlong_payload(self) -> None:
        strict = dataclasses.replace(FIGI_SCHEME, policy=InvalidCharacterPolicy.FAIL_FAST)
        result = figi_check_digit("BBG000BLNQ1Z6", strict)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidLengthError)

    @pytest.mark.parametrize("raw", ["", "B"])
    def test_empty_payload_still_fails(self, raw: str) -> None:
        result = figi_check_digit(raw)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidLengthError)


class TestFIGIProperties:
    @given(raw=st.text(min_size=2))
    def test_never_fails_on_non_empty_payload(self, raw: str) -> None:
        result = figi_check_digit(raw)
        assert isinstance(result, Ok)
        assert 0 <= result.value <= 9

    @given(payload=figi_payloads())
    def test_case_insensitive(self, payload: str) -> None:
        assert figi_check_digit(payload.lower() + "0") == figi_check_digit(payload + "0")

    @given(payload=figi_payloads())
    def test_deterministic(self, payload: str) -> None:
        assert unwrap(figi_check_digit(payload + "0")) == unwrap(figi_check_digit(payload + "0"))
