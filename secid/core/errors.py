"""Error values for check-digit calculation — nothing here is ever raised.

Every failure is a frozen dataclass carried inside Err, so callers can
pattern-match on it, compare it, or serialize it with to_dict(). Errors
carry no timestamp: the same bad input always yields an equal error.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import final


@dataclass(frozen=True, slots=True)
class CheckDigitError:
    """Base error value. NOT @final — has subclasses."""

    message: str
    code: str
    source: str  # "module.function" that produced this error

    def with_context(self, context: str) -> CheckDigitError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code,
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidCharacterError(CheckDigitError):
    """A character outside the scheme's alphabet, in a strictly checked position."""

    character: str
    position: int  # 0-based index into the identifier

    def to_dict(self) -> dict[str, object]:
        return {
            **CheckDigitError.to_dict(self),
            "character": self.character,
            "position": self.position,
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidVowelError(CheckDigitError):
    """SEDOL only: the alphabet excludes A, E, I, O and U."""

    character: str
    position: int

    def to_dict(self) -> dict[str, object]:
        return {
            **CheckDigitError.to_dict(self),
            "character": self.character,
            "position": self.position,
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidLengthError(CheckDigitError):
    """The identifier is empty, too short, or too long for its scheme."""

    expected: str  # e.g. "1-8", "6"
    actual: int

    def to_dict(self) -> dict[str, object]:
        return {**CheckDigitError.to_dict(self), "expected": self.expected, "actual": self.actual}


@final
@dataclass(frozen=True, slots=True)
class CheckDigitMismatchError(CheckDigitError):
    """The trailing character is not the computed check digit."""

    expected: int
    actual: str

    def to_dict(self) -> dict[str, object]:
        return {**CheckDigitError.to_dict(self), "expected": self.expected, "actual": self.actual}


@final
@dataclass(frozen=True, slots=True)
class ConversionError(CheckDigitError):
    """A national identifier could not be turned into an ISIN."""

    scheme: str  # "SEDOL" or "CUSIP"
    identifier: str
    cause: CheckDigitError | None

    def to_dict(self) -> dict[str, object]:
        return {
            **CheckDigitError.to_dict(self),
            "scheme": self.scheme,
            "identifier": self.identifier,
            "cause": self.cause.to_dict() if self.cause is not None else None,
        }
