"""secid.core — result type, error values, scheme configuration."""

from secid.core.config import InvalidCharacterPolicy as InvalidCharacterPolicy
from secid.core.config import SchemeConfig as SchemeConfig
from secid.core.errors import CheckDigitError as CheckDigitError
from secid.core.errors import CheckDigitMismatchError as CheckDigitMismatchError
from secid.core.errors import ConversionError as ConversionError
from secid.core.errors import InvalidCharacterError as InvalidCharacterError
from secid.core.errors import InvalidLengthError as InvalidLengthError
from secid.core.errors import InvalidVowelError as InvalidVowelError
from secid.core.result import Err as Err
from secid.core.result import Ok as Ok
from secid.core.result import Result as Result
from secid.core.result import unwrap as unwrap
