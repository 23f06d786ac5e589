from __future__ import annotations

from typing import Sequence

from ..core.constants import ACCOUNT_NUMBER_DELIMITER, ACCOUNT_NUMBER_SEGMENT_LENGTHS
from ..core.exceptions import AccountNumberFormatError


class AccountNumberValidator:
    """Checks account numbers shaped like ``AAA-BBBBBBBBBB-CC``.

    Two outcomes on bad input:
    - correctly delimited but a segment has the wrong length -> ``False``
    - fewer delimiters than segments need (``=``/``+`` in their place, none at all,
      empty string) -> ``AccountNumberFormatError``
    """

    def __init__(
        self,
        segment_lengths: Sequence[int] = ACCOUNT_NUMBER_SEGMENT_LENGTHS,
        delimiter: str = ACCOUNT_NUMBER_DELIMITER,
    ):
        self._segment_lengths = tuple(segment_lengths)
        self._delimiter = delimiter

    def is_valid(self, account_number: str) -> bool:
        if not isinstance(account_number, str):
            raise TypeError(f"account number must be a string, got {type(account_number).__name__}")

        splits = len(self._segment_lengths) - 1
        if account_number.count(self._delimiter) < splits:
            raise AccountNumberFormatError(
                f"Account number {account_number!r} must contain {splits} {self._delimiter!r} delimiters"
            )

        # Surplus delimiters stay in the last segment and make it too long.
        parts = account_number.split(self._delimiter, splits)
        return all(len(part) == length for part, length in zip(parts, self._segment_lengths))
