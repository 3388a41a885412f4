"""This file contains the codec which turns lists of numbers into short, unpredictable IDs and back again."""

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from .alphabet import rotate, shuffle, to_id, to_number
from .blocklist import filter_blocklist, is_blocked_id
from .constants import (
    DEFAULT_ALPHABET,
    DEFAULT_BLOCKLIST,
    DEFAULT_MIN_LENGTH,
    MAX_VALUE,
    MIN_ALPHABET_LENGTH,
    MIN_LENGTH_LIMIT,
)
from .exceptions import (
    InvalidAlphabetError,
    InvalidMinLengthError,
    MaximumRetriesExceededException,
    NumberOutOfRangeError,
)

if TYPE_CHECKING:
    from .options import SqidsOptions

logger = logging.getLogger("sqids")
logger.setLevel(logging.DEBUG)


class Sqids:
    """
    Encodes lists of non-negative integers as IDs drawn from an alphabet.

    An instance is immutable once constructed: each call to `encode` or
    `decode` works on its own copies of the alphabet, so one instance can be
    shared freely.
    """

    def __init__(
        self,
        alphabet: str = DEFAULT_ALPHABET,
        min_length: int = DEFAULT_MIN_LENGTH,
        blocklist: Iterable[str] = DEFAULT_BLOCKLIST,
    ) -> None:
        if not isinstance(alphabet, str):
            raise InvalidAlphabetError(f"Alphabet must be a string, got {alphabet!r}")

        if len(alphabet.encode("utf-8")) != len(alphabet):
            raise InvalidAlphabetError("Alphabet cannot contain multibyte characters")

        if len(alphabet) < MIN_ALPHABET_LENGTH:
            raise InvalidAlphabetError(f"Alphabet length must be at least {MIN_ALPHABET_LENGTH}")

        if len(set(alphabet)) != len(alphabet):
            raise InvalidAlphabetError("Alphabet must contain unique characters")

        if not isinstance(min_length, int) or isinstance(min_length, bool) or not 0 <= min_length <= MIN_LENGTH_LIMIT:
            raise InvalidMinLengthError(f"Minimum length has to be between 0 and {MIN_LENGTH_LIMIT}")

        self._alphabet = shuffle(alphabet)
        self._min_length = min_length
        self._blocklist = filter_blocklist(blocklist, alphabet)

    @classmethod
    def from_options(cls, options: "SqidsOptions") -> "Sqids":
        return cls(alphabet=options.alphabet, min_length=options.min_length, blocklist=options.blocklist)

    @property
    def alphabet(self) -> str:
        """The configured alphabet, after its one-off shuffle."""
        return self._alphabet

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def blocklist(self) -> frozenset[str]:
        """The lowercased blocklist words that can actually occur in an ID."""
        return self._blocklist

    def encode(self, numbers: Sequence[int]) -> str:
        if not numbers:
            return ""

        for number in numbers:
            if not isinstance(number, int) or isinstance(number, bool) or not 0 <= number <= MAX_VALUE:
                raise NumberOutOfRangeError(f"Encoding supports numbers between 0 and {MAX_VALUE}, got {number!r}")

        return self._encode_numbers(list(numbers))

    def _encode_numbers(self, numbers: list[int]) -> str:
        for increment in range(len(self._alphabet) + 1):
            id = self._encode_attempt(numbers, increment)
            if not is_blocked_id(id, self._blocklist):
                return id
            logger.debug(f"Generated ID was blocked on attempt {increment + 1}, regenerating")

        raise MaximumRetriesExceededException("Reached max attempts to re-generate the ID")

    def _encode_attempt(self, numbers: list[int], increment: int) -> str:
        alphabet_length = len(self._alphabet)

        offset = len(numbers)
        for i, number in enumerate(numbers):
            offset += ord(self._alphabet[number % alphabet_length]) + i
        offset %= alphabet_length
        offset = (offset + increment) % alphabet_length

        working_alphabet = rotate(self._alphabet, offset)
        prefix = working_alphabet[0]
        working_alphabet = working_alphabet[::-1]

        id_parts = [prefix]
        for i, number in enumerate(numbers):
            id_parts.append(to_id(number, working_alphabet[1:]))
            if i < len(numbers) - 1:
                id_parts.append(working_alphabet[0])
                working_alphabet = shuffle(working_alphabet)

        id = "".join(id_parts)

        if self._min_length > len(id):
            id += working_alphabet[0]
            while self._min_length > len(id):
                working_alphabet = shuffle(working_alphabet)
                id += working_alphabet[: self._min_length - len(id)]

        return id

    def decode(self, id: str) -> list[int]:
        """
        Recover the numbers from an ID.

        Malformed IDs are not an error: an ID containing characters outside
        the alphabet decodes to an empty list, and decoding stops early at an
        empty segment, returning the numbers found up to that point.
        """
        numbers: list[int] = []

        if not id:
            return numbers

        if any(char not in self._alphabet for char in id):
            return numbers

        offset = self._alphabet.index(id[0])
        working_alphabet = rotate(self._alphabet, offset)[::-1]
        remaining = id[1:]

        while remaining:
            separator = working_alphabet[0]
            chunk, found_separator, remaining = remaining.partition(separator)

            if not chunk:
                return numbers

            numbers.append(to_number(chunk, working_alphabet[1:]))

            if found_separator:
                working_alphabet = shuffle(working_alphabet)

        return numbers
