"""Configuration for building a codec, either directly or from the environment."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .constants import DEFAULT_ALPHABET, DEFAULT_BLOCKLIST, DEFAULT_MIN_LENGTH
from .exceptions import InvalidMinLengthError
from .sqids import Sqids


def parse_blocklist(value: str) -> frozenset[str]:
    """A comma separated list of words. Blank entries are ignored."""
    return frozenset(word.strip() for word in value.split(",") if word.strip())


@dataclass(frozen=True)
class SqidsOptions:
    alphabet: str = DEFAULT_ALPHABET
    min_length: int = DEFAULT_MIN_LENGTH
    blocklist: frozenset[str] = DEFAULT_BLOCKLIST

    @classmethod
    def from_environment(cls, dotenv_path: Optional[str] = None) -> "SqidsOptions":
        """
        Read options from SQIDS_ALPHABET, SQIDS_MIN_LENGTH and SQIDS_BLOCKLIST.

        Unset variables fall back to the defaults. SQIDS_BLOCKLIST replaces the
        default blocklist entirely, so setting it to an empty string turns
        blocking off.
        """
        load_dotenv(dotenv_path)

        alphabet = os.getenv("SQIDS_ALPHABET") or DEFAULT_ALPHABET

        raw_min_length = os.getenv("SQIDS_MIN_LENGTH", default=str(DEFAULT_MIN_LENGTH))
        try:
            min_length = int(raw_min_length)
        except ValueError as err:
            raise InvalidMinLengthError(f"SQIDS_MIN_LENGTH must be an integer, got {raw_min_length!r}") from err

        raw_blocklist = os.getenv("SQIDS_BLOCKLIST")
        blocklist = DEFAULT_BLOCKLIST if raw_blocklist is None else parse_blocklist(raw_blocklist)

        return cls(alphabet=alphabet, min_length=min_length, blocklist=blocklist)

    def build(self) -> Sqids:
        return Sqids.from_options(self)
