import hashlib
from typing import Optional

from .sqids import Sqids

# HASH_SUBSTRING_LENGTH must be strictly less than 16;
# a 16 character prefix starting with 8 or above is larger than the
# biggest number a sqid can hold (0x7fff ffff ffff ffff).
HASH_SUBSTRING_LENGTH = 12

# SQID_ALPHABET contains no vowels, including y
SQID_ALPHABET = "bcdfghjklmnpqrstvwxz"
SQID_MIN_LENGTH = 8

sqids = Sqids(alphabet=SQID_ALPHABET, min_length=SQID_MIN_LENGTH)


def _hex_digest_to_int(digest_string: str) -> int:
    return int(digest_string.encode("utf-8")[:HASH_SUBSTRING_LENGTH], 16)


def hex_digest_to_sqid(digest_string: str) -> str:
    num = _hex_digest_to_int(digest_string)
    return sqids.encode([num])


def sqid_to_int(sqid: str) -> Optional[int]:
    """The truncated hash a content sqid was made from, or None if it isn't one."""
    numbers = sqids.decode(sqid)
    if len(numbers) != 1:
        return None
    return numbers[0]


def content_sqid(data: bytes) -> str:
    """A short, stable identifier for some content, made from its SHA-256 hash."""
    return hex_digest_to_sqid(hashlib.sha256(data).hexdigest())
