"""Deciding which generated IDs are unacceptable to hand out."""

import logging
from collections.abc import Iterable

from .constants import MIN_BLOCKLIST_WORD_LENGTH

logger = logging.getLogger("sqids")
logger.setLevel(logging.DEBUG)


def filter_blocklist(words: Iterable[str], alphabet: str) -> frozenset[str]:
    """Lowercase the blocklist, keeping only words which could ever appear in an ID made from this alphabet."""
    alphabet_chars = set(alphabet.lower())
    filtered = set()
    dropped = 0

    for word in words:
        if len(word) < MIN_BLOCKLIST_WORD_LENGTH:
            dropped += 1
            continue
        lowercased_word = word.lower()
        if set(lowercased_word) <= alphabet_chars:
            filtered.add(lowercased_word)
        else:
            dropped += 1

    if dropped:
        logger.debug(f"Ignoring {dropped} blocklist words which cannot occur in this alphabet")

    return frozenset(filtered)


def is_blocked_id(id: str, blocklist: Iterable[str]) -> bool:
    """
    Does this ID contain a blocked word?

    Short IDs and short words only match exactly, words made of digits only
    match at the start or end of the ID, and anything else matches anywhere.
    """
    lowercased_id = id.lower()

    for word in blocklist:
        if len(word) > len(lowercased_id):
            continue

        if len(lowercased_id) <= 3 or len(word) <= 3:
            if lowercased_id == word:
                return True
        elif word.isdigit():
            if lowercased_id.startswith(word) or lowercased_id.endswith(word):
                return True
        elif word in lowercased_id:
            return True

    return False
