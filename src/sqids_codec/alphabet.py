"""Operations on alphabets: the deterministic shuffle and conversion between numbers and symbols."""


def shuffle(alphabet: str) -> str:
    """Permute the alphabet using a swap sequence derived from its own characters.

    The result depends only on the input string, so the same alphabet always
    shuffles the same way.
    """
    chars = list(alphabet)
    length = len(chars)

    i = 0
    j = length - 1
    while j > 0:
        r = (i * j + ord(chars[i]) + ord(chars[j])) % length
        chars[i], chars[r] = chars[r], chars[i]
        i += 1
        j -= 1

    return "".join(chars)


def rotate(alphabet: str, offset: int) -> str:
    return alphabet[offset:] + alphabet[:offset]


def to_id(num: int, alphabet: str) -> str:
    """Represent a non-negative integer in base len(alphabet), most significant symbol first."""
    id_chars = []
    base = len(alphabet)

    while True:
        id_chars.append(alphabet[num % base])
        num //= base
        if num == 0:
            break

    return "".join(reversed(id_chars))


def to_number(id: str, alphabet: str) -> int:
    base = len(alphabet)
    number = 0
    for char in id:
        number = number * base + alphabet.index(char)
    return number
