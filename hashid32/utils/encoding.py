import re

from hashid32.core.exceptions import InvalidTokenError

# Crockford-style symbols: no i, l, o or u
HASH_ALPHABET = "abcdefghjkmnpqrstvwxyz1234567890"
LOTTERY_ALPHABET = "abcdefghjkmnpqrstvwxyz"

# Characters people type by mistake, mapped onto the symbol they meant
NORMALIZATION_TABLE = str.maketrans({'u': 'v', 'o': '0', 'i': '1', 'l': '1'})

VALID_TOKEN_RE = re.compile(r'[abcdefghjkmnpqrstvwxyz1234567890uoil]+')


def normalize_token(token: str) -> str:
    """Lowercase token and replace ambiguous human input with canonical symbols."""
    return token.lower().translate(NORMALIZATION_TABLE)


def is_valid(text: str) -> bool:
    """Cheap pre-filter: True if text only holds symbols a token can contain."""
    if not isinstance(text, str):
        return False
    return VALID_TOKEN_RE.fullmatch(text.lower()) is not None


def hash_number(number: int, alphabet: str) -> str:
    base = len(alphabet)
    out = []
    while True:
        number, digit = divmod(number, base)
        out.append(alphabet[digit])
        if number == 0:
            break
    return ''.join(reversed(out))


def unhash_token(digits: str, alphabet: str) -> int:
    base = len(alphabet)
    number = 0
    for c in digits:
        pos = alphabet.find(c)
        if pos < 0:
            raise InvalidTokenError(digits, f"unknown symbol '{c}'")
        number = number * base + pos
    return number
