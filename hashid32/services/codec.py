from functools import lru_cache
from typing import Optional
import logging

from hashid32.core.config import Settings, settings
from hashid32.core.exceptions import EmptyTokenError, InvalidTokenError, TokenVerificationError
from hashid32.utils.encoding import (
    HASH_ALPHABET,
    LOTTERY_ALPHABET,
    hash_number,
    is_valid,
    normalize_token,
    unhash_token,
)
from hashid32.utils.shuffle import consistent_shuffle


logger = logging.getLogger(__name__)


class HashID32:
    """
    Human-readable, human-transmittable hashes for non-negative integers.

    A mix of the Hashids salted shuffle and Crockford's base32 symbol set:
    tokens avoid ambiguous characters, are case-insensitive on input and are
    unlikely to spell anything rude. This is obfuscation, not encryption.
    """

    def __init__(self, salt: Optional[str] = ""):
        if salt is None:
            salt = ""
        if not isinstance(salt, str):
            raise TypeError(f"salt must be a string, not {type(salt).__name__}")

        self._salt = salt
        self._alphabet = consistent_shuffle(HASH_ALPHABET, salt)
        self._lottery = consistent_shuffle(LOTTERY_ALPHABET, salt)
        logger.debug("HashID32 initialised with a %d character salt", len(salt))

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "HashID32":
        config = config or settings
        return cls(config.SALT)

    def __repr__(self):
        return f"<HashID32 alphabet={self._alphabet!r}>"

    @property
    def salt(self) -> str:
        return self._salt

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def lottery(self) -> str:
        return self._lottery

    def _token_alphabet(self, lottery_char: str) -> str:
        # Re-shuffle keyed on the lottery char so neighbouring numbers look unrelated
        buffer = lottery_char + self._salt + self._alphabet
        return consistent_shuffle(self._alphabet, buffer[:len(self._alphabet)])

    def encode(self, number: int) -> str:
        """Encode a non-negative integer into a token."""
        if isinstance(number, bool) or not isinstance(number, int):
            logger.warning("Refusing to encode non-integer %r", number)
            raise TypeError(f"number must be an int, not {type(number).__name__}")
        if number < 0:
            logger.warning("Refusing to encode negative number %d", number)
            raise ValueError(f"number must be non-negative, got {number}")

        lottery_char = self._lottery[number % len(self._lottery)]
        return lottery_char + hash_number(number, self._token_alphabet(lottery_char))

    def decode_strict(self, token: Optional[str]) -> int:
        """
        Decode a token, raising InvalidTokenError (or a subclass) when the token
        is empty, malformed, or was not produced by a codec with this salt.
        """
        if token is None:
            token = ""
        if not isinstance(token, str):
            raise TypeError(f"token must be a string, not {type(token).__name__}")
        if not token.strip():
            raise EmptyTokenError(token)

        normalized = normalize_token(token)
        lottery_char, digits = normalized[0], normalized[1:]
        if lottery_char not in self._lottery:
            raise InvalidTokenError(token, f"unknown lottery symbol '{lottery_char}'")
        if not digits:
            raise InvalidTokenError(token, "no digits after the lottery symbol")

        try:
            value = unhash_token(digits, self._token_alphabet(lottery_char))
        except InvalidTokenError as e:
            raise InvalidTokenError(token, e.reason) from e

        # Every digit string maps to some number, so only accept the token
        # this codec would have produced for that number.
        expected = self.encode(value)
        if expected != normalized:
            raise TokenVerificationError(token, value, expected)

        return value

    def decode(self, token: Optional[str]) -> int:
        """Decode a token, returning 0 for empty or invalid input."""
        try:
            return self.decode_strict(token)
        except InvalidTokenError as e:
            logger.debug("Rejected token: %s", e)
            return 0

    @staticmethod
    def normalize(text: str) -> str:
        return normalize_token(text)

    @staticmethod
    def is_valid(text: str) -> bool:
        return is_valid(text)


@lru_cache(maxsize=None)
def get_codec() -> HashID32:
    return HashID32.from_settings()
