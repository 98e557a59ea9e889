import pytest

from hashid32.core.exceptions import InvalidTokenError
from hashid32.utils.encoding import (
    HASH_ALPHABET,
    LOTTERY_ALPHABET,
    hash_number,
    is_valid,
    normalize_token,
    unhash_token,
)


def test_alphabets():
    assert HASH_ALPHABET == "abcdefghjkmnpqrstvwxyz1234567890"
    assert LOTTERY_ALPHABET == "abcdefghjkmnpqrstvwxyz"
    assert len(set(HASH_ALPHABET)) == len(HASH_ALPHABET)
    assert HASH_ALPHABET.startswith(LOTTERY_ALPHABET)
    for ambiguous in "ilou":
        assert ambiguous not in HASH_ALPHABET


@pytest.mark.parametrize("raw, expected", [
    ("ABC", "abc"),
    ("uUvV", "vvvv"),
    ("oO0", "000"),
    ("iIlL1", "11111"),
    ("HELLO", "he110"),
    ("", ""),
])
def test_normalize_token(raw, expected):
    assert normalize_token(raw) == expected


@pytest.mark.parametrize("text", ["a", "ar", "VJ72", "uoil", "abcdefghjkmnpqrstvwxyz1234567890", "HeLLo"])
def test_is_valid_accepts(text):
    assert is_valid(text)


@pytest.mark.parametrize("text", ["", " ", "abc#123", "ab c", "!!!invalid!!!", "a-b", "ä", "ar\n"])
def test_is_valid_rejects(text):
    assert not is_valid(text)


def test_is_valid_non_string():
    assert not is_valid(None)
    assert not is_valid(42)


def test_hash_number_plain_base():
    assert hash_number(0, HASH_ALPHABET) == "a"
    assert hash_number(31, HASH_ALPHABET) == "0"
    assert hash_number(32, HASH_ALPHABET) == "ba"
    assert hash_number(32**3, HASH_ALPHABET) == "baaa"


def test_unhash_token_plain_base():
    assert unhash_token("a", HASH_ALPHABET) == 0
    assert unhash_token("ba", HASH_ALPHABET) == 32
    assert unhash_token("aaba", HASH_ALPHABET) == 32
    assert unhash_token("baaa", HASH_ALPHABET) == 32**3


def test_unhash_token_large_values_are_exact():
    number = 2**80 + 12345
    assert unhash_token(hash_number(number, HASH_ALPHABET), HASH_ALPHABET) == number


def test_unhash_token_unknown_symbol():
    with pytest.raises(InvalidTokenError) as excinfo:
        unhash_token("ab#", HASH_ALPHABET)
    assert "'#'" in excinfo.value.reason
