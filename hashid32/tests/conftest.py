import pytest

from hashid32.services.codec import HashID32, get_codec


REFERENCE_SALT = "this is my salt"


@pytest.fixture
def codec():
    """Codec with no salt: the canonical alphabets are used unshuffled."""
    return HashID32()


@pytest.fixture
def salted_codec():
    return HashID32(REFERENCE_SALT)


@pytest.fixture
def sample_numbers():
    """Provides numbers either side of the base-32 digit boundaries."""
    numbers = [0, 1, 21, 22, 23, 1337, 123456, 10_000_000, 2**53, 2**64 + 7]
    for power in range(1, 6):
        numbers.extend([32**power - 1, 32**power, 32**power + 1])
    return numbers


@pytest.fixture(autouse=True)
def clear_codec_cache():
    get_codec.cache_clear()
    yield
    get_codec.cache_clear()
