import pytest

from rsa_roundtrip.keys import generate_key

TEST_BIT_SIZE = 1024


@pytest.fixture(scope="session")
def priv_key():
    return generate_key(TEST_BIT_SIZE)


@pytest.fixture(scope="session")
def other_priv_key():
    return generate_key(TEST_BIT_SIZE)
