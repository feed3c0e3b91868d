import os

import pytest

from rsa_roundtrip import PKCS_1_5
from rsa_roundtrip.errors import DecryptionError, PayloadTooLongError


def test_max_message_length(priv_key):
    assert PKCS_1_5.max_message_length(priv_key) == 128 - 11


@pytest.mark.parametrize("length", [0, 1, 16, 117])
def test_encrypt_decrypt(priv_key, length):
    plain = os.urandom(length)
    enc = PKCS_1_5.encrypt(priv_key.public_key(), plain)
    assert len(enc) == 128
    assert PKCS_1_5.decrypt(priv_key, enc) == plain


def test_encryption_is_randomized(priv_key):
    pub = priv_key.public_key()
    assert PKCS_1_5.encrypt(pub, b"flag") != PKCS_1_5.encrypt(pub, b"flag")


def test_payload_too_long(priv_key):
    with pytest.raises(PayloadTooLongError) as excinfo:
        PKCS_1_5.encrypt(priv_key.public_key(), bytes(118))
    assert excinfo.value.limit == 117
    assert excinfo.value.length == 118


def test_decrypt_wrong_length(priv_key):
    with pytest.raises(DecryptionError):
        PKCS_1_5.decrypt(priv_key, bytes(127))


def test_decrypt_with_other_key(priv_key, other_priv_key):
    enc = PKCS_1_5.encrypt(priv_key.public_key(), b"secret")
    # a wrong key only passes the padding check by chance (~2^-16)
    try:
        plain = PKCS_1_5.decrypt(other_priv_key, enc)
    except DecryptionError:
        return
    assert plain != b"secret"


def test_decrypt_bad_padding(priv_key):
    # m = 2 has block 00 00 .. 02, which has the wrong block type
    bad = pow(2, priv_key.e, priv_key.n).to_bytes(128, byteorder="big")
    with pytest.raises(DecryptionError):
        PKCS_1_5.decrypt(priv_key, bad)
