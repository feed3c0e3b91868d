"""
PKCS #1 v1.5 RSA encryption (RFC 2313) on top of pycryptodome
"""
import logging

from Crypto.Cipher import PKCS1_v1_5

from rsa_roundtrip.errors import DecryptionError, PayloadTooLongError

log = logging.getLogger(__name__)

# 00 || 02 || at least 8 non-zero padding bytes || 00
PADDING_OVERHEAD = 11


def max_message_length(key):
    """
    Largest payload that can be encrypted in a single block under the given key
    """
    return key.size_in_bytes() - PADDING_OVERHEAD


def encrypt(pub_key, data):
    limit = max_message_length(pub_key)
    if len(data) > limit:
        raise PayloadTooLongError(len(data), limit)
    log.debug("Encrypting %d bytes into a %d-byte block", len(data), pub_key.size_in_bytes())
    return PKCS1_v1_5.new(pub_key).encrypt(data)


def decrypt(priv_key, ciphertext):
    """
    Decrypt a single block
    :param priv_key: RSA private key
    :param ciphertext: encryption block, exactly as long as the modulus
    :return: the unpadded plaintext
    """
    if len(ciphertext) != priv_key.size_in_bytes():
        raise DecryptionError("Ciphertext is %d bytes, expected %d" % (len(ciphertext), priv_key.size_in_bytes()))
    # None comes back on bad padding
    try:
        plain = PKCS1_v1_5.new(priv_key).decrypt(ciphertext, None)
    except ValueError as e:
        raise DecryptionError(str(e)) from e
    if plain is None:
        raise DecryptionError("Invalid PKCS #1 v1.5 padding")
    return plain
