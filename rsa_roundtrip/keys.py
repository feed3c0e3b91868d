"""
RSA key generation and encodings: PKCS #8 / SubjectPublicKeyInfo PEM files and a compact binary form
"""
import logging
import struct

from Crypto.IO import PEM
from Crypto.PublicKey import RSA

from rsa_roundtrip.errors import KeyFormatError
from rsa_roundtrip.files import read_file, write_file

log = logging.getLogger(__name__)

PUBLIC_EXPONENT = 65537
MIN_BIT_SIZE = 1024

BIN_MAGIC = b"RSK1"
BIN_COMPONENTS = ("n", "e", "d", "p", "q")
PKCS8_MARKER = "PRIVATE KEY"
_LENGTH = struct.Struct(">I")


def generate_key(bits):
    log.info("Generating a %d-bit RSA key", bits)
    return RSA.generate(bits, e=PUBLIC_EXPONENT)


def load_priv_key(path):
    """
    Read an unencrypted PKCS #8 PEM private key, other encodings are rejected
    """
    data = read_file(path)
    try:
        der, marker, encrypted = PEM.decode(data.decode("ascii"))
    except (UnicodeDecodeError, ValueError) as e:
        raise KeyFormatError("%s is not a PEM file: %s" % (path, e)) from e
    if marker != PKCS8_MARKER or encrypted:
        raise KeyFormatError("%s holds a %r PEM block, expected %r" % (path, marker, PKCS8_MARKER))
    try:
        key = RSA.import_key(der)
    except (ValueError, IndexError) as e:
        raise KeyFormatError("Cannot decode private key %s: %s" % (path, e)) from e
    if not key.has_private():
        raise KeyFormatError("%s holds a public key, not a private one" % path)
    log.info("Loaded %d-bit private key from %s", key.size_in_bits(), path)
    return key


def write_priv_key_pem(key, path):
    write_file(key.export_key(format="PEM", pkcs=8), path)
    log.info("Wrote private key to %s", path)


def write_pub_key_pem(key, path):
    write_file(key.public_key().export_key(format="PEM"), path)
    log.info("Wrote public key to %s", path)


def _int_to_bytes(value):
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), byteorder="big")


def serialize_to_bin(key):
    """
    Serialize a private key into a length-prefixed binary blob
    :param key: RSA private key
    :return: magic followed by n, e, d, p, q, each as (4-byte length, big-endian magnitude)
    """
    blob = bytearray(BIN_MAGIC)
    for name in BIN_COMPONENTS:
        raw = _int_to_bytes(int(getattr(key, name)))
        blob += _LENGTH.pack(len(raw))
        blob += raw
    return bytes(blob)


def deserialize_from_bin(blob):
    """
    Inverse of serialize_to_bin
    :param blob: bytes produced by serialize_to_bin
    :return: RSA private key, checked for consistency
    """
    if blob[:len(BIN_MAGIC)] != BIN_MAGIC:
        raise KeyFormatError("Not a binary private key (bad magic)")
    offset = len(BIN_MAGIC)
    components = []
    for name in BIN_COMPONENTS:
        if offset + _LENGTH.size > len(blob):
            raise KeyFormatError("Truncated binary private key (missing length of %s)" % name)
        length, = _LENGTH.unpack_from(blob, offset)
        offset += _LENGTH.size
        if offset + length > len(blob):
            raise KeyFormatError("Truncated binary private key (%s)" % name)
        components.append(int.from_bytes(blob[offset:offset + length], byteorder="big"))
        offset += length
    if offset != len(blob):
        raise KeyFormatError("%d trailing bytes after binary private key" % (len(blob) - offset))
    n, p, q = components[0], components[3], components[4]
    if min(components) < 2 or p * q != n:
        raise KeyFormatError("Inconsistent RSA components")
    try:
        return RSA.construct(tuple(components), consistency_check=True)
    except (ValueError, ZeroDivisionError) as e:
        raise KeyFormatError("Inconsistent RSA components: %s" % e) from e
