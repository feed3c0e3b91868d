import argparse
from pathlib import Path

from rsa_roundtrip import __doc__ as docstring, __version__
from rsa_roundtrip.keys import MIN_BIT_SIZE


def bit_size(value):
    try:
        bits = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid bit size: %r" % value)
    if bits < MIN_BIT_SIZE:
        raise argparse.ArgumentTypeError("bit size must be at least %d" % MIN_BIT_SIZE)
    return bits


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="rsa-roundtrip", description=docstring.strip())
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input-data", "-i", help="Data to encrypt.")
    source.add_argument("--input-file-dir", type=Path, help="File which contains the data to encrypt.")
    parser.add_argument("--output-file-dir", "-o", type=Path, default=Path("./encrypted_data"),
                        help="Path where the encrypted data is saved.")
    parser.add_argument("--priv-key-dir", type=Path, default=Path("./privkey"),
                        help="Path of the private key (PKCS #8 PEM).")
    parser.add_argument("--regenerate-priv-key", "-r", action="store_true",
                        help="Generate a new private key and overwrite PRIV_KEY_DIR.")
    parser.add_argument("--bit-size", type=bit_size, default=4096, help="Bit size of a generated private key.")
    parser.add_argument("--pub-key-dir", type=Path, default=Path("./pubkey"),
                        help="Path where the public key is saved.")
    parser.add_argument("--verbose", "-v", action="count", default=0)
    parser.add_argument("--version", action="version", version="%(prog)s " + __version__)
    return parser.parse_args(argv)
