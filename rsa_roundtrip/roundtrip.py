"""
Encrypt a payload, persist keys and ciphertext, then read everything back and verify it
"""
import logging

from rsa_roundtrip import PKCS_1_5
from rsa_roundtrip.errors import InputError, RoundTripError, VerificationError
from rsa_roundtrip.files import append_to_path, read_file, write_file
from rsa_roundtrip.keys import (deserialize_from_bin, generate_key, load_priv_key, serialize_to_bin,
                                write_priv_key_pem, write_pub_key_pem)
from rsa_roundtrip.roundtrip_args import parse_args

log = logging.getLogger(__name__)

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def bin_key_path(options):
    return append_to_path(options.priv_key_dir, ".bin")


def load_input(options):
    if options.input_data is not None:
        try:
            return options.input_data.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InputError("Input data is not valid UTF-8: %s" % e) from e
    return read_file(options.input_file_dir)


def load_or_generate_key(options):
    if options.regenerate_priv_key:
        return generate_key(options.bit_size)
    return load_priv_key(options.priv_key_dir)


def save(options, data, priv_key, pub_key):
    # an existing PEM key is only read, never rewritten
    if options.regenerate_priv_key:
        write_priv_key_pem(priv_key, options.priv_key_dir)
    write_file(serialize_to_bin(priv_key), bin_key_path(options))
    write_pub_key_pem(pub_key, options.pub_key_dir)
    write_file(data, options.output_file_dir)
    log.info("Wrote %d encrypted bytes to %s", len(data), options.output_file_dir)


def check(options, expected_data):
    """
    Verify what save() left on disk
    :param options: parsed command-line options
    :param expected_data: the plaintext that was encrypted
    """
    encrypted_data = read_file(options.output_file_dir)
    priv_key = load_priv_key(options.priv_key_dir)
    decrypted_data = PKCS_1_5.decrypt(priv_key, encrypted_data)
    if decrypted_data != expected_data:
        raise VerificationError("Decrypted data differs from the input (%d vs %d bytes)"
                                % (len(decrypted_data), len(expected_data)))

    priv_key_read_back = deserialize_from_bin(read_file(bin_key_path(options)))
    if priv_key_read_back != priv_key:
        raise VerificationError("Binary private key %s differs from %s"
                                % (bin_key_path(options), options.priv_key_dir))
    log.info("Round trip verified")


def run(options):
    input_data = load_input(options)
    log.debug("Read %d bytes of input", len(input_data))
    priv_key = load_or_generate_key(options)
    pub_key = priv_key.public_key()
    output_data = PKCS_1_5.encrypt(pub_key, input_data)
    save(options, output_data, priv_key, pub_key)
    check(options, input_data)


def main(argv=None):
    options = parse_args(argv)
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    # basicConfig leaves the level alone when the root logger already has handlers
    logging.getLogger().setLevel(LOG_LEVELS[min(options.verbose, len(LOG_LEVELS) - 1)])
    try:
        run(options)
    except (RoundTripError, OSError) as e:
        log.error("%s", e)
        return 1
    print("Encrypted %s and verified the round trip" % options.output_file_dir)
    return 0
