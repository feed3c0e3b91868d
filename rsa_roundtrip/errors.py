"""
Exceptions raised while encrypting, persisting and verifying a payload
"""


class RoundTripError(Exception):
    pass


class KeyFormatError(RoundTripError):
    """
    A key file (PEM or binary) could not be decoded into an RSA private key
    """


class PayloadTooLongError(RoundTripError):
    """
    The payload doesn't fit in a single PKCS #1 v1.5 block
    """

    def __init__(self, length, limit):
        super().__init__("Payload is %d bytes, at most %d fit in one block" % (length, limit))
        self.length = length
        self.limit = limit


class DecryptionError(RoundTripError):
    pass


class VerificationError(RoundTripError):
    pass


class InputError(RoundTripError):
    pass
