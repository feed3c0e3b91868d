"""
Encrypt a payload with RSA (PKCS #1 v1.5), persist the keys and ciphertext, and verify the round trip
"""

__version__ = "0.1.0"
