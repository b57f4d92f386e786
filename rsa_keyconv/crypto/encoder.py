"""
encoder.py

Serialize an RSA private key into a PKCS#1 or PKCS#8 PEM document.
"""

from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from rsa_keyconv.crypto.errors import ENCODE, EncodingError
from rsa_keyconv.crypto.formats import KeyFormat
from rsa_keyconv.utils.logger import get_logger

logger = get_logger("encoder")

# TraditionalOpenSSL is the RSAPrivateKey (PKCS#1) structure for RSA keys.
_PRIVATE_FORMATS = {
    KeyFormat.PKCS1: serialization.PrivateFormat.TraditionalOpenSSL,
    KeyFormat.PKCS8: serialization.PrivateFormat.PKCS8,
}

if set(_PRIVATE_FORMATS) != set(KeyFormat):
    raise RuntimeError("encoder dispatch table does not cover every KeyFormat")


def encode_private_key(key_format: Union[str, KeyFormat], private_key: rsa.RSAPrivateKey) -> str:
    """
    Encode an RSA private key as unencrypted PEM in the requested format.

    Raises:
        UnsupportedFormatError: unknown format tag (checked before serializing).
        EncodingError: the key is not an RSA private key or the backend
            refused to serialize it.
    """
    fmt = KeyFormat.parse(key_format, stage=ENCODE)
    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise EncodingError(f"expected an RSA private key, got {type(private_key).__name__}")

    try:
        pem_bytes = private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=_PRIVATE_FORMATS[fmt],
            encryption_algorithm=serialization.NoEncryption(),
        )
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise EncodingError(f"serialization to {fmt.value} failed: {e}") from e

    logger.debug(f"Encoded {private_key.key_size}-bit RSA private key as {fmt.value}")
    return pem_bytes.decode("ascii")
