"""
formats.py

Closed enumerations for the key container formats and for the algorithms a
PKCS#8 wrapper may carry.
"""

from enum import Enum
from typing import Optional, Union

from pyasn1.type import univ
from pyasn1_modules import rfc2459

from rsa_keyconv.crypto.errors import UnsupportedFormatError


class KeyFormat(str, Enum):
    PKCS1 = "PKCS#1"
    PKCS8 = "PKCS#8"

    @property
    def pem_label(self) -> str:
        return _PEM_LABELS[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def parse(cls, value: Union[str, "KeyFormat"], stage: Optional[str] = None) -> "KeyFormat":
        """
        Resolve a format tag. Matching is exact and case-sensitive:
        only "PKCS#1" and "PKCS#8" are accepted.
        """
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        raise UnsupportedFormatError(value, stage=stage)


_PEM_LABELS = {
    KeyFormat.PKCS1: "RSA PRIVATE KEY",
    KeyFormat.PKCS8: "PRIVATE KEY",
}

_DESCRIPTIONS = {
    KeyFormat.PKCS1: "RSA-specific RSAPrivateKey structure (RFC 8017)",
    KeyFormat.PKCS8: "Algorithm-tagged PrivateKeyInfo wrapper (RFC 5208)",
}


class EmbeddedAlgorithm(Enum):
    """Private key algorithms this tool can unwrap from a PKCS#8 container."""

    RSA = str(rfc2459.rsaEncryption)

    @classmethod
    def from_oid(cls, oid: univ.ObjectIdentifier) -> Optional["EmbeddedAlgorithm"]:
        dotted = str(oid)
        for member in cls:
            if member.value == dotted:
                return member
        return None


# Well-known algorithms that show up in PKCS#8 but are not convertible here.
# Used only to give a readable error message.
KNOWN_ALGORITHM_NAMES = {
    "1.2.840.10045.2.1": "EC",
    "1.2.840.10040.4.1": "DSA",
    "1.2.840.113549.1.3.1": "DH",
    "1.2.840.113549.1.1.10": "RSASSA-PSS",
    "1.3.101.110": "X25519",
    "1.3.101.111": "X448",
    "1.3.101.112": "Ed25519",
    "1.3.101.113": "Ed448",
}
