"""
decoder.py

Parse a PEM encoded RSA private key according to a declared container format.

The DER payload is checked against the declared format's ASN.1 structure
with pyasn1 before any key object is built, so a PKCS#8 payload handed in
as PKCS#1 (or the other way round) is rejected instead of being silently
auto-detected.
"""

from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import rsa
from pyasn1.codec.der import decoder as der_decoder
from pyasn1.error import PyAsn1Error
from pyasn1_modules import rfc2437, rfc5208

from rsa_keyconv.crypto.errors import DECODE, AlgorithmMismatchError, InvalidDERError
from rsa_keyconv.crypto.formats import KNOWN_ALGORITHM_NAMES, EmbeddedAlgorithm, KeyFormat
from rsa_keyconv.crypto.pem import decode_pem_block
from rsa_keyconv.utils.logger import get_logger

logger = get_logger("decoder")

_PKCS1_FIELDS = (
    "modulus",
    "publicExponent",
    "privateExponent",
    "prime1",
    "prime2",
    "exponent1",
    "exponent2",
    "coefficient",
)


def _decode_asn1(der: bytes, spec, what: str):
    """Strict DER decode: the whole payload must be exactly one `spec` value."""
    try:
        value, rest = der_decoder.decode(der, asn1Spec=spec)
    except PyAsn1Error as e:
        raise InvalidDERError(f"malformed {what} structure: {e}") from e
    if rest:
        raise InvalidDERError(f"trailing data after {what} structure")
    return value


def _looks_like(der: bytes, spec) -> bool:
    try:
        _, rest = der_decoder.decode(der, asn1Spec=spec)
    except PyAsn1Error:
        return False
    return not rest


def _decode_pkcs1_der(der: bytes) -> rsa.RSAPrivateKey:
    try:
        key_info = _decode_asn1(der, rfc2437.RSAPrivateKey(), "PKCS#1 RSAPrivateKey")
    except InvalidDERError as e:
        if _looks_like(der, rfc5208.PrivateKeyInfo()):
            raise InvalidDERError("payload is a PKCS#8 PrivateKeyInfo, not a PKCS#1 key; use format PKCS#8") from e
        raise

    version = int(key_info["version"])
    if version != 0:
        raise InvalidDERError(f"unsupported PKCS#1 key version {version} (multi-prime keys are not supported)")

    values = {name: int(key_info[name]) for name in _PKCS1_FIELDS}
    if any(v <= 0 for v in values.values()):
        raise InvalidDERError("private key contains zero or negative value")

    numbers = rsa.RSAPrivateNumbers(
        p=values["prime1"],
        q=values["prime2"],
        d=values["privateExponent"],
        dmp1=values["exponent1"],
        dmq1=values["exponent2"],
        iqmp=values["coefficient"],
        public_numbers=rsa.RSAPublicNumbers(e=values["publicExponent"], n=values["modulus"]),
    )
    try:
        return numbers.private_key()
    except (ValueError, UnsupportedAlgorithm) as e:
        raise InvalidDERError(f"invalid RSA key parameters: {e}") from e


def _decode_pkcs8_der(der: bytes) -> rsa.RSAPrivateKey:
    try:
        key_info = _decode_asn1(der, rfc5208.PrivateKeyInfo(), "PKCS#8 PrivateKeyInfo")
    except InvalidDERError as e:
        if _looks_like(der, rfc2437.RSAPrivateKey()):
            raise InvalidDERError("payload is a PKCS#1 RSAPrivateKey, not a PKCS#8 key; use format PKCS#1") from e
        raise

    oid = key_info["privateKeyAlgorithm"]["algorithm"]
    algorithm = EmbeddedAlgorithm.from_oid(oid)
    if algorithm is None:
        raise AlgorithmMismatchError(str(oid), KNOWN_ALGORITHM_NAMES.get(str(oid)))

    return _PKCS8_UNWRAPPERS[algorithm](key_info["privateKey"].asOctets())


_PKCS8_UNWRAPPERS = {
    EmbeddedAlgorithm.RSA: _decode_pkcs1_der,
}

_DECODERS = {
    KeyFormat.PKCS1: _decode_pkcs1_der,
    KeyFormat.PKCS8: _decode_pkcs8_der,
}

if set(_DECODERS) != set(KeyFormat) or set(_PKCS8_UNWRAPPERS) != set(EmbeddedAlgorithm):
    raise RuntimeError("decoder dispatch tables do not cover every KeyFormat / EmbeddedAlgorithm")


def decode_private_key(key_format: Union[str, KeyFormat], pem_text: str) -> rsa.RSAPrivateKey:
    """
    Decode a PEM encoded RSA private key.

    Args:
        key_format: "PKCS#1" or "PKCS#8" (or a KeyFormat member).
        pem_text: Text holding at least one PEM block. The first
            well-formed block is used; its label is not trusted.

    Returns:
        The RSA private key.

    Raises:
        UnsupportedFormatError: unknown format tag (checked before parsing).
        InvalidPEMError: no PEM block in the text.
        InvalidDERError: payload is not the declared structure, or is encrypted.
        AlgorithmMismatchError: PKCS#8 payload wraps a non-RSA key.
    """
    fmt = KeyFormat.parse(key_format, stage=DECODE)
    block = decode_pem_block(pem_text)

    if block.is_encrypted or block.label == "ENCRYPTED PRIVATE KEY":
        raise InvalidDERError("encrypted private keys are not supported")
    if block.label != fmt.pem_label:
        logger.debug(f"PEM label '{block.label}' does not match {fmt.value}; parsing payload as {fmt.value}")

    key = _DECODERS[fmt](block.der)
    logger.debug(f"Decoded {key.key_size}-bit RSA private key from {fmt.value}")
    return key
