"""
errors.py

Exception hierarchy for key conversion failures.

Every error carries the pipeline ``stage`` it was raised in ("decode" or
"encode"), and its string form is prefixed with the stage so callers can
show it as-is.
"""

from typing import Optional

DECODE = "decode"
ENCODE = "encode"

_STAGE_PREFIX = {
    DECODE: "Could not decode private key",
    ENCODE: "Could not encode private key",
}


class KeyConversionError(Exception):
    """Base class for every failure surfaced by the conversion pipeline."""

    def __init__(self, reason: str, stage: Optional[str] = None):
        self.reason = reason
        self.stage = stage
        super().__init__(reason)

    def __str__(self) -> str:
        prefix = _STAGE_PREFIX.get(self.stage)
        return f"{prefix}: {self.reason}" if prefix else self.reason


class InvalidPEMError(KeyConversionError):
    """The input text holds no parseable PEM block."""

    def __init__(self, reason: str = "no PEM block found in input"):
        super().__init__(reason, stage=DECODE)


class InvalidDERError(KeyConversionError):
    """The PEM payload does not match the declared format's ASN.1 structure."""

    def __init__(self, reason: str):
        super().__init__(reason, stage=DECODE)


StructuralMismatchError = InvalidDERError


class AlgorithmMismatchError(KeyConversionError):
    """A PKCS#8 wrapper embeds a key for an algorithm other than RSA."""

    def __init__(self, algorithm_oid: str, algorithm_name: Optional[str] = None):
        self.algorithm_oid = algorithm_oid
        self.algorithm_name = algorithm_name
        label = f"{algorithm_name} ({algorithm_oid})" if algorithm_name else algorithm_oid
        super().__init__(f"Illegal key for format PKCS#8: expected RSA, found {label}", stage=DECODE)


class UnsupportedFormatError(KeyConversionError, ValueError):
    """A format tag outside the supported set was supplied."""

    def __init__(self, value, stage: Optional[str] = None):
        self.value = value
        super().__init__(f"Unknown format {value}", stage=stage)


class EncodingError(KeyConversionError):
    """Serialization of a decoded key failed."""

    def __init__(self, reason: str):
        super().__init__(reason, stage=ENCODE)
