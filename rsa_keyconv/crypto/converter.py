"""
converter.py

The decode -> encode -> identify pipeline for a single conversion request.
"""

from dataclasses import dataclass, field
from typing import Dict, Union

from rsa_keyconv.crypto.decoder import decode_private_key
from rsa_keyconv.crypto.encoder import encode_private_key
from rsa_keyconv.crypto.errors import DECODE, ENCODE
from rsa_keyconv.crypto.formats import KeyFormat
from rsa_keyconv.crypto.hash_utils import compute_hash
from rsa_keyconv.utils.logger import get_logger

logger = get_logger("converter")


@dataclass(frozen=True)
class ConversionResult:
    id: str
    output_pem: str = field(repr=False)

    def as_dict(self) -> Dict[str, str]:
        return {"id": self.id, "output_pem": self.output_pem}


def convert_private_key(
    input_format: Union[str, KeyFormat],
    input_pem: str,
    output_format: Union[str, KeyFormat],
) -> ConversionResult:
    """
    Convert an RSA private key between PKCS#1 and PKCS#8 PEM.

    Both format tags are validated before anything is parsed. Any failure
    raises a KeyConversionError subclass whose message names the stage
    (decode or encode) that failed; nothing is returned on failure.
    """
    in_fmt = KeyFormat.parse(input_format, stage=DECODE)
    out_fmt = KeyFormat.parse(output_format, stage=ENCODE)

    private_key = decode_private_key(in_fmt, input_pem)
    output_pem = encode_private_key(out_fmt, private_key)
    result = ConversionResult(id=compute_hash(output_pem), output_pem=output_pem)

    logger.info(f"Converted {private_key.key_size}-bit RSA key {in_fmt.value} -> {out_fmt.value}, id={result.id}")
    return result
