"""
hash_utils.py

Identifier hashing for converted keys.
"""

import hashlib

# Length of compute_hash() output: SHA-256 rendered as hex.
HASH_HEX_LENGTH = 64


def compute_hash(text: str) -> str:
    """
    Compute the SHA256 hex digest of a string's UTF-8 bytes.
    Used as the stable id of a converted PEM document.

    Returns:
        64-character lowercase hex string
    """
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
