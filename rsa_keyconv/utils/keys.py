import sys
from pathlib import Path

from rsa_keyconv.crypto.hash_utils import compute_hash

STDIN_PATH = "-"


def read_pem_text(path: str) -> str:
    """Read PEM text from a file, or from stdin when path is '-'."""
    if path == STDIN_PATH:
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def write_pem_text(path: str, pem_text: str) -> None:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(pem_text, encoding="utf-8")
    # Private key material: owner read/write only
    out.chmod(0o600)


def fingerprint_from_file(path: str) -> str:
    return compute_hash(read_pem_text(path))
