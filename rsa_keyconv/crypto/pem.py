"""
pem.py

Minimal PEM (RFC 7468 / RFC 1421) block reader.

Only decoding is needed here: output PEM is produced by the cryptography
backend. The first well-formed block in the text wins; text around it is
ignored, the same way `openssl` treats a key file with comments.
"""

import base64
import binascii
import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, Union

from rsa_keyconv.crypto.errors import InvalidPEMError

_PEM_BLOCK_RE = re.compile(
    r"^-----BEGIN (?P<label>[^\r\n]*?)-----[ \t]*\r?\n"
    r"(?P<body>.*?)"
    r"^-----END (?P=label)-----",
    re.MULTILINE | re.DOTALL,
)

_HEADER_RE = re.compile(r"^(?P<key>[^:\s][^:]*):\s*(?P<value>.*)$")


@dataclass(frozen=True)
class PemBlock:
    label: str
    der: bytes = field(repr=False)
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def is_encrypted(self) -> bool:
        return "ENCRYPTED" in self.headers.get("Proc-Type", "")


def _split_headers(body: str):
    """Split RFC 1421 style 'Key: value' headers from the base64 body."""
    lines = body.splitlines()
    headers = {}
    idx = 0
    while idx < len(lines):
        match = _HEADER_RE.match(lines[idx].strip())
        if not match:
            break
        headers[match.group("key")] = match.group("value").strip()
        idx += 1
    if headers:
        # Headers must be followed by a blank line before the payload.
        if idx >= len(lines) or lines[idx].strip():
            raise ValueError("PEM headers are not followed by a blank line")
        idx += 1
    return headers, "".join("".join(line.split()) for line in lines[idx:])


def _parse_block(match) -> PemBlock:
    headers, b64_body = _split_headers(match.group("body"))
    if not b64_body:
        raise ValueError("empty PEM body")
    der = base64.b64decode(b64_body, validate=True)
    return PemBlock(label=match.group("label"), der=der, headers=headers)


def iter_pem_blocks(text: Union[str, bytes]) -> Iterator[PemBlock]:
    """
    Yield every well-formed PEM block in the text, skipping malformed ones.

    After a malformed block the search resumes right after its BEGIN line,
    so a truncated block cannot hide a valid block that follows it.
    """
    if isinstance(text, bytes):
        text = text.decode("ascii", errors="replace")
    pos = 0
    while True:
        match = _PEM_BLOCK_RE.search(text, pos)
        if match is None:
            return
        try:
            block = _parse_block(match)
        except (ValueError, binascii.Error):
            pos = match.start("body")
            continue
        pos = match.end()
        yield block


def decode_pem_block(text: Union[str, bytes]) -> PemBlock:
    """
    Return the first well-formed PEM block in `text`.

    Raises:
        InvalidPEMError: if the text has no BEGIN/END pair with a valid
            base64 payload.
    """
    for block in iter_pem_blocks(text):
        return block
    raise InvalidPEMError()
