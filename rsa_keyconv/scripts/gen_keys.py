import os
import sys

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

# Output directory for the keys, relative to the current directory
KEYS_DIR = "keys"


def generate_pkcs1_key(keys_dir: str = KEYS_DIR, key_size: int = 2048) -> str:
    """Write a fresh RSA private key as PKCS#1 PEM and return its path."""
    os.makedirs(keys_dir, exist_ok=True)
    private_key_path = os.path.join(keys_dir, "private_key_pkcs1.pem")

    private_key = rsa.generate_private_key(public_exponent=65537, key_size=key_size)

    # TraditionalOpenSSL == PKCS#1 for RSA keys
    pem_priv = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption()
    )
    with open(private_key_path, "wb") as f:
        f.write(pem_priv)
    os.chmod(private_key_path, 0o600)
    return private_key_path


if __name__ == "__main__":
    out_dir = sys.argv[1] if len(sys.argv) > 1 else KEYS_DIR
    path = generate_pkcs1_key(out_dir)
    print(f"Wrote {path}. Try: rsa-keyconv convert {path} -i 'PKCS#1' -f 'PKCS#8'")
