import base64

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def pkcs1_pem(rsa_key):
    return rsa_key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.TraditionalOpenSSL,
        serialization.NoEncryption(),
    ).decode()


@pytest.fixture(scope="session")
def pkcs8_pem(rsa_key):
    return rsa_key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode()


@pytest.fixture(scope="session")
def pkcs1_der(rsa_key):
    return rsa_key.private_bytes(
        serialization.Encoding.DER,
        serialization.PrivateFormat.TraditionalOpenSSL,
        serialization.NoEncryption(),
    )


@pytest.fixture(scope="session")
def ec_pkcs8_pem():
    key = ec.generate_private_key(ec.SECP256R1())
    return key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode()


@pytest.fixture
def wrap_pem():
    """Wrap raw DER bytes in a PEM block with the given label."""
    def _wrap(der: bytes, label: str) -> str:
        body = base64.encodebytes(der).decode()
        return f"-----BEGIN {label}-----\n{body}-----END {label}-----\n"
    return _wrap


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from any rsa-keyconv.yaml or env config on the host."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RSA_KEYCONV_CONFIG", raising=False)
    monkeypatch.delenv("RSA_KEYCONV_LOG_LEVEL", raising=False)
    return tmp_path
