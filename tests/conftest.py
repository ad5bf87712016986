import base64

import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa


def _pub_pem(sk) -> str:
    return sk.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()


@pytest.fixture(scope="session")
def rsa_sk():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_rsa_sk():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def pub_pem(rsa_sk) -> str:
    return _pub_pem(rsa_sk)


@pytest.fixture(scope="session")
def other_pub_pem(other_rsa_sk) -> str:
    return _pub_pem(other_rsa_sk)


@pytest.fixture(scope="session")
def ec_pub_pem() -> str:
    return _pub_pem(ec.generate_private_key(ec.SECP256R1()))


@pytest.fixture(scope="session")
def sign(rsa_sk):
    """sign(message, alg="SHA-256") -> raw PKCS#1 v1.5 signature bytes."""
    def _sign(message, alg: str = "SHA-256") -> bytes:
        if isinstance(message, str):
            message = message.encode()
        h = hashes.SHA512() if alg == "SHA-512" else hashes.SHA256()
        return rsa_sk.sign(message, padding.PKCS1v15(), h)
    return _sign


def b64(b: bytes) -> str:
    return base64.b64encode(b).decode()


def b64url(b: bytes) -> str:
    return base64.urlsafe_b64encode(b).decode().rstrip("=")
