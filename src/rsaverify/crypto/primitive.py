"""Cryptographic primitive capability used by the verification dispatcher.

Any object with ``import_key`` and ``verify`` matching ``SignaturePrimitive``
can be passed to ``rsaverify.verify(..., primitive=...)``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from ..errors import KeyDecodeError
from .alg_registry import DigestAlgorithm, hash_for


@dataclass(frozen=True)
class KeyHandle:
    """A public key bound to the digest it will verify with."""

    key: Any
    algorithm: DigestAlgorithm


@runtime_checkable
class SignaturePrimitive(Protocol):
    def import_key(self, spki_der: bytes, algorithm: DigestAlgorithm) -> KeyHandle: ...
    def verify(self, handle: KeyHandle, signature: bytes, message: bytes) -> bool: ...


@dataclass
class CryptographyPrimitive:
    """RSASSA-PKCS1-v1_5 backed by pyca/cryptography."""

    def import_key(self, spki_der: bytes, algorithm: DigestAlgorithm) -> KeyHandle:
        try:
            key = serialization.load_der_public_key(spki_der)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise KeyDecodeError(f"public key import failed: {e}") from e
        if not isinstance(key, rsa.RSAPublicKey):
            raise KeyDecodeError(f"expected RSA public key, got {type(key).__name__}")
        return KeyHandle(key=key, algorithm=algorithm)

    def verify(self, handle: KeyHandle, signature: bytes, message: bytes) -> bool:
        try:
            handle.key.verify(signature, message, padding.PKCS1v15(), hash_for(handle.algorithm))
            return True
        except InvalidSignature:
            return False


def default_primitive() -> SignaturePrimitive:
    return CryptographyPrimitive()


__all__ = ["KeyHandle", "SignaturePrimitive", "CryptographyPrimitive", "default_primitive"]
