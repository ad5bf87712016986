"""RSA PKCS#1 v1.5 signature verification against PEM public keys."""
from .crypto import (
    CryptographyPrimitive,
    DigestAlgorithm,
    KeyHandle,
    PublicKeyMaterial,
    SignaturePrimitive,
    check_signature,
    decode_signature,
    is_valid_public_key,
    normalize_pem,
    resolve_algorithm,
    verify,
    verify_async,
    verify_many,
    verify_sha256,
    verify_sha512,
)
from .errors import (
    AlgorithmError,
    KeyDecodeError,
    PrimitiveError,
    SignatureDecodeError,
    VerificationError,
)
from .models import VerificationFailure

__version__ = "0.1.0"

__all__ = [
    "AlgorithmError",
    "CryptographyPrimitive",
    "DigestAlgorithm",
    "KeyDecodeError",
    "KeyHandle",
    "PrimitiveError",
    "PublicKeyMaterial",
    "SignatureDecodeError",
    "SignaturePrimitive",
    "VerificationError",
    "VerificationFailure",
    "check_signature",
    "decode_signature",
    "is_valid_public_key",
    "normalize_pem",
    "resolve_algorithm",
    "verify",
    "verify_async",
    "verify_many",
    "verify_sha256",
    "verify_sha512",
]
