from .alg_registry import DigestAlgorithm, resolve_algorithm
from .encoding import decode_signature
from .keyloader import PublicKeyMaterial, normalize_pem
from .primitive import CryptographyPrimitive, KeyHandle, SignaturePrimitive
from .dispatch import (
    check_signature,
    is_valid_public_key,
    verify,
    verify_async,
    verify_many,
    verify_sha256,
    verify_sha512,
)
