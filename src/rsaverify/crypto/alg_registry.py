"""Digest algorithm registry for RSASSA-PKCS1-v1_5 verification.

Supported algorithms:
  - SHA-256 (default)
  - SHA-512

Selection is a closed set. Names are matched case-insensitively against the
canonical spellings above; anything else raises ``AlgorithmError`` rather than
falling back to a default.
"""

from __future__ import annotations

from enum import Enum

from cryptography.hazmat.primitives import hashes

from ..config import load_settings
from ..errors import AlgorithmError


class DigestAlgorithm(str, Enum):
    SHA256 = "SHA-256"
    SHA512 = "SHA-512"


_HASHES = {
    DigestAlgorithm.SHA256: hashes.SHA256,
    DigestAlgorithm.SHA512: hashes.SHA512,
}


def resolve_algorithm(alg: DigestAlgorithm | str | None = None) -> DigestAlgorithm:
    """Map a selector to a ``DigestAlgorithm``.

    ``None`` selects the configured default (``RSAVERIFY_DEFAULT_ALGORITHM``),
    which is validated with the same rules as an explicit value.
    """
    if alg is None:
        alg = load_settings().default_algorithm
    if isinstance(alg, DigestAlgorithm):
        return alg
    if not isinstance(alg, str):
        raise AlgorithmError(f"algorithm must be a string, got {type(alg).__name__}")
    wanted = alg.strip().upper()
    for member in DigestAlgorithm:
        if member.value == wanted:
            return member
    raise AlgorithmError(f"unsupported digest algorithm: {alg!r}")


def hash_for(alg: DigestAlgorithm) -> hashes.HashAlgorithm:
    return _HASHES[alg]()


__all__ = ["DigestAlgorithm", "resolve_algorithm", "hash_for"]
