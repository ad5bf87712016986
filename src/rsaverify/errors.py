"""Exception taxonomy for the lower-level helpers.

The boolean entry points in ``rsaverify.crypto.dispatch`` catch all of these and
return False; they only surface when the helpers are called directly.
"""
from __future__ import annotations


class VerificationError(Exception):
    """Base class; ``kind`` names the failure category for diagnostics."""

    kind = "error"


class KeyDecodeError(VerificationError):
    """PEM framing, base64 body or key import rejected."""

    kind = "key_decode"


class SignatureDecodeError(VerificationError):
    """Signature text is not valid standard or URL-safe base64."""

    kind = "signature_decode"


class AlgorithmError(VerificationError):
    """Digest algorithm outside the supported set."""

    kind = "algorithm"


class PrimitiveError(VerificationError):
    """Raised by the underlying cryptographic primitive."""

    kind = "primitive"


__all__ = [
    "VerificationError",
    "KeyDecodeError",
    "SignatureDecodeError",
    "AlgorithmError",
    "PrimitiveError",
]
