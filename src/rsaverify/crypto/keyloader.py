"""PEM public key normalization.

``normalize_pem`` turns a ``-----BEGIN PUBLIC KEY-----`` block into the
SubjectPublicKeyInfo DER bytes a primitive imports. It checks framing and the
base64 body only; whether the DER is a usable RSA key is decided by
``SignaturePrimitive.import_key``.
"""
from __future__ import annotations

import binascii
from dataclasses import dataclass

from ..config import load_settings
from ..errors import KeyDecodeError
from .encoding import b64decode_strict, strip_whitespace

PEM_HEADER = "-----BEGIN PUBLIC KEY-----"
PEM_FOOTER = "-----END PUBLIC KEY-----"


@dataclass(frozen=True)
class PublicKeyMaterial:
    der: bytes

    @classmethod
    def from_der(cls, der: bytes) -> "PublicKeyMaterial":
        if not isinstance(der, (bytes, bytearray, memoryview)):
            raise KeyDecodeError(f"DER key must be bytes, got {type(der).__name__}")
        der = bytes(der)
        if not der:
            raise KeyDecodeError("empty DER key")
        return cls(der=der)

    def __repr__(self) -> str:
        return f"PublicKeyMaterial(<{len(self.der)} bytes>)"


def _pem_text(pem: str | bytes, max_chars: int) -> str:
    if isinstance(pem, (bytes, bytearray)):
        try:
            pem = bytes(pem).decode("ascii")
        except UnicodeDecodeError as e:
            raise KeyDecodeError("PEM is not ASCII") from e
    if not isinstance(pem, str):
        raise KeyDecodeError(f"PEM must be str or bytes, got {type(pem).__name__}")
    if len(pem) > max_chars:
        raise KeyDecodeError(f"PEM exceeds {max_chars} characters")
    return pem.strip()


def pem_body(pem: str | bytes, max_chars: int | None = None) -> str:
    """Return the base64 interior of a public key PEM with whitespace removed."""
    if max_chars is None:
        max_chars = load_settings().max_pem_chars
    text = _pem_text(pem, max_chars)
    if not text.startswith(PEM_HEADER):
        raise KeyDecodeError("missing BEGIN PUBLIC KEY header")
    if not text.endswith(PEM_FOOTER) or len(text) < len(PEM_HEADER) + len(PEM_FOOTER):
        raise KeyDecodeError("missing END PUBLIC KEY footer")
    body = text[len(PEM_HEADER):len(text) - len(PEM_FOOTER)]
    if PEM_HEADER in body or PEM_FOOTER in body:
        raise KeyDecodeError("more than one PEM block")
    body = strip_whitespace(body)
    if not body:
        raise KeyDecodeError("invalid PEM: no content")
    return body


def normalize_pem(pem: str | bytes, max_chars: int | None = None) -> PublicKeyMaterial:
    body = pem_body(pem, max_chars)
    try:
        der = b64decode_strict(body)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise KeyDecodeError(f"invalid base64 in PEM body: {e}") from e
    if not der:
        raise KeyDecodeError("PEM body decodes to nothing")
    return PublicKeyMaterial(der=der)


__all__ = ["PublicKeyMaterial", "normalize_pem", "pem_body", "PEM_HEADER", "PEM_FOOTER"]
