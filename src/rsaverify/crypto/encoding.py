"""Base64 handling for signatures and PEM bodies."""
from __future__ import annotations

import base64
import binascii
import re

from ..config import load_settings
from ..errors import SignatureDecodeError

_WHITESPACE_RE = re.compile(r"\s+")
_URLSAFE = str.maketrans("-_", "+/")


def strip_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub("", text)


def b64decode_strict(text: str) -> bytes:
    """Decode standard-alphabet base64, rejecting stray characters and bad padding."""
    return base64.b64decode(text.encode("ascii"), validate=True)


def _restore_padding(text: str) -> str:
    if "=" in text:
        return text
    rem = len(text) % 4
    if rem == 1:
        raise SignatureDecodeError("truncated base64 signature")
    if rem:
        text += "=" * (4 - rem)
    return text


def decode_signature(signature: str | bytes | bytearray | memoryview, max_chars: int | None = None) -> bytes:
    """Return raw signature bytes.

    Bytes-like input is taken as already binary. Text is trimmed, URL-safe
    characters ('-', '_') are mapped to the standard alphabet and the result is
    strictly base64-decoded; stripped '=' padding is restored first.
    """
    if isinstance(signature, (bytes, bytearray, memoryview)):
        raw = bytes(signature)
        if not raw:
            raise SignatureDecodeError("empty signature")
        return raw
    if not isinstance(signature, str):
        raise SignatureDecodeError(f"signature must be str or bytes, got {type(signature).__name__}")
    if max_chars is None:
        max_chars = load_settings().max_signature_chars
    if len(signature) > max_chars:
        raise SignatureDecodeError(f"signature exceeds {max_chars} characters")
    text = strip_whitespace(signature)
    if not text:
        raise SignatureDecodeError("empty signature")
    text = _restore_padding(text.translate(_URLSAFE))
    try:
        raw = b64decode_strict(text)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise SignatureDecodeError(f"invalid base64 signature: {e}") from e
    if not raw:
        raise SignatureDecodeError("empty signature")
    return raw


__all__ = ["decode_signature", "b64decode_strict", "strip_whitespace"]
