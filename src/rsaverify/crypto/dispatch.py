"""Boolean verification entry points.

Every failure (bad key, bad signature, unsupported digest, primitive error) is
reduced to ``False``. Causes go to the ``rsaverify`` logger and, when given, to
the ``diagnostic`` callback as a ``VerificationFailure``.
"""
from __future__ import annotations

import asyncio
from typing import Any, Callable, Iterable, List, Optional

from ..errors import KeyDecodeError, PrimitiveError, VerificationError
from ..models import FAILURE_KINDS, VerificationFailure
from ..utils.logging import get_logger
from .alg_registry import DigestAlgorithm, resolve_algorithm
from .encoding import decode_signature
from .keyloader import PublicKeyMaterial, normalize_pem
from .primitive import SignaturePrimitive, default_primitive

log = get_logger()

Diagnostic = Callable[[VerificationFailure], Any]


def _alg_label(alg: Any) -> Optional[str]:
    if alg is None:
        return None
    if isinstance(alg, DigestAlgorithm):
        return alg.value
    return str(alg)


def _detail(e: BaseException) -> str:
    try:
        return f"{type(e).__name__}: {e}"
    except Exception:
        return type(e).__name__


def _message(e: BaseException) -> str:
    try:
        return str(e)
    except Exception:
        return type(e).__name__


def _report(kind: str, detail: str, diagnostic: Optional[Diagnostic], operation: str = "verify", algorithm: Any = None) -> None:
    try:
        if kind not in FAILURE_KINDS:
            detail = f"[{kind}] {detail}"
            kind = "error"
        failure = VerificationFailure(kind=kind, detail=detail, operation=operation, algorithm=_alg_label(algorithm))
    except Exception as e:
        log.warning(f"{operation} failed; could not build diagnostic: {_detail(e)}")
        return
    if failure.kind == "rejected":
        log.info(f"{failure.operation}: signature rejected (alg={failure.algorithm})")
    else:
        log.warning(f"{failure.operation} failed ({failure.kind}): {failure.detail}")
    if diagnostic is None:
        return
    try:
        diagnostic(failure)
    except Exception as e:
        log.warning(f"diagnostic hook raised {_detail(e)}")


def _message_bytes(data: Any) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise VerificationError(f"data must be str or bytes, got {type(data).__name__}")


def _key_material(key: Any) -> PublicKeyMaterial:
    if isinstance(key, PublicKeyMaterial):
        return key
    return normalize_pem(key)


def _import(primitive: SignaturePrimitive, material: PublicKeyMaterial, alg: DigestAlgorithm):
    try:
        return primitive.import_key(material.der, alg)
    except VerificationError:
        raise
    except Exception as e:
        raise KeyDecodeError(f"public key import failed: {e}") from e


def check_signature(
    data: str | bytes,
    signature: str | bytes,
    key: PublicKeyMaterial | str | bytes,
    algorithm: DigestAlgorithm | str | None = None,
    primitive: Optional[SignaturePrimitive] = None,
) -> bool:
    """Raising variant of ``verify``.

    Returns the primitive's verdict; structural problems raise a
    ``VerificationError`` subclass.
    """
    message = _message_bytes(data)
    sig = decode_signature(signature)
    material = _key_material(key)
    alg = resolve_algorithm(algorithm)
    prim = primitive or default_primitive()
    handle = _import(prim, material, alg)
    try:
        result = prim.verify(handle, sig, message)
    except VerificationError:
        raise
    except Exception as e:
        raise PrimitiveError(f"{type(e).__name__}: {e}") from e
    return result is True


def verify(
    data: str | bytes,
    signature: str | bytes,
    public_key: PublicKeyMaterial | str | bytes,
    algorithm: DigestAlgorithm | str | None = None,
    *,
    primitive: Optional[SignaturePrimitive] = None,
    diagnostic: Optional[Diagnostic] = None,
) -> bool:
    try:
        ok = check_signature(data, signature, public_key, algorithm, primitive)
    except VerificationError as e:
        _report(getattr(e, "kind", "error"), _message(e), diagnostic, algorithm=algorithm)
        return False
    except Exception as e:
        _report("error", _detail(e), diagnostic, algorithm=algorithm)
        return False
    if not ok:
        _report("rejected", "signature does not match", diagnostic, algorithm=algorithm)
    return ok


def verify_sha256(data, signature, public_key, **kwargs) -> bool:
    return verify(data, signature, public_key, DigestAlgorithm.SHA256, **kwargs)


def verify_sha512(data, signature, public_key, **kwargs) -> bool:
    return verify(data, signature, public_key, DigestAlgorithm.SHA512, **kwargs)


async def verify_async(
    data: str | bytes,
    signature: str | bytes,
    public_key: PublicKeyMaterial | str | bytes,
    algorithm: DigestAlgorithm | str | None = None,
    **kwargs,
) -> bool:
    return await asyncio.to_thread(verify, data, signature, public_key, algorithm, **kwargs)


def verify_many(
    items: Iterable[Any],
    algorithm: DigestAlgorithm | str | None = None,
    *,
    primitive: Optional[SignaturePrimitive] = None,
    diagnostic: Optional[Diagnostic] = None,
) -> List[bool]:
    """Verify ``(data, signature, public_key)`` triples independently.

    If ``items`` is not iterable, or raises while being consumed, the failure is
    reported and the results gathered so far are returned.
    """
    results: List[bool] = []
    try:
        for item in items:
            try:
                data, signature, public_key = item
            except (TypeError, ValueError):
                _report("error", "expected (data, signature, public_key)", diagnostic, operation="verify_many")
                results.append(False)
                continue
            results.append(verify(data, signature, public_key, algorithm, primitive=primitive, diagnostic=diagnostic))
    except Exception as e:
        _report("error", f"item source failed after {len(results)} items: {_detail(e)}", diagnostic, operation="verify_many")
    return results


def is_valid_public_key(
    public_key_pem: str | bytes,
    *,
    primitive: Optional[SignaturePrimitive] = None,
    diagnostic: Optional[Diagnostic] = None,
) -> bool:
    """True when the PEM is well framed and imports as an RSA public key."""
    try:
        if not isinstance(public_key_pem, (str, bytes, bytearray)):
            raise KeyDecodeError(f"PEM must be str or bytes, got {type(public_key_pem).__name__}")
        material = normalize_pem(public_key_pem)
        _import(primitive or default_primitive(), material, DigestAlgorithm.SHA256)
    except VerificationError as e:
        _report(getattr(e, "kind", "error"), _message(e), diagnostic, operation="is_valid_public_key")
        return False
    except Exception as e:
        _report("error", _detail(e), diagnostic, operation="is_valid_public_key")
        return False
    return True


__all__ = [
    "check_signature",
    "verify",
    "verify_sha256",
    "verify_sha512",
    "verify_async",
    "verify_many",
    "is_valid_public_key",
]
