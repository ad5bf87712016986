from pydantic import BaseModel
from typing import Optional, Literal, get_args

FailureKind = Literal["key_decode", "signature_decode", "algorithm", "primitive", "rejected", "error"]
FAILURE_KINDS = frozenset(get_args(FailureKind))


class VerificationFailure(BaseModel):
    kind: FailureKind
    detail: str
    operation: str = "verify"
    algorithm: Optional[str] = None
