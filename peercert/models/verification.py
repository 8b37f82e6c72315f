"""
Signature verification result models.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class VerificationFailure(Enum):
    """Why a signature verification did not succeed."""
    UNSUPPORTED_ALGORITHM = "unsupported_algorithm"
    INITIALIZATION_FAILED = "initialization_failed"
    VERIFICATION_FAILED = "verification_failed"


@dataclass(frozen=True)
class VerificationResult:
    """Result of a signature verification.

    ``message`` is empty on success. ``error_code`` is only set for
    ``VERIFICATION_FAILED`` and holds the backend's numeric code.
    """
    ok: bool
    message: str = ""
    error_code: Optional[int] = None
    failure: Optional[VerificationFailure] = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> 'VerificationResult':
        return cls(ok=True)

    @classmethod
    def unsupported_algorithm(cls, hash_name: str) -> 'VerificationResult':
        return cls(
            ok=False,
            message=f"{hash_name} is not supported.",
            failure=VerificationFailure.UNSUPPORTED_ALGORITHM
        )

    @classmethod
    def initialization_failed(cls) -> 'VerificationResult':
        return cls(
            ok=False,
            message="Failed to initialize digest verify.",
            failure=VerificationFailure.INITIALIZATION_FAILED
        )

    @classmethod
    def verification_failed(cls, error_code: int = 0) -> 'VerificationResult':
        return cls(
            ok=False,
            message=f"Failed to verify digest. Error code: {error_code}",
            error_code=error_code,
            failure=VerificationFailure.VERIFICATION_FAILED
        )
