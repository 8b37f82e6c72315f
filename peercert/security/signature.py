"""
Public key import and signature verification.

Neither entry point raises: malformed key material gives ``None`` and every
verification outcome is returned as a ``VerificationResult``.
"""
import logging
from typing import Optional, Union

from cryptography.exceptions import InternalError, InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import dsa, ec, padding, rsa

from ..models.verification import VerificationResult
from .buffer import BytesLike, as_bytes

logger = logging.getLogger(__name__)

SUPPORTED_HASH_ALGORITHMS = {
    "sha256": hashes.SHA256,
}

PublicKey = Union[rsa.RSAPublicKey, ec.EllipticCurvePublicKey, dsa.DSAPublicKey]


def import_public_key(der_bytes: BytesLike) -> Optional[PublicKey]:
    """
    Parse a DER-encoded SubjectPublicKeyInfo.

    Returns:
        The backend public key, or None if the bytes are not a usable key
    """
    try:
        return serialization.load_der_public_key(as_bytes(der_bytes))
    except (ValueError, TypeError, OverflowError, UnsupportedAlgorithm) as e:
        logger.debug(f"Public key import failed: {e}")
        return None


def _backend_error_code(error: Exception) -> int:
    """First numeric OpenSSL reason code attached to an error, else 0."""
    for openssl_error in getattr(error, 'err_code', None) or []:
        code = getattr(openssl_error, 'reason', None)
        if isinstance(code, int):
            return code
    return 0


def _verify_with_key(public_key, signature: bytes, text: bytes, algorithm: hashes.HashAlgorithm) -> None:
    if isinstance(public_key, rsa.RSAPublicKey):
        public_key.verify(signature, text, padding.PKCS1v15(), algorithm)
    elif isinstance(public_key, ec.EllipticCurvePublicKey):
        public_key.verify(signature, text, ec.ECDSA(algorithm))
    else:
        public_key.verify(signature, text, algorithm)


def verify_signature(hash_name: str, public_key: Optional[PublicKey],
                     signature: BytesLike, text: BytesLike) -> VerificationResult:
    """
    Verify that ``signature`` authenticates ``text`` under ``public_key``.

    Args:
        hash_name: Digest algorithm name, one of SUPPORTED_HASH_ALGORITHMS
        public_key: Key returned by import_public_key, possibly None
        signature: Raw signature bytes
        text: The signed message

    Returns:
        VerificationResult; ok only if the signature is valid for exactly
        this algorithm, key and message
    """
    algorithm_class = SUPPORTED_HASH_ALGORITHMS.get(hash_name) if isinstance(hash_name, str) else None
    if algorithm_class is None:
        return VerificationResult.unsupported_algorithm(hash_name)

    if not isinstance(public_key, (rsa.RSAPublicKey, ec.EllipticCurvePublicKey, dsa.DSAPublicKey)):
        return VerificationResult.initialization_failed()

    try:
        _verify_with_key(public_key, as_bytes(signature), as_bytes(text), algorithm_class())
    except InvalidSignature:
        return VerificationResult.verification_failed(0)
    except InternalError as e:
        return VerificationResult.verification_failed(_backend_error_code(e))
    except (ValueError, TypeError, OverflowError, UnsupportedAlgorithm) as e:
        logger.debug(f"Signature verification rejected input: {e}")
        return VerificationResult.verification_failed(0)

    return VerificationResult.success()
