"""
Security package: certificate fields, digests and signature verification.
"""
from .buffer import Buffer
from .clock import Clock, SystemClock, SimulatedClock
from .certificate_fields import (
    UNKNOWN_DAYS_UNTIL_EXPIRATION,
    BorrowedCertificate,
    borrowed_certificate,
    get_days_until_expiration,
    get_expiration_time,
    get_issuer_from_certificate,
    get_serial_number_from_certificate,
    get_sha256_fingerprint,
    get_subject_alt_names,
    get_subject_from_certificate,
    get_valid_from,
    load_certificate,
    read_certificate_file,
)
from .digest import get_sha256_digest, get_sha256_hmac, to_hex, from_hex
from .signature import SUPPORTED_HASH_ALGORITHMS, import_public_key, verify_signature

__all__ = [
    'Buffer',
    'Clock',
    'SystemClock',
    'SimulatedClock',
    'UNKNOWN_DAYS_UNTIL_EXPIRATION',
    'BorrowedCertificate',
    'borrowed_certificate',
    'get_days_until_expiration',
    'get_expiration_time',
    'get_issuer_from_certificate',
    'get_serial_number_from_certificate',
    'get_sha256_fingerprint',
    'get_subject_alt_names',
    'get_subject_from_certificate',
    'get_valid_from',
    'load_certificate',
    'read_certificate_file',
    'get_sha256_digest',
    'get_sha256_hmac',
    'to_hex',
    'from_hex',
    'SUPPORTED_HASH_ALGORITHMS',
    'import_public_key',
    'verify_signature'
]
