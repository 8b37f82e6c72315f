"""
Identity and validity fields read from parsed X.509 certificates.

Certificates are ``cryptography.x509.Certificate`` objects owned by the
caller; nothing here copies or mutates them.
"""
import logging
import os
import sys
from contextlib import contextmanager
from datetime import datetime, timedelta
from typing import Iterator, List, Optional, Union

from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.x509.oid import NameOID

from ..models.certificate import GeneralNameType
from .clock import Clock

logger = logging.getLogger(__name__)

# Returned when the expiration of a certificate is unknown.
UNKNOWN_DAYS_UNTIL_EXPIRATION = sys.maxsize

_PEM_MARKER = b"-----BEGIN"
_ONE_DAY = timedelta(days=1)

# Attribute names OpenSSL prints that cryptography would render as dotted OIDs.
_NAME_OVERRIDES = {NameOID.EMAIL_ADDRESS: "emailAddress"}


def load_certificate(data: Union[bytes, str]) -> x509.Certificate:
    """
    Parse a certificate from PEM or DER bytes.

    Raises:
        ValueError: If the data is not a certificate
    """
    if isinstance(data, str):
        data = data.encode()
    if data.lstrip().startswith(_PEM_MARKER):
        return x509.load_pem_x509_certificate(data)
    return x509.load_der_x509_certificate(data)


def read_certificate_file(file_path: str) -> x509.Certificate:
    """
    Load a certificate from a PEM or DER file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or not a certificate
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Certificate file not found: {file_path}")

    with open(file_path, 'rb') as f:
        content = f.read()

    if not content.strip():
        raise ValueError(f"Certificate file is empty: {file_path}")

    try:
        cert = load_certificate(content)
    except ValueError as e:
        raise ValueError(f"Failed to parse certificate {file_path}: {e}") from e

    logger.debug(f"Loaded certificate from {file_path}")
    return cert


class BorrowedCertificate:
    """
    Certificate view that stops working once its borrow scope ends.

    Attribute access is forwarded to the underlying certificate until
    ``release()`` is called; afterwards it raises RuntimeError.
    """

    def __init__(self, cert: x509.Certificate):
        self._cert = cert

    @property
    def certificate(self) -> x509.Certificate:
        if self._cert is None:
            raise RuntimeError("Certificate handle used after its borrow scope ended")
        return self._cert

    @property
    def is_released(self) -> bool:
        return self._cert is None

    def release(self) -> None:
        self._cert = None

    def __getattr__(self, name):
        return getattr(self.certificate, name)


@contextmanager
def borrowed_certificate(source: Union[x509.Certificate, bytes, str]) -> Iterator[BorrowedCertificate]:
    """
    Yield a certificate handle that is only valid inside the ``with`` block.

    ``source`` may be an already parsed certificate, PEM/DER bytes, or a
    file path. The yielded handle works with every extractor in this module
    and raises RuntimeError if used after the block exits.
    """
    if isinstance(source, x509.Certificate):
        cert = source
    elif isinstance(source, str) and not source.lstrip().startswith("-----BEGIN"):
        cert = read_certificate_file(source)
    else:
        cert = load_certificate(source)

    handle = BorrowedCertificate(cert)
    try:
        yield handle
    finally:
        handle.release()


def get_subject_alt_names(cert: x509.Certificate, name_type: GeneralNameType) -> List[str]:
    """
    Return the subject alternative names of one type, in certificate order.

    Certificates without a SAN extension, or without entries of the requested
    type, give an empty list.
    """
    try:
        extension = cert.extensions.get_extension_for_class(x509.SubjectAlternativeName)
    except x509.ExtensionNotFound:
        return []

    name_class = name_type.general_name_class
    return [str(name.value) for name in extension.value if isinstance(name, name_class)]


def get_subject_from_certificate(cert: x509.Certificate) -> str:
    """Render the subject as ``CN=..,OU=..,O=..,L=..,ST=..,C=..``.

    RDNs are printed last-encoded first (RFC 4514) and never re-sorted.
    emailAddress keeps its OpenSSL short name instead of a dotted OID.
    """
    return cert.subject.rfc4514_string(_NAME_OVERRIDES)


def get_issuer_from_certificate(cert: x509.Certificate) -> str:
    return cert.issuer.rfc4514_string(_NAME_OVERRIDES)


def get_serial_number_from_certificate(cert: x509.Certificate) -> str:
    """Lowercase hex serial number, two digits per byte, no prefix.

    Zero renders as "0", as OpenSSL's BN_bn2hex does.
    """
    serial = cert.serial_number
    if serial == 0:
        return "0"
    sign = "-" if serial < 0 else ""
    serial = abs(serial)
    return sign + serial.to_bytes((serial.bit_length() + 7) // 8 or 1, "big").hex()


def get_valid_from(cert: x509.Certificate) -> datetime:
    """NotBefore as a UTC datetime with second resolution."""
    return cert.not_valid_before_utc.replace(microsecond=0)


def get_expiration_time(cert: x509.Certificate) -> datetime:
    """NotAfter as a UTC datetime with second resolution."""
    return cert.not_valid_after_utc.replace(microsecond=0)


def get_days_until_expiration(cert: Optional[x509.Certificate], clock: Clock) -> int:
    """
    Whole days from ``clock.now()`` until the certificate's NotAfter.

    The result is truncated toward zero and is negative once the certificate
    has expired. A missing certificate returns UNKNOWN_DAYS_UNTIL_EXPIRATION,
    which callers must read as "do not alarm".
    """
    if cert is None:
        return UNKNOWN_DAYS_UNTIL_EXPIRATION

    remaining = get_expiration_time(cert) - clock.now()
    days = abs(remaining) // _ONE_DAY
    return days if remaining >= timedelta(0) else -days


def get_sha256_fingerprint(cert: x509.Certificate) -> str:
    """SHA-256 over the DER encoding, as lowercase hex."""
    return cert.fingerprint(hashes.SHA256()).hex()
