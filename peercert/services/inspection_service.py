"""
Certificate inspection service: identity summaries, expiration alarms and
peer tags for tracing.
"""
import logging
from typing import Dict, Optional

from cryptography import x509

from ..models.certificate import CertificateInfo, GeneralNameType
from ..security.certificate_fields import (
    UNKNOWN_DAYS_UNTIL_EXPIRATION,
    borrowed_certificate,
    get_days_until_expiration,
    get_expiration_time,
    get_issuer_from_certificate,
    get_serial_number_from_certificate,
    get_sha256_fingerprint,
    get_subject_alt_names,
    get_subject_from_certificate,
    get_valid_from,
)
from ..security.clock import Clock, SystemClock


class CertificateInspectionService:
    """Service for summarizing peer certificates."""

    def __init__(self, config, clock: Optional[Clock] = None):
        """Initialize the inspection service with configuration and a time source."""
        self.config = config
        self.clock = clock or SystemClock()
        self.logger = logging.getLogger(__name__)

    def get_certificate_info(self, cert: x509.Certificate) -> CertificateInfo:
        """Extract information from a certificate."""
        return CertificateInfo(
            subject=get_subject_from_certificate(cert),
            issuer=get_issuer_from_certificate(cert),
            serial_number=get_serial_number_from_certificate(cert),
            not_before=get_valid_from(cert),
            not_after=get_expiration_time(cert),
            days_until_expiration=get_days_until_expiration(cert, self.clock),
            fingerprint=get_sha256_fingerprint(cert),
            dns_names=get_subject_alt_names(cert, GeneralNameType.DNS),
            uris=get_subject_alt_names(cert, GeneralNameType.URI)
        )

    def inspect_file(self, file_path: str) -> CertificateInfo:
        """
        Load a certificate file and summarize it.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not a certificate
        """
        with borrowed_certificate(file_path) as cert:
            info = self.get_certificate_info(cert)
        self.logger.info(f"Inspected certificate {file_path}: {info.subject}")
        return info

    def check_expiration(self, cert: Optional[x509.Certificate]) -> bool:
        """
        Return True when the certificate expires within the warning window.

        A missing certificate never alarms.
        """
        days = get_days_until_expiration(cert, self.clock)
        if days == UNKNOWN_DAYS_UNTIL_EXPIRATION:
            return False

        if days < self.config.expiration_warning_days:
            subject = get_subject_from_certificate(cert)
            if days < 0:
                self.logger.warning(f"Certificate {subject} expired {-days} days ago")
            else:
                self.logger.warning(f"Certificate {subject} expires in {days} days")
            return True

        return False

    def get_peer_tags(self, cert: x509.Certificate) -> Dict[str, str]:
        """Build tracing tags describing the peer identity."""
        tags = {
            'peer.subject': get_subject_from_certificate(cert),
            'peer.serial': get_serial_number_from_certificate(cert),
        }

        dns_names = get_subject_alt_names(cert, GeneralNameType.DNS)
        if dns_names:
            tags['peer.san.dns'] = ",".join(dns_names)

        uris = get_subject_alt_names(cert, GeneralNameType.URI)
        if uris:
            tags['peer.san.uri'] = ",".join(uris)

        return tags
