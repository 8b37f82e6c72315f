"""
Certificate models shared by the field extractor and the inspection service.
"""
from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List

from cryptography import x509


class GeneralNameType(Enum):
    """Subject alternative name classes that can be extracted."""
    DNS = "dns"
    URI = "uri"
    EMAIL = "email"
    IP_ADDRESS = "ip_address"

    @property
    def general_name_class(self) -> type:
        """The cryptography general name class backing this tag."""
        return _GENERAL_NAME_CLASSES[self]


_GENERAL_NAME_CLASSES = {
    GeneralNameType.DNS: x509.DNSName,
    GeneralNameType.URI: x509.UniformResourceIdentifier,
    GeneralNameType.EMAIL: x509.RFC822Name,
    GeneralNameType.IP_ADDRESS: x509.IPAddress,
}


@dataclass
class CertificateInfo:
    """Information about a certificate."""
    subject: str
    issuer: str
    serial_number: str
    not_before: datetime
    not_after: datetime
    days_until_expiration: int
    fingerprint: str
    dns_names: List[str] = field(default_factory=list)
    uris: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        data = asdict(self)
        data['not_before'] = self.not_before.isoformat()
        data['not_after'] = self.not_after.isoformat()
        return data
