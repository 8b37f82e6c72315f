"""
Services package for the peercert utility.
"""

from .config_service import ConfigService
from .inspection_service import CertificateInspectionService
from .logging_service import LoggingService, JSONFormatter

__all__ = [
    'ConfigService',
    'CertificateInspectionService',
    'LoggingService',
    'JSONFormatter'
]
