"""
Models package for the peercert utility.
"""

from .config import Config, ConfigValidationError, ConfigValidationResult
from .certificate import CertificateInfo, GeneralNameType
from .verification import VerificationFailure, VerificationResult

__all__ = [
    'Config',
    'ConfigValidationError',
    'ConfigValidationResult',
    'CertificateInfo',
    'GeneralNameType',
    'VerificationFailure',
    'VerificationResult'
]
