"""
Command-line entry point for the peercert utility.
Inspects certificates, computes digests and verifies signatures.
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .models.config import Config, LOG_LEVELS
from .security.buffer import Buffer
from .security.certificate_fields import read_certificate_file
from .security.digest import get_sha256_digest, get_sha256_hmac, to_hex, from_hex
from .security.signature import import_public_key, verify_signature
from .services.config_service import ConfigService
from .services.inspection_service import CertificateInspectionService
from .services.logging_service import LoggingService, CONSOLE_FORMAT

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_EXPIRING = 2


class PeercertApplication:
    """Wires configuration, logging and services for one CLI invocation."""

    def __init__(self, config_path: Optional[str] = None, log_level: Optional[str] = None):
        """
        Initialize the application.

        Args:
            config_path: Path to configuration file (optional)
            log_level: Overrides the configured log level (optional)
        """
        self.config_path = config_path or self._get_default_config_path()
        self.log_level = log_level
        self.config = None
        self.logging_service = None
        self.inspection_service = None
        self.logger = logging.getLogger(__name__)

    def _get_default_config_path(self) -> Optional[str]:
        """Return the first existing default configuration file, if any."""
        possible_paths = [
            "peercert.properties",
            os.path.expanduser("~/.peercert/config.properties"),
            "/etc/peercert/config.properties"
        ]

        for path in possible_paths:
            if os.path.exists(path):
                return path
        return None

    def initialize(self) -> None:
        """
        Load configuration and set up logging.

        Raises:
            FileNotFoundError: If an explicit config file doesn't exist
            ValueError: If the configuration is invalid
        """
        if self.config_path:
            self.config = ConfigService().load_config(self.config_path)
            if self.log_level:
                self.config.log_level = self.log_level
            self.logging_service = LoggingService(self.config)
        else:
            self.config = Config(log_level=self.log_level or "WARNING")
            logging.basicConfig(
                level=getattr(logging, self.config.log_level),
                format=CONSOLE_FORMAT,
                stream=sys.stderr
            )

        self.inspection_service = CertificateInspectionService(self.config)
        self.logger.debug(f"Configuration loaded from: {self.config_path or 'defaults'}")

    def inspect(self, cert_path: str, as_json: bool = False) -> int:
        cert = read_certificate_file(cert_path)
        info = self.inspection_service.get_certificate_info(cert)

        if as_json:
            print(json.dumps(info.to_dict(), indent=2))
        else:
            print(f"Subject:       {info.subject}")
            print(f"Issuer:        {info.issuer}")
            print(f"Serial number: {info.serial_number}")
            print(f"Not before:    {info.not_before.isoformat()}")
            print(f"Not after:     {info.not_after.isoformat()}")
            print(f"Days left:     {info.days_until_expiration}")
            print(f"SHA-256:       {info.fingerprint}")
            for name in info.dns_names:
                print(f"DNS:           {name}")
            for uri in info.uris:
                print(f"URI:           {uri}")

        if self.inspection_service.check_expiration(cert):
            if self.logging_service:
                self.logging_service.log_with_context(
                    'warning', "Certificate expiration alarm",
                    certificate=cert_path,
                    subject=info.subject,
                    serial_number=info.serial_number,
                    days_until_expiration=info.days_until_expiration
                )
            return EXIT_EXPIRING
        return EXIT_OK

    def digest(self, paths: List[str], hmac_key: Optional[str] = None) -> int:
        buffer = Buffer()
        for path in paths:
            with open(path, 'rb') as f:
                buffer.add(f.read())

        if hmac_key is not None:
            print(to_hex(get_sha256_hmac(hmac_key, buffer.to_bytes())))
        else:
            print(to_hex(get_sha256_digest(buffer)))
        return EXIT_OK

    def verify(self, key_path: str, signature_hex: str, hash_name: str, message_path: str) -> int:
        with open(key_path, 'rb') as f:
            public_key = import_public_key(f.read())
        with open(message_path, 'rb') as f:
            message = f.read()

        result = verify_signature(hash_name, public_key, from_hex(signature_hex), message)
        if result.ok:
            print("Signature OK")
            return EXIT_OK

        print(result.message)
        return EXIT_ERROR


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='peercert',
        description='Certificate introspection and signature verification'
    )
    parser.add_argument('--config', '-c', help='Configuration file path')
    parser.add_argument('--log-level', choices=LOG_LEVELS, help='Override the configured log level')

    subparsers = parser.add_subparsers(dest='command', required=True)

    inspect_parser = subparsers.add_parser('inspect', help='Show certificate identity and validity')
    inspect_parser.add_argument('certificate', help='PEM or DER certificate file')
    inspect_parser.add_argument('--json', action='store_true', help='Print as JSON')

    digest_parser = subparsers.add_parser('digest', help='SHA-256 or HMAC-SHA256 of files')
    digest_parser.add_argument('files', nargs='+', help='Files, hashed as one concatenated payload')
    digest_parser.add_argument('--hmac-key', help='Compute HMAC-SHA256 with this key')

    verify_parser = subparsers.add_parser('verify', help='Verify a signature over a message file')
    verify_parser.add_argument('--key', required=True, help='DER-encoded public key file')
    verify_parser.add_argument('--signature', required=True, help='Signature as hex')
    verify_parser.add_argument('--hash', default='sha256', help='Hash algorithm (default: sha256)')
    verify_parser.add_argument('message', help='Signed message file')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line tool."""
    args = build_parser().parse_args(argv)

    app = PeercertApplication(config_path=args.config, log_level=args.log_level)

    try:
        app.initialize()

        if args.command == 'inspect':
            return app.inspect(args.certificate, as_json=args.json)
        if args.command == 'digest':
            return app.digest(args.files, hmac_key=args.hmac_key)
        return app.verify(args.key, args.signature, args.hash, args.message)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())
