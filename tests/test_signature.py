"""
Tests for public key import and signature verification.
"""
import os
import unittest

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from peercert.models.verification import VerificationFailure, VerificationResult
from peercert.security.digest import from_hex
from peercert.security.signature import import_public_key, verify_signature

from cert_helpers import RSA_PUBLIC_KEY_HEX, RSA_SIGNATURE_HEX


def _der_public_key(private_key):
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo
    )


class TestImportPublicKey(unittest.TestCase):
    """Test cases for import_public_key."""

    def test_import_valid_rsa_key(self):
        self.assertIsNotNone(import_public_key(from_hex(RSA_PUBLIC_KEY_HEX)))

    def test_import_bad_key(self):
        self.assertIsNone(import_public_key(from_hex("badkey")))
        self.assertIsNone(import_public_key(b"badkey"))

    def test_import_malformed_inputs_never_raise(self):
        der = from_hex(RSA_PUBLIC_KEY_HEX)
        for bad in (b"", der[:-10], der[10:], os.urandom(64), None, "not bytes", 10**11):
            self.assertIsNone(import_public_key(bad))

    def test_import_ec_key(self):
        der = _der_public_key(ec.generate_private_key(ec.SECP256R1()))
        self.assertIsInstance(import_public_key(der), ec.EllipticCurvePublicKey)


class TestVerifySignature(unittest.TestCase):
    """Test cases for verify_signature."""

    def setUp(self):
        self.public_key = import_public_key(from_hex(RSA_PUBLIC_KEY_HEX))
        self.signature = from_hex(RSA_SIGNATURE_HEX)

    def test_valid_signature(self):
        result = verify_signature("sha256", self.public_key, self.signature, b"hello")
        self.assertTrue(result.ok)
        self.assertEqual("", result.message)
        self.assertIsNone(result.failure)
        self.assertEqual(VerificationResult.success(), result)

    def test_unsupported_algorithm(self):
        result = verify_signature("unknown", self.public_key, self.signature, b"hello")
        self.assertFalse(result.ok)
        self.assertEqual("unknown is not supported.", result.message)
        self.assertEqual(VerificationFailure.UNSUPPORTED_ALGORITHM, result.failure)

    def test_missing_key(self):
        result = verify_signature("sha256", None, self.signature, b"hello")
        self.assertFalse(result.ok)
        self.assertEqual("Failed to initialize digest verify.", result.message)
        self.assertEqual(VerificationFailure.INITIALIZATION_FAILED, result.failure)

    def test_tampered_message(self):
        result = verify_signature("sha256", self.public_key, self.signature, b"baddata")
        self.assertFalse(result.ok)
        self.assertEqual("Failed to verify digest. Error code: 0", result.message)
        self.assertEqual(0, result.error_code)
        self.assertEqual(VerificationFailure.VERIFICATION_FAILED, result.failure)

    def test_truncated_signature(self):
        result = verify_signature("sha256", self.public_key, from_hex("000000"), b"hello")
        self.assertFalse(result.ok)
        self.assertEqual("Failed to verify digest. Error code: 0", result.message)

    def test_malformed_inputs_never_raise(self):
        cases = [
            ("sha256", self.public_key, b"", b"hello"),
            ("sha256", self.public_key, os.urandom(256), b"hello"),
            ("sha256", self.public_key, None, b"hello"),
            ("sha256", self.public_key, self.signature, None),
            ("sha256", self.public_key, 10**11, b"hello"),
            ("sha256", self.public_key, self.signature, 10**11),
            ("sha256", "not a key", self.signature, b"hello"),
            ("SHA256", self.public_key, self.signature, b"hello"),
            (None, self.public_key, self.signature, b"hello"),
            ("", None, None, None),
        ]
        for hash_name, key, signature, text in cases:
            result = verify_signature(hash_name, key, signature, text)
            self.assertIsInstance(result, VerificationResult)
            self.assertFalse(result.ok)
            self.assertNotEqual("", result.message)

    def test_ec_signature(self):
        private_key = ec.generate_private_key(ec.SECP256R1())
        public_key = import_public_key(_der_public_key(private_key))
        signature = private_key.sign(b"hello", ec.ECDSA(hashes.SHA256()))

        self.assertTrue(verify_signature("sha256", public_key, signature, b"hello").ok)
        self.assertEqual(
            "Failed to verify digest. Error code: 0",
            verify_signature("sha256", public_key, signature, b"baddata").message
        )
        self.assertFalse(verify_signature("sha256", public_key, b"\x00" * 8, b"hello").ok)

    def test_key_without_digest_support(self):
        public_key = import_public_key(_der_public_key(ed25519.Ed25519PrivateKey.generate()))
        self.assertIsNotNone(public_key)

        result = verify_signature("sha256", public_key, b"\x00" * 64, b"hello")
        self.assertEqual("Failed to initialize digest verify.", result.message)

    def test_result_is_falsy_on_failure(self):
        self.assertFalse(verify_signature("sha256", None, self.signature, b"hello"))
        self.assertTrue(verify_signature("sha256", self.public_key, self.signature, b"hello"))


if __name__ == '__main__':
    unittest.main()
