"""
Unit tests for ConfigService and Config models.
"""
import unittest
import tempfile
import os

from peercert.models.config import Config, ConfigValidationError, ConfigValidationResult
from peercert.services.config_service import ConfigService


class TestConfig(unittest.TestCase):
    """Test cases for Config data model."""

    def test_config_default_values(self):
        """Test that Config has appropriate default values."""
        config = Config()

        self.assertEqual(config.expiration_warning_days, 30)
        self.assertEqual(config.log_level, "INFO")
        self.assertEqual(config.log_file_path, "logs/peercert.log")
        self.assertTrue(config.enable_json_logging)

    def test_config_type_validation(self):
        """Test that Config validates types correctly."""
        with self.assertRaises(ValueError) as cm:
            Config(expiration_warning_days=0)
        self.assertIn("expiration_warning_days must be a positive integer", str(cm.exception))

        with self.assertRaises(ValueError):
            Config(expiration_warning_days=True)

        with self.assertRaises(ValueError) as cm:
            Config(enable_json_logging="yes")
        self.assertIn("enable_json_logging must be a boolean", str(cm.exception))

        with self.assertRaises(ValueError) as cm:
            Config(log_level="INVALID")
        self.assertIn("log_level must be one of", str(cm.exception))


class TestConfigValidationResult(unittest.TestCase):
    """Test cases for ConfigValidationResult."""

    def test_errors_and_warnings_are_separated(self):
        result = ConfigValidationResult(
            is_valid=False,
            errors=[
                ConfigValidationError("field1", "Error message"),
                ConfigValidationError("field2", "Warning message", "warning")
            ],
            warnings=[]
        )

        self.assertTrue(result.has_errors())
        self.assertTrue(result.has_warnings())
        self.assertEqual(len(result.errors), 1)
        self.assertEqual(len(result.warnings), 1)

        summary = result.get_error_summary()
        self.assertIn("Configuration Errors:", summary)
        self.assertIn("ERROR: field1 - Error message", summary)
        self.assertIn("WARNING: field2 - Warning message", summary)

    def test_valid_summary(self):
        result = ConfigValidationResult(is_valid=True, errors=[], warnings=[])
        self.assertEqual("Configuration is valid", result.get_error_summary())


class TestConfigService(unittest.TestCase):
    """Test cases for ConfigService."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.config_service = ConfigService()

    def tearDown(self):
        """Clean up test fixtures."""
        import shutil
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _write_config(self, content):
        config_path = os.path.join(self.temp_dir, "test.properties")
        with open(config_path, 'w') as f:
            f.write(content)
        return config_path

    def test_load_config_file_not_found(self):
        with self.assertRaises(FileNotFoundError):
            self.config_service.load_config("nonexistent.properties")

    def test_get_config_before_load(self):
        with self.assertRaises(ValueError) as cm:
            self.config_service.get_config()
        self.assertIn("No configuration loaded", str(cm.exception))

    def test_load_valid_config(self):
        log_path = os.path.join(self.temp_dir, "peercert.log")
        config_path = self._write_config(f"""
[inspection]
expiration_warning_days = 14

[app]
log_level = debug
log_file_path = {log_path}
enable_json_logging = no
""")

        config = self.config_service.load_config(config_path)

        self.assertEqual(config.expiration_warning_days, 14)
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.log_file_path, log_path)
        self.assertFalse(config.enable_json_logging)
        self.assertIs(config, self.config_service.get_config())

    def test_load_config_with_defaults_only(self):
        config_path = self._write_config("[inspection]\n")
        config = self.config_service.load_config(config_path)
        self.assertEqual(config.expiration_warning_days, 30)

    def test_invalid_integer_value(self):
        config_path = self._write_config("[inspection]\nexpiration_warning_days = soon\n")
        with self.assertRaises(ValueError) as cm:
            self.config_service.load_config(config_path)
        self.assertIn("Invalid value for inspection.expiration_warning_days", str(cm.exception))

    def test_empty_log_file_path_is_an_error(self):
        config_path = self._write_config("[app]\nlog_file_path =\n")
        with self.assertRaises(ValueError) as cm:
            self.config_service.load_config(config_path)
        self.assertIn("Configuration validation failed", str(cm.exception))

    def test_validation_warnings(self):
        config = Config(
            expiration_warning_days=400,
            log_file_path=os.path.join(self.temp_dir, "missing", "peercert.log")
        )
        result = self.config_service.validate_config(config)

        self.assertTrue(result.is_valid)
        self.assertFalse(result.has_errors())
        warning_fields = [w.field for w in result.warnings]
        self.assertIn("expiration_warning_days", warning_fields)
        self.assertIn("log_file_path", warning_fields)

    def test_parse_bool(self):
        for value in ("true", "yes", "1", "on", "enabled", " True "):
            self.assertTrue(self.config_service._parse_bool(value))
        for value in ("false", "no", "0", "off", ""):
            self.assertFalse(self.config_service._parse_bool(value))

    def test_create_default_config_file(self):
        config_path = os.path.join(self.temp_dir, "nested", "peercert.properties")
        self.config_service.create_default_config_file(config_path)

        self.assertTrue(os.path.exists(config_path))
        config_data = self.config_service._load_config_file(config_path)
        self.assertEqual(config_data["inspection.expiration_warning_days"], "30")
        self.assertEqual(config_data["app.log_level"], "INFO")


if __name__ == '__main__':
    unittest.main()
