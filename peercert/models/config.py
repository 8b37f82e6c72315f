"""
Configuration data models for the certificate inspection utility.
"""
from dataclasses import dataclass
from typing import List


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class Config:
    """Main configuration class containing all application settings."""

    # Inspection settings
    expiration_warning_days: int = 30

    # Application settings
    log_level: str = "INFO"
    log_file_path: str = "logs/peercert.log"
    enable_json_logging: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_types()

    def _validate_types(self):
        """Ensure all configuration values have correct types."""
        if (not isinstance(self.expiration_warning_days, int)
                or isinstance(self.expiration_warning_days, bool)
                or self.expiration_warning_days <= 0):
            raise ValueError("expiration_warning_days must be a positive integer")

        if not isinstance(self.enable_json_logging, bool):
            raise ValueError("enable_json_logging must be a boolean")

        if self.log_level not in LOG_LEVELS:
            raise ValueError("log_level must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL")


@dataclass
class ConfigValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    severity: str = "error"  # error, warning

    def __str__(self):
        return f"{self.severity.upper()}: {self.field} - {self.message}"


@dataclass
class ConfigValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[ConfigValidationError]
    warnings: List[ConfigValidationError]

    def __post_init__(self):
        """Separate errors and warnings."""
        all_issues = self.errors + self.warnings
        self.errors = [e for e in all_issues if e.severity == "error"]
        self.warnings = [e for e in all_issues if e.severity == "warning"]

    def has_errors(self) -> bool:
        """Check if there are any validation errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if there are any validation warnings."""
        return len(self.warnings) > 0

    def get_error_summary(self) -> str:
        """Get a formatted summary of all errors and warnings."""
        lines = []

        if self.errors:
            lines.append("Configuration Errors:")
            for error in self.errors:
                lines.append(f"  - {error}")

        if self.warnings:
            lines.append("Configuration Warnings:")
            for warning in self.warnings:
                lines.append(f"  - {warning}")

        return "\n".join(lines) if lines else "Configuration is valid"
