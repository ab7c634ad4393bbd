"""
validate-strings: syntax checker for ``"key" = "value";`` localization files.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    validate-strings en.lproj/Localizable.strings

Library Usage:
    from validate_strings import validate_file

    result = validate_file("en.lproj/Localizable.strings")
    if result.failed:
        print(f"{result.error_count} error(s)")
"""

from .config import ConfigError, ValidatorConfig
from .exceptions import FileUnreadableError, UsageError, ValidateStringsError
from .filesystem import load_source
from .models import Diagnostic, ParseState, Position, ScanState, Severity, ValidationResult
from .reporter import DiagnosticReporter, format_diagnostic
from .scanner import finish, scan
from .validator import validate_file, validate_source, validate_text

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "validate_file",
    "validate_text",
    "validate_source",
    "scan",
    "finish",
    "load_source",
    # Reporting
    "DiagnosticReporter",
    "format_diagnostic",
    # Data models
    "Diagnostic",
    "ParseState",
    "Position",
    "ScanState",
    "Severity",
    "ValidationResult",
    # Configuration
    "ValidatorConfig",
    # Exceptions
    "ConfigError",
    "FileUnreadableError",
    "UsageError",
    "ValidateStringsError",
    # Version
    "__version__",
]
