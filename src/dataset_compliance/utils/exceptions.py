"""
Custom exceptions for the dataset compliance metadata package.
"""


class ComplianceMetadataError(Exception):
    """Base exception for all compliance metadata errors."""


class ConfigurationError(ComplianceMetadataError):
    """Raised when the compliance type registry or a derived lookup table is inconsistent.

    These are static configuration defects and surface while the lookup tables
    are being built, not during normal use of the tables.
    """


class ValidationError(ComplianceMetadataError):
    """Raised when a caller supplied value fails validation."""
