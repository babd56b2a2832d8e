"""
Validation utilities for compliance metadata values.
"""
from typing import Any

from dataset_compliance.config.compliance import (
    custom_id_logical_types,
    generic_logical_types,
    id_logical_types,
)


def validate_logical_type(logical_type: str) -> bool:
    """
    Validate that a logical type is a known id, custom id or generic logical type.

    Args:
        logical_type: Logical type to validate

    Returns:
        True if valid, False otherwise
    """
    return (
        logical_type in id_logical_types
        or logical_type in custom_id_logical_types
        or logical_type in generic_logical_types
    )


def validate_suggestion_confidence(confidence: Any) -> bool:
    """
    Validate that a suggestion confidence is a number between 0 and 1.

    Args:
        confidence: Confidence score to validate

    Returns:
        True if valid, False otherwise
    """
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
        return False
    return 0 <= confidence <= 1
