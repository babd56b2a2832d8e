"""
Label formatting helpers for compliance dropdown options.
"""
import re

_CAPITAL_LETTER = re.compile(r"[A-Z]")
_UPPERCASE_RUN = re.compile(r"([A-Z]{3,})")


def capitalize(text: str) -> str:
    """
    Upper-case the first character of a string, leaving the rest untouched.

    Unlike str.capitalize, the remaining characters are not lower-cased.
    """
    return text[:1].upper() + text[1:]


def format_as_capitalized_string_with_spaces(text: str) -> str:
    """
    Format a camelCase value as a label, e.g. limitedDistribution -> Limited Distribution.

    A space is inserted before every capital letter, so the transform is not
    idempotent: a leading capital yields a leading space, and formatting an
    already formatted label doubles the inner spaces.

    Args:
        text: camelCase value to format

    Returns:
        Formatted label
    """
    return capitalize(_CAPITAL_LETTER.sub(lambda match: f" {match.group(0)}", text))


def format_id_logical_type_label(logical_type: str) -> str:
    """
    Format an identifier logical type as a label, e.g. REVERSED_URN -> Reversed Urn.

    Underscores become spaces and every run of three or more capitals is
    rendered as a single capitalized word. Shorter runs such as ID are kept.

    Args:
        logical_type: Identifier logical type value

    Returns:
        Formatted label
    """
    return _UPPERCASE_RUN.sub(
        lambda match: capitalize(match.group(0).lower()),
        logical_type.replace("_", " "),
    )
