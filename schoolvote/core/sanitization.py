"""Input sanitization utilities."""
import re
from typing import Optional


# Maximum length constraints for security
MAX_NAME_LENGTH = 200
MAX_REFERENCE_NUMBER_LENGTH = 50
MAX_IMAGE_REFERENCE_LENGTH = 2048

COLOR_PATTERN = re.compile(r'^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


def sanitize_text(text: str, max_length: Optional[int] = None, strip_html: bool = True) -> str:
    """
    Sanitize text input to prevent XSS attacks.

    Strips HTML tags and normalizes whitespace but does not escape entities;
    the frontend escapes on render.

    Args:
        text: The input text to sanitize
        max_length: Optional maximum length to enforce
        strip_html: Whether to strip HTML tags (default True)

    Returns:
        Sanitized text with HTML tags removed and whitespace normalized

    Raises:
        ValueError: If text exceeds max_length or contains dangerous patterns
    """
    if not isinstance(text, str):
        raise ValueError("Input must be a string")

    sanitized = text.strip()

    if max_length and len(sanitized) > max_length:
        raise ValueError(f"Input exceeds maximum length of {max_length} characters")

    if strip_html:
        sanitized = re.sub(r'<[^>]*>', '', sanitized)

    # Malformed or encoded tags left over after stripping
    if '<' in sanitized or '>' in sanitized:
        raise ValueError("Input contains invalid HTML-like patterns")

    sanitized = re.sub(r'\s+', ' ', sanitized)

    return sanitized


def sanitize_name(name: str, field: str = "Name") -> str:
    """
    Sanitize a display name (student, candidate, position or partylist).

    Raises:
        ValueError: If the name is empty after sanitizing or too long
    """
    sanitized = sanitize_text(name, max_length=MAX_NAME_LENGTH)

    if not sanitized:
        raise ValueError(f"{field} cannot be empty")

    return sanitized


def sanitize_reference_number(reference_number: str) -> str:
    """
    Sanitize a student reference number.

    Reference numbers are login credentials, so they are only trimmed,
    never case-folded. Letters, digits, hyphens and slashes are allowed.
    """
    if not isinstance(reference_number, str):
        raise ValueError("Reference number must be a string")

    sanitized = reference_number.strip()

    if not sanitized:
        raise ValueError("Reference number is required")

    if len(sanitized) > MAX_REFERENCE_NUMBER_LENGTH:
        raise ValueError(
            f"Reference number exceeds maximum length of {MAX_REFERENCE_NUMBER_LENGTH} characters"
        )

    if not re.match(r'^[A-Za-z0-9/-]+$', sanitized):
        raise ValueError("Reference number can only contain letters, numbers, hyphens and slashes")

    return sanitized


def validate_color(color: str) -> str:
    """Validate a hex color such as ``#1e40af`` and return it lowercased."""
    if not isinstance(color, str):
        raise ValueError("Color must be a string")

    color = color.strip()
    if not COLOR_PATTERN.match(color):
        raise ValueError("Color must be a hex value like #1e40af")

    return color.lower()


def validate_image_reference(reference: Optional[str]) -> Optional[str]:
    """Image fields are opaque URLs or storage keys; only blank-to-None and length are checked."""
    if reference is None:
        return None

    reference = reference.strip()
    if not reference:
        return None

    if len(reference) > MAX_IMAGE_REFERENCE_LENGTH:
        raise ValueError(
            f"Image reference exceeds maximum length of {MAX_IMAGE_REFERENCE_LENGTH} characters"
        )

    return reference
