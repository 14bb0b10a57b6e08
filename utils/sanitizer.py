"""
Input Sanitization Module

Normalizes user input before it reaches the store: strips control
characters, collapses whitespace and enforces length limits.
"""

import re
from urllib.parse import urlparse

_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=10000):
    """
    Sanitize free text such as arrival notes.

    Newlines are preserved, other control characters are removed.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = _CONTROL_CHARS.sub('', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_name(name, max_length=200):
    """
    Sanitize a short single-line name (ingredient, meal, username).

    Args:
        name: The name to sanitize
        max_length: Maximum allowed length (default 200)

    Returns:
        Sanitized name, or '' if nothing is left after cleaning
    """
    if not name:
        return ''

    if not isinstance(name, str):
        name = str(name)

    # Remove control characters and null bytes
    name = re.sub(r'[\x00-\x1f\x7f-\x9f]', ' ', name)

    # Collapse multiple spaces
    name = re.sub(r'\s+', ' ', name).strip()

    if len(name) > max_length:
        name = name[:max_length].rstrip()

    return name


def name_key(name):
    """Comparison key for duplicate detection: trimmed and lowercased."""
    return sanitize_name(name).lower()


def sanitize_url(url):
    """
    Sanitize a URL by rejecting dangerous schemes.

    Only http and https links are accepted for external menus.

    Args:
        url: The URL to validate (can be None)

    Returns:
        The URL if safe, empty string if unsafe or invalid
    """
    if not url or not isinstance(url, str):
        return ''

    url = url.strip()

    try:
        parsed = urlparse(url)
    except ValueError:
        return ''

    if parsed.scheme.lower() not in ('http', 'https') or not parsed.netloc:
        return ''

    return url
