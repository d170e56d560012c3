"""
Utility functions for the JSON Schema to TypeScript generator.
"""

import re
import unicodedata

# A leading character that cannot start an identifier, or any character that cannot appear in one
_UNSAFE_PATTERN = re.compile(r"(^\s*[^a-zA-Z_$])|([^a-zA-Z_$\d])")
_LEADING_UNDERSCORE_PATTERN = re.compile(r"^_[a-z]")
_UNDERSCORE_PATTERN = re.compile(r"_[a-z]")
_DIGITS_THEN_LETTER_PATTERN = re.compile(r"[\d$]+[a-zA-Z]")
_WORD_BREAK_PATTERN = re.compile(r"\s+[a-zA-Z]")
_WHITESPACE_PATTERN = re.compile(r"\s")


def _deburr(text: str) -> str:
    """Replace accented Latin letters with their plain counterparts ("é" -> "e")."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def _upper_first(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def to_safe_string(text: str) -> str:
    """Convert an arbitrary name into a safe PascalCase TypeScript identifier.

    Examples:
        "Widget" -> "Widget"
        "my_type" -> "MyType"
        "foo bar" -> "FooBar"
        "_private" -> "_Private"
        "1st place" -> "StPlace"
        "café" -> "Cafe"

    Args:
        text: The name to convert

    Returns:
        An identifier usable as a declaration name
    """
    if not text:
        return ""
    text = _UNSAFE_PATTERN.sub(" ", _deburr(text))
    text = _LEADING_UNDERSCORE_PATTERN.sub(lambda m: m.group(0).upper(), text)
    text = _UNDERSCORE_PATTERN.sub(lambda m: m.group(0)[1:].upper(), text)
    text = _DIGITS_THEN_LETTER_PATTERN.sub(lambda m: m.group(0).upper(), text)
    text = _WORD_BREAK_PATTERN.sub(lambda m: m.group(0).upper().strip(), text)
    text = _WHITESPACE_PATTERN.sub("", text)
    return _upper_first(text)
