"""Very lightweight heuristic language detection helper."""
import re
from enum import Enum


class Language(str, Enum):
    """Languages the portal publishes in"""
    ENGLISH = "en"
    TAMIL = "ta"


# Latin letters, digits, whitespace and common punctuation only
_ENGLISH_PATTERN = re.compile(r"^[a-zA-Z0-9\s.,!?;:'\"()\-]*$")


def is_english(text: str) -> bool:
    return bool(_ENGLISH_PATTERN.match(text))


def detect_language(text: str) -> Language:
    """
    Classify text as English or Tamil.

    Anything outside the plain-ASCII English character set is treated as
    Tamil, since the portal only ever handles these two languages.

    Args:
        text: Input text to analyze

    Returns:
        Language.ENGLISH or Language.TAMIL
    """
    return Language.ENGLISH if is_english(text) else Language.TAMIL
