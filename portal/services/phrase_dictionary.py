"""
Static English/Tamil phrase dictionary for portal UI and content labels.

The tables are frozen at import time and shared read-only by every request.
"""

import re
from types import MappingProxyType
from typing import Mapping, Optional

from portal.services.language import Language


_TO_ENGLISH = {
    "செய்திகள்": "News",
    "நிகழ்வுகள்": "Events",
    "வீடியோக்கள்": "Videos",
    "பத்திரிகை": "Magazine",
    "முகவரி நூல்": "Directory",
    "மதுரை": "Madurai",
    "ஹலோ மதுரை": "Hello Madurai",
    "வரவேற்கிறோம்": "Welcome",
    "முகப்பு": "Home",
    "பாட்காஸ்ட்": "Podcast",
    "செய்தி மேலாண்மை": "News Management",
    "செய்தி சேர்க்க": "Add News",
    "செய்தி திருத்து": "Edit News",
    "முக்கிய பிரிவுகள்": "Main Sections",
    "மதுரையுடன் இணைந்திருங்கள்": "Stay Connected with Madurai",
}

_TO_TAMIL = {
    "News": "செய்திகள்",
    "Events": "நிகழ்வுகள்",
    "Videos": "வீடியோக்கள்",
    "Magazine": "பத்திரிகை",
    "Directory": "முகவரி நூல்",
    "Madurai": "மதுரை",
    "Hello Madurai": "ஹலோ மதுரை",
    "Welcome": "வரவேற்கிறோம்",
    "Home": "முகப்பு",
    "Podcast": "பாட்காஸ்ட்",
    "News Management": "செய்தி மேலாண்மை",
    "Add News": "செய்தி சேர்க்க",
    "Edit News": "செய்தி திருத்து",
    "Main Sections": "முக்கிய பிரிவுகள்",
    "Stay Connected with Madurai": "மதுரையுடன் இணைந்திருங்கள்",
    "Your local news and information hub": "உங்கள் உள்ளூர் செய்தி மற்றும் தகவல் மையம்",
    "All of Madurai's information in one place": "மதுரையின் அனைத்து தகவல்களும் ஒரே இடத்தில்",
    "Get the latest news, events, and local information delivered to you":
        "சமீபத்திய செய்திகள், நிகழ்வுகள் மற்றும் உள்ளூர் தகவல்களை பெறுங்கள்",
    "Get Started Now": "இப்போதே ஆரம்பிக்கவும்",
    "News Articles": "செய்தி கட்டுரைகள்",
    "Business Listings": "வணிக பட்டியல்",
    "Create, edit, and manage news articles": "செய்தி கட்டுரைகளை உருவாக்கவும், திருத்தவும், நிர்வகிக்கவும்",
    "Title": "தலைப்பு",
    "Content": "உள்ளடக்கம்",
    "Description": "விவரம்",
    "Save": "சேமி",
    "Cancel": "ரத்து",
    "Edit": "திருத்து",
    "Delete": "நீக்கு",
    "Add": "சேர்",
    "Create": "உருவாக்கு",
    "Update": "புதுப்பி",
    "Submit": "சமர்ப்பி",
    "Loading": "ஏற்றுகிறது",
    "Success": "வெற்றி",
    "Error": "பிழை",
    "Warning": "எச்சரிக்கை",
    "Information": "தகவல்",
    "Please wait": "தயவுசெய்து காத்திருக்கவும்",
    "Try again": "மீண்டும் முயற்சிக்கவும்",
}

PHRASES: Mapping[Language, Mapping[str, str]] = MappingProxyType({
    Language.ENGLISH: MappingProxyType(_TO_ENGLISH),
    Language.TAMIL: MappingProxyType(_TO_TAMIL),
})

# Case-insensitive matchers, compiled once per phrase
_PATTERNS: Mapping[Language, Mapping[str, "re.Pattern[str]"]] = MappingProxyType({
    language: MappingProxyType({
        phrase: re.compile(re.escape(phrase), re.IGNORECASE) for phrase in table
    })
    for language, table in PHRASES.items()
})


def exact_match(text: str, target_language: Language) -> Optional[str]:
    """Translation of ``text`` when it is itself a known phrase."""
    return PHRASES[target_language].get(text)


def substitute_phrases(text: str, target_language: Language) -> str:
    """
    Replace known phrases inside ``text`` with their translations.

    A phrase is considered when it occurs in the original text verbatim; its
    occurrences are then replaced case-insensitively in the accumulated
    result, in dictionary order.
    """
    result = text
    table = PHRASES[target_language]
    for phrase, pattern in _PATTERNS[target_language].items():
        if phrase in text:
            translation = table[phrase]
            result = pattern.sub(lambda _m: translation, result)
    return result


def lookup(text: str, target_language: Language) -> Optional[str]:
    """
    Dictionary translation of ``text``, or None when no phrase applies.

    Exact matches win; otherwise every contained phrase is substituted.
    """
    exact = exact_match(text, target_language)
    if exact is not None:
        return exact

    substituted = substitute_phrases(text, target_language)
    if substituted != text:
        return substituted
    return None
