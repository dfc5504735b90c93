from portal.services.language import Language, detect_language, is_english


def test_plain_english_is_detected():
    assert detect_language("Hello, World! (2024)") == Language.ENGLISH


def test_tamil_script_is_detected():
    assert detect_language("மதுரை செய்திகள்") == Language.TAMIL


def test_non_ascii_punctuation_counts_as_tamil():
    # Only the listed ASCII punctuation is allowed in English text
    assert not is_english("Price: 100₹")
    assert detect_language("Price: 100₹") == Language.TAMIL


def test_empty_string_matches_english_pattern():
    assert is_english("")
