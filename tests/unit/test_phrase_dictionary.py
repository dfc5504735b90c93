import pytest

from portal.services import phrase_dictionary
from portal.services.language import Language


@pytest.mark.parametrize("phrase,translation", [
    ("News", "செய்திகள்"),
    ("Hello Madurai", "ஹலோ மதுரை"),
    ("Please wait", "தயவுசெய்து காத்திருக்கவும்"),
])
def test_exact_phrase_to_tamil(phrase, translation):
    assert phrase_dictionary.lookup(phrase, Language.TAMIL) == translation


def test_exact_phrase_to_english():
    assert phrase_dictionary.lookup("செய்திகள்", Language.ENGLISH) == "News"


def test_every_phrase_resolves_to_its_entry():
    for language, table in phrase_dictionary.PHRASES.items():
        for phrase, translation in table.items():
            assert phrase_dictionary.lookup(phrase, language) == translation


def test_substitutes_contained_phrases():
    result = phrase_dictionary.lookup("Welcome to Madurai", Language.TAMIL)
    assert result == "வரவேற்கிறோம் to மதுரை"


def test_substitution_replaces_every_case_variant():
    # "Madurai" occurs verbatim, so the lower-case copy is replaced too
    result = phrase_dictionary.substitute_phrases("Madurai and madurai", Language.TAMIL)
    assert result == "மதுரை and மதுரை"


def test_lowercase_only_text_is_not_substituted():
    assert phrase_dictionary.lookup("news from madurai", Language.TAMIL) is None


def test_unknown_text_returns_none():
    assert phrase_dictionary.lookup("Quantum physics", Language.TAMIL) is None
    assert phrase_dictionary.lookup("Hello World", Language.TAMIL) is None


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        phrase_dictionary.PHRASES[Language.TAMIL]["News"] = "x"
