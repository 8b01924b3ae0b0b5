from spz_engine.candidates import build_candidates
from spz_engine.characters import classify_character
from spz_engine.models import InputCharacter, PlateCandidate


def make_candidate(char, alternatives=None, selected=None, is_padding=False, is_skipped_vowel=False, word_group=0):
    upper = char.upper()
    return PlateCandidate(
        input=InputCharacter(
            original=char,
            uppercase=upper,
            uppercase_without_diacritics=upper,
            transformed=upper,
            is_vowel=upper in "AEIOUY",
        ),
        alternatives=list(alternatives or [upper]),
        selected=selected or upper,
        is_padding=is_padding,
        is_skipped_vowel=is_skipped_vowel,
        word_group=word_group,
    )


def candidates_for(text):
    # no strip(): leading/trailing separators must reach the builder
    return build_candidates([classify_character(ch) for ch in text])


def selected(candidates):
    return "".join(c.selected for c in candidates)


def visible(candidates):
    return "".join(c.selected for c in candidates if not c.is_skipped_vowel)
