"""Shared fixtures: morphemes and hand-built inputs."""

import pytest

from otgen.core import Input, Morpheme, MorphemeType, MorphWord, Syllable


def _make_syllable(rendering: str, morpheme=None) -> Syllable:
    """Syllable from its two-character rendering, e.g. ``"S:"``."""
    stress, length = rendering
    syl = Syllable()
    if stress == "S":
        syl.set_main_stress()
    elif stress == "s":
        syl.set_unstressed()
    if length == ":":
        syl.set_long()
    elif length == ".":
        syl.set_short()
    return syl.set_morpheme(morpheme)


@pytest.fixture
def syl():
    """Factory: syllable from its rendering and optional morpheme."""
    return _make_syllable


@pytest.fixture
def root():
    return Morpheme(label="r1", type=MorphemeType.ROOT)


@pytest.fixture
def suffix():
    return Morpheme(label="s1", type=MorphemeType.SUFFIX)


@pytest.fixture
def make_input(root, suffix):
    """Build an input from one rendering per morpheme (root, then suffix)."""
    def _make(root_form: str, suffix_form: str = "") -> Input:
        morph_word = MorphWord(root)
        if suffix_form:
            morph_word.add(suffix)
        input = Input(morph_word=morph_word)
        for morpheme, form in ((root, root_form), (suffix, suffix_form)):
            for i in range(0, len(form), 2):
                input.append(_make_syllable(form[i:i + 2], morpheme))
        return input
    return _make
