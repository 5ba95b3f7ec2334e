"""Mapping of morphological words to competitions."""

from typing import Sequence

from otgen.core.contracts import ISystem
from otgen.core.lexicon import Lexicon
from otgen.core.morphology import MorphWord
from otgen.core.word import Competition


class CompetitionGenerator:
    """One competition per morph word, via the system's GEN.

    The lexicon must hold a fully specified entry for every morpheme the
    morph words reference; that is the caller's responsibility.
    """

    def __init__(self, system: ISystem):
        self._system = system

    def competitions(self, morph_words: Sequence[MorphWord], lexicon: Lexicon) -> list[Competition]:
        inputs = [self._system.input_from_morph_word(mw, lexicon) for mw in morph_words]
        return [self._system.gen(i) for i in inputs]
