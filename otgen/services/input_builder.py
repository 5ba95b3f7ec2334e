"""Resolution of morphological words into inputs."""

from otgen.core.forms import Input
from otgen.core.lexicon import Lexicon
from otgen.core.morphology import MorphWord
from otgen.errors import ErrorCode, LexiconError


class InputBuilder:
    """Builds the input for a morph word from a lexicon.

    The input is the concatenation, in morpheme order, of clones of each
    morpheme's underlying form elements; each clone stands in UI
    correspondence with the element it was copied from.
    """

    def input_from_morph_word(self, morph_word: MorphWord, lexicon: Lexicon) -> Input:
        input = Input(morph_word=morph_word)
        for morpheme in morph_word:
            entry = lexicon.entry_for(morpheme)
            if entry is None:
                raise LexiconError(morpheme.label, "has no lexical entry")
            if entry.underlying_form is None:
                raise LexiconError(
                    morpheme.label,
                    "lexical entry has no underlying form",
                    code=ErrorCode.MISSING_UNDERLYING_FORM
                )
            for uf_el in entry.underlying_form:
                in_el = uf_el.clone()
                input.append(in_el)
                input.ui_corr.add(uf_el, in_el)
        return input
