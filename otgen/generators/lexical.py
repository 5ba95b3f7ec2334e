"""Enumeration of lexical entries for every possible underlying form."""

from typing import Union

from otgen.core.contracts import IUnderlyingFormSource
from otgen.core.lexicon import LexicalEntry
from otgen.core.types import Morpheme, MorphemeType
from otgen.errors import InvalidMorphologicalType


_LABEL_LETTERS = {
    MorphemeType.ROOT: "r",
    MorphemeType.SUFFIX: "s",
    MorphemeType.PREFIX: "p",
}


def _morpheme_type(value: Union[MorphemeType, str]) -> MorphemeType:
    try:
        return MorphemeType(value)
    except ValueError:
        raise InvalidMorphologicalType(value) from None


class LexicalEntryGenerator:
    """Creates one morpheme and lexical entry per underlying form."""

    def __init__(self, uf_source: IUnderlyingFormSource):
        self._uf_source = uf_source

    def lexical_entries(
        self,
        length: int,
        morpheme_type: Union[MorphemeType, str],
        id_base: int
    ) -> list[LexicalEntry]:
        """Entries for all underlying forms of ``length`` elements.

        Morphemes are labelled with the type letter (r, s, p) and a
        sequential id starting at ``id_base + 1``, following the order of
        the underlying form generator. Every element of a form is bound
        to its new morpheme.
        """
        morph_type = _morpheme_type(morpheme_type)
        letter = _LABEL_LETTERS[morph_type]

        entries = []
        forms = self._uf_source.underlying_forms(length)
        for id_number, uf in enumerate(forms, start=id_base + 1):
            morpheme = Morpheme(label=f"{letter}{id_number}", type=morph_type)
            for el in uf:
                el.set_morpheme(morpheme)
            entries.append(LexicalEntry(morpheme, uf))
        return entries
