"""Ordered element containers: underlying forms, inputs and outputs.

Each is a list of elements with elementwise sequence equality. They are
appended to while being built and treated as immutable afterwards.
"""

from typing import Optional

from otgen.core.contracts import IElement
from otgen.core.correspondence import Correspondence
from otgen.core.morphology import MorphWord


class UnderlyingForm(list):
    """Lexically stored form of a morpheme."""

    def clone(self) -> "UnderlyingForm":
        """Copy with every element cloned."""
        return UnderlyingForm(el.clone() for el in self)

    def extended(self, element: IElement) -> "UnderlyingForm":
        """New form: a clone of this one with a clone of element appended."""
        form = self.clone()
        form.append(element.clone())
        return form

    @property
    def fully_specified(self) -> bool:
        return all(el.fully_specified for el in self)

    def __str__(self) -> str:
        return "".join(str(el) for el in self)


class Input(list):
    """Input of a word: the concatenated underlying forms of its morphemes.

    ``ui_corr`` relates each underlying-form element (left) to the input
    element copied from it (right).
    """

    def __init__(self, elements=(), morph_word: Optional[MorphWord] = None):
        super().__init__(elements)
        self.morph_word = morph_word if morph_word is not None else MorphWord()
        self.ui_corr = Correspondence()

    def under_corr(self, in_el: IElement) -> Optional[IElement]:
        return self.ui_corr.left_of(in_el)

    def __str__(self) -> str:
        """Element renderings with ``-`` at each morpheme boundary."""
        parts: list[str] = []
        previous = None
        for i, el in enumerate(self):
            if i > 0 and el.morpheme != previous:
                parts.append("-")
            parts.append(str(el))
            previous = el.morpheme
        return "".join(parts)

    def to_gv(self) -> str:
        return "".join(el.to_gv() for el in self)


class _OutputView:
    """Read-only queries shared by growing and finished outputs."""

    @property
    def main_stress(self) -> bool:
        return any(el.main_stress for el in self)

    @property
    def stress_count(self) -> int:
        return sum(1 for el in self if el.main_stress)

    def __str__(self) -> str:
        return "".join(str(el) for el in self)


class Output(_OutputView, list):
    """Output of a word under construction, grown one element per GEN step."""

    def __init__(self, elements=(), morph_word: Optional[MorphWord] = None):
        super().__init__(elements)
        self.morph_word = morph_word

    def shallow_copy(self) -> "Output":
        """Copy of the sequence; elements and morph word are shared."""
        return Output(self, morph_word=self.morph_word)

    def freeze(self) -> "FrozenOutput":
        """Finished output: the same elements, frozen, in an immutable sequence."""
        return FrozenOutput((el.freeze() for el in self), morph_word=self.morph_word)


class FrozenOutput(_OutputView, tuple):
    """Output of a finished candidate.

    Hashable by its rendering; equal to another frozen output with
    structurally equal elements.
    """

    def __new__(cls, elements=(), morph_word: Optional[MorphWord] = None):
        output = super().__new__(cls, elements)
        output.morph_word = morph_word
        return output

    def __hash__(self) -> int:
        return hash(str(self))
