"""Syllable element with length and stress features."""

from otgen.core.element import Element
from otgen.core.features import LengthFeature, StressFeature


class Syllable(Element):
    """A syllable: length then stress, plus an affiliated morpheme.

    Renders as two characters, stress first (``S`` main, ``s`` unstressed)
    then length (``:`` long, ``.`` short); ``?`` marks an unset feature.
    An unstressed long syllable is ``s:``.
    """

    FEATURE_KINDS = (LengthFeature, StressFeature)

    @property
    def _stress(self) -> StressFeature:
        return self._features[StressFeature.TYPE]

    @property
    def _length(self) -> LengthFeature:
        return self._features[LengthFeature.TYPE]

    @property
    def main_stress(self) -> bool:
        return self._stress.main_stress

    @property
    def unstressed(self) -> bool:
        return self._stress.unstressed

    @property
    def long(self) -> bool:
        return self._length.long

    @property
    def short(self) -> bool:
        return self._length.short

    @property
    def stress_unset(self) -> bool:
        return self._stress.unset

    @property
    def length_unset(self) -> bool:
        return self._length.unset

    def set_main_stress(self) -> "Syllable":
        self._stress.set_main_stress()
        return self

    def set_unstressed(self) -> "Syllable":
        self._stress.set_unstressed()
        return self

    def set_long(self) -> "Syllable":
        self._length.set_long()
        return self

    def set_short(self) -> "Syllable":
        self._length.set_short()
        return self

    def __str__(self) -> str:
        if self.main_stress:
            stress = "S"
        elif self.unstressed:
            stress = "s"
        else:
            stress = "?"
        if self.short:
            length = "."
        elif self.long:
            length = ":"
        else:
            length = "?"
        return f"{stress}{length}"

    def __repr__(self) -> str:
        return f"<Syllable {self} {self.morpheme or '-'}>"

    def to_gv(self) -> str:
        """Rendering for GraphViz lattice diagrams (paka style).

        Onset consonant marks the morpheme type (p root, k suffix,
        t prefix), the vowel is accented when stressed, and short
        length is left unmarked.
        """
        onset = "?"
        if self.morpheme is not None:
            onset = {"root": "p", "suffix": "k", "prefix": "t"}[self.morpheme.type.value]
        if self.main_stress:
            vowel = "á"
        elif self.unstressed:
            vowel = "a"
        else:
            vowel = "?"
        if self.short:
            length = ""
        elif self.long:
            length = ":"
        else:
            length = "?"
        return f"{onset}{vowel}{length}"
