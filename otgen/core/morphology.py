"""Morphological structure of words."""

from typing import Iterator, Optional

from otgen.core.types import Morpheme, MorphemeType
from otgen.errors import MorphologyError


class MorphWord:
    """Ordered morphemes of a word, built from the inside out.

    The first morpheme added must be the root, and there is only one.
    Each prefix goes in front of everything added so far; each suffix
    goes after it.
    """

    def __init__(self, root: Optional[Morpheme] = None):
        self._morphemes: list[Morpheme] = []
        self._root_added = False
        if root is not None:
            if not root.root:
                raise MorphologyError(
                    "the first morpheme added must be a root",
                    morpheme=root.label
                )
            self.add(root)

    def add(self, morpheme: Morpheme) -> "MorphWord":
        if morpheme.root and self._root_added:
            raise MorphologyError("cannot add a second root", morpheme=morpheme.label)
        if not morpheme.root and not self._root_added:
            raise MorphologyError(
                "cannot add an affix to a word without a root",
                morpheme=morpheme.label
            )

        if morpheme.type == MorphemeType.PREFIX:
            self._morphemes.insert(0, morpheme)
        else:
            self._morphemes.append(morpheme)
        if morpheme.root:
            self._root_added = True
        return self

    @property
    def morph_count(self) -> int:
        return len(self._morphemes)

    def copy(self) -> "MorphWord":
        dup = MorphWord()
        dup._morphemes = list(self._morphemes)
        dup._root_added = self._root_added
        return dup

    def __iter__(self) -> Iterator[Morpheme]:
        return iter(self._morphemes)

    def __len__(self) -> int:
        return len(self._morphemes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MorphWord):
            return NotImplemented
        return self._morphemes == other._morphemes

    __hash__ = None

    def __str__(self) -> str:
        return "-".join(m.label for m in self._morphemes)

    def __repr__(self) -> str:
        return f"<MorphWord {self}>"
