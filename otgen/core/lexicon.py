"""Lexical entries and the lexicon."""

from dataclasses import dataclass
from typing import Iterator, Optional

from otgen.core.forms import UnderlyingForm
from otgen.core.types import Morpheme, MorphemeType


@dataclass
class LexicalEntry:
    """A morpheme paired with its underlying form.

    Every element of the form is expected to be affiliated with the
    entry's morpheme.
    """

    morpheme: Morpheme
    underlying_form: UnderlyingForm

    @property
    def label(self) -> str:
        return self.morpheme.label

    @property
    def type(self) -> MorphemeType:
        return self.morpheme.type

    @property
    def consistent(self) -> bool:
        return all(el.morpheme == self.morpheme for el in self.underlying_form)

    def clone(self) -> "LexicalEntry":
        return LexicalEntry(self.morpheme, self.underlying_form.clone())

    def __str__(self) -> str:
        return f"{self.morpheme.label} {self.underlying_form}"


class Lexicon:
    """Collection of lexical entries keyed by morpheme."""

    def __init__(self, entries: Optional[list[LexicalEntry]] = None):
        self._entries: dict[Morpheme, LexicalEntry] = {}
        for entry in entries or []:
            self.add(entry)

    def add(self, entry: LexicalEntry) -> "Lexicon":
        """Register an entry; a later entry for the same morpheme replaces it."""
        self._entries[entry.morpheme] = entry
        return self

    def entry_for(self, morpheme: Morpheme) -> Optional[LexicalEntry]:
        return self._entries.get(morpheme)

    def underlying_form_for(self, morpheme: Morpheme) -> Optional[UnderlyingForm]:
        entry = self.entry_for(morpheme)
        return entry.underlying_form if entry is not None else None

    def _of_type(self, morph_type: MorphemeType) -> list[LexicalEntry]:
        return [e for e in self._entries.values() if e.type == morph_type]

    def roots(self) -> list[LexicalEntry]:
        return self._of_type(MorphemeType.ROOT)

    def suffixes(self) -> list[LexicalEntry]:
        return self._of_type(MorphemeType.SUFFIX)

    def prefixes(self) -> list[LexicalEntry]:
        return self._of_type(MorphemeType.PREFIX)

    def clone(self) -> "Lexicon":
        return Lexicon([e.clone() for e in self._entries.values()])

    def __contains__(self, morpheme: object) -> bool:
        return morpheme in self._entries

    def __iter__(self) -> Iterator[LexicalEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        lines = []
        for group in (self.prefixes(), self.roots(), self.suffixes()):
            if group:
                lines.append("  ".join(str(e) for e in group))
        return "".join(f"{line}\n" for line in lines)
