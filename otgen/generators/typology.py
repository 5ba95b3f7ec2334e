"""Root+suffix typology construction.

Builds the exhaustive competition list that factorial typology and
learning algorithms consume: every root paired with every suffix, each
morpheme ranging over all of its possible underlying forms.
"""

from typing import Callable

from otgen.core.contracts import ICompetitionSource, ILexicalEntrySource
from otgen.core.lexicon import LexicalEntry, Lexicon
from otgen.core.morphology import MorphWord
from otgen.core.types import MorphemeType
from otgen.core.word import Competition
from otgen.generators.competition import CompetitionGenerator
from otgen.generators.element import ElementGenerator
from otgen.generators.lexical import LexicalEntryGenerator
from otgen.generators.underlying import UnderlyingFormGenerator
from otgen.observ import clear_context, get_logger, set_system, timer
from otgen.services.system import System

logger = get_logger(__name__)


class TypologyBuilder:
    """Generates the competitions for all root+suffix words.

    Dependencies are injected; ``for_system`` wires up the standard
    generator chain for a system.
    """

    def __init__(
        self,
        lexentry_source: ILexicalEntrySource,
        competition_source: ICompetitionSource,
        lexicon_factory: Callable[[], Lexicon] = Lexicon,
        system_name: str = ""
    ):
        self._lexentry_source = lexentry_source
        self._competition_source = competition_source
        self._lexicon_factory = lexicon_factory
        self._system_name = system_name

    @classmethod
    def for_system(cls, system: System) -> "TypologyBuilder":
        elements = ElementGenerator(system.element_factory)
        ufs = UnderlyingFormGenerator(elements)
        return cls(
            LexicalEntryGenerator(ufs),
            CompetitionGenerator(system),
            system_name=system.name
        )

    def competitions(self, root_length: int = 1, suffix_length: int = 1) -> list[Competition]:
        """Competitions for every root of root_length and suffix of suffix_length.

        Roots and suffixes are numbered independently from 1; all entries
        go into one fresh lexicon.
        """
        if self._system_name:
            set_system(self._system_name)

        try:
            with timer(logger, "typology_generation", root_length=root_length, suffix_length=suffix_length):
                roots = self._lexentry_source.lexical_entries(root_length, MorphemeType.ROOT, 0)
                suffixes = self._lexentry_source.lexical_entries(suffix_length, MorphemeType.SUFFIX, 0)

                lexicon = self._lexicon_factory()
                for entry in roots + suffixes:
                    lexicon.add(entry)

                words = self.combine_morphemes(roots, suffixes)
                competitions = self._competition_source.competitions(words, lexicon)

            logger.info(
                "typology_generated",
                roots=len(roots),
                suffixes=len(suffixes),
                competitions=len(competitions)
            )
        finally:
            clear_context()
        return competitions

    def competitions_1r1s(self) -> list[Competition]:
        return self.competitions(1, 1)

    def competitions_2r1s(self) -> list[Competition]:
        return self.competitions(2, 1)

    @staticmethod
    def combine_morphemes(roots: list[LexicalEntry], suffixes: list[LexicalEntry]) -> list[MorphWord]:
        """One morph word per (root, suffix) pair, roots varying slowest."""
        return [
            MorphWord(root.morpheme).add(suffix.morpheme)
            for root in roots
            for suffix in suffixes
        ]
