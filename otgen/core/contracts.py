"""Component contracts and interfaces.

Defines the capability protocols GEN and the generators are written
against, so that they work across differently shaped elements and
systems.
"""

from typing import TYPE_CHECKING, Iterator, Optional, Protocol, Sequence

from .types import Morpheme

if TYPE_CHECKING:
    from .constraint import Constraint
    from .features import Feature
    from .forms import Input, UnderlyingForm
    from .lexicon import LexicalEntry, Lexicon
    from .morphology import MorphWord
    from .word import Competition


class IElement(Protocol):
    """Capability interface of a correspondence element (e.g. a syllable).

    An element has a fixed, ordered list of features and a morpheme
    affiliation.
    """

    morpheme: Optional[Morpheme]

    def each_feature(self) -> Iterator["Feature"]:
        """Yield the element's features in declared order."""
        ...

    def get_feature(self, feature_type: str) -> "Feature":
        """Return the feature of the given type."""
        ...

    def set_feature(self, feature_type: str, value: object) -> "Feature":
        """Set the feature of the given type to value."""
        ...

    def clone(self) -> "IElement":
        """Copy features deeply, share the morpheme reference."""
        ...

    @property
    def main_stress(self) -> bool:
        """Whether this element bears main stress."""
        ...


class IEvaluable(Protocol):
    """What a constraint evaluator may inspect: a word or a candidate."""

    @property
    def input(self) -> "Input":
        ...

    @property
    def output(self) -> Sequence[IElement]:
        ...

    def io_out_corr(self, in_el: IElement) -> Optional[IElement]:
        """Output correspondent of an input element."""
        ...


class ISystem(Protocol):
    """Contract for a linguistic system as consumed by the generators."""

    @property
    def constraints(self) -> tuple["Constraint", ...]:
        ...

    def gen(self, input: "Input") -> "Competition":
        """Map an input to its competition."""
        ...

    def input_from_morph_word(self, morph_word: "MorphWord", lexicon: "Lexicon") -> "Input":
        """Resolve a morphological word to its input."""
        ...


class IElementSource(Protocol):
    """Contract for anything that enumerates possible elements."""

    def elements(self) -> list[IElement]:
        ...


class IUnderlyingFormSource(Protocol):
    """Contract for anything that enumerates underlying forms by length."""

    def underlying_forms(self, length: int) -> list["UnderlyingForm"]:
        ...


class ILexicalEntrySource(Protocol):
    """Contract for anything that enumerates lexical entries."""

    def lexical_entries(self, length: int, morpheme_type: object, id_base: int) -> list["LexicalEntry"]:
        ...


class ICompetitionSource(Protocol):
    """Contract for anything that maps morphological words to competitions."""

    def competitions(self, morph_words: Sequence["MorphWord"], lexicon: "Lexicon") -> list["Competition"]:
        ...
