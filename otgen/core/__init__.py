"""Core domain models and types.

Barrel export for clean imports across the package.
"""

from .types import (
    MorphemeType,
    ConstraintType,
    StressPolicy,
    Morpheme,
)
from .features import UNSET, Feature, StressFeature, LengthFeature
from .element import Element
from .syllable import Syllable
from .correspondence import Correspondence
from .morphology import MorphWord
from .forms import UnderlyingForm, Input, Output, FrozenOutput
from .lexicon import LexicalEntry, Lexicon
from .constraint import Constraint
from .word import Word, Candidate, Competition

__all__ = [
    "MorphemeType",
    "ConstraintType",
    "StressPolicy",
    "Morpheme",
    "UNSET",
    "Feature",
    "StressFeature",
    "LengthFeature",
    "Element",
    "Syllable",
    "Correspondence",
    "MorphWord",
    "UnderlyingForm",
    "Input",
    "Output",
    "FrozenOutput",
    "LexicalEntry",
    "Lexicon",
    "Constraint",
    "Word",
    "Candidate",
    "Competition",
]
