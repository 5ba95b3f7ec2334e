"""Core type definitions for Optimality-Theoretic candidate generation.

Provides immutable identity models and the enumerations shared by
the data model, GEN and the generators.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class MorphemeType(str, Enum):
    """Morphological category of a morpheme."""
    ROOT = "root"
    SUFFIX = "suffix"
    PREFIX = "prefix"


class ConstraintType(str, Enum):
    """Markedness constraints evaluate outputs; faithfulness compares I/O."""
    MARK = "markedness"
    FAITH = "faithfulness"


class StressPolicy(str, Enum):
    """Culminativity policy: how many main stresses an output may carry."""
    UNBOUNDED = "unbounded"
    AT_MOST_ONE = "at_most_one"
    EXACTLY_ONE = "exactly_one"


class Morpheme(BaseModel):
    """Identity of a morpheme.

    Owned by the lexical entry that created it and referenced by every
    element affiliated with it. Equality and hashing use (label, type).
    """
    model_config = ConfigDict(frozen=True)

    label: str = Field(min_length=1)
    type: MorphemeType

    @property
    def root(self) -> bool:
        return self.type == MorphemeType.ROOT

    @property
    def suffix(self) -> bool:
        return self.type == MorphemeType.SUFFIX

    @property
    def prefix(self) -> bool:
        return self.type == MorphemeType.PREFIX

    def __str__(self) -> str:
        return self.label
