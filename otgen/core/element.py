"""Generic element: a fixed, ordered set of features plus a morpheme.

Concrete element kinds declare their feature kinds in ``FEATURE_KINDS``;
the declared order is the order of ``each_feature()`` and of product
construction in the element generator.
"""

from typing import ClassVar, Iterator, Optional

from otgen.core.features import Feature
from otgen.core.types import Morpheme
from otgen.errors import InvalidFeatureType


class Element:
    """Base implementation of the IElement capability interface."""

    FEATURE_KINDS: ClassVar[tuple[type[Feature], ...]] = ()

    def __init__(self):
        self._features: dict[str, Feature] = {
            kind.TYPE: kind() for kind in self.FEATURE_KINDS
        }
        self.morpheme: Optional[Morpheme] = None

    def each_feature(self) -> Iterator[Feature]:
        yield from self._features.values()

    def get_feature(self, feature_type: str) -> Feature:
        try:
            return self._features[feature_type]
        except KeyError:
            raise InvalidFeatureType(feature_type, type(self).__name__) from None

    def set_feature(self, feature_type: str, value: object) -> Feature:
        """Set a feature by type. UNSET is always accepted as a reset."""
        return self.get_feature(feature_type).set(value)

    def set_morpheme(self, morpheme: Optional[Morpheme]) -> "Element":
        self.morpheme = morpheme
        return self

    def freeze(self) -> "Element":
        """Make every feature read-only. Clones of a frozen element are mutable."""
        for feature in self._features.values():
            feature.freeze()
        return self

    @property
    def frozen(self) -> bool:
        return all(f.frozen for f in self._features.values())

    @property
    def fully_specified(self) -> bool:
        return not any(f.unset for f in self._features.values())

    def clone(self) -> "Element":
        """Independent copy: features copied, morpheme reference shared."""
        dup = type(self)()
        dup._features = {t: f.copy() for t, f in self._features.items()}
        dup.morpheme = self.morpheme
        return dup

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return (
            type(self) is type(other)
            and list(self.each_feature()) == list(other.each_feature())
            and self.morpheme == other.morpheme
        )

    __hash__ = None
