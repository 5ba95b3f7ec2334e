"""Typed, validated feature value slots.

A feature has a type, a value drawn from a declared domain, and an
explicit unset state. Domains are enumerated in a fixed order, which
the element generator relies on.
"""

from typing import ClassVar, Iterator

from otgen.errors import FrozenElementError, InvalidFeatureValue


class _Unset:
    """Sentinel for a feature with no value assigned."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


UNSET = _Unset()


class Feature:
    """Base class for feature kinds.

    Subclasses declare ``TYPE`` and the ordered ``DOMAIN``.
    """

    TYPE: ClassVar[str]
    DOMAIN: ClassVar[tuple[str, ...]]

    def __init__(self):
        self._value: object = UNSET
        self._frozen = False

    @property
    def type(self) -> str:
        return self.TYPE

    @property
    def value(self) -> object:
        return self._value

    @property
    def unset(self) -> bool:
        return self._value is UNSET

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "Feature":
        """Reject every later assignment. Copies start out unfrozen."""
        self._frozen = True
        return self

    @classmethod
    def valid_value(cls, value: object) -> bool:
        """True if value belongs to the declared domain (UNSET excluded)."""
        return value in cls.DOMAIN

    @classmethod
    def each_value(cls) -> Iterator[str]:
        """Yield domain values in declared order."""
        yield from cls.DOMAIN

    def set(self, value: object) -> "Feature":
        """Assign a domain value or UNSET; returns self for chaining."""
        if self._frozen:
            raise FrozenElementError(self.TYPE)
        if value is not UNSET and not self.valid_value(value):
            raise InvalidFeatureValue(self.TYPE, value)
        self._value = value
        return self

    def is_value(self, value: object) -> bool:
        return self._value == value

    def copy(self) -> "Feature":
        dup = type(self)()
        dup._value = self._value
        return dup

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Feature):
            return NotImplemented
        return self.TYPE == other.TYPE and self._value == other._value

    __hash__ = None

    def __str__(self) -> str:
        shown = "unset" if self.unset else self._value
        return f"{self.TYPE}={shown}"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class StressFeature(Feature):
    """Vowel stress: unstressed or main stress."""

    TYPE = "stress"
    UNSTRESSED = "unstressed"
    MAIN_STRESS = "main_stress"
    DOMAIN = (UNSTRESSED, MAIN_STRESS)

    @property
    def main_stress(self) -> bool:
        return self._value == self.MAIN_STRESS

    @property
    def unstressed(self) -> bool:
        return self._value == self.UNSTRESSED

    def set_main_stress(self) -> "StressFeature":
        return self.set(self.MAIN_STRESS)

    def set_unstressed(self) -> "StressFeature":
        return self.set(self.UNSTRESSED)


class LengthFeature(Feature):
    """Vowel length: short or long."""

    TYPE = "length"
    SHORT = "short"
    LONG = "long"
    DOMAIN = (SHORT, LONG)

    @property
    def long(self) -> bool:
        return self._value == self.LONG

    @property
    def short(self) -> bool:
        return self._value == self.SHORT

    def set_long(self) -> "LengthFeature":
        return self.set(self.LONG)

    def set_short(self) -> "LengthFeature":
        return self.set(self.SHORT)
