"""Linguistic systems: a constraint list, a stress policy and GEN.

Variants share one GEN algorithm and differ only in their policy and in
the constraints appended to the base list.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from otgen.config import get_settings
from otgen.core.constraint import Constraint
from otgen.core.element import Element
from otgen.core.forms import Input
from otgen.core.lexicon import Lexicon
from otgen.core.morphology import MorphWord
from otgen.core.syllable import Syllable
from otgen.core.types import StressPolicy
from otgen.core.word import Competition
from otgen.errors import UnknownSystemError
from otgen.services import constraints as con
from otgen.services.gen import gen
from otgen.services.input_builder import InputBuilder


@dataclass(frozen=True)
class System:
    """An OT system exposing ``gen(input) -> Competition``."""

    name: str
    constraints: tuple[Constraint, ...]
    policy: StressPolicy
    element_factory: Callable[[], Element] = field(default=Syllable, compare=False, repr=False)
    input_builder: InputBuilder = field(default_factory=InputBuilder, compare=False, repr=False)

    def gen(self, input: Input) -> Competition:
        return gen(input, self.constraints, self.policy)

    def input_from_morph_word(self, morph_word: MorphWord, lexicon: Lexicon) -> Input:
        return self.input_builder.input_from_morph_word(morph_word, lexicon)

    def extend(
        self,
        name: str,
        *extra: Constraint,
        policy: Optional[StressPolicy] = None
    ) -> "System":
        """New system with extra constraints appended (base ++ extensions)."""
        return System(
            name=name,
            constraints=self.constraints + extra,
            policy=policy or self.policy,
            element_factory=self.element_factory,
            input_builder=self.input_builder,
        )


class SystemFactory:
    """Factory for the known system variants."""

    @staticmethod
    def sl() -> System:
        """Stress-Length: base constraints, exactly one main stress."""
        return System("sl", con.BASE_CONSTRAINTS, StressPolicy.EXACTLY_ONE)

    @staticmethod
    def pas() -> System:
        """Pitch-Accent Stress: adds Culm, stressless outputs allowed."""
        return SystemFactory.sl().extend("pas", con.CULM, policy=StressPolicy.AT_MOST_ONE)

    @staticmethod
    def multi_stress() -> System:
        """Adds Clash; any number of stresses."""
        return SystemFactory.pas().extend("multi_stress", con.CLASH, policy=StressPolicy.UNBOUNDED)

    @staticmethod
    def clash_lapse() -> System:
        return SystemFactory.multi_stress().extend("clash_lapse", con.LAPSE)

    @staticmethod
    def names() -> list[str]:
        return list(_REGISTRY)

    @staticmethod
    def by_name(name: str) -> System:
        try:
            builder = _REGISTRY[name.lower()]
        except KeyError:
            raise UnknownSystemError(name, SystemFactory.names()) from None
        return builder()

    @staticmethod
    def default() -> System:
        """System named by the ``default_system`` setting."""
        return SystemFactory.by_name(get_settings().default_system)


_REGISTRY: dict[str, Callable[[], System]] = {
    "sl": SystemFactory.sl,
    "pas": SystemFactory.pas,
    "multi_stress": SystemFactory.multi_stress,
    "clash_lapse": SystemFactory.clash_lapse,
}
