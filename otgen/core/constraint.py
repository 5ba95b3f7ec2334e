"""Violation-counting OT constraints."""

from dataclasses import dataclass, field
from typing import Callable

from otgen.core.contracts import IEvaluable
from otgen.core.types import ConstraintType


Evaluator = Callable[[IEvaluable], int]


@dataclass(frozen=True)
class Constraint:
    """A named, typed evaluator.

    Constraints are used as mapping keys, so identity is (name, type);
    the evaluator does not take part in equality or hashing.
    """

    name: str
    type: ConstraintType
    evaluator: Evaluator = field(compare=False, repr=False)

    @property
    def markedness(self) -> bool:
        return self.type == ConstraintType.MARK

    @property
    def faithfulness(self) -> bool:
        return self.type == ConstraintType.FAITH

    def evaluate(self, word: IEvaluable) -> int:
        """Number of violations assessed to word."""
        count = self.evaluator(word)
        if count < 0:
            raise ValueError(f"Constraint {self.name} returned a negative count: {count}")
        return count

    def __str__(self) -> str:
        return self.name
