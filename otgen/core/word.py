"""Words under construction, finished candidates and competitions.

A Word is GEN's working object: a shared input, a growing output and
the IO correspondence between them. Once GEN has consumed the whole
input, each surviving word is evaluated into an immutable Candidate.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from otgen.core.constraint import Constraint
from otgen.core.contracts import IElement
from otgen.core.correspondence import Correspondence
from otgen.core.forms import FrozenOutput, Input, Output
from otgen.core.morphology import MorphWord


# (feature type, value) pairs applied to a fresh output element
FeatureAssignment = tuple[tuple[str, object], ...]


class Word:
    """Partial or complete structural description of an input."""

    def __init__(
        self,
        input: Input,
        output: Optional[Output] = None,
        io_corr: Optional[Correspondence] = None
    ):
        self.input = input
        self.output = output if output is not None else Output(morph_word=input.morph_word)
        self.io_corr = io_corr if io_corr is not None else Correspondence()

    @property
    def morph_word(self) -> MorphWord:
        return self.input.morph_word

    def io_out_corr(self, in_el: IElement) -> Optional[IElement]:
        return self.io_corr.right_of(in_el)

    def io_in_corr(self, out_el: IElement) -> Optional[IElement]:
        return self.io_corr.left_of(out_el)

    def add_to_io_corr(self, in_el: IElement, out_el: IElement) -> "Word":
        self.io_corr.add(in_el, out_el)
        return self

    def extend(self, in_el: IElement, assignment: FeatureAssignment) -> "Word":
        """New word with one more output element corresponding to in_el.

        The output element is a clone of in_el (so it keeps the morpheme
        affiliation) with the assignment applied. This word is untouched.
        """
        out_el = in_el.clone()
        for feature_type, value in assignment:
            out_el.set_feature(feature_type, value)
        output = self.output.shallow_copy()
        output.append(out_el)
        return Word(self.input, output, self.io_corr.copy()).add_to_io_corr(in_el, out_el)

    def evaluate(self, constraints: Iterable[Constraint]) -> "Candidate":
        """Freeze this word into a candidate with a violation count per constraint."""
        violations = {con: con.evaluate(self) for con in constraints}
        return Candidate(
            input=self.input,
            output=self.output.freeze(),
            violations=MappingProxyType(violations),
            io_corr=self.io_corr
        )


@dataclass(frozen=True, eq=False)
class Candidate:
    """An output hypothesis for an input, with its violation profile.

    The output is frozen, so the violations always describe it.
    Equality compares input and output only; equal structures always
    receive equal violations.
    """

    input: Input
    output: FrozenOutput
    violations: Mapping[Constraint, int]
    io_corr: Correspondence = field(repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Candidate):
            return NotImplemented
        return self.input == other.input and self.output == other.output

    def __hash__(self) -> int:
        return hash((str(self.input), str(self.output)))

    @property
    def constraints(self) -> tuple[Constraint, ...]:
        return tuple(self.violations)

    @property
    def morph_word(self) -> MorphWord:
        return self.input.morph_word

    def violations_of(self, constraint: Constraint) -> int:
        return self.violations[constraint]

    def io_out_corr(self, in_el: IElement) -> Optional[IElement]:
        return self.io_corr.right_of(in_el)

    def io_in_corr(self, out_el: IElement) -> Optional[IElement]:
        return self.io_corr.left_of(out_el)

    def identical_violations(self, other: "Candidate") -> bool:
        return all(self.violations[c] == other.violations[c] for c in self.violations)

    def harmonically_bounds(self, other: "Candidate") -> bool:
        """True if self is better on some constraint and worse on none."""
        better = worse = False
        for con, count in self.violations.items():
            if count < other.violations[con]:
                better = True
            elif count > other.violations[con]:
                worse = True
        return better and not worse

    def __str__(self) -> str:
        viols = " ".join(f"{c}:{n}" for c, n in self.violations.items())
        return f"{self.input} --> {self.output}  {viols}"


class Competition(Sequence):
    """All candidates generated for one input."""

    def __init__(self, candidates: Iterable[Candidate]):
        self._candidates = tuple(candidates)

    @property
    def input(self) -> Optional[Input]:
        return self._candidates[0].input if self._candidates else None

    @property
    def constraints(self) -> tuple[Constraint, ...]:
        return self._candidates[0].constraints if self._candidates else ()

    def find(self, output: str) -> Optional[Candidate]:
        """Candidate whose output renders as the given string."""
        return next((c for c in self._candidates if str(c.output) == output), None)

    def outputs(self) -> list[str]:
        return [str(c.output) for c in self._candidates]

    def __getitem__(self, index):
        return self._candidates[index]

    def __len__(self) -> int:
        return len(self._candidates)

    def __str__(self) -> str:
        return "\n".join(str(c) for c in self._candidates)
