"""GEN: incremental, policy-parameterised candidate generation.

Input elements are consumed left to right. Partial words are kept in
buckets that summarise how much of the stress budget they have used;
every word is extended once per combination of output feature values,
and an extension is routed to the bucket the policy's automaton
prescribes. Extensions with no route are never built, so outputs the
policy forbids are pruned online rather than filtered afterwards.
"""

from dataclasses import dataclass
from itertools import product
from typing import Iterable, Mapping, Optional

from otgen.core.constraint import Constraint
from otgen.core.contracts import IElement
from otgen.core.forms import Input
from otgen.core.types import StressPolicy
from otgen.core.word import Competition, FeatureAssignment, Word
from otgen.observ import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class BucketAutomaton:
    """Bucket routing for one culminativity policy.

    ``transitions`` maps (bucket, extension is stressed) to the target
    bucket; a missing entry means the extension is illegal. Words in the
    ``accepting`` buckets, in that order, form the competition.
    """

    start: str
    accepting: tuple[str, ...]
    transitions: Mapping[tuple[str, bool], str]

    def route(self, bucket: str, stressed: bool) -> Optional[str]:
        return self.transitions.get((bucket, stressed))


_OPEN = "open"
_NO_STRESS_YET = "no_stress_yet"
_STRESS_ASSIGNED = "stress_assigned"

_SINGLE_STRESS = {
    (_NO_STRESS_YET, False): _NO_STRESS_YET,
    (_NO_STRESS_YET, True): _STRESS_ASSIGNED,
    (_STRESS_ASSIGNED, False): _STRESS_ASSIGNED,
}

AUTOMATA: dict[StressPolicy, BucketAutomaton] = {
    StressPolicy.UNBOUNDED: BucketAutomaton(
        start=_OPEN,
        accepting=(_OPEN,),
        transitions={(_OPEN, False): _OPEN, (_OPEN, True): _OPEN},
    ),
    StressPolicy.AT_MOST_ONE: BucketAutomaton(
        start=_NO_STRESS_YET,
        accepting=(_STRESS_ASSIGNED, _NO_STRESS_YET),
        transitions=_SINGLE_STRESS,
    ),
    StressPolicy.EXACTLY_ONE: BucketAutomaton(
        start=_NO_STRESS_YET,
        accepting=(_STRESS_ASSIGNED,),
        transitions=_SINGLE_STRESS,
    ),
}


def output_assignments(element: IElement) -> list[FeatureAssignment]:
    """Cross product of the element's feature domains, in declared order."""
    domains = [
        [(feature.type, value) for value in feature.each_value()]
        for feature in element.each_feature()
    ]
    return [tuple(combo) for combo in product(*domains)]


def _stress_of(element: IElement, assignment: FeatureAssignment) -> bool:
    probe = element.clone()
    for feature_type, value in assignment:
        probe.set_feature(feature_type, value)
    return probe.main_stress


def gen(
    input: Input,
    constraints: Iterable[Constraint],
    policy: StressPolicy
) -> Competition:
    """Generate and evaluate every admissible candidate for input.

    A zero-length input yields a single candidate with an empty output
    under every policy.
    """
    constraints = tuple(constraints)
    automaton = AUTOMATA[policy]
    start = Word(input)

    if not input:
        logger.debug("gen_completed", input="", policy=policy.value, candidates=1)
        return Competition([start.evaluate(constraints)])

    buckets: dict[str, list[Word]] = {automaton.start: [start]}
    for in_el in input:
        options = [(a, _stress_of(in_el, a)) for a in output_assignments(in_el)]
        extended: dict[str, list[Word]] = {}
        for bucket, words in buckets.items():
            for word in words:
                for assignment, stressed in options:
                    target = automaton.route(bucket, stressed)
                    if target is None:
                        continue
                    extended.setdefault(target, []).append(word.extend(in_el, assignment))
        buckets = extended

    survivors = [w for name in automaton.accepting for w in buckets.get(name, [])]
    logger.debug(
        "gen_completed",
        input=str(input),
        policy=policy.value,
        candidates=len(survivors)
    )
    return Competition(w.evaluate(constraints) for w in survivors)
