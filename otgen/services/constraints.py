"""Constraint definitions for the stress-length family of systems.

Each constraint is a single shared, immutable object; systems compose
their constraint lists from these.
"""

from otgen.core.constraint import Constraint
from otgen.core.contracts import IEvaluable
from otgen.core.types import ConstraintType


def _no_long(word: IEvaluable) -> int:
    """One violation per long output syllable."""
    return sum(1 for syl in word.output if syl.long)


def _wsp(word: IEvaluable) -> int:
    """Weight-to-stress: one violation per long unstressed syllable."""
    return sum(1 for syl in word.output if syl.long and syl.unstressed)


def _main_left(word: IEvaluable) -> int:
    """Syllables preceding the main stress; 0 for stressless outputs."""
    for idx, syl in enumerate(word.output):
        if syl.main_stress:
            return idx
    return 0


def _main_right(word: IEvaluable) -> int:
    """Syllables following the first main stress."""
    for idx, syl in enumerate(word.output):
        if syl.main_stress:
            return len(word.output) - idx - 1
    return 0


def _ident_stress(word: IEvaluable) -> int:
    viols = 0
    for in_syl in word.input:
        if in_syl.stress_unset:
            continue
        out_syl = word.io_out_corr(in_syl)
        if in_syl.main_stress != out_syl.main_stress:
            viols += 1
    return viols


def _ident_length(word: IEvaluable) -> int:
    viols = 0
    for in_syl in word.input:
        if in_syl.length_unset:
            continue
        out_syl = word.io_out_corr(in_syl)
        if in_syl.long != out_syl.long:
            viols += 1
    return viols


def _culm(word: IEvaluable) -> int:
    """Culminativity: violated once by an output with no main stress."""
    return 0 if any(syl.main_stress for syl in word.output) else 1


def _adjacent_pairs(word: IEvaluable, predicate) -> int:
    output = word.output
    return sum(
        1 for idx in range(1, len(output))
        if predicate(output[idx - 1]) and predicate(output[idx])
    )


def _clash(word: IEvaluable) -> int:
    """One violation per pair of adjacent stressed syllables."""
    return _adjacent_pairs(word, lambda syl: syl.main_stress)


def _lapse(word: IEvaluable) -> int:
    """One violation per pair of adjacent unstressed syllables."""
    return _adjacent_pairs(word, lambda syl: syl.unstressed)


NO_LONG = Constraint("NoLong", ConstraintType.MARK, _no_long)
WSP = Constraint("WSP", ConstraintType.MARK, _wsp)
MAIN_LEFT = Constraint("ML", ConstraintType.MARK, _main_left)
MAIN_RIGHT = Constraint("MR", ConstraintType.MARK, _main_right)
IDENT_STRESS = Constraint("IDStress", ConstraintType.FAITH, _ident_stress)
IDENT_LENGTH = Constraint("IDLength", ConstraintType.FAITH, _ident_length)
CULM = Constraint("Culm", ConstraintType.MARK, _culm)
CLASH = Constraint("Clash", ConstraintType.MARK, _clash)
LAPSE = Constraint("Lapse", ConstraintType.MARK, _lapse)

BASE_CONSTRAINTS: tuple[Constraint, ...] = (
    NO_LONG,
    WSP,
    MAIN_LEFT,
    MAIN_RIGHT,
    IDENT_STRESS,
    IDENT_LENGTH,
)
