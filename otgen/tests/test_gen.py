"""Tests for GEN.

Covers candidate counts per culminativity policy, online pruning,
structural invariants of the generated words, and determinism.
"""

from collections import Counter

import pytest
from otgen.core import StressPolicy, Word
from otgen.errors import FrozenElementError
from otgen.services import constraints as con
from otgen.services.gen import AUTOMATA, gen, output_assignments


BASE = con.BASE_CONSTRAINTS


class TestCandidateCounts:
    """Test the size of each competition."""

    @pytest.mark.parametrize("policy,root_form,suffix_form,expected", [
        (StressPolicy.AT_MOST_ONE, "s.", "", 4),
        (StressPolicy.UNBOUNDED, "s.", "", 4),
        (StressPolicy.EXACTLY_ONE, "s.", "", 2),
        (StressPolicy.AT_MOST_ONE, "s.", "S:", 12),
        (StressPolicy.UNBOUNDED, "s.", "S:", 16),
        (StressPolicy.EXACTLY_ONE, "s.", "S:", 8),
        (StressPolicy.UNBOUNDED, "s.s.", "s.", 64),
    ])
    def test_count(self, make_input, policy, root_form, suffix_form, expected):
        competition = gen(make_input(root_form, suffix_form), BASE, policy)
        assert len(competition) == expected

    def test_outputs_are_distinct(self, make_input):
        competition = gen(make_input("s.", "s."), BASE, StressPolicy.UNBOUNDED)
        assert len(set(competition.outputs())) == len(competition)

    def test_exactly_one_outputs(self, make_input):
        competition = gen(make_input("s:", "s."), BASE, StressPolicy.EXACTLY_ONE)
        assert sorted(competition.outputs()) == sorted(
            ["S.s.", "S.s:", "S:s.", "S:s:", "s.S.", "s.S:", "s:S.", "s:S:"]
        )

    def test_assignments_cover_feature_product(self, syl):
        assignments = output_assignments(syl("??"))
        assert assignments == [
            (("length", "short"), ("stress", "unstressed")),
            (("length", "short"), ("stress", "main_stress")),
            (("length", "long"), ("stress", "unstressed")),
            (("length", "long"), ("stress", "main_stress")),
        ]


class TestCulminativity:
    """Test the stress-count invariants of each policy."""

    def test_at_most_one(self, make_input):
        competition = gen(make_input("s.s.", "s."), BASE, StressPolicy.AT_MOST_ONE)
        counts = {c.output.stress_count for c in competition}
        assert counts == {0, 1}

    def test_exactly_one(self, make_input):
        competition = gen(make_input("s.s.", "s."), BASE, StressPolicy.EXACTLY_ONE)
        assert all(c.output.stress_count == 1 for c in competition)

    def test_unbounded_reaches_every_count(self, make_input):
        competition = gen(make_input("s.", "s."), BASE, StressPolicy.UNBOUNDED)
        counts = Counter(c.output.stress_count for c in competition)
        assert counts == {0: 4, 1: 8, 2: 4}

    def test_second_stress_is_never_built(self, make_input, monkeypatch):
        calls = []
        original = Word.extend

        def counting_extend(self, in_el, assignment):
            calls.append(assignment)
            return original(self, in_el, assignment)

        monkeypatch.setattr(Word, "extend", counting_extend)
        gen(make_input("s.", "s."), BASE, StressPolicy.AT_MOST_ONE)
        # 4 from the start word, 2 x 4 from "no stress yet", 2 x 2 from "stress assigned"
        assert len(calls) == 16

    def test_single_stress_policies_share_transitions(self):
        at_most = AUTOMATA[StressPolicy.AT_MOST_ONE]
        exactly = AUTOMATA[StressPolicy.EXACTLY_ONE]
        assert at_most.transitions == exactly.transitions
        assert at_most.route("stress_assigned", True) is None
        assert set(exactly.accepting) < set(at_most.accepting)


class TestWordStructure:
    """Test IO correspondence and morpheme preservation."""

    def setup_method(self):
        self.policy = StressPolicy.UNBOUNDED

    def test_output_length_matches_input(self, make_input):
        input = make_input("s.S:", "s.")
        for candidate in gen(input, BASE, self.policy):
            assert len(candidate.output) == len(input)

    def test_correspondence_is_index_aligned(self, make_input):
        input = make_input("s.S:", "s.")
        for candidate in gen(input, BASE, self.policy):
            assert len(candidate.io_corr) == len(input)
            for in_el, out_el in zip(candidate.input, candidate.output):
                assert candidate.io_out_corr(in_el) is out_el
                assert candidate.io_in_corr(out_el) is in_el

    def test_morphemes_preserved(self, make_input):
        input = make_input("s.", "s.")
        for candidate in gen(input, BASE, self.policy):
            for in_el, out_el in zip(candidate.input, candidate.output):
                assert out_el.morpheme is in_el.morpheme

    def test_candidates_share_input(self, make_input):
        input = make_input("s.", "s.")
        competition = gen(input, BASE, self.policy)
        assert all(c.input is input for c in competition)
        assert competition.input is input
        assert all(c.morph_word is input.morph_word for c in competition)

    def test_input_is_not_mutated(self, make_input):
        input = make_input("s:", "S.")
        before = [el.clone() for el in input]
        gen(input, BASE, self.policy)
        assert list(input) == before
        assert str(input) == "s:-S."

    def test_outputs_do_not_alias_input(self, make_input):
        input = make_input("s.")
        for candidate in gen(input, BASE, self.policy):
            assert candidate.output[0] is not input[0]


class TestGenEdgeCases:
    """Test determinism and the empty input."""

    def test_deterministic(self, make_input):
        def profile(competition):
            return Counter(
                (str(c.output), tuple(c.violations.values())) for c in competition
            )

        first = gen(make_input("s:", "S."), BASE, StressPolicy.AT_MOST_ONE)
        second = gen(make_input("s:", "S."), BASE, StressPolicy.AT_MOST_ONE)
        assert profile(first) == profile(second)
        assert first.outputs() == second.outputs()

    @pytest.mark.parametrize("policy", list(StressPolicy))
    def test_empty_input_yields_one_empty_candidate(self, policy):
        from otgen.core import Input

        competition = gen(Input(), BASE, policy)
        assert len(competition) == 1
        candidate = competition[0]
        assert len(candidate.output) == 0
        assert set(candidate.violations) == set(BASE)
        assert candidate.violations_of(con.NO_LONG) == 0

    def test_every_constraint_evaluated_in_order(self, make_input):
        constraints = BASE + (con.CULM, con.CLASH)
        competition = gen(make_input("s."), constraints, StressPolicy.UNBOUNDED)
        for candidate in competition:
            assert candidate.constraints == constraints
            assert all(n >= 0 for n in candidate.violations.values())


class TestFinishedCandidates:
    """Test that candidates are hashable and keep the output they were scored on."""

    def test_candidates_are_hashable(self, make_input):
        competition = gen(make_input("s.", "s."), BASE, StressPolicy.AT_MOST_ONE)
        assert len(set(competition)) == len(competition)
        assert {competition[0]: "winner"}[competition[0]] == "winner"

    def test_equal_candidates_hash_alike(self, make_input):
        first = gen(make_input("s.", "s."), BASE, StressPolicy.AT_MOST_ONE)
        second = gen(make_input("s.", "s."), BASE, StressPolicy.AT_MOST_ONE)
        assert first[0] == second[0]
        assert first[0] is not second[0]
        assert hash(first[0]) == hash(second[0])
        assert set(first) == set(second)

    def test_output_features_cannot_change(self, make_input):
        candidate = gen(make_input("s.", "s."), BASE, StressPolicy.AT_MOST_ONE).find("S.s.")
        with pytest.raises(FrozenElementError):
            candidate.output[0].set_long()
        with pytest.raises(FrozenElementError):
            candidate.output[1].set_feature("stress", "main_stress")
        assert str(candidate.output) == "S.s."
        assert candidate.violations_of(con.NO_LONG) == 0

    def test_output_sequence_cannot_change(self, make_input):
        candidate = gen(make_input("s."), BASE, StressPolicy.AT_MOST_ONE)[0]
        with pytest.raises(AttributeError):
            candidate.output.append(candidate.output[0])
        assert len(candidate.output) == 1

    def test_input_stays_mutable(self, make_input):
        input = make_input("s.")
        gen(input, BASE, StressPolicy.AT_MOST_ONE)
        input[0].set_long()
        assert str(input) == "s:"
