"""Tests for features and elements.

Cloning is tested directly: shallow duplication of features is the
easiest way to corrupt GEN.
"""

import pytest
from otgen.core import UNSET, LengthFeature, StressFeature, Syllable
from otgen.errors import ErrorCode, FrozenElementError, InvalidFeatureType, InvalidFeatureValue


class TestFeature:
    """Test feature domains and value validation."""

    def test_starts_unset(self):
        feature = StressFeature()
        assert feature.unset
        assert feature.value is UNSET
        assert str(feature) == "stress=unset"

    def test_domain_order(self):
        assert list(StressFeature.each_value()) == ["unstressed", "main_stress"]
        assert list(LengthFeature.each_value()) == ["short", "long"]

    def test_set_domain_value(self):
        feature = LengthFeature().set("long")
        assert feature.long
        assert feature.is_value("long")
        assert not feature.is_value("short")
        assert str(feature) == "length=long"

    def test_set_invalid_value(self):
        with pytest.raises(InvalidFeatureValue, match="length"):
            LengthFeature().set("medium")

    def test_set_unset_resets(self):
        feature = StressFeature().set_main_stress()
        feature.set(UNSET)
        assert feature.unset

    def test_copy_is_independent(self):
        original = StressFeature().set_unstressed()
        copy = original.copy()
        copy.set_main_stress()
        assert original.unstressed
        assert copy.main_stress

    def test_equality(self):
        assert StressFeature().set_unstressed() == StressFeature().set_unstressed()
        assert StressFeature().set_unstressed() != StressFeature().set_main_stress()
        assert StressFeature() != LengthFeature()


class TestSyllable:
    """Test the syllable element and the generic element interface."""

    def test_feature_order(self):
        types = [f.type for f in Syllable().each_feature()]
        assert types == ["length", "stress"]

    @pytest.mark.parametrize("rendering", ["s.", "s:", "S.", "S:", "??"])
    def test_rendering(self, syl, rendering):
        assert str(syl(rendering)) == rendering

    def test_setters_chain(self):
        syl = Syllable().set_main_stress().set_long()
        assert syl.main_stress and syl.long
        assert syl.fully_specified

    def test_get_feature_unknown_type(self):
        with pytest.raises(InvalidFeatureType) as exc_info:
            Syllable().get_feature("tone")
        assert exc_info.value.code == ErrorCode.INVALID_FEATURE_TYPE

    def test_set_feature_unknown_type(self):
        with pytest.raises(InvalidFeatureType):
            Syllable().set_feature("tone", "high")

    def test_set_feature_invalid_value(self):
        with pytest.raises(InvalidFeatureValue):
            Syllable().set_feature("stress", "secondary")

    def test_set_feature_accepts_unset(self, syl):
        s = syl("S:")
        s.set_feature("stress", UNSET)
        assert s.stress_unset
        assert str(s) == "?:"

    def test_clone_copies_features(self, syl, root):
        original = syl("s.", root)
        clone = original.clone()
        clone.set_main_stress().set_long()
        assert str(original) == "s."
        assert str(clone) == "S:"

    def test_clone_shares_morpheme(self, syl, root):
        original = syl("s.", root)
        clone = original.clone()
        assert clone.morpheme is original.morpheme
        assert clone == original
        assert clone is not original

    def test_equality_includes_morpheme(self, syl, root, suffix):
        assert syl("S.", root) == syl("S.", root)
        assert syl("S.", root) != syl("S.", suffix)
        assert syl("S.", root) != syl("s.", root)

    def test_to_gv(self, syl, root, suffix):
        assert syl("S.", root).to_gv() == "pá"
        assert syl("s:", suffix).to_gv() == "ka:"

    def test_frozen_element_rejects_assignment(self, syl, root):
        s = syl("S.", root).freeze()
        assert s.frozen
        with pytest.raises(FrozenElementError) as exc_info:
            s.set_unstressed()
        assert exc_info.value.code == ErrorCode.FROZEN_ELEMENT
        with pytest.raises(FrozenElementError):
            s.set_feature("length", UNSET)
        assert str(s) == "S."

    def test_clone_of_frozen_element_is_mutable(self, syl, root):
        frozen = syl("S.", root).freeze()
        clone = frozen.clone()
        assert not clone.frozen
        clone.set_long()
        assert str(clone) == "S:"
        assert str(frozen) == "S."
        assert clone.morpheme is frozen.morpheme
