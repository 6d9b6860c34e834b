# tests/core/test_features.py
import pytest

from realizer.core.domain.exceptions import FeatureValueError
from realizer.core.domain.features import (
    Feature,
    FeatureStore,
    Gender,
    InterrogativeType,
    NumberAgreement,
    Tense,
    coerce_value,
    to_feature,
)


class TestFeatureKeys:
    def test_string_keys_resolve_to_features(self):
        assert to_feature("tense") is Feature.TENSE
        assert to_feature("TENSE") is Feature.TENSE
        assert to_feature(Feature.NEGATED) is Feature.NEGATED

    def test_unknown_key_is_rejected(self):
        with pytest.raises(FeatureValueError):
            to_feature("aspectuality")

    def test_enum_values_accept_value_or_name(self):
        assert coerce_value(Feature.TENSE, "past") is Tense.PAST
        assert coerce_value(Feature.TENSE, "PAST") is Tense.PAST
        assert coerce_value(Feature.GENDER, Gender.FEMININE) is Gender.FEMININE

    def test_wrong_value_type_is_rejected(self):
        with pytest.raises(FeatureValueError):
            coerce_value(Feature.NEGATED, "yes")
        with pytest.raises(FeatureValueError):
            coerce_value(Feature.NUMBER, "dual")


class TestFeatureStore:
    def test_set_get_and_unset(self):
        store = FeatureStore({"number": "plural"})
        assert store.get(Feature.NUMBER) is NumberAgreement.PLURAL
        assert store.is_set("number")

        store.set(Feature.NUMBER, None)
        assert not store.is_set(Feature.NUMBER)
        assert store.get(Feature.NUMBER) is None

    def test_flag_is_strictly_true(self):
        store = FeatureStore({Feature.NEGATED: True})
        assert store.flag(Feature.NEGATED)
        assert not store.flag(Feature.PASSIVE)

    def test_last_write_wins(self):
        store = FeatureStore()
        store.set(Feature.TENSE, Tense.PAST)
        store.set(Feature.TENSE, Tense.FUTURE)
        assert store.get(Feature.TENSE) is Tense.FUTURE

    def test_frozen_store_rejects_mutation(self):
        store = FeatureStore({Feature.GENDER: Gender.MASCULINE}, frozen=True)
        with pytest.raises(FeatureValueError):
            store.set(Feature.GENDER, Gender.FEMININE)

    def test_merged_leaves_original_untouched(self):
        base = FeatureStore({Feature.TENSE: Tense.PAST}, frozen=True)
        merged = base.merged({Feature.TENSE: None, Feature.NEGATED: True})

        assert base.get(Feature.TENSE) is Tense.PAST
        assert not merged.is_set(Feature.TENSE)
        assert merged.flag(Feature.NEGATED)
        assert not merged.frozen

    def test_equality_and_membership(self):
        a = FeatureStore({"tense": "past"})
        b = FeatureStore({Feature.TENSE: Tense.PAST})
        assert a == b
        assert "tense" in a
        assert len(a) == 1


class TestInterrogativeType:
    def test_classification(self):
        assert InterrogativeType.WHO_OBJECT.is_object
        assert InterrogativeType.WHAT_SUBJECT.is_subject
        assert InterrogativeType.WHO_INDIRECT_OBJECT.is_indirect_object
        assert not InterrogativeType.YES_NO.is_object
