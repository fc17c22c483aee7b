import dataclasses

import pytest

from materialhue.tone_delta_pair import ToneDeltaPair, TonePolarity


def test_fields_are_kept():
    subject = object()
    basis = object()
    pair = ToneDeltaPair(subject, basis, 10.0, TonePolarity.NEARER, False)
    assert pair.subject is subject
    assert pair.basis is basis
    assert pair.delta == 10.0
    assert pair.polarity is TonePolarity.NEARER
    assert pair.stay_together is False


def test_keyword_construction_matches_positional():
    positional = ToneDeltaPair("a", "b", 10.0, TonePolarity.LIGHTER, True)
    keyword = ToneDeltaPair(
        subject="a", basis="b", delta=10.0, polarity=TonePolarity.LIGHTER, stay_together=True
    )
    assert positional == keyword


def test_pair_is_frozen():
    pair = ToneDeltaPair("a", "b", 10.0, TonePolarity.DARKER, False)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pair.delta = 5.0
    assert pair.delta == 10.0


def test_polarity_must_be_enum():
    with pytest.raises(TypeError):
        ToneDeltaPair("a", "b", 10.0, "nearer", False)


def test_polarity_members():
    looked_up = [TonePolarity(value) for value in ("darker", "lighter", "nearer", "farther")]
    assert [p.name for p in looked_up] == ["DARKER", "LIGHTER", "NEARER", "FARTHER"]


def test_polarity_lookup_by_value():
    assert TonePolarity("farther") is TonePolarity.FARTHER