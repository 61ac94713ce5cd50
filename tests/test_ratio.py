import pytest
from xenvox.core.ratio import Rational, mediant


def test_ordering_by_cross_multiplication():
    assert Rational(1, 1) < Rational(3, 2) < Rational(2, 1)
    assert Rational(5, 4) > Rational(6, 5)
    assert not Rational(3, 2) < Rational(3, 2)


def test_equality_ignores_reduction_but_terms_do_not():
    assert Rational(2, 4) == Rational(1, 2)
    assert hash(Rational(2, 4)) == hash(Rational(1, 2))
    assert not Rational(2, 4).same_terms(Rational(1, 2))


def test_mediant():
    assert mediant(Rational(1, 1), Rational(2, 1)).same_terms(Rational(3, 2))
    assert mediant(Rational(3, 2), Rational(2, 1)).same_terms(Rational(5, 3))


def test_large_terms_stay_exact():
    # Neighbours that a float division could not tell apart
    a = Rational(10**20, 10**20 + 1)
    b = Rational(10**20 + 1, 10**20 + 2)
    assert a < b
    assert float(a) == float(b)


def test_rejects_invalid_terms():
    with pytest.raises(ValueError):
        Rational(1, 0)
    with pytest.raises(ValueError):
        Rational(-1, 2)


def test_log2():
    assert Rational(2, 1).log2() == 1.0
    assert Rational(1, 1).log2() == 0.0
    assert Rational(3, 2).log2() == pytest.approx(0.5849625007)
