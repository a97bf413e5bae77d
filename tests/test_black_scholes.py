import dataclasses
import math

import pytest

from optionlab.black_scholes import BlackScholesEngine, d1_d2, norm_cdf, norm_pdf
from optionlab.option import ExerciseType, Option, OptionType


def make(kind=OptionType.CALL, exercise=ExerciseType.EUROPEAN, **kw):
    base = dict(spot=100.0, strike=100.0, rate=0.05, volatility=0.2, time_to_maturity=1.0)
    base.update(kw)
    return Option(option_type=kind, exercise_type=exercise, **base)


engine = BlackScholesEngine()


def test_norm_cdf_midpoint_and_symmetry():
    assert norm_cdf(0.0) == pytest.approx(0.5, abs=1e-6)
    for x in (0.1, 0.7, 1.5, 3.0):
        assert norm_cdf(x) + norm_cdf(-x) == pytest.approx(1.0, abs=1e-9)
        assert norm_cdf(x) > norm_cdf(x - 0.1)


def test_norm_pdf_peak_and_symmetry():
    assert norm_pdf(0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi))
    assert norm_pdf(1.3) == pytest.approx(norm_pdf(-1.3))


def test_d2_is_d1_less_sigma_root_t():
    opt = make(volatility=0.3, time_to_maturity=0.25)
    d1, d2 = d1_d2(opt)
    assert d1 - d2 == pytest.approx(0.3 * math.sqrt(0.25))


def test_reference_call_price():
    assert engine.price(make()) == pytest.approx(10.4506, abs=1e-3)


def test_put_call_parity():
    for strike in (80.0, 100.0, 125.0):
        call = engine.price(make(OptionType.CALL, strike=strike))
        put = engine.price(make(OptionType.PUT, strike=strike))
        assert call - put == pytest.approx(100.0 - strike * math.exp(-0.05), abs=1e-5)


def test_american_rejected():
    with pytest.raises(ValueError):
        engine.price(make(exercise=ExerciseType.AMERICAN))


def test_method_name():
    assert engine.method_name() == "Black-Scholes"


def test_delta_relation_and_finite_difference():
    call, put = make(OptionType.CALL), make(OptionType.PUT)
    assert engine.delta(call) - engine.delta(put) == pytest.approx(1.0)
    h = 0.01
    up = engine.price(dataclasses.replace(call, spot=100.0 + h))
    down = engine.price(dataclasses.replace(call, spot=100.0 - h))
    assert engine.delta(call) == pytest.approx((up - down) / (2 * h), abs=1e-3)


def test_gamma_same_for_call_and_put():
    assert engine.gamma(make(OptionType.CALL)) == pytest.approx(engine.gamma(make(OptionType.PUT)))
    assert engine.gamma(make()) > 0


def test_vega_matches_finite_difference():
    opt = make()
    h = 0.001
    up = engine.price(dataclasses.replace(opt, volatility=0.2 + h))
    down = engine.price(dataclasses.replace(opt, volatility=0.2 - h))
    assert engine.vega(opt) == pytest.approx((up - down) / (2 * h) / 100.0, abs=1e-3)


@pytest.mark.parametrize("kind", [OptionType.CALL, OptionType.PUT])
def test_rho_matches_finite_difference(kind):
    opt = make(kind)
    h = 0.0005
    up = engine.price(dataclasses.replace(opt, rate=0.05 + h))
    down = engine.price(dataclasses.replace(opt, rate=0.05 - h))
    assert engine.rho(opt) == pytest.approx((up - down) / (2 * h) / 100.0, abs=2e-3)


@pytest.mark.parametrize("kind", [OptionType.CALL, OptionType.PUT])
def test_theta_matches_finite_difference(kind):
    opt = make(kind)
    h = 0.001
    longer = engine.price(dataclasses.replace(opt, time_to_maturity=1.0 + h))
    shorter = engine.price(dataclasses.replace(opt, time_to_maturity=1.0 - h))
    expected = -(longer - shorter) / (2 * h) / 365.0
    assert engine.theta(opt) == pytest.approx(expected, abs=1e-4)