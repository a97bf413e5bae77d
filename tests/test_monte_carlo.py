import pytest

from optionlab.black_scholes import BlackScholesEngine
from optionlab.monte_carlo import MonteCarloEngine
from optionlab.option import ExerciseType, Option, OptionType


def make(kind=OptionType.CALL, exercise=ExerciseType.EUROPEAN):
    return Option(100.0, 100.0, 0.05, 0.2, 1.0, kind, exercise)


def test_defaults_and_name():
    engine = MonteCarloEngine()
    assert engine.num_simulations == 100000
    assert engine.method_name() == "Monte Carlo"


def test_american_rejected():
    with pytest.raises(ValueError):
        MonteCarloEngine(100).price(make(exercise=ExerciseType.AMERICAN))


def test_same_seed_is_reproducible():
    a = MonteCarloEngine(2000, seed=7).price(make())
    b = MonteCarloEngine(2000, seed=7).price(make())
    assert a == b


@pytest.mark.parametrize("kind", [OptionType.CALL, OptionType.PUT])
def test_plain_price_near_black_scholes(kind):
    opt = make(kind)
    mc = MonteCarloEngine(20000).price(opt)
    assert mc == pytest.approx(BlackScholesEngine().price(opt), abs=0.5)


def test_antithetic_near_black_scholes():
    opt = make()
    mc = MonteCarloEngine(20000).price_antithetic(opt)
    assert mc == pytest.approx(BlackScholesEngine().price(opt), abs=0.4)


def test_antithetic_needs_two_simulations():
    with pytest.raises(ValueError):
        MonteCarloEngine(1).price_antithetic(make())


def test_control_variate_near_black_scholes():
    opt = make(OptionType.PUT)
    mc = MonteCarloEngine(20000).price_control_variate(opt)
    assert mc == pytest.approx(BlackScholesEngine().price(opt), abs=0.3)


def test_generate_path_shape():
    path = MonteCarloEngine(10).generate_path(make(), 50)
    assert len(path) == 51
    assert path[0] == 100.0
    assert all(p > 0 for p in path)


def test_generate_path_default_length():
    assert len(MonteCarloEngine(10).generate_path(make())) == 253