import pytest

from optionlab.binomial import BinomialEngine
from optionlab.black_scholes import BlackScholesEngine
from optionlab.option import ExerciseType, Option, OptionType


def make(kind=OptionType.CALL, exercise=ExerciseType.EUROPEAN, strike=100.0):
    return Option(100.0, strike, 0.05, 0.2, 1.0, kind, exercise)


def test_default_steps_and_name():
    engine = BinomialEngine()
    assert engine.steps == 100
    assert engine.method_name() == "Binomial Tree"


@pytest.mark.parametrize("kind", [OptionType.CALL, OptionType.PUT])
@pytest.mark.parametrize("strike", [90.0, 100.0, 110.0])
def test_european_converges_to_black_scholes(kind, strike):
    opt = make(kind, strike=strike)
    tree = BinomialEngine(400).price(opt)
    assert tree == pytest.approx(BlackScholesEngine().price(opt), abs=0.05)


def test_american_call_equals_european_call():
    engine = BinomialEngine(200)
    european = engine.price(make(OptionType.CALL, ExerciseType.EUROPEAN))
    american = engine.price(make(OptionType.CALL, ExerciseType.AMERICAN))
    assert american == pytest.approx(european, rel=1e-12)


def test_american_put_carries_early_exercise_premium():
    engine = BinomialEngine(200)
    european = engine.price(make(OptionType.PUT, ExerciseType.EUROPEAN))
    american = engine.price(make(OptionType.PUT, ExerciseType.AMERICAN))
    assert american > european


def test_deep_in_the_money_american_put_at_least_intrinsic():
    opt = make(OptionType.PUT, ExerciseType.AMERICAN, strike=150.0)
    assert BinomialEngine(150).price(opt) >= opt.payoff(opt.spot)


def test_steps_can_be_changed():
    engine = BinomialEngine(10)
    coarse = engine.price(make())
    engine.steps = 300
    fine = engine.price(make())
    target = BlackScholesEngine().price(make())
    assert abs(fine - target) < abs(coarse - target)