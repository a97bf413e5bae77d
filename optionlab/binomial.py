"""Cox-Ross-Rubinstein binomial tree pricer."""

from __future__ import annotations

import math
from dataclasses import dataclass

from optionlab.option import ExerciseType, Option, PricingEngine


@dataclass(frozen=True)
class _TreeParameters:
    up: float
    down: float
    prob: float
    dt: float


class BinomialEngine(PricingEngine):
    """Prices European and American options on a recombining binomial tree."""

    def __init__(self, steps: int = 100) -> None:
        self.steps = steps

    def method_name(self) -> str:
        return "Binomial Tree"

    def _tree_parameters(self, option: Option) -> _TreeParameters:
        dt = option.time_to_maturity / self.steps
        up = math.exp(option.volatility * math.sqrt(dt))
        down = 1.0 / up
        prob = (math.exp(option.rate * dt) - down) / (up - down)
        return _TreeParameters(up, down, prob, dt)

    def price(self, option: Option) -> float:
        params = self._tree_parameters(option)
        steps = self.steps
        up, down, prob = params.up, params.down, params.prob
        discount = math.exp(-option.rate * params.dt)
        american = option.exercise_type is ExerciseType.AMERICAN

        values = [
            option.payoff(option.spot * up**i * down ** (steps - i))
            for i in range(steps + 1)
        ]

        for step in reversed(range(steps)):
            continuation = [
                discount * (prob * higher + (1 - prob) * lower)
                for lower, higher in zip(values, values[1:])
            ]
            if american:
                continuation = [
                    max(value, option.payoff(option.spot * up**i * down ** (step - i)))
                    for i, value in enumerate(continuation)
                ]
            values = continuation

        return values[0]