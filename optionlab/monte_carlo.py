"""Monte Carlo pricing under geometric Brownian motion."""

from __future__ import annotations

import math
import random
from statistics import fmean

from optionlab.option import ExerciseType, Option, PricingEngine


class MonteCarloEngine(PricingEngine):
    """Prices European options by simulating terminal underlying prices."""

    def __init__(self, num_simulations: int = 100000, seed: int = 42) -> None:
        self.num_simulations = num_simulations
        self._rng = random.Random(seed)

    def method_name(self) -> str:
        return "Monte Carlo"

    def _normal(self) -> float:
        return self._rng.gauss(0.0, 1.0)

    @staticmethod
    def _terminal_spot(option: Option, shock: float) -> float:
        sigma, t = option.volatility, option.time_to_maturity
        drift = (option.rate - 0.5 * sigma * sigma) * t
        diffusion = sigma * math.sqrt(t) * shock
        return option.spot * math.exp(drift + diffusion)

    @staticmethod
    def _discount(option: Option) -> float:
        return math.exp(-option.rate * option.time_to_maturity)

    def price(self, option: Option) -> float:
        if option.exercise_type is ExerciseType.AMERICAN:
            raise ValueError("Basic Monte Carlo doesn't support American options")
        payoffs = [
            option.payoff(self._terminal_spot(option, self._normal()))
            for _ in range(self.num_simulations)
        ]
        return self._discount(option) * sum(payoffs) / self.num_simulations

    def price_antithetic(self, option: Option) -> float:
        """Price using antithetic pairs of normal shocks."""
        pairs = self.num_simulations // 2
        if pairs == 0:
            raise ValueError("antithetic pricing needs at least two simulations")
        payoffs: list[float] = []
        for _ in range(pairs):
            shock = self._normal()
            payoffs.append(option.payoff(self._terminal_spot(option, shock)))
            payoffs.append(option.payoff(self._terminal_spot(option, -shock)))
        return self._discount(option) * fmean(payoffs)

    def price_control_variate(self, option: Option) -> float:
        """Price using the terminal underlying as a control variate."""
        forward = option.spot * math.exp(option.rate * option.time_to_maturity)
        payoffs: list[float] = []
        controls: list[float] = []
        for _ in range(self.num_simulations):
            terminal = self._terminal_spot(option, self._normal())
            payoffs.append(option.payoff(terminal))
            controls.append(terminal - forward)

        payoff_mean = sum(payoffs) / self.num_simulations
        control_mean = sum(controls) / self.num_simulations
        covariance = sum(
            (p - payoff_mean) * (c - control_mean) for p, c in zip(payoffs, controls)
        )
        control_variance = sum((c - control_mean) ** 2 for c in controls)
        if control_variance == 0:
            raise ValueError("control variate has zero variance")
        beta = covariance / control_variance
        return self._discount(option) * (payoff_mean - beta * control_mean)

    def generate_path(self, option: Option, num_steps: int = 252) -> list[float]:
        """Simulate one price path with num_steps increments, starting at spot."""
        dt = option.time_to_maturity / num_steps
        sigma = option.volatility
        drift = (option.rate - 0.5 * sigma * sigma) * dt
        scale = sigma * math.sqrt(dt)
        price = option.spot
        path = [price]
        for _ in range(num_steps):
            price *= math.exp(drift + scale * self._normal())
            path.append(price)
        return path