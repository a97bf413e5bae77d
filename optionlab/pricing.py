"""A single front end over all pricing methods."""

from __future__ import annotations

import math

from optionlab.binomial import BinomialEngine
from optionlab.black_scholes import BlackScholesEngine
from optionlab.monte_carlo import MonteCarloEngine
from optionlab.option import Option, PricingEngine

BLACK_SCHOLES = "BlackScholes"
BINOMIAL = "Binomial"
MONTE_CARLO = "MonteCarlo"


class OptionsPricingEngine:
    """Prices options by name of method and computes Black-Scholes Greeks."""

    def __init__(
        self,
        binomial_steps: int = 100,
        monte_carlo_simulations: int = 100000,
        seed: int = 42,
    ) -> None:
        self._black_scholes = BlackScholesEngine()
        self._binomial = BinomialEngine(binomial_steps)
        self._monte_carlo = MonteCarloEngine(monte_carlo_simulations, seed)
        self._methods: dict[str, PricingEngine] = {
            BLACK_SCHOLES: self._black_scholes,
            BINOMIAL: self._binomial,
            MONTE_CARLO: self._monte_carlo,
        }

    def price(self, option: Option, method: str = BLACK_SCHOLES) -> float:
        """Price the option with the named method."""
        try:
            engine = self._methods[method]
        except KeyError:
            raise ValueError(f"Unknown pricing method: {method}") from None
        return engine.price(option)

    def price_all_methods(self, option: Option) -> dict[str, float]:
        """Prices from every method, keyed by name in sorted order; NaN where a method fails."""
        results: dict[str, float] = {}
        for name in sorted(self._methods):
            try:
                results[name] = self._methods[name].price(option)
            except Exception:
                results[name] = math.nan
        return results

    def calculate_greeks(self, option: Option) -> dict[str, float]:
        """Black-Scholes Greeks keyed by name in sorted order."""
        bs = self._black_scholes
        greeks = {
            "Delta": bs.delta(option),
            "Gamma": bs.gamma(option),
            "Theta": bs.theta(option),
            "Vega": bs.vega(option),
            "Rho": bs.rho(option),
        }
        return dict(sorted(greeks.items()))

    @property
    def binomial_steps(self) -> int:
        """Number of steps in the binomial tree."""
        return self._binomial.steps

    @binomial_steps.setter
    def binomial_steps(self, steps: int) -> None:
        self._binomial.steps = steps

    @property
    def monte_carlo_simulations(self) -> int:
        """Number of Monte Carlo simulations per price."""
        return self._monte_carlo.num_simulations

    @monte_carlo_simulations.setter
    def monte_carlo_simulations(self, simulations: int) -> None:
        self._monte_carlo.num_simulations = simulations