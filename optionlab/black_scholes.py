"""Closed-form Black-Scholes pricing and Greeks for European options."""

from __future__ import annotations

import math

from optionlab.option import ExerciseType, Option, OptionType, PricingEngine

_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911


def norm_cdf(x: float) -> float:
    """Standard normal CDF via the Abramowitz-Stegun rational approximation."""
    sign = 1 if x >= 0 else -1
    z = abs(x) / math.sqrt(2.0)
    t = 1.0 / (1.0 + _P * z)
    y = 1.0 - (((((_A5 * t + _A4) * t) + _A3) * t + _A2) * t + _A1) * t * math.exp(-z * z)
    return 0.5 * (1.0 + sign * y)


def norm_pdf(x: float) -> float:
    """Standard normal probability density."""
    return math.exp(-0.5 * x * x) / math.sqrt(2.0 * math.pi)


def d1_d2(option: Option) -> tuple[float, float]:
    """The d1 and d2 terms of the Black-Scholes formula."""
    s, k = option.spot, option.strike
    r, sigma, t = option.rate, option.volatility, option.time_to_maturity
    d1 = (math.log(s / k) + (r + 0.5 * sigma * sigma) * t) / (sigma * math.sqrt(t))
    d2 = d1 - sigma * math.sqrt(t)
    return d1, d2


class BlackScholesEngine(PricingEngine):
    """Analytic pricer for European options."""

    def price(self, option: Option) -> float:
        if option.exercise_type is ExerciseType.AMERICAN:
            raise ValueError("Black-Scholes only supports European options")
        d1, d2 = d1_d2(option)
        discount = option.strike * math.exp(-option.rate * option.time_to_maturity)
        if option.option_type is OptionType.CALL:
            return option.spot * norm_cdf(d1) - discount * norm_cdf(d2)
        return discount * norm_cdf(-d2) - option.spot * norm_cdf(-d1)

    def method_name(self) -> str:
        return "Black-Scholes"

    def delta(self, option: Option) -> float:
        d1, _ = d1_d2(option)
        if option.option_type is OptionType.CALL:
            return norm_cdf(d1)
        return norm_cdf(d1) - 1.0

    def gamma(self, option: Option) -> float:
        d1, _ = d1_d2(option)
        return norm_pdf(d1) / (
            option.spot * option.volatility * math.sqrt(option.time_to_maturity)
        )

    def theta(self, option: Option) -> float:
        """Time decay per calendar day."""
        d1, d2 = d1_d2(option)
        s, k = option.spot, option.strike
        r, sigma, t = option.rate, option.volatility, option.time_to_maturity
        term1 = -(s * norm_pdf(d1) * sigma) / (2 * math.sqrt(t))
        if option.option_type is OptionType.CALL:
            term2 = r * k * math.exp(-r * t) * norm_cdf(d2)
            return (term1 - term2) / 365.0
        term2 = r * k * math.exp(-r * t) * norm_cdf(-d2)
        return (term1 + term2) / 365.0

    def vega(self, option: Option) -> float:
        """Price change for a one percentage point move in volatility."""
        d1, _ = d1_d2(option)
        t = option.time_to_maturity
        return option.spot * math.sqrt(t) * norm_pdf(d1) / 100.0

    def rho(self, option: Option) -> float:
        """Price change for a one percentage point move in the rate."""
        _, d2 = d1_d2(option)
        k, r, t = option.strike, option.rate, option.time_to_maturity
        if option.option_type is OptionType.CALL:
            return k * t * math.exp(-r * t) * norm_cdf(d2) / 100.0
        return -k * t * math.exp(-r * t) * norm_cdf(-d2) / 100.0