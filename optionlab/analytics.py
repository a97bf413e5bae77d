"""Query parsing and the pricing, payoff and strategy data served to the web page."""

from __future__ import annotations

import dataclasses
import re
from typing import Callable, Mapping

from optionlab.option import ExerciseType, Option, OptionType
from optionlab.pricing import BLACK_SCHOLES, OptionsPricingEngine

NUM_POINTS = 100
PROB_PROFIT = 65.5

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:infinity|inf|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")

Summary = dict[str, object]


def parse_query_string(query: str) -> dict[str, str]:
    """Split ``a=1&b=2`` into a dict; pieces without ``=`` are ignored, later keys win."""
    params: dict[str, str] = {}
    for pair in query.split("&"):
        key, sep, value = pair.partition("=")
        if sep:
            params[key] = value
    return params


def _required(params: Mapping[str, str], name: str) -> str:
    try:
        return params[name]
    except KeyError:
        raise ValueError(f"missing parameter: {name}") from None


def _to_float(text: str, name: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid number for {name}: {text!r}")
    return float(match.group(0))


def _to_int(text: str, name: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer for {name}: {text!r}")
    return int(match.group(0))


def _float_param(params: Mapping[str, str], name: str) -> float:
    return _to_float(_required(params, name), name)


def _int_param(params: Mapping[str, str], name: str) -> int:
    return _to_int(_required(params, name), name)


def option_from_params(params: Mapping[str, str]) -> Option:
    """Build an option from query parameters; type and exercise codes of 0 mean call and European."""
    spot = _float_param(params, "spot")
    strike = _float_param(params, "strike")
    rate = _float_param(params, "rate")
    volatility = _float_param(params, "volatility")
    maturity = _float_param(params, "timeToMaturity")
    option_type = OptionType.CALL if _int_param(params, "optionType") == 0 else OptionType.PUT
    exercise_type = (
        ExerciseType.EUROPEAN
        if _int_param(params, "exerciseType") == 0
        else ExerciseType.AMERICAN
    )
    return Option(spot, strike, rate, volatility, maturity, option_type, exercise_type)


def _r4(value: float) -> float:
    return round(value, 4)


def _r6(value: float) -> float:
    return round(value, 6)


def _price_grid(strike: float) -> list[float]:
    low = strike * 0.5
    step = (strike * 1.5 - low) / NUM_POINTS
    return [low + i * step for i in range(NUM_POINTS + 1)]


def _premium(engine: OptionsPricingEngine, option: Option) -> float:
    return engine.price_all_methods(option)[BLACK_SCHOLES]


def pricing_response(engine: OptionsPricingEngine, params: Mapping[str, str]) -> dict:
    """Prices from every method and, for European options, the Greeks."""
    option = option_from_params(params)
    prices = engine.price_all_methods(option)
    response: dict = {"prices": {name: _r6(value) for name, value in prices.items()}}
    if option.exercise_type is ExerciseType.EUROPEAN:
        greeks = engine.calculate_greeks(option)
        response["greeks"] = {name: _r6(value) for name, value in greeks.items()}
    return response


def payoff_data(engine: OptionsPricingEngine, params: Mapping[str, str]) -> dict:
    """Payoff and long/short P&L curves of a single option over 50%-150% of strike."""
    option = option_from_params(params)
    premium = _premium(engine, option)
    strike = option.strike
    is_call = option.option_type is OptionType.CALL
    grid = _price_grid(strike)
    payoffs = [option.payoff(price) for price in grid]

    breakeven = strike + premium if is_call else strike - premium
    max_profit_long: object = "Unlimited" if is_call else _r4(max(0.0, strike - premium))

    return {
        "prices": [_r4(p) for p in grid],
        "payoffs": [_r4(p) for p in payoffs],
        "pnl_long": [_r4(p - premium) for p in payoffs],
        "pnl_short": [_r4(premium - p) for p in payoffs],
        "breakeven_long": _r4(breakeven),
        "breakeven_short": _r4(breakeven),
        "maxRisk_long": _r4(premium),
        "maxRisk_short": "Unlimited",
        "premium": _r4(premium),
        "maxProfit_long": max_profit_long,
        "maxProfit_short": _r4(premium),
    }


@dataclasses.dataclass(frozen=True)
class _Inputs:
    engine: OptionsPricingEngine
    option: Option
    strike2: float | None
    position: str
    premium: float

    @property
    def is_long(self) -> bool:
        return self.position == "long"

    @property
    def is_short(self) -> bool:
        return self.position == "short"

    def leg_premium(self, strike: float, option_type: OptionType) -> float:
        leg = dataclasses.replace(self.option, strike=strike, option_type=option_type)
        return _premium(self.engine, leg)

    def second_strike(self, default: float) -> float:
        return default if self.strike2 is None else self.strike2


_Built = tuple[Callable[[float], float], Summary]


def _signed(inputs: _Inputs, value: float) -> float:
    return -value if inputs.is_short else value


def _long_volatility(inputs: _Inputs, call_strike: float, put_strike: float) -> _Built:
    total = inputs.leg_premium(call_strike, OptionType.CALL) + inputs.leg_premium(
        put_strike, OptionType.PUT
    )

    def pnl(price: float) -> float:
        value = max(price - call_strike, 0.0) + max(put_strike - price, 0.0) - total
        return _signed(inputs, value)

    if inputs.is_long:
        risk: object = _r4(total)
        profit: object = "Unlimited"
    else:
        risk, profit = "Unlimited", _r4(total)
    return pnl, {
        "netPremium": _r4(-total if inputs.is_long else total),
        "maxRisk": risk,
        "maxProfit": profit,
        "breakevens": [_r4(put_strike - total), _r4(call_strike + total)],
    }


def _straddle(inputs: _Inputs) -> _Built:
    strike = inputs.option.strike
    return _long_volatility(inputs, strike, strike)


def _strangle(inputs: _Inputs) -> _Built:
    strike = inputs.option.strike
    return _long_volatility(inputs, inputs.second_strike(strike + 5), strike)


def _spread_summary(inputs: _Inputs, net: float, width: float, breakeven: float) -> Summary:
    if inputs.is_long:
        risk, profit = net, width - net
    else:
        risk, profit = width - net, net
    return {
        "netPremium": _r4(-net if inputs.is_long else net),
        "maxRisk": _r4(risk),
        "maxProfit": _r4(profit),
        "breakevens": [_r4(breakeven)],
    }


def _bull_spread(inputs: _Inputs) -> _Built:
    long_strike = inputs.option.strike
    short_strike = inputs.second_strike(long_strike + 10)
    long_premium = inputs.leg_premium(long_strike, OptionType.CALL)
    short_premium = inputs.leg_premium(short_strike, OptionType.CALL)
    net = long_premium - short_premium

    def pnl(price: float) -> float:
        value = (max(price - long_strike, 0.0) - long_premium) + (
            short_premium - max(price - short_strike, 0.0)
        )
        return _signed(inputs, value)

    return pnl, _spread_summary(inputs, net, short_strike - long_strike, long_strike + net)


def _bear_spread(inputs: _Inputs) -> _Built:
    short_strike = inputs.option.strike
    long_strike = inputs.second_strike(short_strike + 10)
    long_premium = inputs.leg_premium(long_strike, OptionType.PUT)
    short_premium = inputs.leg_premium(short_strike, OptionType.PUT)
    net = long_premium - short_premium

    def pnl(price: float) -> float:
        value = (max(long_strike - price, 0.0) - long_premium) + (
            short_premium - max(short_strike - price, 0.0)
        )
        return _signed(inputs, value)

    return pnl, _spread_summary(inputs, net, long_strike - short_strike, long_strike - net)


def _iron_condor(inputs: _Inputs) -> _Built:
    strike = inputs.option.strike
    put_low, put_high = strike - 10, strike - 5
    call_low = strike + 5
    call_high = inputs.second_strike(strike + 10)
    put_low_premium = inputs.leg_premium(put_low, OptionType.PUT)
    put_high_premium = inputs.leg_premium(put_high, OptionType.PUT)
    call_low_premium = inputs.leg_premium(call_low, OptionType.CALL)
    call_high_premium = inputs.leg_premium(call_high, OptionType.CALL)
    credit = put_low_premium - put_high_premium + call_high_premium - call_low_premium

    def pnl(price: float) -> float:
        put_side = (
            put_low_premium
            - max(put_low - price, 0.0)
            - put_high_premium
            + max(put_high - price, 0.0)
        )
        call_side = (
            call_high_premium
            - max(price - call_high, 0.0)
            - call_low_premium
            + max(price - call_low, 0.0)
        )
        return _signed(inputs, put_side + call_side)

    if inputs.is_long:
        risk: object = _r4(put_high - put_low - credit)
        profit: object = _r4(credit)
    else:
        risk = profit = "Unlimited"
    return pnl, {
        "netPremium": _r4(-credit if inputs.is_long else credit),
        "maxRisk": risk,
        "maxProfit": profit,
        "breakevens": [_r4(put_high - credit), _r4(call_low + credit)],
    }


def _covered_call(inputs: _Inputs) -> _Built:
    spot, strike, premium = inputs.option.spot, inputs.option.strike, inputs.premium

    def pnl(price: float) -> float:
        return (price - spot) + premium - max(price - strike, 0.0)

    return pnl, {
        "netPremium": _r4(premium),
        "maxRisk": "Stock decline",
        "maxProfit": _r4(strike - spot + premium),
        "breakevens": [_r4(spot - premium)],
    }


def _protective_put(inputs: _Inputs) -> _Built:
    spot, strike, premium = inputs.option.spot, inputs.option.strike, inputs.premium

    def pnl(price: float) -> float:
        return (price - spot) + max(strike - price, 0.0) - premium

    return pnl, {
        "netPremium": _r4(-premium),
        "maxRisk": _r4(spot - strike + premium),
        "maxProfit": "Unlimited",
        "breakevens": [_r4(spot + premium)],
    }


_STRATEGIES: dict[str, Callable[[_Inputs], _Built]] = {
    "straddle": _straddle,
    "strangle": _strangle,
    "bullspread": _bull_spread,
    "bearspread": _bear_spread,
    "ironcondor": _iron_condor,
    "coveredcall": _covered_call,
    "protectiveput": _protective_put,
}


def strategy_data(engine: OptionsPricingEngine, params: Mapping[str, str]) -> dict:
    """P&L curve, premium, risk, profit and breakevens of a named multi-leg strategy."""
    option = option_from_params(params)
    strategy = _required(params, "strategy")
    position = params.get("strategyPosition", "long")
    strike2 = _to_float(params["strike2"], "strike2") if "strike2" in params else None
    premium = _premium(engine, option)

    try:
        build = _STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"Unknown strategy: {strategy}") from None

    grid = _price_grid(option.strike)
    pnl, summary = build(_Inputs(engine, option, strike2, position, premium))
    return {
        "prices": [_r4(p) for p in grid],
        "strategyPnL": [_r4(pnl(p)) for p in grid],
        **summary,
        "probProfit": PROB_PROFIT,
    }