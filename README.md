# optionlab

Price European and American options three ways and explore their profit
and loss.

- **Black-Scholes** (`optionlab.black_scholes`): closed-form prices for
  European options, with the Greeks (delta, gamma, theta per day, vega and
  rho per 1%).
- **Binomial tree** (`optionlab.binomial`): a Cox-Ross-Rubinstein tree that
  handles early exercise for American options.
- **Monte Carlo** (`optionlab.monte_carlo`): risk-neutral simulation for
  European options, with antithetic and control-variate variants and a
  single-path generator.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Interactive console

```
optionlab
```

You are asked for the spot price, strike, risk-free rate, volatility (both
as decimals) and time to maturity in years, then for the option type and
exercise style. The console prints the price from every method and, for
European options, the Black-Scholes Greeks. A method that cannot price the
option (for example Black-Scholes on an American option) is shown as
"Not Available".

## Library use

```python
from optionlab.option import Option, OptionType, ExerciseType
from optionlab.pricing import OptionsPricingEngine

option = Option(100.0, 105.0, 0.05, 0.2, 0.25, OptionType.CALL, ExerciseType.EUROPEAN)

engine = OptionsPricingEngine()
print(engine.price(option))              # Black-Scholes by default
print(engine.price(option, "Binomial"))
print(engine.price_all_methods(option))  # NaN where a method does not apply
print(engine.calculate_greeks(option))

engine.binomial_steps = 1000
engine.monte_carlo_simulations = 50000
```

The individual engines, `BlackScholesEngine`, `BinomialEngine` and
`MonteCarloEngine`, can also be used on their own. `OptionStrategy` in
`optionlab.option` combines several legs and reports the strategy's profit
and loss, its net premium and a name for common two-leg shapes.

`ConfigurationMenu` in `optionlab.config_menu` is a text menu that sets the
binomial step count and the Monte Carlo simulation count of an
`OptionsPricingEngine`; it reads from and writes to any text streams you
pass it.

## Payoff and strategy data

`optionlab.analytics` turns query-string style parameters into plain
dictionaries ready to serialise as JSON:

- `parse_query_string("spot=100&strike=105")` splits a query into a dict.
- `option_from_params(params)` builds an `Option` from the keys `spot`,
  `strike`, `rate`, `volatility`, `timeToMaturity`, `optionType` and
  `exerciseType` (type and exercise codes of 0 mean call and European).
- `pricing_response(engine, params)` gives prices from every method and,
  for European options, the Greeks.
- `payoff_data(engine, params)` gives payoff and long/short P&L curves over
  50%-150% of the strike, with breakevens, maximum risk and profit.
- `strategy_data(engine, params)` does the same for a named strategy
  (`straddle`, `strangle`, `bullspread`, `bearspread`, `ironcondor`,
  `coveredcall`, `protectiveput`), long or short via `strategyPosition`,
  with an optional second strike in `strike2`.

`optionlab.page_markup` provides the static HTML of a dashboard page:
`render_head()` gives the document head with its style sheet and
`render_body()` the page layout.

## What the package does not do

There is no web server and no dashboard script: the package does not serve
HTTP, and the markup from `optionlab.page_markup` is not a working page on
its own. The analytics functions return data for you to serve however you
like. The only command is the interactive console, `optionlab`.