"""Interactive command-line option pricer."""

from __future__ import annotations

import argparse
import math
import sys
from typing import TextIO

from optionlab.option import ExerciseType, Option, OptionType
from optionlab.pricing import OptionsPricingEngine

_BANNER = (
    "\n"
    "╔══════════════════════════════════════════════════════════╗\n"
    "║              OPTIONS PRICING ENGINE                      ║\n"
    "║         Interactive Trading Tool Interface               ║\n"
    "╚══════════════════════════════════════════════════════════╝\n\n"
)


class InteractivePricer:
    """Prompts for option parameters and prints prices and Greeks."""

    def __init__(
        self,
        engine: OptionsPricingEngine | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.engine = engine if engine is not None else OptionsPricingEngine()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _read_token(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError("no more input")
        tokens = line.split()
        return tokens[0] if tokens else ""

    def _read_positive(self, prompt: str, min_value: float = 0.0) -> float:
        while True:
            self._write(prompt)
            try:
                value = float(self._read_token())
            except ValueError:
                value = None
            if value is not None and value > min_value:
                return value
            self._write("Invalid input. Please enter a positive number.\n")

    def _read_choice(self, title: str, first: str, second: str) -> int:
        while True:
            self._write(f"\n{title}\n1. {first}\n2. {second}\nChoice (1-2): ")
            token = self._read_token()
            if token in ("1", "2"):
                return int(token)
            self._write("Invalid choice. Please enter 1 or 2.\n")

    def format_results(self, option: Option) -> str:
        """The full report of parameters, prices and (for European options) Greeks."""
        is_call = option.option_type is OptionType.CALL
        is_european = option.exercise_type is ExerciseType.EUROPEAN
        lines = [
            "",
            "=" * 60,
            "OPTION PRICING RESULTS",
            "=" * 60,
            f"Spot Price: ${option.spot:.2f}",
            f"Strike Price: ${option.strike:.2f}",
            f"Risk-free Rate: {option.rate * 100:.2f}%",
            f"Volatility: {option.volatility * 100:.2f}%",
            f"Time to Maturity: {option.time_to_maturity:.2f} years",
            f"Option Type: {'Call' if is_call else 'Put'}",
            f"Exercise Type: {'European' if is_european else 'American'}",
            "",
            "PRICING RESULTS:",
            "-" * 30,
        ]
        for name, value in self.engine.price_all_methods(option).items():
            if math.isnan(value):
                lines.append(f"{name:>15}: Not Available")
            else:
                lines.append(f"{name:>15}: ${value:.4f}")

        if is_european:
            lines += ["", "GREEKS (Black-Scholes):", "-" * 30]
            lines += [
                f"{name:>15}: {value:.6f}"
                for name, value in self.engine.calculate_greeks(option).items()
            ]
        lines.append("=" * 60)
        return "\n".join(lines) + "\n"

    def run(self) -> None:
        """Price options until the user declines to continue."""
        self._write(_BANNER)
        while True:
            try:
                spot = self._read_positive("Enter spot price: $")
                strike = self._read_positive("Enter strike price: $")
                rate = self._read_positive(
                    "Enter risk-free rate (as decimal, e.g., 0.05 for 5%): "
                )
                volatility = self._read_positive(
                    "Enter volatility (as decimal, e.g., 0.2 for 20%): "
                )
                maturity = self._read_positive("Enter time to maturity (in years): ")
                option_type = (
                    OptionType.CALL
                    if self._read_choice("Select Option Type:", "Call Option", "Put Option") == 1
                    else OptionType.PUT
                )
                exercise_type = (
                    ExerciseType.EUROPEAN
                    if self._read_choice("Select Exercise Type:", "European", "American") == 1
                    else ExerciseType.AMERICAN
                )
                option = Option(
                    spot, strike, rate, volatility, maturity, option_type, exercise_type
                )
                self._write(self.format_results(option))

                self._write("\nPrice another option? (y/n): ")
                if self._read_token()[:1] not in ("y", "Y"):
                    self._write("\nThank you for using the Options Pricing Engine!\n")
                    return
            except EOFError:
                raise
            except Exception as exc:
                self._write(f"Error: {exc}\nPlease try again.\n\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="optionlab", description="Interactive option pricing."
    )
    parser.parse_args(argv)
    try:
        InteractivePricer().run()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())