"""Interactive menu for tuning the numerical pricing methods."""

from __future__ import annotations

import sys
from typing import TextIO

from optionlab.pricing import OptionsPricingEngine

DEFAULT_BINOMIAL_STEPS = 1000
DEFAULT_MONTE_CARLO_SIMULATIONS = 100000

_RULE = "=" * 40


class ConfigurationMenu:
    """Text menu that adjusts binomial steps and Monte Carlo simulations."""

    def __init__(
        self,
        engine: OptionsPricingEngine,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.engine = engine
        self.binomial_steps = DEFAULT_BINOMIAL_STEPS
        self.monte_carlo_simulations = DEFAULT_MONTE_CARLO_SIMULATIONS
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

    def _read_int(self, prompt: str, min_value: int = 1) -> int:
        while True:
            self._write(prompt)
            try:
                value = int(self._read_token())
            except ValueError:
                value = None
            if value is not None and value >= min_value:
                return value
            self._write(f"Invalid input. Please enter a number >= {min_value}\n")

    def _display_current_config(self) -> None:
        self._write(
            f"\n{_RULE}\nCURRENT CONFIGURATION\n{_RULE}\n"
            f"Binomial Tree Steps: {self.binomial_steps}\n"
            f"Monte Carlo Simulations: {self.monte_carlo_simulations}\n"
            f"{_RULE}\n"
        )

    def show_menu(self) -> None:
        """Run the menu until the user chooses to return."""
        actions = {
            1: self.configure_binomial_steps,
            2: self.configure_monte_carlo_simulations,
            3: self.reset_to_defaults,
        }
        while True:
            self._display_current_config()
            self._write(
                "\nCONFIGURATION MENU:\n"
                "1. Configure Binomial Tree Steps\n"
                "2. Configure Monte Carlo Simulations\n"
                "3. Reset to Defaults\n"
                "4. Return to Main Menu\n"
                "Choice (1-4): "
            )
            try:
                choice = int(self._read_token())
            except ValueError:
                self._write("Invalid input. Please enter a number.\n")
                continue
            if choice == 4:
                return
            action = actions.get(choice)
            if action is None:
                self._write("Invalid choice. Please enter 1-4.\n")
            else:
                action()

    def configure_binomial_steps(self) -> None:
        self._write(
            "\nBinomial Tree Configuration:\n"
            f"Current steps: {self.binomial_steps}\n"
            "Recommended range: 100-5000 (higher = more accurate but slower)\n"
        )
        self.binomial_steps = self._read_int("Enter new number of steps: ", 10)
        self.engine.binomial_steps = self.binomial_steps
        self._write(f"Binomial steps updated to: {self.binomial_steps}\n")

    def configure_monte_carlo_simulations(self) -> None:
        self._write(
            "\nMonte Carlo Configuration:\n"
            f"Current simulations: {self.monte_carlo_simulations}\n"
            "Recommended range: 10,000-1,000,000 (higher = more accurate but slower)\n"
        )
        self.monte_carlo_simulations = self._read_int(
            "Enter new number of simulations: ", 1000
        )
        self.engine.monte_carlo_simulations = self.monte_carlo_simulations
        self._write(
            f"Monte Carlo simulations updated to: {self.monte_carlo_simulations}\n"
        )

    def reset_to_defaults(self) -> None:
        self.binomial_steps = DEFAULT_BINOMIAL_STEPS
        self.monte_carlo_simulations = DEFAULT_MONTE_CARLO_SIMULATIONS
        self.engine.binomial_steps = self.binomial_steps
        self.engine.monte_carlo_simulations = self.monte_carlo_simulations
        self._write("Configuration reset to defaults.\n")