"""Option contracts, multi-leg strategies and the pricing engine interface."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class OptionType(enum.Enum):
    CALL = 0
    PUT = 1


class ExerciseType(enum.Enum):
    EUROPEAN = 0
    AMERICAN = 1


class PositionType(enum.Enum):
    LONG = 0
    SHORT = 1


@dataclass(frozen=True)
class Option:
    """A vanilla option on a single underlying."""

    spot: float
    strike: float
    rate: float
    volatility: float
    time_to_maturity: float
    option_type: OptionType
    exercise_type: ExerciseType

    def payoff(self, spot_price: float) -> float:
        """Intrinsic value of the option at the given underlying price."""
        if self.option_type is OptionType.CALL:
            return max(spot_price - self.strike, 0.0)
        return max(self.strike - spot_price, 0.0)

    def pnl(self, spot_price: float, premium: float, position: PositionType) -> float:
        """Profit or loss at expiry for a buyer (LONG) or a seller (SHORT)."""
        intrinsic = self.payoff(spot_price)
        if position is PositionType.LONG:
            return intrinsic - premium
        return premium - intrinsic


@dataclass
class OptionLeg:
    """One leg of a strategy: an option, its side, premium and size."""

    option: Option
    position: PositionType
    premium: float
    quantity: int = 1


@dataclass
class OptionStrategy:
    """A combination of option legs."""

    legs: list[OptionLeg] = field(default_factory=list)

    def add_leg(
        self,
        option: Option,
        position: PositionType,
        premium: float,
        quantity: int = 1,
    ) -> None:
        self.legs.append(OptionLeg(option, position, premium, quantity))

    def pnl(self, spot_price: float) -> float:
        """Total profit or loss of all legs at the given underlying price."""
        return sum(
            leg.option.pnl(spot_price, leg.premium, leg.position) * leg.quantity
            for leg in self.legs
        )

    def net_premium(self) -> float:
        """Premium received minus premium paid across all legs."""
        return sum(
            -leg.premium * leg.quantity
            if leg.position is PositionType.LONG
            else leg.premium * leg.quantity
            for leg in self.legs
        )

    def name(self) -> str:
        """A descriptive name for common one- and two-leg combinations."""
        if len(self.legs) == 1:
            (leg,) = self.legs
            side = "Long" if leg.position is PositionType.LONG else "Short"
            kind = "Call" if leg.option.option_type is OptionType.CALL else "Put"
            return f"{side} {kind}"
        if len(self.legs) == 2:
            if self._is_straddle():
                return "Straddle"
            if self._is_strangle():
                return "Strangle"
            if self._is_spread():
                return "Spread"
        return "Custom Strategy"

    def _pair(self) -> tuple[OptionLeg, OptionLeg] | None:
        if len(self.legs) != 2:
            return None
        first, second = self.legs
        return first, second

    def _is_straddle(self) -> bool:
        pair = self._pair()
        if pair is None:
            return False
        a, b = pair
        return (
            a.option.strike == b.option.strike
            and a.option.option_type is not b.option.option_type
            and a.position is b.position
        )

    def _is_strangle(self) -> bool:
        pair = self._pair()
        if pair is None:
            return False
        a, b = pair
        return (
            a.option.strike != b.option.strike
            and a.option.option_type is not b.option.option_type
            and a.position is b.position
        )

    def _is_spread(self) -> bool:
        pair = self._pair()
        if pair is None:
            return False
        a, b = pair
        return (
            a.option.option_type is b.option.option_type
            and a.position is not b.position
        )


class PricingEngine(ABC):
    """Interface shared by all option pricing methods."""

    @abstractmethod
    def price(self, option: Option) -> float:
        """Fair value of the option."""

    @abstractmethod
    def method_name(self) -> str:
        """Human-readable name of the pricing method."""