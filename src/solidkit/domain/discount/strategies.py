"""
Discount strategies.

New kinds of discount are added as new subclasses of ``DiscountStrategy``;
the calculator that applies them never changes.
"""
from abc import ABC, abstractmethod
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DiscountStrategy(BaseModel, ABC):
    """Base class for all discount strategies."""
    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def apply_discount(self, price: float) -> float:
        """Return the price after the discount is applied."""


class NoDiscount(DiscountStrategy):
    """Leaves the price untouched."""

    def apply_discount(self, price: float) -> float:
        return price


class PercentageDiscount(DiscountStrategy):
    """Takes a fixed percentage off the price, rounded to cents."""

    percent: float = Field(..., ge=0, le=100, description="Discount rate in percent")

    def apply_discount(self, price: float) -> float:
        return round(price * (1 - self.percent / 100), 2)


class FixedDiscount(PercentageDiscount):
    """Standard 10% discount."""

    percent: Literal[10] = 10


class StudentDiscount(PercentageDiscount):
    """15% student discount."""

    percent: Literal[15] = 15


class BlackFridayDiscount(PercentageDiscount):
    """30% Black Friday discount."""

    percent: Literal[30] = 30
