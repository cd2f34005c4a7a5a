"""Discount calculation service."""
from solidkit.domain.discount.strategies import DiscountStrategy


class DiscountCalculator:
    """Applies a discount strategy to prices."""

    def __init__(self, strategy: DiscountStrategy):
        self._strategy = strategy

    @property
    def strategy(self) -> DiscountStrategy:
        return self._strategy

    def calculate_discount(self, product_price: float) -> float:
        """Return the price after the bound strategy's discount."""
        return self._strategy.apply_discount(product_price)
