"""Discount domain - discount strategies and the products they apply to."""

from .product import Product
from .strategies import (
    BlackFridayDiscount,
    DiscountStrategy,
    FixedDiscount,
    NoDiscount,
    PercentageDiscount,
    StudentDiscount,
)

__all__ = [
    "DiscountStrategy",
    "NoDiscount",
    "PercentageDiscount",
    "FixedDiscount",
    "StudentDiscount",
    "BlackFridayDiscount",
    "Product",
]
