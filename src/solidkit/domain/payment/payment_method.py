"""Payment method abstraction and concrete payment methods.

Every payment method, however it settles the charge, ends with the same
observable outcome: a confirmation line for the amount that was paid.
Callers only ever see ``PaymentMethod.pay``.
"""
from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field, SecretStr

DEFAULT_CURRENCY = "TL"


class PaymentMethod(BaseModel, ABC):
    """Base class for all payment methods."""
    model_config = ConfigDict(frozen=True)

    currency: str = Field(DEFAULT_CURRENCY, description="Currency code used in confirmations")

    @abstractmethod
    def pay(self, amount: float) -> str:
        """Pay the given amount and return a confirmation message."""


class CreditCard(PaymentMethod):
    """Credit card payment."""

    card_number: str = Field(..., description="Card number as printed on the card")
    expiry_date: str = Field(..., description="Expiry date in MM/YY form")
    cvv: SecretStr = Field(..., description="Card verification value")

    def pay(self, amount: float) -> str:
        return f"Paid {amount:.2f} {self.currency} by credit card. Card number: {self.card_number}"


class PayPal(PaymentMethod):
    """PayPal account payment."""

    email: str = Field(..., description="PayPal account e-mail")
    password: SecretStr = Field(..., description="PayPal account password")

    def pay(self, amount: float) -> str:
        return f"Paid {amount:.2f} {self.currency} with PayPal. E-mail: {self.email}"
