"""Payment domain - payment method abstraction and its variants."""

from .payment_method import DEFAULT_CURRENCY, CreditCard, PaymentMethod, PayPal

__all__ = ["PaymentMethod", "CreditCard", "PayPal", "DEFAULT_CURRENCY"]
