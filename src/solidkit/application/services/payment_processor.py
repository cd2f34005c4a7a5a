"""Payment processing service."""
import sys
from typing import Optional, TextIO

from solidkit.domain.payment.payment_method import PaymentMethod


def process_payment(method: PaymentMethod, amount: float, stream: Optional[TextIO] = None) -> str:
    """Pay an amount with any payment method and print the confirmation."""
    confirmation = method.pay(amount)
    print(confirmation, file=stream if stream is not None else sys.stdout)
    return confirmation


class PaymentProcessor:
    """Processes payments with a single bound payment method."""

    def __init__(self, method: PaymentMethod, stream: Optional[TextIO] = None):
        self._method = method
        self._stream = stream

    @property
    def method(self) -> PaymentMethod:
        return self._method

    def process(self, amount: float) -> str:
        """Pay an amount and return the payment method's confirmation."""
        return process_payment(self._method, amount, self._stream)
