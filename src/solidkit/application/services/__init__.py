"""Application services.

Each service is constructed with exactly one capability variant and only ever
talks to it through the capability abstraction.
"""

from .discount_calculator import DiscountCalculator
from .error_handler import ErrorHandler
from .payment_processor import PaymentProcessor, process_payment

__all__ = ["ErrorHandler", "PaymentProcessor", "process_payment", "DiscountCalculator"]
