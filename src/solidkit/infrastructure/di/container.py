"""
Dependency Injection Container implementation.

The container owns one name-keyed registry per capability and assembles
consumers from them. Callers ask for an ``ErrorHandler`` bound to
``"fileLogger"`` and never see how the logger was built or which concrete
type it is.

The container is an ordinary object: build one, register variants on it and
pass it to whoever needs resolution. There is no process-wide instance.
"""
from typing import Optional, TextIO

from solidkit.application.services.discount_calculator import DiscountCalculator
from solidkit.application.services.error_handler import ErrorHandler
from solidkit.application.services.payment_processor import PaymentProcessor
from solidkit.domain.base.ports.logging_port import Logger
from solidkit.domain.discount.strategies import DiscountStrategy
from solidkit.domain.payment.payment_method import PaymentMethod
from solidkit.infrastructure.logging.logger import get_logger
from solidkit.infrastructure.registry.base_registry import BaseRegistry

logger = get_logger(__name__)


class DIContainer:
    """Dependency injection container for loggers, payment methods and discounts."""

    def __init__(self):
        """Initialize an empty container."""
        self._loggers: BaseRegistry[Logger] = BaseRegistry(kind="Logger")
        self._payment_methods: BaseRegistry[PaymentMethod] = BaseRegistry(kind="Payment method")
        self._discounts: BaseRegistry[DiscountStrategy] = BaseRegistry(kind="Discount")

    @property
    def loggers(self) -> BaseRegistry[Logger]:
        return self._loggers

    @property
    def payment_methods(self) -> BaseRegistry[PaymentMethod]:
        return self._payment_methods

    @property
    def discounts(self) -> BaseRegistry[DiscountStrategy]:
        return self._discounts

    # Loggers

    def register_logger(self, name: str, logger_impl: Logger) -> None:
        """Register a Logger implementation under a name."""
        self._loggers.register(name, logger_impl)

    def get_logger(self, name: str) -> Logger:
        """
        Get a registered Logger.

        Raises:
            UnregisteredDependencyError: If no logger is registered under the name
        """
        return self._loggers.resolve(name)

    def get_error_handler(self, logger_name: str) -> ErrorHandler:
        """
        Build an ErrorHandler bound to a registered Logger.

        Raises:
            UnregisteredDependencyError: If no logger is registered under the name
        """
        logger.debug(f"Building ErrorHandler with logger '{logger_name}'")
        return self._loggers.build_consumer(logger_name, ErrorHandler)

    # Payment methods

    def register_payment_method(self, name: str, method: PaymentMethod) -> None:
        """Register a PaymentMethod under a name."""
        self._payment_methods.register(name, method)

    def get_payment_method(self, name: str) -> PaymentMethod:
        """
        Get a registered PaymentMethod.

        Raises:
            UnregisteredDependencyError: If no payment method is registered under the name
        """
        return self._payment_methods.resolve(name)

    def get_payment_processor(self, method_name: str, stream: Optional[TextIO] = None) -> PaymentProcessor:
        """
        Build a PaymentProcessor bound to a registered PaymentMethod.

        Raises:
            UnregisteredDependencyError: If no payment method is registered under the name
        """
        logger.debug(f"Building PaymentProcessor with payment method '{method_name}'")
        return self._payment_methods.build_consumer(
            method_name, lambda method: PaymentProcessor(method, stream=stream)
        )

    # Discounts

    def register_discount(self, name: str, strategy: DiscountStrategy) -> None:
        """Register a DiscountStrategy under a name."""
        self._discounts.register(name, strategy)

    def get_discount(self, name: str) -> DiscountStrategy:
        """
        Get a registered DiscountStrategy.

        Raises:
            UnregisteredDependencyError: If no discount is registered under the name
        """
        return self._discounts.resolve(name)

    def get_discount_calculator(self, discount_name: str) -> DiscountCalculator:
        """
        Build a DiscountCalculator bound to a registered DiscountStrategy.

        Raises:
            UnregisteredDependencyError: If no discount is registered under the name
        """
        logger.debug(f"Building DiscountCalculator with discount '{discount_name}'")
        return self._discounts.build_consumer(discount_name, DiscountCalculator)
