"""
Demonstration sequences for each design principle.

Every demo is an assembly point: it picks concrete variants, binds them to
consumers and lets the consumers work through the abstraction only.
"""
from solidkit.application.services.discount_calculator import DiscountCalculator
from solidkit.application.services.error_handler import ErrorHandler
from solidkit.application.services.payment_processor import process_payment
from solidkit.domain.discount.product import Product
from solidkit.domain.discount.strategies import (
    BlackFridayDiscount,
    FixedDiscount,
    NoDiscount,
    StudentDiscount,
)
from solidkit.domain.payment.payment_method import DEFAULT_CURRENCY, CreditCard, PayPal
from solidkit.infrastructure.adapters.console_logger import ConsoleLogger
from solidkit.infrastructure.adapters.file_logger import FileLogger
from solidkit.infrastructure.di.container import DIContainer
from solidkit.infrastructure.exceptions import UnregisteredDependencyError

SEPARATOR = "--------------------"


def run_abstraction_demo(currency: str = DEFAULT_CURRENCY) -> None:
    """Pay with two different payment methods through one function."""
    credit_card = CreditCard(
        card_number="1234-5678-9012-3456",
        expiry_date="12/25",
        cvv="123",
        currency=currency,
    )
    paypal = PayPal(email="example@example.com", password="mysecretpassword", currency=currency)

    print("Shopping started...")
    process_payment(credit_card, 100.50)
    process_payment(paypal, 50.00)
    print("Shopping finished.")


def run_ocp_demo(price: float = 1500.00, currency: str = DEFAULT_CURRENCY) -> None:
    """Apply every discount strategy to the same product."""
    laptop = Product(name="Laptop", price=price)

    calculators = [
        ("after fixed discount", DiscountCalculator(FixedDiscount())),
        ("after student discount", DiscountCalculator(StudentDiscount())),
        ("after Black Friday discount", DiscountCalculator(BlackFridayDiscount())),
        ("no discount", DiscountCalculator(NoDiscount())),
    ]
    for label, calculator in calculators:
        discounted = calculator.calculate_discount(laptop.price)
        print(f"{laptop.name} ({label}): {discounted:.2f} {currency}")


def run_dip_demo(log_file: str = "app_errors.log") -> None:
    """Drive the same error handler with a console and a file logger."""
    print("DIP logging example")

    error_handler_with_console = ErrorHandler(ConsoleLogger())
    error_handler_with_console.handle_error(Exception("an error to be written to the console"))
    print(SEPARATOR)

    error_handler_with_file = ErrorHandler(FileLogger(log_file))
    error_handler_with_file.handle_error(Exception("another error to be written to the file"))
    print(SEPARATOR)


def run_ioc_demo(container: DIContainer) -> None:
    """
    Build error handlers from the container.

    Raises:
        UnregisteredDependencyError: If 'consoleLogger' or 'fileLogger' is not registered
    """
    print("IoC container example")

    error_handler_with_console = container.get_error_handler("consoleLogger")
    error_handler_with_console.handle_error(Exception("logged to the console through the container"))
    print(SEPARATOR)

    error_handler_with_file = container.get_error_handler("fileLogger")
    error_handler_with_file.handle_error(Exception("logged to the file through the container"))
    print(SEPARATOR)

    # A logger that was never registered
    try:
        container.get_error_handler("databaseLogger")
    except UnregisteredDependencyError as e:
        print(f"Error (as expected): {e}")
