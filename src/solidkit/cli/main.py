"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Application initialization
- Demo routing and execution
"""
import argparse
import os
import sys
from typing import List, Optional

from solidkit._package import VERSION
from solidkit.bootstrap import Application
from solidkit.cli.demos import run_abstraction_demo, run_dip_demo, run_ioc_demo, run_ocp_demo
from solidkit.domain.base.exceptions import ConfigurationError
from solidkit.infrastructure.adapters.file_logger import FileLogger
from solidkit.infrastructure.exceptions import DependencyResolutionError, InfrastructureError
from solidkit.infrastructure.logging.logger import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "solidkit",
        description="solidkit - demonstrations of abstraction, OCP, DIP and an IoC container",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s abstraction                   # Pay with a credit card and PayPal
  %(prog)s ocp --price 2000              # Apply every discount to a 2000.00 product
  %(prog)s dip --log-file errors.log     # Error handler with console and file loggers
  %(prog)s --config app.json ioc         # Resolve loggers from the container
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured diagnostic log level')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')

    subparsers = parser.add_subparsers(dest='demo', help='Available demonstrations')
    subparsers.required = True

    subparsers.add_parser('abstraction', help='Payment methods behind one abstraction')

    ocp_parser = subparsers.add_parser('ocp', help='Discount strategies open for extension')
    ocp_parser.add_argument('--price', type=float, default=1500.00, help='Product price (default: 1500.00)')

    dip_parser = subparsers.add_parser('dip', help='Error handler depending on a Logger abstraction')
    dip_parser.add_argument('--log-file', default='app_errors.log', help='File logger target')

    ioc_parser = subparsers.add_parser('ioc', help='Loggers resolved from an IoC container')
    ioc_parser.add_argument('--log-file', help="Replace the 'fileLogger' target")

    return parser.parse_args(argv)


def execute_demo(args: argparse.Namespace, app: Application) -> None:
    """Run the selected demonstration."""
    currency = app.config_manager.app_config.currency

    if args.demo == 'abstraction':
        run_abstraction_demo(currency=currency)
    elif args.demo == 'ocp':
        run_ocp_demo(price=args.price, currency=currency)
    elif args.demo == 'dip':
        run_dip_demo(log_file=args.log_file)
    elif args.demo == 'ioc':
        container = app.container
        if args.log_file:
            container.register_logger('fileLogger', FileLogger(args.log_file))
        run_ioc_demo(container)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = parse_args(argv)
    logger = setup_logging()

    try:
        app = Application(args.config)
        app.initialize(log_level=args.log_level)
    except (ConfigurationError, InfrastructureError) as e:
        logger.error("Failed to initialize application", error=str(e))
        print(f"Error: {e}")
        sys.exit(1)

    try:
        execute_demo(args, app)
    except DependencyResolutionError as e:
        logger.error("Dependency resolution failed", demo=args.demo, error=str(e))
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
