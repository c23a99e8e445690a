#!/usr/bin/env python3
"""Console application entry point.

Run with: python -m finledger.main
"""

import logging
import sys

from finledger.app_context import AppContext
from finledger.config.logging_config import setup_logging
from finledger.console import ConsoleMenu, parse_role


def main() -> None:
    """Launch the console ledger."""
    setup_logging()
    logger = logging.getLogger(__name__)

    context = AppContext()
    settings = context.settings
    logger.info("Starting %s %s", settings.app_name, settings.app_version)

    print(f"=== {settings.app_name} ===")
    try:
        answer = input("Enter user role (Reader / Editor / Admin): ")
    except EOFError:
        return

    role = parse_role(answer, default=parse_role(settings.default_role))
    logger.info("Session role: %s", role.value)

    try:
        ConsoleMenu(context.gateway(role), base_currency=settings.base_currency).run()
    except KeyboardInterrupt:
        print()
    except Exception as e:
        logger.exception(f"Application error: {e}")
        print(f"\nApplication error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
