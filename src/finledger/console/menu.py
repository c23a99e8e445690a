"""Interactive console menu for the ledger."""

import logging
from typing import Callable

from finledger.console.formatting import format_operations, format_summary
from finledger.console.prompts import parse_amount, parse_rate
from finledger.core.exceptions import ValidationError
from finledger.domain.models import Income, Expense, Investment, InvestmentAdapter
from finledger.services.gateway import AccessControlledGateway

logger = logging.getLogger(__name__)

MENU_TEXT = """
--- Menu ---
1. Add income
2. Add expense
3. Add investment
4. List all operations
5. Show summary in another currency
0. Exit"""


class ConsoleMenu:
    """
    Text menu that drives an AccessControlledGateway.

    Input and output are injected so the loop can be driven from tests.
    Parse errors abort the current action and return to the menu; end of
    input ends the loop.
    """

    def __init__(
        self,
        gateway: AccessControlledGateway,
        base_currency: str,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self._gateway = gateway
        self._base_currency = base_currency
        self._input = input_fn
        self._output = output_fn
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_income,
            "2": self.add_expense,
            "3": self.add_investment,
            "4": self.show_operations,
            "5": self.show_summary,
        }

    def run(self) -> None:
        """Run the menu until the user exits or input ends."""
        while True:
            self._output(MENU_TEXT)
            try:
                choice = self._input("Your choice: ").strip()
            except EOFError:
                break
            self._output("")

            if choice == "0":
                self._output("Goodbye!")
                break

            action = self._actions.get(choice)
            if action is None:
                self._output("Unknown command!")
                continue

            try:
                action()
            except ValidationError as e:
                logger.info("Input rejected: %s", e.message)
                self._output(f"Invalid input: {e.message}")
            except EOFError:
                break

    def add_income(self) -> None:
        amount = parse_amount(self._input("Income amount: "))
        category = self._input("Category: ").strip()
        self._report(self._gateway.add(Income(amount=amount, category=category)))

    def add_expense(self) -> None:
        amount = parse_amount(self._input("Expense amount: "))
        category = self._input("Category: ").strip()
        self._report(self._gateway.add(Expense(amount=amount, category=category)))

    def add_investment(self) -> None:
        amount = parse_amount(self._input("Investment amount: "))
        sector = self._input("Sector: ").strip()
        investment = Investment(invested_amount=amount, sector=sector)
        self._report(self._gateway.add(InvestmentAdapter(investment)))

    def show_operations(self) -> None:
        for line in format_operations(self._gateway.list(), self._base_currency):
            self._output(line)

    def show_summary(self) -> None:
        rate = parse_rate(self._input("Exchange rate (e.g. USD = 0.027): "))
        currency_code = self._input("Currency code (e.g. USD): ").strip()
        self._output(format_summary(self._gateway.summarize(rate, currency_code)))

    def _report(self, result) -> None:
        self._output(result.message)
