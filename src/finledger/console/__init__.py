"""Console interaction layer."""

from finledger.console.menu import ConsoleMenu
from finledger.console.prompts import parse_amount, parse_rate, parse_role

__all__ = [
    "ConsoleMenu",
    "parse_amount",
    "parse_rate",
    "parse_role",
]
