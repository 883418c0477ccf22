"""Output formatting for terminal and tables."""

from casino_odds.formatters.text import TextFormatter
from casino_odds.formatters.table import TableFormatter

__all__ = ["TextFormatter", "TableFormatter"]
