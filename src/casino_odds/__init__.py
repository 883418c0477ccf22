"""Live win/lose/tie odds for casino card games."""

__version__ = "0.1.0"
