"""Trade ledger and live portfolio valuation service."""

__version__ = "0.1.0"
