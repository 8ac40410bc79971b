"""Personal-finance ledger API: accounts, sessions and transaction history."""

__version__ = "1.0.0"
