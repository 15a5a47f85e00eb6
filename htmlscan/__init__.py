"""HTMLScan - static security analyzer for HTML markup."""

__version__ = "0.1.0"
