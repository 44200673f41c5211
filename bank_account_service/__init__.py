"""Bank account bookkeeping service."""

__version__ = "0.1.0"
