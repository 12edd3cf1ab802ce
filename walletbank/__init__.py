"""HTTP service and service layer for wallet deposits, withdrawals and balance lookups."""

__version__ = "1.0.0"