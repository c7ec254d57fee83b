# statement_tracker/outputs/base.py
from abc import ABC, abstractmethod


class EmptyExportError(ValueError):
    """Raised when an export is requested for an empty transaction list."""

    def __init__(self, message="Please add some transactions before downloading."):
        super().__init__(message)


class BaseOutput(ABC):
    @abstractmethod
    def write(self, transactions, totals):
        """Write transactions and their statement totals; return the file path."""
        pass
