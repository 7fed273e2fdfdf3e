"""
Payment Status Enum.

Lifecycle: INITIATED -> SUCCEEDED | FAILED | CANCELED
"""
from enum import Enum


class PaymentStatus(str, Enum):
    """Payment attempt status values."""

    INITIATED = "INITIATED"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
    CANCELED = "CANCELED"

    @property
    def is_terminal(self) -> bool:
        return self is not PaymentStatus.INITIATED
