"""
Core interfaces for the Academia model.
"""

from abc import ABC, abstractmethod


class UniversityMember(ABC):
    """Capability shared by every kind of person at the university."""

    @abstractmethod
    def display_details(self) -> str:
        """Return a human-readable dump of the member's fields."""
        pass

    @abstractmethod
    def calculate_payment(self) -> float:
        """Return the payment amount associated with this member."""
        pass
