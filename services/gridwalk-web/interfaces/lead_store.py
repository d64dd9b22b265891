"""Abstract interface for landing page lead capture."""

from abc import ABC, abstractmethod


class LeadStore(ABC):
    """Stores email addresses left on the landing page."""

    @abstractmethod
    def save_email(self, email: str, ip_address: str) -> str:
        """
        Records one email address.

        Args:
            email: The address the visitor entered.
            ip_address: The client address, or ``"unknown"``.

        Returns:
            The generated item key.

        Raises:
            TableAccessError: If the write fails.
        """
