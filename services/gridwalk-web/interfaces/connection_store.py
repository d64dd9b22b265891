"""Abstract interface for reading data connections."""

from abc import ABC, abstractmethod

from response_models import Connection


class ConnectionStore(ABC):
    """Lists the data connections known to the deployment."""

    @abstractmethod
    def list_connections(self) -> list[Connection]:
        """
        Returns every stored connection.

        Raises:
            TableAccessError: If the read fails.
        """
