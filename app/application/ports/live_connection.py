"""Port interface for one live push connection."""

from abc import ABC, abstractmethod


class ConnectionClosedError(Exception):
    """Raised when a push is attempted on a connection that is gone."""


class LiveConnection(ABC):
    @property
    @abstractmethod
    def is_open(self) -> bool:
        ...

    @abstractmethod
    async def send_text(self, data: str) -> None:
        """Push one text frame.

        Raises:
            ConnectionClosedError: the transport closed before or during the send.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close the transport. Must not raise if it is already closed."""
        ...
