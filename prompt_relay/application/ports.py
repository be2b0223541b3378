"""
Application ports - abstract interfaces for external dependencies.

These interfaces define the contracts that the application layer needs
from external systems, following the Dependency Inversion Principle.
"""

from abc import ABC, abstractmethod


class TextGeneratorPort(ABC):
    """Abstract interface for the remote generation service."""

    @abstractmethod
    async def generate(self, text: str) -> str:
        """Generate text for ``text``.

        Raises:
            UpstreamError: on any failure, carrying the underlying message.
        """
        pass
