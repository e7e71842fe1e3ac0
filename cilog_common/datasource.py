"""
Abstract interface for log datasources.

This module defines the contract that any CI backend must follow, allowing
the sync orchestrator to mirror logs without knowing which server they
come from.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Datasource(ABC):
    """
    Abstract base class for an upstream log-producing service.

    Implementations own their configuration and any server-side state they
    cache (such as a builder mapping); nothing is shared between instances.
    """

    @property
    def name(self) -> str:
        """Name of the output subdirectory this source writes under."""
        return type(self).__name__

    def load_builders(self) -> "Datasource":
        """
        Refresh whatever builder listing the source caches.

        Sources without such a listing need not override this.
        """
        return self

    @abstractmethod
    def download_logs(
        self, output_dir: Path, tail: int = 100, verbose: bool = False
    ) -> None:
        """
        Download logs for the most recent builds into output_dir.

        Args:
            output_dir: Directory this source's logs are written under
            tail: Number of most recent builds per builder to mirror
            verbose: Narrate progress at INFO level

        Raises:
            FetchError: If the server cannot be reached after retrying
        """
        pass
