"""Base formatter interface for scopescan output rendering."""

from abc import ABC, abstractmethod

from ..checks import RunResult
from ..config import ScanConfig


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: RunResult, config: ScanConfig) -> None:
        """Render a run result to stdout."""

    @abstractmethod
    def format(self, result: RunResult, config: ScanConfig) -> str:
        """Return formatted string representation of a run result."""
