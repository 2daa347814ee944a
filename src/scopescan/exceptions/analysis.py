"""Analysis-related exceptions: file access around the scanner core.

The scanner itself never raises for malformed source text; these errors
belong to the layers that read files and feed the scanner.
"""

from pathlib import Path

from .base import ScopeScanError


class AnalysisError(ScopeScanError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class BinaryFileError(AnalysisError):
    """Raised when a file handed to the scanner is not text."""

    def __init__(self, filepath: Path):
        super().__init__(
            f"Not a text file: {filepath}",
            details={"filepath": str(filepath)},
        )
        self.filepath = filepath
