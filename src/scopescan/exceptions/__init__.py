"""Exception hierarchy for scopescan."""

from .analysis import (
    AnalysisError,
    BinaryFileError,
    FileAccessError,
)
from .base import ScopeScanError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "ScopeScanError",
    "AnalysisError",
    "FileAccessError",
    "BinaryFileError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
