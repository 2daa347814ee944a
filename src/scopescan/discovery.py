"""
File discovery and safe reading for scopescan.

The scanner core only ever sees text; this module decides which files to
hand it and reads them.
"""

import os
from collections.abc import Iterable
from pathlib import Path

from .config import ALWAYS_SKIP, ScanConfig
from .exceptions import BinaryFileError, FileAccessError, InvalidPathError
from .logging_config import get_logger

logger = get_logger(__name__)


def _skip_entry(name: str) -> bool:
    return name.startswith(".") or name.startswith("temp-") or name in ALWAYS_SKIP


def should_skip_file(filepath: Path, exclude_patterns: Iterable[str]) -> bool:
    """
    Check if a file should be skipped based on exclusion patterns.

    Args:
        filepath: File to check (relative to its discovery root)
        exclude_patterns: Glob patterns to exclude

    Returns:
        True if file should be skipped
    """
    for pattern in exclude_patterns:
        if filepath.match(pattern):
            return True
    return False


def discover_files(roots: Iterable[Path], config: ScanConfig) -> list[Path]:
    """
    Collect source files under ``roots``.

    Roots that are files are taken as-is when their extension matches.
    Directories are walked, skipping hidden entries, ``temp-*`` entries and
    the always-skipped build/dependency directories.

    Args:
        roots: Files or directories to scan
        config: Scan configuration (extensions, excludes, size cap)

    Returns:
        Sorted, de-duplicated list of file paths

    Raises:
        InvalidPathError: If a root does not exist
    """
    extensions = set(config.extensions)
    found: set[Path] = set()
    files_skipped = 0

    for root in roots:
        if not root.exists():
            raise InvalidPathError(root, "does not exist")

        if root.is_file():
            if root.suffix in extensions:
                found.add(root)
            continue

        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if not _skip_entry(d))
            for filename in filenames:
                if _skip_entry(filename):
                    continue
                filepath = Path(dirpath) / filename
                if filepath.suffix not in extensions:
                    continue
                if should_skip_file(filepath.relative_to(root), config.exclude_patterns):
                    files_skipped += 1
                    logger.debug(f"Skipped (pattern): {filepath}")
                    continue
                try:
                    size = filepath.stat().st_size
                except OSError as e:
                    files_skipped += 1
                    logger.warning(f"Cannot stat {filepath}: {e}")
                    continue
                if size > config.max_file_size_bytes:
                    files_skipped += 1
                    logger.debug(f"Skipped (size): {filepath} ({size} bytes)")
                    continue
                found.add(filepath)

    logger.info(f"Discovery complete: {len(found)} files, {files_skipped} skipped")
    return sorted(found)


def read_source(filepath: Path, encoding: str = "utf-8") -> str:
    """
    Read a source file as text.

    Args:
        filepath: File to read
        encoding: Text encoding

    Returns:
        File contents as string

    Raises:
        FileAccessError: If file cannot be read
        BinaryFileError: If the file contains NUL bytes
    """
    try:
        raw = filepath.read_bytes()
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")

    if b"\x00" in raw[:8192]:
        raise BinaryFileError(filepath)

    return raw.decode(encoding, errors="replace")
