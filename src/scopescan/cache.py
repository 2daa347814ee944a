"""
On-disk result cache for scopescan.

Per-file reports are kept in a diskcache store between runs. An entry is
addressed by the file's path, modification time and size plus a fingerprint
of the settings that shape a per-file report, so editing a file or changing
a threshold makes its old entry unreachable. Stale entries age out through
the TTL.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from diskcache import Cache

from .logging_config import get_logger

if TYPE_CHECKING:
    from .checks.models import FileReport
    from .config import ScanConfig

logger = get_logger(__name__)

# Bumped whenever FileReport changes shape, so old pickles are never loaded.
REPORT_FORMAT = 3


def config_fingerprint(config: ScanConfig) -> str:
    """Digest of the settings that change what a per-file report contains.

    ``allowed_duplicate_names`` is left out: it only affects the cross-file
    duplicate fold, which is never cached.
    """
    relevant = {
        "format": REPORT_FORMAT,
        "max_function_lines": config.max_function_lines,
        "max_inline_comments": config.max_inline_comments,
        "ignored_functions": sorted(config.ignored_functions),
        "enabled_checks": sorted(config.enabled_checks),
    }
    encoded = json.dumps(relevant, sort_keys=True)
    return hashlib.sha256(encoded.encode()).hexdigest()[:16]


class ResultCache:
    """
    diskcache-backed store of FileReport objects.

    A disabled cache never touches the disk: lookups miss and stores are
    dropped, so callers need no separate code path.
    """

    def __init__(
        self,
        directory: str = ".scopescan-cache",
        ttl_seconds: Optional[int] = 24 * 3600,
        enabled: bool = True,
    ):
        self.enabled = enabled
        self.directory = directory
        self.ttl_seconds = ttl_seconds or None
        self._store: Optional[Cache] = Cache(directory) if enabled else None
        self.hits = 0
        self.misses = 0

        if enabled:
            logger.debug(f"Result cache at {directory} (ttl={self.ttl_seconds}s)")

    @classmethod
    def from_config(cls, config: ScanConfig) -> ResultCache:
        return cls(
            directory=config.cache_dir,
            ttl_seconds=config.cache_ttl_seconds,
            enabled=config.cache_enabled,
        )

    def __enter__(self) -> ResultCache:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def entry_key(file_path: Path, fingerprint: str) -> str:
        """Key for ``file_path`` as it is on disk right now.

        A file that cannot be stat-ed gets a path-only key; reading it will
        fail anyway, so nothing is ever stored under it.
        """
        try:
            info = file_path.stat()
            stamp = f"{info.st_mtime_ns}:{info.st_size}"
        except OSError:
            stamp = "unreadable"
        raw = f"{file_path.resolve()}|{stamp}|{fingerprint}"
        return hashlib.sha256(raw.encode()).hexdigest()

    def load(self, file_path: Path, fingerprint: str) -> Optional[FileReport]:
        """Return the stored report for ``file_path`` or None."""
        if self._store is None:
            return None

        key = self.entry_key(file_path, fingerprint)
        try:
            report = self._store.get(key)
        except Exception as e:
            # A corrupt or foreign entry is a miss, never a failed scan.
            logger.warning(f"Cache read failed for {file_path}: {e}")
            report = None

        if report is None:
            self.misses += 1
            return None
        self.hits += 1
        return report

    def store(self, file_path: Path, fingerprint: str, report: FileReport) -> None:
        """Keep ``report`` for ``file_path`` until it changes or expires."""
        if self._store is None:
            return

        key = self.entry_key(file_path, fingerprint)
        try:
            self._store.set(key, report, expire=self.ttl_seconds)
        except Exception as e:
            logger.warning(f"Cache write failed for {file_path}: {e}")

    def clear(self) -> int:
        """Remove every entry and return how many were removed."""
        if self._store is None:
            return 0
        removed = self._store.clear()
        logger.info(f"Removed {removed} cached reports")
        return removed

    def info(self) -> dict:
        """Size and location of the store, for ``scopescan cache-info``."""
        if self._store is None:
            return {"enabled": False}
        return {
            "enabled": True,
            "directory": self._store.directory,
            "entries": len(self._store),
            "volume": self._store.volume(),
        }

    def close(self) -> None:
        if self._store is not None:
            self._store.close()
