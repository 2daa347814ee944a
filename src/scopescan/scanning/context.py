"""Caller-owned memoization of scan results.

Scans are pure functions of the file text, so their results can be shared
by every check that looks at the same file. The cache lives in a ScanContext
the caller creates and passes in; there is no module-level state, which keeps
concurrent scanning of different files safe.
"""

from __future__ import annotations

import hashlib
from threading import Lock
from typing import Callable, TypeVar

T = TypeVar("T")


def text_digest(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8", errors="surrogatepass")).hexdigest()


class ScanContext:
    """Memo of per-text scan results keyed by operation and content digest.

    Attributes:
        hits: Lookups answered from the memo
        misses: Lookups that ran the scan
    """

    def __init__(self) -> None:
        self._results: dict[tuple[str, str], object] = {}
        self._lock = Lock()
        self.hits = 0
        self.misses = 0

    def memoize(self, operation: str, text: str, compute: Callable[[str], T]) -> T:
        """Return the cached result of ``compute(text)``, computing it once.

        Cached values are shared, so ``compute`` must return immutable data
        (tuples of frozen records).
        """
        key = (operation, text_digest(text))
        with self._lock:
            if key in self._results:
                self.hits += 1
                return self._results[key]  # type: ignore[return-value]

        result = compute(text)
        with self._lock:
            self.misses += 1
            self._results.setdefault(key, result)
        return result

    def clear(self) -> None:
        with self._lock:
            self._results.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        return len(self._results)
