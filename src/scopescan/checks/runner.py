"""CheckRunner: runs every enabled check over a set of files.

Per-file work (reading, scanning, per-file checks, declared-name extraction)
is independent and runs on a thread pool for larger batches. The cross-file
duplicate map is built afterwards by the coordinating thread, so it has a
single writer.

Usage:
    runner = CheckRunner(config)
    result = runner.run(file_paths, root_dir)
    for violation in result.violations:
        ...
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field, replace
from pathlib import Path
from threading import Lock
from typing import Optional

from ..cache import ResultCache, config_fingerprint
from ..config import DEFAULT_CONFIG, ScanConfig
from ..discovery import read_source
from ..exceptions import ScopeScanError
from ..logging_config import get_logger
from ..scanning import ScanContext, compute_own_lines, extract_declared_names, extract_functions
from .aliasing import check_aliases
from .comment_limits import check_comment_limit
from .destructuring import check_destructuring
from .duplicates import duplicate_violations, find_duplicate_names
from .function_length import check_function_length
from .models import DuplicateName, FileReport, Violation
from .type_annotations import check_inline_type_annotations

logger = get_logger(__name__)

# CPU count capped at 8 to avoid overwhelming I/O
_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)

# Below this many files the pool costs more than it saves
_PARALLEL_THRESHOLD = 10


@dataclass
class RunResult:
    """Everything one run produced.

    Attributes:
        reports: Per-file reports, sorted by file
        duplicates: Cross-file duplicate names
        violations: All violations, per-file and cross-file, sorted by location
        skipped: ``(file, reason)`` for files that could not be read
    """

    reports: list[FileReport] = field(default_factory=list)
    duplicates: list[DuplicateName] = field(default_factory=list)
    violations: list[Violation] = field(default_factory=list)
    skipped: list[tuple[str, str]] = field(default_factory=list)

    @property
    def files_scanned(self) -> int:
        return len(self.reports)

    @property
    def cached_count(self) -> int:
        return sum(1 for report in self.reports if report.cached)

    @property
    def own_lines(self) -> list[int]:
        """Own-line counts of every function in every scanned file."""
        return [count for report in self.reports for count in report.own_lines]

    def by_rule(self) -> dict[str, list[Violation]]:
        grouped: dict[str, list[Violation]] = {}
        for violation in self.violations:
            grouped.setdefault(violation.rule, []).append(violation)
        return grouped

    @property
    def has_violations(self) -> bool:
        return bool(self.violations)


class CheckRunner:
    """Runs the enabled checks over files or in-memory text.

    Attributes:
        config: Scan configuration
        context: Caller-owned memo kept across scans; when None each file
            gets a fresh memo that is dropped once its report is built
        cache: Optional on-disk cache of per-file reports
    """

    def __init__(
        self,
        config: ScanConfig = DEFAULT_CONFIG,
        cache: Optional[ResultCache] = None,
        context: Optional[ScanContext] = None,
    ) -> None:
        self.config = config
        self.cache = cache
        self.context = context
        self._max_workers = config.workers or _DEFAULT_WORKERS
        self._fingerprint = config_fingerprint(config)

    def scan_text(self, file: str, text: str) -> FileReport:
        """Run the per-file checks over ``text``, reporting under ``file``."""
        config = self.config
        context = self.context if self.context is not None else ScanContext()
        violations: list[Violation] = []

        if config.is_enabled("function-length"):
            violations.extend(
                check_function_length(
                    file, text, config.max_function_lines, config.ignored_functions, context
                )
            )
        if config.is_enabled("alias"):
            violations.extend(check_aliases(file, text, context))
        if config.is_enabled("destructuring"):
            violations.extend(check_destructuring(file, text))
        if config.is_enabled("excessive-comments"):
            violations.extend(check_comment_limit(file, text, config.max_inline_comments, context))
        if config.is_enabled("inline-type-annotation"):
            violations.extend(check_inline_type_annotations(file, text))

        declared = []
        if config.is_enabled("duplicate-name"):
            declared = extract_declared_names(text, context)
        metrics = compute_own_lines(extract_functions(text, context))

        return FileReport(
            file=file,
            violations=violations,
            declared_names=declared,
            own_lines=[metric.own_lines for metric in metrics],
        )

    def scan_file(self, file_path: Path, root_dir: Optional[Path] = None) -> FileReport:
        """Read and scan one file, consulting the result cache first.

        Raises:
            FileAccessError: If the file cannot be read
            BinaryFileError: If the file looks binary
        """
        file = _display_path(file_path, root_dir)

        if self.cache is not None:
            cached = self.cache.load(file_path, self._fingerprint)
            if cached is not None:
                return _relabel(cached, file)

        report = self.scan_text(file, read_source(file_path))

        if self.cache is not None:
            self.cache.store(file_path, self._fingerprint, report)
        return report

    def run(
        self,
        file_paths: list[Path],
        root_dir: Optional[Path] = None,
        parallel: bool = True,
    ) -> RunResult:
        """Scan all files, then fold declared names into duplicate findings.

        Args:
            file_paths: Files to scan
            root_dir: Root for relative file identifiers
            parallel: Use the thread pool for larger batches

        Returns:
            RunResult with reports and sorted violations
        """
        result = RunResult()
        skipped_lock = Lock()

        def _scan(fp: Path) -> Optional[FileReport]:
            try:
                return self.scan_file(fp, root_dir)
            except ScopeScanError as e:
                logger.warning(f"Skipping {fp}: {e.message}")
                with skipped_lock:
                    result.skipped.append((_display_path(fp, root_dir), e.message))
                return None

        if not parallel or len(file_paths) < _PARALLEL_THRESHOLD:
            for file_path in file_paths:
                report = _scan(file_path)
                if report is not None:
                    result.reports.append(report)
        else:
            logger.debug(f"Scanning {len(file_paths)} files with {self._max_workers} workers")
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                futures = {executor.submit(_scan, fp): fp for fp in file_paths}
                for future in as_completed(futures):
                    report = future.result()
                    if report is not None:
                        result.reports.append(report)

        result.reports.sort(key=lambda report: report.file)
        result.skipped.sort()

        violations = [v for report in result.reports for v in report.violations]

        if self.config.is_enabled("duplicate-name"):
            declared_by_file = {report.file: report.declared_names for report in result.reports}
            result.duplicates = find_duplicate_names(
                declared_by_file, self.config.allowed_duplicate_names
            )
            violations.extend(duplicate_violations(result.duplicates))

        result.violations = sorted(violations, key=lambda v: (v.file, v.line, v.rule))

        logger.info(
            f"Scanned {result.files_scanned} files ({result.cached_count} cached), "
            f"{len(result.violations)} violations, {len(result.skipped)} skipped"
        )
        return result


def _display_path(file_path: Path, root_dir: Optional[Path]) -> str:
    if root_dir is not None:
        try:
            return str(file_path.resolve().relative_to(root_dir.resolve()))
        except ValueError:
            pass
    return str(file_path)


def _relabel(report: FileReport, file: str) -> FileReport:
    """A cached report under the identifier of the current run."""
    return replace(
        report,
        file=file,
        violations=[replace(violation, file=file) for violation in report.violations],
        cached=True,
    )
