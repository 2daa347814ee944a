"""Tests for CheckRunner."""

from pathlib import Path

import pytest

from scopescan.cache import ResultCache
from scopescan.checks import CheckRunner
from scopescan.config import ScanConfig
from scopescan.scanning import ScanContext


@pytest.fixture
def project(tmp_path, make_function):
    """A small project with one violation of each per-file kind and a duplicate."""
    files = {
        "a.js": "function helper() {\n  return 1;\n}\n",
        "b.js": "function helper() {\n  return 2;\n}\n",
        "long.js": make_function("big", 40) + "\n",
        "alias.js": "function compute() {}\nconst calc = compute;\n",
        "clean.js": "export const ok = (x) => x;\n",
    }
    for name, text in files.items():
        (tmp_path / name).write_text(text)
    return tmp_path


def _paths(root):
    return sorted(root.glob("*.js"))


class TestScanText:
    """Per-file checks over in-memory text."""

    def test_enabled_checks_only(self, make_function):
        """Disabled checks produce nothing."""
        runner = CheckRunner(ScanConfig(cache_enabled=False, enabled_checks=("alias",)))
        text = make_function("big", 40) + "\nfunction compute() {}\nconst calc = compute;\n"
        report = runner.scan_text("a.js", text)
        assert {v.rule for v in report.violations} == {"alias"}
        assert report.declared_names == []

    def test_own_lines_recorded(self, nested_source, offline_config):
        """Reports carry every function's own lines."""
        report = CheckRunner(offline_config).scan_text("n.js", nested_source)
        assert sorted(report.own_lines) == [3, 7]

    def test_context_shared_across_checks(self, nested_source, offline_config):
        """Checks looking at the same text reuse a caller-owned memo."""
        context = ScanContext()
        runner = CheckRunner(offline_config, context=context)
        runner.scan_text("n.js", nested_source)
        assert context.hits > 0
        assert len(context) > 0

    def test_memo_not_kept_between_files(self, nested_source, offline_config):
        """Without a caller-owned memo nothing outlives a single file."""
        runner = CheckRunner(offline_config)
        runner.scan_text("n.js", nested_source)
        assert runner.context is None


class TestRun:
    """Whole runs over files on disk."""

    def test_violations(self, project, offline_config):
        """Per-file and cross-file violations are merged and sorted."""
        result = CheckRunner(offline_config).run(_paths(project), root_dir=project)
        assert result.files_scanned == 5
        assert [(v.file, v.rule) for v in result.violations] == [
            ("a.js", "duplicate-name"),
            ("alias.js", "alias"),
            ("b.js", "duplicate-name"),
            ("long.js", "function-length"),
        ]
        assert [d.name for d in result.duplicates] == ["helper"]
        assert result.has_violations

    def test_by_rule(self, project, offline_config):
        """Violations group by rule."""
        result = CheckRunner(offline_config).run(_paths(project), root_dir=project)
        assert len(result.by_rule()["duplicate-name"]) == 2

    def test_own_lines_across_files(self, project, offline_config):
        """own_lines flattens every report."""
        result = CheckRunner(offline_config).run(_paths(project), root_dir=project)
        assert 42 in result.own_lines
        assert len(result.own_lines) == 4

    def test_unreadable_file_skipped(self, project, offline_config):
        """Binary files are skipped and recorded, not fatal."""
        (project / "blob.js").write_bytes(b"\x00\x01\x02")
        result = CheckRunner(offline_config).run(_paths(project), root_dir=project)
        assert result.skipped == [("blob.js", "Not a text file: " + str(project / "blob.js"))]
        assert result.files_scanned == 5

    def test_parallel_matches_sequential(self, tmp_path, make_function, offline_config):
        """Thread-pool runs give the same result as sequential runs."""
        for i in range(15):
            (tmp_path / f"f{i:02d}.js").write_text(make_function("shared", 30 + i) + "\n")
        paths = _paths(tmp_path)

        parallel = CheckRunner(offline_config).run(paths, root_dir=tmp_path)
        sequential = CheckRunner(offline_config).run(paths, root_dir=tmp_path, parallel=False)

        assert parallel.violations == sequential.violations
        assert [r.file for r in parallel.reports] == [r.file for r in sequential.reports]
        assert len(parallel.duplicates[0].locations) == 15

    def test_without_duplicate_check(self, project):
        """Disabling duplicate-name skips the cross-file fold."""
        config = ScanConfig(cache_enabled=False, enabled_checks=("function-length",))
        result = CheckRunner(config).run(_paths(project), root_dir=project)
        assert result.duplicates == []
        assert {v.rule for v in result.violations} == {"function-length"}

    def test_result_cache(self, project, tmp_path):
        """A second run over unchanged files is served from the cache."""
        config = ScanConfig()
        cache = ResultCache(directory=str(tmp_path / "cache"))
        try:
            first = CheckRunner(config, cache=cache).run(_paths(project), root_dir=project)
            second = CheckRunner(config, cache=cache).run(_paths(project), root_dir=project)
        finally:
            cache.close()

        assert first.cached_count == 0
        assert second.cached_count == 5
        assert second.violations == first.violations

    def test_display_path_without_root(self, project, offline_config):
        """Without a root, files are reported as given."""
        path = project / "long.js"
        result = CheckRunner(offline_config).run([path])
        assert result.violations[0].file == str(path)

    def test_cached_report_uses_current_root(self, tmp_path, make_function):
        """A cache hit reports violations under the current run's identifiers."""
        src = tmp_path / "proj" / "src"
        src.mkdir(parents=True)
        path = src / "long.js"
        path.write_text(make_function("big", 40) + "\n")
        config = ScanConfig(enabled_checks=("function-length",))

        with ResultCache(directory=str(tmp_path / "cache")) as cache:
            first = CheckRunner(config, cache=cache).run([path], root_dir=tmp_path / "proj")
            second = CheckRunner(config, cache=cache).run([path], root_dir=src)

        assert [v.file for v in first.violations] == ["src/long.js"]
        assert second.cached_count == 1
        assert second.reports[0].file == "long.js"
        assert [v.file for v in second.violations] == ["long.js"]

    def test_display_path_for_relative_input(self, project, offline_config, monkeypatch):
        """Relative paths are reported relative to an absolute root."""
        monkeypatch.chdir(project)
        result = CheckRunner(offline_config).run([Path("long.js")], root_dir=project)
        assert result.violations[0].file == "long.js"
