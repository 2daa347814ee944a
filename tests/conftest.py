"""Shared test fixtures for scopescan tests."""

import os

import pytest

from scopescan.config import ScanConfig


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def _make_function(name: str, body_lines: int, indent: str = "") -> str:
    lines = [f"{indent}function {name}() {{"]
    lines.extend(f"{indent}  step{i}();" for i in range(body_lines))
    lines.append(f"{indent}}}")
    return "\n".join(lines)


@pytest.fixture
def make_function():
    """Factory for a function declaration spanning ``body_lines + 2`` lines."""
    return _make_function


@pytest.fixture
def hello_source():
    """Smallest complete function."""
    return 'function hello() {\n  log("hi");\n}\n'


@pytest.fixture
def nested_source():
    """Outer function of 10 lines with a 3-line inner function."""
    return (
        "function outer() {\n"  # 1
        "  const a = 1;\n"  # 2
        "  function inner() {\n"  # 3
        "    return a;\n"  # 4
        "  }\n"  # 5
        "  const b = 2;\n"  # 6
        "  const c = 3;\n"  # 7
        "  const d = 4;\n"  # 8
        "  return inner() + b + c + d;\n"  # 9
        "}\n"  # 10
    )


@pytest.fixture
def class_source():
    """Class with two methods."""
    return (
        "class Store {\n"  # 1
        "  constructor(items) {\n"  # 2
        "    this.items = items;\n"  # 3
        "  }\n"  # 4
        "  get(key) {\n"  # 5
        "    return this.items[key];\n"  # 6
        "  }\n"  # 7
        "}\n"  # 8
    )


@pytest.fixture
def offline_config():
    """Default configuration without the on-disk cache."""
    return ScanConfig(cache_enabled=False)


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run with an empty home and working directory and no SCOPESCAN_* vars."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("SCOPESCAN_"):
            monkeypatch.delenv(key)
    return work
