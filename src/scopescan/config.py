"""Configuration loading and management for scopescan.

Configuration sources are merged in priority order:
    1. Defaults (defined in ScanConfig)
    2. Global config (~/.scopescan.toml)
    3. Project config (./scopescan.toml)
    4. Explicit config file (--config)
    5. Environment variables (SCOPESCAN_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(max_function_lines=40)
    >>> config.max_function_lines
    40
    >>> config.max_inline_comments
    5
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import InvalidConfigError, ScopeScanError

Verbosity = Literal["quiet", "normal", "verbose"]

ALL_CHECKS = (
    "function-length",
    "duplicate-name",
    "alias",
    "destructuring",
    "excessive-comments",
    "inline-type-annotation",
)

# Directories skipped during discovery regardless of exclude_patterns
ALWAYS_SKIP = frozenset(
    {
        "node_modules",
        ".git",
        "_site",
        ".test-sites",
        "result",
    }
)


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for a scan run.

    Attributes:
        Check thresholds:
            max_function_lines: Own-line limit per function
            max_inline_comments: Countable inline comment lines per file
            ignored_functions: Function names exempt from the length limit
            allowed_duplicate_names: Names allowed to be declared in several files
            enabled_checks: Checks the runner executes

        File selection:
            extensions: File extensions to scan
            exclude_patterns: Glob patterns excluded from discovery
            max_file_size_mb: Files larger than this are skipped

        Performance:
            workers: Parallel scan workers (None = auto-detect)
            cache_enabled: Keep per-file results on disk between runs
            cache_dir: Directory for the result cache
            cache_ttl_hours: Cache time-to-live in hours

        Output:
            verbosity: Logging verbosity level
            max_reported: Violations listed per check before truncating
    """

    max_function_lines: int = 30
    max_inline_comments: int = 5
    ignored_functions: tuple[str, ...] = ()
    allowed_duplicate_names: tuple[str, ...] = ()
    enabled_checks: tuple[str, ...] = ALL_CHECKS

    extensions: tuple[str, ...] = (".js", ".mjs", ".cjs", ".jsx", ".ts", ".tsx")
    exclude_patterns: tuple[str, ...] = (
        "*.min.js",
        "*.bundle.js",
        "*.generated.*",
        "dist/*",
        "build/*",
        "coverage/*",
    )
    max_file_size_mb: float = 2.0

    workers: Optional[int] = None
    cache_enabled: bool = True
    cache_dir: str = ".scopescan-cache"
    cache_ttl_hours: int = 24

    verbosity: Verbosity = "normal"
    max_reported: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        # Tuples keep the dataclass hashable; TOML hands us lists.
        for name in (
            "ignored_functions",
            "allowed_duplicate_names",
            "enabled_checks",
            "extensions",
            "exclude_patterns",
        ):
            value = getattr(self, name)
            if isinstance(value, str):
                raise InvalidConfigError(name, value, "expected a list of strings")
            object.__setattr__(self, name, tuple(value))

        if self.max_function_lines < 1:
            raise InvalidConfigError(
                "max_function_lines", self.max_function_lines, "must be at least 1"
            )
        if self.max_inline_comments < 0:
            raise InvalidConfigError(
                "max_inline_comments", self.max_inline_comments, "must be non-negative"
            )
        unknown = sorted(set(self.enabled_checks) - set(ALL_CHECKS))
        if unknown:
            raise InvalidConfigError(
                "enabled_checks", ", ".join(unknown), f"choose from {', '.join(ALL_CHECKS)}"
            )
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.cache_ttl_hours < 0:
            raise InvalidConfigError(
                "cache_ttl_hours", self.cache_ttl_hours, "must be non-negative"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "expected quiet/normal/verbose")
        if self.max_reported < 1:
            raise InvalidConfigError("max_reported", self.max_reported, "must be at least 1")

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)

    @property
    def cache_ttl_seconds(self) -> int:
        """Get cache TTL in seconds."""
        return self.cache_ttl_hours * 3600

    def is_enabled(self, check: str) -> bool:
        return check in self.enabled_checks


DEFAULT_CONFIG = ScanConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> ScanConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep lower-priority values.

    Returns:
        Validated ScanConfig instance

    Raises:
        ScopeScanError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".scopescan.toml"
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global config"))

    project_config = Path.cwd() / "scopescan.toml"
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ScopeScanError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "config file"))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return ScanConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ScopeScanError(f"Invalid configuration: {e}")


def _read_config_file(path: Path, label: str) -> dict[str, Any]:
    try:
        data = _load_toml_file(path)
    except ScopeScanError:
        raise
    except Exception as e:
        raise ScopeScanError(f"Invalid {label} '{path}': {e}")

    # Settings may sit at the top level or under a [scopescan] table.
    section = data.get("scopescan", data)
    if not isinstance(section, dict):
        raise ScopeScanError(f"Invalid {label} '{path}': [scopescan] must be a table")
    return dict(section)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from SCOPESCAN_* environment variables.

    Supported environment variables:
        SCOPESCAN_MAX_FUNCTION_LINES: int
        SCOPESCAN_MAX_INLINE_COMMENTS: int
        SCOPESCAN_MAX_FILE_SIZE_MB: float
        SCOPESCAN_WORKERS: int
        SCOPESCAN_CACHE_ENABLED: bool (true/false/1/0)
        SCOPESCAN_CACHE_DIR: str
        SCOPESCAN_CACHE_TTL_HOURS: int
        SCOPESCAN_VERBOSITY: quiet/normal/verbose
        SCOPESCAN_MAX_REPORTED: int
        SCOPESCAN_ENABLED_CHECKS, SCOPESCAN_EXTENSIONS, ...: comma-separated lists

    Returns:
        Dict of field_name -> parsed_value for any SCOPESCAN_* vars found.
    """
    type_hints = get_type_hints(ScanConfig)

    result: dict[str, Any] = {}

    for field_name in ScanConfig.__dataclass_fields__:
        env_key = f"SCOPESCAN_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise ScopeScanError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Args:
        value: Raw string from environment
        type_hint: Type annotation from dataclass

    Returns:
        Parsed value or None if can't parse

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is tuple:
        return tuple(part.strip() for part in value.split(",") if part.strip())

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ScopeScanError: If neither tomllib nor tomli is available
        Exception: If TOML parsing fails
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ScopeScanError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
