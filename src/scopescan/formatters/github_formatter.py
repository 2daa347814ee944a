"""GitHub Actions formatter: one workflow annotation per violation."""

from ..checks import RunResult
from ..config import ScanConfig
from .base import BaseFormatter


def _escape(message: str) -> str:
    # Workflow commands treat these characters as syntax
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class GithubFormatter(BaseFormatter):
    """Output GitHub Actions ``::error`` annotations."""

    def render(self, result: RunResult, config: ScanConfig) -> None:
        output = self.format(result, config)
        if output:
            print(output)

    def format(self, result: RunResult, config: ScanConfig) -> str:
        lines: list[str] = []
        for v in result.violations:
            lines.append(
                f"::error file={v.file},line={v.line},title={v.rule}::{_escape(v.detail)}"
            )
        for file, reason in result.skipped:
            lines.append(f"::warning file={file}::{_escape(reason)}")
        return "\n".join(lines)
