"""JSON formatter for scopescan."""

import json
from dataclasses import asdict

from ..checks import RunResult
from ..config import ScanConfig
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render a run result as JSON."""

    def render(self, result: RunResult, config: ScanConfig) -> None:
        print(self.format(result, config))

    def format(self, result: RunResult, config: ScanConfig) -> str:
        data = {
            "files_scanned": result.files_scanned,
            "skipped": [{"file": file, "reason": reason} for file, reason in result.skipped],
            "summary": {rule: len(items) for rule, items in sorted(result.by_rule().items())},
            "violations": [asdict(v) for v in result.violations],
            "duplicates": [
                {
                    "name": d.name,
                    "locations": [{"file": loc.file, "line": loc.line} for loc in d.locations],
                }
                for d in result.duplicates
            ],
        }
        return json.dumps(data, indent=2)
