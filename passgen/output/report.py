"""
Passgen Report Generator
=========================

Serialises a :class:`~shared.models.ScanResult` to JSON for CI pipelines
and other tooling. Secrets never appear in the report; only their masked
form is recorded as the target.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from shared.models import ScanResult


class PassgenReportGenerator:
    """Build and write JSON reports.

    Usage::

        reporter = PassgenReportGenerator(version="0.3.0")
        reporter.generate_json(result, Path("check.json"))
    """

    def __init__(self, version: str = "0.3.0") -> None:
        self.version = version

    def build(self, result: ScanResult) -> dict[str, Any]:
        """Return the report as a JSON-ready dictionary."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": self.version,
            },
            "summary": {
                "total_findings": result.finding_count,
                "severity_counts": result.severity_counts,
                "highest_severity": (
                    result.highest_severity.value
                    if result.highest_severity is not None
                    else None
                ),
                "duration_seconds": result.duration_seconds,
                "description": result.summary,
            },
            "findings": [f.model_dump(mode="json") for f in result.findings],
            "data": result.metadata,
        }

    def render_json(self, result: ScanResult) -> str:
        return json.dumps(self.build(result), indent=2, ensure_ascii=False, default=str)

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Write the JSON report to *output_path* and return the path.

        Parent directories are created as needed.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_json(result) + "\n", encoding="utf-8")
        return output_path
