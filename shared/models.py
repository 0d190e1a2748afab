"""
Passgen Result Models
======================

A ``check`` run produces one :class:`ScanResult`. It holds the findings
about the secret (strength tier, alphabet problems, dictionary verdict),
a one-line summary, and the raw :class:`~passgen.core.models.PasswordCheck`
dump. The console renderer and the JSON report both read from it.

Severities use the CVSS v3.1 qualitative names. A dictionary word is
CRITICAL, a weak or unevaluable secret is HIGH, and so on down to INFO.

References:
    - FIRST. (2019). Common Vulnerability Scoring System v3.1.
      https://www.first.org/cvss/v3.1/specification-document
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
import json as _json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Severity(str, Enum):
    """How much a finding weakens the secret, most severe first."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"

    @property
    def weight(self) -> int:
        """0 for CRITICAL up to 4 for INFO."""
        return _SEVERITY_ORDER.index(self)


_SEVERITY_ORDER: list[Severity] = list(Severity)


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


class Finding(BaseModel):
    """One observation about a checked secret.

    ``evidence`` is stored as text; dicts and lists passed in are
    serialised to JSON so the report stays flat. Evidence never holds the
    secret itself, only derived numbers such as entropy or word count.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="ignore",
    )

    severity: Severity
    title: str = Field(min_length=1, max_length=256)
    description: str = Field(min_length=1)
    evidence: str = ""
    recommendation: str = ""
    references: list[str] = Field(default_factory=list)

    @field_validator("evidence", mode="before")
    @classmethod
    def _evidence_as_text(cls, value: Any) -> str:
        if isinstance(value, (dict, list)):
            return _json.dumps(value, ensure_ascii=False, default=str)
        return value if isinstance(value, str) else str(value)


class ScanResult(BaseModel):
    """Findings and raw data from one passgen run.

    ``target`` is what the run was about, already masked by the caller;
    a raw secret must never be stored here.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    tool_name: str = Field(min_length=1)
    target: str = Field(min_length=1)
    start_time: _dt.datetime = Field(default_factory=_utcnow)
    end_time: Optional[_dt.datetime] = None
    findings: list[Finding] = Field(default_factory=list)
    summary: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def duration_seconds(self) -> float | None:
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def severity_counts(self) -> dict[str, int]:
        """Findings per severity name; every severity is present."""
        counts = dict.fromkeys((s.value for s in _SEVERITY_ORDER), 0)
        for finding in self.findings:
            counts[finding.severity.value] += 1
        return counts

    @property
    def highest_severity(self) -> Severity | None:
        if not self.findings:
            return None
        return min((f.severity for f in self.findings), key=lambda s: s.weight)

    @property
    def finding_count(self) -> int:
        return len(self.findings)

    def add_finding(self, finding: Finding) -> None:
        self.findings.append(finding)

    def finalize(self, summary: str | None = None) -> ScanResult:
        """Stamp *end_time* and set the summary; returns ``self``.

        Without an explicit *summary*, one is built from the non-zero
        severity counts.
        """
        self.end_time = _utcnow()
        if summary is None:
            tally = ", ".join(
                f"{name}: {n}" for name, n in self.severity_counts.items() if n
            )
            summary = f"{self.finding_count} finding(s) ({tally or 'none'})"
        self.summary = summary
        return self
