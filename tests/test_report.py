import json

from shared.models import Finding, ScanResult, Severity

from passgen.core.engine import PassgenEngine
from passgen.corpora.common import CommonWords
from passgen.output.report import PassgenReportGenerator


def _result(full):
    return PassgenEngine().check_password(
        "marylisa", full, CommonWords.from_custom(["mary", "lisa"])
    )


def test_build_layout(full):
    report = PassgenReportGenerator(version="9.9.9").build(_result(full))

    assert set(report) == {"report_metadata", "summary", "findings", "data"}
    assert report["report_metadata"]["version"] == "9.9.9"
    assert report["report_metadata"]["target"] == "m******a"
    assert report["summary"]["total_findings"] == 2
    assert report["summary"]["highest_severity"] == "HIGH"
    assert report["data"]["safety"]["verdict"] == "word_combination"


def test_json_omits_raw_secret(full):
    text = PassgenReportGenerator().render_json(_result(full))
    assert "marylisa" not in text
    json.loads(text)


def test_generate_json_writes_file(tmp_path, full):
    path = tmp_path / "out" / "check.json"
    written = PassgenReportGenerator().generate_json(_result(full), path)
    assert written == path
    assert json.loads(path.read_text(encoding="utf-8"))["summary"]["severity_counts"]["HIGH"] == 1


def test_scan_result_helpers():
    result = ScanResult(tool_name="passgen", target="x")
    assert result.highest_severity is None
    assert result.duration_seconds is None

    result.add_finding(Finding(title="a", description="low", severity=Severity.LOW))
    result.add_finding(Finding(title="b", description="critical", severity=Severity.CRITICAL))
    result.finalize()

    assert result.highest_severity is Severity.CRITICAL
    assert result.finding_count == 2
    assert result.duration_seconds >= 0
    assert "CRITICAL: 1" in result.summary


def test_finding_evidence_coerced_to_json():
    finding = Finding(
        title="t", description="d", severity=Severity.INFO, evidence={"word_count": 3}
    )
    assert json.loads(finding.evidence) == {"word_count": 3}
