"""LintReportの出力形式変換。"""

from typing import Literal

from namelint.models.report import LintReport

ReportFormat = Literal["text", "json", "github"]
FORMATS: tuple[str, ...] = ("text", "json", "github")


def render_text(report: LintReport) -> str:
    """人間向けのコンソール出力。"""
    lines: list[str] = []
    for result in report.results:
        for v in result.violations:
            location = f"{result.source}: " if result.source else ""
            lines.append(f"{location}{v.identifier} [{v.kind.value}] {v.message} (expected: {v.expected})")

    if lines:
        lines.append("")
        lines.append("Violations by kind:")
        for kind, violations in report.violations_by_kind.items():
            lines.append(f"  {kind}: {len(violations)}")

    status = "PASSED" if report.all_passed else "FAILED"
    lines.append(
        f"{status}: {report.total_passed}/{report.total_checked} identifiers passed "
        f"({report.architecture.value})"
    )
    return "\n".join(lines) + "\n"


def render_json(report: LintReport) -> str:
    return report.model_dump_json(indent=2) + "\n"


def render_github(report: LintReport) -> str:
    """GitHub Actionsのワークフローコマンド形式（CIアノテーション）。"""
    lines: list[str] = []
    for result in report.results:
        for v in result.violations:
            params = f"title={v.kind.value}"
            if result.source:
                params = f"file={result.source},{params}"
            message = f"{v.identifier}: {v.message} (expected: {v.expected})"
            lines.append(f"::error {params}::{_escape(message)}")
    return "\n".join(lines) + "\n" if lines else ""


def render(report: LintReport, fmt: ReportFormat = "text") -> str:
    if fmt == "json":
        return render_json(report)
    if fmt == "github":
        return render_github(report)
    return render_text(report)


def _escape(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
