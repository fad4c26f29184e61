"""LintReportモデルのユニットテスト。"""

from namelint.models.report import IdentifierResult, LintReport, Violation, ViolationKind
from namelint.models.rules import Architecture


def _violation(identifier: str, kind: ViolationKind) -> Violation:
    return Violation(identifier=identifier, kind=kind, message="m", expected="e", actual=identifier)


class TestIdentifierResult:
    def test_passed_without_violations(self) -> None:
        result = IdentifierResult(identifier="raw_a__b__c", kind="model")
        assert result.passed is True
        assert result.violations == []

    def test_failed_with_violation(self) -> None:
        result = IdentifierResult(
            identifier="x",
            kind="model",
            violations=[_violation("x", ViolationKind.UNKNOWN_LAYER)],
        )
        assert result.passed is False


class TestLintReport:
    def test_empty_report(self) -> None:
        report = LintReport(architecture=Architecture.MEDALLION)
        assert report.total_checked == 0
        assert report.total_passed == 0
        assert report.all_passed is True
        assert report.violations_by_kind == {}

    def test_counts_and_grouping(self) -> None:
        report = LintReport(
            architecture=Architecture.MEDALLION,
            results=[
                IdentifierResult(identifier="ok", kind="model"),
                IdentifierResult(
                    identifier="b",
                    kind="model",
                    violations=[_violation("b", ViolationKind.PLURALIZATION)],
                ),
                IdentifierResult(
                    identifier="a",
                    kind="column",
                    violations=[_violation("a", ViolationKind.KEY_NAMING)],
                ),
                IdentifierResult(
                    identifier="c",
                    kind="model",
                    violations=[_violation("c", ViolationKind.PLURALIZATION)],
                ),
            ],
        )
        assert report.total_checked == 4
        assert report.total_passed == 1
        assert report.all_passed is False
        grouped = report.violations_by_kind
        # 最初に出現した種別順、種別内は入力順
        assert list(grouped) == ["pluralization_violation", "key_naming_violation"]
        assert [v.identifier for v in grouped["pluralization_violation"]] == ["b", "c"]
        assert [v.identifier for v in report.violations] == ["b", "a", "c"]

    def test_serialization_includes_summary(self) -> None:
        report = LintReport(
            architecture=Architecture.TRADITIONAL,
            results=[IdentifierResult(identifier="stg_crm__account", kind="model", layer="stg")],
        )
        data = report.model_dump(mode="json")
        assert data["architecture"] == "traditional"
        assert data["total_checked"] == 1
        assert data["all_passed"] is True
        assert data["results"][0]["passed"] is True
