"""検証結果レポートのデータモデル。"""

from enum import StrEnum

from pydantic import BaseModel, Field, computed_field

from namelint.models.identifier import IdentifierKind
from namelint.models.rules import Architecture


class ViolationKind(StrEnum):
    """違反の種別。"""

    MALFORMED_IDENTIFIER = "malformed_identifier"
    UNKNOWN_LAYER = "unknown_layer"
    MODEL_TYPE = "model_type_violation"
    ABBREVIATION = "abbreviation_violation"
    PLURALIZATION = "pluralization_violation"
    KEY_NAMING = "key_naming_violation"
    TIMESTAMP_NAMING = "timestamp_naming_violation"


class Violation(BaseModel):
    """識別子1件に対する個別の違反。"""

    identifier: str
    kind: ViolationKind
    message: str
    expected: str
    actual: str


class IdentifierResult(BaseModel):
    """識別子1件の検証結果。"""

    identifier: str
    kind: IdentifierKind
    layer: str | None = None
    source: str | None = None
    violations: list[Violation] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return not self.violations


class LintReport(BaseModel):
    """バッチ検証のサマリー。入力順を保持し、同一入力からは同一の出力を生成する。"""

    architecture: Architecture
    results: list[IdentifierResult] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_checked(self) -> int:
        return len(self.results)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_passed(self) -> bool:
        return self.total_passed == self.total_checked

    @computed_field  # type: ignore[prop-decorator]
    @property
    def violations_by_kind(self) -> dict[str, list[Violation]]:
        """違反を種別ごとにまとめる。種別は最初に出現した順。"""
        grouped: dict[str, list[Violation]] = {}
        for result in self.results:
            for violation in result.violations:
                grouped.setdefault(violation.kind.value, []).append(violation)
        return grouped

    @property
    def violations(self) -> list[Violation]:
        return [v for r in self.results for v in r.violations]
