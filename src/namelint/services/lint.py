"""識別子バッチの検証とレポート生成を行うサービス。"""

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

import structlog

from namelint.discovery.walker import collect_candidates
from namelint.models.errors import MalformedIdentifierError
from namelint.models.identifier import Candidate, IdentifierKind
from namelint.models.report import IdentifierResult, LintReport, Violation, ViolationKind
from namelint.models.rules import Architecture, LayerRule
from namelint.rules.table import RuleTable, parse_architecture
from namelint.validators.naming import NamingMatcher
from namelint.validators.tokenizer import tokenize

logger = structlog.get_logger(__name__)


class LintService:
    """命名規約の検証を行う。

    1件の識別子の失敗はその識別子の違反として記録され、バッチ全体は中断しない。
    """

    def __init__(
        self,
        rule_table: RuleTable,
        key_suffix_override: str | None = None,
        report_all: bool = False,
    ) -> None:
        self._table = rule_table
        self._matcher = NamingMatcher(rule_table, key_suffix_override=key_suffix_override, report_all=report_all)

    @classmethod
    def from_config_dir(cls, config_dir: Path, **kwargs: Any) -> "LintService":
        return cls(RuleTable.from_directory(config_dir), **kwargs)

    @property
    def rule_table(self) -> RuleTable:
        return self._table

    def lint(self, candidates: Iterable[Candidate | str], architecture: Architecture | str) -> LintReport:
        """識別子のバッチを検証する。

        Args:
            candidates: 検証対象。文字列はモデル名として扱う。
            architecture: 適用するアーキテクチャ。

        Returns:
            入力順を保持したLintReport。

        Raises:
            InvalidArchitectureError: アーキテクチャが不正な場合（識別子の処理前に発生）。
        """
        arch = parse_architecture(architecture)
        layers = self._table.layer_map(arch)
        results: list[IdentifierResult] = []

        for item in candidates:
            candidate = item if isinstance(item, Candidate) else Candidate(name=item)
            results.append(self._lint_one(candidate, arch, layers))

        report = LintReport(architecture=arch, results=results)
        logger.info(
            "lint_completed",
            architecture=arch.value,
            total_checked=report.total_checked,
            total_passed=report.total_passed,
        )
        return report

    def lint_names(
        self,
        names: Sequence[str],
        architecture: Architecture | str,
        kind: IdentifierKind = "model",
        layer: str | None = None,
    ) -> LintReport:
        """同じ種別・レイヤーの名前をまとめて検証する。"""
        return self.lint([Candidate(name=n, kind=kind, layer=layer) for n in names], architecture)

    def lint_project(self, project_dir: Path, architecture: Architecture | str) -> LintReport:
        """dbtプロジェクト配下のモデル名・カラム名を検証する。

        Raises:
            ProjectNotFoundError: modelsディレクトリが無い場合。
        """
        arch = parse_architecture(architecture)
        candidates = collect_candidates(project_dir, self._table.prefixes(arch))
        return self.lint(candidates, arch)

    def list_layers(self, architecture: Architecture | str) -> list[LayerRule]:
        return self._table.layers(parse_architecture(architecture))

    def explain_layer(self, architecture: Architecture | str, prefix: str) -> LayerRule:
        """レイヤーの命名ルールを返す。

        Raises:
            LayerNotFoundError: 該当レイヤーが無い場合。
        """
        return self._table.get_layer(parse_architecture(architecture), prefix)

    def _lint_one(
        self, candidate: Candidate, arch: Architecture, layers: Mapping[str, LayerRule]
    ) -> IdentifierResult:
        try:
            identifier = tokenize(candidate, layers)
        except MalformedIdentifierError as e:
            logger.debug("identifier_rejected", identifier=candidate.name, reason=e.reason)
            return IdentifierResult(
                identifier=candidate.name,
                kind=candidate.kind,
                layer=candidate.layer,
                source=candidate.source,
                violations=[
                    Violation(
                        identifier=candidate.name,
                        kind=ViolationKind.MALFORMED_IDENTIFIER,
                        message=e.reason,
                        expected=e.expected or "[a-z0-9_] with '__' between segments",
                        actual=candidate.name,
                    )
                ],
            )

        violations = self._matcher.match(identifier, arch)
        return IdentifierResult(
            identifier=candidate.name,
            kind=candidate.kind,
            layer=identifier.layer,
            source=candidate.source,
            violations=violations,
        )
