"""命名規約検証のMCPツール定義。"""

from pathlib import Path
from typing import Any, Literal

from fastmcp import FastMCP

from namelint.models.errors import InvalidArchitectureError, NamelintError
from namelint.models.report import LintReport
from namelint.models.rules import Architecture
from namelint.rules.table import parse_architecture
from namelint.services.lint import LintService


def _report_to_dict(report: LintReport) -> dict[str, Any]:
    return report.model_dump(mode="json")


def register_lint_tools(
    mcp: FastMCP,
    lint_service: LintService,
    default_architecture: Architecture | None = None,
) -> None:
    """命名規約検証のMCPツールを登録する。"""

    def _architecture(value: str | None) -> Architecture | str:
        if value:
            return value
        if default_architecture is None:
            raise InvalidArchitectureError("", [a.value for a in Architecture])
        return default_architecture

    @mcp.tool()
    async def lint_identifiers(
        names: list[str],
        architecture: str | None = None,
        kind: Literal["model", "column"] = "model",
        layer: str | None = None,
    ) -> dict[str, Any]:
        """モデル名またはカラム名を命名規約に基づいて検証する。

        各名前を独立に検証し、入力順を保持したレポートを返します。
        1件の不正な名前が他の名前の結果に影響することはありません。

        Args:
            names: 検証する名前のリスト（例: ["raw_acme__salesforce__account"]）。
            architecture: "medallion" または "traditional"。省略時はサーバー設定値。
            kind: "model"（モデル名）または "column"（カラム名）。
            layer: レイヤープレフィックス（例: "anl"）。エイリアス等プレフィックスの無い名前や
                カラムのキーポリシー判定に使用します。
        """
        try:
            report = lint_service.lint_names(names, _architecture(architecture), kind=kind, layer=layer)
            return _report_to_dict(report)
        except NamelintError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def lint_project(project_dir: str, architecture: str | None = None) -> dict[str, Any]:
        """dbtプロジェクト配下のモデル名・カラム名を一括検証する。

        models/ 配下の .sql ファイル名と、スキーマYAMLに定義されたカラム名を検証します。

        Args:
            project_dir: dbtプロジェクトのルートディレクトリ（サーバー側のパス）。
            architecture: "medallion" または "traditional"。省略時はサーバー設定値。
        """
        try:
            report = lint_service.lint_project(Path(project_dir), _architecture(architecture))
            return _report_to_dict(report)
        except NamelintError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def list_layers(architecture: str | None = None) -> dict[str, Any]:
        """アーキテクチャのレイヤー一覧と命名パターンを取得する。

        Args:
            architecture: "medallion" または "traditional"。省略時はサーバー設定値。
        """
        try:
            arch = parse_architecture(_architecture(architecture))
            layers = lint_service.list_layers(arch)
            return {
                "architecture": arch.value,
                "layers": [layer.model_dump(mode="json") for layer in layers],
            }
        except NamelintError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def explain_layer(prefix: str, architecture: str | None = None) -> dict[str, Any]:
        """指定レイヤーの命名ルール（パターン・単複・キー接尾辞）を取得する。

        Args:
            prefix: レイヤープレフィックス（例: "raw", "anl", "stg"）。
            architecture: "medallion" または "traditional"。省略時はサーバー設定値。
        """
        try:
            layer = lint_service.explain_layer(_architecture(architecture), prefix)
            return layer.model_dump(mode="json")
        except NamelintError as e:
            return {"error": type(e).__name__, "message": str(e)}
