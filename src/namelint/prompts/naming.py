"""命名支援のMCPプロンプト定義。"""

from fastmcp import FastMCP


def register_naming_prompts(mcp: FastMCP) -> None:
    """命名関連のMCPプロンプトを登録する。"""

    def _rules_notes() -> str:
        return (
            "## 命名ルールの要点\n\n"
            "- セグメント間は `__`（ダブルアンダースコア）、単語間とレイヤープレフィックスの直後は `_` で区切ってください。\n"
            "- 使用できる文字は小文字英数字と `_` のみです。\n"
            "- ソースに近い層のテーブル名は単数形、分析層（anl / dw / bi）は複数形です。\n"
            "- 分析層のモデルは `fact_` / `dim_` を省略せずに付けてください（`f_`, `fi_`, `d_` は不可）。\n"
            "- キーカラムはレイヤーのキー接尾辞（`_key` または `_id`）に従ってください。"
            "親の名前がすでに `_key` で終わる場合は `_pk` を使用します。\n"
            "- タイムスタンプは `_at`、日付は `_date` を使用してください（`_datetime`, `_on` は旧表記）。\n\n"
        )

    @mcp.prompt()
    async def name_model(architecture: str, description: str) -> str:
        """新しいdbtモデルの名前を決めるためのプロンプト。

        レイヤーの選択から命名、検証までのフローをガイドします。

        Args:
            architecture: "medallion" または "traditional"。
            description: 作成するモデルの説明。
        """
        return (
            f"`{architecture}` アーキテクチャで次のモデルの名前を決めます: {description}\n\n"
            "## 手順\n\n"
            f"1. `namelint://rules/{architecture}` リソースでレイヤー定義を確認してください。\n"
            "2. モデルの役割に合うレイヤーを選び、`explain_layer` ツールで命名パターンを確認してください。\n"
            "3. パターンに沿って名前の候補を作成してください。\n"
            "4. `lint_identifiers` ツールで候補を検証してください。\n"
            "5. 違反があれば `expected` の値を参考に修正し、違反がなくなるまで再検証してください。\n\n"
            + _rules_notes()
        )

    @mcp.prompt()
    async def review_naming(architecture: str, project_dir: str) -> str:
        """既存dbtプロジェクトの命名をレビューするためのプロンプト。

        プロジェクト全体を検証し、違反の修正方針を提示するフローをガイドします。

        Args:
            architecture: "medallion" または "traditional"。
            project_dir: dbtプロジェクトのルートディレクトリ。
        """
        return (
            f"dbtプロジェクト `{project_dir}` の命名を `{architecture}` アーキテクチャの規約でレビューします。\n\n"
            "## 手順\n\n"
            "1. `lint_project` ツールでプロジェクト全体を検証してください。\n"
            "2. `violations_by_kind` を確認し、違反の種類ごとに件数を利用者に報告してください。\n"
            "3. `unknown_layer` の違反はレイヤーの割り当て自体を利用者と相談してください。\n"
            "4. その他の違反は `expected` の値をもとにリネーム案を提示してください。\n"
            "5. リネームは下流モデルの `ref()` にも影響するため、変更対象の一覧を必ず示してください。\n\n"
            + _rules_notes()
        )
