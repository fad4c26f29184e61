"""命名ルールのMCPリソース定義。"""

import yaml
from fastmcp import FastMCP

from namelint.rules.table import RuleTable, parse_architecture


def register_rule_resources(mcp: FastMCP, rule_table: RuleTable) -> None:
    """命名ルール関連のMCPリソースを登録する。"""

    @mcp.resource("namelint://rules/{architecture}")
    async def architecture_rules(architecture: str) -> str:
        """アーキテクチャのレイヤー定義を取得する。

        各レイヤーのプレフィックス、命名パターン、単数形・複数形ポリシー、
        キー接尾辞を返します。architecture は "medallion" または "traditional"。
        """
        rules = rule_table.architecture_rules(parse_architecture(architecture))
        return yaml.dump(rules.model_dump(mode="json"), allow_unicode=True, default_flow_style=False, sort_keys=False)

    @mcp.resource("namelint://rules/conventions")
    async def conventions() -> str:
        """全アーキテクチャ共通の命名規約を取得する。

        fact_ / dim_ の省略形、単複判定の例外語、非推奨のタイムスタンプ接尾辞などを返します。
        """
        data = rule_table.conventions.model_dump(mode="json")
        return yaml.dump(data, allow_unicode=True, default_flow_style=False, sort_keys=False)
