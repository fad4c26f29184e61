"""FastMCPベースのMCPサーバーエントリポイント。"""

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from namelint.config import LinterConfig
from namelint.prompts.naming import register_naming_prompts
from namelint.resources.rules import register_rule_resources
from namelint.rules.table import RuleTable
from namelint.services.lint import LintService
from namelint.tools.lint import register_lint_tools


def create_server(config: LinterConfig | None = None) -> FastMCP:
    """namelint MCPサーバーを作成し、ツール・リソース・プロンプトを登録する。

    Args:
        config: リンター設定。Noneの場合はデフォルト設定を使用。

    Returns:
        設定済みのFastMCPインスタンス。

    Raises:
        RuleTableError: 命名ルール定義が読み込めない場合。
    """
    if config is None:
        config = LinterConfig()

    mcp = FastMCP("namelint")

    # ルールテーブルは起動時に一度だけ読み込む
    rule_table = RuleTable.from_directory(config.config_dir)
    lint_service = LintService(
        rule_table,
        key_suffix_override=config.key_policy,
        report_all=config.report_all,
    )

    register_lint_tools(mcp, lint_service, default_architecture=config.architecture)
    register_rule_resources(mcp, rule_table)
    register_naming_prompts(mcp)

    # ヘルスチェックエンドポイント
    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok"})

    return mcp
