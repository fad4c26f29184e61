"""テスト共通フィクスチャ。"""

from pathlib import Path

import pytest

from namelint.config import LinterConfig
from namelint.rules.table import RuleTable
from namelint.services.lint import LintService
from namelint.validators.naming import NamingMatcher


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """環境変数の設定がテストに漏れないようにする。"""
    for name in ("NAMELINT_ARCHITECTURE", "NAMELINT_KEY_POLICY", "NAMELINT_REPORT_ALL", "NAMELINT_CONFIG_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("NAMELINT_LOG_LEVEL", "WARNING")


@pytest.fixture
def config_dir() -> Path:
    """設定ファイルディレクトリ。"""
    return Path(__file__).parent.parent / "config"


@pytest.fixture
def rule_table(config_dir: Path) -> RuleTable:
    """テスト用RuleTable。"""
    return RuleTable.from_directory(config_dir)


@pytest.fixture
def matcher(rule_table: RuleTable) -> NamingMatcher:
    """全違反を返すNamingMatcher。"""
    return NamingMatcher(rule_table, report_all=True)


@pytest.fixture
def lint_service(rule_table: RuleTable) -> LintService:
    """テスト用LintService（最初の違反のみ報告）。"""
    return LintService(rule_table)


@pytest.fixture
def linter_config(config_dir: Path) -> LinterConfig:
    """テスト用LinterConfig。"""
    return LinterConfig(config_dir=config_dir, architecture="medallion")


@pytest.fixture
def dbt_project(tmp_path: Path) -> Path:
    """medallion構成の小さなdbtプロジェクト。"""
    project = tmp_path / "shop"
    models = project / "models"
    (models / "raw").mkdir(parents=True)
    (models / "anl").mkdir(parents=True)
    (models / "raw" / "raw_acme__salesforce__account.sql").write_text("select 1", encoding="utf-8")
    (models / "raw" / "raw_acme__salesforce__contacts.sql").write_text("select 1", encoding="utf-8")
    (models / "anl" / "anl_sales__fact_orders.sql").write_text("select 1", encoding="utf-8")
    (models / "anl" / "dim_customers.sql").write_text("select 1", encoding="utf-8")
    (models / "anl" / "schema.yml").write_text(
        "version: 2\n"
        "models:\n"
        "  - name: anl_sales__fact_orders\n"
        "    columns:\n"
        "      - name: order_key\n"
        "      - name: customer_id\n"
        "      - name: ordered_at\n"
        "  - name: dim_customers\n"
        "    columns:\n"
        "      - name: customer_key\n"
        "      - name: created_on\n",
        encoding="utf-8",
    )
    return project
