"""namelintのコマンドラインインターフェース。

終了コード: 全識別子が合格なら0、違反があれば1、
設定エラー（不正なアーキテクチャや環境変数、プロジェクトやルール定義が無い）なら2。
"""

from pathlib import Path

import click
from pydantic import ValidationError

from namelint.config import LinterConfig
from namelint.logging_config import configure_logging
from namelint.models.errors import NamelintError
from namelint.models.report import LintReport
from namelint.renderers.report import FORMATS, render
from namelint.rules.table import parse_architecture
from namelint.services.lint import LintService

EXIT_VIOLATIONS = 1

architecture_option = click.option(
    "--architecture",
    "-a",
    envvar="NAMELINT_ARCHITECTURE",
    required=True,
    help="Layering convention: medallion or traditional.",
)
format_option = click.option(
    "--format",
    "fmt",
    type=click.Choice(FORMATS),
    default="text",
    show_default=True,
    help="Report format.",
)


@click.group()
@click.option("--config-dir", type=click.Path(path_type=Path, file_okay=False), help="Directory holding naming-rules/.")
@click.option("--key-policy", type=click.Choice(["_key", "_id"]), help="Force one key suffix for every layer.")
@click.option("--all-violations", is_flag=True, help="Report every violation instead of the first per identifier.")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]), help="Log level.")
@click.version_option(version="0.1.0")
@click.pass_context
def cli(
    ctx: click.Context,
    config_dir: Path | None,
    key_policy: str | None,
    all_violations: bool,
    log_level: str | None,
) -> None:
    """Lint dbt model and column names against layering conventions."""
    overrides: dict[str, object] = {}
    if config_dir is not None:
        overrides["config_dir"] = config_dir
    if key_policy is not None:
        overrides["key_policy"] = key_policy
    if all_violations:
        overrides["report_all"] = True
    if log_level is not None:
        overrides["log_level"] = log_level

    # アーキテクチャはコマンドごとに指定するため、設定側では検証しない
    overrides["architecture"] = None
    try:
        config = LinterConfig(**overrides)  # type: ignore[arg-type]
    except ValidationError as e:
        details = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
        raise click.UsageError(f"Invalid configuration: {details}") from e
    configure_logging(config.log_level, config.log_format)
    ctx.obj = config


def _service(config: LinterConfig) -> LintService:
    try:
        return LintService.from_config_dir(
            config.config_dir,
            key_suffix_override=config.key_policy,
            report_all=config.report_all,
        )
    except NamelintError as e:
        raise click.UsageError(str(e)) from e


def _emit(ctx: click.Context, report: LintReport, fmt: str) -> None:
    click.echo(render(report, fmt), nl=False)  # type: ignore[arg-type]
    if not report.all_passed:
        ctx.exit(EXIT_VIOLATIONS)


@cli.command("lint")
@click.argument("project_dir", type=click.Path(path_type=Path), default=".")
@architecture_option
@format_option
@click.pass_context
def lint_cmd(ctx: click.Context, project_dir: Path, architecture: str, fmt: str) -> None:
    """Lint model file names and schema columns of a dbt project."""
    service = _service(ctx.obj)
    try:
        report = service.lint_project(project_dir, architecture)
    except NamelintError as e:
        raise click.UsageError(str(e)) from e
    _emit(ctx, report, fmt)


@cli.command("check")
@click.argument("names", nargs=-1, required=True)
@architecture_option
@click.option("--kind", type=click.Choice(["model", "column"]), default="model", show_default=True)
@click.option("--layer", help="Layer prefix hint for unprefixed models and key columns.")
@format_option
@click.pass_context
def check_cmd(
    ctx: click.Context,
    names: tuple[str, ...],
    architecture: str,
    kind: str,
    layer: str | None,
    fmt: str,
) -> None:
    """Lint names given on the command line."""
    service = _service(ctx.obj)
    try:
        report = service.lint_names(list(names), architecture, kind=kind, layer=layer)  # type: ignore[arg-type]
    except NamelintError as e:
        raise click.UsageError(str(e)) from e
    _emit(ctx, report, fmt)


@cli.command("rules")
@architecture_option
@click.pass_context
def rules_cmd(ctx: click.Context, architecture: str) -> None:
    """Show the layer naming rules for an architecture."""
    service = _service(ctx.obj)
    try:
        arch = parse_architecture(architecture)
    except NamelintError as e:
        raise click.UsageError(str(e)) from e

    for layer in service.list_layers(arch):
        extra = ", fact_/dim_ required" if layer.model_type_required else ""
        click.echo(f"{layer.prefix:<5} {layer.pattern}")
        click.echo(f"      {layer.name}: {layer.pluralization} nouns, keys {layer.key_suffix}{extra}")


if __name__ == "__main__":
    cli()
