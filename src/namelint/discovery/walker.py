"""dbtプロジェクトからモデル名・カラム名を収集する。"""

from collections.abc import Collection
from pathlib import Path
from typing import Any

import structlog
import yaml

from namelint.models.errors import ProjectNotFoundError, StorageError
from namelint.models.identifier import Candidate

logger = structlog.get_logger(__name__)

_SCHEMA_SUFFIXES = (".yml", ".yaml")


def collect_candidates(project_dir: Path, known_layers: Collection[str] = ()) -> list[Candidate]:
    """models/ 配下のSQLファイル名とYAMLのカラム定義を候補として列挙する。

    パス順、ファイル内は記述順に返すため、同一プロジェクトからは常に同じ並びになる。

    Args:
        project_dir: dbtプロジェクトのルート、または models ディレクトリ自体。
        known_layers: レイヤープレフィックス。models/<layer>/ 配下のモデルにヒントとして付与する。

    Raises:
        ProjectNotFoundError: modelsディレクトリが無い場合。
        StorageError: スキーマYAMLが読み込めない場合。
    """
    models_dir = _resolve_models_dir(project_dir)
    candidates: list[Candidate] = []

    for path in sorted(p for p in models_dir.rglob("*") if p.is_file()):
        if path.suffix == ".sql":
            candidates.append(
                Candidate(
                    name=path.stem,
                    kind="model",
                    layer=_directory_layer(path, models_dir, known_layers),
                    source=str(path),
                )
            )
        elif path.suffix in _SCHEMA_SUFFIXES:
            candidates.extend(_schema_columns(path, models_dir, known_layers))

    logger.debug("candidates_collected", models_dir=str(models_dir), count=len(candidates))
    return candidates


def _resolve_models_dir(project_dir: Path) -> Path:
    if (project_dir / "models").is_dir():
        return project_dir / "models"
    if project_dir.name == "models" and project_dir.is_dir():
        return project_dir
    raise ProjectNotFoundError(str(project_dir))


def _directory_layer(path: Path, models_dir: Path, known_layers: Collection[str]) -> str | None:
    """models/<layer>/... に置かれたファイルのレイヤー名を返す。"""
    parts = path.relative_to(models_dir).parts
    if len(parts) > 1 and parts[0] in known_layers:
        return parts[0]
    return None


def _schema_columns(path: Path, models_dir: Path, known_layers: Collection[str]) -> list[Candidate]:
    try:
        with open(path, encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise StorageError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        return []

    dir_layer = _directory_layer(path, models_dir, known_layers)
    candidates: list[Candidate] = []
    for model in data.get("models") or []:
        if not isinstance(model, dict):
            continue
        model_name = str(model.get("name", ""))
        # モデル名のプレフィックスを優先し、無ければディレクトリから推定
        head = model_name.partition("_")[0]
        layer = head if head in known_layers else dir_layer
        for column in model.get("columns") or []:
            if isinstance(column, dict) and column.get("name"):
                candidates.append(
                    Candidate(name=str(column["name"]), kind="column", layer=layer, source=str(path))
                )
    return candidates
