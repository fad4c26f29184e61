"""namelintの設定管理。"""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

from namelint.models.rules import Architecture, KeySuffix

_PACKAGE_ROOT = Path(__file__).parent
_REPO_ROOT = _PACKAGE_ROOT.parent.parent


class LinterConfig(BaseSettings):
    """リンター設定。環境変数から読み込み可能。

    NAMELINT_ARCHITECTURE に未知の値を指定した場合は構築時にエラーとなる。
    """

    model_config = {"env_prefix": "NAMELINT_"}

    architecture: Architecture | None = None
    config_dir: Path = _REPO_ROOT / "config"
    key_policy: KeySuffix | None = None
    report_all: bool = False

    # MCPサーバー
    host: str = "0.0.0.0"
    port: int = 8000

    # ログ
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["console", "json"] = "console"
