"""命名ルール関連のデータモデル。"""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Pluralization = Literal["singular", "plural"]
KeySuffix = Literal["_key", "_id"]

# _keyポリシーで親がすでに_keyで終わる場合のフォールバック
PK_FALLBACK_SUFFIX = "_pk"


class Architecture(StrEnum):
    """データモデリングのレイヤー構成。"""

    MEDALLION = "medallion"
    TRADITIONAL = "traditional"


class LayerRule(BaseModel):
    """レイヤー単位の命名ルール。起動時に一度だけ構築され、以後変更されない。"""

    model_config = ConfigDict(frozen=True)

    prefix: str
    name: str
    description: str = ""
    pattern: str
    segments: tuple[str, ...]
    pluralization: Pluralization
    key_suffix: KeySuffix
    model_type_required: bool = False

    @property
    def arity(self) -> int:
        return len(self.segments)


class ArchitectureRules(BaseModel):
    """アーキテクチャ単位のレイヤー定義（YAMLから読み込み）。"""

    model_config = ConfigDict(frozen=True)

    architecture: Architecture
    description: str = ""
    default_key_suffix: KeySuffix = "_key"
    layers: tuple[LayerRule, ...]


class NamingConventions(BaseModel):
    """全アーキテクチャ共通の命名規約データ。"""

    model_config = ConfigDict(frozen=True)

    model_types: tuple[str, ...] = ("fact", "dim")
    abbreviations: dict[str, str] = Field(default_factory=lambda: {"f": "fact", "fi": "fact", "d": "dim"})
    invariant_nouns: tuple[str, ...] = ()
    singular_endings: tuple[str, ...] = ("ss", "us", "is")
    key_tokens: tuple[str, ...] = ("id", "key", "pk")
    timestamp_suffixes: dict[str, str] = Field(default_factory=dict)
