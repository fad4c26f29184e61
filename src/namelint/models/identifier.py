"""検証対象の識別子モデル。"""

from typing import Literal

from pydantic import BaseModel, ConfigDict

IdentifierKind = Literal["model", "column"]


class Candidate(BaseModel):
    """検証に投入される生の名前。

    ファイル走査やMCPツールから渡される。layerはモデルが属するレイヤーのヒント。
    """

    name: str
    kind: IdentifierKind = "model"
    layer: str | None = None
    source: str | None = None


class Identifier(BaseModel):
    """トークン分割済みの識別子。検証1回ごとに生成され、レポート出力後に破棄される。"""

    model_config = ConfigDict(frozen=True)

    raw: str
    kind: IdentifierKind
    prefix: str | None
    segments: tuple[str, ...]
    short_form: bool = False
    layer_hint: str | None = None

    @property
    def layer(self) -> str | None:
        """推定されたレイヤー。プレフィックスがなければヒントを使う。"""
        return self.prefix or self.layer_hint
