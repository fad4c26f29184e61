"""識別子のトークン分割。"""

import re
from collections.abc import Mapping

from namelint.models.errors import MalformedIdentifierError
from namelint.models.identifier import Candidate, Identifier
from namelint.models.rules import LayerRule

SEGMENT_DELIMITER = "__"

_ALLOWED_CHARS = re.compile(r"[a-z0-9_]+")
_DISALLOWED_CHAR = re.compile(r"[^a-z0-9_]")


def tokenize(candidate: Candidate, layers: Mapping[str, LayerRule]) -> Identifier:
    """候補名をプレフィックスと `__` 区切りのセグメントに分割する。

    副作用のない純粋関数。

    Args:
        candidate: 検証対象の名前。
        layers: 選択中アーキテクチャのプレフィックス→LayerRule。
            プレフィックス付きのモデル名はレイヤーのセグメント数と照合する。

    Returns:
        トークン分割済みのIdentifier。

    Raises:
        MalformedIdentifierError: 不正な文字、または区切り文字の使い方に矛盾がある場合。
    """
    raw = candidate.name
    _check_characters(raw)

    if candidate.kind == "column":
        if SEGMENT_DELIMITER in raw:
            raise MalformedIdentifierError(raw, "column names must use single '_' between words")
        return Identifier(raw=raw, kind="column", prefix=None, segments=(raw,), layer_hint=candidate.layer)

    head, sep, rest = raw.partition("_")
    rule = layers.get(head) if sep else None
    if rule is not None:
        if rest.startswith("_"):
            raise MalformedIdentifierError(
                raw, f"layer prefix {head!r} must be followed by a single '_'", expected=rule.pattern
            )
        segments = tuple(rest.split(SEGMENT_DELIMITER))
        if len(segments) != rule.arity:
            # '_' と '__' の取り違えはセグメント数の不一致として現れる
            raise MalformedIdentifierError(
                raw,
                f"delimiter usage inconsistent: {rule.name} layer expects {rule.arity} "
                f"'__'-delimited segment(s) ({', '.join(rule.segments)}), got {len(segments)}",
                expected=rule.pattern,
            )
        return Identifier(
            raw=raw,
            kind="model",
            prefix=head,
            segments=segments,
            layer_hint=candidate.layer,
        )

    if candidate.layer is not None:
        # エイリアス等でプレフィックスを持たない短縮形（エンティティセグメントのみ）
        if SEGMENT_DELIMITER in raw:
            raise MalformedIdentifierError(raw, "short-form model names must not contain '__'")
        return Identifier(
            raw=raw,
            kind="model",
            prefix=None,
            segments=(raw,),
            short_form=True,
            layer_hint=candidate.layer,
        )

    return Identifier(raw=raw, kind="model", prefix=None, segments=tuple(raw.split(SEGMENT_DELIMITER)))


def _check_characters(raw: str) -> None:
    if not raw:
        raise MalformedIdentifierError(raw, "identifier must not be empty")
    if not _ALLOWED_CHARS.fullmatch(raw):
        bad = sorted(set(_DISALLOWED_CHAR.findall(raw)))
        raise MalformedIdentifierError(raw, f"disallowed characters {bad!r}; only [a-z0-9_] is allowed")
    if raw.startswith("_") or raw.endswith("_"):
        raise MalformedIdentifierError(raw, "identifier must not start or end with '_'")
    if "___" in raw:
        raise MalformedIdentifierError(raw, "inconsistent delimiter '___'")
