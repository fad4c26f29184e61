"""命名規約の照合ロジック。"""

from collections.abc import Iterator

from namelint.models.identifier import Identifier
from namelint.models.report import Violation, ViolationKind
from namelint.models.rules import PK_FALLBACK_SUFFIX, Architecture, LayerRule, NamingConventions
from namelint.rules.table import RuleTable

_VOWELS = frozenset("aeiou")


class NamingMatcher:
    """トークン分割済みの識別子をルールテーブルと照合する。

    同じルールテーブルとアーキテクチャに対しては常に同じ結果を返す。
    """

    def __init__(
        self,
        rule_table: RuleTable,
        key_suffix_override: str | None = None,
        report_all: bool = False,
    ) -> None:
        self._table = rule_table
        self._conventions: NamingConventions = rule_table.conventions
        self._key_suffix_override = key_suffix_override
        self._report_all = report_all

    def match(self, identifier: Identifier, architecture: Architecture) -> list[Violation]:
        """識別子を検証し、違反のリストを返す。違反がなければ空リスト。

        report_allがFalseの場合は最初に見つかった違反のみを返す。
        """
        if identifier.kind == "column":
            found = self._iter_column_violations(identifier, architecture)
        else:
            found = self._iter_model_violations(identifier, architecture)

        if self._report_all:
            return list(found)
        first = next(found, None)
        return [first] if first is not None else []

    # --- モデル名 ---

    def _iter_model_violations(self, identifier: Identifier, architecture: Architecture) -> Iterator[Violation]:
        rule = self._table.lookup(architecture, identifier.layer)
        if rule is None:
            yield self._unknown_layer(identifier, architecture)
            return

        # セグメント数はtokenizeで検証済み
        entity = identifier.segments[-1]
        noun = entity
        if rule.model_type_required:
            model_type_violation, noun = self._check_model_type(identifier, rule, entity)
            if model_type_violation is not None:
                yield model_type_violation

        violation = self._check_pluralization(identifier, rule, entity, noun)
        if violation is not None:
            yield violation

    def _check_model_type(
        self, identifier: Identifier, rule: LayerRule, entity: str
    ) -> tuple[Violation | None, str]:
        """fact_ / dim_ の有無と省略形を検査する。戻り値の2要素目は名詞部分。"""
        marker, _, name = entity.partition("_")
        model_types = self._conventions.model_types
        if marker in model_types and name:
            return None, name

        full = self._conventions.abbreviations.get(marker)
        if full is not None and name:
            return (
                Violation(
                    identifier=identifier.raw,
                    kind=ViolationKind.ABBREVIATION,
                    message=f"abbreviated model type '{marker}_' is not allowed; spell out '{full}_'",
                    expected=f"{full}_{name}",
                    actual=entity,
                ),
                name,
            )

        if marker in model_types:
            expected = f"{marker}_<name>"
        else:
            expected = " | ".join(f"{t}_{entity}" for t in model_types)
        return (
            Violation(
                identifier=identifier.raw,
                kind=ViolationKind.MODEL_TYPE,
                message=f"{rule.name} layer models must start with one of: {', '.join(t + '_' for t in model_types)}",
                expected=expected,
                actual=entity,
            ),
            name or entity,
        )

    def _check_pluralization(
        self, identifier: Identifier, rule: LayerRule, entity: str, noun: str
    ) -> Violation | None:
        words = noun.split("_")
        word = words[-1]
        if word in self._conventions.invariant_nouns:
            return None

        plural = self._is_plural(word)
        if rule.pluralization == "singular" and plural:
            fixed = _singularize(word)
        elif rule.pluralization == "plural" and not plural:
            fixed = _pluralize(word)
        else:
            return None

        return Violation(
            identifier=identifier.raw,
            kind=ViolationKind.PLURALIZATION,
            message=f"{rule.name} layer uses {rule.pluralization} nouns: '{word}'",
            expected=entity[: len(entity) - len(word)] + fixed,
            actual=entity,
        )

    def _is_plural(self, word: str) -> bool:
        return word.endswith("s") and not word.endswith(self._conventions.singular_endings)

    # --- カラム名 ---

    def _iter_column_violations(self, identifier: Identifier, architecture: Architecture) -> Iterator[Violation]:
        rule: LayerRule | None = None
        if identifier.layer_hint is not None:
            rule = self._table.lookup(architecture, identifier.layer_hint)
            if rule is None:
                yield self._unknown_layer(identifier, architecture)
                return

        violation = self._check_key_suffix(identifier, architecture, rule)
        if violation is not None:
            yield violation

        violation = self._check_timestamp_suffix(identifier)
        if violation is not None:
            yield violation

    def _check_key_suffix(
        self, identifier: Identifier, architecture: Architecture, rule: LayerRule | None
    ) -> Violation | None:
        raw = identifier.raw
        stem, _, last = raw.rpartition("_")
        if last not in self._conventions.key_tokens:
            return None

        if self._key_suffix_override is not None:
            suffix = self._key_suffix_override
        elif rule is not None:
            suffix = rule.key_suffix
        else:
            suffix = self._table.default_key_suffix(architecture)

        if not stem:
            return Violation(
                identifier=raw,
                kind=ViolationKind.KEY_NAMING,
                message="bare key column; prefix it with the entity name",
                expected=f"<entity>{suffix}",
                actual=raw,
            )

        if suffix == "_key" and (stem == "key" or stem.endswith("_key")):
            suffix = PK_FALLBACK_SUFFIX
        expected = stem + suffix
        if raw == expected:
            return None
        return Violation(
            identifier=raw,
            kind=ViolationKind.KEY_NAMING,
            message=f"key columns use the '{suffix}' suffix",
            expected=expected,
            actual=raw,
        )

    def _check_timestamp_suffix(self, identifier: Identifier) -> Violation | None:
        raw = identifier.raw
        suffixes = self._conventions.timestamp_suffixes
        for deprecated in sorted(suffixes, key=len, reverse=True):
            if raw.endswith(deprecated) and len(raw) > len(deprecated):
                replacement = suffixes[deprecated]
                return Violation(
                    identifier=raw,
                    kind=ViolationKind.TIMESTAMP_NAMING,
                    message=f"'{deprecated}' is deprecated; use '{replacement}'",
                    expected=raw[: -len(deprecated)] + replacement,
                    actual=raw,
                )
        return None

    # --- 共通 ---

    def _unknown_layer(self, identifier: Identifier, architecture: Architecture) -> Violation:
        prefixes = [layer.prefix + "_" for layer in self._table.layers(architecture)]
        actual = identifier.layer or identifier.raw.partition("_")[0]
        return Violation(
            identifier=identifier.raw,
            kind=ViolationKind.UNKNOWN_LAYER,
            message=f"no {architecture.value} layer matches {actual!r}",
            expected=" | ".join(prefixes),
            actual=actual,
        )


def _singularize(word: str) -> str:
    if word.endswith("ies") and len(word) > 3:
        return word[:-3] + "y"
    if word.endswith(("sses", "uses", "xes", "ches", "shes")):
        return word[:-2]
    return word[:-1]


def _pluralize(word: str) -> str:
    if word.endswith("y") and len(word) > 1 and word[-2] not in _VOWELS:
        return word[:-1] + "ies"
    if word.endswith(("s", "x", "ch", "sh")):
        return word + "es"
    return word + "s"
