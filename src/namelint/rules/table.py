"""命名ルールテーブル。YAML定義を起動時に一度だけ読み込み、読み取り専用で保持する。"""

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

import structlog
import yaml
from pydantic import ValidationError

from namelint.models.errors import InvalidArchitectureError, LayerNotFoundError, RuleTableError
from namelint.models.rules import Architecture, ArchitectureRules, LayerRule, NamingConventions

logger = structlog.get_logger(__name__)

RULES_DIRNAME = "naming-rules"


def parse_architecture(value: str | Architecture) -> Architecture:
    """文字列をArchitectureに変換する。大文字小文字は区別しない。

    Raises:
        InvalidArchitectureError: 未知のアーキテクチャの場合。
    """
    if isinstance(value, Architecture):
        return value
    try:
        return Architecture(str(value).strip().lower())
    except ValueError:
        raise InvalidArchitectureError(str(value), [a.value for a in Architecture]) from None


class RuleTable:
    """アーキテクチャ→レイヤープレフィックス→LayerRule の対応表。"""

    def __init__(
        self,
        rules: list[ArchitectureRules],
        conventions: NamingConventions | None = None,
    ) -> None:
        self._rules: dict[Architecture, ArchitectureRules] = {}
        self._layers: dict[Architecture, dict[str, LayerRule]] = {}
        self.conventions = conventions or NamingConventions()

        for arch_rules in rules:
            arch = arch_rules.architecture
            if arch in self._rules:
                raise RuleTableError(f"Duplicate rule definition for architecture: {arch.value}")
            layer_map: dict[str, LayerRule] = {}
            for layer in arch_rules.layers:
                # プレフィックスは曖昧さなく1つのレイヤーにのみ対応させる
                if layer.prefix in layer_map:
                    raise RuleTableError(f"Duplicate layer prefix {layer.prefix!r} in architecture {arch.value}")
                if "_" in layer.prefix:
                    raise RuleTableError(f"Layer prefix must not contain '_': {layer.prefix!r}")
                layer_map[layer.prefix] = layer
            self._rules[arch] = arch_rules
            self._layers[arch] = layer_map

    @classmethod
    def from_directory(cls, config_dir: Path) -> "RuleTable":
        """config_dir/naming-rules 配下のYAMLからルールテーブルを構築する。

        Raises:
            RuleTableError: ディレクトリが無い、YAMLが不正、定義が矛盾している場合。
        """
        rules_dir = config_dir / RULES_DIRNAME
        if not rules_dir.is_dir():
            raise RuleTableError(f"Naming rules directory not found: {rules_dir}")

        rules: list[ArchitectureRules] = []
        conventions: NamingConventions | None = None
        for rule_file in sorted(rules_dir.glob("*.yaml")):
            try:
                with open(rule_file, encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise RuleTableError(f"Invalid YAML in {rule_file.name}: {e}") from e
            if not data:
                continue
            try:
                if "conventions" in data:
                    conventions = NamingConventions.model_validate(data["conventions"])
                if "architecture" in data:
                    rules.append(ArchitectureRules.model_validate(data))
            except ValidationError as e:
                raise RuleTableError(f"Invalid rule definition in {rule_file.name}: {e}") from e

        table = cls(rules, conventions)
        missing = [a.value for a in Architecture if a not in table._rules]
        if missing:
            raise RuleTableError(f"No naming rules defined for: {', '.join(missing)}")
        logger.debug(
            "rule_table_loaded",
            rules_dir=str(rules_dir),
            architectures=[a.value for a in table._rules],
        )
        return table

    def architecture_rules(self, architecture: Architecture) -> ArchitectureRules:
        return self._rules[architecture]

    def layers(self, architecture: Architecture) -> list[LayerRule]:
        """レイヤー定義を上流から順に返す。"""
        return list(self._rules[architecture].layers)

    def prefixes(self, architecture: Architecture) -> frozenset[str]:
        return frozenset(self._layers[architecture])

    def layer_map(self, architecture: Architecture) -> Mapping[str, LayerRule]:
        """プレフィックス→LayerRule の読み取り専用ビューを返す。"""
        return MappingProxyType(self._layers[architecture])

    def lookup(self, architecture: Architecture, prefix: str | None) -> LayerRule | None:
        """プレフィックスに対応するLayerRuleを返す。見つからなければNone。"""
        if prefix is None:
            return None
        return self._layers[architecture].get(prefix)

    def get_layer(self, architecture: Architecture, prefix: str) -> LayerRule:
        """プレフィックスに対応するLayerRuleを返す。

        Raises:
            LayerNotFoundError: 該当レイヤーが無い場合。
        """
        layer = self.lookup(architecture, prefix)
        if layer is None:
            raise LayerNotFoundError(architecture.value, prefix)
        return layer

    def default_key_suffix(self, architecture: Architecture) -> str:
        return self._rules[architecture].default_key_suffix
