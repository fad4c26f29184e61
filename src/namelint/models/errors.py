"""namelintのカスタム例外クラス。"""


class NamelintError(Exception):
    """namelintの基底例外クラス。"""


class InvalidArchitectureError(NamelintError):
    """未知のアーキテクチャが指定された場合の例外。

    バッチ処理開始前に検出される唯一の致命的エラー。
    """

    def __init__(self, value: str, allowed: list[str]) -> None:
        super().__init__(f"Invalid architecture: {value!r}. Expected one of: {', '.join(allowed)}")
        self.value = value
        self.allowed = allowed


class RuleTableError(NamelintError):
    """命名ルール定義の読み込みエラー。"""


class LayerNotFoundError(NamelintError):
    """指定されたレイヤーが見つからない場合の例外。"""

    def __init__(self, architecture: str, prefix: str) -> None:
        super().__init__(f"Layer not found: {prefix!r} (architecture: {architecture})")
        self.architecture = architecture
        self.prefix = prefix


class MalformedIdentifierError(NamelintError):
    """識別子に不正な文字や区切り文字が含まれる場合の例外。"""

    def __init__(self, identifier: str, reason: str, expected: str | None = None) -> None:
        super().__init__(f"Malformed identifier {identifier!r}: {reason}")
        self.identifier = identifier
        self.reason = reason
        self.expected = expected


class ProjectNotFoundError(NamelintError):
    """dbtプロジェクトのmodelsディレクトリが見つからない場合の例外。"""

    def __init__(self, project_dir: str) -> None:
        super().__init__(f"dbt models directory not found under: {project_dir}")
        self.project_dir = project_dir


class StorageError(NamelintError):
    """ファイル読み込み操作のエラー。"""
