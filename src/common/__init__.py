"""
どこで: `common` パッケージ。
何を: 環境変数設定（settings/env）とロギング初期化の共通基盤。
なぜ: engine/api の双方から同じ設定経路を使い、依存の向きを単純にするため。
"""

from .settings import get as get_settings

__all__ = [
    "get_settings",
]
