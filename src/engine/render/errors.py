"""
どこで: `engine.render` の例外定義。
何を: GL コンテキスト取得失敗/シェーダのコンパイル・リンク失敗を表す型付き例外。
なぜ: 初期化失敗を呼び出し側で判別し、半端な状態のままアニメーションへ進まないようにするため。
"""

from __future__ import annotations


class QuadspinError(Exception):
    """描画初期化に関する基底例外。"""


class ContextUnavailableError(QuadspinError):
    """互換 OpenGL コンテキストを取得できない。"""


class ShaderCompileError(QuadspinError):
    """シェーダのコンパイルまたはリンクに失敗した。`log` にドライバの診断を保持する。"""

    def __init__(self, message: str, log: str = ""):
        super().__init__(message)
        self.log = log

    def __str__(self) -> str:
        base = super().__str__()
        return f"{base}\n{self.log}" if self.log else base


__all__ = ["QuadspinError", "ContextUnavailableError", "ShaderCompileError"]
