"""
どこで: `common.settings`
何を: プロジェクトの環境変数（`QSP_*`）を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を避け、既定値/型の一貫性とテスト容易性を保つため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_str

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class _Settings:
    # アニメーション: False なら 1 tick = 1 固定ステップ（dt を無視）
    TIME_SCALED_ANIMATION: bool = False

    # FrameClock: コールバック例外を再送出してループを止めるか
    TICK_ERRORS_FATAL: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。"""
    _settings.TIME_SCALED_ANIMATION = env_bool("QSP_TIME_SCALED_ANIMATION", False)
    _settings.TICK_ERRORS_FATAL = env_bool("QSP_TICK_ERRORS_FATAL", False)
    _settings.LOG_LEVEL = env_str("QSP_LOG_LEVEL", "INFO", choices=_LOG_LEVELS)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
