"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する。
- エントリポイント（`main.py`）だけが `setup_default_logging()` を呼び、
  アプリ側で設定済みなら何もしない。
"""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - `level` 未指定時は `QSP_LOG_LEVEL`（既定 INFO）を使う。
    - ルートロガーにハンドラが既にあれば何もしない（no-op）。
    """
    if level is None:
        from .settings import get as _get_settings

        level = _get_settings().LOG_LEVEL
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=lvl, format=_FORMAT)


__all__ = ["setup_default_logging"]
