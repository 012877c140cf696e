"""
どこで: `api` 入口（高レベル公開 API）。
何を: ランナー `run_quad`（別名 `run`）と、シーン/クロックの主要型を再輸出。
なぜ: 利用者が単一名前空間から起動とテスト用の部品取得を完結できるようにするため。

Usage:
    from api import run

    run()              # 640x480 / 30 fps
    run(fps=60)
"""

from engine.core.frame_clock import FrameClock
from engine.core.scene import QuadScene, QuadTransform

from .quad import run_quad as run
from .quad import run_quad as run_quad

__all__ = [
    "run_quad",  # 実行（詳細指定）
    "run",  # 実行（エイリアス、簡易）
    "FrameClock",
    "QuadScene",
    "QuadTransform",
]

__version__ = "2026.10"
