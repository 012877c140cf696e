"""
どこで: `engine.core` の更新インターフェース。
何を: 1 tick 分の更新 `tick(dt)` を持つ `Tickable` Protocol を定義。
なぜ: シーン/レンダラなどフレーム駆動のオブジェクトを FrameClock から一様に呼ぶため。
"""

from typing import Protocol


class Tickable(Protocol):
    """1 tick 分の更新を行うインターフェース。"""

    def tick(self, dt: float) -> None:
        """前回 tick からの経過 `dt` 秒を受け取り、内部状態を進める。"""
