"""
どこで: `engine.core` のシーン状態。
何を: クアッドの変換パラメータ（位置/スケール/Z 回転）を不変データとして保持し、
      tick ごとに固定増分で置き換えてモデル行列を組み立てる。
なぜ: 可変なグローバル状態を持たず、tick 単位の状態遷移として純粋にテストできるようにするため。

注意:
- 既定では増分は tick ごとに固定で、`dt` の値は使わない。見かけの速度は実際の
  tick レートに比例する（壁時計には比例しない）。
- 値に上下限は無く、時間とともに際限なく変化し続ける。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterable

import numpy as np

from . import matrix as mat4

logger = logging.getLogger(__name__)

ModelSink = Callable[[np.ndarray], None]


@dataclass(frozen=True)
class TransformStep:
    """1 tick あたりの増分。"""

    rotation_z: float = 0.1  # rad
    x: float = 0.03
    y: float = 0.01
    z: float = -0.03
    scale_x: float = 0.025
    scale_y: float = -0.001


DEFAULT_STEP = TransformStep()


@dataclass(frozen=True)
class QuadTransform:
    """クアッドの変換パラメータ。`scale_z` は常に 1。"""

    x: float = 0.0
    y: float = 0.0
    z: float = -8.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    scale_z: float = 1.0
    rotation_z: float = 0.0

    @classmethod
    def initial(cls) -> "QuadTransform":
        return cls()

    def advance(self, step: TransformStep = DEFAULT_STEP, factor: float = 1.0) -> "QuadTransform":
        """`step * factor` だけ進めた新しい状態を返す（自身は変更しない）。"""
        k = float(factor)
        return replace(
            self,
            x=self.x + step.x * k,
            y=self.y + step.y * k,
            z=self.z + step.z * k,
            scale_x=self.scale_x + step.scale_x * k,
            scale_y=self.scale_y + step.scale_y * k,
            rotation_z=self.rotation_z + step.rotation_z * k,
        )

    def model_matrix(self) -> np.ndarray:
        """スケール × Z 回転を合成し、平行移動列を (x, y, z) で上書きした行列。

        合成順は `S @ Rz` 固定（点には回転 → スケールの順に作用）。毎回ゼロから組み立てる。
        """
        m = mat4.from_scaling(self.scale_x, self.scale_y, self.scale_z)
        r = mat4.from_z_rotation(self.rotation_z)
        m = mat4.multiply(m, r)
        return mat4.set_translation(m, self.x, self.y, self.z)


class QuadScene:
    """tick ごとに `QuadTransform` を置き換え、モデル行列をシンクへ渡す Tickable。"""

    def __init__(
        self,
        sinks: Iterable[ModelSink] = (),
        *,
        initial: QuadTransform | None = None,
        step: TransformStep = DEFAULT_STEP,
        reference_fps: float = 30.0,
        time_scaled: bool | None = None,
    ):
        """
        sinks: 新しいモデル行列を受け取る関数（例: `QuadRenderer.submit`）。
        reference_fps: `time_scaled` 時に 1 ステップとみなす tick 周期の基準。
        time_scaled: True で増分を `dt * reference_fps` 倍する。None は設定値に従う。
        """
        if reference_fps <= 0:
            raise ValueError(f"reference_fps must be > 0, got {reference_fps}")
        if time_scaled is None:
            from common.settings import get as _get_settings

            time_scaled = bool(_get_settings().TIME_SCALED_ANIMATION)
        self._sinks: list[ModelSink] = list(sinks)
        self._state = initial if initial is not None else QuadTransform.initial()
        self._step = step
        self._reference_fps = float(reference_fps)
        self._time_scaled = bool(time_scaled)
        self._ticks = 0

    @property
    def state(self) -> QuadTransform:
        return self._state

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def time_scaled(self) -> bool:
        return self._time_scaled

    def add_sink(self, sink: ModelSink) -> None:
        self._sinks.append(sink)

    def tick(self, dt: float) -> None:
        factor = float(dt) * self._reference_fps if self._time_scaled else 1.0
        self._state = self._state.advance(self._step, factor)
        self._ticks += 1
        model = self._state.model_matrix()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("tick=%d dt=%.4f state=%s", self._ticks, dt, self._state)
        for sink in self._sinks:
            sink(model)


__all__ = ["TransformStep", "DEFAULT_STEP", "QuadTransform", "QuadScene", "ModelSink"]
