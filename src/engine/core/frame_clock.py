"""
どこで: `engine.core` のフレームドライバ。
何を: 固定レートでコールバックを呼び、前回呼び出しからの実経過秒 `dt` を渡す FrameClock。
なぜ: 更新ループの周期・dt 測定・停止をひとつのオブジェクトに閉じ込め、
      スケジューラ/時刻源を差し替えてテストできるようにするため。

使用例:
    clock = FrameClock(scene.tick, fps=30)   # 既定は pyglet.clock に登録
    ...
    clock.stop()
"""

from __future__ import annotations

import logging
import math
import numbers
import time
from typing import Callable, Protocol, Sequence

from .tickable import Tickable

logger = logging.getLogger(__name__)


class InvalidFrameRateError(ValueError):
    """フレームレートが正の有限値でない。"""


class Scheduler(Protocol):
    """`pyglet.clock` 互換の繰り返しタイマ。"""

    def schedule_interval(self, func: Callable[..., None], interval: float) -> None: ...

    def unschedule(self, func: Callable[..., None]) -> None: ...


def validate_fps(fps: object) -> float:
    """正の有限実数なら float で返す。bool・非数値・0 以下・inf/nan は拒否する。"""
    if isinstance(fps, bool) or not isinstance(fps, numbers.Real):
        raise InvalidFrameRateError(f"fps must be a real number, got {fps!r}")
    value = float(fps)
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidFrameRateError(f"fps must be > 0, got {fps!r}")
    return value


class FrameClock:
    """1 つのコールバックを固定周期で呼び出す極小クラス。

    - dt は常に `time_source` で自前測定する（初回は生成時刻から）。負にはならない。
    - スケジューラが遅れても追いつき呼び出しはしない。遅れは次の dt に吸収される。
    - コールバックの例外はログに残して次 tick を続ける
      （`QSP_TICK_ERRORS_FATAL=1` で再送出）。
    """

    def __init__(
        self,
        callback: Callable[[float], None],
        fps: float = 30,
        *,
        time_source: Callable[[], float] = time.perf_counter,
        scheduler: Scheduler | None = None,
        autostart: bool = True,
    ):
        self._fps = validate_fps(fps)
        self._callback = callback
        self._time_source = time_source
        self._scheduler = scheduler
        self._last_time = float(time_source())
        self._tick_count = 0
        self._error_count = 0
        self._running = False

        from common.settings import get as _get_settings

        self._errors_fatal = bool(_get_settings().TICK_ERRORS_FATAL)

        if autostart:
            self.start()

    # ---- factories ----
    @classmethod
    def create(cls, callback: Callable[[float], None], fps: float = 30) -> "FrameClock":
        """既定スケジューラ（pyglet.clock）で即時開始する。"""
        return cls(callback, fps)

    @classmethod
    def from_tickables(
        cls, tickables: Sequence[Tickable], fps: float = 30, **kwargs
    ) -> "FrameClock":
        """登録された Tickable を固定順序で実行する FrameClock を作る。"""
        ordered = tuple(tickables)

        def _tick_all(dt: float) -> None:
            for t in ordered:
                t.tick(dt)

        return cls(_tick_all, fps, **kwargs)

    # ---- properties ----
    @property
    def fps(self) -> float:
        return self._fps

    @property
    def interval(self) -> float:
        """tick 周期 [秒]。"""
        return 1.0 / self._fps

    @property
    def interval_ms(self) -> float:
        """tick 周期 [ミリ秒]。"""
        return 1000.0 / self._fps

    @property
    def running(self) -> bool:
        return self._running

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def error_count(self) -> int:
        return self._error_count

    # ---- lifecycle ----
    def start(self) -> None:
        """スケジューラへ `tick` を周期登録する（二重登録はしない）。"""
        if self._running:
            return
        if self._scheduler is None:
            import pyglet

            self._scheduler = pyglet.clock
        self._scheduler.schedule_interval(self.tick, self.interval)
        self._running = True
        logger.debug("frame clock started: fps=%.3f interval=%.3fms", self._fps, self.interval_ms)

    def stop(self) -> None:
        """周期登録を解除する。停止済みなら何もしない。"""
        if not self._running:
            return
        assert self._scheduler is not None
        self._scheduler.unschedule(self.tick)
        self._running = False
        logger.debug("frame clock stopped after %d ticks", self._tick_count)

    # pyglet は dt を渡してくるが、生成時刻基準の dt を保つため使わない
    def tick(self, _scheduler_dt: float | None = None) -> None:
        now = float(self._time_source())
        dt = max(0.0, now - self._last_time)
        self._last_time = now
        self._tick_count += 1
        try:
            self._callback(dt)
        except Exception:
            self._error_count += 1
            if self._errors_fatal:
                raise
            logger.exception("frame callback failed (tick=%d)", self._tick_count)


__all__ = ["FrameClock", "InvalidFrameRateError", "Scheduler", "validate_fps"]
