"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: 固定サイズの Pyglet Window（深度バッファ付き、リサイズ不可）と描画コールバック登録、
      tick ごとの 1 フレーム提示（Tickable）を提供。
なぜ: レンダラ/シーン層から GUI 依存を切り離し、最小インターフェイスで統一するため。

使用例:
    win = RenderWindow(640, 480)
    win.add_draw_callback(renderer.draw)
    FrameClock.from_tickables([scene, win], fps=30)
    pyglet.app.run(None)
"""

from typing import Callable

import pyglet
from pyglet.gl import Config


class RenderWindow(pyglet.window.Window):
    def __init__(self, width: int, height: int, *, caption: str = "Quadspin"):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            caption: タイトルバー文字列。
        """
        # 前後判定のため深度バッファを要求する
        config = Config(double_buffer=True, depth_size=24)
        super().__init__(
            width=width, height=height, caption=caption, resizable=False, config=config
        )
        self._draw_callbacks: list[Callable[[], None]] = []

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """
        `on_draw` 中に呼び出す描画関数を登録する。

        - 関数は引数を取らず、副作用で描画を行うこと（クリアもレンダラ側で行う）。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    def on_draw(self):  # Pyglet 既定のイベント名
        for cb in self._draw_callbacks:
            cb()

    # ---- Tickable ----
    def tick(self, dt: float) -> None:
        """1 tick につき 1 フレームを描いて提示する（自動再描画は使わない）。"""
        if self.has_exit:
            return
        self.switch_to()
        self.dispatch_event("on_draw")
        self.flip()
