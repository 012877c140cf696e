"""
どこで: `api.quad`（実行ランナー）。
何を: 固定サイズのウィンドウにクアッドを 1 枚描き、FrameClock で毎 tick その位置/回転/スケールを進める。
なぜ: 設定解決 → GL 初期化 → シーン/クロック結線 → イベントループ、の起動手順を 1 関数に閉じ込めるため。

実行フロー（概要）:
1) 設定解決: 引数 > `util.utils.load_config()` の YAML > `util.constants` の既定値で
   fps（30）、表示面（640x480）、背景色（黒）、クアッド色（白）、カメラを決める。
2) 投影行列: 画角 45°・アスペクト比 幅/高さ・near 0.1・far 100 の透視投影を 1 度だけ構築。
3) `init_only=True` ならここで返る（pyglet/ModernGL を import しない）。
4) ウィンドウ/GL: `RenderWindow`・ModernGL コンテキスト・`QuadRenderer` を生成。
   `ContextUnavailableError` / `ShaderCompileError` はログに残して `SystemExit(2)`。
   アニメーションループへは進まない。
5) シーン: `QuadScene` の出力（モデル行列）を `QuadRenderer.submit` へ接続し、
   初期状態の行列を先に渡しておく。
6) フレーム駆動: `FrameClock.from_tickables([scene, window], fps)` を `pyglet.clock` に登録。
   1 tick につきシーン更新と 1 フレームの描画を行う（`pyglet.app.run(None)` で自動再描画は無効）。
   `ESC`/クローズ時は、コンテキストが生きている間にクロック停止と GL リソース解放を 1 度だけ行い、
   その後ウィンドウを閉じる。

スレッド:
- すべて pyglet の主スレッドで動く。シーン状態は tick コールバックからのみ更新される。
"""

from __future__ import annotations

import logging
from typing import Any

from .quad_runner.utils import (
    build_projection,
    resolve_background,
    resolve_camera,
    resolve_fps,
    resolve_quad_color,
    resolve_window_size,
)

logger = logging.getLogger(__name__)

# 起動失敗（GL コンテキスト/シェーダ）時の終了コード
EXIT_SETUP_FAILED = 2


def run_quad(
    *,
    fps: float | None = None,
    window_size: tuple[int, int] | None = None,
    background: Any = None,
    quad_color: Any = None,
    init_only: bool = False,
) -> None:
    """クアッドのアニメーションを実行する。

    Parameters
    ----------
    fps : float | None
        tick レート。None で設定ファイル（`frame_clock.fps`）、なければ 30。
        明示指定が正でなければ `InvalidFrameRateError`。
    window_size : tuple[int, int] | None
        表示面 [px]。None で設定ファイル（`canvas.width/height`）、なければ 640x480。
    background, quad_color : RGBA(0–1) | RGB(A)(0–255) | Hex | None
        None で設定ファイル、なければ黒/白。
    init_only : bool, default False
        True で設定解決と投影行列の構築までを行い、GL を初期化せずに返る。

    Raises
    ------
    SystemExit
        GL コンテキストまたはシェーダの初期化に失敗した場合（code=2）。
    """
    from util.utils import load_config

    cfg = load_config() or {}

    # ---- ① 設定解決 ---------------------------------------------
    fps = resolve_fps(fps, cfg)
    window_width, window_height = resolve_window_size(window_size, cfg)
    bg_rgba = resolve_background(background, cfg)
    quad_rgba = resolve_quad_color(quad_color, cfg)
    fov_deg, z_near, z_far = resolve_camera(cfg)

    # ---- ② 投影行列（以後不変） ----------------------------------
    projection = build_projection(
        window_width, window_height, fov_deg=fov_deg, near=z_near, far=z_far
    )
    logger.info(
        "quad runner: %dx%d @ %.1f fps (fov=%.1f, near=%g, far=%g)",
        window_width,
        window_height,
        fps,
        fov_deg,
        z_near,
        z_far,
    )

    if init_only:
        return None

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet
    from pyglet.event import EVENT_HANDLED
    from pyglet.window import key

    from engine.core.frame_clock import FrameClock
    from engine.core.scene import QuadScene
    from engine.render.errors import ContextUnavailableError, ShaderCompileError

    from .quad_runner.render import create_window_and_renderer

    # ---- ③ Window & ModernGL --------------------------------------
    try:
        rendering_window, _mgl_ctx, quad_renderer = create_window_and_renderer(
            window_width,
            window_height,
            projection_matrix=projection,
            background=bg_rgba,
            quad_color=quad_rgba,
        )
    except ContextUnavailableError as e:
        logger.error("graphics context unavailable: %s", e)
        raise SystemExit(EXIT_SETUP_FAILED) from e
    except ShaderCompileError as e:
        logger.error("shader setup failed: %s", e)
        raise SystemExit(EXIT_SETUP_FAILED) from e

    # ---- ④ Scene ---------------------------------------------------
    scene = QuadScene([quad_renderer.submit], reference_fps=fps)
    quad_renderer.submit(scene.state.model_matrix())
    rendering_window.add_draw_callback(quad_renderer.draw)

    # ---- ⑤ FrameClock ---------------------------------------------
    # scene を進めてからウィンドウが 1 フレーム描く（tick と描画を 1:1 にする）
    frame_clock = FrameClock.from_tickables(
        [scene, rendering_window], fps, scheduler=pyglet.clock
    )

    # ---- ⑥ pyglet イベント -----------------------------------------
    shut_down = False

    def _shutdown() -> None:
        # GL コンテキストが生きている間に 1 度だけ後始末する
        nonlocal shut_down
        if shut_down:
            return
        shut_down = True
        frame_clock.stop()
        try:
            quad_renderer.release()
        except Exception:
            logger.warning("failed to release GL resources", exc_info=True)
        logger.info(
            "closed after %d ticks (%d callback errors)",
            frame_clock.tick_count,
            frame_clock.error_count,
        )
        pyglet.app.exit()

    @rendering_window.event
    def on_key_press(sym, _mods):  # noqa: ANN001
        if sym == key.ESCAPE:
            _shutdown()
            rendering_window.close()
            return EVENT_HANDLED
        return None

    @rendering_window.event
    def on_close():  # noqa: ANN001
        # None を返して既定の close() に続ける
        _shutdown()

    pyglet.app.run(None)


__all__ = ["run_quad", "EXIT_SETUP_FAILED"]
