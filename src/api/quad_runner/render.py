"""
どこで: `api.quad_runner.render`
何を: RenderWindow/ModernGL コンテキスト/QuadRenderer をまとめて生成する。
なぜ: 初期化失敗時にウィンドウを閉じて型付き例外を上位へ返す手順を `run_quad` から分離するため。
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from util.color import RGBA
from util.constants import WINDOW_CAPTION

logger = logging.getLogger(__name__)


def create_window_and_renderer(
    window_width: int,
    window_height: int,
    *,
    projection_matrix: np.ndarray,
    background: RGBA,
    quad_color: RGBA,
    caption: str = WINDOW_CAPTION,
) -> tuple[Any, Any, Any]:
    """ウィンドウ/ModernGL/QuadRenderer を生成して返す。

    Returns
    -------
    (rendering_window, mgl_ctx, quad_renderer)

    Raises
    ------
    ContextUnavailableError
        ディスプレイ/GL 設定が得られずウィンドウを開けない場合、
        またはコンテキスト取得に失敗した場合。
    ShaderCompileError
        シェーダの構築に失敗した場合（ウィンドウを閉じてから再送出）。
    """
    from engine.core.render_window import RenderWindow
    from engine.render.context import create_context
    from engine.render.errors import ContextUnavailableError, QuadspinError
    from engine.render.renderer import QuadRenderer

    try:
        rendering_window = RenderWindow(window_width, window_height, caption=caption)
    except Exception as e:  # NoSuchDisplayException / NoSuchConfigException など
        raise ContextUnavailableError(f"unable to open a window with an OpenGL context: {e}") from e
    try:
        mgl_ctx = create_context()
        quad_renderer = QuadRenderer(
            mgl_ctx,
            projection_matrix,
            color=quad_color,
            background=background,
        )
    except QuadspinError:
        rendering_window.close()
        raise
    return rendering_window, mgl_ctx, quad_renderer


__all__ = ["create_window_and_renderer"]
