"""
どこで: `engine.render` の高レベル描画。
何を: 投影行列を 1 度だけ設定し、毎フレーム受け取ったモデル行列でクアッドを 1 回描く。
なぜ: クリア/深度設定/uniform 転送/描画呼び出しを一箇所に集約し、フレーム処理を単純化するため。
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import moderngl
import numpy as np

from engine.core import matrix as mat4
from util.color import RGBA, normalize_color
from util.constants import DEFAULT_BACKGROUND, DEFAULT_QUAD_COLOR

from .quad_mesh import QuadMesh
from .shader import create_program


class QuadRenderer:
    """
    シーンから渡されたモデル行列でクアッドを描く。
    投影行列は生成時に確定し、以後は書き換えない。
    """

    def __init__(
        self,
        mgl_context: Any,
        projection_matrix: np.ndarray,
        *,
        color: Sequence[float] | str = DEFAULT_QUAD_COLOR,
        background: Sequence[float] | str = DEFAULT_BACKGROUND,
    ):
        """
        mgl_context: ModernGL コンテキスト。
        projection_matrix: 4x4 透視投影（数学表記、`engine.core.matrix` 規約）。
        color / background: RGBA(0–1) または Hex。
        """
        self.ctx = mgl_context
        self._logger = logging.getLogger(__name__)

        # シェーダ初期化（失敗時は ShaderCompileError が上位へ伝播）
        self.program = create_program(mgl_context)

        projection = np.array(projection_matrix, dtype=np.float64, copy=True)
        if projection.shape != (4, 4):
            self.program.release()
            raise ValueError(f"projection_matrix must be 4x4, got shape {projection.shape}")
        projection.setflags(write=False)
        self._projection = projection
        self.program["projection"].write(mat4.to_gl_bytes(projection))

        self._color: RGBA = normalize_color(color)
        self._background: RGBA = normalize_color(background)
        self.program["color"].value = self._color

        self.mesh = QuadMesh(mgl_context, self.program)

        # 直近のモデル行列（submit 前は描画しない）
        self._model: np.ndarray | None = None
        self._draw_count = 0

    @property
    def projection_matrix(self) -> np.ndarray:
        """生成時に確定した投影行列（読み取り専用）。"""
        return self._projection

    @property
    def model_matrix(self) -> np.ndarray | None:
        return self._model

    @property
    def draw_count(self) -> int:
        return self._draw_count

    @property
    def background(self) -> RGBA:
        return self._background

    # --------------------------------------------------------------------- #
    # Scene sink                                                             #
    # --------------------------------------------------------------------- #
    def submit(self, model: np.ndarray) -> None:
        """次回 `draw()` で使うモデル行列を受け取る。"""
        m = np.asarray(model, dtype=np.float64)
        if m.shape != (4, 4):
            raise ValueError(f"model matrix must be 4x4, got shape {m.shape}")
        self._model = m

    # --------------------------------------------------------------------- #
    # Public drawing API                                                    #
    # --------------------------------------------------------------------- #
    def draw(self) -> None:
        """画面と深度をクリアし、クアッドを 1 回描く。"""
        self.ctx.enable(moderngl.DEPTH_TEST)
        self.ctx.depth_func = "<="  # 手前が奥を隠す
        r, g, b, a = self._background
        self.ctx.clear(r, g, b, a, depth=1.0)

        if self._model is None:
            return
        self.program["model"].write(mat4.to_gl_bytes(self._model))
        self.mesh.render()
        self._draw_count += 1
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(
                "draw #%d translation=%s", self._draw_count, mat4.translation_of(self._model)
            )

    def set_color(self, rgba: Sequence[float] | str) -> None:
        """クアッド色（RGBA 0–1 / Hex）を即時更新する。"""
        self._color = normalize_color(rgba)
        self.program["color"].value = self._color

    def release(self) -> None:
        """GPU リソースを解放。"""
        self.mesh.release()
        self.program.release()


__all__ = ["QuadRenderer"]
