"""
どこで: `engine.render` の低レベルメッシュ層。
何を: 4 頂点のクアッドを静的 VBO に 1 度だけ転送し、TRIANGLE_STRIP で描く VAO を保持。
なぜ: GPU バッファの確保/解放を Renderer から切り離すため。
"""

from __future__ import annotations

from typing import Any

import moderngl
import numpy as np

# 左上 → 右上 → 左下 → 右下（TRIANGLE_STRIP で 2 三角形）
QUAD_VERTICES = np.array(
    [
        [-1.0, 1.0],
        [1.0, 1.0],
        [-1.0, -1.0],
        [1.0, -1.0],
    ],
    dtype=np.float32,
)


class QuadMesh:
    """静的な 2D クアッド。生成後に頂点を書き換えることはない。"""

    def __init__(self, ctx: Any, program: Any, vertices: np.ndarray = QUAD_VERTICES):
        """
        ctx: ModernGL コンテキスト。
        program: `in_vert`（vec2）を持つシェーダプログラム。
        """
        self.ctx = ctx
        self.program = program
        data = np.ascontiguousarray(vertices, dtype=np.float32)
        self.vertex_count = int(data.shape[0])
        self.vbo = ctx.buffer(data.tobytes())
        self.vao = ctx.vertex_array(program, [(self.vbo, "2f", "in_vert")])

    def render(self) -> None:
        self.vao.render(moderngl.TRIANGLE_STRIP, vertices=self.vertex_count)

    def release(self) -> None:
        """GPU のメモリを解放する（終了時に使う）。"""
        self.vao.release()
        self.vbo.release()
