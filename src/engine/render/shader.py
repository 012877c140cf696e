"""
どこで: `engine.render` のシェーダ。
何を: 固定の頂点/フラグメントシェーダ源と、それをコンパイル・リンクする `create_program()`。
なぜ: 失敗時にドライバのログ付き `ShaderCompileError` を投げ、無効なハンドルを返さないため。
"""

from __future__ import annotations

import logging
from typing import Any

import moderngl

from .errors import ShaderCompileError

logger = logging.getLogger(__name__)

VERTEX_SHADER = """
#version 330

in vec2 in_vert;

uniform mat4 projection;
uniform mat4 model;

void main() {
    gl_Position = projection * model * vec4(in_vert, 0.0, 1.0);
}
"""

FRAGMENT_SHADER = """
#version 330

uniform vec4 color;

out vec4 frag_color;

void main() {
    frag_color = color;
}
"""

REQUIRED_UNIFORMS = ("projection", "model", "color")


def create_program(
    ctx: Any,
    vertex_source: str = VERTEX_SHADER,
    fragment_source: str = FRAGMENT_SHADER,
) -> Any:
    """シェーダをコンパイル・リンクしてプログラムを返す。

    - コンパイル/リンク失敗は `ShaderCompileError`（`log` に診断）。
    - 必須 uniform が最適化で消えている場合も同じ例外にする（描画時の KeyError を避ける）。
    """
    try:
        program = ctx.program(vertex_shader=vertex_source, fragment_shader=fragment_source)
    except moderngl.Error as e:
        logger.debug("shader build failed", exc_info=True)
        raise ShaderCompileError("unable to initialize the shader program", log=str(e)) from e

    missing = [name for name in REQUIRED_UNIFORMS if _lookup(program, name) is None]
    if missing:
        program.release()
        raise ShaderCompileError(
            "shader program is missing uniforms", log=", ".join(missing)
        )
    return program


def _lookup(program: Any, name: str) -> Any:
    try:
        return program[name]
    except KeyError:
        return None


__all__ = ["VERTEX_SHADER", "FRAGMENT_SHADER", "REQUIRED_UNIFORMS", "create_program"]
