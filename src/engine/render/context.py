"""
どこで: `engine.render` のコンテキスト取得。
何を: 現在のウィンドウに紐づく ModernGL コンテキストを取得し、失敗を型付き例外へ変換。
なぜ: 取得失敗を `ContextUnavailableError` に一本化し、上位で起動中止を判断できるようにするため。
"""

from __future__ import annotations

import logging

import moderngl

from .errors import ContextUnavailableError

logger = logging.getLogger(__name__)


def create_context() -> "moderngl.Context":
    """ModernGL コンテキストを作る（GL 3.3 以上が必要）。"""
    try:
        ctx = moderngl.create_context()
    except Exception as e:  # moderngl.Error / ドライバ由来の OSError など
        raise ContextUnavailableError(
            f"unable to initialize OpenGL; your machine may not support it: {e}"
        ) from e
    info = getattr(ctx, "info", None) or {}
    logger.info(
        "GL context: %s / %s",
        info.get("GL_RENDERER", "unknown"),
        info.get("GL_VERSION", "unknown"),
    )
    return ctx


__all__ = ["create_context"]
