"""
どこで: `api.quad_runner.utils`（純粋関数/小ヘルパ）。
何を: FPS/表示面サイズ/色/カメラ設定の解決と、投影行列の構築。
なぜ: 引数 → 設定ファイル → 既定値の優先順を 1 箇所にまとめ、GL なしでテストできるようにするため。
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping

import numpy as np

from engine.core import matrix as mat4
from engine.core.frame_clock import InvalidFrameRateError, validate_fps
from util.color import RGBA, normalize_color
from util.constants import (
    APP_HEIGHT,
    APP_WIDTH,
    DEFAULT_BACKGROUND,
    DEFAULT_FPS,
    DEFAULT_QUAD_COLOR,
    FIELD_OF_VIEW_DEG,
    Z_FAR,
    Z_NEAR,
)
from util.utils import config_section

logger = logging.getLogger(__name__)


def resolve_fps(
    requested_fps: float | None, cfg: Mapping[str, Any], *, default: float = DEFAULT_FPS
) -> float:
    """FPS を解決する。

    - 明示指定は検証のみ行い、正でなければ `InvalidFrameRateError`（黙って丸めない）。
    - 未指定時は `frame_clock.fps`。不正なら警告して既定値。
    """
    if requested_fps is not None:
        return validate_fps(requested_fps)
    raw = config_section(dict(cfg), "frame_clock").get("fps")
    if raw is None:
        return float(default)
    try:
        return validate_fps(raw)
    except InvalidFrameRateError as e:
        logger.warning("ignoring frame_clock.fps from config: %s", e)
        return float(default)


def resolve_window_size(
    requested: tuple[int, int] | None, cfg: Mapping[str, Any]
) -> tuple[int, int]:
    """表示面サイズ [px] を解決する（引数 > `canvas.width/height` > 640x480）。

    明示指定が正の整数 2 つでなければ `ValueError`。
    """
    if requested is not None:
        try:
            w, h = int(requested[0]), int(requested[1])
        except (TypeError, ValueError, IndexError) as e:
            raise ValueError(f"invalid window_size: {requested!r}") from e
        if w <= 0 or h <= 0:
            raise ValueError(f"window_size must be positive, got: {(w, h)}")
        return w, h
    canvas = config_section(dict(cfg), "canvas")
    try:
        w = int(canvas.get("width", APP_WIDTH))
        h = int(canvas.get("height", APP_HEIGHT))
    except (TypeError, ValueError):
        logger.warning("invalid canvas size in config; using %dx%d", APP_WIDTH, APP_HEIGHT)
        return APP_WIDTH, APP_HEIGHT
    if w <= 0 or h <= 0:
        logger.warning("non-positive canvas size in config; using %dx%d", APP_WIDTH, APP_HEIGHT)
        return APP_WIDTH, APP_HEIGHT
    return w, h


def resolve_color(requested: Any, cfg: Mapping[str, Any], key: str, default: RGBA) -> RGBA:
    """色を解決する（引数 > `canvas.<key>` > 既定）。明示指定の不正値は `ValueError`。"""
    if requested is not None:
        return normalize_color(requested)
    raw = config_section(dict(cfg), "canvas").get(key)
    if raw is None:
        return default
    try:
        return normalize_color(raw)
    except ValueError as e:
        logger.warning("ignoring canvas.%s from config: %s", key, e)
        return default


def resolve_background(requested: Any, cfg: Mapping[str, Any]) -> RGBA:
    return resolve_color(requested, cfg, "background_color", DEFAULT_BACKGROUND)


def resolve_quad_color(requested: Any, cfg: Mapping[str, Any]) -> RGBA:
    return resolve_color(requested, cfg, "quad_color", DEFAULT_QUAD_COLOR)


def resolve_camera(cfg: Mapping[str, Any]) -> tuple[float, float, float]:
    """(画角[度], near, far) を返す。設定が不正なら既定値 (45, 0.1, 100)。"""
    cam = config_section(dict(cfg), "camera")
    try:
        fov = float(cam.get("field_of_view_deg", FIELD_OF_VIEW_DEG))
        near = float(cam.get("z_near", Z_NEAR))
        far = float(cam.get("z_far", Z_FAR))
    except (TypeError, ValueError):
        logger.warning("invalid camera section in config; using defaults")
        return FIELD_OF_VIEW_DEG, Z_NEAR, Z_FAR
    if not (0.0 < fov < 180.0 and 0.0 < near < far):
        logger.warning("out-of-range camera section in config; using defaults")
        return FIELD_OF_VIEW_DEG, Z_NEAR, Z_FAR
    return fov, near, far


def build_projection(
    width: float,
    height: float,
    *,
    fov_deg: float = FIELD_OF_VIEW_DEG,
    near: float = Z_NEAR,
    far: float = Z_FAR,
) -> "np.ndarray":
    """表示面のアスペクト比に合わせた透視投影行列（数学表記、GL 転送時に転置）。"""
    return mat4.perspective(math.radians(fov_deg), float(width) / float(height), near, far)


__all__ = [
    "resolve_fps",
    "resolve_window_size",
    "resolve_color",
    "resolve_background",
    "resolve_quad_color",
    "resolve_camera",
    "build_projection",
]
