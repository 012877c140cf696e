"""
どこで: `engine.core` の 4x4 行列ユーティリティ。
何を: 単位行列・スケール・Z 回転・積・平行移動の直接設定・透視投影・GL 転送用バイト列。
なぜ: モデル行列/投影行列の組み立てを純関数に集約し、描画層から数式を切り離すため。

規約:
- 行列は数学的な表記（列ベクトル `M @ v`）の `float64` ndarray で保持する。
  平行移動は `M[0:3, 3]`（第 4 列の上 3 行）。
- GPU（ModernGL）へは列優先の `float32` で渡すため `to_gl_bytes()` で転置して詰める。
"""

from __future__ import annotations

import math

import numpy as np


def identity() -> np.ndarray:
    return np.eye(4, dtype=np.float64)


def from_scaling(sx: float, sy: float, sz: float = 1.0) -> np.ndarray:
    """対角にスケールを置いた行列。"""
    m = identity()
    m[0, 0] = float(sx)
    m[1, 1] = float(sy)
    m[2, 2] = float(sz)
    return m


def from_z_rotation(angle_rad: float) -> np.ndarray:
    """Z 軸回りの回転行列（右手系、反時計回りが正）。"""
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    m = identity()
    m[0, 0] = c
    m[0, 1] = -s
    m[1, 0] = s
    m[1, 1] = c
    return m


def multiply(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """`a × b`。点に対しては右側の `b` が先に作用する。"""
    return np.asarray(a, dtype=np.float64) @ np.asarray(b, dtype=np.float64)


def set_translation(m: np.ndarray, x: float, y: float, z: float) -> np.ndarray:
    """平行移動成分を上書きした新しい行列を返す（積ではなく直接代入）。

    既存のスケール/回転成分には触れないため、結果の平行移動列は常に `(x, y, z)`。
    """
    out = np.array(m, dtype=np.float64, copy=True)
    out[0, 3] = float(x)
    out[1, 3] = float(y)
    out[2, 3] = float(z)
    return out


def translation_of(m: np.ndarray) -> tuple[float, float, float]:
    return (float(m[0, 3]), float(m[1, 3]), float(m[2, 3]))


def perspective(fovy_rad: float, aspect: float, near: float, far: float) -> np.ndarray:
    """OpenGL 流の透視投影行列（クリップ z は -1..1）。

    引数:
        fovy_rad: 垂直画角（ラジアン）。
        aspect: 幅/高さ。
        near, far: 正のクリップ距離（near < far）。
    """
    if not (0.0 < fovy_rad < math.pi):
        raise ValueError(f"fovy must be in (0, pi), got {fovy_rad}")
    if aspect <= 0.0:
        raise ValueError(f"aspect must be > 0, got {aspect}")
    if not (0.0 < near < far):
        raise ValueError(f"expected 0 < near < far, got near={near} far={far}")
    f = 1.0 / math.tan(fovy_rad / 2.0)
    nf = 1.0 / (near - far)
    m = np.zeros((4, 4), dtype=np.float64)
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = (far + near) * nf
    m[2, 3] = 2.0 * far * near * nf
    m[3, 2] = -1.0
    return m


def to_gl_bytes(m: np.ndarray) -> bytes:
    """uniform mat4 へ書き込むための列優先 float32 バイト列。"""
    return np.ascontiguousarray(np.asarray(m).T, dtype="f4").tobytes()


__all__ = [
    "identity",
    "from_scaling",
    "from_z_rotation",
    "multiply",
    "set_translation",
    "translation_of",
    "perspective",
    "to_gl_bytes",
]
