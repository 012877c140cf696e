from __future__ import annotations

import math

import numpy as np
import pytest

from engine.core import matrix as mat4


def test_from_scaling_diagonal() -> None:
    m = mat4.from_scaling(2.0, 3.0)
    assert np.allclose(np.diag(m), [2.0, 3.0, 1.0, 1.0])
    assert np.count_nonzero(m - np.diag(np.diag(m))) == 0


def test_from_z_rotation_quarter_turn_maps_x_to_y() -> None:
    r = mat4.from_z_rotation(math.pi / 2)
    p = r @ np.array([1.0, 0.0, 0.0, 1.0])
    assert np.allclose(p, [0.0, 1.0, 0.0, 1.0])


def test_multiply_right_factor_acts_first() -> None:
    # S @ R: 点 (1,0,0) は先に 90° 回転して (0,1,0)、その後 y を 3 倍
    s = mat4.from_scaling(2.0, 3.0, 1.0)
    r = mat4.from_z_rotation(math.pi / 2)
    p = mat4.multiply(s, r) @ np.array([1.0, 0.0, 0.0, 1.0])
    assert np.allclose(p, [0.0, 3.0, 0.0, 1.0])


def test_set_translation_overwrites_column_only() -> None:
    base = mat4.multiply(mat4.from_scaling(2.0, 0.5), mat4.from_z_rotation(0.7))
    base[0, 3] = 99.0  # 既存の平行移動は捨てられる
    out = mat4.set_translation(base, 1.0, -2.0, 3.5)
    assert mat4.translation_of(out) == (1.0, -2.0, 3.5)
    assert np.array_equal(out[:, :3], base[:, :3])
    assert np.array_equal(out[3], base[3])
    # 入力は変更しない
    assert base[0, 3] == 99.0


def test_perspective_matches_gl_convention() -> None:
    fovy = math.radians(45.0)
    aspect = 640 / 480
    near, far = 0.1, 100.0
    p = mat4.perspective(fovy, aspect, near, far)
    f = 1.0 / math.tan(fovy / 2)
    assert p[0, 0] == pytest.approx(f / aspect)
    assert p[1, 1] == pytest.approx(f)
    assert p[2, 2] == pytest.approx((far + near) / (near - far))
    assert p[2, 3] == pytest.approx(2 * far * near / (near - far))
    assert p[3, 2] == -1.0
    assert p[3, 3] == 0.0

    # near 面上の点は NDC z=-1、far 面上の点は z=+1
    for depth, expected in ((near, -1.0), (far, 1.0)):
        clip = p @ np.array([0.0, 0.0, -depth, 1.0])
        assert clip[2] / clip[3] == pytest.approx(expected)


@pytest.mark.parametrize(
    "args",
    [(0.0, 1.0, 0.1, 100.0), (math.pi, 1.0, 0.1, 100.0), (1.0, 0.0, 0.1, 100.0), (1.0, 1.0, 0.0, 1.0), (1.0, 1.0, 5.0, 1.0)],
)
def test_perspective_rejects_degenerate_inputs(args: tuple[float, float, float, float]) -> None:
    with pytest.raises(ValueError):
        mat4.perspective(*args)


def test_to_gl_bytes_is_column_major_float32() -> None:
    m = mat4.set_translation(mat4.identity(), 7.0, 8.0, 9.0)
    data = np.frombuffer(mat4.to_gl_bytes(m), dtype="f4")
    assert data.shape == (16,)
    # 列優先: 平行移動は 12..14 番目
    assert data[12:15].tolist() == [7.0, 8.0, 9.0]
