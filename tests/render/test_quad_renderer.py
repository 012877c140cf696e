from __future__ import annotations

import math

import moderngl
import numpy as np
import pytest

from api.quad_runner.utils import build_projection
from engine.core import matrix as mat4
from engine.core.scene import QuadScene
from engine.render.quad_mesh import QUAD_VERTICES
from engine.render.renderer import QuadRenderer
from tests._utils.fake_gl import FakeContext


def _make(ctx: FakeContext, **kw) -> QuadRenderer:  # noqa: ANN003
    return QuadRenderer(ctx, build_projection(640, 480), **kw)


def test_static_quad_buffer_uploaded_once(gl_ctx: FakeContext) -> None:
    r = _make(gl_ctx)
    assert len(gl_ctx.buffers) == 1
    data = np.frombuffer(gl_ctx.buffers[0].data, dtype=np.float32).reshape(-1, 2)
    assert data.tolist() == [[-1.0, 1.0], [1.0, 1.0], [-1.0, -1.0], [1.0, -1.0]]
    assert np.array_equal(data, QUAD_VERTICES)
    assert gl_ctx.vaos[0].content == [(gl_ctx.buffers[0], "2f", "in_vert")]
    assert r.mesh.vertex_count == 4


def test_draw_before_submit_only_clears(gl_ctx: FakeContext) -> None:
    r = _make(gl_ctx)
    r.draw()
    assert gl_ctx.clears == [((0.0, 0.0, 0.0, 1.0), 1.0)]
    assert gl_ctx.vaos[0].render_calls == []
    assert r.draw_count == 0


def test_draw_issues_one_triangle_strip_of_four(gl_ctx: FakeContext) -> None:
    r = _make(gl_ctx)
    r.submit(mat4.identity())
    r.draw()
    assert gl_ctx.vaos[0].render_calls == [(moderngl.TRIANGLE_STRIP, 4)]
    assert moderngl.DEPTH_TEST in gl_ctx.enabled
    assert gl_ctx.depth_func == "<="
    assert gl_ctx.clears[-1][1] == 1.0
    assert r.draw_count == 1


def test_projection_written_once_across_ticks(gl_ctx: FakeContext) -> None:
    proj = build_projection(640, 480)
    r = QuadRenderer(gl_ctx, proj)
    scene = QuadScene([r.submit])
    for _ in range(25):
        scene.tick(1 / 30)
        r.draw()

    prog = gl_ctx.programs[0]
    assert len(prog["projection"].writes) == 1
    assert prog["projection"].writes[0] == mat4.to_gl_bytes(proj)
    assert np.array_equal(r.projection_matrix, proj)
    assert len(prog["model"].writes) == 25


def test_projection_is_read_only_copy(gl_ctx: FakeContext) -> None:
    proj = build_projection(640, 480)
    r = QuadRenderer(gl_ctx, proj)
    proj[0, 0] = 123.0
    assert r.projection_matrix[0, 0] != 123.0
    with pytest.raises(ValueError):
        r.projection_matrix[0, 0] = 1.0


def test_model_uniform_carries_latest_matrix(gl_ctx: FakeContext) -> None:
    r = _make(gl_ctx)
    scene = QuadScene([r.submit])
    scene.tick(1 / 30)
    r.draw()
    data = np.frombuffer(gl_ctx.programs[0]["model"].writes[-1], dtype="f4")
    s = scene.state
    assert data[12:15] == pytest.approx([s.x, s.y, s.z])


def test_colors_normalized(gl_ctx: FakeContext) -> None:
    r = _make(gl_ctx, color="#FF000080", background=(255, 255, 255))
    assert gl_ctx.programs[0]["color"].value == pytest.approx((1.0, 0.0, 0.0, 128 / 255))
    assert r.background == (1.0, 1.0, 1.0, 1.0)
    r.set_color((0.0, 1.0, 0.0))
    assert gl_ctx.programs[0]["color"].value == (0.0, 1.0, 0.0, 1.0)


def test_rejects_bad_shapes(gl_ctx: FakeContext) -> None:
    with pytest.raises(ValueError):
        QuadRenderer(gl_ctx, np.eye(3))
    assert gl_ctx.programs[0].released
    r = _make(gl_ctx)
    with pytest.raises(ValueError):
        r.submit(np.eye(2))


def test_release_frees_gpu_objects(gl_ctx: FakeContext) -> None:
    r = _make(gl_ctx)
    r.release()
    assert gl_ctx.vaos[0].released
    assert gl_ctx.buffers[0].released
    assert gl_ctx.programs[0].released


def test_projection_uses_viewport_aspect() -> None:
    p = build_projection(640, 480)
    f = 1.0 / math.tan(math.radians(45.0) / 2)
    assert p[0, 0] == pytest.approx(f / (640 / 480))
    assert p[1, 1] == pytest.approx(f)
