import numpy as np

from xenvox.ui.draw import DrawBatch, triangle
from xenvox.ui.renderer import GLRenderer, pack_vertices


def test_pack_vertices_keeps_submission_order():
    batch = DrawBatch()
    batch.render_rect((0.0, 0.0), (10.0, 20.0), (1.0, 0.0, 0.0, 1.0))
    batch.render_triangle(triangle((50.0, 50.0), 8.0, (0.0, 1.0, 0.0, 1.0)))

    vertices = pack_vertices(batch)
    assert vertices.shape == (9, 6)
    assert vertices.dtype == np.float32

    # Rect: two triangles covering both corners
    assert tuple(vertices[0, :2]) == (0.0, 0.0)
    assert tuple(vertices[2, :2]) == (10.0, 20.0)
    assert tuple(vertices[0, 2:]) == (1.0, 0.0, 0.0, 1.0)

    # Triangle glyph after it, apex first
    assert tuple(vertices[6, :2]) == (50.0, 46.0)
    assert tuple(vertices[7, :2]) == (46.0, 54.0)
    assert vertices[8, 3] == 1.0


def test_pack_empty_batch():
    assert pack_vertices(DrawBatch()).shape == (0, 6)


def test_viewport_follows_pixel_ratio():
    renderer = GLRenderer(None, (960, 600), pixel_ratio=2.0)
    assert renderer.viewport_size == (1920, 1200)
    renderer.notify_resize((800.0, 500.0))
    assert renderer.viewport_size == (1600, 1000)
