"""
GL Renderer

Renders a DrawBatch to the window with moderngl.

present() packs the recorded primitives into one vertex buffer and keeps it;
redisplay() re-submits that buffer so every swap shows the last presented
frame, while new frames are only built when the model asks for a redraw.
"""

from __future__ import annotations
from typing import Optional, Tuple, TYPE_CHECKING
import logging
import numpy as np

from xenvox.ui.draw import DrawBatch, DrawRect, ScreenSize

if TYPE_CHECKING:
    import moderngl

logger = logging.getLogger(__name__)


VERTEX_SHADER = """
#version 330
in vec2 in_pos;
in vec4 in_color;
out vec4 v_color;
uniform vec2 u_screen_size;

void main() {
    vec2 ndc = (in_pos / u_screen_size) * 2.0 - 1.0;
    ndc.y = -ndc.y;
    gl_Position = vec4(ndc, 0.0, 1.0);
    v_color = in_color;
}
"""

FRAGMENT_SHADER = """
#version 330
in vec4 v_color;
out vec4 frag_color;
void main() { frag_color = v_color; }
"""

FLOATS_PER_VERTEX = 6  # pos(2f) + color(4f)


def pack_vertices(batch: DrawBatch) -> np.ndarray:
    """
    Flatten a batch into a (n, 6) float32 triangle list.

    Rects become two triangles: a0, (a0.x, a1.y), a1 and a1, (a1.x, a0.y), a0.
    Submission order is kept so later primitives draw on top.
    """
    vertices = np.zeros((batch.total_vertices, FLOATS_PER_VERTEX), dtype=np.float32)

    base = 0
    for cmd in batch.commands():
        if isinstance(cmd, DrawRect):
            (x0, y0), (x1, y1), c = cmd.a0, cmd.a1, cmd.color
            vertices[base + 0] = [x0, y0, *c]
            vertices[base + 1] = [x0, y1, *c]
            vertices[base + 2] = [x1, y1, *c]
            vertices[base + 3] = [x1, y1, *c]
            vertices[base + 4] = [x1, y0, *c]
            vertices[base + 5] = [x0, y0, *c]
            base += 6
        else:
            for v in cmd.vertices:
                vertices[base] = [v.pos[0], v.pos[1], *v.color]
                base += 1

    return vertices


class GLRenderer(DrawBatch):
    """
    DrawBatch that can flush itself to a moderngl context.

    Usage:
        renderer = GLRenderer(ctx, screen_size, pixel_ratio)

        # On redraw:
        renderer.clear(background)
        tree.draw(screen_size, renderer, config.tree)
        renderer.present(screen_size)

        # Before every buffer swap:
        renderer.redisplay()
    """

    def __init__(self, ctx: 'moderngl.Context', screen_size: Tuple[float, float],
                 pixel_ratio: float = 1.0):
        super().__init__()
        self.ctx = ctx
        self.pixel_ratio = pixel_ratio
        self.viewport_size = (0, 0)
        self.notify_resize(screen_size)

        self._prog = None
        self._vbo = None
        self._vao = None
        self._capacity = 0

        self._vertex_count = 0
        self._screen_size: Optional[ScreenSize] = None
        self._shown_clear = (0.0, 0.0, 0.0, 1.0)

        self._initialized = False

    def _ensure_initialized(self):
        """Compile shaders on first use."""
        if self._initialized:
            return

        self._prog = self.ctx.program(
            vertex_shader=VERTEX_SHADER,
            fragment_shader=FRAGMENT_SHADER,
        )
        self.ctx.enable(self.ctx.BLEND)
        self.ctx.blend_func = self.ctx.SRC_ALPHA, self.ctx.ONE_MINUS_SRC_ALPHA
        self._initialized = True

    def _ensure_buffer(self, count: int):
        """Ensure the VBO can hold count vertices."""
        if self._capacity >= count and self._vbo is not None:
            return

        new_capacity = max(count, self._capacity * 2, 1024)
        byte_size = new_capacity * FLOATS_PER_VERTEX * 4

        if self._vao:
            self._vao.release()
        if self._vbo:
            self._vbo.release()

        self._vbo = self.ctx.buffer(reserve=byte_size, dynamic=True)
        self._capacity = new_capacity
        self._vao = self.ctx.vertex_array(
            self._prog,
            [(self._vbo, "2f 4f", "in_pos", "in_color")],
        )
        logger.debug("Vertex buffer grown to %d vertices", new_capacity)

    def present(self, screen_size: ScreenSize):
        """Upload the recorded frame and clear the primitive buffer."""
        self._ensure_initialized()

        vertices = pack_vertices(self)
        if len(vertices):
            self._ensure_buffer(len(vertices))
            self._vbo.orphan()
            self._vbo.write(vertices.tobytes())

        self._vertex_count = len(vertices)
        self._screen_size = ScreenSize(*screen_size)
        if self.clear_color is not None:
            self._shown_clear = self.clear_color
        self.reset()

        self.redisplay()

    def redisplay(self):
        """Draw the last presented frame into the default framebuffer."""
        self._ensure_initialized()

        self.ctx.screen.use()
        self.ctx.viewport = (0, 0, *self.viewport_size)
        self.ctx.clear(*self._shown_clear)

        if self._vertex_count and self._screen_size is not None:
            self._prog["u_screen_size"].value = tuple(self._screen_size)
            self._vao.render(mode=self.ctx.TRIANGLES, vertices=self._vertex_count)

    def notify_resize(self, screen_size: Tuple[float, float]):
        """Match the viewport to a new window size (window coordinates)."""
        w, h = screen_size
        self.viewport_size = (round(w * self.pixel_ratio), round(h * self.pixel_ratio))

    def release(self):
        """Release GPU resources."""
        if self._vao:
            self._vao.release()
        if self._vbo:
            self._vbo.release()
        if self._prog:
            self._prog.release()
