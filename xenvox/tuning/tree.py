# xenvox/tuning/tree.py
"""
RatioTree - Stern-Brocot mediant tree over one octave.

Layer 0 holds the root 3/2 bounded by 1/1 and 2/1. Each further layer splits
every node of the previous one into its left and right mediant children, so
layer k has 2**k nodes in ascending ratio order.

Construction is exact integer arithmetic; floats appear only when mapping a
ratio to a screen position.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple, TYPE_CHECKING
import logging

from ..core.ratio import Rational, mediant
from ..ui.draw import ScreenSize, triangle

if TYPE_CHECKING:
    from ..config import TreeConfig
    from ..ui.draw import DrawBatch

logger = logging.getLogger(__name__)


ROOT_RATIO = Rational(3, 2)
ROOT_LEFT = Rational(1, 1)
ROOT_RIGHT = Rational(2, 1)


@dataclass(frozen=True)
class RatioNode:
    ratio: Rational
    left_bound: Rational
    right_bound: Rational

    def children(self) -> Tuple[RatioNode, RatioNode]:
        left = RatioNode(
            ratio=mediant(self.left_bound, self.ratio),
            left_bound=self.left_bound,
            right_bound=self.ratio,
        )
        right = RatioNode(
            ratio=mediant(self.ratio, self.right_bound),
            left_bound=self.ratio,
            right_bound=self.right_bound,
        )
        return left, right

    def is_valid(self) -> bool:
        """Strictly between its bounds and equal to their mediant, exactly."""
        return (
            self.left_bound < self.ratio < self.right_bound
            and self.ratio.same_terms(mediant(self.left_bound, self.right_bound))
        )


def root_node() -> RatioNode:
    return RatioNode(ratio=ROOT_RATIO, left_bound=ROOT_LEFT, right_bound=ROOT_RIGHT)


class RatioTree:
    """Layered mediant tree. Rebuilt from the root whenever the depth changes."""

    def __init__(self):
        self._layers: List[Tuple[RatioNode, ...]] = [(root_node(),)]

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_layer(self):
        """Append one layer by expanding every node of the last layer."""
        layer = []
        for node in self._layers[-1]:
            layer.extend(node.children())
        self._layers.append(tuple(layer))

    def set_layers_number(self, n: int) -> RatioTree:
        """Reset to the root and add exactly n layers."""
        if n < 0:
            raise ValueError(f"Layer count must be >= 0, got {n}")
        del self._layers[1:]
        for _ in range(n):
            self.add_layer()
        logger.debug("Ratio tree built: depth=%d nodes=%d", n, len(self))
        return self

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def layers(self) -> Tuple[Tuple[RatioNode, ...], ...]:
        return tuple(self._layers)

    @property
    def depth(self) -> int:
        return len(self._layers) - 1

    @property
    def root(self) -> RatioNode:
        return self._layers[0][0]

    def nodes(self) -> Iterator[Tuple[int, int, RatioNode]]:
        """(layer index, index within layer, node) for every node."""
        for i, layer in enumerate(self._layers):
            for j, node in enumerate(layer):
                yield i, j, node

    def __len__(self) -> int:
        return sum(len(layer) for layer in self._layers)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RatioTree):
            return NotImplemented
        return self._layers == other._layers

    def __repr__(self) -> str:
        return f"RatioTree(depth={self.depth}, nodes={len(self)})"

    # -------------------------------------------------------------------------
    # Screen mapping
    # -------------------------------------------------------------------------

    def layer_y(self, i: int, height: float, config: 'TreeConfig') -> float:
        """Vertical center of layer i. A root-only tree sits at the top margin."""
        span = len(self._layers) - 1
        fraction = i / span if span else 0.0
        return height * config.vertical_scale * (config.vertical_offset + fraction)

    @staticmethod
    def node_x(node: RatioNode, width: float) -> float:
        return width * node.ratio.log2()

    def draw(self, screen_size: ScreenSize, sink: 'DrawBatch', config: 'TreeConfig'):
        """One triangle per node; color alternates by index within the layer."""
        width, height = screen_size
        colors = config.colors
        for i, layer in enumerate(self._layers):
            y = self.layer_y(i, height, config)
            for j, node in enumerate(layer):
                x = self.node_x(node, width)
                sink.render_triangle(triangle((x, y), config.glyph_size, colors[j % 2]))
