from .tree import RatioTree, RatioNode, root_node
from .grid import EdoGrid, BandLayout

__all__ = ['RatioTree', 'RatioNode', 'root_node', 'EdoGrid', 'BandLayout']
