"""Grid layout: nodes in uniform cells, row by row."""

import logging
import math

from ..config import GridAlignment, GridLayoutConfig
from ..graph import LayoutGraph, LayoutNode
from .common import ordered_nodes

logger = logging.getLogger(__name__)

_LEFT = {GridAlignment.TOP_LEFT, GridAlignment.LEFT_CENTER, GridAlignment.BOTTOM_LEFT}
_RIGHT = {GridAlignment.TOP_RIGHT, GridAlignment.RIGHT_CENTER, GridAlignment.BOTTOM_RIGHT}
_TOP = {GridAlignment.TOP_LEFT, GridAlignment.TOP_CENTER, GridAlignment.TOP_RIGHT}
_BOTTOM = {GridAlignment.BOTTOM_LEFT, GridAlignment.BOTTOM_CENTER, GridAlignment.BOTTOM_RIGHT}


def grid_dimensions(count: int, columns: int = 0, rows: int = 0) -> tuple[int, int]:
    """
    Work out (columns, rows) for `count` nodes.

    Zero means "auto". With neither given the grid is roughly square:
    columns = ceil(sqrt(count)).
    """
    if count <= 0:
        return (max(columns, 0), max(rows, 0))

    if columns > 0 and rows > 0:
        return (columns, rows)
    if columns > 0:
        return (columns, math.ceil(count / columns))
    if rows > 0:
        return (math.ceil(count / rows), rows)

    columns = math.ceil(math.sqrt(count))
    return (columns, math.ceil(count / columns))


def grid_layout(graph: LayoutGraph, config: GridLayoutConfig) -> list[LayoutNode]:
    """
    Arrange nodes in a grid of equal cells.

    Every cell is as large as the largest node plus spacing. Nodes fill rows
    left to right; when both columns and rows are fixed and there are more
    nodes than cells, the extra nodes continue on further rows.

    Args:
        graph: Graph to arrange (modified in-place)
        config: Grid settings

    Returns:
        The graph's nodes
    """
    if not graph.nodes:
        return graph.nodes

    nodes = ordered_nodes(graph.nodes, config.sort_nodes, config.node_comparator)
    columns, rows = grid_dimensions(len(nodes), config.columns, config.rows)
    logger.debug("Grid layout: %d nodes in %d x %d", len(nodes), columns, rows)

    cell_width = max(n.size.width for n in nodes) + config.horizontal_spacing
    cell_height = max(n.size.height for n in nodes) + config.vertical_spacing
    alignment = config.alignment

    for i, node in enumerate(nodes):
        row, col = divmod(i, columns)
        cell_x = col * cell_width
        cell_y = row * cell_height

        if alignment in _LEFT:
            x = cell_x
        elif alignment in _RIGHT:
            x = cell_x + cell_width - node.size.width
        else:
            x = cell_x + (cell_width - node.size.width) / 2

        if alignment in _TOP:
            y = cell_y
        elif alignment in _BOTTOM:
            y = cell_y + cell_height - node.size.height
        else:
            y = cell_y + (cell_height - node.size.height) / 2

        node.move_to(x, y)

    graph.center_on_origin()
    return graph.nodes
