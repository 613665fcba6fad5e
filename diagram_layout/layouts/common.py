"""Helpers shared by several layout strategies."""

from functools import cmp_to_key
from typing import Optional

from ..config import NodeComparator
from ..graph import LayoutNode


def ordered_nodes(
    nodes: list[LayoutNode],
    sort: bool,
    comparator: Optional[NodeComparator]
) -> list[LayoutNode]:
    """
    Copy of `nodes`, stably sorted by `comparator` when sorting is enabled.

    Sorting without a comparator keeps the input order.
    """
    result = list(nodes)
    if sort and comparator is not None and len(result) > 1:
        result.sort(key=cmp_to_key(comparator))
    return result
