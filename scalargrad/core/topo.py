# scalargrad/core/topo.py
from __future__ import annotations
from typing import List

from .tape import Tape
from .var import Var


def order_indices(tape: Tape, root: int) -> List[int]:
    """
    Depth-first post-order over the nodes reachable from `root`.

    Parents are visited in recorded order before the node itself is emitted,
    and each index is emitted once. An explicit stack replaces recursion so
    arbitrarily deep chains do not hit the interpreter recursion limit; the
    resulting order is the one the recursive formulation would produce.
    """
    nodes = tape.nodes
    visited = set()
    topo: List[int] = []
    stack = [(root, False)]
    while stack:
        idx, expanded = stack.pop()
        if expanded:
            topo.append(idx)
            continue
        if idx in visited:
            continue
        visited.add(idx)
        stack.append((idx, True))
        # reversed so the first parent is popped (and fully explored) first
        for p in reversed(nodes[idx].parents):
            if p not in visited:
                stack.append((p, False))
    return topo


def order(root: Var) -> List[Var]:
    """Topological order (parents first) of every node reachable from `root`."""
    return [Var._wrap(root.tape, i) for i in order_indices(root.tape, root.index)]
