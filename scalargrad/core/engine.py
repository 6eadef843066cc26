# scalargrad/core/engine.py
from __future__ import annotations
import logging
import numpy as np
from typing import Optional

from . import tape as tape_mod
from .node import Op
from .tape import Tape
from .topo import order_indices
from .var import Var

logger = logging.getLogger(__name__)


def propagate(tape: Tape, idx: int):
    """
    Distribute node `idx`'s current grad g into its parents:

        ADD, SUB : a += g ; b += g
        MUL, DIV : a += b.value * g ; b += a.value * g
        NEG      : a += -g
        POW(e)   : a += e * a.value**(e-1) * g
        RELU     : a += g if a.value > 0 else 0

    SUB and DIV nodes are recorded as a + (-b) and a * b**-1, so their
    second parent is the NEG/POW node and the ADD/MUL rules apply unchanged.
    Contributions are added, never assigned, so a parent listed twice
    receives both.
    """
    nodes = tape.nodes
    node = nodes[idx]
    g = node.grad
    op = node.op

    if op is Op.LEAF:
        return

    if op is Op.ADD or op is Op.SUB:
        a, b = node.parents
        nodes[a].grad += g
        nodes[b].grad += g
    elif op is Op.MUL or op is Op.DIV:
        a, b = node.parents
        av, bv = nodes[a].value, nodes[b].value
        nodes[a].grad += bv * g
        nodes[b].grad += av * g
    elif op is Op.NEG:
        (a,) = node.parents
        nodes[a].grad += -g
    elif op is Op.POW:
        (a,) = node.parents
        e = node.exponent
        nodes[a].grad += e * nodes[a].value ** (e - 1.0) * g
    elif op is Op.RELU:
        (a,) = node.parents
        nodes[a].grad += g if nodes[a].value > 0 else 0.0
    else:
        raise ValueError(f"no gradient rule for op {op!r}")


def reset_grads(root: Var):
    """Set grad to 0 on every node reachable from `root`."""
    nodes = root.tape.nodes
    for i in order_indices(root.tape, root.index):
        nodes[i].grad = np.float64(0.0)


def zero_grads(tape: Optional[Tape] = None):
    """
    Set grad to 0 on every node of a tape (the active one by default),
    whether or not it is reachable from any particular output.
    """
    tape = tape if tape is not None else tape_mod.global_tape
    for node in tape.nodes:
        node.grad = np.float64(0.0)


def backward(root: Var):
    """
    Reverse sweep from `root`.

    Clears the grads reachable from `root`, seeds d(root)/d(root) = 1, then
    walks the topological order backwards. Every consumer of a node comes
    later in the order, so by the time a node propagates its grad is complete.
    Non-finite values flow through as IEEE results.
    """
    tape = root.tape
    reset_grads(root)
    tape.nodes[root.index].grad = np.float64(1.0)

    topo = order_indices(tape, root.index)
    logger.debug("backward from node %d: %d reachable nodes", root.index, len(topo))
    with np.errstate(all="ignore"):
        for i in reversed(topo):
            propagate(tape, i)
