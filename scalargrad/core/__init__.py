# scalargrad/core/__init__.py

"""
Core public API for the scalargrad package.

Exports:
    Var           : Handle to a node on a tape; arithmetic on Vars records the graph.
    Tape          : Arena of nodes; parents are referenced by index.
    use_tape      : Context manager to temporarily switch the active tape.
    order         : Topological order (parents first) of the nodes reachable from a Var.
    backward      : Reset, seed and run one reverse sweep from an output Var.
    reset_grads   : Zero the grads of every node reachable from a Var.
    zero_grads    : Zero every grad on a tape.
    grad, grads   : Convenience drivers that differentiate a Python function.
    value         : Extract the primal value from a Var.
"""

from .node import Node, Op
from .var import Var
from .tape import Tape, use_tape
from .topo import order
from .engine import backward, reset_grads, zero_grads
from .seeds import grad, grads, grads_list, value

__all__ = [
    "Node", "Op",
    "Var",
    "Tape", "use_tape",
    "order",
    "backward", "reset_grads", "zero_grads",
    "grad", "grads", "grads_list", "value",
]
