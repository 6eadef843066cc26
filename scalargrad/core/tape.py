# scalargrad/core/tape.py
from __future__ import annotations
import logging
from typing import List, Tuple, Optional
from contextlib import contextmanager

import numpy as np

from .node import Node, Op

logger = logging.getLogger(__name__)


class Tape:
    """
    Arena of Nodes in creation order. A node refers to its parents by index,
    so identity is the index and the parent relation is acyclic by construction.

    Nodes are only released by reset() or by dropping the whole tape. `generation`
    is bumped on every reset so handles recorded before it can be rejected.
    """
    def __init__(self):
        self.nodes: List[Node] = []
        self.generation = 0

    def __len__(self):
        return len(self.nodes)

    def reset(self):
        logger.debug("resetting tape %#x (%d nodes)", id(self), len(self.nodes))
        self.nodes.clear()
        self.generation += 1

    @contextmanager
    def recording(self):
        """
        Group the pushes of one builder call: if the block raises, every node
        it appended is dropped again so no orphans are left on the tape.
        """
        start = len(self.nodes)
        try:
            yield self
        except BaseException:
            del self.nodes[start:]
            raise

    def push_node(self, *, op: Op, value, parents: Tuple[int, ...] = (),
                  exponent: Optional[float] = None) -> int:
        """
        Append a Node and return its index.
        `parents` must already be indices on this tape.
        """
        for p in parents:
            if not 0 <= p < len(self.nodes):
                raise ValueError(f"parent index {p} is not on this tape")
        self.nodes.append(Node(
            value=np.float64(value),
            grad=np.float64(0.0),
            parents=tuple(parents),
            op=op,
            exponent=exponent,
        ))
        return len(self.nodes) - 1


# Active tape; swapped by use_tape(). Always read it as `tape_mod.global_tape`.
global_tape = Tape()


def active_tape() -> Tape:
    # module global, so this sees the tape installed by use_tape()
    return global_tape


@contextmanager
def use_tape(tape: Optional[Tape] = None):
    """
    Context manager to temporarily record on a fresh (or given) tape:
        with use_tape():
            x = Var(2.0)
            y = x * x
            y.backward()
    """
    from . import tape as _tape_mod  # local import to avoid cycles
    prev = _tape_mod.global_tape
    try:
        # an empty Tape is falsy (__len__), so test against None
        _tape_mod.global_tape = tape if tape is not None else Tape()
        yield _tape_mod.global_tape
    finally:
        _tape_mod.global_tape = prev
