# scalargrad/core/var.py
from __future__ import annotations
import numpy as np
from typing import Optional, Tuple

from .node import Node, Op
from .tape import Tape, active_tape

_NUMERIC = (int, float, np.integer, np.floating)


class Var:
    """
    Handle to a Node on a tape.

    A Var is only a (tape, index) pair: copying or re-wrapping it never copies
    the Node, so `a + a` records the same parent twice and both handles see the
    same `grad` after backward.

    Attributes
    ----------
    tape : Tape
        The arena that owns the node.
    index : int
        Position of the node on `tape`; this is the node's identity. Reading it
        after `tape.reset()` raises RuntimeError, since the slot may now hold
        an unrelated node.
    """

    __slots__ = ("tape", "_index", "_generation")
    __array_priority__ = 1000  # make NumPy scalars defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, val, *, tape: Optional[Tape] = None):
        # Leaf constructor: only real numeric scalars are accepted
        if isinstance(val, Var):
            raise TypeError("Var(...) wraps a number; use the Var itself to alias a node")
        if not isinstance(val, _NUMERIC):
            raise TypeError(
                f"Var only accepts real numeric scalars (int, float, numpy real), "
                f"but got {type(val)}"
            )
        self.tape = tape if tape is not None else active_tape()
        self._generation = self.tape.generation
        self._index = self.tape.push_node(op=Op.LEAF, value=np.float64(val))

    @classmethod
    def _wrap(cls, tape: Tape, index: int) -> "Var":
        """Build a handle for an existing node without recording anything."""
        v = object.__new__(cls)
        v.tape = tape
        v._generation = tape.generation
        v._index = index
        return v

    # ---------------- accessors ---------------- #
    @property
    def index(self) -> int:
        if self._generation != self.tape.generation:
            raise RuntimeError("Var refers to a node recorded before Tape.reset(); its graph is gone")
        return self._index

    @property
    def node(self) -> Node:
        return self.tape.nodes[self.index]

    @property
    def value(self) -> np.float64:
        return self.node.value

    @property
    def grad(self) -> np.float64:
        return self.node.grad

    @property
    def op(self) -> Op:
        return self.node.op

    @property
    def parents(self) -> Tuple["Var", ...]:
        return tuple(Var._wrap(self.tape, p) for p in self.node.parents)

    @property
    def is_leaf(self) -> bool:
        return self.node.op is Op.LEAF

    def same_node(self, other: "Var") -> bool:
        """True when both handles refer to the same node (identity, not value)."""
        return (isinstance(other, Var) and self.tape is other.tape
                and self._generation == other._generation and self._index == other._index)

    def __float__(self):
        return float(self.node.value)

    # ---------------- diagnostics ---------------- #
    def __repr__(self):
        node = self.node
        head = f"Value {{ data: {float(node.value)!r}, grad: {float(node.grad)!r}, op: '{node.op.value}'"
        if node.parents:
            vals = ", ".join(repr(float(self.tape.nodes[p].value)) for p in node.parents)
            return f"{head}, parents: [ {vals} ] }}"
        return f"{head} }}"

    def __str__(self):
        node = self.node
        return f"Value {{ data: {float(node.value)!r}, grad: {float(node.grad)!r} }}"

    # ---------------- graph entry points ---------------- #
    def backward(self):
        from .engine import backward
        backward(self)

    def reset_grads(self):
        from .engine import reset_grads
        reset_grads(self)

    def relu(self):
        from ..ops.activation import relu
        return relu(self)

    def pow(self, exponent):
        from ..ops.arithmetic import pow
        return pow(self, exponent)

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)
