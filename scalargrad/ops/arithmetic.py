# scalargrad/ops/arithmetic.py
import numpy as np
from ..config import AutogradConfig
from ..core.node import Op
from ..core.var import Var
from ..core import tape as tape_mod  # Use module access for use_tape() compatibility


def _tape_of(*xs):
    """The tape shared by the Var operands; the active tape if there are none."""
    tape = None
    for x in xs:
        if isinstance(x, Var):
            if tape is None:
                tape = x.tape
            elif x.tape is not tape:
                raise ValueError("operands are recorded on different tapes")
    return tape if tape is not None else tape_mod.global_tape


def _as_var(x, tape):
    """Ensure x is a Var; otherwise promote the literal to a fresh leaf on `tape`."""
    return x if isinstance(x, Var) else Var(x, tape=tape)


def _push(tape, op, value, parents, exponent=None):
    AutogradConfig.check_finite(value, op.name.lower())
    idx = tape.push_node(op=op, value=value, parents=parents, exponent=exponent)
    return Var._wrap(tape, idx)


def leaf(x, tape=None):
    """Input or literal node: no parents, nothing to propagate."""
    return Var(x, tape=tape)


def add(x, y):
    tape = _tape_of(x, y)
    with tape.recording():
        x = _as_var(x, tape)
        y = _as_var(y, tape)
        with np.errstate(all="ignore"):
            val = x.value + y.value
        return _push(tape, Op.ADD, val, (x.index, y.index))


def mul(x, y):
    tape = _tape_of(x, y)
    with tape.recording():
        x = _as_var(x, tape)
        y = _as_var(y, tape)
        with np.errstate(all="ignore"):
            val = x.value * y.value
        return _push(tape, Op.MUL, val, (x.index, y.index))


def neg(x):
    """
    Unary negation, recorded as a graph edge:
      out.val = -x.val
      x.grad += -g
    """
    tape = _tape_of(x)
    with tape.recording():
        x = _as_var(x, tape)
        return _push(tape, Op.NEG, -x.value, (x.index,))


def pow(x, exponent):
    """
    Power with a constant exponent:
      out.val  = x.val ** e
      x.grad  += e * x.val**(e-1) * g

    A negative base with a non-integer exponent gives nan, and a zero base
    with a negative exponent gives inf; both are returned as-is.
    """
    if isinstance(exponent, Var):
        raise TypeError("pow() takes a numeric exponent, not a Var")
    if not isinstance(exponent, (int, float, np.integer, np.floating)):
        raise TypeError(f"pow() exponent must be a real number, got {type(exponent)}")
    e = float(exponent)
    tape = _tape_of(x)
    with tape.recording():
        x = _as_var(x, tape)
        with np.errstate(all="ignore"):
            val = x.value ** e
        return _push(tape, Op.POW, val, (x.index,), exponent=e)


def sub(x, y):
    """
    x - y, recorded as x + (-y): the NEG node is a real parent, so the
    gradient reaching y is the ADD rule followed by the NEG rule.
    """
    tape = _tape_of(x, y)
    with tape.recording():
        x = _as_var(x, tape)
        neg_y = neg(_as_var(y, tape))
        with np.errstate(all="ignore"):
            val = x.value + neg_y.value
        return _push(tape, Op.SUB, val, (x.index, neg_y.index))


def div(x, y):
    """
    x / y, recorded as x * y**-1 so that the MUL and POW rules supply the
    gradient. Dividing by a zero-valued node gives inf (or nan for 0/0).
    """
    tape = _tape_of(x, y)
    with tape.recording():
        x = _as_var(x, tape)
        inv_y = pow(_as_var(y, tape), -1.0)
        with np.errstate(all="ignore"):
            val = x.value * inv_y.value
        return _push(tape, Op.DIV, val, (x.index, inv_y.index))


def scale(x, k):
    """x * k with the scalar `k` promoted to a leaf."""
    if isinstance(k, Var):
        raise TypeError("scale() takes a numeric factor; use mul() for two Vars")
    return mul(x, k)
