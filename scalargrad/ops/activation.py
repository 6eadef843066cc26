# scalargrad/ops/activation.py
import numpy as np
from ..core.node import Op
from .arithmetic import _as_var, _push, _tape_of


def relu(x):
    """
    Rectified linear unit.

    The gradient is passed through only for strictly positive inputs; an
    input of exactly 0 (or nan) routes zero gradient and yields 0.
    """
    tape = _tape_of(x)
    with tape.recording():
        x = _as_var(x, tape)
        val = x.value if x.value > 0 else np.float64(0.0)
        return _push(tape, Op.RELU, val, (x.index,))
