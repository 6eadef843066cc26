# scalargrad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the tape. Every driver here records on its own tape.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

import numpy as np

from .var import Var
from .tape import use_tape
from .engine import backward


def value(x: Any) -> Any:
    """Return the numeric value of a Var; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Var) else x


def _fresh_leaf(v: Any) -> Var:
    # A Var argument from another tape contributes only its value
    return Var(value(v))


def _run(y: Any, xs: List[Var]) -> List[np.float64]:
    if not isinstance(y, Var):
        # constant output: nothing depends on the inputs
        return [np.float64(0.0) for _ in xs]
    backward(y)
    return [x.grad for x in xs]


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Var], Var], x0: float) -> np.float64:
    """
    Derivative of a scalar function y = f(x) at x0.
    Runs one reverse pass within a fresh, isolated tape.
    """
    with use_tape():
        x = _fresh_leaf(x0)
        return _run(f(x), [x])[0]


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Var]], Var],
          inputs: Dict[str, float]) -> Dict[str, np.float64]:
    """
    Gradient of y = f(vars) w.r.t. ALL inputs (dict form), from ONE reverse pass.

    Parameters
    ----------
    f       : function taking a dict {name: Var} and returning a Var
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: float64}  # in the same key order as `inputs`
    """
    with use_tape():
        vars_ad: Dict[str, Var] = {k: _fresh_leaf(v) for k, v in inputs.items()}
        keys = list(vars_ad.keys())
        out = _run(f(vars_ad), [vars_ad[k] for k in keys])
        return dict(zip(keys, out))


def grads_list(f: Callable[[List[Var]], Var],
               x0_list: Iterable[float]) -> List[np.float64]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    with use_tape():
        xs: List[Var] = [_fresh_leaf(v) for v in x0_list]
        return _run(f(xs), xs)
