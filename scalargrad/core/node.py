# scalargrad/core/node.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np


class Op(Enum):
    """Operation tag of a Node; selects the gradient rule applied in backward."""
    LEAF = ""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "pow"
    NEG = "neg"
    RELU = "ReLU"


@dataclass
class Node:
    """
    One vertex on the tape.

    Attributes
    ----------
    value : np.float64
        Result of the operation. Written once when the node is pushed.
    grad : np.float64
        Accumulated d(root)/d(node). Only reset and backward touch it.
    parents : Tuple[int, ...]
        Tape indices of the operands, in operand order. The same index may
        appear twice (e.g. `a + a`).
    op : Op
        Operation tag.
    exponent : Optional[float]
        Only set for Op.POW.
    """
    value: np.float64
    grad: np.float64
    parents: Tuple[int, ...]
    op: Op
    exponent: Optional[float] = None
