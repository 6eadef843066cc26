# scalargrad/__init__.py
# Scalar reverse-mode automatic differentiation

from .core.node import Op
from .core.var import Var
from .core.tape import Tape, use_tape
from .core.topo import order
from .core.engine import (
    backward,
    reset_grads,
    zero_grads,
)
from .core.seeds import grad, grads, grads_list, value
from .core.graph_utils import (
    format_node,
    get_graph_stats,
    print_graph_summary,
    print_computation_graph,
)

from .ops import leaf, add, sub, mul, div, neg, pow, scale, relu

from .config import AutogradConfig
from .logger import setup_logger

__version__ = "0.1.0"

__all__ = [
    # Core
    'Op',
    'Var',
    'Tape',
    'use_tape',
    'order',
    # Engine
    'backward',
    'reset_grads',
    'zero_grads',
    # Drivers
    'grad',
    'grads',
    'grads_list',
    'value',
    # Ops
    'leaf',
    'add',
    'sub',
    'mul',
    'div',
    'neg',
    'pow',
    'scale',
    'relu',
    # Diagnostics
    'format_node',
    'get_graph_stats',
    'print_graph_summary',
    'print_computation_graph',
    # Ambient
    'AutogradConfig',
    'setup_logger',
]
