# scalargrad/ops/__init__.py

from . import arithmetic
from . import activation

# Convenience re-exports so users can do: from scalargrad.ops import mul, relu, ...
from .arithmetic import leaf, add, sub, mul, div, neg, pow, scale
from .activation import relu

__all__ = [
    "leaf",
    "add", "sub", "mul", "div", "neg", "pow", "scale",
    "relu",
]
