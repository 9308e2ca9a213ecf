"""Multicomplex: multicomplex number algebra for PyTorch."""

__version__ = "0.1.0"

from core.algebra import MulticomplexAlgebra
from core.multicomplex import Multicomplex
from core.complex_view import ascomplex

__all__ = [
    "__version__",
    "MulticomplexAlgebra",
    "Multicomplex",
    "ascomplex",
]
