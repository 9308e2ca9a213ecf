# Multicomplex: Multicomplex Number Algebra for PyTorch (C) 2026
# Licensed under the Apache License, Version 2.0

"""Core mathematical kernel for multicomplex numbers.

Provides the multicomplex algebra kernel, the immutable multicomplex
wrapper, complex views, named imaginary units and validation utilities.
"""

from .algebra import MulticomplexAlgebra
from .multicomplex import Multicomplex, promote
from .complex_view import ascomplex, from_complex_view
from .units import im1, im2, im3, im4, im5, im6, UNITS
from .device import resolve_device
from .validation import (
    MulticomplexError,
    ShapeError,
    OrderMismatchError,
    UnsupportedOrderError,
    check_components,
)

__all__ = [
    # algebra
    "MulticomplexAlgebra",
    "Multicomplex",
    "promote",
    # complex view
    "ascomplex",
    "from_complex_view",
    # units
    "im1",
    "im2",
    "im3",
    "im4",
    "im5",
    "im6",
    "UNITS",
    # device / validation
    "resolve_device",
    "MulticomplexError",
    "ShapeError",
    "OrderMismatchError",
    "UnsupportedOrderError",
    "check_components",
]
