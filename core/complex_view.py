# Multicomplex: Multicomplex Number Algebra for PyTorch (C) 2026
# Licensed under the Apache License, Version 2.0

"""Complex views of multicomplex arrays.

An order-N number is 2^(N-1) ordinary complex numbers: components
``(2j, 2j + 1)`` form leaf ``j``, with ``i1`` playing the role of the
standard imaginary unit. The leaf index ``j`` names which of the higher
units ``i2 .. iN`` are held at one (bit ``m - 2`` of ``j`` for ``i_m``).
"""

import numpy as np
import torch

from log import get_logger
from core.multicomplex import Multicomplex
from core.validation import ShapeError, check_components, check_min_order, order_from_dim

logger = get_logger(__name__)

_VIEWABLE_TORCH = {
    torch.float32: torch.complex64,
    torch.float64: torch.complex128,
}
_VIEWABLE_NUMPY = {
    np.dtype(np.float32): np.complex64,
    np.dtype(np.float64): np.complex128,
}


def _viewable_layout(A: torch.Tensor) -> bool:
    """``view_as_complex`` needs a unit trailing stride and even offsets."""
    if A.stride(-1) != 1 or A.storage_offset() % 2:
        return False
    return all(s % 2 == 0 for s in A.stride()[:-1])


def ascomplex(A, order: int = None):
    """Returns a view of the multicomplex array *A* as complex numbers, mapping i1 -> 1j.

    If *A* holds numbers of order N with array shape ``(m, n, ...)``, the
    output has shape ``(2^(N-1), m, n, ...)``.

    float32/float64 storage is reinterpreted in place, so the result shares
    memory with *A* and reflects later writes to a tensor or array source.
    Integer and half precision components are copied to a complex dtype.

    Args:
        A: ``Multicomplex``, tensor ``[..., 2^N]`` or NumPy array ``[..., 2^N]``.
        order (int, optional): Expected order of the input.

    Returns:
        Complex tensor (NumPy array for NumPy input) ``[2^(N-1), ...]``.

    Raises:
        UnsupportedOrderError: For order 0 input.
    """
    if isinstance(A, np.ndarray):
        return _ascomplex_numpy(A, order)
    if isinstance(A, Multicomplex):
        A = A.tensor
    n = check_components(A, order, "ascomplex")
    check_min_order(n, 1, "ascomplex")

    if A.dtype not in _VIEWABLE_TORCH:
        target = torch.float64 if A.element_size() >= 4 else torch.float32
        logger.debug("ascomplex: copying %s components to %s", A.dtype, target)
        A = A.to(target)
    if not _viewable_layout(A):
        logger.debug("ascomplex: copying strided components %s", tuple(A.stride()))
        A = A.contiguous()

    pairs = A.unflatten(-1, (A.shape[-1] // 2, 2))
    return torch.view_as_complex(pairs).movedim(-1, 0)


def _ascomplex_numpy(A: np.ndarray, order: int = None) -> np.ndarray:
    if A.ndim < 1:
        raise ShapeError(f"ascomplex: expected ndim >= 1, got shape {A.shape}")
    n = order_from_dim(A.shape[-1], "ascomplex")
    if order is not None and order != n:
        raise ShapeError(
            f"ascomplex: last dim should be {2 ** order} for order {order}, "
            f"got {A.shape[-1]}"
        )
    check_min_order(n, 1, "ascomplex")

    if A.dtype not in _VIEWABLE_NUMPY:
        target = np.float64 if A.dtype.itemsize >= 4 else np.float32
        logger.debug("ascomplex: copying %s components to %s", A.dtype, np.dtype(target))
        A = A.astype(target)
    if A.strides[-1] != A.itemsize:
        A = np.ascontiguousarray(A)

    return np.moveaxis(A.view(_VIEWABLE_NUMPY[A.dtype]), -1, 0)


def from_complex_view(Z) -> Multicomplex:
    """Rebuilds multicomplex numbers from a complex view ``[2^(N-1), ...]``.

    Inverse of :func:`ascomplex`; every real/imaginary pair lands back on
    components ``(2j, 2j + 1)`` unchanged.

    Raises:
        ShapeError: If the leading axis is not a power of two.
    """
    if isinstance(Z, np.ndarray):
        Z = torch.from_numpy(Z)
    if not Z.is_complex():
        raise TypeError(f"from_complex_view: expected complex input, got {Z.dtype}")
    if Z.ndim < 1:
        raise ShapeError(f"from_complex_view: expected ndim >= 1, got shape {tuple(Z.shape)}")
    leaves = order_from_dim(Z.shape[0], "from_complex_view")
    pairs = torch.view_as_real(Z.movedim(0, -1).resolve_conj())
    return Multicomplex.from_components(pairs.flatten(-2), order=leaves + 1)
