# Multicomplex: Multicomplex Number Algebra for PyTorch (C) 2026
# Licensed under the Apache License, Version 2.0

"""Input validation and error types for multicomplex tensors.

Unlike shape asserts, every check here raises, so it also runs
under ``python -O``. Nothing is padded or truncated on failure.
"""

import torch


class MulticomplexError(Exception):
    """Base class for multicomplex errors."""


class ShapeError(MulticomplexError, ValueError):
    """Component count is not a power of two or disagrees with the order."""


class OrderMismatchError(MulticomplexError, ValueError):
    """Binary operation on numbers of different order."""


class UnsupportedOrderError(MulticomplexError, ValueError):
    """Operation is undefined at the requested order (e.g. ``real`` at order 0)."""


def order_from_dim(dim: int, name: str = "x") -> int:
    """Return ``N`` such that ``dim == 2**N``.

    Raises:
        ShapeError: If *dim* is not a positive power of two.
    """
    if dim < 1 or dim & (dim - 1):
        raise ShapeError(
            f"{name}: component count must be a power of two, got {dim}"
        )
    return dim.bit_length() - 1


def check_components(x: torch.Tensor, order: int = None, name: str = "x") -> int:
    """Check *x* looks like a multicomplex tensor ``[..., 2^N]``.

    Returns:
        The order ``N``.
    """
    if x.ndim < 1:
        raise ShapeError(
            f"{name}: expected ndim >= 1, got shape {tuple(x.shape)}"
        )
    inferred = order_from_dim(x.shape[-1], name)
    if order is not None and order != inferred:
        raise ShapeError(
            f"{name}: last dim should be {2 ** order} for order {order}, "
            f"got {x.shape[-1]} (shape {tuple(x.shape)})"
        )
    return inferred


def check_same_order(a_order: int, b_order: int, op: str = "op") -> None:
    """Raise unless both operands have the same order."""
    if a_order != b_order:
        raise OrderMismatchError(
            f"{op}: orders must match, got {a_order} and {b_order}"
        )


def check_min_order(order: int, minimum: int, op: str = "op") -> None:
    """Raise unless *order* is at least *minimum*."""
    if order < minimum:
        raise UnsupportedOrderError(
            f"{op}: requires order >= {minimum}, got order {order}"
        )


def check_index(k: int, order: int) -> None:
    """Raise ``IndexError`` unless ``0 <= k < 2^order``."""
    dim = 2 ** order
    if not 0 <= k < dim:
        raise IndexError(
            f"component index {k} out of range for order {order} "
            f"(valid: 0..{dim - 1})"
        )
