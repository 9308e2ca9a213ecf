# Multicomplex: Multicomplex Number Algebra for PyTorch (C) 2026
# Licensed under the Apache License, Version 2.0

import torch

from log import get_logger
from core.validation import (
    check_components,
    check_index,
    check_min_order,
    check_same_order,
)

logger = get_logger(__name__)


class MulticomplexAlgebra:
    """Tensor kernel for the multicomplex numbers of a fixed order.

    Works on raw coefficient tensors ``[..., dim]``. Component ``k`` is the
    coefficient of the basis element whose set bits name its units:
    bit ``m - 1`` set means ``i_m`` is a factor. So index ``2^(K-1)`` is
    ``i_K`` and the top bit splits the vector into its real and imaginary
    halves.

    Units commute and square to -1, so basis elements multiply as
    ``e_a e_b = (-1)^popcount(a & b) e_(a ^ b)``. That product table is
    built on first use and cached per order. Multiplication goes through
    :meth:`matrep` and never reads it.

    Attributes:
        order (int): Number of imaginary units ``N``.
        dim (int): Number of components (2^N).
        device (str): Device of the cached tables.
    """
    _CACHED_TABLES = {}

    def __init__(self, order: int, device='cpu'):
        """Initialize the algebra. The product table is built lazily.

        Args:
            order (int): Number of imaginary units.
            device (str, optional): Device for the cached tables. Defaults to 'cpu'.
        """
        check_min_order(order, 0, "MulticomplexAlgebra")

        self.order = order
        self.dim = 2 ** order
        self.device = device

    @property
    def cayley_indices(self) -> torch.Tensor:
        """Basis product indices ``i ^ j`` [dim, dim]."""
        return self._tables()[0]

    @property
    def cayley_signs(self) -> torch.Tensor:
        """Basis product signs ``(-1)^popcount(i & j)`` [dim, dim], int8."""
        return self._tables()[1]

    def _tables(self):
        cache_key = (self.order, str(self.device))
        if cache_key not in MulticomplexAlgebra._CACHED_TABLES:
            MulticomplexAlgebra._CACHED_TABLES[cache_key] = self._generate_cayley_table()
        return MulticomplexAlgebra._CACHED_TABLES[cache_key]

    def __repr__(self):
        return f"MulticomplexAlgebra(order={self.order})"

    def __eq__(self, other):
        if not isinstance(other, MulticomplexAlgebra):
            return NotImplemented
        return self.order == other.order

    def __hash__(self):
        return hash(self.order)

    def _generate_cayley_table(self):
        """Precompute basis product indices and signs."""
        logger.debug("Building product table for order %d", self.order)
        indices = torch.arange(self.dim, device=self.device)
        A = indices.unsqueeze(1)
        B = indices.unsqueeze(0)

        cayley_indices = A ^ B

        # Every shared unit contributes i_m^2 = -1
        shared = A & B
        shared_cnt = torch.zeros_like(shared)
        for i in range(self.order):
            shared_cnt += (shared >> i) & 1
        cayley_signs = (1 - 2 * (shared_cnt % 2)).to(torch.int8)

        return cayley_indices, cayley_signs

    def basis_label(self, k: int) -> str:
        """Name of basis element *k*, e.g. ``'1'``, ``'i2'``, ``'i1i3'``."""
        check_index(k, self.order)
        if k == 0:
            return "1"
        return "".join(f"i{m + 1}" for m in range(self.order) if k >> m & 1)

    def basis_product(self, a: int, b: int):
        """Product of basis elements *a* and *b*.

        Returns:
            tuple: ``(sign, index)`` with ``e_a e_b = sign * e_index``.
        """
        check_index(a, self.order)
        check_index(b, self.order)
        return int(self.cayley_signs[a, b]), int(self.cayley_indices[a, b])

    def embed_scalar(self, x: torch.Tensor) -> torch.Tensor:
        """Injects scalars into the real component.

        Args:
            x (torch.Tensor): Scalars [...].

        Returns:
            torch.Tensor: Coefficients [..., dim].
        """
        x = torch.as_tensor(x)
        mv = torch.zeros(*x.shape, self.dim, device=x.device, dtype=x.dtype)
        mv[..., 0] = x
        return mv

    def unit(self, k: int, dtype=torch.int8) -> torch.Tensor:
        """Coefficients of the pure unit ``i_k`` (1 <= k <= order)."""
        if not 1 <= k <= self.order:
            raise IndexError(f"unit i{k} does not exist at order {self.order}")
        mv = torch.zeros(self.dim, dtype=dtype, device=self.device)
        mv[1 << (k - 1)] = 1
        return mv

    def component(self, mv: torch.Tensor, k: int) -> torch.Tensor:
        """Extracts component *k* with shape [...]."""
        check_components(mv, self.order, "component")
        check_index(k, self.order)
        return mv[..., k]

    def real(self, mv: torch.Tensor) -> torch.Tensor:
        """First half of the components, an order N-1 tensor."""
        check_components(mv, self.order, "real")
        check_min_order(self.order, 1, "real")
        return mv[..., :self.dim // 2]

    def imag(self, mv: torch.Tensor) -> torch.Tensor:
        """Second half of the components, an order N-1 tensor."""
        check_components(mv, self.order, "imag")
        check_min_order(self.order, 1, "imag")
        return mv[..., self.dim // 2:]

    def realest(self, mv: torch.Tensor) -> torch.Tensor:
        """The 'most real' component, found by taking real halves down to order 0.

        Numerically identical to ``component(mv, 0)``.
        """
        check_components(mv, self.order, "realest")
        for _ in range(self.order):
            mv = mv[..., :mv.shape[-1] // 2]
        return mv[..., 0]

    def from_pair(self, real: torch.Tensor, imag: torch.Tensor) -> torch.Tensor:
        """Concatenates two order N-1 tensors into an order N tensor."""
        check_min_order(self.order, 1, "from_pair")
        check_components(real, self.order - 1, "from_pair(real)")
        check_components(imag, self.order - 1, "from_pair(imag)")
        real, imag = torch.broadcast_tensors(real, imag)
        return torch.cat([real, imag], dim=-1)

    def conj(self, mv: torch.Tensor) -> torch.Tensor:
        """Negates the top-level imaginary half only.

        Lower units inside each half keep their sign, so for order 1 this is
        the ordinary complex conjugate. Order 0 is returned unchanged.
        """
        check_components(mv, self.order, "conj")
        if self.order == 0:
            return mv.clone()
        half = self.dim // 2
        return torch.cat([mv[..., :half], -mv[..., half:]], dim=-1)

    def add(self, A: torch.Tensor, B: torch.Tensor) -> torch.Tensor:
        """Componentwise sum."""
        self._check_pair(A, B, "add")
        return A + B

    def sub(self, A: torch.Tensor, B: torch.Tensor) -> torch.Tensor:
        """Componentwise difference."""
        self._check_pair(A, B, "sub")
        return A - B

    def neg(self, mv: torch.Tensor) -> torch.Tensor:
        """Componentwise negation."""
        check_components(mv, self.order, "neg")
        return -mv

    def matrep(self, mv: torch.Tensor) -> torch.Tensor:
        """Matrix (regular) representation.

        Built bottom-up from ``[[x_0]]`` by the block rule
        ``[[R, -I], [I, R]]`` where ``R`` and ``I`` represent the real and
        imaginary halves. For order 1 this is ``[[x, -y], [y, x]]``.

        Args:
            mv (torch.Tensor): Coefficients [..., dim].

        Returns:
            torch.Tensor: Matrices [..., dim, dim] such that
            ``matrep(a) @ b == a * b`` on component vectors.
        """
        check_components(mv, self.order, "matrep")
        return _block_matrep(mv, self.order)

    def table_matrep(self, mv: torch.Tensor) -> torch.Tensor:
        """Matrix representation read off the product table.

        Entry ``(i, j)`` is ``sign(i ^ j, j) * mv[i ^ j]``: the part of ``mv``
        that carries basis element ``j`` onto ``i``. Agrees with
        :meth:`matrep` entrywise; kept as an independent cross-check.
        """
        check_components(mv, self.order, "table_matrep")
        idx = self.cayley_indices
        if idx.device != mv.device:
            idx = idx.to(mv.device)
        cols = torch.arange(self.dim, device=mv.device).expand_as(idx)
        signs = self.cayley_signs.to(device=mv.device)[idx, cols]
        return mv[..., idx] * signs.to(mv.dtype)

    def multiply(self, A: torch.Tensor, B: torch.Tensor) -> torch.Tensor:
        """Multicomplex product via the matrix representation.

        Uses broadcast multiply + sum instead of ``matmul`` so integer
        dtypes work on every backend.

        Args:
            A (torch.Tensor): Left operand [..., dim].
            B (torch.Tensor): Right operand [..., dim].

        Returns:
            torch.Tensor: The product AB [..., dim].
        """
        self._check_pair(A, B, "multiply")
        M = self.matrep(A)
        out_dtype = torch.result_type(A, B)
        # result[..., i] = sum_j M[..., i, j] * B[..., j]
        return (M * B.unsqueeze(-2)).sum(dim=-1).to(out_dtype)

    def _check_pair(self, A: torch.Tensor, B: torch.Tensor, op: str) -> None:
        a_order = check_components(A, None, f"{op}(A)")
        b_order = check_components(B, None, f"{op}(B)")
        check_same_order(a_order, b_order, op)
        check_same_order(a_order, self.order, op)


def _block_matrep(mv: torch.Tensor, order: int) -> torch.Tensor:
    if order == 0:
        return mv.unsqueeze(-1)
    half = mv.shape[-1] // 2
    R = _block_matrep(mv[..., :half], order - 1)
    I = _block_matrep(mv[..., half:], order - 1)
    top = torch.cat([R, -I], dim=-1)
    bottom = torch.cat([I, R], dim=-1)
    return torch.cat([top, bottom], dim=-2)
