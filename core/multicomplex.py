# Multicomplex: Multicomplex Number Algebra for PyTorch (C) 2026
# Licensed under the Apache License, Version 2.0

"""Multicomplex Container Class.

Provides an immutable, object-oriented wrapper around raw coefficient
tensors to enable operator overloading (e.g., A * B for the multicomplex
product).
"""

import numbers

import numpy as np
import torch

from core.algebra import MulticomplexAlgebra
from core.validation import (
    OrderMismatchError,
    ShapeError,
    check_components,
    check_same_order,
)


def _as_tensor(values) -> torch.Tensor:
    if isinstance(values, torch.Tensor):
        return values
    if isinstance(values, np.ndarray):
        return torch.from_numpy(values)
    if isinstance(values, (list, tuple)) and any(isinstance(v, torch.Tensor) for v in values):
        return torch.stack(torch.broadcast_tensors(*[torch.as_tensor(v) for v in values]), dim=-1)
    return torch.as_tensor(values)


def _split_complex(z) -> torch.Tensor:
    """Returns ``[..., 2]`` real/imaginary parts of a complex input."""
    if isinstance(z, numbers.Complex) and not isinstance(z, torch.Tensor):
        z = complex(z)
        return torch.tensor([z.real, z.imag], dtype=torch.get_default_dtype())
    z = _as_tensor(z)
    if not z.is_complex():
        raise TypeError(f"expected a complex value, got dtype {z.dtype}")
    return torch.view_as_real(z.resolve_conj())


class Multicomplex:
    """Multicomplex numbers of order N over a torch dtype.

    Wraps a coefficient tensor ``[..., 2^N]``; leading axes make it an array
    of numbers. Instances are never modified in place: every operation
    returns a new ``Multicomplex``.

    Attributes:
        algebra (MulticomplexAlgebra): Kernel for this order.
        tensor (torch.Tensor): The raw coefficient tensor [..., 2^N].
    """
    __slots__ = ("_algebra", "_tensor")

    def __init__(self, algebra: MulticomplexAlgebra, tensor: torch.Tensor):
        """Initializes a Multicomplex.

        Args:
            algebra (MulticomplexAlgebra): The algebra instance.
            tensor (torch.Tensor): Coefficients [..., algebra.dim].
        """
        check_components(tensor, algebra.order, "Multicomplex")
        object.__setattr__(self, "_algebra", algebra)
        object.__setattr__(self, "_tensor", tensor)

    def __setattr__(self, name, value):
        raise AttributeError("Multicomplex is immutable")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_components(cls, values, order: int = None):
        """Builds a number (or array of numbers) from its flat components.

        Args:
            values: Tensor, array or sequence with trailing length 2^N.
            order (int, optional): Expected order; inferred when omitted.

        Raises:
            ShapeError: If the trailing length is not a power of two or does
                not match ``order``.
        """
        tensor = _as_tensor(values)
        n = check_components(tensor, order, "from_components")
        return cls(MulticomplexAlgebra(n, device=tensor.device), tensor)

    @classmethod
    def from_real(cls, *values):
        """Multicomplex(x), Multicomplex(x, y) or Multicomplex(x, y, u, v).

        The four-argument form is ``x + i1 y + i2 u + i1 i2 v``.
        """
        if len(values) not in (1, 2, 4):
            raise ShapeError(
                f"from_real takes 1, 2 or 4 real values, got {len(values)}"
            )
        return cls.from_components(list(values))

    @classmethod
    def from_complex(cls, z):
        """Order 1 number with components (re(z), im(z))."""
        return cls.from_components(_split_complex(z), order=1)

    @classmethod
    def from_complex_pair(cls, a, b):
        """Order 2 number with ``a`` as its real half and ``b`` as its imaginary half."""
        return cls.from_pair(cls.from_complex(a), cls.from_complex(b))

    @classmethod
    def from_pair(cls, real: "Multicomplex", imag: "Multicomplex"):
        """Builds a higher order number from 'real' and 'imaginary' parts of order N."""
        check_same_order(real.order, imag.order, "from_pair")
        algebra = MulticomplexAlgebra(real.order + 1, device=real.tensor.device)
        return cls(algebra, algebra.from_pair(real.tensor, imag.tensor))

    @classmethod
    def zero(cls, order: int, dtype=torch.int8):
        algebra = MulticomplexAlgebra(order)
        return cls(algebra, torch.zeros(algebra.dim, dtype=dtype))

    @classmethod
    def one(cls, order: int, dtype=torch.int8):
        algebra = MulticomplexAlgebra(order)
        return cls(algebra, algebra.embed_scalar(torch.ones((), dtype=dtype)))

    @classmethod
    def unit(cls, k: int, order: int = None, dtype=torch.int8):
        """The pure imaginary unit ``i_k``, at order ``max(k, order)``."""
        algebra = MulticomplexAlgebra(max(k, order or 0))
        return cls(algebra, algebra.unit(k, dtype=dtype))

    def lift(self, order: int) -> "Multicomplex":
        """Embeds this number at a higher order by zero-padding imaginary halves."""
        if order < self.order:
            raise OrderMismatchError(
                f"lift: cannot lower order {self.order} to {order}"
            )
        out = self
        while out.order < order:
            zero = Multicomplex(out.algebra, torch.zeros_like(out.tensor))
            out = Multicomplex.from_pair(out, zero)
        return out

    # ------------------------------------------------------------------
    # Properties and accessors
    # ------------------------------------------------------------------

    @property
    def algebra(self) -> MulticomplexAlgebra:
        return self._algebra

    @property
    def tensor(self) -> torch.Tensor:
        return self._tensor

    @property
    def order(self) -> int:
        return self._algebra.order

    @property
    def dim(self) -> int:
        return self._algebra.dim

    @property
    def shape(self) -> torch.Size:
        """Batch shape (the array shape, without the component axis)."""
        return self._tensor.shape[:-1]

    @property
    def dtype(self) -> torch.dtype:
        return self._tensor.dtype

    @property
    def real(self) -> "Multicomplex":
        """Real half as an order N-1 number. Undefined at order 0."""
        return self._lower(self._algebra.real(self._tensor))

    @property
    def imag(self) -> "Multicomplex":
        """Imaginary half as an order N-1 number. Undefined at order 0."""
        return self._lower(self._algebra.imag(self._tensor))

    def component(self, k: int) -> torch.Tensor:
        """Utility function to extract a real-valued component."""
        return self._algebra.component(self._tensor, k)

    def realest(self) -> torch.Tensor:
        """Extract the 'most real' component."""
        return self._algebra.realest(self._tensor)

    def conj(self) -> "Multicomplex":
        """Multicomplex(real, -imag)."""
        return Multicomplex(self._algebra, self._algebra.conj(self._tensor))

    def matrep(self) -> torch.Tensor:
        """Matrix representation [..., 2^N, 2^N]."""
        return self._algebra.matrep(self._tensor)

    def to(self, *args, **kwargs) -> "Multicomplex":
        """Same as :meth:`torch.Tensor.to` on the coefficients."""
        return Multicomplex.from_components(self._tensor.to(*args, **kwargs))

    def __getitem__(self, index) -> "Multicomplex":
        """Indexes the batch axes, never the component axis."""
        if not self.shape:
            raise TypeError("cannot index an unbatched Multicomplex; use component(k)")
        if not isinstance(index, tuple):
            index = (index,)
        return Multicomplex(self._algebra, self._tensor[index + (Ellipsis, slice(None))])

    def __len__(self):
        if not self.shape:
            raise TypeError("len() of an unbatched Multicomplex")
        return self.shape[0]

    def _lower(self, tensor: torch.Tensor) -> "Multicomplex":
        return Multicomplex(MulticomplexAlgebra(self.order - 1, device=tensor.device), tensor)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _coerce(self, other, op: str):
        if isinstance(other, Multicomplex):
            check_same_order(self.order, other.order, op)
            return other.tensor
        return None

    def __add__(self, other):
        """Element-wise addition."""
        rhs = self._coerce(other, "add")
        if rhs is None:
            return NotImplemented
        return Multicomplex(self._algebra, self._algebra.add(self._tensor, rhs))

    def __sub__(self, other):
        """Element-wise subtraction."""
        rhs = self._coerce(other, "sub")
        if rhs is None:
            return NotImplemented
        return Multicomplex(self._algebra, self._algebra.sub(self._tensor, rhs))

    def __neg__(self):
        return Multicomplex(self._algebra, self._algebra.neg(self._tensor))

    def __pos__(self):
        return self

    def __mul__(self, other):
        """Multicomplex multiplication via the matrix representation."""
        if isinstance(other, Multicomplex):
            check_same_order(self.order, other.order, "multiply")
            return Multicomplex(self._algebra, self._algebra.multiply(self._tensor, other.tensor))
        if isinstance(other, numbers.Real):
            return Multicomplex(self._algebra, self._tensor * other)
        if isinstance(other, torch.Tensor) and not other.is_complex():
            # Real scalars per batch element
            return Multicomplex(self._algebra, self._tensor * other.unsqueeze(-1))
        return NotImplemented

    def __rmul__(self, other):
        # The product is commutative
        return self.__mul__(other)

    def __eq__(self, other):
        """Exact equality: same order, same batch shape, equal components."""
        if not isinstance(other, Multicomplex):
            return NotImplemented
        if self.order != other.order or self.shape != other.shape:
            return False
        return bool(torch.eq(self._tensor, other.tensor).all())

    __hash__ = None

    def allclose(self, other: "Multicomplex", rtol: float = 1e-5, atol: float = 1e-8) -> bool:
        """Tolerance-aware equality for floating point components."""
        if self.order != other.order or self.shape != other.shape:
            return False
        dtype = torch.promote_types(self.dtype, other.dtype)
        if not (dtype.is_floating_point or dtype.is_complex):
            dtype = torch.get_default_dtype()
        return torch.allclose(self._tensor.to(dtype), other.tensor.to(dtype), rtol=rtol, atol=atol)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __repr__(self):
        return f"Multicomplex(order={self.order}, {self._tensor!r})"

    def __str__(self):
        if self.shape:
            return repr(self)
        terms = []
        for k, c in enumerate(self._tensor.tolist()):
            if c == 0 and k:
                continue
            label = self._algebra.basis_label(k)
            terms.append(f"{c}" if k == 0 else f"{c}*{label}")
        return " + ".join(terms)


def promote(*numbers: Multicomplex):
    """Lifts every argument to the highest order among them.

    Arithmetic never mixes orders on its own; this makes the lift explicit,
    e.g. ``a, b = promote(im1, im2); a * b``.
    """
    order = max(m.order for m in numbers)
    return tuple(m.lift(order) for m in numbers)
