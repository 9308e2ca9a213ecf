# Multicomplex: Multicomplex Number Algebra for PyTorch (C) 2026
# Licensed under the Apache License, Version 2.0

"""Imaginary units ``im1`` .. ``im6``.

Each ``imK`` lives at the smallest order that contains it (order K) and
stores ``int8`` components, so products of units stay exact.

    >>> im1 * im1
    Multicomplex(order=1, tensor([-1,  0], dtype=torch.int8))
    >>> im1.lift(2) * im2 == im2 * im1.lift(2)
    True

Units of different orders do not multiply directly (``im1 * im2`` raises
``OrderMismatchError``); bring them to a common order first:

    >>> from core.multicomplex import promote
    >>> a, b = promote(im1, im2)
    >>> a * b
    Multicomplex(order=2, tensor([0, 0, 0, 1], dtype=torch.int8))
"""

from core.multicomplex import Multicomplex

im1 = Multicomplex.unit(1)
im2 = Multicomplex.unit(2)
im3 = Multicomplex.unit(3)
im4 = Multicomplex.unit(4)
im5 = Multicomplex.unit(5)
im6 = Multicomplex.unit(6)

UNITS = (im1, im2, im3, im4, im5, im6)
