# Multicomplex: Multicomplex Number Algebra for PyTorch (C) 2026
# Licensed under the Apache License, Version 2.0

from core.multicomplex import Multicomplex, promote
from tasks.base import BaseTask


class UnitTableTask(BaseTask):
    """Multiplication table of the imaginary units ``i1 .. iK``."""

    def get_data(self):
        """Units lifted to a common order."""
        order = self.cfg.units.order
        return promote(*[Multicomplex.unit(k) for k in range(1, order + 1)])

    def evaluate(self, units):
        """Label every product ``i_j * i_k``."""
        algebra = units[0].algebra
        table = {}
        for j, a in enumerate(units, start=1):
            for k, b in enumerate(units, start=1):
                table[f"i{j}*i{k}"] = _label(algebra, a * b)
        return table


def _label(algebra, m: Multicomplex) -> str:
    """Signed basis label of a product of units, e.g. ``-1`` or ``i1i2``."""
    (k,) = m.tensor.nonzero().flatten().tolist()
    sign = "-" if m.component(k).item() < 0 else ""
    return sign + algebra.basis_label(k)
