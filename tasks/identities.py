# Multicomplex: Multicomplex Number Algebra for PyTorch (C) 2026
# Licensed under the Apache License, Version 2.0

import torch
from tqdm import tqdm
from log import get_logger
from core.algebra import MulticomplexAlgebra
from core.multicomplex import Multicomplex
from core.complex_view import ascomplex, from_complex_view
from tasks.base import BaseTask

logger = get_logger(__name__)


class IdentityCheckTask(BaseTask):
    """Is the algebra broken?

    Draws random numbers at every order up to ``algebra.max_order`` and
    measures how far each algebraic identity is from holding exactly.
    """

    def get_data(self):
        """Three random operands per order, ``check.samples`` of each."""
        n = self.cfg.check.samples
        data = {}
        for order in range(1, self.cfg.algebra.max_order + 1):
            dim = 2 ** order
            a, b, c = torch.randn(3, n, dim, dtype=self.dtype, device=self.device)
            data[order] = (a, b, c)
        return data

    def evaluate(self, data):
        """Max absolute error per identity, across all orders."""
        errors = {}
        for order, (a, b, c) in tqdm(data.items(), desc="orders"):
            for name, err in self._check_order(order, a, b, c).items():
                errors[name] = max(errors.get(name, 0.0), err)
            logger.debug("order %d checked", order)

        atol = self.cfg.check.atol
        failed = [name for name, err in errors.items() if err > atol]
        if failed:
            raise RuntimeError(f"Identities violated beyond atol={atol}: {failed} ({errors})")
        return errors

    def _check_order(self, order, a, b, c):
        algebra = MulticomplexAlgebra(order, device=self.device)
        mul = algebra.multiply

        ab = mul(a, b)
        commutativity = (ab - mul(b, a)).abs().max().item()
        associativity = (mul(ab, c) - mul(a, mul(b, c))).abs().max().item()

        matrep = (algebra.matrep(a) - algebra.table_matrep(a)).abs().max().item()

        m = Multicomplex.from_components(a)
        pair = Multicomplex.from_pair(m.real, m.imag)
        pair_error = (pair.tensor - a).abs().max().item()

        view_error = (from_complex_view(ascomplex(m)).tensor - a).abs().max().item()

        return {
            'commutativity': commutativity,
            'associativity': associativity,
            'matrep_table': matrep,
            'pair_roundtrip': pair_error,
            'view_roundtrip': view_error,
        }
