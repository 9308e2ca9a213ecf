# Multicomplex: Multicomplex Number Algebra for PyTorch (C) 2026
# Licensed under the Apache License, Version 2.0

import torch
from log import get_logger
from core.multicomplex import Multicomplex
from tasks.base import BaseTask

logger = get_logger(__name__)


class SquareTask(BaseTask):
    """Squares one number two ways: ``m * m`` and ``matrep(m) @ m``."""

    def get_data(self):
        values = torch.tensor(list(self.cfg.square.components), dtype=self.dtype, device=self.device)
        return Multicomplex.from_components(values)

    def evaluate(self, m):
        product = m * m
        via_matrep = m.matrep() @ m.tensor
        if not torch.equal(product.tensor, via_matrep):
            logger.warning("product and matrep paths differ: %s vs %s", product.tensor, via_matrep)
        return {
            'input': str(m),
            'product': str(product),
            'matrep': via_matrep.tolist(),
        }
