# Multicomplex: Multicomplex Number Algebra for PyTorch (C) 2026
# Licensed under the Apache License, Version 2.0

from .base import BaseTask
from .identities import IdentityCheckTask
from .units import UnitTableTask
from .square import SquareTask

__all__ = [
    "BaseTask",
    "IdentityCheckTask",
    "UnitTableTask",
    "SquareTask",
]
