# Multicomplex: Multicomplex Number Algebra for PyTorch (C) 2026
# Licensed under the Apache License, Version 2.0

"""Device resolution for multicomplex tensors."""

import torch


def resolve_device(device: str = "auto") -> str:
    """Resolve ``'auto'`` to the best available accelerator.

    Priority: cuda > mps > cpu.
    """
    if device != "auto":
        return device
    if torch.cuda.is_available():
        return "cuda"
    if hasattr(torch.backends, "mps") and torch.backends.mps.is_available():
        return "mps"
    return "cpu"
