# Multicomplex: Multicomplex Number Algebra for PyTorch (C) 2026
# Licensed under the Apache License, Version 2.0

import torch
from abc import ABC, abstractmethod
from omegaconf import DictConfig
from log import get_logger
from core.device import resolve_device

logger = get_logger(__name__)


class BaseTask(ABC):
    """Abstract base class for all command line tasks.

    Lifecycle: get_data → evaluate → report.

    Attributes:
        cfg (DictConfig): Hydra configuration.
        device (str): Computation device.
        dtype (torch.dtype): Component dtype for generated data.
    """

    def __init__(self, cfg: DictConfig):
        """Sets up the task.

        Args:
            cfg (DictConfig): Hydra config.
        """
        self.cfg = cfg
        self.device = resolve_device(cfg.algebra.get('device', 'auto'))
        self.dtype = getattr(torch, cfg.algebra.get('dtype', 'float64'), None)
        if not isinstance(self.dtype, torch.dtype):
            raise ValueError(f"Unknown dtype: {cfg.algebra.dtype}")
        torch.manual_seed(cfg.get('seed', 0))

    @abstractmethod
    def get_data(self):
        """Build the inputs the task works on."""
        pass

    @abstractmethod
    def evaluate(self, data):
        """Compute and return a dict of results."""
        pass

    def report(self, results: dict) -> None:
        """Log each result on its own line."""
        for key, value in results.items():
            logger.info("%s: %s", key, value)

    def run(self):
        """Execute the task and return its results."""
        logger.info("Starting Task: %s (device=%s, dtype=%s)", self.cfg.name, self.device, self.dtype)
        data = self.get_data()
        results = self.evaluate(data)
        self.report(results)
        logger.info("Task Complete.")
        return results
