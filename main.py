# Multicomplex: Multicomplex Number Algebra for PyTorch (C) 2026
# Licensed under the Apache License, Version 2.0

"""Multicomplex CLI Entry Point.

Dispatches algebra tasks:
    python main.py name=units units.order=4
"""

import hydra
from omegaconf import DictConfig
from log import configure
from tasks.identities import IdentityCheckTask
from tasks.units import UnitTableTask
from tasks.square import SquareTask

TASKS = {
    'identities': IdentityCheckTask,
    'units': UnitTableTask,
    'square': SquareTask,
}


def run_task(cfg: DictConfig):
    """Builds and runs the task named by ``cfg.name``."""
    task_name = cfg.name
    if task_name not in TASKS:
        raise ValueError(f"Unknown task: {task_name}. Available: {list(TASKS.keys())}")
    configure(level=cfg.get('log_level'), log_file=cfg.get('log_file'))
    return TASKS[task_name](cfg).run()


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig):
    run_task(cfg)


if __name__ == "__main__":
    main()
