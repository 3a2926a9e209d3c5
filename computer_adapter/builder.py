"""
builder.py

Responsibility: assemble a `Computer` step by step.

The builder is mutable and single-threaded. Fields persist across `build()`
calls until overwritten or `reset()`, and each `build()` returns a fresh
immutable `Computer`, so earlier results never change.
"""

from __future__ import annotations

import logging

from computer_adapter.models import CPU, GPU, RAM, Computer, Motherboard, Storage

logger = logging.getLogger(__name__)


class BuildError(RuntimeError):
    pass


class ComputerBuilder:
    def __init__(self) -> None:
        self.reset()

    def set_cpu(self, model: str, speed_ghz: float, cores: int) -> ComputerBuilder:
        self._cpu = CPU(model=model, speed_ghz=speed_ghz, cores=cores)
        return self

    def set_motherboard(self, model: str, form_factor: str) -> ComputerBuilder:
        self._motherboard = Motherboard(model=model, form_factor=form_factor)
        return self

    def set_ram(self, size_gb: int) -> ComputerBuilder:
        self._ram = RAM(size_gb=size_gb)
        return self

    def set_storage(self, size_gb: int) -> ComputerBuilder:
        self._storage = Storage(size_gb=size_gb)
        return self

    def set_gpu(self, model: str, memory_gb: int) -> ComputerBuilder:
        self._gpu = GPU(model=model, memory_gb=memory_gb)
        return self

    def reset(self) -> ComputerBuilder:
        """Forget every component set so far."""
        self._cpu: CPU | None = None
        self._motherboard: Motherboard | None = None
        self._ram: RAM | None = None
        self._storage: Storage | None = None
        self._gpu: GPU | None = None
        return self

    def _missing(self) -> list[str]:
        parts = {
            "cpu": self._cpu,
            "motherboard": self._motherboard,
            "ram": self._ram,
            "storage": self._storage,
            "gpu": self._gpu,
        }
        return [name for name, value in parts.items() if value is None]

    def build(self) -> Computer:
        """
        Return the assembled `Computer`.

        Raises BuildError if any component has not been set yet.
        """
        missing = self._missing()
        if missing:
            raise BuildError(f"Cannot build computer, missing: {', '.join(missing)}")
        computer = Computer(
            cpu=self._cpu,
            motherboard=self._motherboard,
            ram=self._ram,
            storage=self._storage,
            gpu=self._gpu,
        )
        logger.debug("Built computer: %s", computer.to_dict())
        return computer
