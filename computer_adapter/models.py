"""
models.py

Responsibility: plain, immutable records for computer components.

Every record renders itself for humans via `__str__` and exposes `to_dict()`
for debugging/logging. Records hold already-normalized units (GHz, GB).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


def _format_number(value: float) -> str:
    # 3.0 -> "3", 3.6 -> "3.6"
    return str(int(value)) if float(value).is_integer() else str(value)


@dataclass(frozen=True)
class CPU:
    """Processor."""

    model: str
    speed_ghz: float
    cores: int

    def __str__(self) -> str:
        return f"{self.model} ({_format_number(self.speed_ghz)} GHz, {self.cores} cores)"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Motherboard:
    model: str
    form_factor: str

    def __str__(self) -> str:
        return f"{self.model} ({self.form_factor})"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RAM:
    size_gb: int

    def __str__(self) -> str:
        return f"{self.size_gb} GB RAM"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Storage:
    size_gb: int

    def __str__(self) -> str:
        return f"{self.size_gb} GB Storage"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class GPU:
    """Graphics card."""

    model: str
    memory_gb: int

    def __str__(self) -> str:
        return f"{self.model} ({self.memory_gb} GB GPU)"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Computer:
    """A fully assembled computer: exactly one of each component."""

    cpu: CPU
    motherboard: Motherboard
    ram: RAM
    storage: Storage
    gpu: GPU

    def __str__(self) -> str:
        return (
            f"Computer: CPU={self.cpu}, Motherboard={self.motherboard}, "
            f"RAM={self.ram}, Storage={self.storage}, GPU={self.gpu}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "cpu": self.cpu.to_dict(),
            "motherboard": self.motherboard.to_dict(),
            "ram": self.ram.to_dict(),
            "storage": self.storage.to_dict(),
            "gpu": self.gpu.to_dict(),
        }
