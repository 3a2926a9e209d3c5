"""
adapter.py

Responsibility: accept sizes in the units users type (gigabits for storage,
bits for GPU memory), normalize them to gigabytes, and delegate assembly to a
private `ComputerBuilder`.

Values are trusted to be positive; prompting/validation happens in `cli.py`.
"""

from __future__ import annotations

from computer_adapter.builder import ComputerBuilder
from computer_adapter.models import Computer
from computer_adapter.units import bits_to_gb, gigabits_to_gb


class ComputerAdapter:
    def __init__(self) -> None:
        self._builder = ComputerBuilder()

    def build_computer(
        self,
        cpu_model: str,
        cpu_speed: float,
        cpu_cores: int,
        motherboard_model: str,
        motherboard_form_factor: str,
        ram_size: int,
        storage_gigabits: int,
        gpu_model: str,
        gpu_memory_bits: int,
    ) -> Computer:
        return (
            self._builder.set_cpu(cpu_model, cpu_speed, cpu_cores)
            .set_motherboard(motherboard_model, motherboard_form_factor)
            .set_ram(ram_size)
            .set_storage(gigabits_to_gb(storage_gigabits))
            .set_gpu(gpu_model, bits_to_gb(gpu_memory_bits))
            .build()
        )
