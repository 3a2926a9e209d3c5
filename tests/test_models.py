import dataclasses

import pytest

from computer_adapter.models import CPU, GPU, RAM, Computer, Motherboard, Storage


def _computer() -> Computer:
    return Computer(
        cpu=CPU("Intel i7", 3.6, 8),
        motherboard=Motherboard("ASUS ROG", "ATX"),
        ram=RAM(16),
        storage=Storage(8),
        gpu=GPU("RTX 3080", 8),
    )


def test_component_renderings() -> None:
    assert str(CPU("Intel i7", 3.6, 8)) == "Intel i7 (3.6 GHz, 8 cores)"
    assert str(CPU("Ryzen 5", 4.0, 6)) == "Ryzen 5 (4 GHz, 6 cores)"
    assert str(Motherboard("ASUS ROG", "ATX")) == "ASUS ROG (ATX)"
    assert str(RAM(16)) == "16 GB RAM"
    assert str(Storage(8)) == "8 GB Storage"
    assert str(GPU("RTX 3080", 8)) == "RTX 3080 (8 GB GPU)"


def test_computer_rendering() -> None:
    assert str(_computer()) == (
        "Computer: CPU=Intel i7 (3.6 GHz, 8 cores), Motherboard=ASUS ROG (ATX), "
        "RAM=16 GB RAM, Storage=8 GB Storage, GPU=RTX 3080 (8 GB GPU)"
    )


def test_computer_is_immutable() -> None:
    computer = _computer()
    with pytest.raises(dataclasses.FrozenInstanceError):
        computer.ram = RAM(32)  # type: ignore[misc]


def test_computer_to_dict() -> None:
    assert _computer().to_dict() == {
        "cpu": {"model": "Intel i7", "speed_ghz": 3.6, "cores": 8},
        "motherboard": {"model": "ASUS ROG", "form_factor": "ATX"},
        "ram": {"size_gb": 16},
        "storage": {"size_gb": 8},
        "gpu": {"model": "RTX 3080", "memory_gb": 8},
    }
