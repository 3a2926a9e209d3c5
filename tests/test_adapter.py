from computer_adapter.adapter import ComputerAdapter


def test_build_computer_converts_units() -> None:
    computer = ComputerAdapter().build_computer(
        "Intel i7", 3.6, 8, "ASUS ROG", "ATX", 16, 64, "RTX 3080", 65536
    )
    assert computer.storage.size_gb == 8
    assert computer.gpu.memory_gb == 8
    assert computer.cpu.model == "Intel i7"
    assert computer.cpu.speed_ghz == 3.6
    assert computer.cpu.cores == 8
    assert computer.motherboard.model == "ASUS ROG"
    assert computer.motherboard.form_factor == "ATX"
    assert computer.ram.size_gb == 16
    assert computer.gpu.model == "RTX 3080"


def test_build_computer_rounds_partial_units_up() -> None:
    computer = ComputerAdapter().build_computer("", 1.0, 1, "", "", 1, 9, "", 8193)
    assert computer.storage.size_gb == 2
    assert computer.gpu.memory_gb == 2


def test_adapter_results_are_independent() -> None:
    adapter = ComputerAdapter()
    first = adapter.build_computer("A", 1.0, 2, "B", "ATX", 8, 8, "G", 8192)
    second = adapter.build_computer("C", 2.0, 4, "D", "mATX", 16, 16, "H", 16384)
    assert first.cpu.model == "A"
    assert second.cpu.model == "C"
    assert first != second
