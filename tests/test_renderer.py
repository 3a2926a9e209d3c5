import pytest

from computer_adapter.adapter import ComputerAdapter
from computer_adapter.messages import load_messages
from computer_adapter.renderer import RenderError, render_listing


def test_render_listing_in_order() -> None:
    adapter = ComputerAdapter()
    first = adapter.build_computer("A", 1.0, 2, "B", "ATX", 8, 8, "G", 8192)
    second = adapter.build_computer("C", 2.0, 4, "D", "mATX", 16, 16, "H", 16384)

    out = render_listing(load_messages().listing, [first, second])

    assert out.splitlines()[-2:] == [str(first), str(second)]
    assert not out.endswith("\n")


def test_render_listing_exposes_count() -> None:
    assert render_listing("{{ count }} total", []) == "0 total"


def test_render_listing_undefined_variable_raises() -> None:
    with pytest.raises(RenderError):
        render_listing("{{ missing }}", [])


def test_bundled_listing_header_shows_count() -> None:
    adapter = ComputerAdapter()
    computers = [adapter.build_computer("A", 1.0, 2, "B", "ATX", 8, 8, "G", 8192) for _ in range(3)]

    out = render_listing(load_messages().listing, computers)

    assert "Available computers (3):" in out.splitlines()
