"""
computer_adapter package

This package implements an interactive computer catalog for the console.

Key responsibilities are split across modules:
- `models.py`: immutable component records and the aggregate `Computer`
- `units.py`: ceiling division and gigabit/bit -> gigabyte conversion
- `builder.py`: fluent step-wise assembly of a `Computer`
- `adapter.py`: raw user units in, finished `Computer` out
- `validation.py`: positive-number parsing for prompt input
- `session.py`: in-memory, append-only list of built computers
- `messages.py`: bundled YAML message catalog
- `renderer.py`: Jinja2 rendering of the computer listing
- `cli.py`: CLI entrypoint and interactive menu loop
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
