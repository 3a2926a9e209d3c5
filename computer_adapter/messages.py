"""
messages.py

Responsibility: Load and validate the console message catalog into a typed model.

The catalog ships with the package as `messages.yaml`. It holds every piece
of user-facing text (menu, prompts, errors) plus the Jinja2 listing template
consumed by `renderer.py`. The CLI treats the parsed result as the single
source of truth for what it prints.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_MESSAGES_PATH = Path(__file__).with_name("messages.yaml")

PROMPT_KEYS = (
    "cpu_model",
    "cpu_speed",
    "cpu_cores",
    "motherboard_model",
    "motherboard_form_factor",
    "ram_size",
    "storage_gigabits",
    "gpu_model",
    "gpu_memory_bits",
)


class MessagesError(ValueError):
    pass


@dataclass(frozen=True)
class Prompts:
    """One prompt per field collected when adding a computer."""

    cpu_model: str
    cpu_speed: str
    cpu_cores: str
    motherboard_model: str
    motherboard_form_factor: str
    ram_size: str
    storage_gigabits: str
    gpu_model: str
    gpu_memory_bits: str


@dataclass(frozen=True)
class Messages:
    menu: str
    invalid_choice: str
    farewell: str
    no_computers: str
    positive_number: str
    positive_integer: str
    listing: str
    prompts: Prompts


def _require_mapping(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MessagesError(f"`{where}` must be a mapping/object.")
    return value


def _require_text(data: dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if value is None:
        raise MessagesError(f"Missing `{where}{key}` in message catalog.")
    if not isinstance(value, str):
        raise MessagesError(f"`{where}{key}` must be a string.")
    return value


def parse_messages(text: str) -> Messages:
    """
    Parse catalog YAML text into `Messages`.

    Required keys:
    - menu, invalid_choice, farewell, no_computers, listing: str
    - prompts.<field>: str for every field in PROMPT_KEYS
    - errors.positive_number, errors.positive_integer: str
    """
    data = _require_mapping(yaml.safe_load(text) or {}, "<top level>")
    prompts_raw = _require_mapping(data.get("prompts") or {}, "prompts")
    errors_raw = _require_mapping(data.get("errors") or {}, "errors")

    prompts = Prompts(**{key: _require_text(prompts_raw, key, "prompts.") for key in PROMPT_KEYS})

    return Messages(
        menu=_require_text(data, "menu", ""),
        invalid_choice=_require_text(data, "invalid_choice", ""),
        farewell=_require_text(data, "farewell", ""),
        no_computers=_require_text(data, "no_computers", ""),
        positive_number=_require_text(errors_raw, "positive_number", "errors."),
        positive_integer=_require_text(errors_raw, "positive_integer", "errors."),
        listing=_require_text(data, "listing", ""),
        prompts=prompts,
    )


def load_messages(path: str | Path | None = None) -> Messages:
    """
    Load a message catalog file; defaults to the one bundled with the package.
    """
    catalog = Path(path) if path is not None else DEFAULT_MESSAGES_PATH
    if not catalog.exists():
        raise MessagesError(f"Message catalog does not exist: {catalog}")
    try:
        return parse_messages(catalog.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise MessagesError(f"Message catalog is not valid YAML: {catalog}") from e
