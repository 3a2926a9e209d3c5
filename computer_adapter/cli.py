"""
cli.py

Responsibility: CLI entrypoint and interactive menu loop.

High-level flow (one menu loop, no subcommands):
1) Show the menu and read a choice
2) "1": prompt for every component field -> adapter -> session
3) "2": render the session listing
4) "3" (or end of input): say goodbye and exit 0

This module should orchestrate behavior but keep concerns isolated:
- Input parsing: `validation.py`
- Unit conversion and assembly: `adapter.py`
- Storage for the run: `session.py`
- Text and listing: `messages.py`, `renderer.py`
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from collections.abc import Callable
from typing import TypeVar

from computer_adapter import __version__
from computer_adapter.adapter import ComputerAdapter
from computer_adapter.messages import Messages, MessagesError, load_messages
from computer_adapter.models import Computer
from computer_adapter.renderer import render_listing
from computer_adapter.session import ComputerSession
from computer_adapter.validation import InvalidNumberError, parse_positive_float, parse_positive_int

logger = logging.getLogger(__name__)

T = TypeVar("T", int, float)

ReadLine = Callable[[], str]
WriteLine = Callable[[str], None]

CHOICE_ADD = "1"
CHOICE_LIST = "2"
CHOICE_EXIT = "3"


class CLIError(RuntimeError):
    pass


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Send log records to stderr so they never mix with the menu on stdout.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


class Console:
    """
    Line-based console I/O. `read_line` raises EOFError when input is exhausted.
    """

    def __init__(self, messages: Messages, *, read_line: ReadLine = input, write_line: WriteLine = print) -> None:
        self.messages = messages
        self._read_line = read_line
        self._write_line = write_line

    def say(self, text: str) -> None:
        self._write_line(text)

    def ask_text(self, prompt: str) -> str:
        # Any line is accepted verbatim, including an empty one.
        self.say(prompt)
        return self._read_line()

    def ask_number(self, prompt: str, parse: Callable[[str], T], retry_message: str) -> T:
        self.say(prompt)
        while True:
            raw = self._read_line()
            try:
                return parse(raw)
            except InvalidNumberError as e:
                logger.debug("Rejected numeric input: %s", e)
                self.say(retry_message)

    def ask_positive_int(self, prompt: str) -> int:
        return self.ask_number(prompt, parse_positive_int, self.messages.positive_integer)

    def ask_positive_float(self, prompt: str) -> float:
        return self.ask_number(prompt, parse_positive_float, self.messages.positive_number)


def add_computer(console: Console, adapter: ComputerAdapter) -> Computer:
    prompts = console.messages.prompts
    cpu_model = console.ask_text(prompts.cpu_model)
    cpu_speed = console.ask_positive_float(prompts.cpu_speed)
    cpu_cores = console.ask_positive_int(prompts.cpu_cores)
    motherboard_model = console.ask_text(prompts.motherboard_model)
    motherboard_form_factor = console.ask_text(prompts.motherboard_form_factor)
    ram_size = console.ask_positive_int(prompts.ram_size)
    storage_gigabits = console.ask_positive_int(prompts.storage_gigabits)
    gpu_model = console.ask_text(prompts.gpu_model)
    gpu_memory_bits = console.ask_positive_int(prompts.gpu_memory_bits)

    return adapter.build_computer(
        cpu_model,
        cpu_speed,
        cpu_cores,
        motherboard_model,
        motherboard_form_factor,
        ram_size,
        storage_gigabits,
        gpu_model,
        gpu_memory_bits,
    )


def show_computers(console: Console, session: ComputerSession) -> None:
    if session.is_empty:
        console.say(console.messages.no_computers)
        return
    console.say(render_listing(console.messages.listing, session))


def run_menu(console: Console, adapter: ComputerAdapter, session: ComputerSession) -> int:
    """
    Loop over the menu until the user exits or input ends. Returns the exit code.
    """
    try:
        while True:
            choice = console.ask_text(console.messages.menu).strip()
            if choice == CHOICE_EXIT:
                break
            if choice == CHOICE_ADD:
                session.add(add_computer(console, adapter))
            elif choice == CHOICE_LIST:
                show_computers(console, session)
            else:
                console.say(console.messages.invalid_choice)
    except EOFError:
        logger.info("Input closed, leaving the menu")

    console.say(console.messages.farewell)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="computer-adapter",
        description=f"Interactive computer catalog (v{__version__}). Takes no arguments; use the menu.",
    )


def _load_catalog() -> Messages:
    try:
        return load_messages()
    except MessagesError as e:
        raise CLIError(f"Cannot start: {e}") from e


def _tolerate_undecodable_stdin() -> None:
    # Undecodable bytes become U+FFFD and fail numeric parsing like any other bad line.
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors="replace")


def main(argv: list[str] | None = None) -> int:
    _build_parser().parse_args(argv)
    setup_logging()
    _tolerate_undecodable_stdin()
    try:
        messages = _load_catalog()
    except CLIError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return run_menu(Console(messages), ComputerAdapter(), ComputerSession())


if __name__ == "__main__":
    raise SystemExit(main())
