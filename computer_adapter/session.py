"""
session.py

Responsibility: hold the computers built during one run, in insertion order.

Nothing here touches disk; the list disappears when the process exits.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from computer_adapter.models import Computer

logger = logging.getLogger(__name__)


class ComputerSession:
    def __init__(self) -> None:
        self._computers: list[Computer] = []

    def add(self, computer: Computer) -> None:
        self._computers.append(computer)
        logger.info("Added computer #%d to session", len(self._computers))

    @property
    def is_empty(self) -> bool:
        return not self._computers

    def __len__(self) -> int:
        return len(self._computers)

    def __iter__(self) -> Iterator[Computer]:
        return iter(tuple(self._computers))
